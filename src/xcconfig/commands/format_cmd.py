"""Rewrite an .xcconfig file in canonical form."""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from xcconfig.commands import command_config, load_or_exit, strict_mode
from xcconfig.errors import XCConfigExistsError
from xcconfig.writer import write

logger = logging.getLogger(__name__)


def run(args: Namespace) -> None:
    """Run the format command: load PATH and write it back (in place or to --output)."""
    path: Path = args.path
    output: Path | None = getattr(args, "output", None)
    force = getattr(args, "force", False)
    drop_unresolved = getattr(args, "drop_unresolved", False)

    config = load_or_exit(path, strict_mode(args, command_config(path)))
    if config.unresolved_includes and not drop_unresolved:
        names = ", ".join(f'"{u.include}"' for u in config.unresolved_includes)
        print(
            f"Error: {path.as_posix()} has unresolved includes ({names}); "
            "rewriting would drop them. Pass --drop-unresolved to proceed.",
            file=sys.stderr,
        )
        sys.exit(1)

    target = output.resolve() if output is not None else path
    # Rewriting the input file itself never needs --force
    overwrite = force or target == path
    try:
        write(config, target, overwrite)
    except XCConfigExistsError as e:
        print(f"Error: {e}. Use --force to replace it.", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: cannot write {target.as_posix()}: {e}", file=sys.stderr)
        sys.exit(1)
    logger.info("Formatted %s -> %s", path, target)
    print(f"Wrote {target.as_posix()}")
