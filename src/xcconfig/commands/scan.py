"""Find .xcconfig files under a directory and report include health."""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from xcconfig.commands import strict_mode
from xcconfig.config import XCCONFIG_SUFFIX, find_project_root, load_config
from xcconfig.errors import XCConfigError
from xcconfig.flatten import flatten
from xcconfig.loader import load
from xcconfig.utils.ignore import build_spec, find_xcconfig_files, load_patterns

logger = logging.getLogger(__name__)


def _display(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def run(args: Namespace) -> None:
    """Run the scan command."""
    path: Path = args.path.resolve()
    if not path.exists():
        print(f"Error: {path.as_posix()} does not exist.", file=sys.stderr)
        sys.exit(1)

    project_root = find_project_root(path)
    config = load_config(project_root)
    ignore_root = project_root or (path if path.is_dir() else path.parent)
    patterns = [p for p, _ in load_patterns(ignore_root, config)]
    spec = build_spec(patterns)
    strict = strict_mode(args, config)

    files = find_xcconfig_files(path, spec, XCCONFIG_SUFFIX)
    if not files:
        logger.info("No %s files under %s", XCCONFIG_SUFFIX, path)
        print("No .xcconfig files found.")
        return

    base = path if path.is_dir() else path.parent
    problems = 0
    for file_path in files:
        label = _display(file_path, base)
        try:
            cfg = load(file_path, strict=strict)
        except (XCConfigError, OSError, UnicodeDecodeError) as e:
            problems += 1
            print(f"{label}: error: {e}")
            continue
        print(
            f"{label}: {len(cfg.includes)} include(s), "
            f"{len(cfg.build_settings)} setting(s), {len(flatten(cfg))} effective"
        )
        for source, missing in cfg.iter_unresolved():
            problems += 1
            where = "" if source == cfg.path else f" (in {_display(Path(source), base)})"
            print(f'  unresolved #include "{missing.include}"{where}: {missing.reason}')

    print()
    print(f"{len(files)} file(s) scanned, {problems} problem(s).")
    if getattr(args, "check", False) and problems:
        sys.exit(1)
