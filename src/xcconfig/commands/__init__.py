"""CLI subcommands. Each module exposes run(args)."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from xcconfig.config import find_project_root, load_config
from xcconfig.errors import XCConfigError
from xcconfig.loader import load
from xcconfig.model import XCConfig


def command_config(path: Path) -> dict[str, Any]:
    """Merged tool config for the project containing path (global only if none)."""
    return load_config(find_project_root(path))


def strict_mode(args: Namespace, config: dict[str, Any]) -> bool:
    """--strict wins; otherwise load.strict from config."""
    flag = getattr(args, "strict", None)
    if flag is None:
        return bool((config.get("load") or {}).get("strict", False))
    return bool(flag)


def load_or_exit(path: Path, strict: bool) -> XCConfig:
    """Load path, printing the error and exiting with status 1 on failure."""
    try:
        return load(path, strict=strict)
    except (XCConfigError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
