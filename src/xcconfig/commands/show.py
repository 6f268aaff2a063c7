"""Show a file's include tree and its own build settings."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from xcconfig.commands import command_config, load_or_exit, strict_mode
from xcconfig.model import XCConfig


def _tree_lines(config: XCConfig, depth: int = 1) -> list[str]:
    indent = "  " * depth
    lines: list[str] = []
    for entry in config.includes:
        lines.append(f'{indent}#include "{entry.include}" -> {entry.config.path}')
        lines.extend(_tree_lines(entry.config, depth + 1))
    for missing in config.unresolved_includes:
        lines.append(f'{indent}#include "{missing.include}" (unresolved: {missing.reason})')
    return lines


def run(args: Namespace) -> None:
    """Run the show command."""
    path: Path = args.path
    config = load_or_exit(path, strict_mode(args, command_config(path)))

    print(path.as_posix())
    for line in _tree_lines(config):
        print(line)
    print()
    print(f"Settings ({len(config.build_settings)}):")
    for key in sorted(config.build_settings):
        print(f"  {key} = {config.build_settings[key]}")
