"""Shared utilities: ignore patterns and file discovery."""

from xcconfig.utils.ignore import (
    build_spec,
    find_xcconfig_files,
    is_ignored,
    load_patterns,
    parse_ignore_file,
)

__all__ = [
    "build_spec",
    "find_xcconfig_files",
    "is_ignored",
    "load_patterns",
    "parse_ignore_file",
]
