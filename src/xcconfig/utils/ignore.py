"""Ignore pattern support for directory scans: .xcconfigignore, .gitignore, builtin and additional patterns."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from pathspec import GitIgnoreSpec, PathSpec

XCCONFIGIGNORE = ".xcconfigignore"
GITIGNORE = ".gitignore"


def parse_ignore_file(path: Path) -> list[str]:
    """Pattern lines of a gitignore-style file; blank lines and # comments dropped. Missing file gives []."""
    if not path.is_file():
        return []
    stripped = (line.strip() for line in path.read_text(encoding="utf-8").splitlines())
    return [s for s in stripped if s and not s.startswith("#")]


def load_patterns(root: Path, config: dict[str, Any]) -> list[tuple[str, str]]:
    """
    Ignore patterns for a scan rooted at root, as (pattern, source) pairs.

    Order is builtin (config), file (root/.xcconfigignore), gitignore
    (root/.gitignore, only when ignore.use_gitignore is true), then additional
    (config). Later patterns take precedence under gitignore negation rules.
    """
    root = Path(root).resolve()
    ignore_cfg = config.get("ignore") or {}
    sources: list[tuple[str, list[str]]] = [
        ("builtin", list(ignore_cfg.get("builtin_patterns") or [])),
        ("file", parse_ignore_file(root / XCCONFIGIGNORE)),
        ("gitignore", parse_ignore_file(root / GITIGNORE) if ignore_cfg.get("use_gitignore", True) else []),
        ("additional", list(ignore_cfg.get("additional_patterns") or [])),
    ]
    return [(pattern, source) for source, patterns in sources for pattern in patterns]


def build_spec(patterns: Iterable[str]) -> PathSpec:
    """Compile gitignore-style patterns."""
    return GitIgnoreSpec.from_lines(patterns)


def is_ignored(path: Path | str, root: Path | str, spec: PathSpec) -> bool:
    """True if path, taken relative to root, matches spec. Paths outside root never match."""
    try:
        rel = Path(path).resolve().relative_to(Path(root).resolve()).as_posix()
    except ValueError:
        return False
    # "Pods/" only matches with the trailing slash
    return spec.match_file(rel) or spec.match_file(rel + "/")


def find_xcconfig_files(root: Path, spec: PathSpec, suffix: str = ".xcconfig") -> list[Path]:
    """
    Return files under root whose name ends with suffix (any case), skipping
    ignored files and directories. Sorted by path. root may itself be a file.
    """
    root = root.resolve()
    if root.is_file():
        return [root] if root.name.lower().endswith(suffix) else []

    found: list[Path] = []

    def recurse(current: Path) -> None:
        try:
            entries = list(current.iterdir())
        except OSError:
            return
        for entry in sorted(entries, key=lambda p: p.name):
            if is_ignored(entry, root, spec):
                continue
            if entry.is_dir():
                recurse(entry)
            elif entry.name.lower().endswith(suffix):
                found.append(entry)

    if root.is_dir():
        recurse(root)
    return found
