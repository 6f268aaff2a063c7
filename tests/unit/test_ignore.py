"""Unit tests for ignore patterns and .xcconfig file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from xcconfig.utils.ignore import (
    build_spec,
    find_xcconfig_files,
    is_ignored,
    load_patterns,
    parse_ignore_file,
)


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Small project tree with configs, a Pods dir and a build dir."""
    for rel in (
        "Configs/App.xcconfig",
        "Configs/Shared/Warnings.XCCONFIG",
        "Configs/notes.txt",
        "Pods/Target/Pods.release.xcconfig",
        "build/Generated.xcconfig",
    ):
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("K = V\n")
    return tmp_path


def test_parse_ignore_file_missing_returns_empty(tmp_path: Path) -> None:
    assert parse_ignore_file(tmp_path / "nonexistent") == []


def test_parse_ignore_file_strips_comments_and_blanks(tmp_path: Path) -> None:
    f = tmp_path / ".xcconfigignore"
    f.write_text("# comment\n\nPods/\n  \nbuild/\n")
    assert parse_ignore_file(f) == ["Pods/", "build/"]


def test_is_ignored_directory_pattern(tmp_path: Path) -> None:
    spec = build_spec(["Pods/"])
    assert is_ignored(tmp_path / "Pods", tmp_path, spec) is True
    assert is_ignored(tmp_path / "Pods" / "a.xcconfig", tmp_path, spec) is True
    assert is_ignored(tmp_path / "Configs" / "a.xcconfig", tmp_path, spec) is False


def test_is_ignored_outside_root(tmp_path: Path) -> None:
    spec = build_spec(["*"])
    assert is_ignored(tmp_path.parent / "other", tmp_path, spec) is False


def test_load_patterns_sources(tmp_path: Path) -> None:
    (tmp_path / ".xcconfigignore").write_text("Vendor/\n")
    (tmp_path / ".gitignore").write_text("build/\n")
    config = {"ignore": {"use_gitignore": True, "builtin_patterns": [".git/"], "additional_patterns": ["tmp/"]}}
    assert load_patterns(tmp_path, config) == [
        (".git/", "builtin"),
        ("Vendor/", "file"),
        ("build/", "gitignore"),
        ("tmp/", "additional"),
    ]


def test_load_patterns_skips_gitignore_when_disabled(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("x\n")
    config = {"ignore": {"use_gitignore": False}}
    assert load_patterns(tmp_path, config) == []


def test_find_xcconfig_files_honours_ignores(root: Path) -> None:
    spec = build_spec(["Pods/", "build/"])
    found = [p.relative_to(root.resolve()).as_posix() for p in find_xcconfig_files(root, spec)]
    assert found == ["Configs/App.xcconfig", "Configs/Shared/Warnings.XCCONFIG"]


def test_find_xcconfig_files_without_ignores(root: Path) -> None:
    found = find_xcconfig_files(root, build_spec([]))
    assert len(found) == 4


def test_find_xcconfig_files_single_file(root: Path) -> None:
    target = root / "Configs" / "App.xcconfig"
    assert find_xcconfig_files(target, build_spec([])) == [target.resolve()]
    assert find_xcconfig_files(root / "Configs" / "notes.txt", build_spec([])) == []
