"""Fixtures for command-level tests run against a copy of testing_grounds."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent.parent
TESTING_GROUNDS = REPO_ROOT / "testing_grounds"


@pytest.fixture
def fixture_project(tmp_path: Path) -> Path:
    """Copy testing_grounds into tmp_path."""
    if not TESTING_GROUNDS.is_dir():
        pytest.skip("testing_grounds not found")
    dest = tmp_path / "project"
    shutil.copytree(TESTING_GROUNDS, dest)
    return dest.resolve()


@pytest.fixture
def make_args() -> Callable[..., object]:
    """Build an Args object like argparse would, with global flag defaults filled in."""

    def _make(**kwargs: object) -> object:
        values: dict[str, object] = {"strict": None, "verbose": False, "quiet": True}
        values.update(kwargs)
        return type("Args", (), values)()

    return _make
