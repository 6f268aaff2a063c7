"""Shared fixtures: keep the user's global config out of every test."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ~/.xcconfig-tools at an empty temporary directory."""
    global_dir = tmp_path_factory.mktemp("global-config")
    monkeypatch.setattr("xcconfig.config._global_config_dir", lambda: global_dir)
    return global_dir
