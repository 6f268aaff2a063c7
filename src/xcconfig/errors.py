"""Exceptions raised while loading, resolving and writing .xcconfig files."""

from __future__ import annotations

from pathlib import PurePath
from typing import Sequence


class XCConfigError(Exception):
    """Base class for all xcconfig errors."""


class XCConfigNotFoundError(XCConfigError):
    """Raised when the configuration file to load does not exist."""

    def __init__(self, path: PurePath | str) -> None:
        self.path = path
        super().__init__(f".xcconfig file not found at {path}")


class XCConfigExistsError(XCConfigError):
    """Raised when writing onto an existing file without overwrite."""

    def __init__(self, path: PurePath | str) -> None:
        self.path = path
        super().__init__(f"Refusing to overwrite existing file at {path}")


class XCConfigCycleError(XCConfigError):
    """Raised when an include chain leads back to a file already being loaded."""

    def __init__(self, chain: Sequence[PurePath | str]) -> None:
        self.chain = list(chain)
        rendered = " -> ".join(str(p) for p in self.chain)
        super().__init__(f"Include cycle detected: {rendered}")
