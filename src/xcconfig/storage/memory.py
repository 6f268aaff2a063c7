"""In-memory filesystem backend keyed by POSIX path."""

from __future__ import annotations

import posixpath
from pathlib import PurePath, PurePosixPath

from xcconfig.storage.base import FileSystemBase


class MemoryFileSystem(FileSystemBase):
    """
    Dict-backed filesystem. Useful for tests and for editing configurations
    without touching the disk. Paths are normalised (".." collapsed) before use.
    """

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = {}
        for path, text in (files or {}).items():
            self.files[self._key(path)] = text

    def make_path(self, path: PurePath | str) -> PurePosixPath:
        if isinstance(path, PurePath):
            return PurePosixPath(path.as_posix())
        return PurePosixPath(path)

    def _key(self, path: PurePath | str) -> str:
        return posixpath.normpath(self.make_path(path).as_posix())

    def exists(self, path: PurePath) -> bool:
        return self._key(path) in self.files

    def read(self, path: PurePath) -> str:
        key = self._key(path)
        if key not in self.files:
            raise FileNotFoundError(f"No such file: {key}")
        return self.files[key]

    def write(self, path: PurePath, text: str) -> None:
        key = self._key(path)
        if key in self.files:
            raise FileExistsError(f"File exists: {key}")
        self.files[key] = text

    def delete(self, path: PurePath) -> None:
        key = self._key(path)
        if key not in self.files:
            raise FileNotFoundError(f"No such file: {key}")
        del self.files[key]

    def canonical(self, path: PurePath) -> str:
        return self._key(path)
