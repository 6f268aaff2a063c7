"""Local-disk filesystem backend (pathlib, UTF-8)."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from xcconfig.storage.base import FileSystemBase


class LocalFileSystem(FileSystemBase):
    """Reads and writes .xcconfig files on the local disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def make_path(self, path: PurePath | str) -> Path:
        return Path(path)

    def exists(self, path: PurePath) -> bool:
        return self.make_path(path).is_file()

    def read(self, path: PurePath) -> str:
        return self.make_path(path).read_text(encoding=self.encoding)

    def write(self, path: PurePath, text: str) -> None:
        # "x" mode fails if the file was not deleted first
        with open(self.make_path(path), "x", encoding=self.encoding, newline="\n") as f:
            f.write(text)

    def delete(self, path: PurePath) -> None:
        self.make_path(path).unlink()

    def canonical(self, path: PurePath) -> str:
        # Normalise ".." and symlinks so a/../b and b are the same file
        return Path(os.path.realpath(self.make_path(path))).as_posix()
