"""Filesystem interface consumed by the loader and writer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem backends (local disk, in-memory)."""

    def exists(self, path: PurePath) -> bool:
        """Return True if a file exists at path."""
        ...

    def read(self, path: PurePath) -> str:
        """Return the full text at path. Raises OSError if unreadable."""
        ...

    def write(self, path: PurePath, text: str) -> None:
        """Write text to path. Raises FileExistsError if the file exists."""
        ...

    def delete(self, path: PurePath) -> None:
        """Remove the file at path."""
        ...

    def make_path(self, path: PurePath | str) -> PurePath:
        """Convert a string or path into this backend's path type."""
        ...

    def is_relative(self, path: PurePath | str) -> bool:
        """Return True if path is relative."""
        ...

    def parent(self, path: PurePath) -> PurePath:
        """Return the directory containing path."""
        ...

    def join(self, base: PurePath, other: PurePath | str) -> PurePath:
        """Join other onto base."""
        ...

    def canonical(self, path: PurePath) -> str:
        """Return a stable identity for path, used for cycle detection."""
        ...


class FileSystemBase(ABC):
    """Abstract base class for filesystem implementations.

    Subclasses provide the I/O; path arithmetic is shared.
    """

    @abstractmethod
    def exists(self, path: PurePath) -> bool:
        """Return True if a file exists at path."""
        ...

    @abstractmethod
    def read(self, path: PurePath) -> str:
        """Return the full text at path. Raises OSError if unreadable."""
        ...

    @abstractmethod
    def write(self, path: PurePath, text: str) -> None:
        """Write text to path. Raises FileExistsError if the file exists."""
        ...

    @abstractmethod
    def delete(self, path: PurePath) -> None:
        """Remove the file at path."""
        ...

    @abstractmethod
    def make_path(self, path: PurePath | str) -> PurePath:
        """Convert a string or path into this backend's path type."""
        ...

    def is_relative(self, path: PurePath | str) -> bool:
        return not self.make_path(path).is_absolute()

    def parent(self, path: PurePath) -> PurePath:
        return self.make_path(path).parent

    def join(self, base: PurePath, other: PurePath | str) -> PurePath:
        return self.make_path(base) / self.make_path(other)

    def canonical(self, path: PurePath) -> str:
        return self.make_path(path).as_posix()
