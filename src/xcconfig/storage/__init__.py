"""Filesystem abstraction layer (local disk, in-memory, interface)."""

from xcconfig.storage.base import FileSystem, FileSystemBase
from xcconfig.storage.local import LocalFileSystem
from xcconfig.storage.memory import MemoryFileSystem

__all__ = [
    "FileSystem",
    "FileSystemBase",
    "LocalFileSystem",
    "MemoryFileSystem",
]
