"""In-memory model of an .xcconfig file: includes, build settings, diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from xcconfig.storage.base import FileSystem


class XCConfigInclude(NamedTuple):
    """One resolved include: the path string as written and the loaded file."""

    include: str
    config: XCConfig


@dataclass(frozen=True)
class UnresolvedInclude:
    """An include directive whose target could not be loaded."""

    include: str  # Path string as written in the file
    path: PurePath  # Path the loader tried (relative includes joined to the parent dir)
    reason: str


@dataclass(eq=False)
class XCConfig:
    """
    One configuration file.

    includes are ordered as written; the order decides override priority when
    flattening. build_settings maps each key to its raw string value, quotes
    included. Loaded nodes remember their source path; constructed ones have
    path=None.
    """

    includes: list[XCConfigInclude] = field(default_factory=list)
    build_settings: dict[str, str] = field(default_factory=dict)
    path: Optional[PurePath] = None
    unresolved_includes: list[UnresolvedInclude] = field(default_factory=list)

    @classmethod
    def from_path(
        cls,
        path: PurePath | str,
        fs: FileSystem | None = None,
        *,
        strict: bool = False,
    ) -> XCConfig:
        """Load the file at path and, recursively, its includes. See loader.load."""
        from xcconfig.loader import load

        return load(path, fs, strict=strict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XCConfig):
            return NotImplemented
        if len(self.includes) != len(other.includes):
            return False
        for mine, theirs in zip(self.includes, other.includes):
            if mine.include != theirs.include or mine.config != theirs.config:
                return False
        return self.build_settings == other.build_settings

    def flattened_build_settings(self) -> dict[str, str]:
        """Return build settings with all includes resolved. See flatten.flatten."""
        from xcconfig.flatten import flatten

        return flatten(self)

    def write(self, path: PurePath | str, overwrite: bool, fs: FileSystem | None = None) -> None:
        """Serialize to path. See writer.write."""
        from xcconfig.writer import write

        write(self, path, overwrite, fs)

    def iter_unresolved(self) -> list[tuple[Optional[PurePath], UnresolvedInclude]]:
        """Return (source path, unresolved include) for this file and every loaded include."""
        found = [(self.path, u) for u in self.unresolved_includes]
        for entry in self.includes:
            found.extend(entry.config.iter_unresolved())
        return found


def construct(
    includes: list[XCConfigInclude] | list[tuple[str, XCConfig]] | None = None,
    settings: dict[str, str] | None = None,
) -> XCConfig:
    """Build a node directly from includes and settings. Never fails."""
    return XCConfig(
        includes=[XCConfigInclude(str(inc), cfg) for inc, cfg in (includes or [])],
        build_settings=dict(settings or {}),
    )


def equals(a: XCConfig, b: XCConfig) -> bool:
    """Structural equality: includes pairwise (ordered), settings as a set of pairs."""
    return a == b
