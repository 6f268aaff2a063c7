"""Load an .xcconfig file and, recursively, the files it includes."""

from __future__ import annotations

import logging
from pathlib import PurePath

from xcconfig.errors import XCConfigCycleError, XCConfigError, XCConfigNotFoundError
from xcconfig.model import UnresolvedInclude, XCConfig, XCConfigInclude
from xcconfig.parsing import parse_text
from xcconfig.storage.base import FileSystem
from xcconfig.storage.local import LocalFileSystem

logger = logging.getLogger(__name__)

# Failures that make a nested include unresolvable rather than fatal
INCLUDE_ERRORS = (XCConfigError, OSError, UnicodeDecodeError)


def resolve_include_path(fs: FileSystem, including_file: PurePath, include: str) -> PurePath:
    """
    Return the path an include refers to.

    Relative includes are resolved against the directory of the including
    file, not the working directory. Absolute includes are used as is.
    """
    if fs.is_relative(include):
        return fs.join(fs.parent(including_file), include)
    return fs.make_path(include)


def load(
    path: PurePath | str,
    fs: FileSystem | None = None,
    *,
    strict: bool = False,
) -> XCConfig:
    """
    Load the .xcconfig file at path into an XCConfig, loading every include.

    Raises XCConfigNotFoundError if path does not exist; read errors on path
    propagate. Includes that fail to load (missing, unreadable, cyclic) are left
    out of `includes` and recorded in `unresolved_includes`, unless strict is
    True, in which case the first failure propagates.

    Each include is read and parsed independently: the same file included from
    two places is loaded twice.
    """
    fs = fs or LocalFileSystem()
    return _load(fs.make_path(path), fs, strict, ())


def _load(path: PurePath, fs: FileSystem, strict: bool, stack: tuple[str, ...]) -> XCConfig:
    key = fs.canonical(path)
    if key in stack:
        raise XCConfigCycleError([*stack, key])
    if not fs.exists(path):
        raise XCConfigNotFoundError(path)

    parsed = parse_text(fs.read(path))
    logger.debug(
        "Parsed %s: %d include(s), %d setting(s)",
        path,
        len(parsed.includes),
        len(parsed.build_settings),
    )
    config = XCConfig(build_settings=parsed.build_settings, path=path)

    for include in parsed.includes:
        target = resolve_include_path(fs, path, include)
        try:
            child = _load(target, fs, strict, (*stack, key))
        except INCLUDE_ERRORS as e:
            if strict:
                raise
            logger.warning("Skipping include %r in %s: %s", include, path, e)
            config.unresolved_includes.append(UnresolvedInclude(include, target, str(e)))
            continue
        config.includes.append(XCConfigInclude(include, child))
    return config
