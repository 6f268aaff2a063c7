"""Serialize an XCConfig back to .xcconfig text."""

from __future__ import annotations

import logging
from pathlib import PurePath

from xcconfig.errors import XCConfigExistsError
from xcconfig.model import XCConfig
from xcconfig.storage.base import FileSystem
from xcconfig.storage.local import LocalFileSystem

logger = logging.getLogger(__name__)


def render_includes(config: XCConfig) -> str:
    lines = [f'#include "{entry.include}"\n' for entry in config.includes]
    return "".join(lines) + "\n"


def render_build_settings(config: XCConfig) -> str:
    lines = [f"{key} = {value}\n" for key, value in config.build_settings.items()]
    return "".join(lines) + "\n"


def render(config: XCConfig) -> str:
    """
    Return the text form of config: include lines, a blank line, setting lines,
    a trailing blank line. Comments and unmatched lines of the source are not
    preserved.
    """
    return render_includes(config) + render_build_settings(config)


def write(
    config: XCConfig,
    path: PurePath | str,
    overwrite: bool,
    fs: FileSystem | None = None,
) -> None:
    """
    Write config to path.

    If the file exists it is deleted first when overwrite is True; otherwise
    XCConfigExistsError is raised and nothing is written. I/O errors propagate.
    """
    fs = fs or LocalFileSystem()
    target = fs.make_path(path)
    content = render(config)
    if fs.exists(target):
        if not overwrite:
            raise XCConfigExistsError(target)
        fs.delete(target)
    fs.write(target, content)
    logger.debug("Wrote %s (%d include(s), %d setting(s))", target, len(config.includes), len(config.build_settings))
