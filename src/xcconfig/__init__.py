"""Parse, resolve and write hierarchical .xcconfig build configuration files."""

from xcconfig.errors import (
    XCConfigCycleError,
    XCConfigError,
    XCConfigExistsError,
    XCConfigNotFoundError,
)
from xcconfig.flatten import flatten
from xcconfig.loader import load
from xcconfig.model import UnresolvedInclude, XCConfig, XCConfigInclude, construct, equals
from xcconfig.writer import render, write

__version__ = "0.1.0"

__all__ = [
    "UnresolvedInclude",
    "XCConfig",
    "XCConfigCycleError",
    "XCConfigError",
    "XCConfigExistsError",
    "XCConfigInclude",
    "XCConfigNotFoundError",
    "__version__",
    "construct",
    "equals",
    "flatten",
    "load",
    "render",
    "write",
]
