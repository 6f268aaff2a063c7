"""Resolve an XCConfig and its include tree into one settings mapping."""

from __future__ import annotations

from typing import Iterable, Iterator

from xcconfig.model import XCConfig, XCConfigInclude


def layers(includes: Iterable[XCConfigInclude]) -> Iterator[XCConfig]:
    """
    Yield one single-file node per included file, highest precedence first.

    Order is depth-first: the first include, then whatever it includes
    (recursively, in the same order), then the next include. Each yielded node
    holds a copy of that file's own settings and no includes.
    """
    for entry in includes:
        yield XCConfig(includes=[], build_settings=dict(entry.config.build_settings))
        yield from layers(entry.config.includes)


def flatten(config: XCConfig) -> dict[str, str]:
    """
    Return the effective build settings of config.

    The file's own settings win over anything inherited; among includes an
    earlier include (with everything it includes) wins over a later one. A
    setting from a layer is taken only if no higher-precedence source set the
    key. config is not modified.
    """
    resolved = dict(config.build_settings)
    for layer in layers(config.includes):
        for key, value in layer.build_settings.items():
            if key not in resolved:
                resolved[key] = value
    return resolved
