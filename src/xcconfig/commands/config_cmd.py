"""Show or edit tool configuration (CLI command)."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from xcconfig.config import (
    config_layers,
    find_project_root,
    global_config_path,
    load_config,
    load_config_file,
    project_config_path,
    save_config,
)


def _get_nested_key(data: dict[str, Any], key_path: str) -> Any:
    """Return value at dotted key (e.g. 'ignore.additional_patterns'); None if missing."""
    current: Any = data
    for part in key_path.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def _set_nested_key(data: dict[str, Any], key_path: str, value: Any) -> None:
    """Set a dotted key (e.g. 'load.strict'), creating intermediate dicts."""
    parts = key_path.split(".")
    current: dict[str, Any] = data
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value


def _parse_set_value(value_str: str) -> Any:
    """Parse the VALUE of KEY=VALUE as JSON (number, bool, null, quoted string), else keep it as a string."""
    value_str = value_str.strip()
    try:
        return json.loads(value_str)
    except json.JSONDecodeError:
        return value_str


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def run(args: Namespace) -> None:
    """Run the config command: show merged settings or set/add/remove values (global or project-local)."""
    show = getattr(args, "show", False)
    set_key = getattr(args, "set_key", None)
    add_key = getattr(args, "add_key", None)
    remove_key = getattr(args, "remove_key", None)
    use_global = getattr(args, "global_", False)

    if not (show or set_key or add_key or remove_key):
        _fail("specify --show, --set KEY=VALUE, --add KEY VALUE, or --remove KEY VALUE.")

    project_root = find_project_root(Path(getattr(args, "path", Path("."))).resolve())
    if use_global or project_root is None:
        target_path, label = global_config_path(), "global"
    else:
        target_path, label = project_config_path(project_root), f"project ({project_root.as_posix()})"

    def update(key_str: str, change) -> Any:
        existing = load_config_file(target_path) or {}
        new_value = change(_get_nested_key(existing, key_str))
        _set_nested_key(existing, key_str, new_value)
        save_config(target_path, existing)
        return new_value

    if set_key:
        key_str, sep, value_str = set_key.partition("=")
        key_str = key_str.strip()
        if not sep or not key_str:
            _fail("--set requires KEY=VALUE (e.g. load.strict=true).")
        value = update(key_str, lambda _old: _parse_set_value(value_str))
        print(f"Set {key_str} = {json.dumps(value)} in {label} config.")

    if add_key:
        key_str, value_str = add_key[0].strip(), add_key[1].strip()
        if not key_str:
            _fail("empty key in --add KEY VALUE.")
        update(key_str, lambda old: (old if isinstance(old, list) else []) + [value_str])
        print(f"Added {json.dumps(value_str)} to {key_str} in {label} config.")

    if remove_key:
        key_str, value_str = remove_key[0].strip(), remove_key[1].strip()
        if not key_str:
            _fail("empty key in --remove KEY VALUE.")
        update(key_str, lambda old: [x for x in old if x != value_str] if isinstance(old, list) else [])
        print(f"Removed {json.dumps(value_str)} from {key_str} in {label} config.")

    if show:
        config = load_config(project_root)
        source_note = " + ".join(["defaults", *(label for label, _ in config_layers(project_root))])
        print(f"# Config: {source_note}")
        print(json.dumps(config, indent=2))
