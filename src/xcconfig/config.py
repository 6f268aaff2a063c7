"""Tool configuration: constants, defaults, and config loading (global + project overrides)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Directory name inside a project for xcconfig-tools settings
TOOL_DIR = ".xcconfig-tools"
CONFIG_FILENAME = "config.json"

XCCONFIG_SUFFIX = ".xcconfig"
OUTPUT_FORMATS = ("json", "csv", "xcconfig")


# Global config location
def _global_config_dir() -> Path:
    return Path.home() / TOOL_DIR


def global_config_path() -> Path:
    """Path to global config file (~/.xcconfig-tools/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Built-in defaults, lowest precedence layer."""
    return {
        "logging": {
            "level": "WARNING",
            "file": None,
        },
        "load": {
            "strict": False,
        },
        "output": {
            "format": "json",
        },
        "ignore": {
            "use_gitignore": True,
            "builtin_patterns": [".git/", f"{TOOL_DIR}/", "Pods/", "DerivedData/", "build/"],
            "additional_patterns": [],
        },
    }


def load_config_file(path: Path) -> dict[str, Any] | None:
    """Load JSON from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def config_layers(project_root: Path | None = None) -> list[tuple[str, Path]]:
    """(label, path) of each config file that may override the defaults, lowest precedence first."""
    layers = [("global", global_config_path())]
    if project_root is not None:
        root = project_root.resolve()
        layers.append((f"project ({root.as_posix()})", project_config_path(root)))
    return layers


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/.xcconfig-tools/config.json)."""
    return project_root / TOOL_DIR / CONFIG_FILENAME


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Merged configuration: defaults, then each layer from config_layers().

    Missing or unreadable layer files are skipped. Nested objects merge key by
    key, so a project file can override load.strict alone.
    """
    merged = default_config()
    for _, path in config_layers(project_root):
        data = load_config_file(path)
        if data is not None:
            _deep_merge(merged, data)
    return merged


def save_config(path: Path, data: dict[str, Any]) -> None:
    """Write config data as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def find_project_root(path: Path) -> Path | None:
    """Nearest directory at or above path that holds a .xcconfig-tools directory, or None."""
    start = path.resolve()
    if start.is_file():
        start = start.parent
    for candidate in (start, *start.parents):
        if (candidate / TOOL_DIR).is_dir():
            return candidate
    return None
