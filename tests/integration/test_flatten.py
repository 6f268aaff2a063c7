"""Integration tests: xcconfig flatten (json, csv, xcconfig output)."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from xcconfig.commands.flatten import run as flatten_run
from xcconfig.config import project_config_path, save_config

DEBUG_EXPECTED = {
    "PRODUCT_NAME": '"App"',
    "SWIFT_ACTIVE_COMPILATION_CONDITIONS": "DEBUG",
    "GCC_PREPROCESSOR_DEFINITIONS": "DEBUG=1 $(inherited)",
    "MARKETING_VERSION": "1.0",
    "SWIFT_VERSION": "5.0",
    "OTHER_LDFLAGS": "-ObjC",
    "GCC_WARN_UNUSED_VARIABLE": "YES",
    "CLANG_WARN_DOCUMENTATION_COMMENTS": "YES",
    "CODE_SIGN_STYLE": "Automatic",
    "DEVELOPMENT_TEAM": "ABCDE12345",
}


@pytest.fixture
def flatten_cmd(make_args):
    """Run flatten on a path and return what it printed."""

    def _run(path: Path, **kwargs: object) -> str:
        buf = io.StringIO()
        with patch("xcconfig.commands.flatten.sys.stdout", buf):
            flatten_run(make_args(path=path, **kwargs))
        return buf.getvalue()

    return _run


def test_flatten_json(fixture_project: Path, flatten_cmd) -> None:
    out = flatten_cmd(fixture_project / "Configs" / "Debug.xcconfig", format="json")
    assert json.loads(out) == DEBUG_EXPECTED


def test_flatten_csv(fixture_project: Path, flatten_cmd) -> None:
    out = flatten_cmd(fixture_project / "Configs" / "Debug.xcconfig", format="csv")
    rows = list(csv.DictReader(io.StringIO(out)))
    assert {r["key"]: r["value"] for r in rows} == DEBUG_EXPECTED
    assert [r["key"] for r in rows] == sorted(DEBUG_EXPECTED)


def test_flatten_xcconfig_output_parses_back(fixture_project: Path, tmp_path: Path, flatten_cmd) -> None:
    out = flatten_cmd(fixture_project / "Configs" / "Debug.xcconfig", format="xcconfig")
    assert out.startswith("\n")
    assert "#include" not in out
    flat_file = tmp_path / "Flat.xcconfig"
    flat_file.write_text(out)
    assert json.loads(flatten_cmd(flat_file, format="json")) == DEBUG_EXPECTED


def test_flatten_skips_missing_include(fixture_project: Path, flatten_cmd) -> None:
    out = json.loads(flatten_cmd(fixture_project / "Configs" / "Release.xcconfig", format="json"))
    assert out["SWIFT_OPTIMIZATION_LEVEL"] == "-O"
    assert out["PRODUCT_NAME"] == '"Base"'


def test_flatten_strict_flag_fails_on_missing_include(
    fixture_project: Path, flatten_cmd, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc:
        flatten_cmd(fixture_project / "Configs" / "Release.xcconfig", format="json", strict=True)
    assert exc.value.code == 1
    assert "Missing.xcconfig" in capsys.readouterr().err


def test_flatten_format_and_strict_from_project_config(fixture_project: Path, flatten_cmd) -> None:
    save_config(project_config_path(fixture_project), {"output": {"format": "csv"}, "load": {"strict": True}})
    out = flatten_cmd(fixture_project / "Configs" / "Debug.xcconfig", format=None)
    assert out.startswith("key,value\n")
    with pytest.raises(SystemExit):
        flatten_cmd(fixture_project / "Configs" / "Release.xcconfig", format=None)
