"""Integration tests: xcconfig format (canonical rewrite)."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import patch

import pytest

from xcconfig import load
from xcconfig.commands.format_cmd import run as format_run


@pytest.fixture
def format_cmd(make_args):
    """Run format on a path and return what it printed."""

    def _run(path: Path, **kwargs: object) -> str:
        options = {"output": None, "force": False, "drop_unresolved": False}
        options.update(kwargs)
        buf = io.StringIO()
        with patch("xcconfig.commands.format_cmd.sys.stdout", buf):
            format_run(make_args(path=path, **options))
        return buf.getvalue()

    return _run


def test_format_in_place(fixture_project: Path, format_cmd) -> None:
    path = fixture_project / "Configs" / "Base.xcconfig"
    before = load(path)
    out = format_cmd(path)
    assert out.strip() == f"Wrote {path.as_posix()}"
    text = path.read_text()
    assert text.startswith('#include "Shared/Warnings.xcconfig"\n\n')
    assert "//" not in text
    assert load(path) == before


def test_format_to_new_output(fixture_project: Path, format_cmd) -> None:
    src = fixture_project / "Configs" / "Debug.xcconfig"
    dest = fixture_project / "Configs" / "Debug.formatted.xcconfig"
    format_cmd(src, output=dest)
    assert load(dest) == load(src)


def test_format_existing_output_needs_force(
    fixture_project: Path, format_cmd, capsys: pytest.CaptureFixture[str]
) -> None:
    src = fixture_project / "Configs" / "Debug.xcconfig"
    dest = fixture_project / "Configs" / "Signing.xcconfig"
    with pytest.raises(SystemExit) as exc:
        format_cmd(src, output=dest)
    assert exc.value.code == 1
    assert "--force" in capsys.readouterr().err
    assert "DEVELOPMENT_TEAM" in dest.read_text()

    format_cmd(src, output=dest, force=True)
    assert "DEVELOPMENT_TEAM" not in dest.read_text()


def test_format_refuses_to_drop_unresolved_include(
    fixture_project: Path, format_cmd, capsys: pytest.CaptureFixture[str]
) -> None:
    path = fixture_project / "Configs" / "Release.xcconfig"
    before = path.read_text()
    with pytest.raises(SystemExit):
        format_cmd(path)
    assert "Missing.xcconfig" in capsys.readouterr().err
    assert path.read_text() == before

    format_cmd(path, drop_unresolved=True)
    assert "Missing.xcconfig" not in path.read_text()
    assert '#include "Base.xcconfig"' in path.read_text()
