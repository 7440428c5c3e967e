from __future__ import annotations

import runpy
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from colprint.cli import main


def _write(tmp_path: Path, name: str, text: str) -> str:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_version_flag_exits_zero() -> None:
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "colprint" in result.output.lower()


def test_help_lists_options() -> None:
    result = CliRunner().invoke(main, ["-h"])
    assert result.exit_code == 0
    assert "--sep" in result.output
    assert "--width" in result.output


def test_files_side_by_side(tmp_path: Path) -> None:
    a = _write(tmp_path, "a.txt", "Alice\n")
    b = _write(tmp_path, "b.txt", "30\n")
    result = CliRunner().invoke(main, ["--sep", " | ", a, b])
    assert result.exit_code == 0
    assert result.output == "Alice | 30\n"


def test_default_separator_is_two_spaces(tmp_path: Path) -> None:
    a = _write(tmp_path, "a.txt", "one\nthree")
    b = _write(tmp_path, "b.txt", "x")
    result = CliRunner().invoke(main, [a, b])
    assert result.exit_code == 0
    assert result.output == "one    x\nthree   \n"


def test_separator_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLPRINT_SEP", "|")
    a = _write(tmp_path, "a.txt", "a")
    b = _write(tmp_path, "b.txt", "b")
    result = CliRunner().invoke(main, [a, b])
    assert result.output == "a|b\n"


def test_stdin_column(tmp_path: Path) -> None:
    b = _write(tmp_path, "b.txt", "right")
    result = CliRunner().invoke(main, ["-s", ":", "-", b], input="l1\nline2\n")
    assert result.exit_code == 0
    assert result.output == "l1   :right\nline2:     \n"


def test_trim_last(tmp_path: Path) -> None:
    a = _write(tmp_path, "a.txt", "a")
    b = _write(tmp_path, "b.txt", "x\nlonger")
    result = CliRunner().invoke(main, ["-s", "|", "--trim-last", a, b])
    assert result.output == "a|x\n |longer\n"


def test_cells_width_mode(tmp_path: Path) -> None:
    a = _write(tmp_path, "a.txt", "日本\nab")
    b = _write(tmp_path, "b.txt", "x")
    result = CliRunner().invoke(main, ["-s", " ", "--width", "cells", "--trim-last", a, b])
    assert result.exit_code == 0
    assert result.output == "日本 x\nab   \n"


def test_min_width(tmp_path: Path) -> None:
    a = _write(tmp_path, "a.txt", "a")
    b = _write(tmp_path, "b.txt", "b")
    result = CliRunner().invoke(main, ["-s", "|", "--min-width", "4", a, b])
    assert result.output == "a   |b\n"


def test_too_many_min_widths(tmp_path: Path) -> None:
    a = _write(tmp_path, "a.txt", "a")
    result = CliRunner().invoke(main, ["--min-width", "1", "--min-width", "2", a])
    assert result.exit_code == 1
    assert "error:" in result.output


def test_bad_width_mode_rejected(tmp_path: Path) -> None:
    a = _write(tmp_path, "a.txt", "a")
    result = CliRunner().invoke(main, ["--width", "bytes", a])
    assert result.exit_code == 2


def test_missing_file(tmp_path: Path) -> None:
    result = CliRunner().invoke(main, [str(tmp_path / "nope.txt")])
    assert result.exit_code == 2


def test_requires_a_file() -> None:
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 2


def test_invalid_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\n\xff\xfe\n")
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "not valid UTF-8" in result.output
    assert "bad.txt" in result.output


def test_run_as_module(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    a = _write(tmp_path, "a.txt", "left\nl")
    b = _write(tmp_path, "b.txt", "right")
    monkeypatch.setattr(sys, "argv", ["colprint", "-s", "|", a, b])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("colprint", run_name="__main__")
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "left|right\nl   |     \n"
