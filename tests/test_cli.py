"""Tests for the mdcat command line."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from mdcat.cli import main


def _write(path: Path, text: str) -> str:
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestRenderFiles:
    """Output is plain when stdout is not a terminal."""

    def test_renders_file_without_escapes(self, tmp_path: Path) -> None:
        doc = _write(tmp_path / "doc.md", "# Title\n\n- **item**\n")
        result = CliRunner().invoke(main, [doc])
        assert result.exit_code == 0
        assert result.output == "\nTitle\n═══════\n\n  • item\n"
        assert "\x1b" not in result.output

    def test_reads_stdin_without_arguments(self) -> None:
        result = CliRunner().invoke(main, [], input="> hi\n")
        assert result.exit_code == 0
        assert result.output == "│ hi\n"

    def test_dash_means_stdin(self) -> None:
        result = CliRunner().invoke(main, ["-"], input="*x*\n")
        assert result.exit_code == 0
        assert result.output == "x\n"

    def test_files_rendered_in_order(self, tmp_path: Path) -> None:
        first = _write(tmp_path / "a.md", "one\n")
        second = _write(tmp_path / "b.md", "two\n")
        result = CliRunner().invoke(main, [first, second])
        assert result.output == "one\ntwo\n"

    def test_each_file_starts_outside_a_fence(self, tmp_path: Path) -> None:
        first = _write(tmp_path / "a.md", "```\ncode\n")
        second = _write(tmp_path / "b.md", "# T\n")
        result = CliRunner().invoke(main, [first, second])
        assert result.output == "\n  code\n\nT\n═══\n"

    def test_invalid_utf8_is_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.md"
        path.write_bytes(b"caf\xe9\n")
        result = CliRunner().invoke(main, [str(path)])
        assert result.exit_code == 0
        assert result.output == "caf\ufffd\n"

    def test_debug_logging(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        doc = _write(tmp_path / "doc.md", "| a |\nplain\n")
        with caplog.at_level(logging.DEBUG, logger="mdcat"):
            result = CliRunner().invoke(main, ["--log-level", "debug", doc])
        assert result.exit_code == 0
        assert "| a |\nplain\n" in result.output
        assert f"Rendering {doc}" in caplog.messages

    def test_stdin_is_logged_by_name(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mdcat"):
            CliRunner().invoke(main, [], input="x\n")
        assert "Rendering <stdin>" in caplog.messages


class TestOpenFailures:
    """An unreadable file aborts the run with status 1."""

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "nope.md")
        result = CliRunner().invoke(main, [missing])
        assert result.exit_code == 1
        assert f"mdcat: cannot open '{missing}'" in result.output

    def test_directory_is_reported_when_reached(self, tmp_path: Path) -> None:
        good = _write(tmp_path / "good.md", "first\n")
        subdir = tmp_path / "sub"
        subdir.mkdir()
        result = CliRunner().invoke(main, [good, str(subdir)])
        assert result.exit_code == 1
        assert result.output.startswith("first\n")
        assert f"mdcat: cannot open '{subdir}'" in result.output
        assert "Usage:" not in result.output

    def test_stops_at_first_failure(self, tmp_path: Path) -> None:
        good = _write(tmp_path / "good.md", "first\n")
        later = _write(tmp_path / "later.md", "never\n")
        missing = str(tmp_path / "nope.md")
        result = CliRunner().invoke(main, [good, missing, later])
        assert result.exit_code == 1
        assert "first\n" in result.output
        assert "never" not in result.output
