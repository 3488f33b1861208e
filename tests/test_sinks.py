# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for console, file and memory sinks."""

from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from icecream_logging import ConsoleSink, FileSink, MemorySink, Sink


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_is_sink(self):
        assert isinstance(ConsoleSink(), Sink)

    def test_plain_output_when_not_a_terminal(self):
        """Test that a non-terminal console gets the raw line."""
        buffer = StringIO()
        sink = ConsoleSink(console=Console(file=buffer, force_terminal=False, highlight=False))

        sink.write("ic| 2025-01-31 08:05:09.123 - INFO: a.py:1 in f(): 42")

        assert buffer.getvalue() == "ic| 2025-01-31 08:05:09.123 - INFO: a.py:1 in f(): 42\n"

    def test_long_line_not_wrapped(self):
        """Test that lines wider than the console stay on one line."""
        buffer = StringIO()
        sink = ConsoleSink(console=Console(file=buffer, width=20, highlight=False))

        sink.write("INFO: " + "x" * 100)

        assert buffer.getvalue().count("\n") == 1

    def test_level_keywords_colored(self):
        """Test that level keywords get their own colors."""
        buffer = StringIO()
        console = Console(
            file=buffer, force_terminal=True, color_system="standard", no_color=False, width=200
        )
        sink = ConsoleSink(console=console)

        sink.write("INFO: ok")
        sink.write("WARNING: careful")
        sink.write("ERROR: broken")

        output = buffer.getvalue()
        assert "\x1b[32m" in output  # green
        assert "\x1b[33m" in output  # yellow
        assert "\x1b[31m" in output  # red

    def test_styled_text_spans(self):
        """Test that keyword spans carry the mapped style over the default."""
        sink = ConsoleSink()

        text = sink._styled("ic| - WARN: value ERROR")

        assert text.style == "white"
        styles = {text.plain[span.start:span.end]: span.style for span in text.spans}
        assert styles["WARN"] == "yellow"
        assert styles["ERROR"] == "red"

    def test_custom_keyword_styles(self):
        sink = ConsoleSink(keyword_styles={"TRACE": "magenta"}, default_style="bold")

        text = sink._styled("TRACE: later")

        assert text.style == "bold"
        assert [text.plain[s.start:s.end] for s in text.spans] == ["TRACE"]

    def test_styling_failure_falls_back_to_plain(self, capsys):
        """Test that a failing console prints the error then the raw line."""
        console = MagicMock()
        console.print.side_effect = RuntimeError("no terminal")
        sink = ConsoleSink(console=console)

        sink.write("INFO: hello")

        out = capsys.readouterr().out
        assert out == "Failed to write styled message: no terminal\nINFO: hello\n"

    def test_failing_fallback_does_not_raise(self):
        """Test that a fallback print that cannot encode the line is dropped."""
        console = MagicMock()
        console.print.side_effect = RuntimeError("no terminal")
        sink = ConsoleSink(console=console)
        error = UnicodeEncodeError("utf-8", "\ud800", 0, 1, "surrogates not allowed")

        with patch("builtins.print", side_effect=error) as fallback:
            sink.write("INFO: bad \ud800 text")

        fallback.assert_called_once()


class TestFileSink:
    """Tests for FileSink."""

    def test_appends_lines(self, tmp_path: Path):
        path = tmp_path / "logs.txt"
        sink = FileSink(str(path))

        sink.write("first")
        sink.write("second")

        assert path.read_text(encoding="utf-8") == "first\nsecond\n"

    def test_appends_to_existing_file(self, tmp_path: Path):
        path = tmp_path / "logs.txt"
        path.write_text("old\n", encoding="utf-8")

        FileSink(str(path)).write("new")

        assert path.read_text(encoding="utf-8").splitlines() == ["old", "new"]

    def test_creates_parent_directories(self, tmp_path: Path):
        """Test that missing directories are created before writing."""
        path = tmp_path / "a" / "b" / "debug.log"

        FileSink(str(path)).write("line")

        assert path.read_text(encoding="utf-8") == "line\n"

    def test_relative_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)

        FileSink("logs.txt").write("here")

        assert (tmp_path / "logs.txt").read_text(encoding="utf-8") == "here\n"

    def test_unicode(self, tmp_path: Path):
        path = tmp_path / "logs.txt"

        FileSink(str(path)).write("héllo ✓")

        assert path.read_text(encoding="utf-8") == "héllo ✓\n"

    def test_failure_raises_oserror(self, tmp_path: Path):
        """Test that I/O errors are raised for the caller to handle."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(OSError):
            FileSink(str(blocker / "logs.txt")).write("line")

    def test_lone_surrogate_is_escaped(self, tmp_path: Path):
        path = tmp_path / "logs.txt"

        FileSink(str(path)).write("bad \ud800 text")

        assert path.read_text(encoding="utf-8") == "bad \\ud800 text\n"

    def test_embedded_null_raises_value_error(self, tmp_path: Path):
        with pytest.raises(ValueError):
            FileSink(str(tmp_path / "bad\0name.txt")).write("line")


class TestMemorySink:
    """Tests for MemorySink."""

    def test_records_lines(self):
        sink = MemorySink()

        sink.write("one")
        sink.write("two")

        assert sink.lines == ["one", "two"]
        assert sink.has_line("tw")
        assert not sink.has_line("three")

    def test_clear(self):
        sink = MemorySink()
        sink.write("one")

        sink.clear()

        assert sink.lines == []
