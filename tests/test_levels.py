# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for LogLevel."""

import pytest

from icecream_logging import LogLevel


class TestLogLevel:
    """Tests for LogLevel ordering and parsing."""

    def test_ordering(self):
        """Test that levels are ordered INFO < WARN < ERROR."""
        assert LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR

    def test_parse_member(self):
        """Test that parsing a member returns it unchanged."""
        assert LogLevel.parse(LogLevel.ERROR) is LogLevel.ERROR

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("INFO", LogLevel.INFO),
            ("info", LogLevel.INFO),
            (" Warn ", LogLevel.WARN),
            ("WARNING", LogLevel.WARN),
            ("error", LogLevel.ERROR),
        ],
    )
    def test_parse_names(self, text, expected):
        """Test parsing level names case-insensitively, with the WARNING alias."""
        assert LogLevel.parse(text) is expected

    def test_parse_invalid(self):
        """Test that an unknown name raises ValueError."""
        with pytest.raises(ValueError, match="Invalid log level"):
            LogLevel.parse("DEBUG")
