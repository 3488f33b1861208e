# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""In-memory sink implementation for testing."""

import threading

from .sink import Sink


class MemorySink(Sink):
    """Sink that stores lines in memory without output.

    Useful for testing to verify printed lines without touching the console
    or the filesystem.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self._lock = threading.Lock()

    def write(self, line: str) -> None:
        with self._lock:
            self.lines.append(line)

    def clear(self) -> None:
        """Clear all stored lines (useful for testing)."""
        with self._lock:
            self.lines.clear()

    def has_line(self, text: str) -> bool:
        """Check if any stored line contains ``text`` (substring match)."""
        with self._lock:
            return any(text in line for line in self.lines)
