# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""File sink that appends plain-text lines."""

from pathlib import Path

from .sink import Sink


class FileSink(Sink):
    """Sink that appends each line to a text file.

    The file is opened, appended to, flushed and closed on every write; no
    handle is kept between calls. Missing parent directories are created.
    Text the encoding cannot represent (lone surrogates) is written as
    backslash escapes. Path and I/O errors (OSError, or ValueError for a
    malformed path) are raised for the caller to handle.
    """

    def __init__(self, path: str):
        """Initialize file sink.

        Args:
            path: Log file path, relative to the working directory or absolute
        """
        self.path = path

    def write(self, line: str) -> None:
        log_file = Path(self.path)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # One write call per line so concurrent appends never split a line
        with open(log_file, "a", encoding="utf-8", errors="backslashreplace") as f:
            f.write(line + "\n")
            f.flush()
