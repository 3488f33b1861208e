# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Log levels for ic-style debug printing."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Ordered message severity: INFO < WARN < ERROR."""

    INFO = 0
    WARN = 1
    ERROR = 2

    @classmethod
    def parse(cls, level: "LogLevel | str") -> "LogLevel":
        """Convert a level name (or a LogLevel) into a LogLevel.

        Args:
            level: LogLevel member or its case-insensitive name. "WARNING" is
                accepted as an alias for WARN.

        Returns:
            Matching LogLevel

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(level, cls):
            return level

        name = str(level).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(
                f"Invalid log level: {level}. Must be one of {[m.name for m in cls]}"
            ) from None
