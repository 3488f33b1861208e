# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""icecream-logging: leveled "ic" debug printing.

Prints timestamped, optionally call-site annotated values to a color-styled
console and mirrors the same plain text to a log file. Meant for ad-hoc
"what is this value here" debugging during development.

Example:
    >>> from icecream_logging import ic, ic_values, get_icecream
    >>>
    >>> ic({"user": 42})
    >>> ic_values("a", 1, [2, 3], level="WARN")
    >>>
    >>> # Adjust the shared instance
    >>> printer = get_icecream()
    >>> printer.set_prefix("dbg| ")
    >>> printer.set_log_file("logs/debug.txt")
    >>>
    >>> # Or build an isolated one
    >>> from icecream_logging import create_icecream
    >>> with create_icecream(level="ERROR", log_file="errors.txt") as printer:
    ...     printer.ic("boom", level="ERROR")
"""

__version__ = "0.1.0"

from .config import LoggerConfig
from .console_sink import ConsoleSink
from .factory import create_icecream, get_icecream, set_default_icecream
from .file_sink import FileSink
from .formatting import CallSite, default_arg_to_string, pretty_format
from .icecream import IceCream
from .levels import LogLevel
from .memory_sink import MemorySink
from .shortcuts import (
    ic,
    ic_async,
    ic_detailed,
    ic_detailed_async,
    ic_expression,
    ic_expression_async,
    ic_pretty,
    ic_pretty_async,
    ic_values,
    ic_values_async,
)
from .sink import Sink

__all__ = [
    "__version__",
    "CallSite",
    "ConsoleSink",
    "FileSink",
    "IceCream",
    "LogLevel",
    "LoggerConfig",
    "MemorySink",
    "Sink",
    "create_icecream",
    "default_arg_to_string",
    "get_icecream",
    "ic",
    "ic_async",
    "ic_detailed",
    "ic_detailed_async",
    "ic_expression",
    "ic_expression_async",
    "ic_pretty",
    "ic_pretty_async",
    "ic_values",
    "ic_values_async",
    "pretty_format",
    "set_default_icecream",
]
