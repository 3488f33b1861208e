# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logger configuration and environment loading."""

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from .formatting import default_arg_to_string
from .levels import LogLevel

ValueFormatter = Callable[[Any], str]

DEFAULT_PREFIX = "ic| "
DEFAULT_LOG_FILE = "logs.txt"


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    value = environ.get(key)
    if value is None:
        return default

    value_lower = value.lower()
    if value_lower in ("true", "1", "yes", "on"):
        return True
    if value_lower in ("false", "0", "no", "off"):
        return False
    return default


def _env_level(environ: Mapping[str, str], key: str, default: LogLevel) -> LogLevel:
    value = environ.get(key)
    if not value:
        return default
    try:
        return LogLevel.parse(value)
    except ValueError:
        return default


@dataclass
class LoggerConfig:
    """Mutable settings consulted by every print call.

    Attributes:
        min_level: Messages below this level are dropped
        enabled: Master switch; when False every print is a no-op
        prefix: Text placed before the timestamp of each line
        log_file_path: File each line is appended to
        include_context: Whether to add the "file:line in function()" fragment
        context_absolute_path: Use the absolute source path in the context
            fragment instead of the basename
        value_formatter: Turns a printed value into text
    """

    min_level: LogLevel = LogLevel.INFO
    enabled: bool = True
    prefix: str = DEFAULT_PREFIX
    log_file_path: str = DEFAULT_LOG_FILE
    include_context: bool = True
    context_absolute_path: bool = False
    value_formatter: ValueFormatter = field(default=default_arg_to_string)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerConfig":
        """Build a configuration from IC_* environment variables.

        Unset or unparsable variables keep their defaults.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            LoggerConfig instance
        """
        environ = environ if environ is not None else os.environ
        return cls(
            min_level=_env_level(environ, "IC_LOG_LEVEL", LogLevel.INFO),
            enabled=_env_bool(environ, "IC_ENABLED", True),
            prefix=environ.get("IC_PREFIX", DEFAULT_PREFIX),
            log_file_path=environ.get("IC_LOG_FILE") or DEFAULT_LOG_FILE,
            include_context=_env_bool(environ, "IC_INCLUDE_CONTEXT", True),
            context_absolute_path=_env_bool(environ, "IC_CONTEXT_ABS_PATH", False),
        )
