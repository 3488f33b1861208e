# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating and sharing IceCream instances."""

import threading
from typing import Optional

from .config import LoggerConfig
from .icecream import IceCream
from .levels import LogLevel

_default_icecream: Optional[IceCream] = None
_default_lock = threading.Lock()


def create_icecream(
    level: LogLevel | str | None = None,
    log_file: str | None = None,
    prefix: str | None = None,
    enabled: bool | None = None,
    include_context: bool | None = None,
) -> IceCream:
    """Factory function to create an IceCream instance.

    Args:
        level: Minimum level. Defaults to IC_LOG_LEVEL env or INFO.
        log_file: Log file path. Defaults to IC_LOG_FILE env or "logs.txt".
        prefix: Line prefix. Defaults to IC_PREFIX env or "ic| ".
        enabled: Master switch. Defaults to IC_ENABLED env or True.
        include_context: Add call-site context. Defaults to
            IC_INCLUDE_CONTEXT env or True.

    Returns:
        IceCream instance

    Raises:
        ValueError: If an explicit level is not recognized

    Example:
        >>> ic = create_icecream(level="WARN", log_file="debug/ic.log")
        >>> ic.ic("only warnings and errors are printed", level="ERROR")
    """
    config = LoggerConfig.from_env()
    if level is not None:
        config.min_level = LogLevel.parse(level)
    if log_file is not None:
        config.log_file_path = log_file
    if prefix is not None:
        config.prefix = prefix
    if enabled is not None:
        config.enabled = enabled
    if include_context is not None:
        config.include_context = include_context

    return IceCream(config=config)


def get_icecream() -> IceCream:
    """Return the process-wide default instance, creating it on first use."""
    global _default_icecream
    with _default_lock:
        if _default_icecream is None:
            _default_icecream = create_icecream()
        return _default_icecream


def set_default_icecream(icecream: Optional[IceCream]) -> None:
    """Replace the process-wide default instance.

    The previous default's worker pool is shut down without waiting. Passing
    None makes the next get_icecream() call build a fresh instance.
    """
    global _default_icecream
    with _default_lock:
        previous, _default_icecream = _default_icecream, icecream
    if previous is not None and previous is not icecream:
        previous.shutdown(wait=False)
