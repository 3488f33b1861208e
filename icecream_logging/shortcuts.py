# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Module-level print functions bound to the default IceCream instance.

Each function reports the caller's own frame as the call site, so
``from icecream_logging import ic`` behaves like calling the method directly.
"""

import threading
from concurrent.futures import Future
from typing import Any, Optional

from .factory import get_icecream
from .icecream import Level
from .levels import LogLevel


def ic(value: Any, level: Level = LogLevel.INFO) -> None:
    get_icecream().ic(value, level, stacklevel=2)


def ic_values(*values: Any, level: Level = LogLevel.INFO) -> None:
    get_icecream().ic_values(*values, level=level, stacklevel=2)


def ic_expression(label: str, value: Any, level: Level = LogLevel.INFO) -> None:
    get_icecream().ic_expression(label, value, level, stacklevel=2)


def ic_detailed(value: Any, level: Level = LogLevel.INFO) -> None:
    get_icecream().ic_detailed(value, level, stacklevel=2)


def ic_pretty(value: Any, level: Level = LogLevel.INFO) -> None:
    get_icecream().ic_pretty(value, level, stacklevel=2)


def ic_async(
    value: Any,
    level: Level = LogLevel.INFO,
    cancel_event: Optional[threading.Event] = None,
) -> "Future[None]":
    return get_icecream().ic_async(value, level, cancel_event=cancel_event, stacklevel=2)


def ic_values_async(
    *values: Any,
    level: Level = LogLevel.INFO,
    cancel_event: Optional[threading.Event] = None,
) -> "Future[None]":
    return get_icecream().ic_values_async(
        *values, level=level, cancel_event=cancel_event, stacklevel=2
    )


def ic_expression_async(
    label: str,
    value: Any,
    level: Level = LogLevel.INFO,
    cancel_event: Optional[threading.Event] = None,
) -> "Future[None]":
    return get_icecream().ic_expression_async(
        label, value, level, cancel_event=cancel_event, stacklevel=2
    )


def ic_detailed_async(
    value: Any,
    level: Level = LogLevel.INFO,
    cancel_event: Optional[threading.Event] = None,
) -> "Future[None]":
    return get_icecream().ic_detailed_async(value, level, cancel_event=cancel_event, stacklevel=2)


def ic_pretty_async(
    value: Any,
    level: Level = LogLevel.INFO,
    cancel_event: Optional[threading.Event] = None,
) -> "Future[None]":
    return get_icecream().ic_pretty_async(value, level, cancel_event=cancel_event, stacklevel=2)
