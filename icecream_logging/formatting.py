# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Value formatting, call-site capture and message shaping."""

import json
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable

from .levels import LogLevel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


@dataclass(frozen=True)
class CallSite:
    """Where a print call was made."""

    file_path: str
    line: int
    function: str

    @property
    def file_name(self) -> str:
        return os.path.basename(self.file_path) if self.file_path else "UnknownFile"


def capture_call_site(depth: int = 1) -> CallSite:
    """Describe the frame ``depth`` levels above the caller of this function.

    Args:
        depth: 1 means the caller's caller, 2 one frame further out, etc.

    Returns:
        CallSite for that frame, or an "unknown" CallSite if the stack is
        shallower than requested
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return CallSite(file_path="", line=0, function="")
    code = frame.f_code
    return CallSite(file_path=code.co_filename, line=frame.f_lineno, function=code.co_name)


def default_arg_to_string(value: Any) -> str:
    """Render a value as compact JSON, falling back to str()."""
    if value is None:
        return "null"
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        return str(value)


def pretty_format(value: Any) -> str:
    """Render a value as indented JSON.

    Unlike default_arg_to_string, a serialization failure is reported in the
    returned text rather than replaced by str(value).
    """
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as e:
        return f"Error serializing object: {e}"


def type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def apply_formatter(formatter: Callable[[Any], str], value: Any) -> str:
    """Run a user-supplied formatter.

    A formatter that raises falls back to str(value); a non-str result is
    passed through str().
    """
    try:
        text = formatter(value)
    except Exception:  # noqa: BLE001
        return str(value)
    return text if isinstance(text, str) else str(text)


def format_context(call_site: CallSite, absolute: bool = False) -> str:
    """Build the "file:line in function()" fragment."""
    if absolute and call_site.file_path:
        location = os.path.abspath(call_site.file_path)
    else:
        location = call_site.file_name
    return f"{location}:{call_site.line} in {call_site.function}()"


def format_timestamp(now: datetime | None = None) -> str:
    """Local time with millisecond precision, e.g. 2025-01-31 12:00:00.123."""
    now = now or datetime.now()
    return now.strftime(TIMESTAMP_FORMAT)[:-3]


def value_body(level: LogLevel, context: str, value_text: str) -> str:
    if not context:
        return f"{level.name}: {value_text}"
    return f"{level.name}: {context}: {value_text}"


def values_body(level: LogLevel, context: str, value_texts: Iterable[str]) -> str:
    return value_body(level, context, ", ".join(value_texts))


def expression_body(level: LogLevel, context: str, label: str, value_text: str) -> str:
    return value_body(level, context, f"{label} = {value_text}")


def detailed_body(level: LogLevel, context: str, type_label: str, value_text: str) -> str:
    if not context:
        return f"{level.name}: [{type_label}] {value_text}"
    return f"{level.name}: {context} [{type_label}]: {value_text}"


def pretty_body(level: LogLevel, context: str, json_text: str) -> str:
    if not context:
        return f"{level.name}: {json_text}"
    return f"{level.name}: {context}:\n{json_text}"


def build_line(prefix: str, body: str, timestamp: str | None = None) -> str:
    """Assemble the final line written to every sink."""
    return f"{prefix}{timestamp or format_timestamp()} - {body}"
