# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""IceCream debug printer: gating, formatting and dual-sink dispatch."""

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import replace
from typing import Any, Callable, Optional

from .config import LoggerConfig, ValueFormatter
from .console_sink import ConsoleSink
from .file_sink import FileSink
from .formatting import (
    CallSite,
    apply_formatter,
    build_line,
    capture_call_site,
    default_arg_to_string,
    detailed_body,
    expression_body,
    format_context,
    pretty_body,
    pretty_format,
    type_name,
    value_body,
    values_body,
)
from .levels import LogLevel
from .sink import Sink

logger = logging.getLogger(__name__)

Level = LogLevel | str


def _completed_future() -> "Future[None]":
    future: Future[None] = Future()
    future.set_result(None)
    return future


class IceCream:
    """Leveled, timestamped debug printer writing to the console and a log file.

    Every print call passes through the same gate (logging enabled and level at
    or above the configured minimum). A call that fails the gate does nothing
    at all. Calls that pass are formatted as::

        <prefix><timestamp> - <LEVEL>: <file>:<line> in <function>(): <value>

    and written to the console sink (styled) and the file sink (plain).
    Sink and serialization failures never reach the caller.

    Example:
        >>> ic = IceCream()
        >>> ic.ic({"user": 42})
        >>> ic.ic_values(1, "two", [3], level="WARN")
        >>> ic.ic_expression("len(items)", 3)
        >>> future = ic.ic_async("background", level=LogLevel.ERROR)
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        console_sink: Optional[Sink] = None,
        file_sink: Optional[Sink] = None,
        max_workers: Optional[int] = None,
    ):
        """Initialize the printer.

        Args:
            config: Settings to start from. Defaults to LoggerConfig().
            console_sink: Console destination. Defaults to a rich ConsoleSink.
            file_sink: File destination. Defaults to a FileSink on
                config.log_file_path.
            max_workers: Thread pool size for the async variants
        """
        self.config = config or LoggerConfig()
        self.console_sink = console_sink or ConsoleSink()
        self.file_sink = file_sink or FileSink(self.config.log_file_path)
        self.max_workers = max_workers

        self._lock = threading.RLock()
        self._executor: ThreadPoolExecutor | None = None
        self._local = threading.local()

    def __enter__(self) -> "IceCream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_level(self, level: Level) -> None:
        """Set the minimum level a message needs to be printed."""
        level = LogLevel.parse(level)
        with self._lock:
            self.config.min_level = level

    def set_log_file(self, path: "str | os.PathLike[str] | None") -> None:
        """Point the file sink at a new path.

        An empty or whitespace-only path is rejected with a warning and the
        current path is kept.
        """
        if path is None or not os.fspath(path).strip():
            self._notice(LogLevel.WARN, "set_log_file: log file path cannot be empty.")
            return

        path = os.fspath(path)
        with self._lock:
            self.config.log_file_path = path
            if isinstance(self.file_sink, FileSink):
                self.file_sink.path = path
        self._notice(LogLevel.INFO, f"Log file path set to: {path}")

    def set_enabled(self, enabled: bool) -> None:
        """Turn printing on or off.

        The confirmation is printed while logging is still (or already)
        enabled: when disabling it is the last line printed, when enabling it
        is the first.
        """
        enabled = bool(enabled)
        if not enabled:
            self._notice(LogLevel.INFO, "Logging has been disabled.")
        with self._lock:
            self.config.enabled = enabled
        if enabled:
            self._notice(LogLevel.INFO, "Logging has been enabled.")

    def set_prefix(self, prefix: str) -> None:
        """Set the text placed before the timestamp of every line."""
        with self._lock:
            self.config.prefix = prefix
        self._notice(LogLevel.INFO, f"Log prefix set to: {prefix}")

    def set_value_formatter(self, formatter: Optional[ValueFormatter]) -> None:
        """Replace the function that turns printed values into text.

        A missing or non-callable formatter is rejected with a warning and the
        current formatter is kept.
        """
        if formatter is None or not callable(formatter):
            self._notice(LogLevel.WARN, "set_value_formatter: formatter must be callable.")
            return

        with self._lock:
            self.config.value_formatter = formatter
        self._notice(LogLevel.INFO, "Value formatter has been updated.")

    def reset_value_formatter(self) -> None:
        """Restore the default compact-JSON formatter."""
        self.set_value_formatter(default_arg_to_string)

    def set_include_context(self, include: bool) -> None:
        """Toggle the "file:line in function()" fragment."""
        with self._lock:
            self.config.include_context = bool(include)
        self._notice(LogLevel.INFO, f"IncludeContext set to: {bool(include)}")

    def set_context_absolute_path(self, absolute: bool) -> None:
        """Use the absolute source path in the context fragment."""
        with self._lock:
            self.config.context_absolute_path = bool(absolute)
        self._notice(LogLevel.INFO, f"ContextAbsPath set to: {bool(absolute)}")

    # ------------------------------------------------------------------
    # Synchronous print operations
    # ------------------------------------------------------------------

    def is_enabled_for(self, level: Level) -> bool:
        """Check the gate for a message at ``level``."""
        config = self.config
        return config.enabled and LogLevel.parse(level) >= config.min_level

    def ic(
        self,
        value: Any,
        level: Level = LogLevel.INFO,
        *,
        call_site: Optional[CallSite] = None,
        stacklevel: int = 1,
    ) -> None:
        """Print a single value.

        Args:
            value: Value to print, rendered with the configured formatter
            level: Message level
            call_site: Explicit call-site metadata. When omitted it is taken
                from the frame ``stacklevel`` levels above this method.
            stacklevel: Which caller frame to report, as in logging.Logger.log
        """
        level = LogLevel.parse(level)
        if not self.is_enabled_for(level):
            return

        call_site = call_site or capture_call_site(stacklevel)
        config = self._snapshot()
        value_text = apply_formatter(config.value_formatter, value)
        self._emit(config, value_body(level, self._context(config, call_site), value_text))

    def ic_values(
        self,
        *values: Any,
        level: Level = LogLevel.INFO,
        call_site: Optional[CallSite] = None,
        stacklevel: int = 1,
    ) -> None:
        """Print several values joined by ", ". Nothing is printed for no values."""
        level = LogLevel.parse(level)
        if not values or not self.is_enabled_for(level):
            return

        call_site = call_site or capture_call_site(stacklevel)
        config = self._snapshot()
        value_texts = [apply_formatter(config.value_formatter, v) for v in values]
        self._emit(config, values_body(level, self._context(config, call_site), value_texts))

    def ic_expression(
        self,
        label: str,
        value: Any,
        level: Level = LogLevel.INFO,
        *,
        call_site: Optional[CallSite] = None,
        stacklevel: int = 1,
    ) -> None:
        """Print ``<label> = <value>``, e.g. ic_expression("len(items)", len(items))."""
        level = LogLevel.parse(level)
        if not self.is_enabled_for(level):
            return

        call_site = call_site or capture_call_site(stacklevel)
        config = self._snapshot()
        value_text = apply_formatter(config.value_formatter, value)
        context = self._context(config, call_site)
        self._emit(config, expression_body(level, context, label, value_text))

    def ic_detailed(
        self,
        value: Any,
        level: Level = LogLevel.INFO,
        *,
        call_site: Optional[CallSite] = None,
        stacklevel: int = 1,
    ) -> None:
        """Print a value annotated with its runtime type name."""
        level = LogLevel.parse(level)
        if not self.is_enabled_for(level):
            return

        call_site = call_site or capture_call_site(stacklevel)
        config = self._snapshot()
        value_text = apply_formatter(config.value_formatter, value)
        context = self._context(config, call_site)
        self._emit(config, detailed_body(level, context, type_name(value), value_text))

    def ic_pretty(
        self,
        value: Any,
        level: Level = LogLevel.INFO,
        *,
        call_site: Optional[CallSite] = None,
        stacklevel: int = 1,
    ) -> None:
        """Print a value as indented JSON.

        The configured formatter is not used. If the value cannot be
        serialized the error text is printed in its place.
        """
        level = LogLevel.parse(level)
        if not self.is_enabled_for(level):
            return

        call_site = call_site or capture_call_site(stacklevel)
        config = self._snapshot()
        context = self._context(config, call_site)
        self._emit(config, pretty_body(level, context, pretty_format(value)))

    # ------------------------------------------------------------------
    # Asynchronous print operations
    # ------------------------------------------------------------------

    def ic_async(
        self,
        value: Any,
        level: Level = LogLevel.INFO,
        *,
        cancel_event: Optional[threading.Event] = None,
        stacklevel: int = 1,
    ) -> "Future[None]":
        """Run ic() on the worker pool.

        Args:
            value: Value to print
            level: Message level
            cancel_event: If set when the worker picks up the job, the job
                is skipped. Checked once, before any formatting.
            stacklevel: Which caller frame to report

        Returns:
            Future resolving to None once the line has been written or skipped
        """
        level = LogLevel.parse(level)
        if not self.is_enabled_for(level):
            return _completed_future()

        call_site = capture_call_site(stacklevel)
        return self._submit(self.ic, cancel_event, value, level, call_site=call_site)

    def ic_values_async(
        self,
        *values: Any,
        level: Level = LogLevel.INFO,
        cancel_event: Optional[threading.Event] = None,
        stacklevel: int = 1,
    ) -> "Future[None]":
        """Run ic_values() on the worker pool."""
        level = LogLevel.parse(level)
        if not values or not self.is_enabled_for(level):
            return _completed_future()

        call_site = capture_call_site(stacklevel)
        return self._submit(self.ic_values, cancel_event, *values, level=level, call_site=call_site)

    def ic_expression_async(
        self,
        label: str,
        value: Any,
        level: Level = LogLevel.INFO,
        *,
        cancel_event: Optional[threading.Event] = None,
        stacklevel: int = 1,
    ) -> "Future[None]":
        """Run ic_expression() on the worker pool."""
        level = LogLevel.parse(level)
        if not self.is_enabled_for(level):
            return _completed_future()

        call_site = capture_call_site(stacklevel)
        return self._submit(
            self.ic_expression, cancel_event, label, value, level, call_site=call_site
        )

    def ic_detailed_async(
        self,
        value: Any,
        level: Level = LogLevel.INFO,
        *,
        cancel_event: Optional[threading.Event] = None,
        stacklevel: int = 1,
    ) -> "Future[None]":
        """Run ic_detailed() on the worker pool."""
        level = LogLevel.parse(level)
        if not self.is_enabled_for(level):
            return _completed_future()

        call_site = capture_call_site(stacklevel)
        return self._submit(self.ic_detailed, cancel_event, value, level, call_site=call_site)

    def ic_pretty_async(
        self,
        value: Any,
        level: Level = LogLevel.INFO,
        *,
        cancel_event: Optional[threading.Event] = None,
        stacklevel: int = 1,
    ) -> "Future[None]":
        """Run ic_pretty() on the worker pool."""
        level = LogLevel.parse(level)
        if not self.is_enabled_for(level):
            return _completed_future()

        call_site = capture_call_site(stacklevel)
        return self._submit(self.ic_pretty, cancel_event, value, level, call_site=call_site)

    def shutdown(self, wait: bool = True) -> None:
        """Stop the worker pool.

        Args:
            wait: Block until queued async prints have finished

        A later async call starts a new pool.
        """
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            logger.debug("Shutting down icecream worker pool (wait=%s)", wait)
            executor.shutdown(wait=wait)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _snapshot(self) -> LoggerConfig:
        with self._lock:
            return replace(self.config)

    @staticmethod
    def _context(config: LoggerConfig, call_site: CallSite) -> str:
        if not config.include_context:
            return ""
        return format_context(call_site, absolute=config.context_absolute_path)

    def _submit(
        self,
        func: Callable[..., None],
        cancel_event: Optional[threading.Event],
        *args: Any,
        **kwargs: Any,
    ) -> "Future[None]":
        def run() -> None:
            if cancel_event is not None and cancel_event.is_set():
                return
            func(*args, **kwargs)

        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers, thread_name_prefix="icecream"
                )
            return self._executor.submit(run)

    def _notice(self, level: LogLevel, message: str) -> None:
        """Print one of the printer's own messages through the normal gate."""
        if not self.is_enabled_for(level):
            return

        tag = "WARNING" if level is LogLevel.WARN else level.name
        self._emit(self._snapshot(), f"{tag}: {message}")

    def _emit(self, config: LoggerConfig, body: str) -> None:
        line = build_line(config.prefix, body)
        self.console_sink.write(line)
        try:
            self.file_sink.write(line)
        except (OSError, ValueError) as e:
            self._report_file_error(e)

    def _report_file_error(self, error: Exception) -> None:
        # The warning itself goes to the file sink again; a second failure
        # on the same thread is dropped instead of reported.
        depth = getattr(self._local, "file_error_depth", 0)
        if depth >= 1:
            logger.debug("Dropping nested log file failure: %s", error)
            return

        self._local.file_error_depth = depth + 1
        try:
            self._notice(LogLevel.WARN, f"Error writing to log file: {error}")
        finally:
            self._local.file_error_depth = depth
