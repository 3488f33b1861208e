# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Test fixtures for icecream_logging."""

import pytest

from icecream_logging import IceCream, LoggerConfig, MemorySink
import icecream_logging.factory as factory


@pytest.fixture(autouse=True)
def reset_default_icecream():
    """Reset the shared default instance before and after each test."""
    factory._default_icecream = None
    yield
    if factory._default_icecream is not None:
        factory._default_icecream.shutdown()
    factory._default_icecream = None


@pytest.fixture
def console() -> MemorySink:
    return MemorySink()


@pytest.fixture
def log_file() -> MemorySink:
    return MemorySink()


@pytest.fixture
def printer(console: MemorySink, log_file: MemorySink):
    """IceCream instance writing to in-memory sinks."""
    instance = IceCream(config=LoggerConfig(), console_sink=console, file_sink=log_file)
    yield instance
    instance.shutdown()
