# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract sink interface."""

from abc import ABC, abstractmethod


class Sink(ABC):
    """Destination for fully formatted log lines."""

    @abstractmethod
    def write(self, line: str) -> None:
        """Write one formatted line.

        Args:
            line: The complete message, without a trailing newline
        """
        pass
