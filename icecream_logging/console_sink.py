# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Console sink that colors level keywords with rich."""

import logging
from typing import Mapping, Optional

from rich.console import Console
from rich.text import Text

from .sink import Sink

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "white"

DEFAULT_KEYWORD_STYLES: Mapping[str, str] = {
    "INFO": "green",
    "WARNING": "yellow",
    "WARN": "yellow",
    "ERROR": "red",
}


class ConsoleSink(Sink):
    """Sink that prints lines to the console, styled by embedded level keywords.

    Every occurrence of a keyword (INFO, WARN, WARNING, ERROR) in the line is
    highlighted with its color; the rest of the line uses the default style.
    If styled output fails, the failure and the raw line are printed instead.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        keyword_styles: Optional[Mapping[str, str]] = None,
        default_style: str = DEFAULT_STYLE,
    ):
        """Initialize console sink.

        Args:
            console: rich Console to print to. Defaults to one bound to stdout.
            keyword_styles: Mapping of keyword to rich style
            default_style: Style for text not matching any keyword
        """
        self.console = console or Console(highlight=False)
        self.keyword_styles = dict(keyword_styles or DEFAULT_KEYWORD_STYLES)
        self.default_style = default_style

    def _styled(self, line: str) -> Text:
        text = Text(line, style=self.default_style)
        for keyword, style in self.keyword_styles.items():
            text.highlight_words([keyword], style=style)
        return text

    def write(self, line: str) -> None:
        try:
            self.console.print(self._styled(line), soft_wrap=True)
        except Exception as e:  # noqa: BLE001
            try:
                print(f"Failed to write styled message: {e}", flush=True)
                print(line, flush=True)
            except Exception as fallback_error:  # noqa: BLE001
                logger.debug("Dropping console line after fallback failed: %s", fallback_error)
