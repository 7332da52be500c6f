# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Report line rendering for reflected URLs."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

COLOR_RED = "\033[31m"
COLOR_RESET = "\033[0m"
REFLECTED_TAG = "[reflected]"


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{COLOR_RESET}"


class ReportWriter:
    """
    Thread-safe writer for `<url> [reflected]` lines.

    With `color=None`, the URL is highlighted only when the stream is a TTY.
    The stream defaults to whatever `sys.stdout` is at write time.
    """

    def __init__(self, stream: TextIO | None = None, *, color: bool | None = None):
        self._stream = stream
        self._color = color
        self._lock = threading.Lock()
        self.count = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _use_color(self, stream: TextIO) -> bool:
        if self._color is not None:
            return self._color
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def format_reflected(self, url: str, *, color: bool = False) -> str:
        highlighted = colorize(url, COLOR_RED) if color else url
        return f"{highlighted} {REFLECTED_TAG}"

    def reflected(self, url: str) -> None:
        with self._lock:
            stream = self.stream
            stream.write(self.format_reflected(url, color=self._use_color(stream)) + "\n")
            stream.flush()
            self.count += 1


__all__ = ["COLOR_RED", "COLOR_RESET", "REFLECTED_TAG", "ReportWriter", "colorize"]
