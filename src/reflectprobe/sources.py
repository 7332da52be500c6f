# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Input sources for URL lists."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from .errors import InputSourceError

STDIN_PATH = "-"
# Undecodable bytes become U+FFFD; the line is then judged by the prober
DECODE_ERRORS = "replace"


@contextmanager
def open_source(path: str, *, encoding: str = "utf-8") -> Iterator[TextIO]:
    """
    Open a URL list for line iteration. `-` reads from stdin.

    Raises InputSourceError when the file cannot be opened.
    """
    if path == STDIN_PATH:
        reconfigure = getattr(sys.stdin, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors=DECODE_ERRORS)
        yield sys.stdin
        return

    try:
        handle = open(path, encoding=encoding, errors=DECODE_ERRORS)  # noqa: SIM115
    except OSError as exc:
        raise InputSourceError(f"Failed to open the file: {exc}") from exc

    with handle:
        yield handle


__all__ = ["STDIN_PATH", "open_source"]
