# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for ReflectProbe."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("REFLECTPROBE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# httpx and httpcore log every request at INFO/DEBUG.
CHATTY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> int:
    """
    Send diagnostics to stderr at `level` and return the numeric level used.

    Per-request transport logs from the HTTP stack stay at WARNING unless
    DEBUG is requested, so INFO output is only ReflectProbe's own.
    """
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    logging.basicConfig(level=effective_level, format=LOG_FORMAT)
    library_level = logging.DEBUG if effective_level <= logging.DEBUG else logging.WARNING
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
    return effective_level


__all__ = ["setup_logging"]
