# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Paced producer that moves input lines into the work queue."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

from ..config import ProbeConfig
from ..errors import InputSourceError
from .workqueue import WorkQueue

logger = logging.getLogger(__name__)

EmitCallback = Callable[[str, float], None]


class Feeder:
    """
    Emit one URL per `config.delay` milliseconds into `queue`.

    The queue's capacity (`config.rate`) only bounds how far the feeder may
    run ahead of the dispatcher; it never turns into a burst. `on_emit` is
    called with each URL and its `clock()` reading right after it is queued.
    """

    def __init__(
        self,
        queue: WorkQueue,
        config: ProbeConfig,
        *,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
        on_emit: EmitCallback | None = None,
    ):
        self.queue = queue
        self.config = config
        self._sleep = sleep
        self._clock = clock
        self._on_emit = on_emit
        self.last_emitted_at: float | None = None
        self.skipped = 0

    def feed(self, lines: Iterable[str]) -> int:
        """Push every non-blank line, then close the queue. Returns the number emitted."""
        emitted = 0
        try:
            for line_number, line in enumerate(lines, start=1):
                raw_url = line.rstrip("\r\n")
                if not raw_url.strip():
                    self.skipped += 1
                    logger.debug("Skipping blank input line %d", line_number)
                    continue
                self.queue.put(raw_url)
                self.last_emitted_at = self._clock()
                if self._on_emit is not None:
                    self._on_emit(raw_url, self.last_emitted_at)
                emitted += 1
                if self.config.delay > 0:
                    self._sleep(self.config.delay_seconds)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read the input source after %d line(s): %s", emitted, exc)
            raise InputSourceError(f"Failed to read the input source: {exc}") from exc
        finally:
            self.queue.close()
            logger.debug(
                "Feeder closed the work queue after %d line(s), %d blank skipped",
                emitted,
                self.skipped,
            )
        return emitted
