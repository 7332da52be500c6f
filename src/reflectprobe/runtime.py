# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level ReflectProbe facade wiring the probe pipeline."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from contextlib import suppress

from .config import ProbeConfig
from .errors import InputSourceError
from .http.client import HttpClient, create_default_http_client
from .models import RunSummary
from .pipeline import Dispatcher, Feeder, Prober, WorkQueue
from .report import ReportWriter

logger = logging.getLogger(__name__)


class ReflectProbe:
    """
    Convenience wrapper that shares one HTTP client and report writer across runs.

    Each `run()` builds a fresh work queue, dispatcher and feeder.
    """

    def __init__(
        self,
        config: ProbeConfig | None = None,
        *,
        http_client: HttpClient | None = None,
        writer: ReportWriter | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or ProbeConfig()
        self.http_client = http_client or create_default_http_client()
        self.writer = writer or ReportWriter()
        self.prober = Prober(self.config, self.http_client, self.writer)
        self._sleep = sleep

    def run(self, lines: Iterable[str]) -> RunSummary:
        """
        Probe every URL in `lines` and block until all probes have finished.

        If the source fails mid-read, URLs already queued are still drained
        before InputSourceError propagates.
        """
        queue = WorkQueue(self.config.rate)
        dispatcher = Dispatcher(queue, self.prober)
        feeder = Feeder(queue, self.config, sleep=self._sleep)

        dispatcher.start()
        try:
            feeder.feed(lines)
        except InputSourceError:
            dispatcher.drain()
            raise
        summary = dispatcher.drain()
        logger.info(
            "Probed %d URL(s): %d reflected, %d failed",
            summary.completed,
            summary.reflected,
            summary.failed,
        )
        return summary

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> "ReflectProbe":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
