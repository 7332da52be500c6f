# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fan queued URLs out to probe threads and wait for all of them."""

from __future__ import annotations

import logging
import threading

from ..models import ProbeResult, RunSummary
from .barrier import CompletionBarrier
from .prober import Prober
from .workqueue import WorkQueue

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Consume `queue` on a coordinating thread, starting one probe thread per URL.

    `drain()` returns only after the queue has been closed and consumed and
    every probe thread has finished.
    """

    def __init__(self, queue: WorkQueue, prober: Prober):
        self.queue = queue
        self.prober = prober
        self.barrier = CompletionBarrier()
        self.summary = RunSummary()
        self._summary_lock = threading.Lock()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("dispatcher already started")
        self._thread = threading.Thread(target=self._run, name="reflectprobe-dispatcher", daemon=True)
        self._thread.start()

    def drain(self) -> RunSummary:
        if self._thread is None:
            raise RuntimeError("dispatcher was never started")
        self._thread.join()
        self.barrier.wait()
        logger.debug("Drain complete: %s", self.summary.to_dict())
        return self.summary

    def _run(self) -> None:
        for index, raw_url in enumerate(self.queue):
            self.barrier.add()
            with self._summary_lock:
                self.summary.admitted += 1
            worker = threading.Thread(
                target=self._probe,
                args=(raw_url,),
                name=f"reflectprobe-probe-{index}",
                daemon=True,
            )
            try:
                worker.start()
            except RuntimeError as exc:
                logger.error("Failed to start probe for URL '%s': %s", raw_url, exc)
                self._finish(None)

    def _probe(self, raw_url: str) -> None:
        result: ProbeResult | None = None
        try:
            result = self.prober.probe(raw_url)
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error while probing URL '%s'", raw_url)
        finally:
            self._finish(result)

    def _finish(self, result: ProbeResult | None) -> None:
        with self._summary_lock:
            self.summary.record(result)
        self.barrier.done()
