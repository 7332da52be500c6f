# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Bounded single-producer/single-consumer work queue with an explicit close."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator

from ..errors import QueueClosedError

_CLOSED = object()


class WorkQueue:
    """
    Bounded FIFO of raw URLs.

    `put()` blocks once `maxsize` items are buffered. `close()` enqueues an
    end-of-stream marker behind the last item, so iteration yields every item
    written before the close and then stops.
    """

    def __init__(self, maxsize: int):
        if maxsize < 1:
            raise ValueError(f"maxsize must be >= 1, got {maxsize}")
        self._queue: queue.Queue = queue.Queue(maxsize=maxsize)
        self._lock = threading.Lock()
        self._closed = False
        self._drained = threading.Event()

    @property
    def maxsize(self) -> int:
        return self._queue.maxsize

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def drained(self) -> bool:
        """True once the consumer has read the end-of-stream marker."""
        return self._drained.is_set()

    def qsize(self) -> int:
        return self._queue.qsize()

    def put(self, item: str) -> None:
        if self._closed:
            raise QueueClosedError("put() on a closed work queue")
        self._queue.put(item)

    def close(self) -> bool:
        """Close the queue. Returns False when it was already closed."""
        with self._lock:
            if self._closed:
                return False
            self._closed = True
        self._queue.put(_CLOSED)
        return True

    def get(self) -> str | None:
        """Block for the next item; None once the queue is closed and empty."""
        if self._drained.is_set():
            return None
        item = self._queue.get()
        if item is _CLOSED:
            self._drained.set()
            return None
        return item

    def __iter__(self) -> Iterator[str]:
        while True:
            item = self.get()
            if item is None:
                return
            yield item
