# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Counting completion barrier for in-flight probes."""

from __future__ import annotations

import threading


class CompletionBarrier:
    """Tracks outstanding work units; `wait()` returns once all of them are done."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._pending = 0
        self._total = 0

    @property
    def pending(self) -> int:
        with self._cond:
            return self._pending

    @property
    def total(self) -> int:
        with self._cond:
            return self._total

    def add(self, count: int = 1) -> None:
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        with self._cond:
            self._pending += count
            self._total += count

    def done(self) -> None:
        with self._cond:
            if self._pending <= 0:
                raise ValueError("done() called more times than add()")
            self._pending -= 1
            if self._pending == 0:
                self._cond.notify_all()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until nothing is pending. Returns False if `timeout` elapsed first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._pending == 0, timeout=timeout)
