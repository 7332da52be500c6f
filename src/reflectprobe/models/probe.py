# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import SplitResult


class ProbeStatus(str, Enum):
    REFLECTED = "REFLECTED"
    NOT_REFLECTED = "NOT_REFLECTED"
    PARSE_ERROR = "PARSE_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    READ_ERROR = "READ_ERROR"

    @property
    def is_error(self) -> bool:
        return self in {ProbeStatus.PARSE_ERROR, ProbeStatus.TRANSPORT_ERROR, ProbeStatus.READ_ERROR}


@dataclass
class ParsedRequest:
    """A parsed input URL plus its query mapping (last value wins per key)."""

    raw_url: str
    parts: SplitResult
    params: dict[str, str] = field(default_factory=dict)


@dataclass
class ProbeResult:
    """Outcome of a single probe; returned to the caller, never stored."""

    status: ProbeStatus
    raw_url: str
    mutated_url: str | None = None
    error_message: str | None = None
    error_category: str | None = None

    @property
    def reflected(self) -> bool:
        return self.status == ProbeStatus.REFLECTED


@dataclass
class RunSummary:
    """Counters collected by the dispatcher over one run."""

    admitted: int = 0
    completed: int = 0
    reflected: int = 0
    failed: int = 0

    def record(self, result: ProbeResult | None) -> None:
        self.completed += 1
        if result is None or result.status.is_error:
            self.failed += 1
        elif result.reflected:
            self.reflected += 1

    def to_dict(self) -> dict[str, int]:
        return {
            "admitted": self.admitted,
            "completed": self.completed,
            "reflected": self.reflected,
            "failed": self.failed,
        }
