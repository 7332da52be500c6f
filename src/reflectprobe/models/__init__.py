# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Typed domain models for ReflectProbe."""

from .probe import ParsedRequest, ProbeResult, ProbeStatus, RunSummary

__all__ = [
    "ParsedRequest",
    "ProbeResult",
    "ProbeStatus",
    "RunSummary",
]
