# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
ReflectProbe package entrypoint.

Rewrites every query parameter of each input URL to a marker value, fetches the
result and reports URLs whose response body echoes the marker. Work flows from
a paced feeder through a bounded queue to a dispatcher that runs one probe per
URL. HTTP behavior is abstracted behind an injectable client interface.
"""

from .config import HttpSettings, ProbeConfig, load_http_settings
from .errors import ErrorCategory, InputSourceError, ReflectProbeError, UrlParseError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import ProbeResult, ProbeStatus, RunSummary
from .pipeline import CompletionBarrier, Dispatcher, Feeder, Prober, WorkQueue
from .report import ReportWriter
from .runtime import ReflectProbe
from .version import __version__

__all__ = [
    "CompletionBarrier",
    "Dispatcher",
    "ErrorCategory",
    "Feeder",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "InputSourceError",
    "ProbeConfig",
    "ProbeResult",
    "ProbeStatus",
    "Prober",
    "ReflectProbe",
    "ReflectProbeError",
    "ReportWriter",
    "RunSummary",
    "StubHttpClient",
    "UrlParseError",
    "WorkQueue",
    "create_default_http_client",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
