# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The HttpClient contract shared by every probe thread."""

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    One instance serves all probe threads of a run, so `request()` must be
    safe to call concurrently.

    `request()` never raises for network problems. A failed exchange comes back
    as `HttpResponse(ok=False)` with `error_stage` set to "transport" (nothing
    received) or "read" (body cut short). `close()` is called once, after the
    last probe has finished.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    """Build the httpx-backed client; settings default to the environment."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings())
