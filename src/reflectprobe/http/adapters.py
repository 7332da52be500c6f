# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

import threading
from collections.abc import Callable

from .client import HttpClient
from .models import STAGE_TRANSPORT, HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests and dry runs."""

    def __init__(
        self,
        responses: dict[str, HttpResponse] | None = None,
        handler: Callable[[HttpRequest], HttpResponse] | None = None,
    ):
        self._responses = responses or {}
        self._handler = handler
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        if request.url in self._responses:
            return self._responses[request.url]
        if self._handler is not None:
            return self._handler(request)
        return HttpResponse(
            ok=False,
            url=request.url,
            error_message="No stubbed response configured",
            error_stage=STAGE_TRANSPORT,
        )

    @property
    def requested_urls(self) -> list[str]:
        with self._lock:
            return [req.url for req in self.requests]

    def close(self) -> None:
        self.closed = True
