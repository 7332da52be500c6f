# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import STAGE_READ, STAGE_TRANSPORT, HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper, shared by all probe threads."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        stage = STAGE_TRANSPORT
        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=timeout,
            ) as resp:
                stage = STAGE_READ
                content = resp.read()

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=dict(resp.headers),
                content=content,
                url=str(resp.url),
            )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(
                ok=False,
                status_code=resp.status_code if stage == STAGE_READ else None,
                url=request.url,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                error_stage=stage,
                error_category=categorize_exception(exc),
            )

    def close(self) -> None:
        self._client.close()
