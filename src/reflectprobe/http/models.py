# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across ReflectProbe."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import ErrorCategory

Headers = dict[str, str]

STAGE_TRANSPORT = "transport"
STAGE_READ = "read"


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    Failed responses carry `error_stage`: "transport" when no response was
    received, "read" when the body could not be read to the end.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_stage: str | None = None
    error_category: ErrorCategory | None = None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def contains(self, needle: str) -> bool:
        """Case-sensitive literal search over the raw body bytes."""
        return needle.encode("utf-8") in self.content
