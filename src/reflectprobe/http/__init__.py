# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import (
    build_marker_substitution,
    mutate_url,
    parse_query,
    parse_request,
    replace_params_in_url,
)

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "build_marker_substitution",
    "create_default_http_client",
    "mutate_url",
    "parse_query",
    "parse_request",
    "replace_params_in_url",
]
