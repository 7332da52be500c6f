# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers: query parsing and marker substitution."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from ..errors import UrlParseError
from ..models import ParsedRequest


def parse_query(query: str) -> dict[str, str]:
    """
    Parse a raw query string into a key -> value mapping.

    Duplicate keys keep the last value seen. Keys without a value map to "".
    """
    params: dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        params[key] = value
    return params


def encode_query(params: Mapping[str, str]) -> str:
    """Serialize params with keys sorted, one instance per key."""
    return urlencode(sorted(params.items()))


def parse_request(raw_url: str) -> ParsedRequest:
    """Parse an input line into a ParsedRequest, raising UrlParseError when unusable."""
    try:
        parts = urlsplit(raw_url)
        # Accessing .port validates it; urlsplit alone does not.
        parts.port
    except ValueError as exc:
        raise UrlParseError(raw_url, str(exc)) from exc

    if not parts.scheme:
        raise UrlParseError(raw_url, "missing protocol scheme")
    if not parts.netloc:
        raise UrlParseError(raw_url, "missing host")

    return ParsedRequest(raw_url=raw_url, parts=parts, params=parse_query(parts.query))


def build_marker_substitution(params: Mapping[str, str], marker: str) -> dict[str, str]:
    """Map every key of `params` to `marker`."""
    return {key: marker for key in params}


def replace_params_in_url(parts: SplitResult, substitution: Mapping[str, str]) -> str:
    """
    Rebuild a URL with its query values overridden by `substitution`.

    Scheme, host, path and fragment are preserved; the query string is
    re-encoded canonically.
    """
    params = parse_query(parts.query)
    params.update(substitution)
    return urlunsplit(parts._replace(query=encode_query(params)))


def mutate_url(request: ParsedRequest, marker: str) -> tuple[str, dict[str, str]]:
    """Return the marker-substituted URL and the substitution used to build it."""
    substitution = build_marker_substitution(request.params, marker)
    return replace_params_in_url(request.parts, substitution), substitution


__all__ = [
    "build_marker_substitution",
    "encode_query",
    "mutate_url",
    "parse_query",
    "parse_request",
    "replace_params_in_url",
]
