# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-URL reflection probe."""

from __future__ import annotations

import logging

from ..config import ProbeConfig
from ..errors import UrlParseError, error_category_to_reason
from ..http.client import HttpClient
from ..http.models import STAGE_READ, HttpRequest
from ..http.url import mutate_url, parse_request
from ..models import ProbeResult, ProbeStatus
from ..report import ReportWriter

logger = logging.getLogger(__name__)


class Prober:
    """
    Substitute the marker into every query parameter of a URL, fetch it, and
    report the mutated URL when the marker comes back in the body.

    Stateless between calls; one instance is shared by all probe threads.
    """

    def __init__(self, config: ProbeConfig, http_client: HttpClient, writer: ReportWriter):
        self.config = config
        self.http_client = http_client
        self.writer = writer

    def probe(self, raw_url: str) -> ProbeResult:
        marker = self.config.reflect

        try:
            request = parse_request(raw_url)
        except UrlParseError as exc:
            logger.error("Failed to parse URL '%s': %s", raw_url, exc.reason)
            return ProbeResult(ProbeStatus.PARSE_ERROR, raw_url, error_message=exc.reason)

        mutated_url, _ = mutate_url(request, marker)

        response = self.http_client.request(HttpRequest(url=mutated_url))
        if not response.ok:
            category = response.error_category.value if response.error_category else None
            reason = error_category_to_reason(response.error_category)
            detail = f"{response.error_message} ({reason})" if reason else str(response.error_message)
            if response.error_stage == STAGE_READ:
                logger.error("Failed to read response body for URL '%s': %s", mutated_url, detail)
                status = ProbeStatus.READ_ERROR
            else:
                logger.error("Failed to send request to URL '%s': %s", mutated_url, detail)
                status = ProbeStatus.TRANSPORT_ERROR
            return ProbeResult(
                status,
                raw_url,
                mutated_url=mutated_url,
                error_message=response.error_message,
                error_category=category,
            )

        if response.contains(marker):
            self.writer.reflected(mutated_url)
            return ProbeResult(ProbeStatus.REFLECTED, raw_url, mutated_url=mutated_url)

        logger.debug("No reflection for %s", mutated_url)
        return ProbeResult(ProbeStatus.NOT_REFLECTED, raw_url, mutated_url=mutated_url)
