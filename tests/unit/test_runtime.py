# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io

import httpx
import pytest

from reflectprobe.config import HttpSettings, ProbeConfig
from reflectprobe.errors import InputSourceError
from reflectprobe.http.adapters import StubHttpClient
from reflectprobe.http.httpx_client import HttpxClient
from reflectprobe.http.models import HttpResponse
from reflectprobe.report import ReportWriter
from reflectprobe.runtime import ReflectProbe


def _echo_x(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text=f"<p>you searched for {request.url.params.get('x', '')}</p>")


def _echo_client() -> HttpxClient:
    return HttpxClient(HttpSettings(), client=httpx.Client(transport=httpx.MockTransport(_echo_x)))


def test_end_to_end_reports_only_reflecting_url(caplog):
    out = io.StringIO()
    config = ProbeConfig(rate=2, delay=5, reflect="MARK123")
    lines = io.StringIO("http://example.com/a?x=1&y=2\nhttp://example.com/b\n::not a url::\n")

    with ReflectProbe(config, http_client=_echo_client(), writer=ReportWriter(out, color=False)) as probe:
        summary = probe.run(lines)

    assert out.getvalue().splitlines() == ["http://example.com/a?x=MARK123&y=MARK123 [reflected]"]
    assert summary.admitted == 3
    assert summary.completed == 3
    assert summary.reflected == 1
    assert summary.failed == 1
    assert "Failed to parse URL '::not a url::'" in caplog.text


def test_malformed_first_line_does_not_block_later_lines(caplog):
    out = io.StringIO()
    config = ProbeConfig(rate=1, delay=0, reflect="MARK123")
    lines = ["::not a url::\n", "http://example.com/a?x=1\n", "http://example.com/c?x=9&z=0\n"]

    with ReflectProbe(config, http_client=_echo_client(), writer=ReportWriter(out, color=False)) as probe:
        summary = probe.run(lines)

    assert sorted(out.getvalue().splitlines()) == [
        "http://example.com/a?x=MARK123 [reflected]",
        "http://example.com/c?x=MARK123&z=MARK123 [reflected]",
    ]
    assert summary.completed == 3
    assert summary.reflected == 2
    assert summary.failed == 1
    assert "Failed to parse URL '::not a url::'" in caplog.text


def test_run_uses_injected_sleep_for_pacing():
    sleeps = []
    client = StubHttpClient(handler=lambda request: HttpResponse(ok=True, content=b""))
    probe = ReflectProbe(
        ProbeConfig(rate=1, delay=40),
        http_client=client,
        writer=ReportWriter(io.StringIO()),
        sleep=sleeps.append,
    )

    summary = probe.run(["http://a/?q=1", "http://b/?q=2", "http://c/?q=3"])

    assert summary.completed == 3
    assert sleeps == [0.04, 0.04, 0.04]
    assert sorted(client.requested_urls) == [
        "http://a/?q=swagnito",
        "http://b/?q=swagnito",
        "http://c/?q=swagnito",
    ]


def test_run_drains_queued_work_before_raising_input_error():
    client = StubHttpClient(handler=lambda request: HttpResponse(ok=True, content=b""))
    probe = ReflectProbe(ProbeConfig(rate=4, delay=0), http_client=client, writer=ReportWriter(io.StringIO()))

    def source():
        yield "http://a/?q=1"
        yield "http://b/?q=1"
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    with pytest.raises(InputSourceError):
        probe.run(source())

    assert len(client.requested_urls) == 2


def test_context_manager_closes_client():
    client = StubHttpClient()
    with ReflectProbe(http_client=client, writer=ReportWriter(io.StringIO())):
        pass
    assert client.closed is True
