# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx
import pytest

from reflectprobe import config
from reflectprobe.config import DEFAULT_USER_AGENT, ProbeConfig
from reflectprobe.errors import ErrorCategory, categorize_exception, error_category_to_reason


def test_probe_config_defaults():
    cfg = ProbeConfig()
    assert cfg.rate == 1
    assert cfg.delay == 1000
    assert cfg.reflect == "swagnito"
    assert cfg.delay_seconds == 1.0


def test_probe_config_is_immutable():
    cfg = ProbeConfig(rate=3)
    with pytest.raises(AttributeError):
        cfg.rate = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [{"rate": 0}, {"delay": -1}, {"reflect": ""}],
)
def test_probe_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        ProbeConfig(**kwargs)


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("REFLECTPROBE_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("REFLECTPROBE_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("REFLECTPROBE_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("REFLECTPROBE_HTTP_VERIFY_SSL", "0")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False


def test_http_settings_defaults_have_no_timeout(monkeypatch):
    for name in (
        "REFLECTPROBE_HTTP_TIMEOUT",
        "REFLECTPROBE_USER_AGENT",
        "REFLECTPROBE_HTTP_REDIRECTS",
        "REFLECTPROBE_HTTP_VERIFY_SSL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = config.load_http_settings()

    assert settings.timeout is None
    assert settings.allow_redirects is True
    assert settings.verify_ssl is True
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("REFLECTPROBE_HTTP_TIMEOUT", "not-a-number")
    assert config.load_http_settings().timeout is None

    monkeypatch.setenv("REFLECTPROBE_HTTP_TIMEOUT", "0")
    assert config.load_http_settings().timeout is None


def test_http_settings_redirects_truthy_variants(monkeypatch):
    for value in ("1", "on", "YES"):
        monkeypatch.setenv("REFLECTPROBE_HTTP_REDIRECTS", value)
        assert config.load_http_settings().allow_redirects is True


def test_categorize_exception_variants():
    assert categorize_exception(httpx.ReadTimeout("slow")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ConnectionResetError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ssl.SSLError("bad cert")) == ErrorCategory.SSL_ERROR
    assert categorize_exception(socket.gaierror("nodename")) == ErrorCategory.DNS_ERROR
    assert categorize_exception(ValueError("odd")) == ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_inspects_cause():
    dns = httpx.ConnectError("[Errno -2] Name or service not known")
    dns.__cause__ = socket.gaierror(-2, "Name or service not known")
    assert categorize_exception(dns) == ErrorCategory.DNS_ERROR

    tls = httpx.ConnectError("certificate verify failed")
    tls.__cause__ = ssl.SSLError("certificate verify failed")
    assert categorize_exception(tls) == ErrorCategory.SSL_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.DNS_ERROR) == "DNS resolution failure"
    assert error_category_to_reason(None) == ""
