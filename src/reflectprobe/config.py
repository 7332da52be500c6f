# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for ReflectProbe."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"ReflectProbe/{__version__}"
DEFAULT_RATE = 1
DEFAULT_DELAY_MS = 1000
DEFAULT_REFLECT_MARKER = "swagnito"


def _float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ProbeConfig:
    """
    Run-wide probe settings.

    `rate` is the number of URLs that may be buffered ahead of dispatch,
    `delay` the pause in milliseconds between two feed emissions, and
    `reflect` the marker written into every query parameter.
    """

    rate: int = DEFAULT_RATE
    delay: int = DEFAULT_DELAY_MS
    reflect: str = DEFAULT_REFLECT_MARKER

    def __post_init__(self) -> None:
        if self.rate < 1:
            raise ValueError(f"rate must be >= 1, got {self.rate}")
        if self.delay < 0:
            raise ValueError(f"delay must be >= 0, got {self.delay}")
        if not self.reflect:
            raise ValueError("reflect marker must not be empty")

    @property
    def delay_seconds(self) -> float:
        return self.delay / 1000.0


@dataclass
class HttpSettings:
    """HTTP client defaults. A timeout of None disables timeouts entirely."""

    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            timeout=_float_env("REFLECTPROBE_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("REFLECTPROBE_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("REFLECTPROBE_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("REFLECTPROBE_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
