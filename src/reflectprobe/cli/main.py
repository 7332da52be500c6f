# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""ReflectProbe CLI."""

from __future__ import annotations

import argparse
import logging

from ..config import (
    DEFAULT_DELAY_MS,
    DEFAULT_RATE,
    DEFAULT_REFLECT_MARKER,
    HttpSettings,
    ProbeConfig,
    load_http_settings,
)
from ..errors import InputSourceError
from ..http import create_default_http_client
from ..log import setup_logging
from ..report import ReportWriter
from ..runtime import ReflectProbe
from ..sources import open_source

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _int_at_least(minimum: int):
    def parse(value: str) -> int:
        try:
            parsed = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
        if parsed < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {parsed}")
        return parsed

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reflectprobe",
        description="Replace every query parameter value with a marker and report URLs that echo it back",
    )
    parser.add_argument("file_path", help="File with one URL per line ('-' reads stdin)")
    parser.add_argument(
        "--rate",
        type=_int_at_least(1),
        default=DEFAULT_RATE,
        help="Number of URLs buffered ahead of dispatch (default: %(default)s)",
    )
    parser.add_argument(
        "--delay",
        type=_int_at_least(0),
        default=DEFAULT_DELAY_MS,
        help="Time interval between two requests, in milliseconds (default: %(default)s)",
    )
    parser.add_argument(
        "--reflect",
        default=DEFAULT_REFLECT_MARKER,
        help="Reflection parameter value (default: %(default)s)",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Never highlight reflected URLs",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Log level for stderr diagnostics (default: REFLECTPROBE_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = ProbeConfig(rate=args.rate, delay=args.delay, reflect=args.reflect)
    except ValueError as exc:
        parser.error(str(exc))

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    writer = ReportWriter(color=False if args.no_color else None)

    try:
        with (
            open_source(args.file_path) as lines,
            ReflectProbe(config, http_client=create_default_http_client(settings), writer=writer) as probe,
        ):
            probe.run(lines)
    except InputSourceError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
