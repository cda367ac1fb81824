"""Command-line interface for minicurl."""

from __future__ import annotations

import argparse
import contextlib
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from . import __version__
from .client import RequestError, create_session, execute, write_body
from .config import ConfigError, config_from_env, load_environment
from .headers import MalformedHeaderError, parse_headers
from .logging_utils import configure_logging
from .validation import SUPPORTED_METHODS, is_valid_method, is_valid_url

DEFAULT_HEADERS: tuple[str, ...] = ("Content-Type: application/x-www-form-urlencoded",)


def _seconds(value: str) -> float:
    seconds = float(value)
    if seconds <= 0:
        raise argparse.ArgumentTypeError("Timeout must be a positive number of seconds")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minicurl",
        description="Send a single HTTP GET or POST request and print the response body.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("url", help="Request URL, including its scheme (e.g. http://example.com)")
    # Positionals after the URL are accepted and ignored.
    parser.add_argument("extra_args", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument(
        "-X",
        "--request",
        dest="method",
        default="GET",
        help=f"HTTP method, one of {', '.join(SUPPORTED_METHODS)} (default: GET)",
    )
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        metavar="'KEY: VALUE'",
        help=f"Request header, repeatable (default: '{DEFAULT_HEADERS[0]}')",
    )
    parser.add_argument("-d", "--data", help="Request body sent with POST")
    parser.add_argument("-o", "--output", type=Path, help="Write the response body to this file instead of stdout")
    parser.add_argument("-m", "--max-time", type=_seconds, help="Seconds to wait for connect and read")
    parser.add_argument("--log-json", action="store_true", help="Emit structured JSON logs to the log file")
    parser.add_argument("--log-file", type=Path, help="Write logs to the specified path")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log request and response details")
    verbosity.add_argument("-s", "--silent", action="store_true", help="Only log errors")
    return parser


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    return build_parser().parse_intermixed_args(None if argv is None else list(argv))


def configure_cli_logging(args: argparse.Namespace) -> None:
    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.silent:
        level = logging.ERROR
    configure_logging(level=level, json_logs=args.log_json, logfile=args.log_file)


@contextlib.contextmanager
def _open_output(path: Optional[Path]) -> Iterator[BinaryIO]:
    if path is None:
        yield sys.stdout.buffer
        return
    with path.open("wb") as handle:
        yield handle


def main(argv: Optional[Iterable[str]] = None) -> int:
    load_environment()
    args = parse_args(argv)

    logger = logging.getLogger("minicurl.cli")
    try:
        configure_cli_logging(args)
    except OSError as exc:
        logger.error("Unable to open log file %s: %s", args.log_file, exc)
        return 1

    if args.extra_args:
        logger.warning("Ignoring extra arguments: %s", " ".join(args.extra_args))

    if not is_valid_url(args.url):
        logger.error("Invalid URL: %s", args.url)
        return 1
    if not is_valid_method(args.method):
        logger.error("Invalid method %s, expected one of %s", args.method, ", ".join(SUPPORTED_METHODS))
        return 1

    try:
        headers = parse_headers(args.headers or DEFAULT_HEADERS)
        config = config_from_env(args.max_time)
    except (MalformedHeaderError, ConfigError) as exc:
        logger.error("%s", exc)
        return 1

    try:
        with create_session(config) as session:
            with execute(session, args.method, args.url, headers, args.data) as response:
                with _open_output(args.output) as stream:
                    write_body(response, stream)
    except RequestError as exc:
        logger.error("Request failed: %s", exc)
        return 1
    except OSError as exc:
        logger.error("Unable to write response body: %s", exc)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
