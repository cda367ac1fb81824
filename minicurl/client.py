"""Request executors built on a caller-supplied ``requests`` session.

Executors never terminate the process. Every failure, whether the request
could not be built or the transport broke, surfaces as :class:`RequestError`
and the caller decides what to do with it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import BinaryIO, Optional

import requests
from requests import Response
from requests import exceptions as requests_exceptions

from .config import ClientConfig

LOGGER = logging.getLogger(__name__)

ENCODING = "utf-8"
CHUNK_SIZE = 8192


class RequestError(RuntimeError):
    """Raised when a request cannot be constructed or sent."""


def create_session(config: ClientConfig) -> requests.Session:
    """Construct a ``requests`` session carrying the configured defaults."""

    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent})
    session.request = _timeout_wrapper(session.request, config.timeout)  # type: ignore[assignment]
    return session


def _timeout_wrapper(original_request, timeout: Optional[float]):  # type: ignore[no-untyped-def]
    """Wrap ``Session.request`` to inject a default timeout."""

    def wrapper(method: str, url: str, **kwargs):  # type: ignore[no-untyped-def]
        if "timeout" not in kwargs:
            kwargs["timeout"] = timeout
        return original_request(method, url, **kwargs)

    return wrapper


def _encode_headers(headers: Mapping[str, str]) -> dict[str, bytes]:
    # http.client would encode str values as latin-1 and reject anything else.
    return {key: value.encode(ENCODING) for key, value in headers.items()}


def send(
    session: requests.Session,
    method: str,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[str] = None,
) -> Response:
    """Issue one request and return the unread, streaming response.

    The caller owns the response and must close it, preferably with a
    ``with`` block.
    """

    headers = headers or {}
    data = body.encode(ENCODING) if body is not None else None
    LOGGER.info("Sending %s %s", method, url)
    LOGGER.debug("Request headers: %s", dict(headers))
    try:
        response = session.request(
            method,
            url,
            headers=_encode_headers(headers),
            data=data,
            stream=True,
        )
    except (requests_exceptions.RequestException, ValueError) as exc:
        raise RequestError(f"{method} {url} failed: {exc}") from exc
    LOGGER.info("HTTP %s received from %s", response.status_code, response.url)
    LOGGER.debug("Response headers: %s", dict(response.headers))
    return response


def write_body(response: Response, stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> int:
    """Drain the response body into ``stream`` as raw bytes."""

    written = 0
    try:
        for chunk in response.iter_content(chunk_size=chunk_size):
            stream.write(chunk)
            written += len(chunk)
    except requests_exceptions.RequestException as exc:
        raise RequestError(f"Failed reading response from {response.url}: {exc}") from exc
    stream.flush()
    LOGGER.debug("Wrote %d body bytes", written)
    return written


def get(session: requests.Session, url: str, headers: Optional[Mapping[str, str]] = None) -> Response:
    return send(session, "GET", url, headers)


def post(
    session: requests.Session,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    body: str = "",
) -> Response:
    return send(session, "POST", url, headers, body)


def execute(
    session: requests.Session,
    method: str,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[str] = None,
) -> Response:
    """Dispatch to :func:`get` or :func:`post` by method name."""

    if method == "GET":
        if body is not None:
            LOGGER.warning("Ignoring request body for GET %s", url)
        return get(session, url, headers)
    if method == "POST":
        return post(session, url, headers, body or "")
    raise RequestError(f"Unsupported method {method!r}")


__all__ = [
    "RequestError",
    "create_session",
    "execute",
    "get",
    "post",
    "send",
    "write_body",
]
