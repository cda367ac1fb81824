from __future__ import annotations

"""Input validation helpers for the minicurl CLI."""

import re
from urllib.parse import urlsplit

__all__ = ["SUPPORTED_METHODS", "is_valid_url", "is_valid_method"]

SUPPORTED_METHODS: tuple[str, ...] = ("GET", "POST")

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
# ASCII control characters never appear in a request URI.
CONTROL_CHAR_PATTERN = re.compile(r"[\x00-\x1f\x7f]")


def is_valid_url(candidate: str) -> bool:
    """Return ``True`` when ``candidate`` is usable as a request URI.

    Accepts absolute URIs with a scheme and absolute paths. A bare
    hostname such as ``example.com`` has neither and is rejected, as is a
    host containing spaces or a non-numeric port.
    """

    if not candidate or CONTROL_CHAR_PATTERN.search(candidate):
        return False
    if candidate.startswith("/"):
        return True
    try:
        parts = urlsplit(candidate)
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError:
        return False
    if not parts.scheme or SCHEME_PATTERN.match(parts.scheme) is None:
        return False
    # urlsplit strips leading blanks; the scheme must open the string.
    if not candidate.startswith(f"{parts.scheme}:"):
        return False
    return " " not in parts.netloc


def is_valid_method(method: str) -> bool:
    return method in SUPPORTED_METHODS
