"""Parsing of ``Key: Value`` header strings supplied on the command line."""

from __future__ import annotations

from collections.abc import Iterable

from requests.structures import CaseInsensitiveDict

__all__ = ["MalformedHeaderError", "parse_header", "parse_headers"]


class MalformedHeaderError(ValueError):
    """Raised when a raw header string has no ``:`` separator."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Malformed header {raw!r}: expected 'Key: Value'")
        self.raw = raw


def parse_header(raw: str) -> tuple[str, str]:
    """Split ``raw`` on its first colon into ``(key, value)``.

    The key is returned untouched. Leading spaces are stripped from the
    value; any further colons stay part of it.
    """

    key, separator, value = raw.partition(":")
    if not separator:
        raise MalformedHeaderError(raw)
    return key, value.lstrip(" ")


def parse_headers(raws: Iterable[str]) -> CaseInsensitiveDict:
    headers: CaseInsensitiveDict = CaseInsensitiveDict()
    for raw in raws:
        key, value = parse_header(raw)
        # Later duplicates win, matching header "set" semantics.
        headers[key] = value
    return headers
