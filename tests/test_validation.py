from __future__ import annotations

import pytest

from minicurl.validation import is_valid_method, is_valid_url


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        ("http://voyagegroup.com", True),
        ("https://example.com:8443/path?q=1", True),
        ("http://127.0.0.1:8080", True),
        ("/relative/path", True),
        ("voyagegroup.com", False),
        ("     \\\\", False),
        ("", False),
        ("http://exa mple.com", False),
        ("http://[::1", False),
        ("1http://example.com", False),
        ("http://example.com/a b", True),
        ("http://example.com/?q=a b", True),
        ("http://example.com:abc/", False),
        ("http://example.com:70000/", False),
        (" http://example.com", False),
        ("http://example.com/\x7f", False),
    ],
)
def test_is_valid_url(candidate: str, expected: bool) -> None:
    assert is_valid_url(candidate) is expected


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("GET", True),
        ("POST", True),
        ("PIYOPIYO", False),
        ("PATCH", False),
        ("get", False),
        ("", False),
    ],
)
def test_is_valid_method(method: str, expected: bool) -> None:
    assert is_valid_method(method) is expected
