"""Tests for svcroot.target — RequestTarget factories and URL parts."""

import pytest

from svcroot.target import RequestTarget


def _scope(**overrides: object) -> dict[str, object]:
    scope: dict[str, object] = {
        "type": "http",
        "scheme": "http",
        "path": "/odata/Products",
        "raw_path": b"/odata/Products",
        "query_string": b"",
        "headers": [(b"host", b"localhost")],
        "server": ("127.0.0.1", 8000),
    }
    scope.update(overrides)
    return scope


class TestFromUrl:
    def test_parts(self) -> None:
        target = RequestTarget.from_url("http://localhost:8080/odata/Caf%C3%A9?$top=1")
        assert target.scheme == "http"
        assert target.host == "localhost:8080"
        assert target.raw_path == "/odata/Caf%C3%A9"
        assert target.path == "/odata/Café"
        assert target.query == "$top=1"

    def test_left_part_excludes_query(self) -> None:
        target = RequestTarget.from_url("https://example.com/odata/Items?$skip=2")
        assert target.left_part == "https://example.com/odata/Items"
        assert target.url == "https://example.com/odata/Items?$skip=2"

    def test_escaped_slash_decoded_in_path_only(self) -> None:
        target = RequestTarget.from_url("http://h/odata/nw%2FItems")
        assert target.path == "/odata/nw/Items"
        assert target.raw_path == "/odata/nw%2FItems"

    def test_invalid_utf8_escape_kept_in_path(self) -> None:
        target = RequestTarget.from_url("http://h/odata/a%E8")
        assert target.path == "/odata/a%E8"

    def test_empty_path(self) -> None:
        target = RequestTarget.from_url("http://h")
        assert target.raw_path == "/"

    def test_relative_url_rejected(self) -> None:
        with pytest.raises(ValueError, match="absolute URL"):
            RequestTarget.from_url("/odata/Items")


class TestFromScope:
    def test_host_header(self) -> None:
        target = RequestTarget.from_scope(_scope(scheme="https", headers=[(b"host", b"example.com")]))
        assert target.left_part == "https://example.com/odata/Products"

    def test_raw_path_kept_escaped(self) -> None:
        target = RequestTarget.from_scope(
            _scope(path="/odata/Café", raw_path=b"/odata/Caf%c3%a9", query_string=b"$top=1")
        )
        assert target.raw_path == "/odata/Caf%c3%a9"
        assert target.path == "/odata/Café"
        assert target.url == "http://localhost/odata/Caf%c3%a9?$top=1"

    def test_server_with_port(self) -> None:
        target = RequestTarget.from_scope(_scope(headers=[]))
        assert target.host == "127.0.0.1:8000"

    def test_server_default_port_omitted(self) -> None:
        target = RequestTarget.from_scope(_scope(headers=[], server=("example.com", 80)))
        assert target.host == "example.com"

    def test_no_host_information(self) -> None:
        target = RequestTarget.from_scope(_scope(headers=[], server=None))
        assert target.host == "localhost"

    def test_default_scheme(self) -> None:
        scope = _scope()
        del scope["scheme"]
        target = RequestTarget.from_scope(scope, default_scheme="https")
        assert target.scheme == "https"

    def test_missing_raw_path_requoted(self) -> None:
        scope = _scope(path="/odata/a b/Café")
        del scope["raw_path"]
        target = RequestTarget.from_scope(scope)
        assert target.raw_path == "/odata/a%20b/Caf%C3%A9"
