"""Tests for svcroot.routing.router — compiled trie-based router."""

import pytest

from svcroot.errors import ConfigurationError, NotFound
from svcroot.routing.params import CONVERTERS, get_converter
from svcroot.routing.route import ServiceRoute
from svcroot.routing.router import Router, catch_all_param, parse_path


def _router(*paths: str) -> Router:
    r = Router()
    for path in paths:
        r.add(ServiceRoute(path))
    r.compile()
    return r


class TestParsePath:
    def test_static(self) -> None:
        segments = parse_path("/odata")
        assert len(segments) == 1
        assert segments[0].value == "odata"
        assert segments[0].is_param is False

    def test_catch_all(self) -> None:
        segments = parse_path("/odata/{path:path}")
        assert segments[1].is_param is True
        assert segments[1].param_name == "path"
        assert segments[1].param_type == "path"

    def test_param(self) -> None:
        segments = parse_path("/{tenant}/odata/{path:path}")
        assert segments[0].param_name == "tenant"
        assert segments[0].param_type == "str"

    def test_root(self) -> None:
        assert parse_path("/") == []

    def test_rejects_angle_bracket_param(self) -> None:
        with pytest.raises(ConfigurationError, match=r"<param>"):
            parse_path("/odata/<path>")

    def test_rejects_unknown_converter(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown converter"):
            parse_path("/odata/{id:uuid}")

    def test_catch_all_must_be_last(self) -> None:
        with pytest.raises(ConfigurationError, match="must be last"):
            parse_path("/odata/{path:path}/more")


class TestCatchAll:
    def test_resource_path(self) -> None:
        match = _router("/odata/{path:path}").match("/odata/Products(1)")
        assert match.path_params == {"path": "Products(1)"}

    def test_multi_segment(self) -> None:
        match = _router("/odata/{path:path}").match("/odata/Customers(1)/Orders")
        assert match.path_params == {"path": "Customers(1)/Orders"}

    def test_verbatim_remainder(self) -> None:
        match = _router("/odata/{path:path}").match("/odata/a//b/")
        assert match.path_params == {"path": "a//b/"}

    def test_service_document_trailing_slash(self) -> None:
        match = _router("/odata/{path:path}").match("/odata/")
        assert match.path_params == {"path": ""}

    def test_service_document_no_trailing_slash(self) -> None:
        match = _router("/odata/{path:path}").match("/odata")
        assert match.path_params == {"path": ""}

    def test_root_catch_all(self) -> None:
        match = _router("/{path:path}").match("/Products")
        assert match.path_params == {"path": "Products"}


class TestParams:
    def test_str_param(self) -> None:
        match = _router("/{tenant}/odata/{path:path}").match("/acme/odata/People")
        assert match.path_params == {"tenant": "acme", "path": "People"}

    def test_int_param_converted(self) -> None:
        match = _router("/api/{version:int}/{path:path}").match("/api/4/People")
        assert match.path_params == {"version": 4, "path": "People"}

    def test_static_beats_param(self) -> None:
        r = Router()
        r.add(ServiceRoute("/admin/odata/{path:path}", name="admin"))
        r.add(ServiceRoute("/{tenant}/odata/{path:path}", name="tenant"))
        r.compile()
        assert r.match("/admin/odata/X").route.name == "admin"
        assert r.match("/acme/odata/X").route.name == "tenant"

    def test_static_route_trailing_slash(self) -> None:
        match = _router("/health").match("/health/")
        assert match.route.path == "/health"


class TestRouterErrors:
    def test_not_found(self) -> None:
        with pytest.raises(NotFound) as exc_info:
            _router("/odata/{path:path}").match("/other/Products")
        assert exc_info.value.status == 404
        assert "/other/Products" in exc_info.value.detail

    def test_add_after_compile(self) -> None:
        r = _router("/odata/{path:path}")
        with pytest.raises(RuntimeError, match="after compilation"):
            r.add(ServiceRoute("/v2/{path:path}"))


class TestRoutes:
    def test_lists_all(self) -> None:
        r = _router("/odata/{path:path}", "/{tenant}/odata/{path:path}", "/health")
        assert {route.path for route in r.routes} == {
            "/odata/{path:path}",
            "/{tenant}/odata/{path:path}",
            "/health",
        }

    def test_key_defaults_to_path(self) -> None:
        assert ServiceRoute("/odata/{path:path}").key == "/odata/{path:path}"
        assert ServiceRoute("/odata/{path:path}", name="odata").key == "odata"


class TestCatchAllParam:
    def test_named(self) -> None:
        assert catch_all_param("/api/{version:int}/{rest:path}") == "rest"

    def test_absent(self) -> None:
        assert catch_all_param("/health") is None


class TestConverters:
    def test_only_path_is_catch_all(self) -> None:
        assert [name for name, conv in CONVERTERS.items() if conv.catch_all] == ["path"]

    def test_path_accepts_empty_and_slashes(self) -> None:
        regex = CONVERTERS["path"].compile()
        assert regex.match("")
        assert regex.match("a/b")

    def test_str_rejects_slash(self) -> None:
        assert CONVERTERS["str"].compile().match("a/b") is None

    def test_float(self) -> None:
        assert CONVERTERS["float"].to_python("1.5") == 1.5

    def test_unknown(self) -> None:
        with pytest.raises(ConfigurationError, match=r"'/x/\{id:uuid\}': unknown converter 'uuid'"):
            get_converter("uuid", "/x/{id:uuid}")
