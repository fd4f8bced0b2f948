"""Compiled router with trie-based path matching.

Matches the *unescaped* request path, the form routing always works on.
The catch-all segment hands the rest of that path, verbatim, to the
route constraint as the resource path.
"""

import re
from dataclasses import dataclass

from svcroot.errors import ConfigurationError, NotFound
from svcroot.routing.params import Converter, get_converter
from svcroot.routing.route import PathSegment, RouteMatch, ServiceRoute


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route template into segments.

    Examples::

        "/odata/{path:path}"          -> [PathSegment("odata"), PathSegment("{path:path}", ...)]
        "/{tenant}/odata/{path:path}" -> [PathSegment("{tenant}", is_param=True, ...), ...]

    Raises ``ConfigurationError`` for ``<param>`` placeholders, unknown
    converters, and a catch-all that is not the last segment.
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = f"Route {path!r} uses <param> syntax; use {{param}} instead."
            raise ConfigurationError(msg)
        if segments and segments[-1].is_catch_all:
            msg = f"Route {path!r}: a {{name:path}} segment must be last."
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            get_converter(param_type, path)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


def catch_all_param(path: str) -> str | None:
    """Name of the template's ``{name:path}`` segment, or None if it has none."""
    for seg in parse_path(path):
        if seg.is_catch_all:
            return seg.param_name or "path"
    return None


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("catch_all", "children", "param_child", "route")

    def __init__(self) -> None:
        # Static segment children: "odata" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param pattern per level)
        self.param_child: _ParamEdge | None = None
        # Catch-all route (path converter)
        self.catch_all: _CatchAllEdge | None = None
        # Route ending exactly at this node
        self.route: ServiceRoute | None = None


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    converter: Converter
    regex: re.Pattern[str]
    node: _TrieNode


@dataclass(slots=True)
class _CatchAllEdge:
    """A catch-all (path) edge — consumes the remaining path."""

    param_name: str
    route: ServiceRoute


class Router:
    """Compiled router with trie-based path matching.

    Usage::

        router = Router()
        router.add(ServiceRoute("/odata/{path:path}", name="odata"))
        router.compile()
        match = router.match("/odata/Products(1)")
        match.path_params  # {"path": "Products(1)"}
    """

    __slots__ = ("_compiled", "_root")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._compiled = False

    def add(self, route: ServiceRoute) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        segments = parse_path(route.path)
        node = self._root

        for seg in segments:
            if seg.is_catch_all:
                # Catch-all: consumes rest of path, always the last segment
                node.catch_all = _CatchAllEdge(param_name=seg.param_name or "path", route=route)
                return

            if seg.is_param:
                if node.param_child is None:
                    converter = get_converter(seg.param_type, route.path)
                    node.param_child = _ParamEdge(
                        param_name=seg.param_name or "",
                        converter=converter,
                        regex=converter.compile(),
                        node=_TrieNode(),
                    )
                node = node.param_child.node
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        node.route = route

    @property
    def routes(self) -> list[ServiceRoute]:
        """Return all registered routes, in trie order."""
        result: list[ServiceRoute] = []
        self._collect_routes(self._root, result)
        return result

    def _collect_routes(self, node: _TrieNode, result: list[ServiceRoute]) -> None:
        if node.route is not None:
            result.append(node.route)
        if node.catch_all is not None:
            result.append(node.catch_all.route)
        for child in node.children.values():
            self._collect_routes(child, result)
        if node.param_child is not None:
            self._collect_routes(node.param_child.node, result)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, path: str) -> RouteMatch:
        """Match an unescaped request path against compiled routes.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        """
        # Keep empty segments: the catch-all must see the path verbatim.
        parts = path.removeprefix("/").split("/")
        result = self._match_node(self._root, parts, 0, {})
        if result is None:
            raise NotFound(f"No route matches {path!r}")
        route, params = result
        return RouteMatch(route=route, path_params=params)

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str | int | float],
    ) -> tuple[ServiceRoute, dict[str, str | int | float]] | None:
        """Recursively match path parts against the trie."""
        # All parts consumed, or only a trailing "/" left
        if index == len(parts) or (index == len(parts) - 1 and parts[index] == ""):
            if node.route is not None:
                return node.route, params
            if node.catch_all is not None:
                remaining = "/".join(parts[index:])
                return node.catch_all.route, {**params, node.catch_all.param_name: remaining}
            return None

        part = parts[index]

        # 1. Try static child first (exact match)
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        # 2. Try parameter child
        if node.param_child is not None:
            edge = node.param_child
            if edge.regex.match(part):
                value = edge.converter.to_python(part)
                result = self._match_node(edge.node, parts, index + 1, {**params, edge.param_name: value})
                if result is not None:
                    return result

        # 3. Try catch-all
        if node.catch_all is not None:
            remaining = "/".join(parts[index:])
            return node.catch_all.route, {**params, node.catch_all.param_name: remaining}

        return None
