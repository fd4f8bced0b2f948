"""Route constraint — turns a route match into a service root and parsed path.

The constraint runs after the router has matched the unescaped path. It
locates the escaped service root in the request URI, hands the escaped
pieces to a path handler, and reports the outcome as a value: ``Matched``
or ``NotMatched``. Resolver and handler failures mean "this route does
not match", never a hard fault.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeAlias

from svcroot.config import ResolverConfig
from svcroot.errors import BoundaryError, ConfigurationError, NotFound, PathParseError
from svcroot.escaping import unescape_data_string
from svcroot.routing.router import Router, catch_all_param
from svcroot.service_root import split_data_source, split_service_root
from svcroot.target import RequestTarget

logger = logging.getLogger("svcroot.routing")

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class PathHandler(Protocol):
    """Parses an escaped service root and path+query into a path object.

    Implementations raise ``PathParseError`` when the pair is rejected.
    """

    def parse(self, service_root: str, path_and_query: str) -> Any: ...


@dataclass(frozen=True, slots=True)
class ParsedPath:
    """Path handler output with no segment semantics attached."""

    service_root: str
    raw_path: str
    path: str
    query: str


class RawPathHandler:
    """Default path handler: normalizes the root and decodes the path.

    The service root always ends with a literal ``/``, which is why
    ``split_service_root`` trims a trailing ``%2F`` beforehand.
    """

    def parse(self, service_root: str, path_and_query: str) -> ParsedPath:
        if not service_root:
            raise PathParseError("Service root is empty.")
        if not service_root.endswith("/"):
            service_root += "/"
        raw_path, _, query = path_and_query.partition("?")
        if _BAD_ESCAPE_RE.search(raw_path):
            raise PathParseError(f"Malformed percent-escape in path {raw_path!r}.")
        return ParsedPath(
            service_root=service_root,
            raw_path=raw_path,
            path=unescape_data_string(raw_path),
            query=query,
        )


@dataclass(frozen=True, slots=True)
class RequestPathContext:
    """Everything the constraint worked out for one request.

    Passed along explicitly instead of being stashed on the request.
    """

    route_name: str
    service_root: str
    path_and_query: str
    resource_path: str
    data_source: str | None = None
    path_params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Matched:
    """The route matched; *path* is the handler's result."""

    path: Any
    context: RequestPathContext


@dataclass(frozen=True, slots=True)
class NotMatched:
    """The route does not match this request."""

    reason: str


MatchResult: TypeAlias = Matched | NotMatched


class PathRouteConstraint:
    """Service-root constraint for one named route.

    Usage::

        constraint = PathRouteConstraint("odata")
        result = constraint.match(target, {"path": "Products(1)"})
        if isinstance(result, Matched):
            result.context.service_root  # "http://localhost/odata/"
    """

    __slots__ = ("config", "handler", "route_name")

    def __init__(
        self,
        route_name: str,
        handler: PathHandler | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        self.route_name = route_name
        self.handler: PathHandler = handler or RawPathHandler()
        self.config = config or ResolverConfig()

    def match(self, target: RequestTarget, values: Mapping[str, Any]) -> MatchResult:
        """Resolve the service root for *target* and parse its path.

        *values* are the route values; ``values[config.path_param]`` is the
        unescaped resource path the router captured.
        """
        resource_path = values.get(self.config.path_param)
        if not isinstance(resource_path, str):
            return self._not_matched(f"Route value {self.config.path_param!r} is missing.")

        data_source = None
        if self.config.data_source_segment:
            data_source, resource_path = split_data_source(resource_path)

        try:
            split = split_service_root(
                target.left_part,
                target.query,
                resource_path,
                trim_escaped_slash=self.config.trim_escaped_slash,
                data_source=data_source,
            )
            path = self.handler.parse(split.service_root, split.path_and_query)
        except (BoundaryError, PathParseError) as exc:
            return self._not_matched(str(exc))

        context = RequestPathContext(
            route_name=self.route_name,
            service_root=split.service_root,
            path_and_query=split.path_and_query,
            resource_path=split.resource_path,
            data_source=split.data_source,
            path_params=dict(values),
        )
        logger.debug("Route %r matched %s (service root %s)", self.route_name, target.url, split.service_root)
        return Matched(path=path, context=context)

    def _not_matched(self, reason: str) -> NotMatched:
        logger.debug("Route %r did not match: %s", self.route_name, reason)
        return NotMatched(reason=reason)


def route_request(
    router: Router,
    constraints: Mapping[str, PathRouteConstraint],
    target: RequestTarget,
) -> MatchResult:
    """Match *target* against *router*, then run the matched route's constraint.

    *constraints* is keyed by ``ServiceRoute.key``. A route without a
    registered constraint gets a default one reading its ``{name:path}``
    value.

    Raises:
        ConfigurationError: The matched route has neither a registered
            constraint nor a ``{name:path}`` segment.
    """
    try:
        route_match = router.match(target.path)
    except NotFound as exc:
        logger.debug("No route for %s: %s", target.url, exc)
        return NotMatched(reason=str(exc))

    key = route_match.route.key
    constraint = constraints.get(key)
    if constraint is None:
        param = catch_all_param(route_match.route.path)
        if param is None:
            msg = f"Route {key!r} has no {{name:path}} segment and no registered constraint."
            raise ConfigurationError(msg)
        constraint = PathRouteConstraint(key, config=ResolverConfig(path_param=param))
    return constraint.match(target, route_match.path_params)
