"""svcroot — locate the escaped service root of a request URI.

Routing works on unescaped paths, but service roots have to be reported
exactly as they appeared on the wire. svcroot finds where the routed
resource path begins in the escaped URI path.

Basic usage::

    from svcroot import resolve_boundary

    resolve_boundary(
        "http://localhost/odata/FunctionCall(p0='Chinese%E8%A5%BF%E9%9B%85%E5%9B%BEChars')",
        "FunctionCall(p0='Chinese西雅图Chars')",
    )
    # -> "http://localhost/odata/"

Route constraint::

    from svcroot import PathRouteConstraint, RequestTarget

    target = RequestTarget.from_url("http://localhost/odata/Products(1)?$top=2")
    result = PathRouteConstraint("odata").match(target, {"path": "Products(1)"})
"""

__version__ = "0.1.0-dev"
__all__ = [
    "BoundaryError",
    "BoundaryNotFound",
    "ConfigurationError",
    "HTTPError",
    "MalformedInput",
    "Matched",
    "NotFound",
    "NotMatched",
    "PathParseError",
    "PathRouteConstraint",
    "RequestTarget",
    "ResolverConfig",
    "Router",
    "ServiceRoute",
    "ServiceRootSplit",
    "SvcrootError",
    "resolve_boundary",
    "route_request",
    "split_service_root",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import svcroot`` fast while providing a clean top-level API.
    """
    if name == "resolve_boundary":
        from svcroot.resolver import resolve_boundary

        return resolve_boundary

    if name in ("ServiceRootSplit", "split_service_root"):
        from svcroot import service_root as _root

        return getattr(_root, name)

    if name == "ResolverConfig":
        from svcroot.config import ResolverConfig

        return ResolverConfig

    if name == "RequestTarget":
        from svcroot.target import RequestTarget

        return RequestTarget

    if name == "Router":
        from svcroot.routing.router import Router

        return Router

    if name == "ServiceRoute":
        from svcroot.routing.route import ServiceRoute

        return ServiceRoute

    if name in ("Matched", "NotMatched", "PathRouteConstraint", "route_request"):
        from svcroot.routing import constraint as _constraint

        return getattr(_constraint, name)

    if name in (
        "BoundaryError",
        "BoundaryNotFound",
        "ConfigurationError",
        "HTTPError",
        "MalformedInput",
        "NotFound",
        "PathParseError",
        "SvcrootError",
    ):
        from svcroot import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
