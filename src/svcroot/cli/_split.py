"""``svcroot split`` — route a URL and show its service root.

Matches the URL's unescaped path against a single route template, then
runs the route constraint and prints the escaped pieces it produced.
"""

import argparse
import sys

from svcroot.config import ResolverConfig
from svcroot.errors import ConfigurationError
from svcroot.routing.constraint import Matched, PathRouteConstraint, route_request
from svcroot.routing.route import ServiceRoute
from svcroot.routing.router import Router, catch_all_param
from svcroot.target import RequestTarget


def run_split(args: argparse.Namespace) -> None:
    """Resolve ``args.url`` against ``args.route`` and print a field table."""
    try:
        param = catch_all_param(args.route)
        target = RequestTarget.from_url(args.url)
    except (ConfigurationError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if param is None:
        print(f"Error: route {args.route!r} has no {{name:path}} segment.", file=sys.stderr)
        raise SystemExit(1)

    config = ResolverConfig(
        path_param=param,
        data_source_segment=args.data_source,
        trim_escaped_slash=not args.keep_escaped_slash,
    )
    route = ServiceRoute(args.route, name="cli")
    router = Router()
    router.add(route)
    router.compile()

    result = route_request(router, {route.key: PathRouteConstraint(route.key, config=config)}, target)
    if not isinstance(result, Matched):
        print(f"Error: {result.reason}", file=sys.stderr)
        raise SystemExit(1)

    ctx = result.context
    rows = [
        ("service_root", ctx.service_root),
        ("path_and_query", ctx.path_and_query),
        ("resource_path", ctx.resource_path),
    ]
    if ctx.data_source is not None:
        rows.append(("data_source", ctx.data_source))

    width = max(len(name) for name, _ in rows)
    for name, value in rows:
        print(f"{name:<{width}}  {value}")
