"""svcroot CLI — resolve service roots from the command line.

Entry point registered as ``svcroot`` in ``pyproject.toml``::

    [project.scripts]
    svcroot = "svcroot.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``svcroot`` command."""
    parser = argparse.ArgumentParser(
        prog="svcroot",
        description="svcroot — locate the escaped service root of a request URI.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=("debug", "info", "warning", "error"),
        help="Logging level (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- svcroot resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Split an escaped path at a resource path")
    resolve_parser.add_argument("uri", help="Escaped URI path (no query string)")
    resolve_parser.add_argument("resource_path", help="Unescaped resource path")

    # -- svcroot split ------------------------------------------------------
    split_parser = subparsers.add_parser("split", help="Route a URL and compute its service root")
    split_parser.add_argument("url", help="Absolute, escaped request URL")
    split_parser.add_argument(
        "--route",
        default="/odata/{path:path}",
        help="Route template with a {name:path} catch-all (default: /odata/{path:path})",
    )
    split_parser.add_argument(
        "--data-source",
        action="store_true",
        help="Treat the first resource-path segment as a data source name",
    )
    split_parser.add_argument(
        "--keep-escaped-slash",
        action="store_true",
        help="Keep a trailing %%2F on the service root",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "resolve":
        from svcroot.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "split":
        from svcroot.cli._split import run_split

        run_split(args)
