"""``svcroot resolve`` — run the boundary resolver on two strings."""

import argparse
import sys

from svcroot.errors import BoundaryError
from svcroot.resolver import resolve_boundary


def run_resolve(args: argparse.Namespace) -> None:
    """Print the escaped prefix of ``args.uri`` before ``args.resource_path``."""
    try:
        prefix = resolve_boundary(args.uri, args.resource_path)
    except BoundaryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(prefix)
