"""Service root composition around the boundary resolver.

Turns an escaped request left part (scheme, authority, path; no query)
plus the routed resource path into the two escaped strings a path
handler needs: the service root and the path+query remainder.
"""

from dataclasses import dataclass

from svcroot.escaping import strip_escaped_slash
from svcroot.resolver import resolve_boundary


@dataclass(frozen=True, slots=True)
class ServiceRootSplit:
    """Escaped service root and remainder for one request."""

    service_root: str
    path_and_query: str
    resource_path: str
    data_source: str | None = None


def split_data_source(resource_path: str) -> tuple[str, str]:
    """Split the leading data-source segment off a routed path.

    ``"northwind/Products(1)"`` -> ``("northwind", "Products(1)")``.
    A path without ``/`` is all data source with an empty remainder.
    """
    data_source, _, remainder = resource_path.partition("/")
    return data_source, remainder


def split_service_root(
    request_left_part: str,
    query: str,
    resource_path: str,
    *,
    trim_escaped_slash: bool = True,
    data_source: str | None = None,
) -> ServiceRootSplit:
    """Compute the escaped service root and path+query for a request.

    Args:
        request_left_part: Escaped URL up to and including the path.
        query: Escaped query string without the leading ``?``.
        resource_path: Unescaped resource path from routing. Empty for the
            service document.
        trim_escaped_slash: Drop a trailing ``%2F`` from the service root.
            Path handlers add a literal ``/`` to the root, which would
            otherwise double the separator in generated links.
        data_source: Carried through to the result unchanged.

    Raises:
        BoundaryError: The resource path cannot be located in the left part.
    """
    service_root = request_left_part
    if resource_path:
        service_root = resolve_boundary(request_left_part, resource_path)

    path_and_query = request_left_part[len(service_root) :]
    if query:
        path_and_query = f"{path_and_query}?{query}"

    if trim_escaped_slash:
        service_root = strip_escaped_slash(service_root)

    return ServiceRootSplit(
        service_root=service_root,
        path_and_query=path_and_query,
        resource_path=resource_path,
        data_source=data_source,
    )
