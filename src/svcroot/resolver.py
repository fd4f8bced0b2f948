"""Path boundary resolution — split an escaped URI path at the resource path.

Routing hands over the resource path *unescaped*, but the service root has
to be reported exactly as it appears on the wire. Unescaping is not
invertible (hex-digit case, needlessly escaped characters, Unicode
corrections), so the resource path is never re-escaped for comparison.
Instead the escaped path is cut at candidate separators and only the
candidate tail is unescaped and compared.

Assumptions about the URI path:

1. The resource path is always the last portion of the path.
2. A ``/`` (or an escaped ``%2F``) separates it from what comes before.
3. Apart from %-escape sequences, the escaped path and the routing string
   are identical.
"""

from svcroot.errors import BoundaryNotFound, MalformedInput
from svcroot.escaping import last_escaped_slash_index, last_slash_index, unescape_data_string


def resolve_boundary(uri_string: str, path_string: str) -> str:
    """Return the prefix of *uri_string* that precedes *path_string*.

    The prefix keeps the separator (``/`` or all three characters of an
    escaped ``%2F``) and is the longest one for which the rest of
    *uri_string* unescapes to exactly *path_string*.

    Examples::

        resolve_boundary("http://host/odata/Items", "Items")
        # -> "http://host/odata/"
        resolve_boundary("http://host/odata/a%2Fb%20c", "b c")
        # -> "http://host/odata/a%2F"

    Raises:
        MalformedInput: *path_string* cannot fit after a separator in *uri_string*.
        BoundaryNotFound: No separator gives an exact match.
    """
    # Potential index of the separator, assuming nothing in the tail was escaped.
    end_index = len(uri_string) - len(path_string) - 1
    if end_index <= 0:
        raise MalformedInput(uri_string, path_string)

    start_string = uri_string[: end_index + 1]
    if uri_string[end_index + 1 :] == path_string:
        # No escaping in the resource path portion.
        return start_string

    while True:
        slash_index = last_slash_index(start_string, end_index)
        escaped_slash_index = last_escaped_slash_index(start_string, end_index)
        if slash_index > escaped_slash_index:
            end_index = slash_index
        elif escaped_slash_index >= 0:
            # The escaped separator (three characters) stays in the prefix.
            end_index = escaped_slash_index + 2
        else:
            raise BoundaryNotFound(uri_string, path_string)

        start_string = uri_string[: end_index + 1]
        # Unescaped comparison ignores arbitrary escaping and lowercase hex digits.
        if unescape_data_string(uri_string[end_index + 1 :]) == path_string:
            return start_string

        if end_index == 0:
            raise BoundaryNotFound(uri_string, path_string)
