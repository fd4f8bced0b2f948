"""svcroot exception hierarchy.

Shared across the resolver, router, constraint, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class SvcrootError(Exception):
    """Base for all svcroot-specific errors."""


class ConfigurationError(SvcrootError):
    """Raised when resolver configuration or a route template is invalid.

    Typically raised at construction time, before any request is seen.
    """


@dataclass(frozen=True, slots=True)
class BoundaryError(SvcrootError):
    """The escaped URI path and the unescaped resource path are inconsistent.

    Carries both inputs so callers can report exactly what failed to line up.
    Never retried: the same pair always fails the same way.
    """

    uri_string: str
    path_string: str

    reason = "Resource path does not line up with the URI path"

    def __str__(self) -> str:
        return f"{self.reason}. The URI is {self.uri_string!r}, and the resource path is {self.path_string!r}."


class MalformedInput(BoundaryError):  # noqa: N818 — mirrors the failure it names
    """The resource path is not shorter than the URI path by at least one separator."""

    reason = "Request URI is too short for the resource path"


class BoundaryNotFound(BoundaryError):  # noqa: N818 — mirrors the failure it names
    """No literal or escaped ``/`` splits the URI path so the tail unescapes to the resource path."""

    reason = "The resource path is not found"


class PathParseError(SvcrootError):
    """Raised by a path handler that rejects a service root / path+query pair."""


@dataclass(frozen=True, slots=True)
class HTTPError(SvcrootError):
    """An error that maps directly to an HTTP status code.

    Raised by the router. A host framework translates it into a response.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
