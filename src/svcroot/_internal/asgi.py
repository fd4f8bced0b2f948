"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed
dataclass for internal use. Users never see these.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Raw ASGI type (matching the spec)
Scope: TypeAlias = MutableMapping[str, Any]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from raw ASGI scope dict.

    Only the parts that locate the request URI are kept.
    """

    type: str
    scheme: str | None
    path: str
    raw_path: bytes
    query_string: bytes
    headers: tuple[tuple[bytes, bytes], ...]
    server: tuple[str, int | None] | None

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        server = scope.get("server")
        return cls(
            type=scope["type"],
            scheme=scope.get("scheme"),
            path=scope["path"],
            raw_path=scope.get("raw_path") or b"",
            query_string=scope.get("query_string", b""),
            headers=tuple(scope.get("headers", ())),
            server=tuple(server) if server else None,
        )

    def header(self, name: bytes) -> bytes | None:
        """First value of header *name* (lowercase bytes), or None."""
        for key, value in self.headers:
            if key.lower() == name:
                return value
        return None
