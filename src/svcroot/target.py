"""Request target — the escaped and unescaped views of one request URI."""

from dataclasses import dataclass
from urllib.parse import quote, urlsplit

from svcroot._internal.asgi import HTTPScope, Scope
from svcroot.escaping import unescape_data_string

_DEFAULT_PORTS = {"http": 80, "https": 443}

# Characters a server leaves unescaped in a path (RFC 3986 pchar plus "/").
_PATH_SAFE = "/:@!$&'()*+,;="


@dataclass(frozen=True, slots=True)
class RequestTarget:
    """A request URI split into the parts the route constraint needs.

    ``path`` is unescaped (what routing sees); ``raw_path`` and ``query``
    are escaped exactly as received.
    """

    scheme: str
    host: str
    path: str
    raw_path: str
    query: str = ""

    @property
    def left_part(self) -> str:
        """Escaped URL through the path, without the query string."""
        return f"{self.scheme}://{self.host}{self.raw_path}"

    @property
    def url(self) -> str:
        """Full escaped URL (left part + query string)."""
        if self.query:
            return f"{self.left_part}?{self.query}"
        return self.left_part

    # -- Factories --

    @classmethod
    def from_scope(cls, scope: Scope, default_scheme: str = "http") -> "RequestTarget":
        """Create a RequestTarget from an ASGI HTTP scope."""
        http = HTTPScope.from_scope(scope)
        scheme = http.scheme or default_scheme

        host_header = http.header(b"host")
        if host_header:
            host = host_header.decode("latin-1")
        elif http.server:
            name, port = http.server
            host = name if port in (None, _DEFAULT_PORTS.get(scheme)) else f"{name}:{port}"
        else:
            host = "localhost"

        if http.raw_path:
            raw_path = http.raw_path.decode("latin-1")
        else:
            raw_path = quote(http.path, safe=_PATH_SAFE)

        return cls(
            scheme=scheme,
            host=host,
            path=http.path,
            raw_path=raw_path,
            query=http.query_string.decode("latin-1"),
        )

    @classmethod
    def from_url(cls, url: str) -> "RequestTarget":
        """Create a RequestTarget from an absolute, escaped URL."""
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            msg = f"Expected an absolute URL, got {url!r}"
            raise ValueError(msg)
        raw_path = parts.path or "/"
        return cls(
            scheme=parts.scheme,
            host=parts.netloc,
            path=unescape_data_string(raw_path),
            raw_path=raw_path,
            query=parts.query,
        )
