"""Resolver configuration.

ResolverConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from svcroot.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Route constraint configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(data_source_segment=True, trim_escaped_slash=False)
    """

    # Route value holding the unescaped resource path
    path_param: str = "path"

    # First resource-path segment names a data source (dynamic model routing)
    data_source_segment: bool = False

    # Drop a trailing %2F from the service root; path handlers append a literal "/"
    trim_escaped_slash: bool = True

    def __post_init__(self) -> None:
        if not self.path_param:
            msg = "path_param must name a route value, got an empty string."
            raise ConfigurationError(msg)
        if "/" in self.path_param or "{" in self.path_param:
            msg = f"path_param must be a plain route value name, got {self.path_param!r}."
            raise ConfigurationError(msg)
