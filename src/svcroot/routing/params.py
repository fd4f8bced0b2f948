"""Route template converters.

Each ``{name:type}`` segment of a service route names one of these.
``path`` is the catch-all that hands the resource path to the route
constraint, so it is the only converter that accepts ``/`` or nothing.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from svcroot.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Converter:
    """How one segment type is matched and turned into a route value."""

    pattern: str
    to_python: Callable[[str], str | int | float]
    catch_all: bool = False

    def compile(self) -> re.Pattern[str]:
        return re.compile(f"^{self.pattern}$")


CONVERTERS: dict[str, Converter] = {
    "str": Converter(r"[^/]+", str),
    "int": Converter(r"\d+", int),
    "float": Converter(r"\d+(?:\.\d+)?", float),
    "path": Converter(r".*", str, catch_all=True),
}


def get_converter(param_type: str, route_path: str) -> Converter:
    """Look up the converter for *param_type*.

    Raises ``ConfigurationError`` naming *route_path* for unknown types.
    """
    try:
        return CONVERTERS[param_type]
    except KeyError:
        msg = f"Route {route_path!r}: unknown converter {param_type!r}."
        raise ConfigurationError(msg) from None
