"""ServiceRoute and RouteMatch frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route template.

    Static:    ``/odata``          (is_param=False)
    Param:     ``/{tenant}``       (is_param=True, param_name="tenant")
    Typed:     ``/{id:int}``       (is_param=True, param_name="id", param_type="int")
    Catch-all: ``/{path:path}``    (is_param=True, param_type="path")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"

    @property
    def is_catch_all(self) -> bool:
        return self.is_param and self.param_type == "path"


@dataclass(frozen=True, slots=True)
class ServiceRoute:
    """A frozen service route definition.

    The template's ``{...:path}`` segment captures the unescaped resource path.
    """

    path: str
    name: str | None = None

    @property
    def key(self) -> str:
        """Name used to look up the route's constraint."""
        return self.name or self.path


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: ServiceRoute
    path_params: dict[str, str | int | float]
