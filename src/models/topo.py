"""
Pydantic models for topo (crag wall) records
"""

from typing import Optional, List, Tuple
import pytz
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Route(BaseModel):
    """A single route on a topo wall"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Route identifier, unique within the topo")
    name: Optional[str] = Field(default=None, description="Route name")
    orientation: Optional[Tuple[float, float, float]] = Field(
        default=None,
        description="Direction vector (x, y, z) in the wall's local model space",
    )


class Topo(BaseModel):
    """A climbing wall with its geodata and routes"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Optional[str] = Field(default=None, description="Wall name")
    description: Optional[str] = Field(default=None, description="Wall description")
    author: Optional[str] = Field(default=None, description="Author of the topo")
    coordinates: Optional[Tuple[float, float]] = Field(
        default=None, description="(longitude, latitude); (0, 0) means no geodata"
    )
    wall_azimuth: float = Field(
        default=0.0,
        alias="wallAzimuth",
        description="Base rotation of the 3D wall model in degrees",
    )
    altitude: Optional[float] = Field(
        default=None, description="Altitude above sea level in metres"
    )
    timezone: Optional[str] = Field(
        default=None, description="IANA timezone of the crag (e.g. 'Europe/Vienna')"
    )
    routes: List[Route] = Field(default_factory=list, description="Routes on the wall")

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {value}")
        return value

    @property
    def has_geodata(self) -> bool:
        """True unless coordinates are missing or the (0, 0) sentinel"""
        if not self.coordinates:
            return False
        return not (self.coordinates[0] == 0 and self.coordinates[1] == 0)

    @property
    def longitude(self) -> Optional[float]:
        return self.coordinates[0] if self.coordinates else None

    @property
    def latitude(self) -> Optional[float]:
        return self.coordinates[1] if self.coordinates else None

    def find_route(self, route_id: str) -> Optional[Route]:
        """Get a route by id, or None"""
        return next((route for route in self.routes if route.id == route_id), None)


class TopoMeta(BaseModel):
    """Page metadata for a topo or route page"""

    lang: str = Field(default="de", description="Content language")
    title: str = Field(..., description="Page title")
    description: Optional[str] = Field(default=None, description="Page description")
    type: str = Field(default="article", description="Content type")
    author: Optional[str] = Field(default=None, description="Content author")


class TopoPage(BaseModel):
    """A resolved crag path: the topo and, for route pages, the route"""

    path: str = Field(..., description="Crag path of the topo (without route id)")
    topo: Topo = Field(..., description="The loaded topo")
    route: Optional[Route] = Field(default=None, description="Selected route, if any")
    meta: TopoMeta = Field(..., description="Page metadata")
