"""
Pydantic models for FastAPI requests and responses
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field

from models.exposure import ExposureFrame, MonthlyClimatePoint
from models.topo import TopoMeta


class EntriesResponse(BaseModel):
    """All crag paths that resolve to a topo or route page"""

    entries: List[str] = Field(..., description="Crag paths, including route pages")


class ExposureChartInfo(BaseModel):
    """Hourly chart series, both per-frame and column-wise"""

    frames: List[ExposureFrame] = Field(..., description="One frame per sampled hour")
    labels: List[str] = Field(..., description="Hour labels")
    altitudes: List[float] = Field(..., description="Sun altitude in degrees (>= 0)")
    colors: List[str] = Field(..., description="Chart colours")
    conditions: List[str] = Field(..., description="Condition texts")
    sunny_hours: int = Field(..., description="Number of sunny hourly frames")


class SunInfoResponse(BaseModel):
    """Daily sun exposure of a wall or route"""

    path: str = Field(..., description="Crag path of the topo")
    route_id: Optional[str] = Field(default=None, description="Selected route, if any")
    heading: float = Field(..., ge=0, lt=360, description="Compass heading in degrees")
    direction: str = Field(..., description="Compass direction label")
    hours: str = Field(..., description="Sun window text")
    chart: Optional[ExposureChartInfo] = Field(
        default=None, description="Hourly chart, absent without geodata"
    )
    meta: TopoMeta = Field(..., description="Page metadata")


class SeasonResponse(BaseModel):
    """Monthly base and feels-like temperatures of a wall or route"""

    path: str = Field(..., description="Crag path of the topo")
    route_id: Optional[str] = Field(default=None, description="Selected route, if any")
    latitude: Optional[float] = Field(default=None, description="Latitude of the topo")
    labels: List[str] = Field(default_factory=list, description="Month labels")
    base_temps: List[float] = Field(default_factory=list, description="Base temperatures")
    feels_like_temps: List[float] = Field(
        default_factory=list, description="Feels-like temperatures"
    )
    months: Optional[List[MonthlyClimatePoint]] = Field(
        default=None, description="Monthly points, absent without geodata"
    )


class SunVectorResponse(BaseModel):
    """Sun position on the 3D sky sphere"""

    timestamp: datetime = Field(..., description="Timestamp of the sun position")
    x: float = Field(..., description="East component")
    y: float = Field(..., description="Up component")
    z: float = Field(..., description="South component")
