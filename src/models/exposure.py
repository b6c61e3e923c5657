"""
Pydantic models for sun exposure and seasonal climate results
"""

from datetime import datetime
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field


class SunPosition(BaseModel):
    """Sun position in the south-referenced convention (radians)"""

    model_config = ConfigDict(frozen=True)

    azimuth_from_south: float = Field(
        ..., description="Azimuth in radians, clockwise from south towards west"
    )
    altitude: float = Field(..., description="Altitude above the horizon in radians")


class ExposureCondition(str, Enum):
    """Sun/shadow state of a wall at a sampled hour"""

    SUNNY = "sunny"
    SHADY = "shady"
    LOW_LIGHT = "low-light"


class ExposureFrame(BaseModel):
    """One hourly sample of the exposure chart"""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Hour label, e.g. '13'")
    altitude_degrees: float = Field(..., ge=0, description="Sun altitude, clamped to >= 0")
    color_tag: ExposureCondition = Field(..., description="Exposure classification")
    color: str = Field(..., description="Chart colour for the classification")
    condition_text: str = Field(..., description="Localized condition text")


class ExposureChart(BaseModel):
    """Hourly chart series for a day"""

    model_config = ConfigDict(frozen=True)

    frames: List[ExposureFrame] = Field(..., description="One frame per sampled hour")

    @property
    def labels(self) -> List[str]:
        return [frame.label for frame in self.frames]

    @property
    def altitudes(self) -> List[float]:
        return [frame.altitude_degrees for frame in self.frames]

    @property
    def colors(self) -> List[str]:
        return [frame.color for frame in self.frames]

    @property
    def conditions(self) -> List[str]:
        return [frame.condition_text for frame in self.frames]

    @property
    def sunny_hours(self) -> int:
        return sum(
            1 for frame in self.frames if frame.color_tag == ExposureCondition.SUNNY
        )


class DailyExposure(BaseModel):
    """Sun window text and hourly chart for one day"""

    model_config = ConfigDict(frozen=True)

    hours_text: str = Field(..., description="Sun window, e.g. '09:15 - 14:45'")
    chart: Optional[ExposureChart] = Field(
        default=None, description="Hourly chart, None without geodata"
    )
    sun_start: Optional[datetime] = Field(
        default=None, description="First sampled timestamp in sun"
    )
    sun_end: Optional[datetime] = Field(
        default=None, description="Last sampled timestamp in sun"
    )


class MonthlyClimatePoint(BaseModel):
    """Estimated temperatures for one month"""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Month abbreviation")
    base_temp: float = Field(..., description="Base daytime temperature in °C")
    feels_like_temp: float = Field(..., description="Base temperature plus sun boost")
    sun_boost: float = Field(default=0.0, ge=0, description="Added solar heating in °C")


class SeasonalClimate(BaseModel):
    """Twelve monthly climate points, January to December"""

    model_config = ConfigDict(frozen=True)

    months: List[MonthlyClimatePoint] = Field(..., description="Jan..Dec")
    latitude: float = Field(..., description="Latitude the estimate was made for")

    @property
    def labels(self) -> List[str]:
        return [month.label for month in self.months]

    @property
    def base_temps(self) -> List[float]:
        return [month.base_temp for month in self.months]

    @property
    def feels_like_temps(self) -> List[float]:
        return [month.feels_like_temp for month in self.months]
