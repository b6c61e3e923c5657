"""
Solar exposure package for crag walls

This package estimates daily sun windows, hourly sun/shadow charts and
seasonal feels-like temperatures for climbing walls, using pvlib-python
for sun positions.
"""

from typing import Optional

from models.config import EngineSettings
from .climate import ClimateEstimator
from .constants import SolarConstants
from .core import (
    PvlibSunPositionProvider,
    StaticSunPositionProvider,
    SunPositionError,
    SunPositionProvider,
)
from .exposure import ExposureSampler
from .heading import HeadingResolver
from .vector import position_to_render_vector, sun_to_render_vector


class SunExposureEngine:
    """Bundles the exposure sampler and climate estimator over one provider"""

    def __init__(
        self,
        provider: Optional[SunPositionProvider] = None,
        settings: Optional[EngineSettings] = None,
    ):
        self.provider = provider or PvlibSunPositionProvider()
        self.settings = settings or EngineSettings()
        self.sampler = ExposureSampler(self.provider, self.settings)
        self.climate = ClimateEstimator(self.provider, self.settings)

    def resolve_heading(self, topo, route=None) -> float:
        return HeadingResolver.resolve_heading(topo, route)

    def label_direction(self, topo, route=None) -> str:
        return HeadingResolver.label_direction(topo, route)

    def compute_daily_exposure(self, topo, route=None, today=None):
        return self.sampler.compute_daily_exposure(topo, route, today)

    def compute_seasonal_climate(self, topo, route=None, year=None):
        return self.climate.compute_seasonal_climate(topo, route, year)

    def sun_to_render_vector(self, timestamp, latitude, longitude):
        return sun_to_render_vector(timestamp, latitude, longitude, self.provider)


__all__ = [
    "SunExposureEngine",
    "SunPositionProvider",
    "PvlibSunPositionProvider",
    "StaticSunPositionProvider",
    "SunPositionError",
    "HeadingResolver",
    "ExposureSampler",
    "ClimateEstimator",
    "SolarConstants",
    "sun_to_render_vector",
    "position_to_render_vector",
]
