"""
Seasonal climate estimate with a sun exposure boost

An empirical model of daytime highs from latitude and altitude, plus a
"feels like" boost for walls that face the midday sun. Not a radiative
transfer calculation.
"""

import logging
import math
from datetime import datetime
from typing import Optional

from models.config import EngineSettings
from models.exposure import MonthlyClimatePoint, SeasonalClimate, SunPosition
from models.topo import Route, Topo
from .constants import SolarConstants
from .core import SunPositionProvider
from .exposure import resolve_timezone
from .heading import HeadingResolver

logger = logging.getLogger(__name__)


class ClimateEstimator:
    """Estimates monthly base and feels-like temperatures for a wall"""

    def __init__(
        self, provider: SunPositionProvider, settings: Optional[EngineSettings] = None
    ):
        self.provider = provider
        self.settings = settings or EngineSettings()

    @staticmethod
    def yearly_mean(latitude: float, altitude: Optional[float] = None) -> float:
        """Yearly mean daytime temperature, lowered by the altitude lapse rate"""
        mean = (
            SolarConstants.MEAN_TEMP_AT_EQUATOR
            - SolarConstants.MEAN_TEMP_PER_DEGREE_LAT * abs(latitude)
        )
        if altitude:
            mean -= (altitude / 1000.0) * SolarConstants.LAPSE_RATE_PER_KM
        return mean

    @staticmethod
    def yearly_amplitude(latitude: float) -> float:
        return (
            SolarConstants.AMPLITUDE_BASE
            + SolarConstants.AMPLITUDE_PER_DEGREE_LAT * abs(latitude)
        )

    @staticmethod
    def base_temperature(
        month: int, latitude: float, altitude: Optional[float] = None
    ) -> float:
        """Cosine model: coldest at offset 0 (local winter), warmest at offset 6"""
        month_offset = (month + 6) % 12 if latitude < 0 else month
        return ClimateEstimator.yearly_mean(
            latitude, altitude
        ) - ClimateEstimator.yearly_amplitude(latitude) * math.cos(
            month_offset * math.pi / 6
        )

    def sun_boost(self, sun: SunPosition, target_azimuth: float) -> float:
        """Feels-like boost in °C, scaled by the incidence of the sun on the wall"""
        diff = HeadingResolver.facing_difference(sun.azimuth_from_south, target_azimuth)
        is_facing = diff < SolarConstants.FACING_LIMIT_RAD

        if not is_facing or math.degrees(sun.altitude) <= self.settings.boost_min_altitude_deg:
            return 0.0

        incidence = math.cos(sun.altitude) * math.cos(diff)
        return self.settings.max_sun_boost * max(0.0, incidence)

    def compute_seasonal_climate(
        self, topo: Topo, route: Optional[Route] = None, year: Optional[int] = None
    ) -> Optional[SeasonalClimate]:
        """Twelve monthly climate points, or None when the topo has no geodata"""
        if not topo.has_geodata:
            logger.debug(f"Topo '{topo.name}' has no geodata, skipping climate estimate")
            return None

        longitude, latitude = topo.coordinates
        tz = resolve_timezone(topo, self.settings)
        if year is None:
            year = datetime.now(tz).year

        heading = HeadingResolver.resolve_heading(topo, route)
        target_azimuth = HeadingResolver.target_azimuth(heading)

        months = []
        for month, label in enumerate(SolarConstants.MONTH_LABELS):
            base = self.base_temperature(month, latitude, topo.altitude)

            reference = tz.localize(
                datetime(
                    year,
                    month + 1,
                    self.settings.climate_reference_day,
                    self.settings.climate_reference_hour,
                    0,
                    0,
                )
            )
            sun = self.provider.position(reference, latitude, longitude)
            boost = self.sun_boost(sun, target_azimuth)

            months.append(
                MonthlyClimatePoint(
                    label=label,
                    base_temp=base,
                    feels_like_temp=base + boost,
                    sun_boost=boost,
                )
            )

        return SeasonalClimate(months=months, latitude=latitude)
