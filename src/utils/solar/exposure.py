"""
Daily sun exposure sampling for a wall or route
"""

import logging
import math
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

import pytz

from models.config import EngineSettings
from models.exposure import (
    DailyExposure,
    ExposureChart,
    ExposureCondition,
    ExposureFrame,
    SunPosition,
)
from models.topo import Route, Topo
from .constants import SolarConstants
from .core import SunPositionProvider
from .heading import HeadingResolver

logger = logging.getLogger(__name__)


def resolve_timezone(topo: Topo, settings: EngineSettings):
    """pytz timezone of the topo, falling back to the configured default"""
    return pytz.timezone(topo.timezone or settings.default_timezone)


class ExposureSampler:
    """Scans one day of sun positions against a wall's facing direction"""

    def __init__(
        self, provider: SunPositionProvider, settings: Optional[EngineSettings] = None
    ):
        self.provider = provider
        self.settings = settings or EngineSettings()

    def classify(self, sun: SunPosition, target_azimuth: float) -> ExposureCondition:
        """Hourly classification: sunny, shady (up but facing away) or low light"""
        diff = HeadingResolver.facing_difference(sun.azimuth_from_south, target_azimuth)
        is_up = math.degrees(sun.altitude) > self.settings.coarse_altitude_gate_deg
        is_facing = diff < SolarConstants.FACING_LIMIT_RAD

        if is_up and is_facing:
            return ExposureCondition.SUNNY
        if is_up:
            return ExposureCondition.SHADY
        return ExposureCondition.LOW_LIGHT

    def is_in_sun(self, sun: SunPosition, target_azimuth: float) -> bool:
        """Fine-scan test used for the sun window text"""
        diff = HeadingResolver.facing_difference(sun.azimuth_from_south, target_azimuth)
        return (
            diff < SolarConstants.FACING_LIMIT_RAD
            and sun.altitude > self.settings.fine_altitude_gate_rad
        )

    def _hourly_frames(
        self, tz, day: date, latitude: float, longitude: float, target_azimuth: float
    ) -> List[ExposureFrame]:
        frames = []
        for hour in range(self.settings.scan_start_hour, self.settings.scan_end_hour + 1):
            timestamp = tz.localize(datetime.combine(day, time(hour, 0)))
            sun = self.provider.position(timestamp, latitude, longitude)

            condition = self.classify(sun, target_azimuth)
            color, text = SolarConstants.CONDITION_STYLES[condition.value]
            frames.append(
                ExposureFrame(
                    label=f"{hour}",
                    altitude_degrees=max(0.0, math.degrees(sun.altitude)),
                    color_tag=condition,
                    color=color,
                    condition_text=text,
                )
            )
        return frames

    def _sun_window(
        self, tz, day: date, latitude: float, longitude: float, target_azimuth: float
    ) -> Tuple[Optional[datetime], Optional[datetime]]:
        start = tz.localize(datetime.combine(day, time(self.settings.scan_start_hour, 0)))
        end = tz.localize(datetime.combine(day, time(self.settings.scan_end_hour, 0)))
        step = timedelta(minutes=self.settings.fine_step_minutes)

        sun_start = None
        sun_end = None
        timestamp = start
        while timestamp <= end:
            sun = self.provider.position(timestamp, latitude, longitude)
            if self.is_in_sun(sun, target_azimuth):
                if sun_start is None:
                    sun_start = timestamp
                sun_end = timestamp
            # step in absolute time so DST switches keep 15-minute spacing
            timestamp = tz.normalize(timestamp + step)

        return sun_start, sun_end

    def compute_daily_exposure(
        self, topo: Topo, route: Optional[Route] = None, today: Optional[date] = None
    ) -> DailyExposure:
        """
        Sun window text and hourly chart for ``today``

        Returns the "Keine Geodaten" sentinel with no chart when the topo has no
        coordinates. Provider errors propagate to the caller.
        """
        if not topo.has_geodata:
            logger.debug(f"Topo '{topo.name}' has no geodata, skipping exposure scan")
            return DailyExposure(hours_text=SolarConstants.NO_GEODATA_TEXT, chart=None)

        longitude, latitude = topo.coordinates
        tz = resolve_timezone(topo, self.settings)
        day = today or datetime.now(tz).date()

        heading = HeadingResolver.resolve_heading(topo, route)
        target_azimuth = HeadingResolver.target_azimuth(heading)

        frames = self._hourly_frames(tz, day, latitude, longitude, target_azimuth)
        sun_start, sun_end = self._sun_window(tz, day, latitude, longitude, target_azimuth)

        if sun_start is None:
            hours_text = SolarConstants.SHADOW_ALL_DAY_TEXT
        else:
            fmt = SolarConstants.TIME_FORMAT
            hours_text = f"{sun_start.strftime(fmt)} - {sun_end.strftime(fmt)}"

        logger.debug(
            f"Exposure for '{topo.name}' on {day.isoformat()} (heading {heading:.1f}°): {hours_text}"
        )
        return DailyExposure(
            hours_text=hours_text,
            chart=ExposureChart(frames=frames),
            sun_start=sun_start,
            sun_end=sun_end,
        )
