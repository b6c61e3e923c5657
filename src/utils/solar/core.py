"""
Sun position providers

Every engine component reads sun positions through ``SunPositionProvider``,
in the south-referenced convention: azimuth in radians measured clockwise
from south towards west, altitude in radians above the horizon.
"""

import logging
import math
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Optional

import pandas as pd
from pvlib import solarposition

from models.exposure import SunPosition

logger = logging.getLogger(__name__)


class SunPositionError(ValueError):
    """Raised when a sun position cannot be computed"""


class SunPositionProvider(ABC):
    """Source of sun positions for a timestamp and location"""

    @abstractmethod
    def position(
        self, timestamp: datetime, latitude: float, longitude: float
    ) -> SunPosition:
        """Get the sun position at ``timestamp`` for the given location"""


class PvlibSunPositionProvider(SunPositionProvider):
    """Sun positions from pvlib's solar position algorithms"""

    def __init__(self, method: str = "nrel_numpy"):
        self.method = method

    @staticmethod
    def _validate(latitude: float, longitude: float) -> None:
        if latitude is None or not -90.0 <= latitude <= 90.0:
            raise SunPositionError(f"Invalid latitude: {latitude}")
        if longitude is None or not -180.0 <= longitude <= 180.0:
            raise SunPositionError(f"Invalid longitude: {longitude}")

    def position(
        self, timestamp: datetime, latitude: float, longitude: float
    ) -> SunPosition:
        self._validate(latitude, longitude)

        # pvlib treats naive timestamps as UTC; make that explicit
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        times = pd.DatetimeIndex([pd.Timestamp(timestamp)])
        solpos = solarposition.get_solarposition(
            times, latitude, longitude, method=self.method
        )

        azimuth = float(solpos["azimuth"].iat[0])
        elevation = float(solpos["elevation"].iat[0])
        if not (math.isfinite(azimuth) and math.isfinite(elevation)):
            raise SunPositionError(
                f"No sun position for {timestamp.isoformat()} at ({latitude}, {longitude})"
            )

        # pvlib azimuth is clockwise from north in degrees
        return SunPosition(
            azimuth_from_south=math.radians(azimuth - 180.0),
            altitude=math.radians(elevation),
        )


class StaticSunPositionProvider(SunPositionProvider):
    """Provider returning fixed or computed positions, for tests and previews

    Either pass a constant ``azimuth_from_south``/``altitude`` pair, or a
    ``func(timestamp, latitude, longitude) -> SunPosition``.
    """

    def __init__(
        self,
        azimuth_from_south: float = 0.0,
        altitude: float = 0.0,
        func: Optional[Callable[[datetime, float, float], SunPosition]] = None,
    ):
        self._fixed = SunPosition(azimuth_from_south=azimuth_from_south, altitude=altitude)
        self._func = func
        self.calls = 0

    def position(
        self, timestamp: datetime, latitude: float, longitude: float
    ) -> SunPosition:
        self.calls += 1
        if self._func is not None:
            return self._func(timestamp, latitude, longitude)
        return self._fixed
