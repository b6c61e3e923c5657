"""
Sun position to 3D sky-sphere coordinates for scene placement
"""

import math
from datetime import datetime
from typing import Optional, Tuple

from models.exposure import SunPosition
from .constants import SolarConstants
from .core import PvlibSunPositionProvider, SunPositionProvider


def position_to_render_vector(
    sun: SunPosition, radius: float = SolarConstants.SKY_SPHERE_RADIUS
) -> Tuple[float, float, float]:
    """Point on a sky sphere in a Y-up, Z-south, X-east frame"""
    zenith = math.pi / 2 - sun.altitude
    azimuth = sun.azimuth_from_south
    return (
        -radius * math.sin(zenith) * math.sin(azimuth),
        radius * math.cos(zenith),
        radius * math.sin(zenith) * math.cos(azimuth),
    )


def sun_to_render_vector(
    timestamp: datetime,
    latitude: float,
    longitude: float,
    provider: Optional[SunPositionProvider] = None,
    radius: float = SolarConstants.SKY_SPHERE_RADIUS,
) -> Tuple[float, float, float]:
    """Sky-sphere position of the sun at ``timestamp`` for a 3D scene"""
    provider = provider or PvlibSunPositionProvider()
    sun = provider.position(timestamp, latitude, longitude)
    return position_to_render_vector(sun, radius)
