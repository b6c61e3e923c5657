"""
Wall heading resolution and compass direction labels
"""

import logging
import math
from typing import Iterable, Optional, Tuple

from models.topo import Route, Topo
from .constants import SolarConstants

logger = logging.getLogger(__name__)


class HeadingResolver:
    """Turns a topo's model rotation and route vectors into a compass heading"""

    @staticmethod
    def average_orientation(
        routes: Iterable[Route],
    ) -> Optional[Tuple[float, float, float]]:
        """Component-wise mean of all route orientation vectors, or None"""
        sum_x = sum_y = sum_z = 0.0
        count = 0
        for route in routes:
            if route.orientation is None:
                continue
            x, y, z = route.orientation
            sum_x += x
            sum_y += y
            sum_z += z
            count += 1

        if count == 0:
            return None
        return (sum_x / count, sum_y / count, sum_z / count)

    @staticmethod
    def resolve_heading(topo: Topo, route: Optional[Route] = None) -> float:
        """
        Compass heading of a wall or route in degrees, in [0, 360)

        The orientation vector lives in the wall model's local space, so it is
        rotated by -wall_azimuth around the up axis before reading the heading.
        World -Z is north (0°) and +X is east (90°). The y component is ignored.
        """
        wall_azimuth = topo.wall_azimuth or 0.0

        orientation = route.orientation if route is not None else None
        if orientation is None:
            orientation = HeadingResolver.average_orientation(topo.routes)

        if orientation is None:
            logger.debug(
                f"No orientation vectors for topo '{topo.name}', using wall azimuth {wall_azimuth}"
            )
            return wall_azimuth % 360.0

        x, _, z = orientation
        theta = math.radians(-wall_azimuth)
        rx = x * math.cos(theta) - z * math.sin(theta)
        rz = x * math.sin(theta) + z * math.cos(theta)

        heading = math.degrees(math.atan2(rx, -rz))
        if heading < 0:
            heading += 360.0
        # -0.0 and float noise right below 0 can round up to 360.0
        return heading % 360.0

    @staticmethod
    def direction_index(heading: float) -> int:
        """Index into COMPASS_DIRECTIONS, rounding half up like Math.round"""
        step = SolarConstants.DIRECTION_STEP_DEGREES
        return int(math.floor(heading / step + 0.5)) % len(
            SolarConstants.COMPASS_DIRECTIONS
        )

    @staticmethod
    def label_direction(topo: Topo, route: Optional[Route] = None) -> str:
        """German compass label (Nord, Nord-Ost, ...) of a wall or route"""
        heading = HeadingResolver.resolve_heading(topo, route)
        return SolarConstants.COMPASS_DIRECTIONS[HeadingResolver.direction_index(heading)]

    @staticmethod
    def target_azimuth(heading: float) -> float:
        """Heading converted to the south-referenced azimuth in radians"""
        return math.radians(heading - 180.0)

    @staticmethod
    def facing_difference(sun_azimuth: float, target_azimuth: float) -> float:
        """Angular distance between sun and wall azimuths, wrapped to [0, pi]"""
        diff = abs(sun_azimuth - target_azimuth)
        if diff > math.pi:
            diff = 2 * math.pi - diff
        return diff
