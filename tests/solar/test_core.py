"""
Tests for the sun position providers
"""

import math
from datetime import datetime

import pytest
import pytz

from models.exposure import SunPosition
from utils.solar.core import (
    PvlibSunPositionProvider,
    StaticSunPositionProvider,
    SunPositionError,
)


class TestPvlibSunPositionProvider:
    """Test cases for the pvlib-backed provider"""

    @pytest.fixture
    def provider(self):
        return PvlibSunPositionProvider()

    def test_solar_noon_is_near_south(self, provider):
        """At solar noon the south-referenced azimuth is close to zero"""
        # Solar noon at 11.3°E is about 11:17 UTC at the June solstice
        timestamp = pytz.utc.localize(datetime(2024, 6, 21, 11, 17))

        sun = provider.position(timestamp, 47.3, 11.3)

        assert abs(math.degrees(sun.azimuth_from_south)) < 3.0
        assert math.degrees(sun.altitude) == pytest.approx(90 - 47.3 + 23.44, abs=1.0)

    def test_morning_sun_is_east(self, provider):
        """Morning azimuths are negative (east of south)"""
        timestamp = pytz.timezone("Europe/Vienna").localize(datetime(2024, 6, 21, 8, 0))

        sun = provider.position(timestamp, 47.3, 11.3)

        assert -math.pi < sun.azimuth_from_south < 0
        assert sun.altitude > 0

    def test_afternoon_sun_is_west(self, provider):
        """Afternoon azimuths are positive (west of south)"""
        timestamp = pytz.timezone("Europe/Vienna").localize(datetime(2024, 6, 21, 17, 0))

        sun = provider.position(timestamp, 47.3, 11.3)

        assert 0 < sun.azimuth_from_south < math.pi

    def test_naive_timestamp_is_utc(self, provider):
        """Naive timestamps are read as UTC"""
        naive = provider.position(datetime(2024, 3, 1, 12, 0), 47.3, 11.3)
        aware = provider.position(pytz.utc.localize(datetime(2024, 3, 1, 12, 0)), 47.3, 11.3)

        assert naive == aware

    @pytest.mark.parametrize(
        "latitude,longitude", [(91.0, 11.3), (-90.5, 11.3), (47.3, 181.0), (None, 11.3)]
    )
    def test_invalid_coordinates(self, provider, latitude, longitude):
        """Out-of-range coordinates raise SunPositionError"""
        with pytest.raises(SunPositionError):
            provider.position(datetime(2024, 3, 1, 12, 0), latitude, longitude)

    def test_error_is_value_error(self):
        """SunPositionError can be handled as a ValueError"""
        assert issubclass(SunPositionError, ValueError)


class TestStaticSunPositionProvider:
    """Test cases for the test double"""

    def test_fixed_position(self):
        provider = StaticSunPositionProvider(azimuth_from_south=0.2, altitude=0.4)

        sun = provider.position(datetime(2024, 1, 1), 0.0, 0.0)

        assert sun == SunPosition(azimuth_from_south=0.2, altitude=0.4)
        assert provider.calls == 1

    def test_callable_position(self):
        provider = StaticSunPositionProvider(
            func=lambda timestamp, lat, lng: SunPosition(
                azimuth_from_south=lng / 100, altitude=lat / 100
            )
        )

        sun = provider.position(datetime(2024, 1, 1), 47.0, 11.0)

        assert sun.altitude == pytest.approx(0.47)
        assert sun.azimuth_from_south == pytest.approx(0.11)
