"""
Constants for wall direction labels, exposure chart and climate model
"""


class SolarConstants:
    """Constants used throughout the solar calculation package"""

    # Compass direction labels, clockwise from north in 45° steps
    COMPASS_DIRECTIONS = [
        "Nord",
        "Nord-Ost",
        "Ost",
        "Süd-Ost",
        "Süd",
        "Süd-West",
        "West",
        "Nord-West",
    ]
    DIRECTION_STEP_DEGREES = 45.0

    MONTH_LABELS = [
        "Jan",
        "Feb",
        "Mär",
        "Apr",
        "Mai",
        "Jun",
        "Jul",
        "Aug",
        "Sep",
        "Okt",
        "Nov",
        "Dez",
    ]

    # Display strings
    NO_GEODATA_TEXT = "Keine Geodaten"
    SHADOW_ALL_DAY_TEXT = "Schatten den ganzen Tag"
    TIME_FORMAT = "%H:%M"

    # Exposure condition -> (chart colour, condition text)
    CONDITION_STYLES = {
        "sunny": ("#fbbf24", "Sonne"),
        "shady": ("#9ca3af", "Schatten"),
        "low-light": ("#e5e7eb", "Tiefstehende Sonne"),
    }

    # Wall faces the sun within +/- 90° of its target azimuth
    FACING_LIMIT_RAD = 1.5707963267948966

    # Climate model coefficients (daytime highs, tuned for climbing comfort)
    MEAN_TEMP_AT_EQUATOR = 48.0  # °C
    MEAN_TEMP_PER_DEGREE_LAT = 0.7  # °C per degree |latitude|
    LAPSE_RATE_PER_KM = 6.5  # °C per 1000 m altitude
    AMPLITUDE_BASE = 5.0  # °C
    AMPLITUDE_PER_DEGREE_LAT = 0.2  # °C per degree |latitude|

    # Radius of the sky sphere used for 3D sun placement
    SKY_SPHERE_RADIUS = 15.0
