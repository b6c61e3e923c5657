"""
Pydantic models for configuration data
"""

import pytz
from pydantic import BaseModel, Field, field_validator, model_validator


class EngineSettings(BaseModel):
    """Tunable constants of the exposure and climate engine"""

    coarse_altitude_gate_deg: float = Field(
        default=5.0, description="Minimum altitude (degrees) for an hourly frame to count as up"
    )
    fine_altitude_gate_rad: float = Field(
        default=0.1, description="Minimum altitude (radians) for the 15-minute sun window"
    )
    scan_start_hour: int = Field(default=6, ge=0, le=23, description="First scanned hour")
    scan_end_hour: int = Field(default=21, ge=0, le=23, description="Last scanned hour")
    fine_step_minutes: int = Field(
        default=15, gt=0, description="Step of the sun window scan in minutes"
    )
    climate_reference_hour: int = Field(
        default=13, ge=0, le=23, description="Local hour used for the monthly sun boost"
    )
    climate_reference_day: int = Field(
        default=15, ge=1, le=28, description="Day of month used for the monthly sun boost"
    )
    boost_min_altitude_deg: float = Field(
        default=10.0, description="Minimum altitude (degrees) for any sun boost"
    )
    max_sun_boost: float = Field(
        default=15.0, ge=0, description="Sun boost in °C at perpendicular incidence"
    )
    default_timezone: str = Field(
        default="Europe/Vienna", description="Timezone for topos without one"
    )

    @field_validator("default_timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        if value not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {value}")
        return value

    @model_validator(mode="after")
    def check_scan_hours(self):
        if self.scan_end_hour < self.scan_start_hour:
            raise ValueError(
                f"scan_end_hour ({self.scan_end_hour}) is before scan_start_hour ({self.scan_start_hour})"
            )
        return self


class ServiceConfig(BaseModel):
    """Service configuration"""

    entries_dir: str = Field(
        default="entries", description="Root directory of the per-crag topo records"
    )
    api_host: str = Field(default="0.0.0.0", description="API bind host")
    api_port: int = Field(default=8000, description="API bind port")
    engine: EngineSettings = Field(
        default_factory=EngineSettings, description="Engine settings"
    )
