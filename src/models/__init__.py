"""
Package initialization for models
"""

# API models (for FastAPI)
from .api import (
    EntriesResponse,
    ExposureChartInfo,
    SunInfoResponse,
    SeasonResponse,
    SunVectorResponse,
)

# Topo records
from .topo import (
    Route,
    Topo,
    TopoMeta,
    TopoPage,
)

# Exposure and climate results
from .exposure import (
    SunPosition,
    ExposureCondition,
    ExposureFrame,
    ExposureChart,
    DailyExposure,
    MonthlyClimatePoint,
    SeasonalClimate,
)

# Configuration models
from .config import (
    EngineSettings,
    ServiceConfig,
)

__all__ = [
    # API models
    "EntriesResponse",
    "ExposureChartInfo",
    "SunInfoResponse",
    "SeasonResponse",
    "SunVectorResponse",
    # Topo models
    "Route",
    "Topo",
    "TopoMeta",
    "TopoPage",
    # Exposure models
    "SunPosition",
    "ExposureCondition",
    "ExposureFrame",
    "ExposureChart",
    "DailyExposure",
    "MonthlyClimatePoint",
    "SeasonalClimate",
    # Config models
    "EngineSettings",
    "ServiceConfig",
]
