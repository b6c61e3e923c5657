"""
Utility modules for the crag sun exposure service
"""

from .solar import SunExposureEngine
from .topo_loader import TopoRepository, TopoNotFoundError
from .config_utils import ConfigManager

__all__ = [
    "SunExposureEngine",
    "TopoRepository",
    "TopoNotFoundError",
    "ConfigManager",
]
