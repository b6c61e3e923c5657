"""
Configuration management utilities for the crag sun service
"""

import logging
import os
from dotenv import load_dotenv

from models.config import EngineSettings, ServiceConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Utility class for managing configuration and environment setup"""

    @staticmethod
    def load_environment():
        """Load environment variables from .env file"""
        load_dotenv()

    @staticmethod
    def load_engine_settings() -> EngineSettings:
        """Engine settings with environment overrides applied"""
        overrides = {}

        coarse_gate = os.getenv("SUN_COARSE_ALTITUDE_GATE_DEG")
        fine_gate = os.getenv("SUN_FINE_ALTITUDE_GATE_RAD")
        default_tz = os.getenv("DEFAULT_TIMEZONE")

        if coarse_gate:
            overrides["coarse_altitude_gate_deg"] = float(coarse_gate)
        if fine_gate:
            overrides["fine_altitude_gate_rad"] = float(fine_gate)
        if default_tz:
            overrides["default_timezone"] = default_tz

        return EngineSettings(**overrides)

    @staticmethod
    def load_service_config() -> ServiceConfig:
        """Service configuration from environment variables"""
        config = ServiceConfig(
            entries_dir=os.getenv("TOPO_ENTRIES_DIR", "entries"),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", 8000)),
            engine=ConfigManager.load_engine_settings(),
        )
        logger.info(f"Loaded service configuration: {ConfigManager.get_config_summary(config)}")
        return config

    @staticmethod
    def validate_environment(config: ServiceConfig) -> bool:
        """Validate that the topo entries directory exists"""
        if not os.path.isdir(config.entries_dir):
            logger.error(f"Topo entries directory not found: {config.entries_dir}")
            return False

        return True

    @staticmethod
    def get_config_summary(config: ServiceConfig) -> dict:
        """Get a summary of the current configuration for logging/debugging"""
        return {
            "entries_dir": config.entries_dir,
            "default_timezone": config.engine.default_timezone,
            "coarse_altitude_gate_deg": config.engine.coarse_altitude_gate_deg,
            "fine_altitude_gate_rad": config.engine.fine_altitude_gate_rad,
        }
