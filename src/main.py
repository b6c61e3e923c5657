"""
Crag Sun Exposure - Main Application Entry Point
"""

import asyncio
import logging
import os
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from api import root, topos
from utils.config_utils import ConfigManager
from utils.solar import SunExposureEngine
from utils.topo_loader import TopoRepository

# Load environment variables
ConfigManager.load_environment()

# Configure logging
logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO")),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Crag Sun Exposure service...")
    config = ConfigManager.load_service_config()
    if not ConfigManager.validate_environment(config):
        logger.warning("Topo entries are unavailable, topo lookups will return 404")

    # Inject services into API modules
    topos.set_services(
        TopoRepository(config.entries_dir), SunExposureEngine(settings=config.engine)
    )
    logger.info("Crag Sun Exposure service initialized successfully")

    yield

    logger.info("Shutting down Crag Sun Exposure service...")
    topos.set_services(None, None)


# Create FastAPI app
app = FastAPI(
    title="Crag Sun Exposure API",
    description="""
    Sun exposure and seasonal climate estimates for climbing walls.

    ## Features
    * Daily sun window per wall or route
    * Hourly sun/shadow chart
    * Monthly feels-like temperatures with sun boost
    * Compass direction of walls
    * Sun position vectors for 3D scenes

    ## Getting Started
    1. Use `/topos` to list available crag paths
    2. Get the sun window with `/topos/{crag_path}/sun`
    3. Get the best season with `/topos/{crag_path}/season`
    """,
    version="1.0.0",
    license_info={"name": "MIT License", "url": "https://opensource.org/licenses/MIT"},
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(root.router)
app.include_router(topos.router)


async def main():
    """Main application function"""
    config = ConfigManager.load_service_config()

    logger.info(f"Starting Crag Sun Exposure API on {config.api_host}:{config.api_port}")

    server_config = uvicorn.Config(
        app, host=config.api_host, port=config.api_port, log_level="info"
    )
    server = uvicorn.Server(server_config)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
