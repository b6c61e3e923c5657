"""
Root API endpoints for health checks and documentation
"""

import pvlib
from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from api import topos

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root():
    """Redirect root to API documentation"""
    return RedirectResponse(url="/docs")


@router.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint

    Reports whether the topo repository and exposure engine are wired up,
    and which pvlib release computes the sun positions.
    """
    ready = topos.repository is not None and topos.engine is not None
    return {
        "status": "healthy" if ready else "starting",
        "service": "Crag Sun Exposure",
        "pvlib_version": pvlib.__version__,
    }
