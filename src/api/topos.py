"""
Topo sun exposure API endpoints
"""

import logging
from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import ValidationError

from models.api import (
    EntriesResponse,
    ExposureChartInfo,
    SeasonResponse,
    SunInfoResponse,
    SunVectorResponse,
)
from models.topo import TopoPage
from utils.solar import SunExposureEngine, SunPositionError
from utils.topo_loader import TopoNotFoundError, TopoRepository

logger = logging.getLogger(__name__)

router = APIRouter()

# These will be injected by main.py
repository: Optional[TopoRepository] = None
engine: Optional[SunExposureEngine] = None


def set_services(repository_instance, engine_instance):
    """Set the topo repository and exposure engine"""
    global repository, engine
    repository = repository_instance
    engine = engine_instance


def _require_services():
    if not repository or not engine:
        raise HTTPException(status_code=503, detail="Service not initialized")


def _load_page(crag_path: str) -> TopoPage:
    try:
        return repository.load(crag_path)
    except TopoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"Error loading topo {crag_path}: {e}")
        raise HTTPException(status_code=500, detail=f"Could not load topo: {e}")


@router.get("/topos", response_model=EntriesResponse, tags=["Topos"])
def list_entries():
    """
    List all crag paths

    Every topo contributes its own path plus one path per route.
    """
    _require_services()
    return {"entries": repository.entries()}


@router.get(
    "/topos/{crag_path:path}/sun", response_model=SunInfoResponse, tags=["Sun Exposure"]
)
def get_sun_info(
    crag_path: str,
    day: Optional[date] = Query(default=None, alias="date"),
):
    """
    Get the daily sun window and hourly sun/shadow chart of a wall or route

    **Parameters:**
    * **crag_path**: Topo path, optionally ending in a route id
    * **date**: Day to scan (defaults to today in the crag's timezone)
    """
    _require_services()
    page = _load_page(crag_path)

    try:
        exposure = engine.compute_daily_exposure(page.topo, page.route, day)
    except SunPositionError as e:
        logger.error(f"Sun position failed for {crag_path}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    chart = None
    if exposure.chart is not None:
        chart = ExposureChartInfo(
            frames=exposure.chart.frames,
            labels=exposure.chart.labels,
            altitudes=exposure.chart.altitudes,
            colors=exposure.chart.colors,
            conditions=exposure.chart.conditions,
            sunny_hours=exposure.chart.sunny_hours,
        )

    return SunInfoResponse(
        path=page.path,
        route_id=page.route.id if page.route else None,
        heading=engine.resolve_heading(page.topo, page.route),
        direction=engine.label_direction(page.topo, page.route),
        hours=exposure.hours_text,
        chart=chart,
        meta=page.meta,
    )


@router.get(
    "/topos/{crag_path:path}/season", response_model=SeasonResponse, tags=["Climate"]
)
def get_season(crag_path: str, year: Optional[int] = Query(default=None, ge=1, le=9999)):
    """
    Get monthly base and feels-like temperatures of a wall or route

    Topos without geodata return an empty series.
    """
    _require_services()
    page = _load_page(crag_path)

    try:
        climate = engine.compute_seasonal_climate(page.topo, page.route, year)
    except SunPositionError as e:
        logger.error(f"Sun position failed for {crag_path}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    route_id = page.route.id if page.route else None
    if climate is None:
        return SeasonResponse(path=page.path, route_id=route_id)

    return SeasonResponse(
        path=page.path,
        route_id=route_id,
        latitude=climate.latitude,
        labels=climate.labels,
        base_temps=climate.base_temps,
        feels_like_temps=climate.feels_like_temps,
        months=climate.months,
    )


@router.get("/sun/vector", response_model=SunVectorResponse, tags=["Sun Exposure"])
def get_sun_vector(
    lat: float = Query(...),
    lng: float = Query(...),
    timestamp: Optional[datetime] = Query(default=None),
):
    """Get the sun's position on the 3D sky sphere (Y up, Z south, X east)"""
    _require_services()
    timestamp = timestamp or datetime.now(timezone.utc)

    try:
        x, y, z = engine.sun_to_render_vector(timestamp, lat, lng)
    except SunPositionError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return SunVectorResponse(timestamp=timestamp, x=x, y=y, z=z)
