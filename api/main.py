"""Quake Forecast API - FastAPI service.

Serves observed events from USGS together with synthetic predictions
(aftershocks, seismic gaps, swarm escalations) for map and list clients.
"""

import logging
import os
import random
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from src.core.catalog import TIME_RANGES, EventFilter
from src.core.config import Config
from src.core.event import Event, event_from_dict
from src.core.formatter import filter_by_search, merge_with_predictions
from src.core.prediction import generate_predictions, summarize_predictions
from src.shell.config_loader import load_config
from src.shell.usgs_client import DataUnavailableError, USGSClient

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Quake Forecast API",
    description="Observed USGS earthquakes with illustrative synthetic predictions",
    version="1.0.0",
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:3001",
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# ===== Request Models =====

class EventIn(BaseModel):
    id: str
    location: str = "Unknown Location"
    coordinates: tuple[float, float]
    magnitude: float
    depth: float = Field(default=0.0, ge=0)
    time: datetime
    alertLevel: str = "Green"
    isPredicted: bool = False


class PredictionRequest(BaseModel):
    events: list[EventIn] = Field(default_factory=list)
    now: datetime | None = None
    seed: int | None = None


# ===== Shared State =====

_usgs_client = USGSClient()
_config: Config | None = None


def _get_config() -> Config:
    """Load configuration once per process."""
    global _config
    if _config is None:
        _config = load_config(os.environ.get("CONFIG_PATH"))
    return _config


# ===== Helper Functions =====

def _build_filter(min_magnitude: float, time_range: str) -> EventFilter:
    """Build a catalog filter or raise 400."""
    try:
        return EventFilter(min_magnitude=min_magnitude, time_range=time_range)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _fetch_events(event_filter: EventFilter, now: datetime) -> list[Event]:
    """Fetch observed events or raise 502."""
    try:
        return _usgs_client.fetch_events(
            event_filter, now=now, limit=_get_config().fetch_limit,
        )
    except DataUnavailableError:
        logger.exception("Failed to fetch from USGS")
        raise HTTPException(status_code=502, detail="Failed to fetch earthquake data")


def _predict(events: list[Event], now: datetime, seed: int | None) -> list[Event]:
    config = _get_config()
    if seed is None:
        seed = config.random_seed
    return generate_predictions(
        events,
        now,
        rng=random.Random(seed),
        settings=config.prediction,
        zones=config.high_risk_zones,
    )


def _to_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


# ===== Public Endpoints =====

@app.get("/api-earthquakes")
async def get_earthquakes(
    min_magnitude: float = Query(default=0.0, ge=0),
    time_range: str = Query(default="day"),
    q: str | None = Query(default=None),
):
    """Get observed earthquakes, optionally filtered by location text."""
    event_filter = _build_filter(min_magnitude, time_range)
    now = datetime.now(timezone.utc)
    events = filter_by_search(_fetch_events(event_filter, now), q)

    return {
        "earthquakes": [e.to_dict() for e in events],
        "count": len(events),
        "fetched_at": now.isoformat(),
    }


@app.get("/api-predictions")
async def get_predictions(
    min_magnitude: float = Query(default=0.0, ge=0),
    time_range: str = Query(default="day"),
    q: str | None = Query(default=None),
    seed: int | None = Query(default=None),
):
    """Get observed earthquakes merged with predictions."""
    event_filter = _build_filter(min_magnitude, time_range)
    now = datetime.now(timezone.utc)
    observed = _fetch_events(event_filter, now)
    predictions = _predict(observed, now, seed)
    displayed = filter_by_search(merge_with_predictions(observed, predictions), q)

    return {
        "earthquakes": [e.to_dict() for e in displayed],
        "summary": summarize_predictions(predictions),
        "observed_count": len(observed),
        "generated_at": now.isoformat(),
    }


@app.post("/api-predictions")
async def post_predictions(body: PredictionRequest):
    """Predict from a client-supplied list of observed events."""
    now = _to_utc(body.now) if body.now else datetime.now(timezone.utc)

    try:
        events = [
            event_from_dict(e.model_dump(mode="json"))
            for e in body.events
        ]
    except (KeyError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    predictions = _predict(events, now, body.seed)

    return {
        "predictions": [e.to_dict() for e in predictions],
        "summary": summarize_predictions(predictions),
        "generated_at": now.isoformat(),
    }


@app.get("/api-zones")
async def get_zones():
    """List the high-risk zones scanned for seismic gaps."""
    zones: list[dict[str, Any]] = [
        {
            "name": zone.name,
            "slug": zone.slug,
            "center": {"lat": zone.latitude, "lng": zone.longitude},
            "radius_deg": zone.radius_deg,
        }
        for zone in _get_config().high_risk_zones
    ]
    return {"zones": zones, "time_ranges": list(TIME_RANGES)}


@app.get("/health")
async def health_check():
    """Health check endpoint for Cloud Run."""
    return {"status": "healthy"}
