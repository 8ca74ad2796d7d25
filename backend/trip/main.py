"""
TRIP Geometry API

FastAPI application exposing path summaries, elevation lookup and
travel time estimates to the itinerary and GPX import handlers.
"""

import asyncio
from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI

from trip.config import settings
from trip.api.v1.router import api_router
from trip.features.elevation import ElevationResolver


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    logger.info("Starting TRIP Geometry API...")
    # Reading tile bounds touches every raster file
    resolver = await asyncio.to_thread(ElevationResolver.from_settings, settings)
    app.state.elevation_resolver = resolver
    logger.info(f"Elevation resolver ready ({resolver.strategy})")

    yield

    # Shutdown
    resolver.close()
    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="TRIP Geometry API",
    description="Distance, elevation and extent calculations for routes and tracks",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.app_version}
