"""Charger Map API - Main Application."""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import time

from .core.config import settings
from .core.exceptions import (
    ChargerMapError,
    InvalidCoordinatesError,
    InvalidPowerFilterError,
    StationDataError
)
from .models.station import Coordinates
from .routers import stations
from .services.station_data_service import load_stations
from .services.station_engine import ChargingStationsEngine

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_engine_from_settings() -> ChargingStationsEngine:
    """Build the station engine from the configured dataset and map defaults."""
    try:
        raw_stations = load_stations(settings.STATIONS_DATA_PATH)
    except StationDataError as e:
        logger.warning(f"Station data load skipped: {e}")
        raw_stations = []

    return ChargingStationsEngine(
        stations=raw_stations,
        map_center=Coordinates(
            latitude=settings.DEFAULT_MAP_CENTER_LATITUDE,
            longitude=settings.DEFAULT_MAP_CENTER_LONGITUDE
        ),
        power_filter=settings.DEFAULT_POWER_FILTER
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.APP_NAME}...")
    app.state.engine = create_engine_from_settings()
    logger.info(f"Station engine ready with {len(app.state.engine.raw_stations)} stations")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    Charging station map API.

    ## Features
    - **Nearest Stations**: Stations ranked by distance from the map center
    - **Power Filter**: Hide stations whose median observed power is too low
    - **Power Distribution**: Station counts per power segment for the slider chart
    - **Selection**: Focus a single station for the detail panel

    Station rating and power come from user reviews: the average rating and
    the median of the kilowatts drivers actually observed.
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_timing_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    response.headers["X-Process-Time"] = str(time.time() - start_time)
    return response


@app.exception_handler(InvalidCoordinatesError)
@app.exception_handler(InvalidPowerFilterError)
async def invalid_input_exception_handler(request: Request, exc: ChargerMapError):
    logger.warning(f"Rejected request {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal error occurred"}
    )


# ── Health & Root ──────────────────────────────────────────────

@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "service": "charger-map-api"
    }


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health"
    }


# ── Business Routers ──────────────────────────────────────────

app.include_router(stations.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "charger_map.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
