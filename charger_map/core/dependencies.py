"""FastAPI dependencies."""
from fastapi import Request

from ..services.station_engine import ChargingStationsEngine


def get_engine(request: Request) -> ChargingStationsEngine:
    """Engine created for this application at startup."""
    return request.app.state.engine
