"""Station map endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from ..core.dependencies import get_engine
from ..models.station import (
    EnrichedStation,
    RankedStation,
    MapCenterUpdate,
    PowerFilterUpdate,
    RankedStationsResponse,
    AllStationsResponse,
    PowerDistributionResponse,
    SelectionResponse,
    Coordinates
)
from ..services.color_service import get_placemark_color
from ..services.distribution_service import segment_size
from ..services.metrics_service import round_half_up
from ..services.station_engine import ChargingStationsEngine

router = APIRouter(prefix="/stations", tags=["Stations"])


@router.get("", response_model=RankedStationsResponse)
async def get_ranked_stations(engine: ChargingStationsEngine = Depends(get_engine)):
    """
    Stations passing the power filter, nearest to the map center first.

    Each station carries its distance from the map center and the
    placemark color of its provider.
    """
    distances = engine.distances
    stations = [
        RankedStation(
            **dict(station),
            distance_km=round_half_up(distances.get(station.id, 0.0), 2),
            placemark_color=get_placemark_color(station.provider)
        )
        for station in engine.stations
    ]
    return {
        "map_center": engine.map_center,
        "power_filter": engine.power_filter,
        "stations": stations,
        "total_found": len(stations)
    }


@router.get("/all", response_model=AllStationsResponse)
async def get_all_stations(engine: ChargingStationsEngine = Depends(get_engine)):
    """Every station, unfiltered, in dataset order."""
    stations = engine.all_stations
    return {"stations": stations, "total_found": len(stations)}


@router.get("/distribution", response_model=PowerDistributionResponse)
async def get_power_distribution(engine: ChargingStationsEngine = Depends(get_engine)):
    """Station counts for five equal power segments up to max_power."""
    max_power = engine.max_power
    return {
        "distribution": engine.power_distribution,
        "max_power": max_power,
        "segment_size": segment_size(max_power)
    }


@router.put("/map-center", response_model=Coordinates)
async def update_map_center(
    request: MapCenterUpdate,
    engine: ChargingStationsEngine = Depends(get_engine)
):
    """Move the point stations are ranked from."""
    engine.update_map_center(latitude=request.latitude, longitude=request.longitude)
    return engine.map_center


@router.put("/power-filter", response_model=PowerFilterUpdate)
async def update_power_filter(
    request: PowerFilterUpdate,
    engine: ChargingStationsEngine = Depends(get_engine)
):
    """Set the minimum calculated power in kW."""
    engine.set_power_filter(request.power_filter)
    return {"power_filter": engine.power_filter}


@router.get("/selected", response_model=SelectionResponse)
async def get_selected_station(engine: ChargingStationsEngine = Depends(get_engine)):
    """Selected station; station is null when nothing or an unknown id is selected."""
    return {
        "selected_station_id": engine.selected_station_id,
        "station": engine.selected_station
    }


@router.put("/selected/{station_id}", response_model=SelectionResponse)
async def select_station(
    station_id: int,
    engine: ChargingStationsEngine = Depends(get_engine)
):
    """Select a station. The id is not checked against the collection."""
    engine.select_station(station_id)
    return {
        "selected_station_id": engine.selected_station_id,
        "station": engine.selected_station
    }


@router.delete("/selected", response_model=SelectionResponse)
async def clear_selection(engine: ChargingStationsEngine = Depends(get_engine)):
    engine.clear_selection()
    return {"selected_station_id": None, "station": None}


@router.get("/{station_id}", response_model=EnrichedStation)
async def get_station(
    station_id: int,
    engine: ChargingStationsEngine = Depends(get_engine)
):
    """Single enriched station."""
    station = engine.get_station(station_id)
    if station is None:
        raise HTTPException(status_code=404, detail="Station not found")
    return station
