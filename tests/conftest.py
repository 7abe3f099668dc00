from pathlib import Path
from typing import Optional, Sequence

import pytest

from charger_map.models.station import ChargingStation

BUNDLED_STATIONS_PATH = Path(__file__).resolve().parent.parent / "charger_map" / "data" / "stations.json"

MOSCOW = {"latitude": 55.7558, "longitude": 37.6173}
ST_PETERSBURG = {"latitude": 59.9311, "longitude": 30.3609}


def build_station(
    station_id: int,
    kilowatts: Sequence[Optional[float]] = (),
    ratings: Optional[Sequence[Optional[float]]] = None,
    latitude: float = 55.75,
    longitude: float = 37.62,
    **fields,
) -> ChargingStation:
    if ratings is None:
        ratings = [4] * len(kilowatts)
    reviews = [
        {
            "userId": 100 + i,
            "userName": f"user{i}",
            "carModel": "Tesla Model 3",
            "kilowatts": kw,
            "rating": rating,
            "createdAt": "2024-01-01T12:00:00Z",
        }
        for i, (kw, rating) in enumerate(zip(kilowatts, ratings))
    ]
    record = {
        "id": station_id,
        "name": f"Station {station_id}",
        "coordinates": {"latitude": latitude, "longitude": longitude},
        "provider": "Tesla",
        "reviews": reviews,
    }
    record.update(fields)
    return ChargingStation.model_validate(record)


@pytest.fixture
def make_station():
    return build_station


@pytest.fixture
def bundled_stations_path() -> Path:
    return BUNDLED_STATIONS_PATH
