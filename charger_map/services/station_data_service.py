"""Startup station dataset loading."""
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Set, Union

from pydantic import ValidationError

from ..core.exceptions import InvalidCoordinatesError, StationDataError
from ..models.station import ChargingStation
from .distance_service import validate_coordinates

logger = logging.getLogger(__name__)


def parse_stations(records: Iterable[Any]) -> List[ChargingStation]:
    """Validate raw records into stations.

    Records that fail validation, sit outside the valid coordinate range
    or repeat an earlier id are skipped.
    """
    stations: List[ChargingStation] = []
    seen_ids: Set[int] = set()

    for index, record in enumerate(records):
        try:
            station = ChargingStation.model_validate(record)
            validate_coordinates(station.coordinates.latitude, station.coordinates.longitude)
        except (ValidationError, InvalidCoordinatesError) as e:
            logger.warning(f"Skipping station record #{index}: {e}")
            continue

        if station.id in seen_ids:
            logger.warning(f"Skipping station record #{index}: duplicate id {station.id}")
            continue

        seen_ids.add(station.id)
        stations.append(station)

    return stations


def load_stations(path: Union[str, Path]) -> List[ChargingStation]:
    """Load stations from a JSON file holding an array of station records."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise StationDataError(f"Cannot read station data from {path}: {e}") from e

    if not isinstance(payload, list):
        raise StationDataError(
            f"Station data in {path} must be a JSON array, got {type(payload).__name__}"
        )

    stations = parse_stations(payload)
    logger.info(f"Loaded {len(stations)} of {len(payload)} station records from {path}")
    return stations
