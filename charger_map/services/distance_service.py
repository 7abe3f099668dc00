"""Great-circle distances between map points and stations."""
import math
from typing import Dict, Sequence

from ..core.exceptions import InvalidCoordinatesError
from ..models.station import Coordinates, EnrichedStation

EARTH_RADIUS_KM = 6371.0


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Raise InvalidCoordinatesError unless the point lies on the globe."""
    # NaN fails both comparisons
    if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
        raise InvalidCoordinatesError(latitude, longitude)


def calculate_distance(point_a: Coordinates, point_b: Coordinates) -> float:
    """Haversine distance between two points in kilometers."""
    validate_coordinates(point_a.latitude, point_a.longitude)
    validate_coordinates(point_b.latitude, point_b.longitude)

    lat1 = math.radians(point_a.latitude)
    lat2 = math.radians(point_b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(point_b.longitude) - math.radians(point_a.longitude)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def calculate_distances(
    reference: Coordinates,
    stations: Sequence[EnrichedStation],
) -> Dict[int, float]:
    """Map station id -> distance in km from the reference point."""
    validate_coordinates(reference.latitude, reference.longitude)
    return {
        station.id: calculate_distance(reference, station.coordinates)
        for station in stations
    }
