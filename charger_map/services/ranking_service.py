"""Power filtering and proximity ordering of stations."""
from typing import List, Mapping, Sequence

from ..models.station import EnrichedStation


def filter_by_power(
    stations: Sequence[EnrichedStation],
    power_filter: float,
) -> List[EnrichedStation]:
    """Keep stations whose calculated power is at least power_filter kW."""
    return [s for s in stations if s.kilowatts_calculated >= power_filter]


def rank_stations(
    stations: Sequence[EnrichedStation],
    power_filter: float,
    distances: Mapping[int, float],
) -> List[EnrichedStation]:
    """
    Filter stations by minimum power and sort nearest first.

    Stations missing from distances count as 0 km. The sort is stable,
    so stations at equal distance keep their input order.
    """
    return sorted(
        filter_by_power(stations, power_filter),
        key=lambda station: distances.get(station.id, 0.0),
    )
