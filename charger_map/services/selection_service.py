"""Currently focused station."""
from typing import Optional, Sequence

from ..models.station import EnrichedStation


class StationSelection:
    """Holds at most one selected station id."""

    def __init__(self):
        self.station_id: Optional[int] = None

    def select(self, station_id: int) -> None:
        # No existence check: the id may arrive before the data does
        self.station_id = station_id

    def clear(self) -> None:
        self.station_id = None

    def resolve(self, stations: Sequence[EnrichedStation]) -> Optional[EnrichedStation]:
        """Return the selected station, or None if it is not in stations."""
        if self.station_id is None:
            return None
        for station in stations:
            if station.id == self.station_id:
                return station
        return None
