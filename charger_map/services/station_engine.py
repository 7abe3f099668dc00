"""Charging station state with lazily recomputed, cached views."""
import logging
import math
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.exceptions import InvalidPowerFilterError
from ..models.station import ChargingStation, Coordinates, EnrichedStation
from .distance_service import calculate_distances, validate_coordinates
from .distribution_service import build_power_distribution, calculate_max_power
from .metrics_service import enrich_stations
from .ranking_service import rank_stations
from .selection_service import StationSelection

logger = logging.getLogger(__name__)

DEFAULT_MAP_CENTER = Coordinates(latitude=55.751244, longitude=37.618423)


class ChargingStationsEngine:
    """
    Owns the station collection, map center, power filter and selection.

    Derived views are computed on first read and cached together with the
    versions of the inputs they were built from. Every mutation bumps the
    version of the input it touches, so a view is rebuilt only when one of
    its own inputs changed. Views are tuples or read-only mappings,
    so callers cannot alter the cached copy.

    Inputs:
        stations      raw station records
        map_center    reference point for distances
        power_filter  minimum calculated power in kW
        selection     selected station id
    """

    def __init__(
        self,
        stations: Optional[Sequence[ChargingStation]] = None,
        map_center: Optional[Coordinates] = None,
        power_filter: float = 0.0,
    ):
        center = map_center or DEFAULT_MAP_CENTER
        validate_coordinates(center.latitude, center.longitude)
        _validate_power_filter(power_filter)

        self._stations: List[ChargingStation] = list(stations or [])
        self._map_center = center
        self._power_filter = float(power_filter)
        self._selection = StationSelection()

        self._versions: Dict[str, int] = {
            "stations": 0,
            "map_center": 0,
            "power_filter": 0,
            "selection": 0,
        }
        self._cache: Dict[str, Tuple[Tuple[int, ...], Any]] = {}

    # ── Inputs ────────────────────────────────────────────────

    @property
    def raw_stations(self) -> List[ChargingStation]:
        return list(self._stations)

    @property
    def map_center(self) -> Coordinates:
        return self._map_center

    @property
    def power_filter(self) -> float:
        return self._power_filter

    @property
    def selected_station_id(self) -> Optional[int]:
        return self._selection.station_id

    def set_stations(self, stations: Sequence[ChargingStation]) -> None:
        """Replace the station collection."""
        self._stations = list(stations)
        self._touch("stations")
        logger.info(f"Station collection replaced: {len(self._stations)} stations")

    def update_map_center(self, latitude: float, longitude: float) -> None:
        """Move the reference point distances are measured from."""
        validate_coordinates(latitude, longitude)
        self._map_center = Coordinates(latitude=latitude, longitude=longitude)
        self._touch("map_center")
        logger.debug(f"Map center moved to {latitude:.6f}, {longitude:.6f}")

    def set_power_filter(self, power_filter: float) -> None:
        """Set the minimum calculated power, in kW, for the ranked view."""
        _validate_power_filter(power_filter)
        self._power_filter = float(power_filter)
        self._touch("power_filter")

    def select_station(self, station_id: int) -> None:
        self._selection.select(station_id)
        self._touch("selection")

    def clear_selection(self) -> None:
        self._selection.clear()
        self._touch("selection")

    # ── Derived views ─────────────────────────────────────────

    @property
    def all_stations(self) -> Tuple[EnrichedStation, ...]:
        """Every station, normalized and enriched, in dataset order."""
        return self._memoized(
            "all_stations",
            ("stations",),
            lambda: tuple(enrich_stations(self._stations)),
        )

    @property
    def distances(self) -> Mapping[int, float]:
        """Station id -> km from the map center, as a read-only mapping."""
        return self._memoized(
            "distances",
            ("stations", "map_center"),
            lambda: MappingProxyType(calculate_distances(self._map_center, self.all_stations)),
        )

    @property
    def stations(self) -> Tuple[EnrichedStation, ...]:
        """Stations passing the power filter, nearest to the map center first."""
        return self._memoized(
            "stations",
            ("stations", "map_center", "power_filter"),
            lambda: tuple(rank_stations(self.all_stations, self._power_filter, self.distances)),
        )

    @property
    def max_power(self) -> int:
        """Upper bound for the power filter slider."""
        return self._memoized(
            "max_power",
            ("stations",),
            lambda: calculate_max_power(self.all_stations),
        )

    @property
    def power_distribution(self) -> Tuple[int, ...]:
        return self._memoized(
            "power_distribution",
            ("stations",),
            lambda: tuple(build_power_distribution(self.all_stations, self.max_power)),
        )

    @property
    def selected_station(self) -> Optional[EnrichedStation]:
        return self._memoized(
            "selected_station",
            ("stations", "selection"),
            lambda: self._selection.resolve(self.all_stations),
        )

    def get_station(self, station_id: int) -> Optional[EnrichedStation]:
        """Enriched station by id, or None."""
        by_id = self._memoized(
            "stations_by_id",
            ("stations",),
            lambda: {station.id: station for station in self.all_stations},
        )
        return by_id.get(station_id)

    # ── Cache ─────────────────────────────────────────────────

    def _touch(self, name: str) -> None:
        self._versions[name] += 1

    def _memoized(
        self,
        view: str,
        dependencies: Tuple[str, ...],
        compute: Callable[[], Any],
    ) -> Any:
        key = tuple(self._versions[name] for name in dependencies)
        cached = self._cache.get(view)
        if cached is not None and cached[0] == key:
            return cached[1]

        logger.debug(f"Recomputing {view} (versions {key})")
        value = compute()
        self._cache[view] = (key, value)
        return value


def _validate_power_filter(power_filter: float) -> None:
    if power_filter is None or math.isnan(power_filter) or power_filter < 0:
        raise InvalidPowerFilterError(power_filter)
