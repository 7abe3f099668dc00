# Service layer
from .metrics_service import (
    enrich_station,
    enrich_stations,
    normalize_review,
    calculate_average_rating,
    calculate_median_power
)
from .distance_service import (
    calculate_distance,
    calculate_distances,
    validate_coordinates
)
from .ranking_service import (
    filter_by_power,
    rank_stations
)
from .distribution_service import (
    build_power_distribution,
    calculate_max_power
)
from .selection_service import StationSelection
from .color_service import (
    string_to_color,
    get_placemark_color
)
from .station_data_service import (
    load_stations,
    parse_stations
)
from .station_engine import ChargingStationsEngine

__all__ = [
    # Metrics
    "enrich_station",
    "enrich_stations",
    "normalize_review",
    "calculate_average_rating",
    "calculate_median_power",
    # Distance
    "calculate_distance",
    "calculate_distances",
    "validate_coordinates",
    # Ranking
    "filter_by_power",
    "rank_stations",
    # Distribution
    "build_power_distribution",
    "calculate_max_power",
    # Selection
    "StationSelection",
    # Colors
    "string_to_color",
    "get_placemark_color",
    # Data
    "load_stations",
    "parse_stations",
    # Engine
    "ChargingStationsEngine",
]
