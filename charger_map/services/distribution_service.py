"""Power distribution histogram for the filter slider chart."""
import math
from typing import List, Optional, Sequence

from ..models.station import EnrichedStation

SEGMENT_COUNT = 5
DEFAULT_MAX_POWER_KW = 300
POWER_MARGIN_KW = 20
POWER_ROUND_TO_KW = 10


def calculate_max_power(stations: Sequence[EnrichedStation]) -> int:
    """
    Upper bound of the power scale.

    Highest calculated power plus a margin, rounded up to the next 10 kW.
    Falls back to 300 kW while there are no stations.
    """
    if not stations:
        return DEFAULT_MAX_POWER_KW

    highest = max(station.kilowatts_calculated for station in stations)
    return math.ceil((highest + POWER_MARGIN_KW) / POWER_ROUND_TO_KW) * POWER_ROUND_TO_KW


def segment_size(max_power: float) -> float:
    return max_power / SEGMENT_COUNT


def build_power_distribution(
    stations: Sequence[EnrichedStation],
    max_power: Optional[float] = None,
) -> List[int]:
    """Count stations per equal-width power segment.

    The scale defaults to calculate_max_power(stations). Values at or
    above the top of the scale land in the last segment.
    """
    distribution = [0] * SEGMENT_COUNT
    if not stations:
        return distribution

    if max_power is None:
        max_power = calculate_max_power(stations)
    size = segment_size(max_power)

    for station in stations:
        index = min(int(station.kilowatts_calculated // size), SEGMENT_COUNT - 1)
        distribution[index] += 1
    return distribution
