"""Station normalization and review-based metrics."""
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence

from ..models.station import (
    ChargingStation,
    EnrichedStation,
    NormalizedReview,
    StationReview,
)

NO_DESCRIPTION_TEXT = "No description"
NO_COMMENT_TEXT = "No comment"


def round_half_up(value: float, digits: int) -> float:
    """Round like a fixed-point display does: 2.25 -> 2.3, not 2.2."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def normalize_review(review: StationReview) -> NormalizedReview:
    """Default missing power, rating and message of a review."""
    fields = {
        name: value
        for name, value in review
        if name not in ("kilowatts", "rating", "message")
    }
    return NormalizedReview(
        **fields,
        kilowatts=review.kilowatts or 0,
        rating=review.rating or 0,
        message=review.message or NO_COMMENT_TEXT,
    )


def calculate_average_rating(reviews: Sequence[NormalizedReview]) -> float:
    """Arithmetic mean of review ratings, 0 when there are no reviews."""
    if not reviews:
        return 0.0
    return sum(review.rating for review in reviews) / len(reviews)


def calculate_median_power(reviews: Sequence[NormalizedReview]) -> float:
    """Median of observed kilowatts, 0 when there are no reviews."""
    if not reviews:
        return 0.0

    kilowatts = sorted(review.kilowatts for review in reviews)
    mid = len(kilowatts) // 2

    # Even count: mean of the two central values
    if len(kilowatts) % 2 == 0:
        return (kilowatts[mid - 1] + kilowatts[mid]) / 2
    return kilowatts[mid]


def _normalize_price(price: Optional[float]) -> Optional[float]:
    if not price:
        return None
    return round_half_up(price, 2)


def enrich_station(station: ChargingStation) -> EnrichedStation:
    """
    Normalize a raw station and attach rating and power metrics.

    Pure function of its input: safe to call repeatedly.
    """
    reviews: List[NormalizedReview] = [
        normalize_review(review) for review in station.reviews or []
    ]
    fields = {
        name: value
        for name, value in station
        if name not in ("description", "reviews", "kilowatts_declared", "kilowatt_price")
    }
    return EnrichedStation(
        **fields,
        description=station.description or NO_DESCRIPTION_TEXT,
        reviews=reviews,
        kilowatts_declared=station.kilowatts_declared or 0,
        kilowatt_price=_normalize_price(station.kilowatt_price),
        rating=round_half_up(calculate_average_rating(reviews), 1),
        kilowatts_calculated=round_half_up(calculate_median_power(reviews), 1),
    )


def enrich_stations(stations: Sequence[ChargingStation]) -> List[EnrichedStation]:
    """Enrich every station, keeping input order."""
    return [enrich_station(station) for station in stations]
