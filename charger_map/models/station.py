"""Charging station models."""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
from datetime import datetime


class CamelModel(BaseModel):
    """Immutable model that reads and writes camelCase field names."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class Coordinates(CamelModel):
    """Geographic point in decimal degrees."""
    latitude: float
    longitude: float


class StationReview(CamelModel):
    """User review of a station as it comes from the dataset."""
    user_id: Optional[int] = None
    user_name: Optional[str] = None
    car_model: Optional[str] = None
    kilowatts: Optional[float] = Field(default=None, ge=0, description="Observed power in kW")
    message: Optional[str] = None
    created_at: Optional[datetime] = None
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    user_metadata: Optional[Dict[str, Any]] = None


class NormalizedReview(StationReview):
    """Review with power, rating and message defaulted."""
    kilowatts: float = Field(..., ge=0)
    message: str
    rating: float = Field(..., ge=0, le=5)


class ChargingStation(CamelModel):
    """Raw charging station record."""
    id: int
    name: str = ""
    description: Optional[str] = None
    coordinates: Coordinates
    address: Optional[str] = None
    provider: str = ""
    success_rate: Optional[float] = Field(default=None, description="Successful connections, 0-100 %")
    kilowatt_price: Optional[float] = None
    kilowatts_declared: Optional[float] = None
    reviews: Optional[List[StationReview]] = None


class EnrichedStation(ChargingStation):
    """Normalized station with metrics calculated from its reviews."""
    description: str
    kilowatts_declared: float
    reviews: List[NormalizedReview]
    rating: float = Field(..., ge=0, le=5, description="Average review rating")
    kilowatts_calculated: float = Field(..., ge=0, description="Median observed power in kW")


class RankedStation(EnrichedStation):
    """Enriched station as shown on the map, with distance from the map center."""
    distance_km: float
    placemark_color: str


class MapCenterUpdate(BaseModel):
    """Request to move the map center."""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class PowerFilterUpdate(BaseModel):
    """Request to change the minimum calculated power."""
    power_filter: float = Field(..., ge=0, description="Minimum power in kW")


class RankedStationsResponse(BaseModel):
    """Stations passing the power filter, nearest first."""
    map_center: Coordinates
    power_filter: float
    stations: List[RankedStation]
    total_found: int


class AllStationsResponse(BaseModel):
    """Every station, unfiltered and unsorted."""
    stations: List[EnrichedStation]
    total_found: int


class PowerDistributionResponse(BaseModel):
    """Station counts per power segment."""
    distribution: List[int]
    max_power: int
    segment_size: float


class SelectionResponse(BaseModel):
    """Currently selected station."""
    selected_station_id: Optional[int] = None
    station: Optional[EnrichedStation] = None
