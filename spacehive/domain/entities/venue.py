from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Venue:
    id: int
    title: str
    distance: str  # display label, e.g. "1 km away"
    rating: float
    recent_bookings: int
    price: int  # per price_unit
    price_unit: str
    image: str
    coordinates: Coordinates


@dataclass(frozen=True)
class MapRegion:
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float


@dataclass(frozen=True)
class PriceQuote:
    venue_id: int
    hours: int
    base_price: int
    extra_services_cost: int
    total_price: int
    extra_services: tuple[str, ...] = ()
    event_type: str | None = None
