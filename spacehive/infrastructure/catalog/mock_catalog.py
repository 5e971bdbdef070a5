from __future__ import annotations

from spacehive.application.ports.venue_catalog import VenueCatalogPort
from spacehive.domain.entities.venue import Coordinates, MapRegion, Venue

LOCATION_SUGGESTIONS = [
    "Inglewood, Calgary",
    "Downtown, Calgary",
]

MOCK_VENUES = [
    Venue(
        id=1,
        title="Downtown, Calgary",
        distance="1 km away",
        rating=4.96,
        recent_bookings=5,
        price=30,
        price_unit="hour",
        image="https://images.unsplash.com/photo-1586023492125-27b2c045efd7?w=400&h=300&fit=crop",
        coordinates=Coordinates(latitude=51.0447, longitude=-114.0719),
    ),
    Venue(
        id=2,
        title="Beltline, Calgary",
        distance="2.1 km away",
        rating=4.82,
        recent_bookings=8,
        price=25,
        price_unit="hour",
        image="https://images.unsplash.com/photo-1560472354-b33ff0c44a43?w=400&h=300&fit=crop",
        coordinates=Coordinates(latitude=51.0366, longitude=-114.0708),
    ),
    Venue(
        id=3,
        title="Kensington, Calgary",
        distance="3.5 km away",
        rating=4.74,
        recent_bookings=3,
        price=22,
        price_unit="hour",
        image="https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=400&h=300&fit=crop",
        coordinates=Coordinates(latitude=51.0581, longitude=-114.0892),
    ),
]

# Calgary downtown
CALGARY_CENTER = MapRegion(latitude=51.0447, longitude=-114.0719, latitude_delta=0.05, longitude_delta=0.05)


class MockVenueCatalog(VenueCatalogPort):
    def __init__(self, venues: list[Venue] | None = None) -> None:
        self._venues = list(venues if venues is not None else MOCK_VENUES)

    def list_venues(self) -> list[Venue]:
        return list(self._venues)

    def get_venue(self, venue_id: int) -> Venue | None:
        return next((v for v in self._venues if v.id == venue_id), None)

    def location_suggestions(self) -> list[str]:
        return list(LOCATION_SUGGESTIONS)

    def map_center(self) -> MapRegion:
        return CALGARY_CENTER
