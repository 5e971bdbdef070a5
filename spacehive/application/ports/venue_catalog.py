from __future__ import annotations

from abc import ABC, abstractmethod

from spacehive.domain.entities.venue import MapRegion, Venue


class VenueCatalogPort(ABC):
    @abstractmethod
    def list_venues(self) -> list[Venue]:
        """All instant-bookable venues."""
        raise NotImplementedError

    @abstractmethod
    def get_venue(self, venue_id: int) -> Venue | None:
        raise NotImplementedError

    @abstractmethod
    def location_suggestions(self) -> list[str]:
        """Suggested location labels for the location section."""
        raise NotImplementedError

    @abstractmethod
    def map_center(self) -> MapRegion:
        raise NotImplementedError
