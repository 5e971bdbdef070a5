from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class Screen(str, Enum):
    home = "home"
    booking_form = "booking_form"
    instant_booking = "instant_booking"
    match_request = "match_request"
    instant_booking_payment = "instant_booking_payment"


class NavigationPort(ABC):
    @abstractmethod
    def navigate(self, screen: Screen, params: dict[str, Any] | None = None) -> None:
        """Push a screen with serializable params."""
        raise NotImplementedError

    @abstractmethod
    def go_back(self) -> None:
        raise NotImplementedError
