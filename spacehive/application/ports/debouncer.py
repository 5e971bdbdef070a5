from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class DebouncerPort(ABC):
    """Fire-once-after-delay per key; a new call for the same key replaces the pending one."""

    @abstractmethod
    def call(self, key: str, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule fn once after the quiet period, cancelling any pending call for key."""
        raise NotImplementedError

    @abstractmethod
    def cancel(self, key: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def flush(self, key: str) -> bool:
        """Run the pending call for key right away. Returns False if nothing was pending."""
        raise NotImplementedError
