from __future__ import annotations

import logging
from typing import Any

from spacehive.application.ports.navigation import NavigationPort, Screen


class RecordingNavigator(NavigationPort):
    """
    Keeps the screen stack in memory and logs every hand-off.
    Home always sits at the bottom; above it at most history_limit screens
    are kept, oldest dropped first.
    """

    def __init__(self, history_limit: int = 50) -> None:
        self._history_limit = max(1, history_limit)
        self._stack: list[tuple[Screen, dict[str, Any]]] = [(Screen.home, {})]
        self._logger = logging.getLogger(__name__)

    @property
    def current(self) -> tuple[Screen, dict[str, Any]]:
        return self._stack[-1]

    @property
    def history(self) -> list[tuple[Screen, dict[str, Any]]]:
        return list(self._stack)

    def navigate(self, screen: Screen, params: dict[str, Any] | None = None) -> None:
        if screen is Screen.home:
            # Home resets the stack, same as closing a flow
            self._stack = [(Screen.home, dict(params or {}))]
        else:
            self._stack.append((screen, dict(params or {})))
            if len(self._stack) > self._history_limit + 1:
                del self._stack[1]
        self._logger.info("Navigate", extra={"screen": screen.value})

    def go_back(self) -> None:
        if len(self._stack) > 1:
            self._stack.pop()
        self._logger.info("Navigate back", extra={"screen": self.current[0].value})
