"""Full-screen gate that enables and disables the countdown."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class FullscreenControl(Protocol):
    """Host primitives for entering and leaving full-screen mode."""

    def request_fullscreen(self) -> bool:
        """Return False when the host refuses the request."""
        ...

    def exit_fullscreen(self) -> None: ...


class FullscreenGate:
    """Tracks the host's full-screen state and reports edges to listeners.

    The host calls notify() for every full-screen change whatever caused it,
    including exits the application did not ask for.
    """

    def __init__(self, control: FullscreenControl) -> None:
        self._control = control
        self._is_fullscreen = False
        self._listeners: list[Callable[[bool], None]] = []

    @property
    def is_fullscreen(self) -> bool:
        return self._is_fullscreen

    def add_listener(self, listener: Callable[[bool], None]) -> None:
        self._listeners.append(listener)

    def request(self) -> bool:
        if self._is_fullscreen:
            return True
        granted = self._control.request_fullscreen()
        if not granted:
            logger.warning("Full-screen request was refused")
        return granted

    def release(self) -> None:
        if self._is_fullscreen:
            self._control.exit_fullscreen()

    def notify(self, is_fullscreen: bool) -> None:
        if is_fullscreen == self._is_fullscreen:
            return
        self._is_fullscreen = is_fullscreen
        logger.info("Full-screen %s", "entered" if is_fullscreen else "exited")
        for listener in list(self._listeners):
            listener(is_fullscreen)
