"""Fixed-period countdown tick producer."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Protocol

from timed_quiz.constants.quiz_constants import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class TickScheduler(Protocol):
    """Host clock that calls back periodically until stopped."""

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class CountdownTimer:
    """Emits one tick per period while running.

    The timer knows nothing about remaining time; it only signals. Stopping
    drops any pending period, so a restart never replays missed ticks.
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        on_tick: Callable[[], None],
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        self._scheduler = scheduler
        self._on_tick = on_tick
        self._interval_ms = interval_ms
        self._running = False

    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._scheduler.start(self._interval_ms, self._fire)
        logger.debug("Countdown started (%d ms period)", self._interval_ms)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._scheduler.stop()
        logger.debug("Countdown stopped")

    def _fire(self) -> None:
        # A callback already queued by the host may arrive after stop().
        if self._running:
            self._on_tick()
