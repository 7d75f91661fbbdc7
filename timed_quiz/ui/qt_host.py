"""Qt implementations of the host primitives the quiz core depends on."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, Qt, QTimer
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QWidget

# Platform plugins that cannot present a real full-screen window.
_HEADLESS_PLATFORMS = frozenset({"minimal", "offscreen"})


class QtTickScheduler:
    """Periodic callback driven by a QTimer on the GUI thread."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._timer = QTimer(parent)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_timeout)
        self._callback: Callable[[], None] | None = None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start(interval_ms)

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()


class WindowFullscreenControl:
    """Enters and leaves full-screen on a top-level window.

    The outcome is observed separately through the window's state-change
    events; a granted request only means the window was asked to switch.
    """

    def __init__(self, window: QWidget) -> None:
        self._window = window

    def request_fullscreen(self) -> bool:
        if QGuiApplication.platformName() in _HEADLESS_PLATFORMS:
            return False
        if not self._window.isVisible():
            return False
        self._window.showFullScreen()
        return True

    def exit_fullscreen(self) -> None:
        if self._window.isFullScreen():
            self._window.showNormal()
