"""Shared fixtures: scripted host primitives and a small question bank."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from timed_quiz.core.models import QuestionRecord
from timed_quiz.core.quiz_session import QuizSession
from timed_quiz.core.services.fullscreen_gate import FullscreenGate
from timed_quiz.core.services.persistence import MemoryStore


class ManualScheduler:
    """Tick scheduler driven by the test instead of a clock."""

    def __init__(self) -> None:
        self.interval_ms: int | None = None
        self.start_count = 0
        self.stop_count = 0
        self._callback: Callable[[], None] | None = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.interval_ms = interval_ms
        self.start_count += 1
        self._callback = callback

    def stop(self) -> None:
        self.stop_count += 1
        self._callback = None

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self._callback is not None:
                self._callback()


class ScriptedFullscreenControl:
    """Host that grants or refuses full-screen and reports changes like a window would."""

    def __init__(self, grant: bool = True) -> None:
        self.grant = grant
        self.request_count = 0
        self.gate: FullscreenGate | None = None

    def request_fullscreen(self) -> bool:
        self.request_count += 1
        if not self.grant:
            return False
        self.gate.notify(True)
        return True

    def exit_fullscreen(self) -> None:
        self.gate.notify(False)

    def user_exits(self) -> None:
        """Simulate the user pressing Escape."""
        self.gate.notify(False)


@pytest.fixture
def questions() -> list[QuestionRecord]:
    return [
        QuestionRecord(question="First?", options=["A", "B", "C", "X"], answer="A"),
        QuestionRecord(question="Second?", options=["A", "B", "C", "X"], answer="B"),
        QuestionRecord(question="Third?", options=["A", "B", "C", "X"], answer="C"),
    ]


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def control() -> ScriptedFullscreenControl:
    return ScriptedFullscreenControl()


@pytest.fixture
def gate(control: ScriptedFullscreenControl) -> FullscreenGate:
    fullscreen_gate = FullscreenGate(control)
    control.gate = fullscreen_gate
    return fullscreen_gate


@pytest.fixture
def make_session(questions, store, scheduler, gate):
    def _make(total_duration: int = 60) -> QuizSession:
        return QuizSession(questions, store, scheduler, gate, total_duration=total_duration)

    return _make


@pytest.fixture
def session(make_session) -> QuizSession:
    return make_session()
