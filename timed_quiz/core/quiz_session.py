"""Quiz session state machine shared by the UI and the timer/full-screen hosts."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
import logging

from timed_quiz.constants.quiz_constants import DEFAULT_TOTAL_DURATION_SECONDS
from timed_quiz.core.errors import InvalidCommandError
from timed_quiz.core.models import (
    QuestionRecord,
    QuizScore,
    SessionPhase,
    SessionState,
    SessionStatus,
    SessionView,
)
from timed_quiz.core.scoring import score
from timed_quiz.core.services.command_queue import CommandQueue
from timed_quiz.core.services.countdown import CountdownTimer, TickScheduler
from timed_quiz.core.services.fullscreen_gate import FullscreenGate
from timed_quiz.core.services.persistence import PersistenceStore, SnapshotStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OpenQuiz:
    pass


@dataclass(frozen=True, slots=True)
class SelectOption:
    index: int
    option: str


@dataclass(frozen=True, slots=True)
class NextQuestion:
    pass


@dataclass(frozen=True, slots=True)
class PreviousQuestion:
    pass


@dataclass(frozen=True, slots=True)
class SubmitQuiz:
    pass


@dataclass(frozen=True, slots=True)
class ResetSession:
    pass


@dataclass(frozen=True, slots=True)
class Tick:
    pass


@dataclass(frozen=True, slots=True)
class FullscreenChanged:
    is_fullscreen: bool


class QuizSession:
    """Owns the SessionState of one quiz attempt and applies every command to it.

    User actions, countdown ticks and full-screen changes all enter through a
    single CommandQueue, so exactly one handler runs at a time. The status
    field is the only guard against double submission: every handler checks
    it before acting.
    """

    def __init__(
        self,
        questions: Sequence[QuestionRecord],
        store: PersistenceStore,
        scheduler: TickScheduler,
        gate: FullscreenGate,
        total_duration: int = DEFAULT_TOTAL_DURATION_SECONDS,
    ) -> None:
        if not questions:
            raise ValueError("Quiz must contain at least one question.")
        if total_duration <= 0:
            raise ValueError("Total duration must be a positive number of seconds.")

        self._questions: tuple[QuestionRecord, ...] = tuple(questions)
        self._total_duration = total_duration
        self._snapshots = SnapshotStore(store)
        self._gate = gate
        self._final_score: QuizScore | None = None
        self._change_listeners: list[Callable[[SessionView], None]] = []

        self._state = self._snapshots.load_or_default(self._questions, total_duration)
        if self._snapshots.has_snapshot():
            logger.info(
                "Resuming quiz at question %d with %d seconds left",
                self._state.active_question_index + 1,
                self._state.total_time_left,
            )

        self._queue = CommandQueue(self._handle)
        self._countdown = CountdownTimer(scheduler, on_tick=lambda: self._queue.post(Tick()))
        self._handlers: dict[type, Callable] = {
            OpenQuiz: self._handle_open,
            SelectOption: self._handle_select_option,
            NextQuestion: self._handle_next,
            PreviousQuestion: self._handle_previous,
            SubmitQuiz: self._handle_submit,
            ResetSession: self._handle_reset,
            Tick: self._handle_tick,
            FullscreenChanged: self._handle_fullscreen_changed,
        }
        gate.add_listener(lambda is_fullscreen: self._queue.post(FullscreenChanged(is_fullscreen)))

    # --- Commands ---

    def open(self) -> bool:
        """Request full-screen; False means the quiz did not start."""
        return self._queue.post(OpenQuiz())

    def select_option(self, index: int, option: str) -> None:
        self._queue.post(SelectOption(index, option))

    def next(self) -> None:
        self._queue.post(NextQuestion())

    def previous(self) -> None:
        self._queue.post(PreviousQuestion())

    def submit(self) -> None:
        self._queue.post(SubmitQuiz())

    def reset(self) -> None:
        """Wipe the whole store and start over, as a fresh launch would."""
        self._queue.post(ResetSession())

    def flush(self) -> None:
        """Write the snapshot before the host discards the session."""
        if self._state.status is SessionStatus.IN_PROGRESS:
            self._snapshots.save(self._state)
        self._snapshots.backend.sync()

    # --- Queries ---

    @property
    def state(self) -> SessionState:
        return replace(self._state, responses=dict(self._state.responses))

    @property
    def questions(self) -> tuple[QuestionRecord, ...]:
        return self._questions

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def total_duration(self) -> int:
        return self._total_duration

    @property
    def final_score(self) -> QuizScore | None:
        return self._final_score

    def is_countdown_running(self) -> bool:
        return self._countdown.is_running()

    def view(self) -> SessionView:
        status = self._state.status
        if status is SessionStatus.ENDED:
            phase = SessionPhase.ENDED
        elif self._gate.is_fullscreen:
            phase = SessionPhase.IN_PROGRESS
        else:
            phase = SessionPhase.NOT_STARTED
        return SessionView(
            phase=phase,
            status=status,
            active_question_index=self._state.active_question_index,
            question_count=len(self._questions),
            total_time_left=self._state.total_time_left,
            current_question=self._questions[self._state.active_question_index],
            responses=dict(self._state.responses),
            final_score=self._final_score,
        )

    def add_change_listener(self, listener: Callable[[SessionView], None]) -> None:
        self._change_listeners.append(listener)

    # --- Handlers ---

    def _handle(self, command: object) -> object:
        handler = self._handlers[type(command)]
        result = handler(command)
        if self._change_listeners:
            view = self.view()
            for listener in list(self._change_listeners):
                listener(view)
        return result

    def _handle_open(self, command: OpenQuiz) -> bool:
        # The timer is armed by the full-screen notification, not here.
        if not self._gate.request():
            return False
        logger.info("Quiz opened")
        return True

    def _handle_select_option(self, command: SelectOption) -> None:
        self._require_in_progress("select an option")
        if not 0 <= command.index < len(self._questions):
            raise InvalidCommandError(f"Question index {command.index} out of range")
        if command.option not in self._questions[command.index].options:
            raise InvalidCommandError(
                f"'{command.option}' is not an option of question {command.index + 1}"
            )
        self._state.responses[command.index] = command.option
        self._persist()

    def _handle_next(self, command: NextQuestion) -> None:
        self._require_in_progress("move to the next question")
        if self._state.active_question_index < len(self._questions) - 1:
            self._state.active_question_index += 1
            self._persist()
        else:
            self._end("last question passed")

    def _handle_previous(self, command: PreviousQuestion) -> None:
        self._require_in_progress("move to the previous question")
        if self._state.active_question_index > 0:
            self._state.active_question_index -= 1
            self._persist()

    def _handle_submit(self, command: SubmitQuiz) -> None:
        if self._state.status is SessionStatus.ENDED:
            return
        self._end("submitted")

    def _handle_reset(self, command: ResetSession) -> None:
        self._countdown.stop()
        self._snapshots.backend.clear()
        self._state = SessionState.fresh(self._total_duration)
        self._final_score = None
        self._gate.release()
        logger.info("Session reset; stored progress cleared")

    def _handle_tick(self, command: Tick) -> None:
        if self._state.status is not SessionStatus.IN_PROGRESS or not self._state.timer_active:
            logger.debug("Ignoring tick outside an active countdown")
            return
        if self._state.total_time_left <= 1:
            self._state.total_time_left = 0
            self._end("time expired")
            return
        self._state.total_time_left -= 1
        logger.debug("%d seconds left", self._state.total_time_left)
        self._persist()

    def _handle_fullscreen_changed(self, command: FullscreenChanged) -> None:
        if command.is_fullscreen:
            if self._state.status is SessionStatus.IN_PROGRESS:
                self._state.timer_active = True
                self._countdown.start()
        else:
            self._state.timer_active = False
            self._countdown.stop()

    # --- Helpers ---

    def _require_in_progress(self, action: str) -> None:
        if self._state.status is not SessionStatus.IN_PROGRESS:
            raise InvalidCommandError(f"Cannot {action}: the quiz has ended.")

    def _persist(self) -> None:
        self._snapshots.save(self._state)

    def _end(self, reason: str) -> None:
        self._state.status = SessionStatus.ENDED
        self._state.timer_active = False
        self._countdown.stop()
        self._snapshots.clear()
        self._final_score = score(self._state.responses, self._questions)
        logger.info(
            "Quiz ended (%s): %d/%d correct",
            reason,
            self._final_score.correct,
            self._final_score.total,
        )
