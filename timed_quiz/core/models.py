"""Domain models for the timed quiz."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from pydantic import BaseModel, Field, model_validator


class QuestionRecord(BaseModel):
    """Multiple-choice question whose answer is one of its options."""

    model_config = {"frozen": True}

    question: str = Field(..., min_length=1)
    options: list[str] = Field(..., min_length=1)
    answer: str

    @model_validator(mode="after")
    def _answer_in_options(self) -> "QuestionRecord":
        if self.answer not in self.options:
            raise ValueError(f"Answer '{self.answer}' is not one of the options {self.options}.")
        return self


class SessionStatus(Enum):
    """Persisted lifecycle of a quiz session."""

    IN_PROGRESS = auto()
    ENDED = auto()


class SessionPhase(Enum):
    """What the test-taker currently sees."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    ENDED = auto()


@dataclass(slots=True)
class SessionState:
    """Mutable state of one quiz attempt, owned by QuizSession."""

    active_question_index: int
    total_time_left: int
    responses: dict[int, str] = field(default_factory=dict)
    status: SessionStatus = SessionStatus.IN_PROGRESS
    timer_active: bool = False

    @classmethod
    def fresh(cls, total_duration: int) -> SessionState:
        return cls(active_question_index=0, total_time_left=total_duration)


@dataclass(frozen=True, slots=True)
class QuizScore:
    """Final result of a submitted quiz."""

    correct: int
    total: int
    percentage: float

    @property
    def percentage_text(self) -> str:
        return f"{self.percentage:.2f}%"


@dataclass(frozen=True, slots=True)
class SessionView:
    """Read-only snapshot handed to the presentation layer."""

    phase: SessionPhase
    status: SessionStatus
    active_question_index: int
    question_count: int
    total_time_left: int
    current_question: QuestionRecord | None
    responses: dict[int, str]
    final_score: QuizScore | None

    @property
    def is_last_question(self) -> bool:
        return self.active_question_index >= self.question_count - 1

    @property
    def selected_option(self) -> str | None:
        return self.responses.get(self.active_question_index)
