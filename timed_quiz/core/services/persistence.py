"""Key/value persistence for the session progress snapshot."""

from __future__ import annotations

from collections.abc import Sequence
import json
import logging
from typing import Protocol

from pydantic import StrictInt, StrictStr, TypeAdapter, ValidationError

from timed_quiz.constants.quiz_constants import (
    ACTIVE_QUESTION_INDEX_KEY,
    RESPONSES_KEY,
    SNAPSHOT_KEYS,
    TOTAL_TIME_LEFT_KEY,
)
from timed_quiz.core.models import QuestionRecord, SessionState

logger = logging.getLogger(__name__)

_INT_VALUE = TypeAdapter(StrictInt)
_RESPONSES_VALUE = TypeAdapter(dict[int, StrictStr])


class PersistenceStore(Protocol):
    """String store that survives restarts but not an explicit clear."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def clear(self) -> None: ...

    def sync(self) -> None: ...


class MemoryStore:
    """Process-local store, used for tests and as a fallback."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def clear(self) -> None:
        self._values.clear()

    def sync(self) -> None:
        pass


class SnapshotStore:
    """Reads and writes the {index, time left, responses} snapshot."""

    def __init__(self, store: PersistenceStore) -> None:
        self._store = store

    @property
    def backend(self) -> PersistenceStore:
        return self._store

    def save(self, state: SessionState) -> None:
        responses = {str(index): option for index, option in state.responses.items()}
        self._store.set(RESPONSES_KEY, json.dumps(responses))
        self._store.set(ACTIVE_QUESTION_INDEX_KEY, json.dumps(state.active_question_index))
        self._store.set(TOTAL_TIME_LEFT_KEY, json.dumps(state.total_time_left))

    def clear(self) -> None:
        for key in SNAPSHOT_KEYS:
            self._store.remove(key)

    def has_snapshot(self) -> bool:
        return any(self._store.get(key) is not None for key in SNAPSHOT_KEYS)

    def load_or_default(self, questions: Sequence[QuestionRecord], total_duration: int) -> SessionState:
        """Rebuild session state, falling back per field on absent or bad values.

        Status always starts in progress; there is no persisted terminal flag.
        """
        state = SessionState.fresh(total_duration)
        question_count = len(questions)

        index = self._read_int(ACTIVE_QUESTION_INDEX_KEY)
        if index is not None:
            if 0 <= index < question_count:
                state.active_question_index = index
            else:
                logger.warning("Ignoring out-of-range question index %d in snapshot", index)

        time_left = self._read_int(TOTAL_TIME_LEFT_KEY)
        if time_left is not None:
            if 0 <= time_left <= total_duration:
                state.total_time_left = time_left
            else:
                logger.warning("Ignoring out-of-range time left %d in snapshot", time_left)

        responses = self._read_responses(questions)
        if responses is not None:
            state.responses = responses

        return state

    def _read_int(self, key: str) -> int | None:
        raw = self._store.get(key)
        if raw is None:
            return None
        try:
            return _INT_VALUE.validate_json(raw)
        except ValidationError:
            logger.warning("Discarding malformed snapshot value for %r", key)
            return None

    def _read_responses(self, questions: Sequence[QuestionRecord]) -> dict[int, str] | None:
        raw = self._store.get(RESPONSES_KEY)
        if raw is None:
            return None
        try:
            responses = _RESPONSES_VALUE.validate_json(raw)
        except ValidationError:
            logger.warning("Discarding malformed responses in snapshot")
            return None

        for index, option in responses.items():
            if not 0 <= index < len(questions) or option not in questions[index].options:
                logger.warning("Discarding responses in snapshot: no option %r for question %d", option, index)
                return None
        return responses
