"""Loading of the static question bank.

File format: a JSON array of question objects, in presentation order.

    [
      {
        "question": "What is the capital of France?",
        "options": ["Berlin", "Paris", "Madrid", "Rome"],
        "answer": "Paris"
      }
    ]

The bank is read once at start-up and never mutated afterwards.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from timed_quiz.core.errors import QuestionBankError
from timed_quiz.core.models import QuestionRecord

logger = logging.getLogger(__name__)

_QUESTION_LIST = TypeAdapter(list[QuestionRecord])


def load_question_bank(file_path: Path) -> tuple[QuestionRecord, ...]:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise QuestionBankError(f"Could not read question bank {file_path}: {exc}") from exc
    questions = parse_questions(text)
    logger.info("Loaded %d questions from %s", len(questions), file_path)
    return questions


def parse_questions(text: str) -> tuple[QuestionRecord, ...]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuestionBankError(f"Question bank is not valid JSON: {exc.msg} (line {exc.lineno}).") from exc

    if not isinstance(raw, list):
        raise QuestionBankError("Question bank must be a JSON array of questions.")

    try:
        questions = _QUESTION_LIST.validate_python(raw)
    except ValidationError as exc:
        raise QuestionBankError(f"Question bank failed validation:\n{exc}") from exc

    if not questions:
        raise QuestionBankError("Question bank did not contain any questions.")
    return tuple(questions)
