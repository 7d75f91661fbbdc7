"""Final scoring of a submitted quiz."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from timed_quiz.core.models import QuestionRecord, QuizScore


def score(responses: Mapping[int, str], questions: Sequence[QuestionRecord]) -> QuizScore:
    """Count the questions whose recorded response equals the answer.

    Unanswered questions never match. Raises ValueError for an empty
    question list, which indicates a misconfigured bank.
    """
    total = len(questions)
    if total == 0:
        raise ValueError("Cannot score a quiz without questions.")

    correct = sum(
        1 for index, question in enumerate(questions) if responses.get(index) == question.answer
    )
    return QuizScore(
        correct=correct,
        total=total,
        percentage=round(correct / total * 100, 2),
    )
