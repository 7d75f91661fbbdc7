"""Exception types raised by the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for quiz errors."""


class QuestionBankError(QuizError):
    """Raised when the question bank cannot be loaded or validated."""


class InvalidCommandError(QuizError):
    """Raised when a command violates the session's preconditions.

    State is never mutated when this is raised.
    """
