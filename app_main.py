"""Application entry point for TimedQuiz."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from timed_quiz.constants.about import APP_NAME, APP_ORGANIZATION, APP_VERSION
from timed_quiz.constants.quiz_constants import DEFAULT_QUESTION_BANK_FILE
from timed_quiz.core.errors import QuestionBankError
from timed_quiz.core.question_bank import load_question_bank
from timed_quiz.core.services.settings_store import SettingsStore
from timed_quiz.ui.quiz_main_window import QuizMainWindow
from timed_quiz.utils.logging_config import configure_logging

_PACKAGE_DIR = Path(__file__).resolve().parent / "timed_quiz"


def resolve_question_bank_path(args: list[str]) -> Path:
    """Use the first argument as the bank path when given, else the bundled bank.

    ``args`` must already be stripped of the program name and of the options
    Qt consumes (``QApplication.arguments()[1:]``), so an option value such
    as ``-platform offscreen`` is never taken for a path.
    """
    if args and not args[0].startswith("-"):
        return Path(args[0])
    return _PACKAGE_DIR / DEFAULT_QUESTION_BANK_FILE


def main() -> int:
    """Initialize logging, load the question bank, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    app.setOrganizationName(APP_ORGANIZATION)
    app.setApplicationName(APP_NAME)

    bank_path = resolve_question_bank_path(app.arguments()[1:])
    try:
        questions = load_question_bank(bank_path)
    except QuestionBankError as exc:
        logger.error("Cannot start quiz: %s", exc)
        return 1

    window = QuizMainWindow(questions, store=SettingsStore())
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
