"""Qt main window hosting the full-screen timed quiz."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from timed_quiz.constants.quiz_constants import DEFAULT_TOTAL_DURATION_SECONDS
from timed_quiz.constants.ui_constants import (
    FULLSCREEN_REFUSED_MESSAGE,
    FULLSCREEN_REFUSED_TITLE,
    WINDOW_TITLE,
)
from timed_quiz.core.models import QuestionRecord, SessionPhase, SessionView
from timed_quiz.core.quiz_session import QuizSession
from timed_quiz.core.services.fullscreen_gate import FullscreenGate
from timed_quiz.core.services.persistence import PersistenceStore
from timed_quiz.styling.styles import Styles
from timed_quiz.ui.components.question_panel import QuestionPanel
from timed_quiz.ui.components.result_panel import ResultPanel
from timed_quiz.ui.components.welcome_panel import WelcomePanel
from timed_quiz.ui.dialog_helpers import show_warning
from timed_quiz.ui.qt_host import QtTickScheduler, WindowFullscreenControl

logger = logging.getLogger(__name__)


class QuizMainWindow(QMainWindow):
    """Main Qt window switching between the start, question and result pages.

    The window is the full-screen host: its state-change events feed the
    gate, Escape leaves full-screen the way a browser does, and closing the
    window flushes the progress snapshot.
    """

    def __init__(
        self,
        questions: Sequence[QuestionRecord],
        store: PersistenceStore,
        total_duration: int = DEFAULT_TOTAL_DURATION_SECONDS,
    ) -> None:
        super().__init__()
        self.gate = FullscreenGate(WindowFullscreenControl(self))
        self.session = QuizSession(
            questions,
            store,
            QtTickScheduler(self),
            self.gate,
            total_duration=total_duration,
        )
        self.setWindowTitle(WINDOW_TITLE)

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self.session.add_change_listener(self._render)
        self._render(self.session.view())

    def _build_ui(self) -> None:
        self.page_stack = QStackedWidget(self)

        self.welcome_panel = WelcomePanel(on_start_quiz=self._handle_start_quiz, parent=self)
        self.question_panel = QuestionPanel(self.session, parent=self)
        self.result_panel = ResultPanel(on_exit=self._handle_exit, parent=self)

        self.page_stack.addWidget(self.welcome_panel)
        self.page_stack.addWidget(self.question_panel)
        self.page_stack.addWidget(self.result_panel)
        self.setCentralWidget(self.page_stack)

    def _render(self, view: SessionView) -> None:
        if view.phase == SessionPhase.ENDED:
            self.result_panel.update_view(view)
            self.page_stack.setCurrentWidget(self.result_panel)
        elif view.phase == SessionPhase.IN_PROGRESS:
            self.question_panel.update_view(view)
            self.page_stack.setCurrentWidget(self.question_panel)
        else:
            self.welcome_panel.update_view(view, self.session.total_duration)
            self.page_stack.setCurrentWidget(self.welcome_panel)

    def _handle_start_quiz(self) -> None:
        if not self.session.open():
            show_warning(self, FULLSCREEN_REFUSED_TITLE, FULLSCREEN_REFUSED_MESSAGE)

    def _handle_exit(self) -> None:
        self.session.reset()

    # --- Qt event hooks ---

    def changeEvent(self, event: QEvent) -> None:
        if event.type() == QEvent.Type.WindowStateChange:
            self.gate.notify(self.isFullScreen())
        super().changeEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key_Escape and self.isFullScreen():
            self.showNormal()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.session.flush()
        logger.info("Window closed; progress saved")
        super().closeEvent(event)
