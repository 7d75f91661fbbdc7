"""Component for the start page shown outside full-screen mode."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from timed_quiz.constants.ui_constants import (
    WELCOME_BUTTON,
    WELCOME_RESUME_HINT,
    WELCOME_SUBTITLE,
    WELCOME_TITLE,
)
from timed_quiz.core.models import SessionView
from timed_quiz.styling.styles import Styles


class WelcomePanel(QWidget):
    """Start page; the start button asks for full-screen mode."""

    def __init__(self, on_start_quiz: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_start_quiz = on_start_quiz
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(WELCOME_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style(28))
        layout.addWidget(self.title_label)

        card = QFrame(self)
        card.setObjectName("card")
        card.setMinimumWidth(480)
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        self.subtitle_label = QLabel(WELCOME_SUBTITLE, card)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        self.subtitle_label.setStyleSheet(Styles.get_title_style(18))
        card_layout.addWidget(self.subtitle_label)

        self.resume_label = QLabel(WELCOME_RESUME_HINT, card)
        self.resume_label.setAlignment(Qt.AlignCenter)
        self.resume_label.setVisible(False)
        card_layout.addWidget(self.resume_label)

        self.start_button = QPushButton(WELCOME_BUTTON, card)
        self.start_button.clicked.connect(self._handle_start_click)
        card_layout.addWidget(self.start_button, alignment=Qt.AlignCenter)

        layout.addWidget(card, alignment=Qt.AlignCenter)

    def _handle_start_click(self) -> None:
        self.on_start_quiz()

    def update_view(self, view: SessionView, total_duration: int) -> None:
        has_progress = (
            bool(view.responses)
            or view.active_question_index > 0
            or view.total_time_left < total_duration
        )
        self.resume_label.setVisible(has_progress)
