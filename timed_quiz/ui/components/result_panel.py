"""Component for the final score page."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from timed_quiz.constants.ui_constants import (
    RESULT_EXIT_BUTTON,
    RESULT_EXIT_HINT,
    RESULT_PERCENTAGE_TEMPLATE,
    RESULT_SCORE_TEMPLATE,
    RESULT_TITLE,
)
from timed_quiz.core.models import SessionView
from timed_quiz.styling.styles import Styles


class ResultPanel(QWidget):
    """Shows the score once the quiz has ended."""

    def __init__(self, on_exit: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_exit = on_exit
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        card = QFrame(self)
        card.setObjectName("card")
        card.setMinimumWidth(480)
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        self.title_label = QLabel(RESULT_TITLE, card)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style(28))
        card_layout.addWidget(self.title_label)

        self.score_label = QLabel("", card)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet("font-size: 18pt;")
        card_layout.addWidget(self.score_label)

        self.percentage_label = QLabel("", card)
        self.percentage_label.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(self.percentage_label)

        self.hint_label = QLabel(RESULT_EXIT_HINT, card)
        self.hint_label.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(self.hint_label)

        self.exit_button = QPushButton(RESULT_EXIT_BUTTON, card)
        self.exit_button.clicked.connect(self._handle_exit_click)
        card_layout.addWidget(self.exit_button, alignment=Qt.AlignCenter)

        layout.addWidget(card, alignment=Qt.AlignCenter)

    def _handle_exit_click(self) -> None:
        self.on_exit()

    def update_view(self, view: SessionView) -> None:
        result = view.final_score
        if result is None:
            return
        self.score_label.setText(RESULT_SCORE_TEMPLATE.format(correct=result.correct, total=result.total))
        self.percentage_label.setText(RESULT_PERCENTAGE_TEMPLATE.format(percentage=result.percentage_text))
