"""Component for answering the active question."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from timed_quiz.constants.quiz_constants import TIME_WARNING_WINDOW_SECONDS
from timed_quiz.constants.ui_constants import (
    NEXT_BUTTON,
    PREV_BUTTON,
    QUESTION_TITLE_TEMPLATE,
    SUBMIT_BUTTON,
    TIME_LEFT_TEMPLATE,
)
from timed_quiz.core.models import SessionView
from timed_quiz.core.quiz_session import QuizSession
from timed_quiz.styling.styles import Styles
from timed_quiz.ui.question_renderer import format_clock, render_question_html


class QuestionPanel(QWidget):
    """UI component showing one question, the clock and navigation."""

    def __init__(self, session: QuizSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self._rendered_index: int | None = None
        self._option_buttons: list[QRadioButton] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        card = QFrame(self)
        card.setObjectName("card")
        card.setMinimumWidth(560)
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        self.title_label = QLabel("", card)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style(20))
        card_layout.addWidget(self.title_label)

        self.timer_label = QLabel("", card)
        self.timer_label.setAlignment(Qt.AlignRight)
        card_layout.addWidget(self.timer_label)

        self.question_label = QLabel("", card)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        card_layout.addWidget(self.question_label)

        self.options_layout = QVBoxLayout()
        card_layout.addLayout(self.options_layout)
        self.option_group = QButtonGroup(self)
        self.option_group.idClicked.connect(self._handle_option_clicked)

        button_row = QHBoxLayout()
        self.prev_button = QPushButton(PREV_BUTTON, card)
        self.prev_button.setObjectName("secondary")
        self.prev_button.clicked.connect(self._handle_previous)
        button_row.addWidget(self.prev_button)
        button_row.addStretch()
        self.next_button = QPushButton(NEXT_BUTTON, card)
        self.next_button.clicked.connect(self._handle_next)
        button_row.addWidget(self.next_button)
        card_layout.addLayout(button_row)

        layout.addWidget(card, alignment=Qt.AlignCenter)

    def update_view(self, view: SessionView) -> None:
        if view.current_question is None:
            return
        if view.active_question_index != self._rendered_index:
            self._rebuild_options(view)

        self._sync_selection(view.selected_option)

        self.title_label.setText(QUESTION_TITLE_TEMPLATE.format(number=view.active_question_index + 1))
        self.timer_label.setText(TIME_LEFT_TEMPLATE.format(clock=format_clock(view.total_time_left)))
        self.timer_label.setStyleSheet(
            Styles.get_timer_style(warning=view.total_time_left <= TIME_WARNING_WINDOW_SECONDS)
        )
        self.prev_button.setEnabled(view.active_question_index > 0)
        self.next_button.setText(SUBMIT_BUTTON if view.is_last_question else NEXT_BUTTON)

    def _rebuild_options(self, view: SessionView) -> None:
        for button in self._option_buttons:
            self.option_group.removeButton(button)
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []

        question = view.current_question
        self.question_label.setText(render_question_html(question.question))
        for option_id, option in enumerate(question.options):
            button = QRadioButton(option, self)
            self.option_group.addButton(button, option_id)
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)
        self._rendered_index = view.active_question_index

    def _sync_selection(self, selected_option: str | None) -> None:
        # Exclusive groups refuse to uncheck the last checked button.
        self.option_group.setExclusive(False)
        for button in self._option_buttons:
            button.setChecked(button.text() == selected_option)
        self.option_group.setExclusive(True)

    def _handle_option_clicked(self, option_id: int) -> None:
        view = self.session.view()
        options = view.current_question.options
        if 0 <= option_id < len(options):
            self.session.select_option(view.active_question_index, options[option_id])

    def _handle_previous(self) -> None:
        self.session.previous()

    def _handle_next(self) -> None:
        self.session.next()
