import os

os.environ["QT_QPA_PLATFORM"] = "offscreen"

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication, QWidget

from app_main import resolve_question_bank_path
from timed_quiz.constants.quiz_constants import ACTIVE_QUESTION_INDEX_KEY, SNAPSHOT_KEYS
from timed_quiz.core.models import SessionPhase, SessionStatus
from timed_quiz.ui import quiz_main_window
from timed_quiz.ui.qt_host import WindowFullscreenControl
from timed_quiz.ui.quiz_main_window import QuizMainWindow


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window(qapp, questions, store):
    main_window = QuizMainWindow(questions, store=store)
    main_window.show()
    yield main_window
    main_window.close()


def _enter_fullscreen(window: QuizMainWindow) -> None:
    # The offscreen platform refuses showFullScreen requests; set the state directly.
    window.setWindowState(Qt.WindowState.WindowFullScreen)


class TestFullscreenHost:
    def test_headless_platform_refuses_fullscreen(self, qapp):
        widget = QWidget()
        widget.show()

        assert WindowFullscreenControl(widget).request_fullscreen() is False
        assert not widget.isFullScreen()

    def test_refused_start_warns_and_stays_on_the_welcome_page(self, window, monkeypatch):
        warnings = []
        monkeypatch.setattr(quiz_main_window, "show_warning", lambda *args: warnings.append(args))

        window.welcome_panel.start_button.click()

        assert len(warnings) == 1
        assert not window.gate.is_fullscreen
        assert window.session.state.timer_active is False
        assert window.page_stack.currentWidget() is window.welcome_panel

    def test_window_state_change_arms_the_countdown(self, window):
        _enter_fullscreen(window)

        assert window.gate.is_fullscreen
        assert window.session.state.timer_active is True
        assert window.session.is_countdown_running()
        assert window.session.view().phase is SessionPhase.IN_PROGRESS
        assert window.page_stack.currentWidget() is window.question_panel

    def test_escape_leaves_fullscreen_and_pauses(self, window):
        _enter_fullscreen(window)

        QTest.keyClick(window, Qt.Key.Key_Escape)

        assert not window.isFullScreen()
        assert not window.gate.is_fullscreen
        assert window.session.state.timer_active is False
        assert not window.session.is_countdown_running()
        assert window.page_stack.currentWidget() is window.welcome_panel


class TestWindowLifecycle:
    def test_close_flushes_the_snapshot(self, window, store):
        _enter_fullscreen(window)
        assert all(store.get(key) is None for key in SNAPSHOT_KEYS)

        window.close()

        for key in SNAPSHOT_KEYS:
            assert store.get(key) is not None
        assert store.get(ACTIVE_QUESTION_INDEX_KEY) == "0"

    def test_exit_button_after_results_resets_and_leaves_fullscreen(self, window, store):
        _enter_fullscreen(window)
        window.session.submit()
        assert window.page_stack.currentWidget() is window.result_panel

        window.result_panel.exit_button.click()

        assert not window.isFullScreen()
        assert window.session.state.status is SessionStatus.IN_PROGRESS
        assert window.session.final_score is None
        assert window.page_stack.currentWidget() is window.welcome_panel


class TestQuestionBankArgument:
    def test_first_argument_is_the_bank_path(self):
        assert resolve_question_bank_path(["custom.json"]).name == "custom.json"

    def test_bundled_bank_is_the_default(self):
        path = resolve_question_bank_path([])

        assert path.name == "questions.json"
        assert path.is_file()

    def test_leading_option_is_not_taken_for_a_path(self):
        assert resolve_question_bank_path(["-reverse", "custom.json"]).name == "questions.json"
