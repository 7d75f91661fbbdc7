import pytest

from timed_quiz.ui.question_renderer import format_clock, render_question_html


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(60, "1:00"), (59, "0:59"), (5, "0:05"), (600, "10:00"), (0, "0:00"), (-3, "0:00")],
)
def test_format_clock(seconds, expected):
    assert format_clock(seconds) == expected


def test_question_markdown_is_rendered():
    html = render_question_html("Which planet is the **Red Planet**?")

    assert "<strong>Red Planet</strong>" in html
    assert "font-size: 16pt" in html


def test_raw_html_is_not_passed_through():
    html = render_question_html("<script>alert(1)</script>")

    assert "<script>" not in html
