"""Text helpers for the question page."""

from __future__ import annotations

from timed_quiz.core.markdown_renderer import renderer


def render_question_html(question_text: str, font_size: int = 16) -> str:
    """Render question text as an HTML fragment sized for the question label."""
    body = renderer.render_fragment(question_text)
    return f'<div style="font-size: {font_size}pt; font-weight: bold;">{body}</div>'


def format_clock(seconds: int) -> str:
    """Format remaining seconds as m:ss."""
    minutes, remaining_seconds = divmod(max(0, seconds), 60)
    return f"{minutes}:{remaining_seconds:02d}"
