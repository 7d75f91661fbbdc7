import pytest

from timed_quiz.core.models import QuestionRecord
from timed_quiz.core.scoring import score


def test_score_counts_only_matching_answers(questions):
    result = score({0: "A", 1: "X"}, questions)

    assert result.correct == 1
    assert result.total == 3
    assert result.percentage == 33.33
    assert result.percentage_text == "33.33%"


def test_all_correct_scores_full_marks(questions):
    result = score({0: "A", 1: "B", 2: "C"}, questions)

    assert result.correct == 3
    assert result.percentage == 100.0


def test_unanswered_questions_never_match():
    bank = [QuestionRecord(question="Only?", options=["yes", "no"], answer="yes")]

    result = score({}, bank)

    assert result.correct == 0
    assert result.percentage == 0.0
    assert result.percentage_text == "0.00%"


def test_responses_outside_the_bank_are_ignored(questions):
    result = score({5: "A", 2: "C"}, questions)

    assert result.correct == 1


def test_empty_question_list_is_rejected():
    with pytest.raises(ValueError):
        score({0: "A"}, [])
