from __future__ import annotations

import pytest

from ezquiz.core.config import Settings
from ezquiz.quizzes.markers import DEFAULT_MARKERS, QuizMarkers


def test_default_markers_use_vietnamese_literals() -> None:
    assert DEFAULT_MARKERS.block_token == "**Câu"
    assert DEFAULT_MARKERS.answer_re.search("**Đáp án đúng: C**").group("label") == "C"


@pytest.mark.parametrize("labels", ["", "AB1", "Ab", "AAB"])
def test_invalid_option_labels_are_rejected(labels: str) -> None:
    with pytest.raises(ValueError, match="option label"):
        QuizMarkers(option_labels=labels)


def test_blank_keyword_is_rejected() -> None:
    with pytest.raises(ValueError, match="question_keyword"):
        QuizMarkers(question_keyword="  ")


def test_keywords_with_regex_characters_are_escaped() -> None:
    markers = QuizMarkers(question_keyword="Q.", answer_keyword="Key (final)")

    assert markers.block_start_re.search("**Qx") is None
    assert markers.answer_re.search("**Key (final): B**").group("label") == "B"


def test_markers_from_settings(monkeypatch) -> None:
    monkeypatch.setenv("QUIZ_QUESTION_KEYWORD", "Question")
    monkeypatch.setenv("QUIZ_ANSWER_KEYWORD", "Correct answer")
    monkeypatch.setenv("QUIZ_OPTION_LABELS", " ABCDE ")

    markers = QuizMarkers.from_settings(Settings())

    assert markers.block_token == "**Question"
    assert markers.option_labels == "ABCDE"
    assert markers.option_re.match("E. five") is not None
