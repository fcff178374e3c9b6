from __future__ import annotations

import pytest

from ezquiz.quizzes.library import QuizLibrary
from ezquiz.quizzes.serialization import dump_quizzes, load_quizzes
from ezquiz.quizzes.types import Option, Question, Quiz


class _MemoryStore:
    def __init__(self) -> None:
        self.raw = ""

    def save_all(self, quizzes: list[Quiz]) -> None:
        self.raw = dump_quizzes(quizzes)

    def load_all(self) -> list[Quiz]:
        return load_quizzes(self.raw)


def _quiz(quiz_id: str, title: str = "Đề") -> Quiz:
    question = Question(
        position=1,
        text="2+2=?",
        options=(Option(label="A", content="4"), Option(label="B", content="5")),
        correct_answer="A",
    )
    return Quiz(quiz_id=quiz_id, title=title, source_name=f"{quiz_id}.txt", questions=(question,))


def test_add_keeps_insertion_order() -> None:
    library = QuizLibrary()
    library.add(_quiz("b"))
    library.add(_quiz("a"))

    assert [quiz.quiz_id for quiz in library] == ["b", "a"]
    assert len(library) == 2


def test_add_rejects_duplicate_id() -> None:
    library = QuizLibrary([_quiz("a")])

    with pytest.raises(ValueError, match="already present"):
        library.add(_quiz("a", title="khác"))


def test_remove_and_get() -> None:
    library = QuizLibrary([_quiz("a"), _quiz("b")])

    assert library.remove("a") is True
    assert library.remove("a") is False
    assert library.get("a") is None
    assert library.get("b") is not None


def test_save_and_load_through_store() -> None:
    store = _MemoryStore()
    QuizLibrary([_quiz("a"), _quiz("b")]).save(store)

    restored = QuizLibrary.load(store)

    assert [quiz.quiz_id for quiz in restored] == ["a", "b"]
    assert restored.get("a") == _quiz("a")


def test_load_from_empty_store() -> None:
    assert len(QuizLibrary.load(_MemoryStore())) == 0


def test_load_skips_duplicate_ids_from_store(log_output) -> None:
    store = _MemoryStore()
    store.raw = dump_quizzes([_quiz("a"), _quiz("b"), _quiz("a", title="bản sao")])

    library = QuizLibrary.load(store)

    assert [quiz.quiz_id for quiz in library] == ["a", "b"]
    assert library.get("a").title == "Đề"
    assert log_output.entries == [
        {"event": "quiz_library_duplicate_skipped", "log_level": "warning", "quiz_id": "a"}
    ]
