from __future__ import annotations

from typing import Iterator

import structlog

from ezquiz.quizzes.serialization import QuizStore
from ezquiz.quizzes.types import Quiz

logger = structlog.get_logger(__name__)


class QuizLibrary:
    def __init__(self, quizzes: list[Quiz] | None = None) -> None:
        self._quizzes: list[Quiz] = []
        for quiz in quizzes or []:
            self.add(quiz)

    @classmethod
    def load(cls, store: QuizStore) -> QuizLibrary:
        library = cls()
        for quiz in store.load_all():
            if library.get(quiz.quiz_id) is not None:
                logger.warning("quiz_library_duplicate_skipped", quiz_id=quiz.quiz_id)
                continue
            library.add(quiz)
        return library

    def save(self, store: QuizStore) -> None:
        store.save_all(list(self._quizzes))

    def add(self, quiz: Quiz) -> None:
        if self.get(quiz.quiz_id) is not None:
            raise ValueError(f"quiz id already present: {quiz.quiz_id}")
        self._quizzes.append(quiz)

    def get(self, quiz_id: str) -> Quiz | None:
        for quiz in self._quizzes:
            if quiz.quiz_id == quiz_id:
                return quiz
        return None

    def remove(self, quiz_id: str) -> bool:
        for index, quiz in enumerate(self._quizzes):
            if quiz.quiz_id == quiz_id:
                del self._quizzes[index]
                return True
        return False

    def __iter__(self) -> Iterator[Quiz]:
        return iter(tuple(self._quizzes))

    def __len__(self) -> int:
        return len(self._quizzes)
