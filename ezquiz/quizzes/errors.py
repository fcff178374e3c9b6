from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ezquiz.quizzes.types import ParseResult


class QuizDocumentError(Exception):
    pass


class UnparsableDocumentError(QuizDocumentError):
    pass


class EmptyQuizError(QuizDocumentError):
    def __init__(self, result: ParseResult) -> None:
        self.result = result
        super().__init__(
            f"{result.quiz.source_name}: no question blocks recognized "
            f"(rejected_blocks={len(result.rejections)})"
        )
