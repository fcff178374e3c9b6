from __future__ import annotations

import structlog

from ezquiz.attempts.errors import AttemptStateError, EmptyQuizAttemptError, InvalidAnswerOptionError
from ezquiz.attempts.types import AnswerOutcome, AttemptResult, grade_for, score_percentage
from ezquiz.quizzes.types import Question, Quiz

logger = structlog.get_logger(__name__)


class QuizAttempt:
    """One pass through a quiz: select, submit, advance, repeat, then finish."""

    def __init__(self, quiz: Quiz) -> None:
        if not quiz.questions:
            raise EmptyQuizAttemptError(f"quiz {quiz.quiz_id} has no questions")
        self.quiz = quiz
        self._index = 0
        self._selected: str | None = None
        self._submitted = False
        self._outcomes: list[AnswerOutcome] = []

    @property
    def current_question(self) -> Question:
        return self.quiz.questions[self._index]

    @property
    def selected(self) -> str | None:
        return self._selected

    @property
    def is_submitted(self) -> bool:
        return self._submitted

    @property
    def is_last_question(self) -> bool:
        return self._index == len(self.quiz.questions) - 1

    @property
    def score(self) -> int:
        return sum(1 for outcome in self._outcomes if outcome.is_correct)

    @property
    def outcomes(self) -> tuple[AnswerOutcome, ...]:
        return tuple(self._outcomes)

    def select(self, label: str) -> None:
        if self._submitted:
            raise AttemptStateError("answer already submitted for this question")
        question = self.current_question
        if question.option_for(label) is None:
            raise InvalidAnswerOptionError(f"question {question.position} has no option {label!r}")
        self._selected = label

    def submit(self) -> AnswerOutcome:
        if self._submitted:
            raise AttemptStateError("answer already submitted for this question")
        if self._selected is None:
            raise AttemptStateError("no option selected")

        question = self.current_question
        outcome = AnswerOutcome(
            position=question.position,
            selected=self._selected,
            correct_answer=question.correct_answer,
            is_correct=self._selected == question.correct_answer,
        )
        self._outcomes.append(outcome)
        self._submitted = True
        return outcome

    def advance(self) -> bool:
        if not self._submitted:
            raise AttemptStateError("submit an answer before moving on")
        if self.is_last_question:
            return False
        self._index += 1
        self._selected = None
        self._submitted = False
        return True

    def finish(self) -> AttemptResult:
        if not (self.is_last_question and self._submitted):
            raise AttemptStateError("attempt is not complete")

        total = len(self.quiz.questions)
        percentage = score_percentage(self.score, total)
        result = AttemptResult(
            score=self.score,
            total=total,
            percentage=percentage,
            grade=grade_for(percentage),
        )
        logger.info(
            "quiz_attempt_finished",
            quiz_id=self.quiz.quiz_id,
            score=result.score,
            total=result.total,
            grade=result.grade.value,
        )
        return result
