from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

EXCELLENT_MIN_PERCENT = 80
GOOD_MIN_PERCENT = 50


class AttemptGrade(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs_work"


@dataclass(frozen=True, slots=True)
class AnswerOutcome:
    position: int
    selected: str
    correct_answer: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class AttemptResult:
    score: int
    total: int
    percentage: int
    grade: AttemptGrade


def score_percentage(score: int, total: int) -> int:
    if total <= 0:
        return 0
    # half-up rounding, 2.5 -> 3
    return (score * 200 + total) // (2 * total)


def grade_for(percentage: int) -> AttemptGrade:
    if percentage >= EXCELLENT_MIN_PERCENT:
        return AttemptGrade.EXCELLENT
    if percentage >= GOOD_MIN_PERCENT:
        return AttemptGrade.GOOD
    return AttemptGrade.NEEDS_WORK
