from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Option:
    label: str
    content: str


@dataclass(frozen=True, slots=True)
class Question:
    position: int
    text: str
    options: tuple[Option, ...]
    correct_answer: str
    source_number: int | None = None
    tag: str | None = None

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(option.label for option in self.options)

    def option_for(self, label: str) -> Option | None:
        for option in self.options:
            if option.label == label:
                return option
        return None

    @property
    def correct_option(self) -> Option:
        option = self.option_for(self.correct_answer)
        if option is None:
            raise LookupError(f"question {self.position}: correct answer {self.correct_answer!r} has no option")
        return option


@dataclass(frozen=True, slots=True)
class Quiz:
    quiz_id: str
    title: str
    source_name: str
    questions: tuple[Question, ...]

    @property
    def question_count(self) -> int:
        return len(self.questions)


class RejectionReason(str, Enum):
    MISSING_PROMPT = "missing_prompt"
    EMPTY_PROMPT = "empty_prompt"
    MISSING_ANSWER = "missing_answer"
    ANSWER_BEFORE_PROMPT_END = "answer_before_prompt_end"
    NO_OPTIONS = "no_options"
    DUPLICATE_OPTION_LABEL = "duplicate_option_label"
    ANSWER_NOT_IN_OPTIONS = "answer_not_in_options"


@dataclass(frozen=True, slots=True)
class BlockRejection:
    block_index: int
    line: int
    reason: RejectionReason
    excerpt: str


@dataclass(frozen=True, slots=True)
class ParseResult:
    quiz: Quiz
    rejections: tuple[BlockRejection, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.quiz.questions

    @property
    def block_count(self) -> int:
        return len(self.quiz.questions) + len(self.rejections)
