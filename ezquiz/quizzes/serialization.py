from __future__ import annotations

import json
from typing import Iterable, Protocol

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from ezquiz.quizzes.types import Option, Question, Quiz

logger = structlog.get_logger(__name__)


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class OptionPayload(_Payload):
    label: str = Field(min_length=1, max_length=1)
    content: str


class QuestionPayload(_Payload):
    position: int = Field(alias="id", ge=1)
    text: str
    options: list[OptionPayload] = Field(min_length=1)
    correct_answer: str = Field(alias="correctAnswer")
    source_number: int | None = Field(default=None, alias="sourceNumber")
    tag: str | None = None

    @model_validator(mode="after")
    def _check_answer_labels(self) -> QuestionPayload:
        labels = [option.label for option in self.options]
        if len(set(labels)) != len(labels):
            raise ValueError(f"duplicate option labels: {labels}")
        if self.correct_answer not in labels:
            raise ValueError(f"correctAnswer {self.correct_answer!r} is not one of {labels}")
        return self


class QuizPayload(_Payload):
    quiz_id: str = Field(alias="id", min_length=1)
    title: str
    source_name: str = Field(alias="fileName")
    questions: list[QuestionPayload]

    @model_validator(mode="after")
    def _check_positions(self) -> QuizPayload:
        positions = [question.position for question in self.questions]
        if positions != list(range(1, len(positions) + 1)):
            raise ValueError(f"question ids must run 1..{len(positions)}, got {positions}")
        return self


_QUIZ_LIST = TypeAdapter(list[QuizPayload])


def to_payload(quiz: Quiz) -> QuizPayload:
    return QuizPayload(
        quiz_id=quiz.quiz_id,
        title=quiz.title,
        source_name=quiz.source_name,
        questions=[
            QuestionPayload(
                position=question.position,
                text=question.text,
                options=[OptionPayload(label=option.label, content=option.content) for option in question.options],
                correct_answer=question.correct_answer,
                source_number=question.source_number,
                tag=question.tag,
            )
            for question in quiz.questions
        ],
    )


def from_payload(payload: QuizPayload) -> Quiz:
    return Quiz(
        quiz_id=payload.quiz_id,
        title=payload.title,
        source_name=payload.source_name,
        questions=tuple(
            Question(
                position=question.position,
                text=question.text,
                options=tuple(Option(label=option.label, content=option.content) for option in question.options),
                correct_answer=question.correct_answer,
                source_number=question.source_number,
                tag=question.tag,
            )
            for question in payload.questions
        ),
    )


def dump_quizzes(quizzes: Iterable[Quiz]) -> str:
    payloads = [to_payload(quiz) for quiz in quizzes]
    return _QUIZ_LIST.dump_json(payloads, by_alias=True, exclude_none=True).decode("utf-8")


def load_quizzes(raw: str) -> list[Quiz]:
    if not raw.strip():
        return []

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("quiz_payload_parse_failed")
        return []

    try:
        payloads = _QUIZ_LIST.validate_python(parsed)
    except ValidationError as exc:
        logger.warning("quiz_payload_invalid_shape", errors=exc.error_count())
        return []
    return [from_payload(payload) for payload in payloads]


class QuizStore(Protocol):
    def save_all(self, quizzes: list[Quiz]) -> None: ...

    def load_all(self) -> list[Quiz]: ...
