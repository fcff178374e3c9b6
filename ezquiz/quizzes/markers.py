from __future__ import annotations

import re
from dataclasses import dataclass, field

from ezquiz.core.config import Settings

BOLD = "**"


def _validate_labels(labels: str) -> None:
    if not labels:
        raise ValueError("option labels must not be empty")
    for label in labels:
        if not (label.isalpha() and label.isupper()):
            raise ValueError(f"option label must be a single uppercase letter, got {label!r}")
    if len(set(labels)) != len(labels):
        raise ValueError(f"option labels must be unique, got {labels!r}")


@dataclass(frozen=True)
class QuizMarkers:
    """Literal markers of the exam document format.

    Every literal is escaped before it reaches a pattern, so keywords may
    contain any punctuation. Labels form the option-label alphabet, in the
    order a well-formed block lists them.
    """

    title_prefix: str = "###"
    question_keyword: str = "Câu"
    answer_keyword: str = "Đáp án đúng"
    option_labels: str = "ABCD"
    bold: str = BOLD

    title_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    block_start_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    question_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    answer_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    option_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in ("title_prefix", "question_keyword", "answer_keyword", "bold"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must not be empty")
        _validate_labels(self.option_labels)

        bold = re.escape(self.bold)
        label_class = "[" + "".join(re.escape(label) for label in self.option_labels) + "]"
        compiled = {
            "title_re": re.compile(rf"{re.escape(self.title_prefix)}[ \t]*{bold}(?P<title>.*?){bold}"),
            "block_start_re": re.compile(bold + re.escape(self.question_keyword)),
            "question_re": re.compile(
                rf"{re.escape(self.question_keyword)}(?P<header>[^:\n]*):(?P<prompt>.*?){bold}",
                re.DOTALL,
            ),
            "answer_re": re.compile(
                rf"{bold}{re.escape(self.answer_keyword)}:\s*(?P<label>{label_class})\s*{bold}"
            ),
            "option_re": re.compile(rf"^(?P<label>{label_class})\.\s*(?P<content>.*)$"),
        }
        for name, pattern in compiled.items():
            object.__setattr__(self, name, pattern)

    @classmethod
    def from_settings(cls, settings: Settings) -> QuizMarkers:
        return cls(
            title_prefix=settings.quiz_title_prefix,
            question_keyword=settings.quiz_question_keyword,
            answer_keyword=settings.quiz_answer_keyword,
            option_labels=settings.quiz_option_labels.strip(),
        )

    @property
    def block_token(self) -> str:
        return self.bold + self.question_keyword


DEFAULT_MARKERS = QuizMarkers()
