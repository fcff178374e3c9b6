from __future__ import annotations

import re
from dataclasses import dataclass

from ezquiz.quizzes.markers import QuizMarkers

_NUMBER_RE = re.compile(r"\d+")
_TAG_RE = re.compile(r"\([^()]*\)")


@dataclass(frozen=True, slots=True)
class Span:
    text: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class RawBlock:
    index: int
    line: int
    text: str


@dataclass(frozen=True, slots=True)
class OptionToken:
    label: str
    content: str


@dataclass(frozen=True, slots=True)
class StrayLine:
    text: str


@dataclass(frozen=True, slots=True)
class BlockTokens:
    header: str | None
    source_number: int | None
    tag: str | None
    prompt: Span | None
    answer: Span | None
    lines: tuple[OptionToken | StrayLine, ...]

    @property
    def options(self) -> tuple[OptionToken, ...]:
        return tuple(token for token in self.lines if isinstance(token, OptionToken))


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def find_title(document: str, markers: QuizMarkers) -> str | None:
    match = markers.title_re.search(document)
    if match is None:
        return None
    title = match.group("title").strip()
    return title or None


def split_blocks(document: str, markers: QuizMarkers) -> list[RawBlock]:
    """Cut the document at every block-start token.

    Text before the first token is front matter and is dropped. Each block
    gets the question keyword back in front so it reads like
    ``Câu 3: ...`` again.
    """
    starts = [match.start() for match in markers.block_start_re.finditer(document)]
    blocks: list[RawBlock] = []
    token_len = len(markers.block_token)
    line = 1
    previous = 0
    for index, start in enumerate(starts, start=1):
        end = starts[index] if index < len(starts) else len(document)
        body = document[start + token_len : end]
        line += document.count("\n", previous, start)
        previous = start
        blocks.append(
            RawBlock(
                index=index,
                line=line,
                text=markers.question_keyword + body,
            )
        )
    return blocks


def _parse_header(header: str) -> tuple[int | None, str | None]:
    number_match = _NUMBER_RE.search(header)
    tag_match = _TAG_RE.search(header)
    number = int(number_match.group(0)) if number_match else None
    tag = tag_match.group(0).strip() if tag_match else None
    return number, tag


def tokenize_option_region(region: str, markers: QuizMarkers) -> tuple[OptionToken | StrayLine, ...]:
    tokens: list[OptionToken | StrayLine] = []
    for raw_line in region.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        match = markers.option_re.match(line)
        if match is None:
            tokens.append(StrayLine(text=line))
            continue
        tokens.append(OptionToken(label=match.group("label"), content=match.group("content").strip()))
    return tuple(tokens)


def scan_block(block: str, markers: QuizMarkers) -> BlockTokens:
    question_match = markers.question_re.match(block)
    answer_match = markers.answer_re.search(block)

    header: str | None = None
    source_number: int | None = None
    tag: str | None = None
    prompt: Span | None = None
    if question_match is not None:
        header = question_match.group("header").strip()
        source_number, tag = _parse_header(header)
        prompt = Span(
            text=question_match.group("prompt").strip(),
            start=question_match.start("prompt"),
            end=question_match.end(),
        )

    answer: Span | None = None
    if answer_match is not None:
        answer = Span(
            text=answer_match.group("label"),
            start=answer_match.start(),
            end=answer_match.end(),
        )

    lines: tuple[OptionToken | StrayLine, ...] = ()
    if prompt is not None and answer is not None and answer.start >= prompt.end:
        lines = tokenize_option_region(block[prompt.end : answer.start], markers)

    return BlockTokens(
        header=header,
        source_number=source_number,
        tag=tag,
        prompt=prompt,
        answer=answer,
        lines=lines,
    )
