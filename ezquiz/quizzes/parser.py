from __future__ import annotations

import structlog

from ezquiz.core.config import get_settings
from ezquiz.quizzes.identity import QuizIdFactory, uuid_quiz_id
from ezquiz.quizzes.markers import QuizMarkers
from ezquiz.quizzes.scanner import (
    BlockTokens,
    RawBlock,
    find_title,
    normalize_newlines,
    scan_block,
    split_blocks,
)
from ezquiz.quizzes.types import (
    BlockRejection,
    Option,
    ParseResult,
    Question,
    Quiz,
    RejectionReason,
)

logger = structlog.get_logger(__name__)

EXCERPT_LENGTH = 80


def strip_title_suffix(name: str, suffixes: tuple[str, ...]) -> str:
    lowered = name.lower()
    for suffix in suffixes:
        if suffix and lowered.endswith(suffix.lower()):
            return name[: -len(suffix)]
    return name


def _excerpt(block: RawBlock) -> str:
    first_line = block.text.split("\n", 1)[0].strip()
    if len(first_line) <= EXCERPT_LENGTH:
        return first_line
    return first_line[: EXCERPT_LENGTH - 3] + "..."


def _check_block(tokens: BlockTokens) -> RejectionReason | None:
    if tokens.prompt is None:
        return RejectionReason.MISSING_PROMPT
    if tokens.answer is None:
        return RejectionReason.MISSING_ANSWER
    if tokens.answer.start < tokens.prompt.end:
        return RejectionReason.ANSWER_BEFORE_PROMPT_END
    if not tokens.prompt.text:
        return RejectionReason.EMPTY_PROMPT

    labels = [option.label for option in tokens.options]
    if not labels:
        return RejectionReason.NO_OPTIONS
    if len(set(labels)) != len(labels):
        return RejectionReason.DUPLICATE_OPTION_LABEL
    if tokens.answer.text not in labels:
        return RejectionReason.ANSWER_NOT_IN_OPTIONS
    return None


class QuizDocumentParser:
    def __init__(
        self,
        *,
        markers: QuizMarkers | None = None,
        id_factory: QuizIdFactory | None = None,
        title_suffixes: tuple[str, ...] | None = None,
    ) -> None:
        if markers is None or title_suffixes is None:
            settings = get_settings()
            if markers is None:
                markers = QuizMarkers.from_settings(settings)
            if title_suffixes is None:
                title_suffixes = settings.fallback_title_suffixes
        self.markers = markers
        self.id_factory = id_factory or uuid_quiz_id
        self.title_suffixes = title_suffixes

    def parse(self, document: str, fallback_title: str, *, source_name: str | None = None) -> ParseResult:
        if source_name is None:
            source_name = fallback_title
        text = normalize_newlines(document)
        title = find_title(text, self.markers)
        if title is None:
            title = strip_title_suffix(fallback_title, self.title_suffixes)

        questions: list[Question] = []
        rejections: list[BlockRejection] = []
        with structlog.contextvars.bound_contextvars(source_name=source_name):
            for block in split_blocks(text, self.markers):
                tokens = scan_block(block.text, self.markers)
                reason = _check_block(tokens)
                if reason is not None:
                    rejections.append(
                        BlockRejection(
                            block_index=block.index,
                            line=block.line,
                            reason=reason,
                            excerpt=_excerpt(block),
                        )
                    )
                    logger.debug(
                        "quiz_block_rejected",
                        block_index=block.index,
                        line=block.line,
                        reason=reason.value,
                    )
                    continue
                questions.append(self._build_question(tokens, position=len(questions) + 1))

            logger.info(
                "quiz_document_parsed",
                questions=len(questions),
                rejected_blocks=len(rejections),
            )
            if not questions:
                logger.warning("quiz_document_without_questions")

        quiz = Quiz(
            quiz_id=self.id_factory(),
            title=title,
            source_name=source_name,
            questions=tuple(questions),
        )
        return ParseResult(quiz=quiz, rejections=tuple(rejections))

    @staticmethod
    def _build_question(tokens: BlockTokens, *, position: int) -> Question:
        # _check_block guarantees prompt and answer are present here.
        assert tokens.prompt is not None and tokens.answer is not None
        return Question(
            position=position,
            text=tokens.prompt.text,
            options=tuple(Option(label=option.label, content=option.content) for option in tokens.options),
            correct_answer=tokens.answer.text,
            source_number=tokens.source_number,
            tag=tokens.tag,
        )


def parse_quiz_document(
    document: str,
    fallback_title: str,
    *,
    source_name: str | None = None,
    markers: QuizMarkers | None = None,
    id_factory: QuizIdFactory | None = None,
    title_suffixes: tuple[str, ...] | None = None,
) -> ParseResult:
    parser = QuizDocumentParser(markers=markers, id_factory=id_factory, title_suffixes=title_suffixes)
    return parser.parse(document, fallback_title, source_name=source_name)
