from __future__ import annotations

from pathlib import Path

import structlog

from ezquiz.core.config import get_settings
from ezquiz.quizzes.errors import EmptyQuizError, UnparsableDocumentError
from ezquiz.quizzes.parser import QuizDocumentParser
from ezquiz.quizzes.types import ParseResult

logger = structlog.get_logger(__name__)


def decode_document(raw: bytes, *, source_name: str = "<bytes>") -> str:
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.warning("quiz_document_undecodable", source_name=source_name, position=exc.start)
        raise UnparsableDocumentError(f"{source_name}: not valid UTF-8 text (byte {exc.start})") from exc
    if "\x00" in text:
        logger.warning("quiz_document_undecodable", source_name=source_name, position=text.index("\x00"))
        raise UnparsableDocumentError(f"{source_name}: binary content, NUL byte found")
    return text


def ensure_questions(result: ParseResult) -> ParseResult:
    if result.is_empty:
        raise EmptyQuizError(result)
    return result


def load_quiz_document(
    raw: bytes,
    source_name: str,
    *,
    parser: QuizDocumentParser | None = None,
    require_questions: bool | None = None,
) -> ParseResult:
    text = decode_document(raw, source_name=source_name)
    parser = parser or QuizDocumentParser()
    result = parser.parse(text, source_name, source_name=source_name)

    if require_questions is None:
        require_questions = get_settings().quiz_require_questions
    if require_questions:
        ensure_questions(result)
    return result


def read_quiz_file(
    path: Path,
    *,
    parser: QuizDocumentParser | None = None,
    require_questions: bool | None = None,
) -> ParseResult:
    return load_quiz_document(
        path.read_bytes(),
        path.name,
        parser=parser,
        require_questions=require_questions,
    )
