from __future__ import annotations

import argparse
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from ezquiz.core.config import get_settings
from ezquiz.core.logging import configure_logging
from ezquiz.quizzes.errors import QuizDocumentError
from ezquiz.quizzes.loading import read_quiz_file
from ezquiz.quizzes.parser import QuizDocumentParser


@dataclass(slots=True)
class ReportSummary:
    files_read: int = 0
    files_failed: int = 0
    questions_accepted: int = 0
    blocks_rejected: int = 0


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dry-run parse of exam .txt documents.")
    parser.add_argument("--input-dir", type=Path, default=Path("exams"))
    parser.add_argument(
        "--require-questions",
        action="store_true",
        help="Treat documents without any recognized question as failures.",
    )
    return parser.parse_args(argv)


def _document_paths(input_dir: Path) -> list[Path]:
    if not input_dir.is_dir():
        raise ValueError(f"input directory does not exist: {input_dir}")
    return sorted(p for p in input_dir.iterdir() if p.is_file() and p.suffix.lower() == ".txt")


def build_report(input_dir: Path, *, require_questions: bool) -> tuple[list[str], ReportSummary]:
    parser = QuizDocumentParser()
    summary = ReportSummary()
    lines: list[str] = []

    for path in _document_paths(input_dir):
        summary.files_read += 1
        try:
            result = read_quiz_file(path, parser=parser, require_questions=require_questions)
        except QuizDocumentError as exc:
            summary.files_failed += 1
            lines.append(f"quizdoc_failed file={path.name} error={exc}")
            continue

        summary.questions_accepted += len(result.quiz.questions)
        summary.blocks_rejected += len(result.rejections)
        reasons = Counter(rejection.reason.value for rejection in result.rejections)
        reason_stats = ",".join(f"{reason}={count}" for reason, count in sorted(reasons.items())) or "-"
        lines.append(
            f"quizdoc file={path.name} title={result.quiz.title!r} "
            f"questions={len(result.quiz.questions)} rejected={len(result.rejections)} reasons={reason_stats}"
        )
        for rejection in result.rejections:
            lines.append(
                f"  rejected block={rejection.block_index} line={rejection.line} "
                f"reason={rejection.reason.value} excerpt={rejection.excerpt!r}"
            )

    return lines, summary


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)

    lines, summary = build_report(args.input_dir, require_questions=args.require_questions)
    for line in lines:
        print(line)  # noqa: T201
    print(  # noqa: T201
        "quizdoc_report "
        f"files_read={summary.files_read} "
        f"files_failed={summary.files_failed} "
        f"questions_accepted={summary.questions_accepted} "
        f"blocks_rejected={summary.blocks_rejected}"
    )
    return 1 if summary.files_failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
