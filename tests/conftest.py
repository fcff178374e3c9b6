from __future__ import annotations

import pytest
import structlog
from structlog.testing import LogCapture

from ezquiz.core.config import get_settings

QUIZ_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_JSON",
    "QUIZ_TITLE_PREFIX",
    "QUIZ_QUESTION_KEYWORD",
    "QUIZ_ANSWER_KEYWORD",
    "QUIZ_OPTION_LABELS",
    "QUIZ_FALLBACK_TITLE_SUFFIXES",
    "QUIZ_REQUIRE_QUESTIONS",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in QUIZ_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_output():
    structlog.reset_defaults()
    capture = LogCapture()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    yield capture
    structlog.reset_defaults()
