from __future__ import annotations

import itertools
import threading
from typing import Callable
from uuid import uuid4

QuizIdFactory = Callable[[], str]


def uuid_quiz_id() -> str:
    return uuid4().hex


class CounterQuizIds:
    """Monotonic ids, safe to share between threads parsing in parallel."""

    def __init__(self, *, prefix: str = "quiz_", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{self._prefix}{value}"
