from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from ezquiz.quizzes.identity import CounterQuizIds, uuid_quiz_id


def test_uuid_quiz_ids_are_unique() -> None:
    ids = {uuid_quiz_id() for _ in range(100)}

    assert len(ids) == 100


def test_counter_ids_are_monotonic_with_prefix() -> None:
    ids = CounterQuizIds(prefix="q", start=7)

    assert [ids(), ids(), ids()] == ["q7", "q8", "q9"]


def test_counter_ids_unique_across_threads() -> None:
    ids = CounterQuizIds()
    with ThreadPoolExecutor(max_workers=8) as pool:
        generated = list(pool.map(lambda _: ids(), range(400)))

    assert len(set(generated)) == 400
