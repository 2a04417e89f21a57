"""Thread-safety tests for analyzers sharing the frequency table."""

from __future__ import annotations

import threading

from jpcontext.analyzer import JapaneseContextAnalysis
from jpcontext.enums import JapaneseEncoding

_TEXT = "これはテストです。ひらがなのならびをしらべます。" * 20

_SAMPLES: list[tuple[JapaneseEncoding, bytes]] = [
    (JapaneseEncoding.SHIFT_JIS, _TEXT.encode("shift_jis")),
    (JapaneseEncoding.EUC_JP, _TEXT.encode("euc-jp")),
]


def _analyze_in_chunks(encoding: JapaneseEncoding, data: bytes, size: int):
    analyzer = JapaneseContextAnalysis(encoding)
    for i in range(0, len(data), size):
        analyzer.feed(data[i : i + size])
    return analyzer.total_relations, analyzer.category_histogram


def _run_concurrent(n_workers: int, iterations: int) -> list[str]:
    """Spawn *n_workers* threads per sample, each analysing *iterations* times.

    Returns a list of error strings (empty = success).
    """
    expected = {
        encoding: _analyze_in_chunks(encoding, data, 64) for encoding, data in _SAMPLES
    }
    errors: list[str] = []
    barrier = threading.Barrier(n_workers * len(_SAMPLES))

    def worker(encoding: JapaneseEncoding, data: bytes) -> None:
        barrier.wait()
        for _ in range(iterations):
            result = _analyze_in_chunks(encoding, data, 64)
            if result != expected[encoding]:
                errors.append(
                    f"{encoding.value}: expected {expected[encoding]}, got {result}"
                )

    threads = []
    for _ in range(n_workers):
        for encoding, data in _SAMPLES:
            t = threading.Thread(target=worker, args=(encoding, data))
            threads.append(t)
            t.start()

    for t in threads:
        t.join(timeout=60)

    return errors


def test_concurrent_analyzers_are_independent():
    errors = _run_concurrent(n_workers=4, iterations=10)
    assert errors == [], f"{len(errors)} errors: {errors[:5]}"


def test_instances_do_not_share_counters():
    first = JapaneseContextAnalysis(JapaneseEncoding.SHIFT_JIS)
    second = JapaneseContextAnalysis(JapaneseEncoding.SHIFT_JIS)
    first.feed("こんにちは".encode("shift_jis"))
    assert first.total_relations == 4
    assert second.total_relations == 0
    assert second.category_histogram == (0, 0, 0, 0, 0, 0)
