# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest

from jpcontext.analyzer import EUCJPContextAnalysis, SJISContextAnalysis

# Plain-hiragana greeting; every adjacent pair has a non-zero category.
GREETING = "こんにちは"

# Mixed sentence with kanji, katakana, punctuation and ASCII.
SENTENCE = (
    "これは日本語のテストです。ひらがなとカタカナと漢字がまざっています。"
    "Python でよみこんで、しらべてみましょう。"
)


def sjis_hiragana(order: int) -> bytes:
    """Shift_JIS bytes for the hiragana character with the given order."""
    return bytes((0x82, 0x9F + order))


def eucjp_hiragana(order: int) -> bytes:
    """EUC-JP bytes for the hiragana character with the given order."""
    return bytes((0xA4, 0xA1 + order))


@pytest.fixture
def sjis_analyzer() -> SJISContextAnalysis:
    return SJISContextAnalysis()


@pytest.fixture
def eucjp_analyzer() -> EUCJPContextAnalysis:
    return EUCJPContextAnalysis()


@pytest.fixture(params=["shift_jis", "euc-jp"])
def codec(request: pytest.FixtureRequest) -> str:
    """Each supported encoding, by its Python codec name."""
    return request.param
