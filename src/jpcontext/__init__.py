"""Streaming hiragana context analysis for Japanese encoding detection."""

from __future__ import annotations

from jpcontext._utils import (
    ENOUGH_REL_THRESHOLD,
    MAX_REL_THRESHOLD,
    MINIMUM_DATA_THRESHOLD,
)
from jpcontext.analyzer import (
    EUCJPContextAnalysis,
    JapaneseContextAnalysis,
    SJISContextAnalysis,
    analyze,
)
from jpcontext.enums import AnalysisState, JapaneseEncoding

__version__ = "1.0.0"
__all__ = [
    "ENOUGH_REL_THRESHOLD",
    "MAX_REL_THRESHOLD",
    "MINIMUM_DATA_THRESHOLD",
    "AnalysisState",
    "EUCJPContextAnalysis",
    "JapaneseContextAnalysis",
    "JapaneseEncoding",
    "SJISContextAnalysis",
    "analyze",
]
