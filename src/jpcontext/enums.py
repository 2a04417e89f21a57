"""Enumerations for jpcontext."""

import enum


class JapaneseEncoding(enum.Enum):
    """The multi-byte encodings a context analyzer can be built for."""

    SHIFT_JIS = "shift_jis"
    EUC_JP = "euc-jp"


class AnalysisState(enum.IntEnum):
    """
    This enum represents the states a context analyzer can be in.

    ``DONE`` is terminal until the analyzer is reset.
    """

    ACTIVE = 0
    DONE = 1
