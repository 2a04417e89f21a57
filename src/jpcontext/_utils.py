"""Internal shared utilities for jpcontext."""

from __future__ import annotations

from jpcontext.enums import JapaneseEncoding

#: Relations observed before the analyzer stops looking at new data.
MAX_REL_THRESHOLD: int = 1000

#: Relations after which a caller may treat the confidence as settled.
ENOUGH_REL_THRESHOLD: int = 100

#: Suggested ``data_threshold`` for callers that want a few relations first.
MINIMUM_DATA_THRESHOLD: int = 4

# Codec-style names accepted in place of a JapaneseEncoding member.
_ENCODING_ALIASES: dict[str, JapaneseEncoding] = {
    "shift_jis": JapaneseEncoding.SHIFT_JIS,
    "shift-jis": JapaneseEncoding.SHIFT_JIS,
    "sjis": JapaneseEncoding.SHIFT_JIS,
    "cp932": JapaneseEncoding.SHIFT_JIS,
    "windows-31j": JapaneseEncoding.SHIFT_JIS,
    "euc-jp": JapaneseEncoding.EUC_JP,
    "euc_jp": JapaneseEncoding.EUC_JP,
    "eucjp": JapaneseEncoding.EUC_JP,
}


def _resolve_encoding(encoding: JapaneseEncoding | str) -> JapaneseEncoding:
    """Normalise *encoding* to a :class:`JapaneseEncoding` member."""
    if isinstance(encoding, JapaneseEncoding):
        return encoding
    if isinstance(encoding, str):
        resolved = _ENCODING_ALIASES.get(encoding.strip().lower())
        if resolved is not None:
            return resolved
    msg = f"unsupported encoding for Japanese context analysis: {encoding!r}"
    raise ValueError(msg)


def _validate_data_threshold(data_threshold: int) -> None:
    """Raise ValueError if *data_threshold* is not a non-negative integer."""
    if (
        isinstance(data_threshold, bool)
        or not isinstance(data_threshold, int)
        or data_threshold < 0
    ):
        msg = "data_threshold must be a non-negative integer"
        raise ValueError(msg)


def _validate_max_relations(max_relations: int) -> None:
    """Raise ValueError if *max_relations* is not a positive integer."""
    if (
        isinstance(max_relations, bool)
        or not isinstance(max_relations, int)
        or max_relations < 1
    ):
        msg = "max_relations must be a positive integer"
        raise ValueError(msg)
