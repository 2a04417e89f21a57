"""Streaming hiragana context analysis for Shift_JIS and EUC-JP.

The analyzer walks the input one character at a time, pairs each hiragana
character with the hiragana character before it, and counts how often each
pair falls into each frequency category of :data:`JP2_CHAR_CONTEXT`.  Text in
the hypothesised encoding produces mostly common pairs; text in some other
encoding produces pairs the table has never seen.
"""

from __future__ import annotations

import logging

from jpcontext._utils import (
    ENOUGH_REL_THRESHOLD,
    MAX_REL_THRESHOLD,
    MINIMUM_DATA_THRESHOLD,
    _resolve_encoding,
    _validate_data_threshold,
    _validate_max_relations,
)
from jpcontext.decoders import NOT_HIRAGANA, BytesLike, get_decoder
from jpcontext.enums import AnalysisState, JapaneseEncoding
from jpcontext.models import JP2_CHAR_CONTEXT, NUM_OF_CATEGORY


class JapaneseContextAnalysis:
    """Incremental hiragana bigram analysis for one encoding hypothesis.

    Feed chunks of a byte stream in order with :meth:`feed`, then read
    :meth:`get_confidence`.  A character split across two chunks is skipped
    rather than reassembled, so at most one character per chunk boundary is
    left out of the statistics.

    Each instance owns its own counters.  Use one instance per encoding and
    per stream; the frequency table itself is shared.
    """

    MAX_REL_THRESHOLD = MAX_REL_THRESHOLD
    ENOUGH_REL_THRESHOLD = ENOUGH_REL_THRESHOLD
    MINIMUM_DATA_THRESHOLD = MINIMUM_DATA_THRESHOLD
    NUM_OF_CATEGORY = NUM_OF_CATEGORY

    def __init__(
        self,
        encoding: JapaneseEncoding | str,
        *,
        data_threshold: int = 0,
        max_relations: int = MAX_REL_THRESHOLD,
    ) -> None:
        """Initialize the analyzer.

        :param encoding: The encoding hypothesis to analyse under.
        :param data_threshold: Relations that must be exceeded before
            :meth:`get_confidence` returns a number.
        :param max_relations: Relations after which analysis stops.
        :raises ValueError: If *encoding* is unsupported or a threshold is
            not a valid integer.
        """
        self._encoding = _resolve_encoding(encoding)
        _validate_data_threshold(data_threshold)
        _validate_max_relations(max_relations)
        self._get_order = get_decoder(self._encoding)
        self._data_threshold = data_threshold
        self._max_relations = max_relations
        self.logger = logging.getLogger(__name__)
        self._total_rel = 0
        self._rel_sample = [0] * NUM_OF_CATEGORY
        self._need_to_skip_char_num = 0
        self._last_char_order = NOT_HIRAGANA
        self._done = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(encoding={self._encoding.value!r}, "
            f"total_relations={self._total_rel}, state={self.state.name})"
        )

    def reset(self) -> None:
        """Return to the initial state, keeping the configured thresholds."""
        self._total_rel = 0
        self._rel_sample = [0] * NUM_OF_CATEGORY
        self._need_to_skip_char_num = 0
        self._last_char_order = NOT_HIRAGANA
        self._done = False
        self.logger.debug("%s context analysis reset", self._encoding.value)

    def feed(self, byte_str: BytesLike) -> AnalysisState:
        """Analyse the next chunk of the stream.

        Chunks must arrive in stream order with no gaps or overlaps.  Empty
        chunks are accepted and change nothing.

        :param byte_str: The next chunk of bytes.
        :returns: The analyzer state after consuming the chunk.
        :raises TypeError: If *byte_str* is not a bytes-like object.
        """
        if not isinstance(byte_str, (bytes, bytearray, memoryview)):
            msg = f"expected a bytes-like object, got {type(byte_str).__name__}"
            raise TypeError(msg)
        if self._done:
            return AnalysisState.DONE

        num_bytes = len(byte_str)
        # Tail bytes of a character that began in the previous chunk.
        if self._need_to_skip_char_num >= num_bytes:
            self._need_to_skip_char_num -= num_bytes
            return AnalysisState.ACTIVE
        i = self._need_to_skip_char_num
        self._need_to_skip_char_num = 0

        get_order = self._get_order
        rel_sample = self._rel_sample
        last_order = self._last_char_order
        while i < num_bytes:
            char_len, order = get_order(byte_str, i)
            i += char_len
            if i > num_bytes:
                self._need_to_skip_char_num = i - num_bytes
                last_order = NOT_HIRAGANA
                break
            if order != NOT_HIRAGANA and last_order != NOT_HIRAGANA:
                if self._total_rel >= self._max_relations:
                    self._done = True
                    self.logger.debug(
                        "%s context analysis done after %d relations",
                        self._encoding.value,
                        self._total_rel,
                    )
                    break
                self._total_rel += 1
                rel_sample[JP2_CHAR_CONTEXT[last_order][order]] += 1
            last_order = order

        self._last_char_order = last_order
        return self.state

    def get_confidence(self) -> float | None:
        """Return the share of observed pairs the table has seen before.

        :returns: A float in ``[0.0, 1.0]``, or ``None`` while no more than
            ``data_threshold`` relations have been observed.  ``None`` means
            "not enough data" and must not be read as zero confidence.
        """
        if self._total_rel > self._data_threshold:
            return (self._total_rel - self._rel_sample[0]) / self._total_rel
        return None

    def got_enough_data(self) -> bool:
        """Whether enough relations have been seen to trust the confidence."""
        return self._total_rel > self.ENOUGH_REL_THRESHOLD

    @property
    def encoding(self) -> JapaneseEncoding:
        """The encoding hypothesis this analyzer decodes with."""
        return self._encoding

    @property
    def state(self) -> AnalysisState:
        return AnalysisState.DONE if self._done else AnalysisState.ACTIVE

    @property
    def done(self) -> bool:
        """Whether further :meth:`feed` calls would have no effect."""
        return self._done

    @property
    def data_threshold(self) -> int:
        return self._data_threshold

    @data_threshold.setter
    def data_threshold(self, value: int) -> None:
        _validate_data_threshold(value)
        self._data_threshold = value

    @property
    def max_relations(self) -> int:
        return self._max_relations

    @property
    def total_relations(self) -> int:
        """Number of consecutive hiragana pairs counted so far."""
        return self._total_rel

    @property
    def category_histogram(self) -> tuple[int, ...]:
        """Counted pairs per frequency category, indexed 0-5."""
        return tuple(self._rel_sample)

    @property
    def last_char_order(self) -> int:
        """Order of the last complete character, or -1 if none applies."""
        return self._last_char_order

    @property
    def pending_skip_bytes(self) -> int:
        """Bytes at the start of the next chunk that will be skipped."""
        return self._need_to_skip_char_num


class SJISContextAnalysis(JapaneseContextAnalysis):
    """Context analysis under the Shift_JIS hypothesis."""

    def __init__(
        self, *, data_threshold: int = 0, max_relations: int = MAX_REL_THRESHOLD
    ) -> None:
        super().__init__(
            JapaneseEncoding.SHIFT_JIS,
            data_threshold=data_threshold,
            max_relations=max_relations,
        )


class EUCJPContextAnalysis(JapaneseContextAnalysis):
    """Context analysis under the EUC-JP hypothesis."""

    def __init__(
        self, *, data_threshold: int = 0, max_relations: int = MAX_REL_THRESHOLD
    ) -> None:
        super().__init__(
            JapaneseEncoding.EUC_JP,
            data_threshold=data_threshold,
            max_relations=max_relations,
        )


def analyze(
    data: BytesLike,
    encoding: JapaneseEncoding | str,
    *,
    data_threshold: int = 0,
) -> float | None:
    """Run a fresh analyzer over *data* and return its confidence.

    :param data: The complete byte string to examine.
    :param encoding: The encoding hypothesis.
    :param data_threshold: See :class:`JapaneseContextAnalysis`.
    :returns: The confidence, or ``None`` if there was not enough data.
    """
    analyzer = JapaneseContextAnalysis(encoding, data_threshold=data_threshold)
    analyzer.feed(data)
    return analyzer.get_confidence()
