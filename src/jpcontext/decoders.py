"""Per-encoding character length and hiragana order decoding.

Each decoder looks at the character starting at ``buf[pos]`` and reports how
many bytes it occupies and, when it is a hiragana character, its order in
the bigram table.  Decoders are pure functions: they never fail on malformed
input and never read past the end of *buf*.  A reported length may still run
past the end of the buffer; the caller is responsible for handling that.
"""

from collections.abc import Callable
from typing import NamedTuple

from jpcontext._utils import _resolve_encoding
from jpcontext.enums import JapaneseEncoding

BytesLike = bytes | bytearray | memoryview

#: Order reported for anything that is not a recognised hiragana character.
NOT_HIRAGANA: int = -1


class DecodedChar(NamedTuple):
    """Byte length and hiragana order of one character."""

    char_len: int
    order: int


# Shared results for the common non-hiragana cases.
_SINGLE = DecodedChar(1, NOT_HIRAGANA)
_DOUBLE = DecodedChar(2, NOT_HIRAGANA)
_TRIPLE = DecodedChar(3, NOT_HIRAGANA)


def sjis_order(buf: BytesLike, pos: int) -> DecodedChar:
    """Decode the Shift_JIS character at *pos*.

    Lead bytes: 0x81-0x9F, 0xE0-0xFC (two-byte characters)
    Hiragana: 0x82 followed by 0x9F-0xF1, order = trail - 0x9F
    """
    lead = buf[pos]
    if (0x81 <= lead <= 0x9F) or (0xE0 <= lead <= 0xFC):
        if lead == 0x82 and pos + 1 < len(buf):
            trail = buf[pos + 1]
            if 0x9F <= trail <= 0xF1:
                return DecodedChar(2, trail - 0x9F)
        return _DOUBLE
    return _SINGLE


def eucjp_order(buf: BytesLike, pos: int) -> DecodedChar:
    """Decode the EUC-JP character at *pos*.

    Two-byte: lead 0x8E (SS2) or 0xA1-0xFE
    Three-byte: lead 0x8F (SS3)
    Hiragana: 0xA4 followed by 0xA1-0xF3, order = trail - 0xA1
    """
    lead = buf[pos]
    if lead == 0x8E or 0xA1 <= lead <= 0xFE:
        if lead == 0xA4 and pos + 1 < len(buf):
            trail = buf[pos + 1]
            if 0xA1 <= trail <= 0xF3:
                return DecodedChar(2, trail - 0xA1)
        return _DOUBLE
    if lead == 0x8F:
        return _TRIPLE
    return _SINGLE


OrderDecoder = Callable[[BytesLike, int], DecodedChar]

_DECODERS: dict[JapaneseEncoding, OrderDecoder] = {
    JapaneseEncoding.SHIFT_JIS: sjis_order,
    JapaneseEncoding.EUC_JP: eucjp_order,
}


def get_decoder(encoding: JapaneseEncoding | str) -> OrderDecoder:
    """Return the order decoder for *encoding*.

    :param encoding: A :class:`JapaneseEncoding` member or a codec-style name
        such as ``"shift_jis"`` or ``"euc-jp"``.
    :raises ValueError: If *encoding* is not a supported Japanese encoding.
    """
    return _DECODERS[_resolve_encoding(encoding)]
