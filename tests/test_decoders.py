"""Tests for the per-encoding order decoders."""

from __future__ import annotations

import pytest

from jpcontext.decoders import (
    NOT_HIRAGANA,
    DecodedChar,
    eucjp_order,
    get_decoder,
    sjis_order,
)
from jpcontext.enums import JapaneseEncoding

_HIRAGANA = [chr(code) for code in range(0x3041, 0x3094)]


@pytest.mark.parametrize(
    ("buf", "expected"),
    [
        (b"A", (1, -1)),
        (b"\x7f", (1, -1)),
        (b"\x80", (1, -1)),
        (b"\xa0", (1, -1)),
        (b"\xdf", (1, -1)),
        (b"\xfd", (1, -1)),
        (b"\x81\x40", (2, -1)),
        (b"\x9f\x40", (2, -1)),
        (b"\xe0\x40", (2, -1)),
        (b"\xfc\x40", (2, -1)),
        (b"\x82\x9f", (2, 0)),
        (b"\x82\xa0", (2, 1)),
        (b"\x82\xf1", (2, 82)),
        (b"\x82\x9e", (2, -1)),
        (b"\x82\xf2", (2, -1)),
        (b"\x83\x40", (2, -1)),
    ],
)
def test_sjis_order(buf, expected):
    assert sjis_order(buf, 0) == expected


@pytest.mark.parametrize(
    ("buf", "expected"),
    [
        (b"a", (1, -1)),
        (b"\x80", (1, -1)),
        (b"\xa0", (1, -1)),
        (b"\xff", (1, -1)),
        (b"\x8e\xb1", (2, -1)),
        (b"\x8f\xa1\xa1", (3, -1)),
        (b"\xa1\xa1", (2, -1)),
        (b"\xfe\xfe", (2, -1)),
        (b"\xa4\xa1", (2, 0)),
        (b"\xa4\xa2", (2, 1)),
        (b"\xa4\xf3", (2, 82)),
        (b"\xa4\xa0", (2, -1)),
        (b"\xa4\xf4", (2, -1)),
        (b"\xa5\xa2", (2, -1)),
    ],
)
def test_eucjp_order(buf, expected):
    assert eucjp_order(buf, 0) == expected


def test_decoders_read_at_offset():
    assert sjis_order(b"A\x82\xa0", 1) == (2, 1)
    assert eucjp_order(b"A\xa4\xa2", 1) == (2, 1)


def test_lead_byte_at_end_of_buffer_is_not_hiragana():
    # Length still reports the full character; the order is unknown.
    assert sjis_order(b"\x82", 0) == (2, NOT_HIRAGANA)
    assert eucjp_order(b"\xa4", 0) == (2, NOT_HIRAGANA)
    assert eucjp_order(b"\x8f", 0) == (3, NOT_HIRAGANA)


def test_decoders_accept_bytearray_and_memoryview():
    data = b"\x82\xa0"
    assert sjis_order(bytearray(data), 0) == (2, 1)
    assert sjis_order(memoryview(data), 0) == (2, 1)


def test_decoded_char_fields():
    result = sjis_order(b"\x82\xa0", 0)
    assert isinstance(result, DecodedChar)
    assert result.char_len == 2
    assert result.order == 1


@pytest.mark.parametrize(
    ("codec", "decoder"), [("shift_jis", sjis_order), ("euc-jp", eucjp_order)]
)
def test_every_hiragana_maps_to_its_order(codec, decoder):
    for expected_order, char in enumerate(_HIRAGANA):
        assert decoder(char.encode(codec), 0) == (2, expected_order), char


@pytest.mark.parametrize(
    ("codec", "decoder"), [("shift_jis", sjis_order), ("euc-jp", eucjp_order)]
)
def test_katakana_and_kanji_are_not_hiragana(codec, decoder):
    for char in "アンカタ漢字日本":
        char_len, order = decoder(char.encode(codec), 0)
        assert char_len == 2
        assert order == NOT_HIRAGANA


def test_get_decoder_by_enum():
    assert get_decoder(JapaneseEncoding.SHIFT_JIS) is sjis_order
    assert get_decoder(JapaneseEncoding.EUC_JP) is eucjp_order


@pytest.mark.parametrize(
    ("name", "decoder"),
    [
        ("shift_jis", sjis_order),
        ("SJIS", sjis_order),
        ("cp932", sjis_order),
        ("euc-jp", eucjp_order),
        (" EUC_JP ", eucjp_order),
    ],
)
def test_get_decoder_by_name(name, decoder):
    assert get_decoder(name) is decoder


@pytest.mark.parametrize("name", ["utf-8", "iso-2022-jp", "", 932])
def test_get_decoder_rejects_unknown_encodings(name):
    with pytest.raises(ValueError, match="unsupported encoding"):
        get_decoder(name)
