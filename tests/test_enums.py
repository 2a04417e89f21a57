# tests/test_enums.py
import enum

from jpcontext.enums import AnalysisState, JapaneseEncoding


def test_analysis_state_is_int_enum():
    assert issubclass(AnalysisState, enum.IntEnum)


def test_analysis_state_members():
    assert set(AnalysisState.__members__.keys()) == {"ACTIVE", "DONE"}
    assert AnalysisState.ACTIVE == 0
    assert AnalysisState.DONE == 1


def test_japanese_encoding_values_are_python_codecs():
    for member in JapaneseEncoding:
        assert "こんにちは".encode(member.value)


def test_japanese_encoding_lookup_by_value():
    assert JapaneseEncoding("shift_jis") is JapaneseEncoding.SHIFT_JIS
    assert JapaneseEncoding("euc-jp") is JapaneseEncoding.EUC_JP
