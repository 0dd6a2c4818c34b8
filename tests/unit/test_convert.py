"""Unit tests for notation-to-notation conversion helpers."""

from __future__ import annotations

import pytest

from bpmf_pinyin import (
    Notation,
    ascii_pinyin_to_bopomofo,
    ascii_pinyin_to_pinyin,
    bopomofo_to_ascii_pinyin,
    bopomofo_to_pinyin,
    convert,
    parse_syllables,
    pinyin_to_ascii_pinyin,
    pinyin_to_bopomofo,
)
from bpmf_pinyin.convert import detect_notation
from bpmf_pinyin.errors import SyllableParseError
from bpmf_pinyin.models import Syllable
from bpmf_pinyin.phonetics import Init, Medial, Rime, Tone


def test_single_syllable_conversions() -> None:
    assert pinyin_to_ascii_pinyin("ráo") == "rao2"
    assert ascii_pinyin_to_pinyin("rao2") == "ráo"
    assert bopomofo_to_pinyin("ㄑㄩㄥ") == "qiōng"
    assert pinyin_to_bopomofo("qiōng") == "ㄑㄩㄥ"
    assert ascii_pinyin_to_bopomofo("qiong1") == "ㄑㄩㄥ"
    assert bopomofo_to_ascii_pinyin("ㄑㄩㄥ") == "qiong1"


def test_single_syllable_conversions_ignore_trailing_text() -> None:
    assert ascii_pinyin_to_pinyin("lve4 and more") == "lüè"
    assert bopomofo_to_pinyin("ㄕㄨㄞˋㄍㄜ") == "shuài"


def test_single_syllable_conversions_return_none_on_failure() -> None:
    assert pinyin_to_bopomofo("123") is None
    assert bopomofo_to_pinyin("ㄅ") is None
    assert ascii_pinyin_to_bopomofo("") is None
    assert ascii_pinyin_to_pinyin("zh") is None
    assert bopomofo_to_ascii_pinyin("ba1") is None
    assert pinyin_to_ascii_pinyin("lv4") is None


def test_notation_from_name() -> None:
    assert Notation.from_name("ASCII") is Notation.ASCII_PINYIN
    assert Notation.from_name(Notation.PINYIN) is Notation.PINYIN
    with pytest.raises(ValueError, match="Unknown notation 'wade-giles'"):
        Notation.from_name("wade-giles")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("ㄓㄨㄥ ㄍㄨㄛˊ", Notation.BOPOMOFO),
        ("zhōng guó", Notation.PINYIN),
        ("zhong guo", Notation.PINYIN),
        ("zhong1 guo2", Notation.ASCII_PINYIN),
        ("lv4", Notation.ASCII_PINYIN),
    ],
)
def test_detect_notation(text: str, expected: Notation) -> None:
    assert detect_notation(text) is expected


def test_detect_notation_rejects_unknown_text() -> None:
    with pytest.raises(SyllableParseError, match="no notation matches"):
        detect_notation("123")


def test_parse_syllables_handles_separators_and_back_to_back_runs() -> None:
    zhong1 = Syllable(Init.ZHI, Medial.WU, Rime.ENG, Tone.LEVEL)
    guo2 = Syllable(Init.GE, Medial.WU, Rime.O, Tone.RISE)

    assert parse_syllables("zhong1 guo2", "ascii") == [zhong1, guo2]
    assert parse_syllables("zhong1guo2", Notation.ASCII_PINYIN) == [zhong1, guo2]
    assert parse_syllables("ㄓㄨㄥ'ㄍㄨㄛˊ", "bopomofo") == [zhong1, guo2]
    assert parse_syllables("zhōngguó", "pinyin") == [zhong1, guo2]
    assert parse_syllables(" \t ", "pinyin") == []


def test_parse_syllables_reports_failure_offset() -> None:
    with pytest.raises(SyllableParseError, match="no ascii syllable at offset 7") as excinfo:
        parse_syllables("zhong1 !!", "ascii")

    assert excinfo.value.text == "zhong1 !!"


def test_convert_between_notations() -> None:
    assert convert("ㄓㄨㄥ ㄍㄨㄛˊ", None, "pinyin") == "zhōng guó"
    assert convert("zhong1guo2", "ascii", "bopomofo", separator="") == "ㄓㄨㄥㄍㄨㄛˊ"
    assert convert("xī'ān", Notation.PINYIN, Notation.ASCII_PINYIN, separator="'") == "xi1'an1"
    assert convert("", "pinyin", "ascii") == ""


def test_convert_rejects_unknown_target() -> None:
    with pytest.raises(ValueError, match="Unknown notation"):
        convert("ba1", "ascii", "ipa")
