"""Unit tests for the Syllable value type."""

from __future__ import annotations

from itertools import product

import pytest

from bpmf_pinyin.errors import InvalidRangeError, SyllableParseError
from bpmf_pinyin.models import Syllable
from bpmf_pinyin.parsing.pinyin import parse_ascii_pinyin
from bpmf_pinyin.phonetics import Init, Medial, Rime, Tone

SHUAI4 = Syllable(Init.SHI, Medial.WU, Rime.AI, Tone.FALL)


def _ascii(text: str) -> Syllable:
    syllable, remainder = parse_ascii_pinyin(text)
    assert remainder == ""
    return syllable


def test_default_syllable_is_empty() -> None:
    empty = Syllable()

    assert empty.is_empty()
    assert str(empty) == ""
    assert empty.byte_length_estimate() == 0
    assert not SHUAI4.is_empty()
    assert not Syllable(tone=Tone.LEVEL).is_empty()


@pytest.mark.parametrize(
    ("syllable", "expected"),
    [
        (SHUAI4, "ㄕㄨㄞˋ"),
        (Syllable(Init.CHI, Medial.WU, Rime.ANG, Tone.DIP), "ㄔㄨㄤˇ"),
        (Syllable(Init.NONE, Medial.NONE, Rime.EI, Tone.RISE), "ㄟˊ"),
        (Syllable(Init.FO, Medial.WU, Rime.NONE, Tone.LEVEL), "ㄈㄨ"),
        (Syllable(Init.GE, Medial.NONE, Rime.ER, Tone.FALL), "ㄍㄦˋ"),
        (Syllable(Init.SHI, Medial.NONE, Rime.NONE, Tone.NEUTRAL), "˙ㄕ"),
        (Syllable(Init.MO, Medial.NONE, Rime.A, Tone.NONE), "ㄇㄚ"),
    ],
)
def test_str_renders_bopomofo(syllable: Syllable, expected: str) -> None:
    assert str(syllable) == expected
    assert syllable.to_bopomofo() == expected


def test_char_accessors() -> None:
    assert (SHUAI4.init_char, SHUAI4.medial_char, SHUAI4.rime_char, SHUAI4.tone_char) == (
        "ㄕ",
        "ㄨ",
        "ㄞ",
        "ˋ",
    )
    assert Syllable(rime=Rime.A).init_char == ""


def test_byte_length_counts_letters_and_written_tone_marks() -> None:
    assert SHUAI4.byte_length_estimate() == 11
    assert Syllable(Init.FO, Medial.WU, Rime.NONE, Tone.LEVEL).byte_length_estimate() == 6
    assert Syllable(Init.SHI, tone=Tone.NEUTRAL).byte_length_estimate() == 5
    assert SHUAI4.byte_length_estimate() == len(str(SHUAI4).encode("utf-8"))


def test_integer_codes_are_converted_to_members() -> None:
    syllable = Syllable(17, 2, 5, 4)

    assert syllable == SHUAI4
    assert syllable.init is Init.SHI
    assert hash(syllable) == hash(SHUAI4)


def test_out_of_range_codes_are_rejected() -> None:
    with pytest.raises(InvalidRangeError, match="initial"):
        Syllable(22)
    with pytest.raises(InvalidRangeError, match="tone"):
        Syllable(Init.BO, Medial.NONE, Rime.A, 9)


def test_syllables_are_immutable() -> None:
    with pytest.raises(AttributeError):
        SHUAI4.tone = Tone.LEVEL  # type: ignore[misc]


def test_with_tone_returns_new_value() -> None:
    shuai3 = SHUAI4.with_tone(Tone.DIP)

    assert shuai3.tone is Tone.DIP
    assert SHUAI4.tone is Tone.FALL
    assert shuai3.with_tone(Tone.FALL) == SHUAI4


def test_ordinal_formula() -> None:
    assert SHUAI4.ordinal() == 4 + 5 * 41 + 2 * 41**2 + 17 * 41**3
    assert Syllable(rime=Rime.AN, tone=Tone.LEVEL).ordinal() == 1 + 9 * 41 + 40 * 41**3


def test_sorting_puts_zero_initial_last() -> None:
    spellings = ["zhuan4", "an3", "an1", "bo2", "qi3"]

    ordered = sorted(_ascii(text) for text in spellings)

    assert [syllable.to_ascii_pinyin() for syllable in ordered] == [
        "bo2",
        "qi3",
        "zhuan4",
        "an1",
        "an3",
    ]


def test_ordering_is_total_and_consistent_with_equality() -> None:
    sample = [
        Syllable(init, medial, rime, tone)
        for init, medial, rime, tone in product(
            (Init.NONE, Init.BO, Init.SI),
            (Medial.NONE, Medial.YU),
            (Rime.NONE, Rime.A, Rime.ER),
            (Tone.NONE, Tone.NEUTRAL),
        )
    ]

    for a, b in product(sample, repeat=2):
        assert [a < b, a == b, a > b].count(True) == 1
        assert (a == b) == (a.ordinal() == b.ordinal())


def test_comparison_with_other_types_is_not_supported() -> None:
    assert SHUAI4 != "ㄕㄨㄞˋ"
    with pytest.raises(TypeError):
        SHUAI4 < "ㄕㄨㄞˋ"


def test_cross_notation_parsers_agree() -> None:
    expected = Syllable(Init.RI, Medial.WU, Rime.ANG, Tone.DIP)

    assert _ascii("ruang3") == expected
    assert Syllable.parse_ascii_pinyin("ruang3") == (expected, "")
    assert Syllable.parse_pinyin("ruǎng") == (expected, "")
    assert Syllable.parse_bopomofo("ㄖㄨㄤˇ") == (expected, "")


def test_from_text_accepts_bopomofo_or_pinyin() -> None:
    qiao3 = Syllable(Init.QI, Medial.YI, Rime.AO, Tone.DIP)

    assert Syllable.from_text("ㄑㄧㄠˇ") == qiao3
    assert Syllable.from_text("qiǎo") == qiao3
    assert Syllable.parse("qiǎo ba") == qiao3


def test_from_text_raises_when_nothing_matches() -> None:
    with pytest.raises(SyllableParseError, match="no pinyin final"):
        Syllable.from_text("123")


def test_pinyin_renderers_are_available_on_the_value() -> None:
    assert SHUAI4.to_pinyin() == "shuài"
    assert SHUAI4.to_ascii_pinyin() == "shuai4"
    assert Syllable(Init.LE, Medial.YU).to_ascii_pinyin() == "lv"
