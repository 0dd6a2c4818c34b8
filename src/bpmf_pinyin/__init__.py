"""Conversion between Bopomofo, standard Pinyin and ASCII Pinyin syllables."""

from .convert import (
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
from .errors import InvalidRangeError, SyllableParseError
from .models import Syllable
from .phonetics import Init, Medial, Rime, Tone

__all__ = [
    "Syllable",
    "Init",
    "Medial",
    "Rime",
    "Tone",
    "Notation",
    "SyllableParseError",
    "InvalidRangeError",
    "pinyin_to_bopomofo",
    "bopomofo_to_pinyin",
    "ascii_pinyin_to_bopomofo",
    "ascii_pinyin_to_pinyin",
    "bopomofo_to_ascii_pinyin",
    "pinyin_to_ascii_pinyin",
    "parse_syllables",
    "convert",
]
