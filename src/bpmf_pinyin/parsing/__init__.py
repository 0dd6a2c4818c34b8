"""Parsers turning the front of a text into a :class:`~bpmf_pinyin.models.Syllable`."""

from .bopomofo import parse_bopomofo, skip_separators
from .pinyin import parse_ascii_pinyin, parse_pinyin

__all__ = ["parse_bopomofo", "parse_pinyin", "parse_ascii_pinyin", "skip_separators"]
