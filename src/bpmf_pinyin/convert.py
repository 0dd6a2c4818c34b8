"""Direct notation-to-notation conversion helpers.

The six ``x_to_y`` functions convert one syllable and return ``None`` when the input
does not parse. :func:`parse_syllables` and :func:`convert` handle runs of syllables
separated by whitespace or apostrophes, or simply written back to back.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Callable

from bpmf_pinyin.errors import SyllableParseError
from bpmf_pinyin.models import Syllable
from bpmf_pinyin.parsing.bopomofo import parse_bopomofo, skip_separators
from bpmf_pinyin.parsing.pinyin import parse_ascii_pinyin, parse_pinyin
from bpmf_pinyin.phonetics import Tone
from bpmf_pinyin.rendering import to_ascii_pinyin, to_pinyin

logger = logging.getLogger(__name__)

Parser = Callable[[str], tuple[Syllable, str]]


class Notation(str, Enum):
    BOPOMOFO = "bopomofo"
    PINYIN = "pinyin"
    ASCII_PINYIN = "ascii"

    @classmethod
    def from_name(cls, name: str) -> "Notation":
        try:
            return cls(name.lower())
        except ValueError:
            choices = ", ".join(item.value for item in cls)
            raise ValueError(f"Unknown notation '{name}'; expected one of {choices}.") from None


PARSERS: dict[Notation, Parser] = {
    Notation.BOPOMOFO: parse_bopomofo,
    Notation.PINYIN: parse_pinyin,
    Notation.ASCII_PINYIN: parse_ascii_pinyin,
}

RENDERERS: dict[Notation, Callable[[Syllable], str]] = {
    Notation.BOPOMOFO: str,
    Notation.PINYIN: to_pinyin,
    Notation.ASCII_PINYIN: to_ascii_pinyin,
}


def _convert_one(text: str, parser: Parser, renderer: Callable[[Syllable], str]) -> str | None:
    try:
        syllable, _ = parser(text)
    except SyllableParseError:
        return None
    return renderer(syllable)


def pinyin_to_bopomofo(text: str) -> str | None:
    return _convert_one(text, parse_pinyin, str)


def bopomofo_to_pinyin(text: str) -> str | None:
    return _convert_one(text, parse_bopomofo, to_pinyin)


def ascii_pinyin_to_bopomofo(text: str) -> str | None:
    return _convert_one(text, parse_ascii_pinyin, str)


def ascii_pinyin_to_pinyin(text: str) -> str | None:
    return _convert_one(text, parse_ascii_pinyin, to_pinyin)


def bopomofo_to_ascii_pinyin(text: str) -> str | None:
    return _convert_one(text, parse_bopomofo, to_ascii_pinyin)


def pinyin_to_ascii_pinyin(text: str) -> str | None:
    return _convert_one(text, parse_pinyin, to_ascii_pinyin)


def detect_notation(text: str) -> Notation:
    """Guess the notation of the first syllable in ``text``.

    Bopomofo is tried first, then standard Pinyin, then ASCII Pinyin. A Pinyin match
    is only preferred when it carries a tone diacritic or the text has no tone digit.

    Raises:
        SyllableParseError: If no parser accepts the text.
    """

    for notation in (Notation.BOPOMOFO, Notation.PINYIN, Notation.ASCII_PINYIN):
        try:
            syllable, remainder = PARSERS[notation](text)
        except SyllableParseError:
            continue
        if notation is Notation.PINYIN and syllable.tone == Tone.NEUTRAL:
            if remainder[:1].isdigit():
                continue
        return notation
    raise SyllableParseError(text, "no notation matches")


def parse_syllables(text: str, notation: Notation | str) -> list[Syllable]:
    """Parse every syllable in ``text`` using one notation.

    Args:
        text: Syllables written back to back or separated by whitespace or ``'``.
        notation: Notation of the whole text.

    Returns:
        Parsed syllables in order; empty for blank text.

    Raises:
        SyllableParseError: If any part of the text fails to parse.
    """

    notation = Notation.from_name(notation)
    parser = PARSERS[notation]

    syllables: list[Syllable] = []
    rest = skip_separators(text)
    while rest:
        try:
            syllable, rest = parser(rest)
        except SyllableParseError:
            offset = len(text) - len(rest)
            logger.debug("Stopped %s parse of %r at offset %d", notation.value, text, offset)
            raise SyllableParseError(
                text, f"no {notation.value} syllable at offset {offset}"
            ) from None
        syllables.append(syllable)
        rest = skip_separators(rest)
    return syllables


def convert(
    text: str,
    source: Notation | str | None,
    target: Notation | str,
    separator: str = " ",
) -> str:
    """Convert a run of syllables from ``source`` to ``target`` notation.

    Args:
        text: Input syllables.
        source: Input notation, or ``None`` to detect it from the first syllable.
        target: Output notation.
        separator: Joiner placed between rendered syllables.

    Returns:
        The rendered syllables joined by ``separator``.

    Raises:
        SyllableParseError: If the input does not parse.
    """

    if source is None:
        source = detect_notation(text)
    target = Notation.from_name(target)
    renderer = RENDERERS[target]
    return separator.join(renderer(syllable) for syllable in parse_syllables(text, source))
