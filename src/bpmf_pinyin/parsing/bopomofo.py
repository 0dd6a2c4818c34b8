"""Bopomofo syllable parser."""

from __future__ import annotations

from bpmf_pinyin.errors import SyllableParseError
from bpmf_pinyin.models import Syllable
from bpmf_pinyin.phonetics import (
    BEFORE_A,
    BEFORE_BO,
    BEFORE_YI,
    TONE_5,
    TONE_MARKS,
    Init,
    Medial,
    Rime,
    Tone,
)

SYLLABLE_SEPARATOR = "'"


def skip_separators(text: str) -> str:
    """Drop leading whitespace (ideographic space included) and apostrophes."""

    for idx, ch in enumerate(text):
        if not ch.isspace() and ch != SYLLABLE_SEPARATOR:
            return text[idx:]
    return ""


def parse_bopomofo(text: str) -> tuple[Syllable, str]:
    """Parse one Bopomofo syllable from the start of ``text``.

    The grammar is a leading neutral-tone dot, an initial, a medial, a rime and a
    trailing tone mark, each optional and tried in that order. Without a tone mark the
    tone is level.

    Args:
        text: Input whose prefix (after whitespace and ``'``) holds the syllable.

    Returns:
        ``(syllable, remainder)`` where ``remainder`` is the unconsumed text.

    Raises:
        SyllableParseError: If no medial or rime was found and the initial (if any)
            cannot stand alone.
    """

    rest = skip_separators(text)
    init, medial, rime, tone = Init.NONE, Medial.NONE, Rime.NONE, Tone.NONE
    pos = 0

    def peek() -> str:
        return rest[pos] if pos < len(rest) else ""

    if peek() == TONE_5:
        tone = Tone.NEUTRAL
        pos += 1

    ch = peek()
    if "ㄅ" <= ch <= "ㄙ":
        init = Init(ord(ch) - BEFORE_BO)
        pos += 1

    ch = peek()
    if "ㄧ" <= ch <= "ㄩ":
        medial = Medial(ord(ch) - BEFORE_YI)
        pos += 1

    ch = peek()
    if "ㄚ" <= ch <= "ㄦ":
        rime = Rime(ord(ch) - BEFORE_A)
        pos += 1

    if tone == Tone.NONE:
        ch = peek()
        if ch and ch in TONE_MARKS:
            tone = Tone(TONE_MARKS.index(ch) + 1)
            pos += 1
        else:
            tone = Tone.LEVEL

    if medial or rime or init.is_apical:
        return Syllable(init, medial, rime, tone), rest[pos:]
    raise SyllableParseError(text, "no bopomofo medial or rime")
