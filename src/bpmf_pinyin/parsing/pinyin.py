"""Standard (tone diacritic) and ASCII (tone digit) Pinyin syllable parsers.

Both parsers decode an initial letter or digraph, look the rest up in a dictionary of
finals, then reconcile Pinyin spelling conventions with the four-slot Bopomofo model.
"""

from __future__ import annotations

from bpmf_pinyin.data.tables import PhoneticTables, get_tables
from bpmf_pinyin.errors import SyllableParseError
from bpmf_pinyin.models import Syllable
from bpmf_pinyin.parsing.bopomofo import skip_separators
from bpmf_pinyin.phonetics import Init, Medial, Rime, Tone

GLIDE_LETTERS = ("w", "y")
DIGRAPH_BASES = {Init.ZI: Init.ZHI, Init.CI: Init.CHI, Init.SI: Init.SHI}


def _parse_pinyin_initial(text: str, tables: PhoneticTables) -> tuple[Init, str, str]:
    """Decode the initial consonant; never fails.

    Returns:
        ``(initial, glide, remainder)`` where ``glide`` is ``"w"`` or ``"y"`` when the
        syllable is spelled with one of those zero-initial letters, else ``""``.
    """

    text = skip_separators(text)
    if not text:
        return Init.NONE, "", text

    first = text[0]
    init = tables.init_by_letter.get(first)
    if init is not None:
        if init in DIGRAPH_BASES and text[1:2] == "h":
            return DIGRAPH_BASES[init], "", text[2:]
        return init, "", text[1:]
    if first in GLIDE_LETTERS:
        return Init.NONE, first, text[1:]
    return Init.NONE, "", text


def _adjust_pinyin_parts(init: Init, glide: str, medial: Medial, rime: Rime) -> tuple[Medial, Rime]:
    """Map Pinyin spelling quirks onto Bopomofo medial and rime.

    - ``u`` after j/q/x/y is ``ü``.
    - ``i`` alone after zh/ch/sh/r/z/c/s is the buzzing rime, not the medial ㄧ.
    - ``w``/``y`` stand for the medials ㄨ/ㄧ unless ``ü`` was already decoded.
    - ``e`` after the medials ㄧ/ㄩ is always ㄝ (``ye``, ``yue``).
    """

    is_w, is_y = glide == "w", glide == "y"
    if medial == Medial.WU and (init.is_palatal or is_y):
        medial = Medial.YU
    elif medial == Medial.YI and init.is_apical and rime == Rime.NONE:
        medial = Medial.NONE
    elif (is_w or is_y) and medial != Medial.YU:
        medial = Medial.WU if is_w else Medial.YI

    if rime == Rime.E and medial in (Medial.YI, Medial.YU):
        rime = Rime.EH
    return medial, rime


def parse_pinyin(text: str, tables: PhoneticTables | None = None) -> tuple[Syllable, str]:
    """Parse one standard Pinyin syllable from the start of ``text``.

    Tone diacritics may be precomposed or combining. An unmarked final is read as
    neutral tone.

    Args:
        text: Input whose prefix (after whitespace and ``'``) holds the syllable.
        tables: Shared lookup tables; defaults to the process-wide instance.

    Returns:
        ``(syllable, remainder)``.

    Raises:
        SyllableParseError: If no final can be matched after the initial.
    """

    tables = tables or get_tables()
    init, glide, rest = _parse_pinyin_initial(text, tables)
    if rest:
        found = tables.toned_finals.find(rest)
        if found is not None:
            (medial, rime, tone), remainder = found
            medial, rime = _adjust_pinyin_parts(init, glide, medial, rime)
            return Syllable(init, medial, rime, tone), remainder
    raise SyllableParseError(text, "no pinyin final")


def parse_ascii_pinyin(text: str, tables: PhoneticTables | None = None) -> tuple[Syllable, str]:
    """Parse one ASCII Pinyin syllable (``v`` for ``ü``, optional tone digit 1-5).

    Args:
        text: Input whose prefix (after whitespace and ``'``) holds the syllable.
        tables: Shared lookup tables; defaults to the process-wide instance.

    Returns:
        ``(syllable, remainder)``; tone is :attr:`Tone.NONE` when no digit follows.

    Raises:
        SyllableParseError: If no final can be matched after the initial.
    """

    tables = tables or get_tables()
    init, glide, rest = _parse_pinyin_initial(text, tables)
    if rest:
        found = tables.untoned_finals.find(rest)
        if found is not None:
            (medial, rime), remainder = found
            medial, rime = _adjust_pinyin_parts(init, glide, medial, rime)
            tone = Tone.NONE
            if remainder[:1] and remainder[0] in "12345":
                tone = Tone.from_digit(remainder[0])
                remainder = remainder[1:]
            return Syllable(init, medial, rime, tone), remainder
    raise SyllableParseError(text, "no pinyin final")
