"""Static lookup tables shared by the Pinyin parsers and renderers.

The literal tables below never change. The derived maps and the two final dictionaries
are bundled into one immutable :class:`PhoneticTables` value which is built at most once
per process by :func:`get_tables` and then shared by reference.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
from types import MappingProxyType
from typing import Mapping
import unicodedata

from bpmf_pinyin.data.spell_tree import SpellTree
from bpmf_pinyin.phonetics import Init, Medial, Rime, Tone

logger = logging.getLogger(__name__)

# Indexed by initial code; 22..24 are the zero-initial spellings of medials ㄧ ㄨ ㄩ.
PINYIN_INITIALS: tuple[str, ...] = (
    "",
    "b", "p", "m", "f", "d", "t", "n", "l", "g", "k", "h",
    "j", "q", "x", "zh", "ch", "sh", "r", "z", "c", "s",
    "y", "w", "y",
)

# (nucleus, coda) per rime code; 0 is the buzzing rime after apicals and 14..16 stand
# for a bare medial ㄧ ㄨ ㄩ with no rime.
PINYIN_NUC_CODAS: tuple[tuple[str, str], ...] = (
    ("i", ""),
    ("a", ""),
    ("o", ""),
    ("e", ""),
    ("e", ""),
    ("a", "i"),
    ("e", "i"),
    ("a", "o"),
    ("o", "u"),
    ("a", "n"),
    ("e", "n"),
    ("a", "ng"),
    ("e", "ng"),
    ("e", "r"),
    ("i", ""),
    ("u", ""),
    ("ü", ""),
)

# Toned spelling of each nucleus, indexed by tone code 0..5.
PINYIN_TONED_NUCS: Mapping[str, str] = MappingProxyType(
    {
        "a": "aāáǎàa",
        "e": "eēéěèe",
        "i": "iīíǐìi",
        "o": "oōóǒòo",
        "u": "uūúǔùu",
        "ü": "üǖǘǚǜü",
    }
)

INIT_BOPOMOFO_TO_PINYIN: Mapping[Init, str] = MappingProxyType(
    {init: PINYIN_INITIALS[init] for init in Init}
)

PINYIN_UNTONED_FINALS: tuple[tuple[str, tuple[Medial, Rime]], ...] = (
    ("a", (Medial.NONE, Rime.A)),
    ("o", (Medial.NONE, Rime.O)),
    ("e", (Medial.NONE, Rime.E)),
    ("ê", (Medial.NONE, Rime.EH)),
    ("eh", (Medial.NONE, Rime.EH)),
    ("ai", (Medial.NONE, Rime.AI)),
    ("ei", (Medial.NONE, Rime.EI)),
    ("er", (Medial.NONE, Rime.ER)),
    ("ao", (Medial.NONE, Rime.AO)),
    ("ou", (Medial.NONE, Rime.OU)),
    ("an", (Medial.NONE, Rime.AN)),
    ("en", (Medial.NONE, Rime.EN)),
    ("ang", (Medial.NONE, Rime.ANG)),
    ("eng", (Medial.NONE, Rime.ENG)),
    ("i", (Medial.YI, Rime.NONE)),
    ("ia", (Medial.YI, Rime.A)),
    ("io", (Medial.YI, Rime.O)),
    ("ie", (Medial.YI, Rime.EH)),
    ("iai", (Medial.YI, Rime.AI)),
    ("iao", (Medial.YI, Rime.AO)),
    ("iu", (Medial.YI, Rime.OU)),
    ("iou", (Medial.YI, Rime.OU)),
    ("ian", (Medial.YI, Rime.AN)),
    ("in", (Medial.YI, Rime.EN)),
    ("iang", (Medial.YI, Rime.ANG)),
    ("ing", (Medial.YI, Rime.ENG)),
    ("u", (Medial.WU, Rime.NONE)),
    ("ua", (Medial.WU, Rime.A)),
    ("uo", (Medial.WU, Rime.O)),
    ("uai", (Medial.WU, Rime.AI)),
    ("ui", (Medial.WU, Rime.EI)),
    ("uei", (Medial.WU, Rime.EI)),
    ("uan", (Medial.WU, Rime.AN)),
    ("un", (Medial.WU, Rime.EN)),
    ("uen", (Medial.WU, Rime.EN)),
    ("uang", (Medial.WU, Rime.ANG)),
    ("ong", (Medial.WU, Rime.ENG)),
    ("v", (Medial.YU, Rime.NONE)),
    ("ve", (Medial.YU, Rime.EH)),
    ("van", (Medial.YU, Rime.AN)),
    ("vn", (Medial.YU, Rime.EN)),
    ("iong", (Medial.YU, Rime.ENG)),
    ("ü", (Medial.YU, Rime.NONE)),
    ("üe", (Medial.YU, Rime.EH)),
    ("ue", (Medial.YU, Rime.EH)),
    ("üan", (Medial.YU, Rime.AN)),
    ("ün", (Medial.YU, Rime.EN)),
)

TONED_FINAL_EXCLUDED_LETTERS = set("vê")


def _tone_mark_index(final: str) -> int:
    """Return the position of the letter carrying the tone mark in ``final``.

    The mark goes on ``a`` or ``e`` when present, on ``o`` in ``ou``, and on the last
    vowel otherwise (``iu`` -> ``iú``, ``ui`` -> ``uí``).
    """

    for vowel in ("a", "e"):
        idx = final.find(vowel)
        if idx >= 0:
            return idx
    idx = final.find("ou")
    if idx >= 0:
        return idx
    for idx in range(len(final) - 1, -1, -1):
        if final[idx] in PINYIN_TONED_NUCS:
            return idx
    raise ValueError(f"Pinyin final '{final}' has no vowel to carry a tone mark.")


def toned_spellings(final: str) -> list[tuple[str, Tone]]:
    """Spell ``final`` with each tone 1..5; neutral tone is the unmarked spelling."""

    idx = _tone_mark_index(final)
    letters = PINYIN_TONED_NUCS[final[idx]]
    out: list[tuple[str, Tone]] = []
    for tone in (Tone.LEVEL, Tone.RISE, Tone.DIP, Tone.FALL, Tone.NEUTRAL):
        out.append((final[:idx] + letters[tone] + final[idx + 1 :], tone))
    return out


def _build_toned_items() -> list[tuple[str, tuple[Medial, Rime, Tone]]]:
    items: list[tuple[str, tuple[Medial, Rime, Tone]]] = []
    for final, (medial, rime) in PINYIN_UNTONED_FINALS:
        if TONED_FINAL_EXCLUDED_LETTERS.intersection(final):
            continue
        for spelling, tone in toned_spellings(final):
            meaning = (medial, rime, tone)
            items.append((spelling, meaning))
            decomposed = unicodedata.normalize("NFD", spelling)
            if decomposed != spelling:
                items.append((decomposed, meaning))
    return items


@dataclass(frozen=True)
class PhoneticTables:
    """Immutable bundle of derived lookup structures.

    Attributes:
        init_by_letter: Single Pinyin letter -> Bopomofo initial. Digraphs ``zh``,
            ``ch``, ``sh`` are recognized by the parser from ``z``, ``c``, ``s``.
        toned_finals: Finals with tone diacritics baked into the key.
        untoned_finals: Finals for ASCII Pinyin, tone given by a trailing digit.
    """

    init_by_letter: Mapping[str, Init]
    toned_finals: SpellTree[tuple[Medial, Rime, Tone]]
    untoned_finals: SpellTree[tuple[Medial, Rime]]


def build_tables() -> PhoneticTables:
    """Construct a fresh :class:`PhoneticTables` with frozen dictionaries."""

    init_by_letter = MappingProxyType(
        {
            letters: init
            for init, letters in INIT_BOPOMOFO_TO_PINYIN.items()
            if len(letters) == 1
        }
    )
    toned = SpellTree.from_items(_build_toned_items())
    untoned = SpellTree.from_items(PINYIN_UNTONED_FINALS)
    toned.freeze()
    untoned.freeze()
    logger.debug(
        "Built pinyin tables: %d initial letters, %d toned leaves, %d untoned leaves",
        len(init_by_letter),
        toned.count_leaves(),
        untoned.count_leaves(),
    )
    return PhoneticTables(
        init_by_letter=init_by_letter,
        toned_finals=toned,
        untoned_finals=untoned,
    )


_TABLES: PhoneticTables | None = None
_TABLES_LOCK = threading.Lock()


def get_tables() -> PhoneticTables:
    """Return the process-wide tables, building them exactly once."""

    global _TABLES
    if _TABLES is None:
        with _TABLES_LOCK:
            if _TABLES is None:
                _TABLES = build_tables()
    return _TABLES
