"""Pinyin renderers: the inverse of the spelling adjustments applied by the parsers."""

from __future__ import annotations

from bpmf_pinyin.data.tables import PINYIN_INITIALS, PINYIN_NUC_CODAS, PINYIN_TONED_NUCS
from bpmf_pinyin.models import Syllable
from bpmf_pinyin.phonetics import Init, Medial, Rime, Tone

MEDIAL_LETTERS = {Medial.NONE: "", Medial.YI: "i", Medial.WU: "u", Medial.YU: "ü"}
NASAL_CODA_RIMES = (Rime.EN, Rime.ENG)


def _pinyin_initial(syllable: Syllable) -> str:
    """Return the initial letters, spelling a zero initial before a medial as y/w."""

    if syllable.init == Init.NONE and syllable.medial != Medial.NONE:
        return PINYIN_INITIALS[syllable.medial + Init.SI]
    return PINYIN_INITIALS[syllable.init]


def _rime_parts(syllable: Syllable) -> tuple[str, str, str]:
    """Resolve ``(medial, nucleus, coda)`` letters with Pinyin spelling rules applied.

    The tone mark, if any, always belongs on the returned nucleus.
    """

    init, medial, rime = syllable.init, syllable.medial, syllable.rime

    med = MEDIAL_LETTERS[medial]
    if rime == Rime.NONE and medial != Medial.NONE:
        nuc, coda = PINYIN_NUC_CODAS[medial + Rime.ER]
    else:
        nuc, coda = PINYIN_NUC_CODAS[rime]

    # uu, ii, üü
    if med == nuc:
        med = ""

    is_w = init == Init.NONE and medial == Medial.WU
    is_y = init == Init.NONE and medial != Medial.NONE and not is_w

    if not is_w and medial == Medial.WU and rime == Rime.EI:
        # [^w]uei -> [^w]ui
        nuc, coda = "i", ""
    elif not is_y and medial == Medial.YI and rime == Rime.OU:
        # [^y]iou -> [^y]iu
        nuc, coda = "u", ""

    if not is_w and medial != Medial.NONE and rime in NASAL_CODA_RIMES:
        # ien ieng uen ueng üen üeng -> in ing un ong ün iong
        velar = rime == Rime.ENG
        med = ""
        if medial == Medial.YI:
            nuc = "i"
        elif medial == Medial.WU:
            nuc = "o" if velar else "u"
        elif velar:
            med, nuc = "i", "o"
        else:
            nuc = "ü"

    if is_y or init.is_palatal:
        if medial == Medial.YU:
            if nuc == "ü" or rime == Rime.EN:
                # (j|q|x|y)ün? -> (j|q|x|y)un?
                nuc = "u"
            elif rime != Rime.ENG:
                # (j|q|x|y)ü_ -> (j|q|x|y)u_
                med = "u"
        if is_y and (medial == Medial.YI or med == "i"):
            # yia, yii, yiong -> ya, yi, yong
            med = ""
    elif is_w:
        # wuu, wuan -> wu, wan
        med = ""

    return med, nuc, coda


def to_pinyin(syllable: Syllable) -> str:
    """Render standard Pinyin with the tone diacritic on the nucleus.

    Level tone takes a macron; unspecified and neutral tones are unmarked. The empty
    syllable renders as ``""``.
    """

    if syllable.is_empty():
        return ""
    med, nuc, coda = _rime_parts(syllable)
    toned_nuc = PINYIN_TONED_NUCS[nuc][syllable.tone]
    return _pinyin_initial(syllable) + med + toned_nuc + coda


def to_ascii_pinyin(syllable: Syllable) -> str:
    """Render ASCII Pinyin: ``v`` for ``ü`` and a trailing digit unless tone is unset."""

    if syllable.is_empty():
        return ""
    med, nuc, coda = _rime_parts(syllable)
    letters = (_pinyin_initial(syllable) + med + nuc + coda).replace("ü", "v")
    if syllable.tone != Tone.NONE:
        letters += str(int(syllable.tone))
    return letters
