"""Closed enumerations for the four slots of a Mandarin syllable.

Every category is an ``IntEnum`` whose value ``0`` means "absent". Initials, medials and
rimes occupy contiguous runs of the Unicode Bopomofo block, so each member's canonical
character is the block offset plus its code. Absent members map to ``""``.
"""

from __future__ import annotations

from enum import IntEnum

from bpmf_pinyin.errors import InvalidRangeError

# Code points one below each contiguous run: ㄅ..ㄙ, ㄚ..ㄦ, ㄧ..ㄩ.
BEFORE_BO = 0x3104
BEFORE_A = 0x3119
BEFORE_YI = 0x3126

TONE_1 = "ˉ"
TONE_2 = "ˊ"
TONE_3 = "ˇ"
TONE_4 = "ˋ"
TONE_5 = "˙"

TONE_MARKS = TONE_1 + TONE_2 + TONE_3 + TONE_4 + TONE_5


def _block_char(code: int, before: int, upper: int) -> str:
    if code == 0:
        return ""
    assert 0 < code <= upper, f"code {code} outside 1..{upper}"
    return chr(before + code)


class _CheckedCode(IntEnum):
    """Shared checked conversion from raw integer codes."""

    @classmethod
    def from_code(cls, value: int):
        """Return the member for ``value`` or raise :class:`InvalidRangeError`."""

        upper = len(cls) - 1
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= upper:
            raise InvalidRangeError(_CATEGORY_NAMES[cls], value, upper)
        return cls(value)


class Init(_CheckedCode):
    NONE = 0
    BO = 1
    PO = 2
    MO = 3
    FO = 4
    DE = 5
    TE = 6
    NE = 7
    LE = 8
    GE = 9
    KE = 10
    HE = 11
    JI = 12
    QI = 13
    XI = 14
    ZHI = 15
    CHI = 16
    SHI = 17
    RI = 18
    ZI = 19
    CI = 20
    SI = 21

    @property
    def char(self) -> str:
        return _block_char(self.value, BEFORE_BO, 21)

    @property
    def is_palatal(self) -> bool:
        """True for ㄐㄑㄒ (j, q, x)."""

        return Init.JI <= self <= Init.XI

    @property
    def is_apical(self) -> bool:
        """True for the initials that may stand without medial or rime."""

        return Init.ZHI <= self <= Init.SI


class Medial(_CheckedCode):
    NONE = 0
    YI = 1
    WU = 2
    YU = 3

    @property
    def char(self) -> str:
        return _block_char(self.value, BEFORE_YI, 3)


class Rime(_CheckedCode):
    NONE = 0
    A = 1
    O = 2
    E = 3
    EH = 4
    AI = 5
    EI = 6
    AO = 7
    OU = 8
    AN = 9
    EN = 10
    ANG = 11
    ENG = 12
    ER = 13

    @property
    def char(self) -> str:
        return _block_char(self.value, BEFORE_A, 13)


class Tone(_CheckedCode):
    NONE = 0
    LEVEL = 1
    RISE = 2
    DIP = 3
    FALL = 4
    NEUTRAL = 5

    @property
    def char(self) -> str:
        if self is Tone.NONE:
            return ""
        return TONE_MARKS[self.value - 1]

    @classmethod
    def from_digit(cls, digit: str) -> "Tone":
        """Map an ASCII digit ``1``..``5`` to its tone."""

        if len(digit) != 1 or digit not in "12345":
            raise ValueError(f"Invalid tone digit {digit!r}; expected one of 1-5.")
        return cls(int(digit))


_CATEGORY_NAMES = {Init: "initial", Medial: "medial", Rime: "rime", Tone: "tone"}
