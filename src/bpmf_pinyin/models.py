"""The compact four-slot syllable value shared by all parsers and renderers."""

from __future__ import annotations

from dataclasses import dataclass, replace
import functools

from bpmf_pinyin.errors import SyllableParseError
from bpmf_pinyin.phonetics import TONE_5, Init, Medial, Rime, Tone

ORDINAL_RADIX = 41
ZERO_INITIAL_RANK = 40


@functools.total_ordering
@dataclass(frozen=True)
class Syllable:
    """One Mandarin syllable as ``(initial, medial, rime, tone)``.

    Fields hold enumeration members; plain integers are accepted and converted with
    the checked ``from_code`` constructors. Phonotactic acceptability is enforced by the
    parsers only, so fabricated combinations remain comparable and renderable. The
    default value, with every slot absent, is the empty syllable.
    """

    init: Init = Init.NONE
    medial: Medial = Medial.NONE
    rime: Rime = Rime.NONE
    tone: Tone = Tone.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "init", Init.from_code(self.init))
        object.__setattr__(self, "medial", Medial.from_code(self.medial))
        object.__setattr__(self, "rime", Rime.from_code(self.rime))
        object.__setattr__(self, "tone", Tone.from_code(self.tone))

    @property
    def init_char(self) -> str:
        return self.init.char

    @property
    def medial_char(self) -> str:
        return self.medial.char

    @property
    def rime_char(self) -> str:
        return self.rime.char

    @property
    def tone_char(self) -> str:
        return self.tone.char

    def is_empty(self) -> bool:
        return not (self.init or self.medial or self.rime or self.tone)

    def ordinal(self) -> int:
        """Sort key: initial, then medial, rime and tone; zero initial ranks last."""

        init_rank = ZERO_INITIAL_RANK if self.init == Init.NONE else int(self.init)
        return (
            int(self.tone)
            + int(self.rime) * ORDINAL_RADIX
            + int(self.medial) * ORDINAL_RADIX**2
            + init_rank * ORDINAL_RADIX**3
        )

    def byte_length_estimate(self) -> int:
        """Estimate the UTF-8 size of the Bopomofo rendering.

        Three bytes per present Bopomofo letter plus two for a written tone mark. This
        only sizes output buffers and carries no further meaning.
        """

        letters = sum(1 for part in (self.init, self.medial, self.rime) if part)
        return letters * 3 + (2 if self.tone > Tone.LEVEL else 0)

    def with_tone(self, tone: Tone) -> "Syllable":
        return replace(self, tone=tone)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Syllable):
            return NotImplemented
        return self.ordinal() < other.ordinal()

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        parts = []
        if self.tone == Tone.NEUTRAL:
            parts.append(TONE_5)
        parts.extend((self.init.char, self.medial.char, self.rime.char))
        if Tone.RISE <= self.tone <= Tone.FALL:
            parts.append(self.tone.char)
        return "".join(parts)

    @classmethod
    def parse_bopomofo(cls, text: str) -> tuple["Syllable", str]:
        from bpmf_pinyin.parsing.bopomofo import parse_bopomofo

        return parse_bopomofo(text)

    @classmethod
    def parse_pinyin(cls, text: str) -> tuple["Syllable", str]:
        from bpmf_pinyin.parsing.pinyin import parse_pinyin

        return parse_pinyin(text)

    @classmethod
    def parse_ascii_pinyin(cls, text: str) -> tuple["Syllable", str]:
        from bpmf_pinyin.parsing.pinyin import parse_ascii_pinyin

        return parse_ascii_pinyin(text)

    @classmethod
    def from_text(cls, text: str) -> "Syllable":
        """Parse Bopomofo, falling back to standard Pinyin; the remainder is dropped.

        Raises:
            SyllableParseError: If neither notation matches.
        """

        try:
            return cls.parse_bopomofo(text)[0]
        except SyllableParseError:
            return cls.parse_pinyin(text)[0]

    parse = from_text

    def to_bopomofo(self) -> str:
        return str(self)

    def to_pinyin(self) -> str:
        from bpmf_pinyin.rendering import to_pinyin

        return to_pinyin(self)

    def to_ascii_pinyin(self) -> str:
        from bpmf_pinyin.rendering import to_ascii_pinyin

        return to_ascii_pinyin(self)
