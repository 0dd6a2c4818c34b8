"""Inventory of syllables attested in Mandarin, collected from pypinyin dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import logging
import threading
from typing import Iterable

from pypinyin import constants as pypinyin_constants

from bpmf_pinyin.errors import SyllableParseError
from bpmf_pinyin.models import Syllable
from bpmf_pinyin.parsing.pinyin import parse_pinyin
from bpmf_pinyin.phonetics import Tone

logger = logging.getLogger(__name__)


def _pinyin_dict_readings() -> Iterable[str]:
    """Yield every tone-marked reading listed in pypinyin's character dictionary."""

    for value in pypinyin_constants.PINYIN_DICT.values():
        for item in str(value).split(","):
            item = item.strip()
            if item:
                yield item


def toneless(syllable: Syllable) -> Syllable:
    """Return ``syllable`` with its tone cleared, the key used by the inventory."""

    return syllable.with_tone(Tone.NONE)


@dataclass(frozen=True)
class SyllableInventory:
    """Read-only set of tone-insensitive syllables known to occur in Mandarin.

    Readings are normalized through this package's own Pinyin parser, so the inventory
    holds structural :class:`Syllable` values rather than spellings. Readings that do
    not form one complete syllable (syllabic nasals such as ``ng`` or ``hm``) are
    skipped. Instances are deterministic for a given reading source.
    """

    readings: tuple[str, ...] | None = None

    @cached_property
    def syllables(self) -> frozenset[Syllable]:
        """Parse and cache the toneless syllable set.

        Returns:
            Frozen set of syllables with :attr:`Tone.NONE`.
        """

        source = self.readings if self.readings is not None else _pinyin_dict_readings()
        found: set[Syllable] = set()
        skipped: set[str] = set()
        for reading in source:
            try:
                syllable, remainder = parse_pinyin(reading)
            except SyllableParseError:
                skipped.add(reading)
                continue
            if remainder:
                skipped.add(reading)
                continue
            found.add(toneless(syllable))

        logger.debug(
            "Collected %d attested syllables; skipped %d unparseable readings",
            len(found),
            len(skipped),
        )
        return frozenset(found)

    def __contains__(self, syllable: object) -> bool:
        if not isinstance(syllable, Syllable):
            return False
        return toneless(syllable) in self.syllables

    def __len__(self) -> int:
        return len(self.syllables)

    def sorted_syllables(self) -> list[Syllable]:
        """Return the inventory in Bopomofo keyboard order."""

        return sorted(self.syllables)


_DEFAULT_INVENTORY: SyllableInventory | None = None
_DEFAULT_LOCK = threading.Lock()


def default_inventory() -> SyllableInventory:
    """Return the shared inventory built from pypinyin, parsing it exactly once."""

    global _DEFAULT_INVENTORY
    if _DEFAULT_INVENTORY is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_INVENTORY is None:
                inventory = SyllableInventory()
                inventory.syllables  # build under the lock
                _DEFAULT_INVENTORY = inventory
    return _DEFAULT_INVENTORY


def is_attested(syllable: Syllable) -> bool:
    """Return whether ``syllable`` (ignoring tone) occurs in Mandarin readings."""

    return syllable in default_inventory()
