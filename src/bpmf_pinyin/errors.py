"""Exception types shared by the parsers and the phonetic enumerations."""

from __future__ import annotations


class SyllableParseError(ValueError):
    """Raised when text does not start with a well-formed syllable.

    All parsers share this one error kind. No distinction is made between text that
    matched nothing and text whose decoded parts form an unacceptable combination;
    callers needing diagnostics inspect ``text`` themselves.
    """

    def __init__(self, text: str, reason: str = "ill-formed syllable"):
        super().__init__(f"Cannot parse syllable from {text!r}: {reason}")
        self.text = text
        self.reason = reason


class InvalidRangeError(ValueError):
    """Raised when an integer code lies outside a phonetic enumeration's range."""

    def __init__(self, category: str, value: object, upper: int):
        super().__init__(f"Invalid value for bopomofo {category}: {value!r} (expected 0..{upper})")
        self.category = category
        self.value = value
