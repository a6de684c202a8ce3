"""Char - a validated single character usable in 3a art."""

from __future__ import annotations

from dataclasses import dataclass

from art3a.core.constants import REJECTED_C1, REJECTED_RANGES, SPACE_LIKE
from art3a.errors import CharLengthError, DisallowedCharError


def check_char(ch: str) -> str | None:
    """
    Check whether a character is allowed in 3a art.

    Returns the character (with space-like characters normalized to a plain
    space) or None when the character must be rejected.
    """
    cp = ord(ch)
    if cp in SPACE_LIKE:
        return " "
    if cp in REJECTED_C1:
        return None
    for start, end in REJECTED_RANGES:
        if start <= cp <= end:
            return None
    return ch


def normalize_text(text: str) -> str:
    """Drop disallowed characters from text and normalize space-like ones."""
    out: list[str] = []
    for ch in text:
        ok = check_char(ch)
        if ok is not None:
            out.append(ok)
    return "".join(out)


@dataclass(frozen=True, slots=True)
class Char:
    """
    A validated character.

    Construction always goes through ``check_char``: disallowed characters
    raise ``DisallowedCharError`` and space-like ones become a plain space.
    """
    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise CharLengthError(len(self.char))
        ok = check_char(self.char)
        if ok is None:
            raise DisallowedCharError(ord(self.char))
        object.__setattr__(self, "char", ok)

    @classmethod
    def parse(cls, s: str) -> Char:
        """Parse a string holding exactly one character."""
        if len(s) != 1:
            raise CharLengthError(len(s))
        return cls(s)

    @classmethod
    def new_or(cls, ch: str, default: Char) -> Char:
        """Return a Char for ``ch`` or ``default`` when it is not allowed."""
        ok = check_char(ch) if len(ch) == 1 else None
        return default if ok is None else cls(ok)

    def __str__(self) -> str:
        return self.char

    def __int__(self) -> int:
        return ord(self.char)


SPACE = Char(" ")
UNDERSCORE = Char("_")
