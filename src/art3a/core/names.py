"""Choice of unused characters for new palette entries."""

from __future__ import annotations

from typing import Iterator

from art3a.core.chars import Char, check_char
from art3a.core.constants import BUILTIN_COLOR_NAMES, NO_COLOR


def _block(start: int, end: int, skip: tuple[int, ...] = ()) -> str:
    return "".join(chr(c) for c in range(start, end + 1) if c not in skip)


# Preferred color names, most readable first
CURATED_COLOR_NAMES: tuple[str, ...] = (
    "ghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "-+,.~?!@#$%^&*`<>()[]{}\"'\\|/:;=",
    BUILTIN_COLOR_NAMES,
    _block(0x00A1, 0x00FF, skip=(0x00AD,)),         # Latin-1 Supplement
    _block(0x0391, 0x03A9, skip=(0x03A2,)),         # Greek capitals
    _block(0x03B1, 0x03C9),                         # Greek small letters
    _block(0x0410, 0x044F),                         # Cyrillic
    _block(0x2190, 0x21FF),                         # Arrows
    _block(0x2200, 0x22FF),                         # Mathematical Operators
    _block(0x25A0, 0x25FF),                         # Geometric Shapes
    _block(0x2580, 0x259F),                         # Block Elements
    _block(0x2500, 0x257F),                         # Box Drawing
    _block(0x2801, 0x28FF),                         # Braille Patterns
    _block(0x2460, 0x24FF),                         # Enclosed Alphanumerics
)


def usable_name(ch: str) -> bool:
    """Whether a character can serve as a color name in a color channel."""
    return check_char(ch) == ch and not ch.isspace() and ch != NO_COLOR


def candidate_names() -> Iterator[str]:
    """Yield every possible color name, curated ones first, then all of Unicode."""
    for group in CURATED_COLOR_NAMES:
        yield from group
    for code in range(0x110000):
        if 0xD800 <= code <= 0xDFFF:
            continue
        yield chr(code)


def free_color_name(used: set[Char]) -> Char:
    """
    Return a character not in ``used`` for a new palette entry.

    Raises RuntimeError when every usable character is taken, which can
    only happen when the palette itself is broken.
    """
    used_chars = {str(c) for c in used}
    for ch in candidate_names():
        if ch not in used_chars and usable_name(ch):
            return Char(ch)
    raise RuntimeError("every possible character is already used as a color name")
