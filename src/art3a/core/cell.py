"""Cell - atomic unit of a 3a frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from art3a.core.chars import SPACE, Char
from art3a.core.color import ColorPair

if TYPE_CHECKING:
    from art3a.core.palette import Palette


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with an optional color reference.

    ``color`` names a palette entry, it is not a resolved color. Resolving
    it needs the palette of the art the cell belongs to.
    """
    text: Char = SPACE
    color: Char | None = None

    @classmethod
    def of(cls, text: str, color: str | None = None) -> Cell:
        """Build a cell from plain one-character strings."""
        return cls(Char(text), Char(color) if color is not None else None)

    def has_color(self) -> bool:
        return self.color is not None

    def with_text(self, text: Char) -> Cell:
        return Cell(text, self.color)

    def with_color(self, color: Char | None) -> Cell:
        return Cell(self.text, color)

    def to_pair(self, palette: Palette) -> ColorPair:
        """Resolve the color reference against a palette."""
        if self.color is None:
            return ColorPair()
        return palette.get_color(self.color)

    def ansi(self, palette: Palette) -> str:
        """Return the cell text wrapped in its color escape sequences."""
        if self.color is None:
            return str(self.text)
        return palette.get_color(self.color).to_ansi() + str(self.text) + ColorPair().to_ansi()
