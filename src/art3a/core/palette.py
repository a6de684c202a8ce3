"""Palette - mapping of color characters to color pairs."""

from __future__ import annotations

from dataclasses import dataclass, field

from art3a.core.chars import Char
from art3a.core.color import ColorPair
from art3a.errors import ColorMapDuplicateError


@dataclass
class PaletteEntry:
    """A palette color pair with the comments written above its ``col`` line."""
    pair: ColorPair
    comments: list[str] = field(default_factory=list)


@dataclass
class Palette:
    """
    Insertion-ordered mapping from a color character to a color pair.

    Characters ``0``-``9`` and ``a``-``f`` have a built-in 4-bit foreground
    color. Such a mapping is only stored when it is overridden; setting a
    character back to its built-in pair removes the entry.
    """
    entries: dict[Char, PaletteEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries.items())

    def __contains__(self, name: Char) -> bool:
        return name in self.entries

    def names(self) -> list[Char]:
        return list(self.entries)

    def get_color(self, name: Char) -> ColorPair:
        """Return the pair for ``name``, falling back to the built-in mapping."""
        entry = self.entries.get(name)
        if entry is not None:
            return entry.pair
        return ColorPair.builtin(name)

    def set_color(self, name: Char, pair: ColorPair) -> None:
        """Set the pair for ``name``; a pair equal to the built-in one removes the entry."""
        if ColorPair.builtin(name) == pair:
            self.entries.pop(name, None)
        else:
            self.entries[name] = PaletteEntry(pair)

    def search_color(self, pair: ColorPair) -> Char | None:
        """Return the first character mapped to ``pair``, in insertion order."""
        for name, entry in self.entries.items():
            if entry.pair == pair:
                return name
        return None

    def contains_color(self, name: Char) -> bool:
        return name in self.entries

    def remove_color(self, name: Char) -> None:
        self.entries.pop(name, None)

    def strip_comments(self) -> None:
        for entry in self.entries.values():
            entry.comments = []

    def add_parsing_color(self, name: Char, pair: ColorPair, comments: list[str]) -> None:
        """Add an entry read from a ``col`` line; each character may appear once."""
        if name in self.entries:
            raise ColorMapDuplicateError(str(name))
        self.entries[name] = PaletteEntry(pair, list(comments))

    def format_lines(self) -> list[str]:
        """Return the palette as ``col`` lines preceded by their comments."""
        lines: list[str] = []
        for name, entry in self.entries.items():
            lines.extend(f";; {c}".rstrip() for c in entry.comments)
            lines.append(f"col {name} {entry.pair}".rstrip())
        return lines
