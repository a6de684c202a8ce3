"""ANSI escape sequence parser for colored text input."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from art3a.core.cell import Cell
from art3a.core.chars import Char, check_char
from art3a.core.color import Color, ColorMode, ColorPair

if TYPE_CHECKING:
    from art3a.core.art import Art


class AnsiLineParser:
    """
    Stateful parser turning one line of ANSI-colored text into Cells.

    Only SGR color parameters are interpreted. Other CSI sequences and OSC
    strings are skipped. Every non-default color pair becomes a palette
    entry of the target art.
    """

    # Regex for CSI sequences: ESC [ params command
    CSI_PATTERN = re.compile(r'\x1b\[([0-9;:]*)([@-~])')
    # Regex for OSC strings: ESC ] ... (BEL | ESC \ | end of input)
    OSC_PATTERN = re.compile(r'\x1b\][^\x07\x1b]*(?:\x07|\x1b\\|\x1b|$)')

    def __init__(self, art: Art):
        self.art = art
        self.fg = Color.NONE
        self.bg = Color.NONE

    def parse(self, line: str) -> list[Cell]:
        cells: list[Cell] = []
        i = 0
        while i < len(line):
            if line[i] == '\x1b':
                match = self.CSI_PATTERN.match(line, i)
                if match:
                    if match.group(2) == 'm':
                        self._handle_sgr(self._params(match.group(1)))
                    i = match.end()
                    continue
                match = self.OSC_PATTERN.match(line, i)
                if match:
                    i = match.end()
                    continue
                # Unhandled escape - skip
                i += 1
                continue

            ch = check_char(line[i])
            if ch is not None:
                cells.append(Cell(Char(ch), self._color()))
            i += 1
        return cells

    def _color(self) -> Char | None:
        pair = ColorPair(self.fg, self.bg)
        if pair.is_default():
            return None
        return self.art.search_or_create_color_map(pair)

    @staticmethod
    def _params(params_str: str) -> list[int]:
        if not params_str:
            return []
        return [int(p) if p.isdigit() else -1 for p in re.split('[;:]', params_str)]

    @staticmethod
    def _extended(params: list[int], i: int) -> tuple[Color | None, int]:
        """Parse ``5;n`` or ``2;r;g;b`` after a 38/48 parameter at index ``i``."""
        if i + 2 < len(params) and params[i + 1] == 5 and 0 <= params[i + 2] <= 255:
            return Color(ColorMode.INDEXED, params[i + 2]), i + 2
        if i + 4 < len(params) and params[i + 1] == 2:
            rgb = params[i + 2:i + 5]
            if all(0 <= c <= 255 for c in rgb):
                return Color.from_rgb(*rgb), i + 4
            return None, i + 4
        return None, i

    def _handle_sgr(self, params: list[int]) -> None:
        """Handle SGR (Select Graphic Rendition) parameters."""
        if not params:
            params = [0]

        i = 0
        while i < len(params):
            p = params[i]

            if p == 0:
                # Reset
                self.fg = Color.NONE
                self.bg = Color.NONE
            elif 30 <= p <= 37:
                self.fg = Color(ColorMode.FOUR_BIT, p - 30)
            elif p == 38:
                color, i = self._extended(params, i)
                if color is not None:
                    self.fg = color
            elif p == 39:
                self.fg = Color.NONE
            elif 40 <= p <= 47:
                self.bg = Color(ColorMode.FOUR_BIT, p - 40)
            elif p == 48:
                color, i = self._extended(params, i)
                if color is not None:
                    self.bg = color
            elif p == 49:
                self.bg = Color.NONE
            elif 90 <= p <= 97:
                # Bright foreground
                self.fg = Color(ColorMode.FOUR_BIT, p - 90 + 8)
            elif 100 <= p <= 107:
                # Bright background
                self.bg = Color(ColorMode.FOUR_BIT, p - 100 + 8)

            i += 1


def parse_ansi_line(line: str, art: Art) -> list[Cell]:
    """Parse a line of ANSI-colored text into cells, adding palette entries to ``art``."""
    return AnsiLineParser(art).parse(line)
