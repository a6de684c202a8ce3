"""Color representation for 3a art."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, ClassVar

from art3a.errors import ColorDuplicateError, ColorParseError

if TYPE_CHECKING:
    from art3a.core.chars import Char


class ColorMode(Enum):
    """Color mode of a 3a color."""
    NONE = "none"           # Terminal default color (SGR 39, 49)
    FOUR_BIT = "4bit"       # 8 hues with brightness (SGR 30-37, 40-47, 90-97, 100-107)
    INDEXED = "256"         # 256-color index (SGR 38;5;n, 48;5;n)
    RGB = "rgb"             # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


class Color4(IntEnum):
    """The eight base hues of 4-bit ANSI color."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


_HEX_RE = re.compile(r"[0-9a-f]{6}")
_INDEX_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Color:
    """
    Represents a color value in 3a art.

    A 4-bit color stores its value as 0-15: the hue index, plus 8 when bright.
    Indexed colors store 0-255 and RGB colors store an ``(r, g, b)`` tuple.
    """
    mode: ColorMode
    value: int | tuple[int, int, int] = 0

    NONE: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    @classmethod
    def four_bit(cls, hue: Color4, bright: bool = False) -> Color:
        """Create a 4-bit color from a hue and a brightness flag."""
        return cls(ColorMode.FOUR_BIT, int(hue) + (8 if bright else 0))

    @classmethod
    def from_256(cls, index: int) -> Color:
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.INDEXED, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.RGB, (r, g, b))

    @classmethod
    def builtin(cls, name: Char | str) -> Color:
        """Return the built-in color for a palette character (``0``-``9``, ``a``-``f``)."""
        ch = str(name)
        if len(ch) == 1 and ch in "0123456789abcdef":
            return cls(ColorMode.FOUR_BIT, int(ch, 16))
        return cls.NONE

    @classmethod
    def parse(cls, s: str) -> Color:
        """
        Parse a color token.

        Accepts a hue name (``red``), a ``bright-`` hue (``bright-red``),
        ``gray``/``grey``, six hex digits or a decimal 256-color index.
        """
        token = s.strip().lower()
        if token in _NAMED:
            return _NAMED[token]
        if _HEX_RE.fullmatch(token):
            return cls(
                ColorMode.RGB,
                (int(token[0:2], 16), int(token[2:4], 16), int(token[4:6], 16)),
            )
        if _INDEX_RE.fullmatch(token) and int(token) <= 255:
            return cls(ColorMode.INDEXED, int(token))
        raise ColorParseError(token)

    @property
    def is_none(self) -> bool:
        return self.mode == ColorMode.NONE

    @property
    def hue(self) -> Color4 | None:
        """Base hue of a 4-bit color."""
        if self.mode != ColorMode.FOUR_BIT:
            return None
        assert isinstance(self.value, int)
        return Color4(self.value % 8)

    @property
    def bright(self) -> bool:
        if self.mode != ColorMode.FOUR_BIT:
            return False
        assert isinstance(self.value, int)
        return self.value >= 8

    def to_sgr(self, is_fg: bool) -> str:
        """Return the SGR parameters selecting this color."""
        if self.mode == ColorMode.NONE:
            return "39" if is_fg else "49"
        if self.mode == ColorMode.FOUR_BIT:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str((30 if is_fg else 40) + self.value)
            return str((90 if is_fg else 100) + self.value - 8)
        prefix = "38" if is_fg else "48"
        if self.mode == ColorMode.INDEXED:
            return f"{prefix};5;{self.value}"
        assert isinstance(self.value, tuple)
        r, g, b = self.value
        return f"{prefix};2;{r};{g};{b}"

    def to_sgr_fg(self) -> str:
        """Return SGR sequence for foreground color."""
        return self.to_sgr(True)

    def to_sgr_bg(self) -> str:
        """Return SGR sequence for background color."""
        return self.to_sgr(False)

    def to_ansi(self, is_fg: bool) -> str:
        """Return the full ANSI escape sequence selecting this color."""
        return f"\x1b[{self.to_sgr(is_fg)}m"

    def __str__(self) -> str:
        if self.mode == ColorMode.NONE:
            return ""
        if self.mode == ColorMode.FOUR_BIT:
            hue = self.hue
            assert hue is not None
            prefix = "bright-" if self.bright else ""
            return prefix + hue.name.lower()
        if self.mode == ColorMode.INDEXED:
            return str(self.value)
        assert isinstance(self.value, tuple)
        r, g, b = self.value
        return f"{r:02x}{g:02x}{b:02x}"


Color.NONE = Color(ColorMode.NONE)
Color.BLACK = Color(ColorMode.FOUR_BIT, 0)
Color.RED = Color(ColorMode.FOUR_BIT, 1)
Color.GREEN = Color(ColorMode.FOUR_BIT, 2)
Color.YELLOW = Color(ColorMode.FOUR_BIT, 3)
Color.BLUE = Color(ColorMode.FOUR_BIT, 4)
Color.MAGENTA = Color(ColorMode.FOUR_BIT, 5)
Color.CYAN = Color(ColorMode.FOUR_BIT, 6)
Color.WHITE = Color(ColorMode.FOUR_BIT, 7)
Color.BRIGHT_BLACK = Color(ColorMode.FOUR_BIT, 8)
Color.BRIGHT_RED = Color(ColorMode.FOUR_BIT, 9)
Color.BRIGHT_GREEN = Color(ColorMode.FOUR_BIT, 10)
Color.BRIGHT_YELLOW = Color(ColorMode.FOUR_BIT, 11)
Color.BRIGHT_BLUE = Color(ColorMode.FOUR_BIT, 12)
Color.BRIGHT_MAGENTA = Color(ColorMode.FOUR_BIT, 13)
Color.BRIGHT_CYAN = Color(ColorMode.FOUR_BIT, 14)
Color.BRIGHT_WHITE = Color(ColorMode.FOUR_BIT, 15)


_NAMED: dict[str, Color] = {}
for _hue in Color4:
    _NAMED[_hue.name.lower()] = Color.four_bit(_hue)
    _NAMED["bright-" + _hue.name.lower()] = Color.four_bit(_hue, bright=True)
_NAMED["gray"] = Color.BRIGHT_BLACK
_NAMED["grey"] = Color.BRIGHT_BLACK


@dataclass(frozen=True)
class ColorPair:
    """A foreground and background color."""
    fg: Color = Color.NONE
    bg: Color = Color.NONE

    @classmethod
    def builtin(cls, name: Char | str) -> ColorPair:
        """Return the built-in pair for a palette character."""
        return cls(fg=Color.builtin(name))

    @classmethod
    def parse(cls, s: str) -> ColorPair:
        """Parse ``fg:<color>`` and ``bg:<color>`` tokens in either order."""
        fg: Color | None = None
        bg: Color | None = None
        for token in s.split(" "):
            token = token.strip()
            if not token:
                continue
            if token.startswith("fg:"):
                if fg is not None:
                    raise ColorDuplicateError("fg", s)
                fg = Color.parse(token[3:])
            elif token.startswith("bg:"):
                if bg is not None:
                    raise ColorDuplicateError("bg", s)
                bg = Color.parse(token[3:])
            else:
                raise ColorParseError(s)
        return cls(fg or Color.NONE, bg or Color.NONE)

    def is_default(self) -> bool:
        return self.fg.is_none and self.bg.is_none

    def invert(self) -> ColorPair:
        """Return the pair with foreground and background swapped."""
        return ColorPair(fg=self.bg, bg=self.fg)

    def to_ansi(self) -> str:
        """Return escape sequences selecting both colors."""
        return self.fg.to_ansi(True) + self.bg.to_ansi(False)

    def to_ansi_rel(self, prev: ColorPair | None) -> str:
        """Return escape sequences only when this pair differs from ``prev``."""
        if prev == self:
            return ""
        return self.to_ansi()

    def __str__(self) -> str:
        if self.fg.is_none and self.bg.is_none:
            return ""
        if self.fg.is_none:
            return f"bg:{self.bg}"
        if self.bg.is_none:
            return f"fg:{self.fg}"
        return f"fg:{self.fg} bg:{self.bg}"
