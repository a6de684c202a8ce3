"""Core data structures for 3a art representation."""

from art3a.core.art import Art, ExtraBlock
from art3a.core.cell import Cell
from art3a.core.chars import Char, check_char, normalize_text
from art3a.core.color import Color, Color4, ColorMode, ColorPair
from art3a.core.delay import Delay
from art3a.core.frame import KEEP_COLOR, Frame
from art3a.core.frames import Frames
from art3a.core.header import ExtraHeaderKey, Header, LegacyColorMode, LegacyHeaderInfo, Tagline
from art3a.core.palette import Palette, PaletteEntry

__all__ = [
    "Art",
    "ExtraBlock",
    "Cell",
    "Char",
    "check_char",
    "normalize_text",
    "Color",
    "Color4",
    "ColorMode",
    "ColorPair",
    "Delay",
    "KEEP_COLOR",
    "Frame",
    "Frames",
    "ExtraHeaderKey",
    "Header",
    "LegacyColorMode",
    "LegacyHeaderInfo",
    "Tagline",
    "Palette",
    "PaletteEntry",
]
