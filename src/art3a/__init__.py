"""
art3a: Python library for 3a animated ASCII art

Read, edit and write documents in the 3a format: equally sized frames of
characters with optional per-cell color references into a palette, plus a
header of metadata.

Quick Start:
    >>> import art3a
    >>> art = art3a.load("cat.3a")
    >>> art.frames(), art.width(), art.height()
    >>> art.set_title_key("Cat")
    >>> art3a.save(art, "cat.3a")

Features:
    - Modern block dialect and legacy positional dialect
    - Text and color pins shared by all frames
    - Palette of 4-bit, 256-color and RGB color pairs
    - Frame editing: shift, resize, crop, fill, print, ANSI input
    - Lossless round-trip of unknown header keys and extra blocks
"""

__version__ = "0.1.0"

# Core types
from art3a.core.art import Art, ExtraBlock
from art3a.core.cell import Cell
from art3a.core.chars import Char, check_char, normalize_text
from art3a.core.color import Color, Color4, ColorMode, ColorPair
from art3a.core.delay import Delay
from art3a.core.frame import KEEP_COLOR, Frame
from art3a.core.frames import Frames
from art3a.core.header import Header, LegacyColorMode, LegacyHeaderInfo, Tagline
from art3a.core.palette import Palette

# Errors
from art3a.errors import ArtError, ArtIOError, ParseError

# Convenience functions
from art3a.io.reader import load, loads
from art3a.io.writer import dumps, save

__all__ = [
    # Version
    "__version__",
    # Core types
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
    "Header",
    "LegacyColorMode",
    "LegacyHeaderInfo",
    "Tagline",
    "Palette",
    # Errors
    "ArtError",
    "ArtIOError",
    "ParseError",
    # I/O
    "load",
    "loads",
    "save",
    "dumps",
]
