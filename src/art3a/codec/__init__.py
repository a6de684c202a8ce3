"""Encoding/decoding of 3a documents."""

from art3a.codec.ansi_parser import AnsiLineParser, parse_ansi_line
from art3a.codec.parser import ArtParser, parse_lines, parse_text
from art3a.codec.writer import format_art

__all__ = [
    "AnsiLineParser",
    "parse_ansi_line",
    "ArtParser",
    "parse_lines",
    "parse_text",
    "format_art",
]
