"""Frame readers for modern body blocks and the legacy positional body."""

from __future__ import annotations

import logging
from enum import Enum

from art3a.codec.lines import LineStream
from art3a.core.cell import Cell
from art3a.core.chars import Char, normalize_text
from art3a.core.constants import BUILTIN_COLOR_NAMES, LEGACY_FG_TRANSLATION, NO_COLOR
from art3a.core.frame import Frame
from art3a.core.frames import Frames
from art3a.core.header import LegacyColorMode, LegacyHeaderInfo
from art3a.core.palette import Palette
from art3a.errors import FramesMismatchError, LegacyHeaderError, WidthMismatchError

logger = logging.getLogger(__name__)


def color_ref(ch: str) -> Char | None:
    """Map a color channel character to a color reference; ``_`` means none."""
    return None if ch == NO_COLOR else Char(ch)


def looks_interleaved(lines: list[str], palette: Palette) -> bool:
    """
    Whether body lines read as text halves followed by color halves.

    Every line needs an even width and a second half made only of palette
    names, built-in color names or ``_``.
    """
    known = {str(name) for name in palette.names()} | set(BUILTIN_COLOR_NAMES) | {NO_COLOR}
    for raw in lines:
        line = normalize_text(raw)
        if len(line) % 2 or not set(line[len(line) // 2:]) <= known:
            return False
    return True


def _read_rows(stream: LineStream, split: bool) -> list[str]:
    """Read normalized lines up to a blank line, checking they share one width."""
    lines: list[str] = []
    for raw in stream:
        line = normalize_text(raw)
        if not line:
            break
        if split and len(line) % 2:
            raise WidthMismatchError(
                f"line {stream.line_no}: text and color halves differ in width"
            )
        if lines and len(line) != len(lines[0]):
            raise WidthMismatchError(f"line {stream.line_no}: row width differs from frame")
        lines.append(line)
    return lines


def read_text_frame(stream: LineStream) -> Frame:
    """Read a frame of text-only lines."""
    rows = [[Cell(Char(ch)) for ch in line] for line in _read_rows(stream, False)]
    return Frame.from_rows(rows)


def read_color_frame(stream: LineStream) -> Frame:
    """Read a frame of color-only lines; the text channel is blank."""
    rows = [[Cell(color=color_ref(ch)) for ch in line] for line in _read_rows(stream, False)]
    return Frame.from_rows(rows)


def read_both_frame(stream: LineStream) -> Frame:
    """Read a frame of interleaved lines: text characters, then as many color characters."""
    rows = []
    for line in _read_rows(stream, True):
        half = len(line) // 2
        rows.append([Cell(Char(t), color_ref(c)) for t, c in zip(line[:half], line[half:])])
    return Frame.from_rows(rows)


def read_frames(stream: LineStream, frames: Frames, reader) -> None:
    """Append frames produced by ``reader`` until it returns an empty frame."""
    while True:
        frame = reader(stream)
        if frame.width == 0 or frame.height == 0:
            break
        frames.check_frame(frame)
        frames.frames.append(frame)


class LegacyScanMode(Enum):
    """Channel being read by the legacy scanner."""
    TEXT = "text"
    FG = "fg"
    BG = "bg"

    def next(self, colors: LegacyColorMode) -> "LegacyScanMode":
        """Return the channel that follows this one for a row in ``colors`` mode."""
        if self is LegacyScanMode.TEXT:
            if colors in (LegacyColorMode.FG_ONLY, LegacyColorMode.FG_AND_BG):
                return LegacyScanMode.FG
            if colors == LegacyColorMode.BG_ONLY:
                return LegacyScanMode.BG
            return LegacyScanMode.TEXT
        if self is LegacyScanMode.FG and colors == LegacyColorMode.FG_AND_BG:
            return LegacyScanMode.BG
        return LegacyScanMode.TEXT


# Mode after which a completed row is stored, per color layout
_ROW_END = {
    LegacyColorMode.NONE: LegacyScanMode.TEXT,
    LegacyColorMode.FG_ONLY: LegacyScanMode.FG,
    LegacyColorMode.BG_ONLY: LegacyScanMode.BG,
    LegacyColorMode.FG_AND_BG: LegacyScanMode.BG,
}


class LegacyScanner:
    """
    Stateful reader of a legacy body.

    Each row is ``width`` text characters followed, depending on the color
    layout, by ``width`` foreground digits and/or ``width`` background
    digits. The channels may be split across lines in any way; text after a
    tab is a comment. Foreground digits are translated to the modern
    built-in color names. Background digits are read and dropped.
    """

    def __init__(self, info: LegacyHeaderInfo):
        if info.width <= 0 or info.height <= 0:
            raise LegacyHeaderError(
                f"legacy header needs a positive width and height, got {info.width}x{info.height}"
            )
        self.info = info
        self.frames = Frames(width=info.width, height=info.height)
        self.mode = LegacyScanMode.TEXT
        self._rows: list[list[Cell]] = []
        self._row: list[Cell] = []
        self._pos = 0

    def feed_line(self, raw: str) -> None:
        """Process one input line."""
        content, tab, _ = raw.partition("\t")
        if tab and not content:
            return
        for ch in normalize_text(content):
            self._feed_char(ch)

    def _feed_char(self, ch: str) -> None:
        width = self.info.width
        if self.mode is LegacyScanMode.TEXT:
            self._row.append(Cell(Char(ch)))
            done = len(self._row) == width
        else:
            if self.mode is LegacyScanMode.FG:
                name = LEGACY_FG_TRANSLATION.get(ch)
                cell = self._row[self._pos]
                self._row[self._pos] = cell.with_color(Char(name) if name else None)
            self._pos += 1
            done = self._pos == width
        if not done:
            return
        finished = self.mode
        self.mode = self.mode.next(self.info.colors)
        self._pos = 0
        if finished is _ROW_END[self.info.colors]:
            self._rows.append(self._row)
            self._row = []
            if len(self._rows) == self.info.height:
                self.frames.frames.append(Frame.from_rows(self._rows))
                self._rows = []

    def finish(self) -> Frames:
        """Return the frames read, failing on a frame left incomplete."""
        if self._rows or self._row or self.mode is not LegacyScanMode.TEXT:
            raise FramesMismatchError("legacy body ends inside a frame")
        logger.debug("Read %d legacy frames", len(self.frames))
        return self.frames


def read_legacy_frames(stream: LineStream, info: LegacyHeaderInfo) -> Frames:
    """Read the rest of the stream as a legacy body."""
    scanner = LegacyScanner(info)
    for raw in stream:
        scanner.feed_line(raw)
    return scanner.finish()
