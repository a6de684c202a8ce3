"""3a document parser: header, named blocks and body."""

from __future__ import annotations

import logging
from typing import Iterable

from art3a.codec.frame_parser import (
    read_both_frame,
    read_color_frame,
    looks_interleaved,
    read_frames,
    read_legacy_frames,
    read_text_frame,
)
from art3a.codec.header_parser import read_header
from art3a.codec.lines import LineStream
from art3a.core.art import Art, ExtraBlock
from art3a.core.chars import normalize_text
from art3a.core.constants import (
    BLOCK_ATTACH,
    BLOCK_BODY,
    BLOCK_COLOR_PIN,
    BLOCK_PREFIX,
    BLOCK_TEXT_PIN,
)
from art3a.core.frames import Frames
from art3a.core.header import Header
from art3a.errors import BlockDuplicateError, BlockExpectedError, ColorsMismatchError

logger = logging.getLogger(__name__)


def parse_text(text: str) -> Art:
    """Parse an art from a string."""
    return ArtParser(LineStream.from_text(text)).parse()


def parse_lines(lines: Iterable[str]) -> Art:
    """Parse an art from an iterable of lines."""
    return ArtParser(LineStream(lines)).parse()


def next_block(stream: LineStream) -> str | None:
    """Skip blank lines and return the next block name, or None at the end of input."""
    for raw in stream:
        line = normalize_text(raw)
        if not line:
            continue
        if not line.startswith(BLOCK_PREFIX):
            raise BlockExpectedError(line)
        return line[len(BLOCK_PREFIX):]
    return None


def read_extra_block(title: str, stream: LineStream) -> ExtraBlock:
    """Read the lines of an uninterpreted block up to a blank line."""
    lines: list[str] = []
    for raw in stream:
        line = normalize_text(raw)
        if not line:
            break
        lines.append(line)
    return ExtraBlock(title, "\n".join(lines))


class ArtParser:
    """
    Stateful parser turning a line stream into an Art.

    The header decides the dialect. A legacy header with geometry is
    followed by a positional body; otherwise the rest of the input is a
    sequence of named blocks. Each block name may appear once.
    """

    def __init__(self, stream: LineStream):
        self.stream = stream
        self.header = Header()
        self.frames = Frames()
        self.attached: str | None = None
        self.extra: list[ExtraBlock] = []
        self._seen: set[str] = set()

    def parse(self) -> Art:
        self.header = read_header(self.stream)
        if self.header.legacy is not None:
            self.frames = read_legacy_frames(self.stream, self.header.legacy)
        else:
            self._read_blocks()
        self.frames.merge()
        logger.debug(
            "Parsed %d frames of %dx%d", len(self.frames), self.frames.width, self.frames.height
        )
        return Art.from_components(self.header, self.frames, self.attached, self.extra)

    def _read_blocks(self) -> None:
        while (name := next_block(self.stream)) is not None:
            if name in self._seen:
                raise BlockDuplicateError(name)
            self._seen.add(name)
            logger.debug("Reading block @%s", name)
            if name == BLOCK_ATTACH:
                self.attached = self.stream.next_line()
            elif name == BLOCK_TEXT_PIN:
                self._check_colors(name)
                self._set_pin("text_pin", read_text_frame(self.stream))
            elif name == BLOCK_COLOR_PIN:
                self._check_colors(name)
                self._set_pin("color_pin", read_color_frame(self.stream))
            elif name == BLOCK_BODY:
                self._read_body()
            else:
                self.extra.append(read_extra_block(name, self.stream))

    def _check_colors(self, name: str) -> None:
        if not self.header.get_colors():
            raise ColorsMismatchError(f"@{name} block in an art without colors")

    def _set_pin(self, attr: str, frame) -> None:
        if frame.width and frame.height:
            setattr(self.frames, attr, frame)

    def _read_body(self) -> None:
        """Read body frames in the line format implied by colors and active pins."""
        if not self.header.get_colors() or self.frames.color_pin is not None:
            reader = read_text_frame
        elif self.frames.text_pin is not None:
            reader = read_color_frame
        elif self._interleaved():
            reader = read_both_frame
        else:
            reader = read_text_frame
        read_frames(self.stream, self.frames, reader)
        logger.debug("Read %d body frames with %s", len(self.frames), reader.__name__)
        self.frames.merge()

    def _interleaved(self) -> bool:
        """
        Whether a body without pins carries a color half on each line.

        An explicit ``colors`` key decides on its own. When colors are only
        implied by the palette, the first frame must look interleaved.
        """
        if self.header.colors is not None:
            return self.header.colors
        if looks_interleaved(self.stream.peek_block(), self.header.palette):
            return True
        logger.debug("Body lines carry no color half, reading text only")
        return False
