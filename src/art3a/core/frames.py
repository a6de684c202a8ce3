"""Frames - the animation: an ordered list of equally sized frames."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from art3a.core.cell import Cell
from art3a.core.chars import Char
from art3a.core.delay import Delay
from art3a.core.frame import KEEP_COLOR, Frame, _KeepColor, merge_frames
from art3a.errors import EmptyBodyError, HeightMismatchError, WidthMismatchError

logger = logging.getLogger(__name__)


@dataclass
class Frames:
    """
    The frame sequence of a 3a art.

    Every frame has the same ``width`` and ``height``. ``text_pin`` and
    ``color_pin`` hold a single frame whose text or color channel is shared
    by all frames; they only live between reading the pin block and
    ``merge``.

    Operations that take a ``frame`` argument apply to that frame only, and
    to every frame when it is None.
    """
    width: int = 0
    height: int = 0
    frames: list[Frame] = field(default_factory=list)
    text_pin: Frame | None = None
    color_pin: Frame | None = None

    @classmethod
    def blank(cls, count: int, width: int, height: int, fill: Cell = Cell()) -> "Frames":
        """Create ``count`` frames filled with a single cell."""
        return cls(width, height, [Frame.blank(width, height, fill) for _ in range(count)])

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def __getitem__(self, index: int) -> Frame:
        return self.frames[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frames):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.frames == other.frames
        )

    __hash__ = None  # type: ignore[assignment]

    def _targets(self, frame: int | None) -> list[Frame]:
        if frame is None:
            return self.frames
        if 0 <= frame < len(self.frames):
            return [self.frames[frame]]
        return []

    # Cell access

    def get(self, frame: int, col: int, row: int, default: Cell = Cell()) -> Cell:
        if 0 <= frame < len(self.frames):
            return self.frames[frame].get(col, row, default)
        return default

    def set(self, frame: int, col: int, row: int, cell: Cell) -> None:
        if 0 <= frame < len(self.frames):
            self.frames[frame].set(col, row, cell)

    def print(
        self,
        frame: int,
        col: int,
        row: int,
        text: str,
        color: Char | None | _KeepColor = KEEP_COLOR,
    ) -> None:
        for f in self._targets(frame):
            f.print(col, row, text, color)

    # Frame list operations

    def make_sure_frame_exist(self, frame: int) -> None:
        """Append frames until index ``frame`` exists, repeating the last frame."""
        while len(self.frames) <= frame:
            if self.frames:
                self.frames.append(self.frames[-1].copy())
            else:
                self.frames.append(Frame.blank(self.width, self.height))

    def dup_frame(self, frame: int) -> None:
        """Insert a copy of ``frame`` right before it."""
        self.make_sure_frame_exist(frame)
        self.frames.insert(frame, self.frames[frame].copy())

    def remove_frame(self, frame: int) -> None:
        if 0 <= frame < len(self.frames):
            del self.frames[frame]

    def slice(self, start: int, end: int) -> None:
        """Keep frames ``start`` through ``end`` inclusive."""
        self.frames = self.frames[max(start, 0):max(end, -1) + 1]

    def swap(self, a: int, b: int) -> None:
        n = len(self.frames)
        if 0 <= a < n and 0 <= b < n:
            self.frames[a], self.frames[b] = self.frames[b], self.frames[a]

    def reverse(self) -> None:
        self.frames.reverse()

    def dedup(self) -> None:
        """Drop frames equal to the frame right before them."""
        kept: list[Frame] = []
        for frame in self.frames:
            if not kept or kept[-1] != frame:
                kept.append(frame)
        self.frames = kept

    def rot_forth(self, k: int) -> None:
        """Rotate frames so the last ``k`` frames come first."""
        if self.frames:
            k %= len(self.frames)
            self.frames = self.frames[-k:] + self.frames[:-k] if k else self.frames

    def rot_back(self, k: int) -> None:
        """Rotate frames so the first ``k`` frames go last."""
        if self.frames:
            k %= len(self.frames)
            self.frames = self.frames[k:] + self.frames[:k]

    # Structural transforms

    def shift_right(self, cols: int, fill: Cell = Cell(), frame: int | None = None) -> None:
        for f in self._targets(frame):
            f.shift_right(cols, fill)

    def shift_left(self, cols: int, fill: Cell = Cell(), frame: int | None = None) -> None:
        for f in self._targets(frame):
            f.shift_left(cols, fill)

    def shift_up(self, rows: int, fill: Cell = Cell(), frame: int | None = None) -> None:
        for f in self._targets(frame):
            f.shift_up(rows, fill)

    def shift_down(self, rows: int, fill: Cell = Cell(), frame: int | None = None) -> None:
        for f in self._targets(frame):
            f.shift_down(rows, fill)

    def fill_area(
        self,
        cols: Iterable[int],
        rows: Iterable[int],
        cell: Cell,
        frame: int | None = None,
    ) -> None:
        cols, rows = list(cols), list(rows)
        for f in self._targets(frame):
            f.fill_area(cols, rows, cell)

    def fill(self, cell: Cell, frame: int | None = None) -> None:
        for f in self._targets(frame):
            f.fill(cell)

    def fill_text(self, text: Char, frame: int | None = None) -> None:
        for f in self._targets(frame):
            f.fill_text(text)

    def fill_color(self, color: Char | None, frame: int | None = None) -> None:
        for f in self._targets(frame):
            f.fill_color(color)

    def clean(self, frame: int | None = None) -> None:
        for f in self._targets(frame):
            f.clean()

    def remove_color(self, name: Char) -> None:
        for f in self.frames:
            f.remove_color(name)

    def resize(self, width: int, height: int, fill: Cell = Cell()) -> None:
        for f in self.frames:
            f.resize(width, height, fill)
        self.width, self.height = width, height

    def resize_width(self, width: int, fill: Cell = Cell()) -> None:
        for f in self.frames:
            f.resize_width(width, fill)
        self.width = width

    def resize_height(self, height: int, fill: Cell = Cell()) -> None:
        for f in self.frames:
            f.resize_height(height, fill)
        self.height = height

    def adjust(self, width: int, height: int, fill: Cell = Cell()) -> None:
        self.adjust_width(width, fill)
        self.adjust_height(height, fill)

    def adjust_width(self, width: int, fill: Cell = Cell()) -> None:
        if width > self.width:
            self.resize_width(width, fill)

    def adjust_height(self, height: int, fill: Cell = Cell()) -> None:
        if height > self.height:
            self.resize_height(height, fill)

    def crop(self, r_from: int, r_to: int, c_from: int, c_to: int) -> None:
        """Keep the inclusive row and column ranges of every frame."""
        for f in self.frames:
            f.crop(r_from, r_to, c_from, c_to)
        if self.frames:
            self.width = self.frames[0].width
            self.height = self.frames[0].height

    # Queries

    def count(self) -> int:
        return len(self.frames)

    def has_color(self) -> bool:
        return any(f.has_color() for f in self.frames)

    def contains(self, cell: Cell) -> bool:
        return any(f.contains(cell) for f in self.frames)

    def contains_text(self, text: Char) -> bool:
        return any(f.contains_text(text) for f in self.frames)

    def contains_color(self, name: Char) -> bool:
        return any(f.contains_color(name) for f in self.frames)

    def pinned(self) -> tuple[bool, bool]:
        """
        Return whether the text and the color channels are the same in every frame.

        Animations of fewer than two frames are never pinned.
        """
        if len(self.frames) < 2:
            return False, False
        text_pinned = color_pinned = True
        first = self.frames[0]
        for frame in self.frames[1:]:
            for first_row, row in zip(first.rows, frame.rows):
                for a, b in zip(first_row, row):
                    if a.text != b.text:
                        text_pinned = False
                    if a.color != b.color:
                        color_pinned = False
                if not text_pinned and not color_pinned:
                    return False, False
        return text_pinned, color_pinned

    def duration_ms(self, delay: Delay) -> int:
        return sum(delay.to_list(len(self.frames)))

    # Pins

    def check_frame(self, frame: Frame) -> None:
        """Check that a newly read frame fits the animation size and adopt it."""
        if self.width != 0 and self.width != frame.width:
            raise WidthMismatchError()
        if self.height != 0 and self.height != frame.height:
            raise HeightMismatchError()
        self.width = frame.width
        self.height = frame.height

    def pin_text(self, frame: int) -> None:
        """Copy the text channel of ``frame`` into every frame."""
        if 0 <= frame < len(self.frames):
            self.text_pin = self.frames[frame].copy()
            self.merge()

    def pin_color(self, frame: int) -> None:
        """Copy the color channel of ``frame`` into every frame."""
        if 0 <= frame < len(self.frames):
            self.color_pin = self.frames[frame].copy()
            self.merge()

    def merge(self) -> None:
        """
        Apply pending pins to every frame and clear them.

        A color pin replaces the color channel of each frame, a text pin
        replaces the text channel. Pin and frames must have the same size.
        """
        if (self.text_pin is not None or self.color_pin is not None) and not self.frames:
            raise EmptyBodyError()
        if self.color_pin is not None:
            self.frames = [merge_frames(f, self.color_pin) for f in self.frames]
            logger.debug("Merged color pin into %d frames", len(self.frames))
        if self.text_pin is not None:
            self.frames = [merge_frames(self.text_pin, f) for f in self.frames]
            logger.debug("Merged text pin into %d frames", len(self.frames))
        self.color_pin = None
        self.text_pin = None
