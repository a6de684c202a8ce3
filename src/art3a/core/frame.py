"""Frame - one grid of cells (a single animation still)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from art3a.core.cell import Cell
from art3a.core.chars import Char, normalize_text
from art3a.core.color import ColorPair
from art3a.core.constants import NO_COLOR
from art3a.errors import HeightMismatchError, WidthMismatchError

if TYPE_CHECKING:
    from art3a.core.palette import Palette


class _KeepColor:
    """Sentinel type for ``print`` calls that leave cell colors alone."""

    def __repr__(self) -> str:
        return "KEEP_COLOR"


KEEP_COLOR = _KeepColor()


def clamp_index(value: int, start: int, end: int) -> int:
    """Clamp ``value`` into ``[start, end)``; an empty range clamps to 0."""
    if value < start:
        value = start
    if value >= end:
        value = end - 1 if end > 0 else 0
    return value


@dataclass(eq=False)
class Frame:
    """
    A rectangular grid of Cells.

    All rows have ``width`` cells. ``color_count`` is the number of cells
    that carry a color reference; it is kept in step with every mutation so
    ``has_color`` needs no scan.
    """
    width: int = 0
    rows: list[list[Cell]] = field(default_factory=list)
    color_count: int = 0

    @classmethod
    def blank(cls, width: int, height: int, fill: Cell = Cell()) -> "Frame":
        """Create a frame filled with a single cell."""
        return cls(
            width=width,
            rows=[[fill] * width for _ in range(height)],
            color_count=width * height if fill.has_color() else 0,
        )

    @classmethod
    def from_rows(cls, rows: list[list[Cell]]) -> "Frame":
        """Create a frame from rows of equal length, counting colors."""
        width = len(rows[0]) if rows else 0
        for row in rows:
            if len(row) != width:
                raise WidthMismatchError()
        frame = cls(width=width, rows=[list(r) for r in rows])
        frame.recalc_colors()
        return frame

    @property
    def height(self) -> int:
        return len(self.rows)

    def has_color(self) -> bool:
        return self.color_count > 0

    def copy(self) -> "Frame":
        """Create a copy of this frame."""
        return Frame(self.width, [list(r) for r in self.rows], self.color_count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return self.width == other.width and self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[list[Cell]]:
        return iter(self.rows)

    # Cell access

    def get(self, col: int, row: int, default: Cell = Cell()) -> Cell:
        """Get the cell at (col, row), or ``default`` when out of range."""
        if 0 <= col < self.width and 0 <= row < self.height:
            return self.rows[row][col]
        return default

    def set(self, col: int, row: int, cell: Cell) -> None:
        """Set the cell at (col, row); positions out of range are ignored."""
        if 0 <= col < self.width and 0 <= row < self.height:
            old = self.rows[row][col]
            self.rows[row][col] = cell
            self.color_count += int(cell.has_color()) - int(old.has_color())

    def print(
        self,
        col: int,
        row: int,
        text: str,
        color: Char | None | _KeepColor = KEEP_COLOR,
    ) -> None:
        """Write text starting at (col, row), optionally setting every written cell's color."""
        for i, ch in enumerate(normalize_text(text)):
            old = self.get(col + i, row)
            new_color = old.color if isinstance(color, _KeepColor) else color
            self.set(col + i, row, Cell(Char(ch), new_color))

    def fill_area(self, cols: Iterable[int], rows: Iterable[int], cell: Cell) -> None:
        rows = list(rows)
        for c in cols:
            for r in rows:
                self.set(c, r, cell)

    def fill(self, cell: Cell) -> None:
        self.rows = [[cell] * self.width for _ in range(self.height)]
        self.color_count = self.width * self.height if cell.has_color() else 0

    def fill_text(self, text: Char) -> None:
        self.rows = [[c.with_text(text) for c in row] for row in self.rows]

    def fill_color(self, color: Char | None) -> None:
        self.rows = [[c.with_color(color) for c in row] for row in self.rows]
        self.color_count = 0 if color is None else self.width * self.height

    def clean(self) -> None:
        """Reset every cell to a blank space without color."""
        self.fill(Cell())

    def remove_color(self, name: Char) -> None:
        """Drop every reference to the color ``name``."""
        self.rows = [
            [c.with_color(None) if c.color == name else c for c in row]
            for row in self.rows
        ]
        self.recalc_colors()

    def recalc_colors(self) -> None:
        self.color_count = sum(1 for row in self.rows for c in row if c.has_color())

    # Queries

    def contains(self, cell: Cell) -> bool:
        return any(cell in row for row in self.rows)

    def contains_text(self, text: Char) -> bool:
        return any(c.text == text for row in self.rows for c in row)

    def contains_color(self, name: Char) -> bool:
        return any(c.color == name for row in self.rows for c in row)

    # Structural transforms

    @staticmethod
    def _check_count(count: int) -> None:
        if count < 0:
            raise ValueError(f"shift count must not be negative, got {count}")

    def shift_right(self, cols: int, fill: Cell = Cell()) -> None:
        self._check_count(cols)
        if self.width == 0 or self.height == 0:
            return
        n = min(cols, self.width)
        for i, row in enumerate(self.rows):
            if cols <= self.width:
                row = row[-cols:] + row[:-cols] if cols else row
            self.rows[i] = [fill] * n + row[n:]
        self.recalc_colors()

    def shift_left(self, cols: int, fill: Cell = Cell()) -> None:
        self._check_count(cols)
        if self.width == 0 or self.height == 0:
            return
        n = min(cols, self.width)
        for i, row in enumerate(self.rows):
            row = [fill] * n + row[n:]
            if cols <= self.width:
                row = row[cols:] + row[:cols]
            self.rows[i] = row
        self.recalc_colors()

    def shift_down(self, rows: int, fill: Cell = Cell()) -> None:
        self._check_count(rows)
        h = self.height
        if h == 0:
            return
        if 0 < rows <= h:
            self.rows = self.rows[-rows:] + self.rows[:-rows]
        for r in range(min(rows, h)):
            self.rows[r] = [fill] * self.width
        self.recalc_colors()

    def shift_up(self, rows: int, fill: Cell = Cell()) -> None:
        self._check_count(rows)
        h = self.height
        if h == 0:
            return
        for r in range(min(rows, h)):
            self.rows[r] = [fill] * self.width
        if rows <= h:
            self.rows = self.rows[rows:] + self.rows[:rows]
        self.recalc_colors()

    def resize_width(self, width: int, fill: Cell = Cell()) -> None:
        if width != self.width:
            self.rows = [
                row[:width] + [fill] * (width - len(row[:width])) for row in self.rows
            ]
            self.width = width
            self.recalc_colors()

    def resize_height(self, height: int, fill: Cell = Cell()) -> None:
        if height != self.height:
            self.rows = self.rows[:height]
            while len(self.rows) < height:
                self.rows.append([fill] * self.width)
            self.recalc_colors()

    def resize(self, width: int, height: int, fill: Cell = Cell()) -> None:
        self.resize_width(width, fill)
        self.resize_height(height, fill)

    def adjust_width(self, width: int, fill: Cell = Cell()) -> None:
        """Grow to ``width``; never shrinks."""
        if width > self.width:
            self.resize_width(width, fill)

    def adjust_height(self, height: int, fill: Cell = Cell()) -> None:
        """Grow to ``height``; never shrinks."""
        if height > self.height:
            self.resize_height(height, fill)

    def adjust(self, width: int, height: int, fill: Cell = Cell()) -> None:
        self.adjust_width(width, fill)
        self.adjust_height(height, fill)

    def crop(self, r_from: int, r_to: int, c_from: int, c_to: int) -> None:
        """Keep the inclusive row and column ranges, clamped to the frame."""
        if self.width == 0 or self.height == 0:
            return
        r_from, r_to = sorted((clamp_index(r_from, 0, self.height), clamp_index(r_to, 0, self.height)))
        c_from, c_to = sorted((clamp_index(c_from, 0, self.width), clamp_index(c_to, 0, self.width)))
        self.rows = [row[c_from:c_to + 1] for row in self.rows[r_from:r_to + 1]]
        self.width = c_to - c_from + 1
        self.recalc_colors()

    # Line formats

    def text_lines(self) -> list[str]:
        return ["".join(str(c.text) for c in row) for row in self.rows]

    def color_lines(self) -> list[str]:
        return [
            "".join(NO_COLOR if c.color is None else str(c.color) for c in row)
            for row in self.rows
        ]

    def both_lines(self) -> list[str]:
        return [t + c for t, c in zip(self.text_lines(), self.color_lines())]

    def to_ansi(self, palette: Palette, color: bool = True) -> str:
        """Render the frame as text with ANSI color escapes."""
        lines: list[str] = []
        for row in self.rows:
            if not color:
                lines.append("".join(str(c.text) for c in row))
                continue
            out: list[str] = []
            prev: ColorPair | None = None
            for cell in row:
                pair = cell.to_pair(palette)
                out.append(pair.to_ansi_rel(prev))
                out.append(str(cell.text))
                prev = pair
            out.append(ColorPair().to_ansi())
            lines.append("".join(out))
        return "\n".join(lines)


def merge_frames(text: Frame, color: Frame) -> Frame:
    """Combine the text channel of one frame with the color channel of another."""
    if text.height != color.height:
        raise HeightMismatchError()
    if text.width != color.width:
        raise WidthMismatchError()
    rows = [
        [Cell(t.text, c.color) for t, c in zip(text_row, color_row)]
        for text_row, color_row in zip(text.rows, color.rows)
    ]
    frame = Frame(width=text.width, rows=rows)
    frame.recalc_colors()
    return frame
