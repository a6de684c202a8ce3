"""Art - a complete 3a document: header, frames and extra blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from art3a.core.cell import Cell
from art3a.core.chars import Char
from art3a.core.color import ColorPair
from art3a.core.constants import DEFAULT_DELAY_MS
from art3a.core.delay import Delay
from art3a.core.frame import KEEP_COLOR, Frame, _KeepColor
from art3a.core.frames import Frames
from art3a.core.header import ExtraHeaderKey, Header
from art3a.core.names import free_color_name
from art3a.core.palette import Palette


@dataclass
class ExtraBlock:
    """A named block the format does not interpret (``@name`` plus text lines)."""
    title: str
    content: str = ""


@dataclass
class Art:
    """
    A 3a art document.

    This is the aggregate root: it owns the header (metadata and palette),
    the frames, an optional attached line and any extra named blocks. Most
    editing goes through the methods here so that palette and frames stay
    consistent.
    """
    header: Header = field(default_factory=Header)
    content: Frames = field(default_factory=Frames)
    attached: str | None = None
    extra: list[ExtraBlock] = field(default_factory=list)

    @classmethod
    def blank(cls, frames: int, width: int, height: int, fill: Cell = Cell()) -> "Art":
        """
        Create an art of ``frames`` frames filled with a single cell.

        A colored ``fill`` turns the ``colors`` key on. The size of an art
        with no frames is not stored in a document, so it reads back as 0x0.
        """
        art = cls(content=Frames.blank(frames, width, height, fill))
        if frames > 0 and width > 0 and height > 0:
            art._note_color(fill.color)
        return art

    @classmethod
    def from_components(
        cls,
        header: Header,
        content: Frames,
        attached: str | None = None,
        extra: list[ExtraBlock] | None = None,
    ) -> "Art":
        return cls(header, content, attached, list(extra or []))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Art":
        """Parse an art from an iterable of lines."""
        from art3a.codec.parser import parse_lines
        return parse_lines(lines)

    @classmethod
    def parse(cls, text: str) -> "Art":
        """Parse an art from a string."""
        from art3a.codec.parser import parse_text
        return parse_text(text)

    @classmethod
    def load(cls, path: str | Path) -> "Art":
        """Load an art file from disk."""
        from art3a.io.reader import load
        return load(path)

    def save(self, path: str | Path) -> None:
        """Save the art to disk in the modern dialect."""
        from art3a.io.writer import save
        save(self, path)

    def __str__(self) -> str:
        from art3a.codec.writer import format_art
        return format_art(self)

    # Dimensions

    def color(self) -> bool:
        """Whether the art uses colors: the ``colors`` key, else frames or palette."""
        if self.header.colors is not None:
            return self.header.colors
        return self.content.has_color() or len(self.header.palette) > 0

    def frames(self) -> int:
        return len(self.content)

    def frame(self, index: int) -> Frame | None:
        """Return a copy of a frame, or None when it does not exist."""
        if 0 <= index < len(self.content):
            return self.content[index].copy()
        return None

    def width(self) -> int:
        return self.content.width

    def height(self) -> int:
        return self.content.height

    def pinned(self) -> tuple[bool, bool]:
        return self.content.pinned()

    # Cells

    def _note_color(self, color: Char | None | _KeepColor) -> None:
        if isinstance(color, Char) and self.header.colors is None:
            self.header.colors = True

    def get(self, frame: int, col: int, row: int, default: Cell = Cell()) -> Cell:
        return self.content.get(frame, col, row, default)

    def set(self, frame: int, col: int, row: int, cell: Cell) -> None:
        self.content.set(frame, col, row, cell)
        self._note_color(cell.color)

    def print(
        self,
        frame: int,
        col: int,
        row: int,
        text: str,
        color: Char | None | _KeepColor = KEEP_COLOR,
    ) -> None:
        """Write text into a frame starting at (col, row)."""
        self.content.print(frame, col, row, text, color)
        self._note_color(color)

    def print_ansi(self, frame: int, col: int, row: int, line: str) -> None:
        """Write a line of ANSI-colored text, adding palette entries as needed."""
        from art3a.codec.ansi_parser import parse_ansi_line
        for cell in parse_ansi_line(line, self):
            self.content.set(frame, col, row, cell)
            self._note_color(cell.color)
            col += 1

    def contains(self, cell: Cell) -> bool:
        return self.content.contains(cell)

    def contains_text(self, text: Char) -> bool:
        return self.content.contains_text(text)

    # Frame list

    def slice(self, start: int, end: int) -> None:
        self.content.slice(start, end)

    def swap(self, a: int, b: int) -> None:
        self.content.swap(a, b)

    def reverse(self) -> None:
        self.content.reverse()

    def dedup(self) -> None:
        self.content.dedup()

    def rot_forth(self, k: int) -> None:
        self.content.rot_forth(k)

    def rot_back(self, k: int) -> None:
        self.content.rot_back(k)

    def crop(self, r_from: int, r_to: int, c_from: int, c_to: int) -> None:
        self.content.crop(r_from, r_to, c_from, c_to)

    def remove_frame(self, frame: int) -> None:
        self.content.remove_frame(frame)

    def make_sure_frame_exist(self, frame: int) -> None:
        self.content.make_sure_frame_exist(frame)

    def dup_frame(self, frame: int) -> None:
        self.content.dup_frame(frame)

    def pin_text(self, frame: int) -> None:
        self.content.pin_text(frame)

    def pin_color(self, frame: int) -> None:
        self.content.pin_color(frame)

    # Palette

    def get_color_map(self, name: Char) -> ColorPair:
        return self.header.palette.get_color(name)

    def set_color_map(self, name: Char, pair: ColorPair) -> None:
        self.header.palette.set_color(name, pair)

    def remove_color_map(self, name: Char) -> None:
        """Remove a palette entry and every cell reference to it."""
        self.header.palette.remove_color(name)
        self.content.remove_color(name)

    def search_color_map(self, pair: ColorPair) -> Char | None:
        return self.header.palette.search_color(pair)

    def search_or_create_color_map(self, pair: ColorPair) -> Char:
        """Return the palette character for ``pair``, adding an entry when missing."""
        name = self.search_color_map(pair)
        if name is None:
            name = self.free_color_name()
            self.set_color_map(name, pair)
        return name

    def set_palette(self, palette: Palette) -> None:
        self.header.palette = palette

    def remove_palette(self) -> None:
        self.header.palette = Palette()

    def contains_color(self, name: Char) -> bool:
        """Whether ``name`` is a palette entry or referenced by any cell."""
        return self.header.palette.contains_color(name) or self.content.contains_color(name)

    def used_color_names(self) -> set[Char]:
        used = set(self.header.palette.names())
        for frame in self.content:
            for row in frame.rows:
                used.update(c.color for c in row if c.color is not None)
        return used

    def free_color_name(self) -> Char:
        """Return a character not yet used as a palette entry or cell color."""
        return free_color_name(self.used_color_names())

    # Tags and comments

    def tags(self) -> set[str]:
        return self.header.all_tags()

    def contains_tag(self, tag: str) -> bool:
        return self.header.contains_tag(tag)

    def add_tag(self, tag: str) -> None:
        self.header.add_tag(tag)

    def remove_tag(self, tag: str) -> None:
        self.header.remove_tag(tag)

    def remove_all_tags(self) -> None:
        self.header.remove_all_tags()

    def strip_comments(self) -> None:
        self.header.strip_comments()

    def title_line(self) -> str:
        return self.header.title_line()

    def authors_line(self) -> str:
        return self.header.authors_line()

    # Header keys

    def get_title_key(self) -> str | None:
        return self.header.title

    def set_title_key(self, title: str | None) -> None:
        self.header.title = title

    def get_colors_key(self) -> bool | None:
        return self.header.colors

    def set_colors_key(self, colors: bool | None) -> None:
        self.header.colors = colors

    def get_authors_key(self) -> list[str]:
        return list(self.header.authors)

    def set_authors_key(self, authors: Iterable[str]) -> None:
        self.header.authors = {a: [] for a in authors}

    def add_author(self, author: str) -> None:
        self.header.authors.setdefault(author, [])

    def get_orig_authors_key(self) -> list[str]:
        return list(self.header.orig_authors)

    def set_orig_authors_key(self, authors: Iterable[str]) -> None:
        self.header.orig_authors = {a: [] for a in authors}

    def add_orig_author(self, author: str) -> None:
        self.header.orig_authors.setdefault(author, [])

    def remove_author(self, author: str) -> None:
        """Remove a name from both authors and original authors."""
        self.header.authors.pop(author, None)
        self.header.orig_authors.pop(author, None)

    def check_author(self, author: str) -> tuple[bool, bool]:
        """Return whether ``author`` is an original author and whether an author."""
        return author in self.header.orig_authors, author in self.header.authors

    def get_src_key(self) -> str | None:
        return self.header.src

    def set_src_key(self, src: str | None) -> None:
        self.header.src = src

    def get_editor_key(self) -> str | None:
        return self.header.editor

    def set_editor_key(self, editor: str | None) -> None:
        self.header.editor = editor

    def get_license_key(self) -> str | None:
        return self.header.license

    def set_license_key(self, license: str | None) -> None:
        self.header.license = license

    def get_loop_key(self) -> bool:
        return True if self.header.loop is None else self.header.loop

    def set_loop_key(self, flag: bool) -> None:
        """Set looping; the default (looping) is left implicit unless commented."""
        if not flag or self.header.loop_comments:
            self.header.loop = flag
        else:
            self.header.loop = None

    def get_preview_key(self) -> int | None:
        preview = self.header.preview
        if preview is not None and preview < self.frames():
            return preview
        return None

    def set_preview_key(self, preview: int | None) -> None:
        """Set the preview frame; indexes past the last frame are ignored."""
        if preview is None:
            self.header.preview = None
        elif 0 <= preview < self.frames():
            self.header.preview = preview

    def get_extra_keys(self) -> list[ExtraHeaderKey]:
        return list(self.header.extra_keys)

    def set_extra_keys(self, extra: list[ExtraHeaderKey]) -> None:
        self.header.extra_keys = list(extra)

    # Delays

    def get_global_delay(self) -> int:
        if self.header.delay is None:
            return DEFAULT_DELAY_MS
        return self.header.delay.get_global()

    def get_frame_delay(self, frame: int) -> int:
        if self.header.delay is None:
            return DEFAULT_DELAY_MS
        return self.header.delay.get_frame(frame)

    def set_global_delay(self, ms: int) -> None:
        if self.header.delay is not None:
            self.header.delay.set_global(ms)
        elif ms not in (0, DEFAULT_DELAY_MS):
            self.header.delay = Delay(global_ms=ms)

    def set_frame_delay(self, frame: int, ms: int) -> None:
        if self.header.delay is not None:
            self.header.delay.set_frame(frame, ms)
        elif 0 <= frame < self.frames() and ms:
            self.header.delay = Delay(global_ms=DEFAULT_DELAY_MS, per_frame={frame: ms})

    def reset_delays(self, delay: Delay | None = None) -> None:
        """Replace the delays; None removes them along with their comments."""
        if delay is None:
            self.header.delay_comments = []
        self.header.delay = delay

    def duration(self) -> float:
        """Total animation time in seconds."""
        return sum(self.get_frame_delay(f) for f in range(self.frames())) / 1000
