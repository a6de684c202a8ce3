"""Header - metadata of a 3a art."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from art3a.core.chars import normalize_text
from art3a.core.constants import TAG_PREFIX, TAGLINE_WIDTH
from art3a.core.delay import Delay
from art3a.core.palette import Palette
from art3a.errors import HeaderKeyWithoutValueError


class LegacyColorMode(Enum):
    """Color channels present in each row of a legacy body."""
    NONE = "none"
    FG_ONLY = "fg"
    BG_ONLY = "bg"
    FG_AND_BG = "full"

    @classmethod
    def parse(cls, value: str) -> "LegacyColorMode | None":
        """Return the mode for a legacy ``colors`` value, or None if unknown."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass
class LegacyHeaderInfo:
    """Geometry and color layout of a legacy body."""
    colors: LegacyColorMode = LegacyColorMode.NONE
    width: int = 0
    height: int = 0


@dataclass
class ExtraHeaderKey:
    """
    An unrecognized header line kept verbatim, with its comments.

    The line must be a key followed by a space and a non-empty value.
    """
    line: str
    comments: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        key, _, value = self.line.partition(" ")
        if not key or not value.strip():
            raise HeaderKeyWithoutValueError(self.line)


@dataclass
class Tagline:
    """An ordered set of tags written on one ``#tag #tag`` line."""
    tags: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> "Tagline":
        tagline = cls()
        for token in line.split(" "):
            if token.startswith(TAG_PREFIX) and len(token) > 1:
                tagline.add(token[1:])
        return tagline

    def add(self, tag: str) -> None:
        if tag not in self.tags:
            self.tags.append(tag)

    def format_lines(self) -> list[str]:
        """Format as tag lines, wrapping before ``TAGLINE_WIDTH`` characters."""
        lines: list[str] = [f";; {c}".rstrip() for c in self.comments]
        current: list[str] = []
        length = 0
        for n, tag in enumerate(self.tags):
            current.append(TAG_PREFIX + tag)
            length += len(tag) + 2
            if n + 1 == len(self.tags) or length >= TAGLINE_WIDTH:
                lines.append(" ".join(current))
                current = []
                length = 0
        return lines


@dataclass
class Header:
    """
    Metadata of a 3a art.

    Scalar keys are None when unset. Authors map each name to the comments
    written above it. Comments of other keys live in ``<key>_comments``.
    """
    title: str | None = None
    title_comments: list[str] = field(default_factory=list)
    authors: dict[str, list[str]] = field(default_factory=dict)
    orig_authors: dict[str, list[str]] = field(default_factory=dict)
    src: str | None = None
    src_comments: list[str] = field(default_factory=list)
    editor: str | None = None
    editor_comments: list[str] = field(default_factory=list)
    license: str | None = None
    license_comments: list[str] = field(default_factory=list)
    delay: Delay | None = None
    delay_comments: list[str] = field(default_factory=list)
    loop: bool | None = None
    loop_comments: list[str] = field(default_factory=list)
    preview: int | None = None
    preview_comments: list[str] = field(default_factory=list)
    colors: bool | None = None
    colors_comments: list[str] = field(default_factory=list)
    palette: Palette = field(default_factory=Palette)
    tags: list[Tagline] = field(default_factory=list)
    legacy: LegacyHeaderInfo | None = None
    extra_keys: list[ExtraHeaderKey] = field(default_factory=list)
    trailing_comments: list[str] = field(default_factory=list)

    def get_colors(self) -> bool:
        """Whether the body carries a color channel."""
        if self.colors is not None:
            return self.colors
        if self.legacy is not None:
            return self.legacy.colors != LegacyColorMode.NONE
        return len(self.palette) > 0

    # Tags

    def all_tags(self) -> set[str]:
        return {tag for tagline in self.tags for tag in tagline.tags}

    def contains_tag(self, tag: str) -> bool:
        return any(tag in tagline.tags for tagline in self.tags)

    def add_tag(self, tag: str) -> None:
        """Add a tag to the first tag-line unless some tag-line already has it."""
        tag = normalize_text(tag).strip()
        if not tag or self.contains_tag(tag):
            return
        if self.tags:
            self.tags[0].add(tag)
        else:
            self.tags.append(Tagline([tag]))

    def remove_tag(self, tag: str) -> None:
        """Remove a tag everywhere, dropping tag-lines left empty."""
        for tagline in self.tags:
            if tag in tagline.tags:
                tagline.tags.remove(tag)
        self.tags = [t for t in self.tags if t.tags]

    def remove_all_tags(self) -> None:
        self.tags = []

    # Comments and display lines

    def strip_comments(self) -> None:
        self.title_comments = []
        self.src_comments = []
        self.editor_comments = []
        self.license_comments = []
        self.delay_comments = []
        self.loop_comments = []
        self.preview_comments = []
        self.colors_comments = []
        self.trailing_comments = []
        self.authors = {name: [] for name in self.authors}
        self.orig_authors = {name: [] for name in self.orig_authors}
        for tagline in self.tags:
            tagline.comments = []
        for key in self.extra_keys:
            key.comments = []
        self.palette.strip_comments()

    def authors_line(self) -> str:
        """Original authors then authors, comma separated."""
        return ", ".join(list(self.orig_authors) + list(self.authors))

    def title_line(self) -> str:
        authors = self.authors_line()
        if self.title is not None:
            return f"{self.title} by {authors}" if authors else self.title
        return f"art by {authors}" if authors else ""
