"""Header parser for the modern and legacy 3a dialects."""

from __future__ import annotations

import logging
import re

from art3a.codec.lines import LineStream
from art3a.core.chars import Char, normalize_text
from art3a.core.color import ColorPair
from art3a.core.constants import COMMENT_PREFIX, LEGACY_COMMENT_PREFIX, MAGIC, TAG_PREFIX
from art3a.core.delay import Delay
from art3a.core.header import ExtraHeaderKey, Header, LegacyColorMode, LegacyHeaderInfo, Tagline
from art3a.errors import (
    HeaderFlagError,
    HeaderKeyDuplicateError,
    HeaderKeyWithoutValueError,
    HeaderValueError,
)

logger = logging.getLogger(__name__)

_UINT_RE = re.compile(r"\+?[0-9]+")

# Keys holding a single free-text value, mapped to their Header attribute
_TEXT_KEYS = {
    "title": "title",
    "src": "src",
    "editor": "editor",
    "license": "license",
}


def parse_flag(key: str, value: str) -> bool:
    """Parse a ``yes``/``no`` (or ``true``/``false``) header value."""
    v = value.strip().lower()
    if v in ("yes", "true"):
        return True
    if v in ("no", "false"):
        return False
    raise HeaderFlagError(key)


def parse_uint(key: str, value: str) -> int:
    """Parse a non-negative integer header value."""
    if not _UINT_RE.fullmatch(value.strip()):
        raise HeaderValueError(key, value)
    return int(value)


def read_header(stream: LineStream) -> Header:
    """
    Read a header, detecting the dialect from the first line.

    A first line of exactly ``@3a`` selects the modern dialect; anything
    else is given back to the stream and read as a legacy header.
    """
    first = stream.next_line()
    if first is None:
        logger.debug("Empty input, reading as legacy")
        return Header()
    if normalize_text(first) == MAGIC:
        logger.debug("Detected modern dialect")
        return read_modern_header(stream)
    logger.debug("Detected legacy dialect")
    stream.push_back(first)
    return read_legacy_header(stream)


class _HeaderBuilder:
    """Shared state of both header dialects: the header and pending comments."""

    def __init__(self) -> None:
        self.header = Header()
        self.comments: list[str] = []

    def take_comments(self) -> list[str]:
        comments, self.comments = self.comments, []
        return comments

    def add_tagline(self, line: str) -> None:
        """Add tags, merging into the previous tag-line when no comment separates them."""
        tagline = Tagline.parse(line)
        if self.header.tags and not self.comments:
            for tag in tagline.tags:
                self.header.tags[-1].add(tag)
        else:
            tagline.comments = self.take_comments()
            self.header.tags.append(tagline)

    def set_scalar(self, key: str, attr: str, value: object) -> None:
        if getattr(self.header, attr) is not None:
            raise HeaderKeyDuplicateError(key)
        setattr(self.header, attr, value)
        setattr(self.header, f"{attr}_comments", self.take_comments())

    def add_author(self, authors: dict[str, list[str]], name: str) -> None:
        authors.setdefault(name, []).extend(self.take_comments())

    def add_extra(self, key: str, value: str) -> None:
        logger.debug("Keeping unknown header key '%s'", key)
        self.header.extra_keys.append(
            ExtraHeaderKey(f"{key} {value}".rstrip(), self.take_comments())
        )

    def common_key(self, key: str, value: str) -> bool:
        """Handle keys shared by both dialects; return False for other keys."""
        if key in _TEXT_KEYS:
            self.set_scalar(key, _TEXT_KEYS[key], value)
        elif key == "author":
            self.add_author(self.header.authors, value)
        elif key == "loop":
            self.set_scalar(key, "loop", parse_flag(key, value))
        elif key == "preview":
            self.set_scalar(key, "preview", parse_uint(key, value))
        elif key == "delay":
            self.set_scalar(key, "delay", Delay.parse(value))
        else:
            return False
        return True

    def finish(self) -> Header:
        self.header.trailing_comments = self.take_comments()
        return self.header


def _split_key(line: str) -> tuple[str, str]:
    key, sep, value = line.partition(" ")
    if not sep:
        raise HeaderKeyWithoutValueError(line)
    return key.strip(), value.strip()


def read_modern_header(stream: LineStream) -> Header:
    """Read modern header lines up to the first blank line."""
    builder = _HeaderBuilder()
    header = builder.header
    for raw in stream:
        line = normalize_text(raw)
        if not line:
            break
        if line == MAGIC:
            continue
        if line.startswith(COMMENT_PREFIX):
            builder.comments.append(line[len(COMMENT_PREFIX):].strip())
            continue
        if line.startswith(TAG_PREFIX):
            builder.add_tagline(line)
            continue

        key, value = _split_key(line)
        if builder.common_key(key, value):
            continue
        if key == "orig-author":
            builder.add_author(header.orig_authors, value)
        elif key == "colors":
            builder.set_scalar(key, "colors", parse_flag(key, value))
        elif key == "col":
            name, _, pair = value.partition(" ")
            header.palette.add_parsing_color(
                Char.parse(name), ColorPair.parse(pair), builder.take_comments()
            )
        else:
            builder.add_extra(key, value)
    return builder.finish()


def _legacy_info(header: Header) -> LegacyHeaderInfo:
    if header.legacy is None:
        header.legacy = LegacyHeaderInfo()
    return header.legacy


def read_legacy_header(stream: LineStream) -> Header:
    """
    Read legacy header lines up to the first blank line.

    Text after a tab is a comment, as are lines starting with ``@``.
    ``colors``, ``width`` and ``height`` describe the legacy body layout.
    """
    builder = _HeaderBuilder()
    header = builder.header
    for raw in stream:
        if not raw:
            break
        content, tab, comment = raw.partition("\t")
        if tab and not content:
            builder.comments.append(normalize_text(comment).strip())
            continue
        line = normalize_text(content)
        if not line:
            break
        if line.startswith(LEGACY_COMMENT_PREFIX):
            builder.comments.append(line[len(LEGACY_COMMENT_PREFIX):].strip())
            continue
        if line.startswith(TAG_PREFIX):
            builder.add_tagline(line)
            continue
        if line.startswith("utf8"):
            continue

        key, value = _split_key(line)
        if builder.common_key(key, value):
            continue
        if key == "colors":
            mode = LegacyColorMode.parse(value)
            if mode is None:
                logger.warning("Unknown legacy color mode '%s', reading without colors", value)
                mode = LegacyColorMode.NONE
            _legacy_info(header).colors = mode
        elif key == "width":
            _legacy_info(header).width = parse_uint(key, value)
        elif key == "height":
            _legacy_info(header).height = parse_uint(key, value)
        else:
            builder.add_extra(key, value)
        builder.comments.clear()
    return builder.finish()
