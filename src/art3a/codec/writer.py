"""Serializer emitting the modern 3a dialect."""

from __future__ import annotations

from art3a.codec.frame_parser import looks_interleaved
from art3a.core.art import Art
from art3a.core.constants import (
    BLOCK_ATTACH,
    BLOCK_BODY,
    BLOCK_COLOR_PIN,
    BLOCK_PREFIX,
    BLOCK_TEXT_PIN,
    MAGIC,
)
from art3a.core.frames import Frames
from art3a.core.header import Header


def _comments(comments: list[str]) -> list[str]:
    return [f";; {c}".rstrip() for c in comments]


def _flag(value: bool) -> str:
    return "yes" if value else "no"


def header_lines(header: Header, colors: bool, implied: bool) -> list[str]:
    """
    Format the header, ending with its blank separator line.

    ``colors`` is whether the body carries colors. Unless ``implied`` says
    a reader would infer them from the palette and body, an unset
    ``colors`` key is written as ``colors yes``.
    """
    lines = [MAGIC]

    def key(name: str, value: object, comments: list[str]) -> None:
        lines.extend(_comments(comments))
        lines.append(f"{name} {value}")

    if header.title is not None:
        key("title", header.title, header.title_comments)
    for author, comments in header.orig_authors.items():
        key("orig-author", author, comments)
    for author, comments in header.authors.items():
        key("author", author, comments)
    if header.src is not None:
        key("src", header.src, header.src_comments)
    if header.editor is not None:
        key("editor", header.editor, header.editor_comments)
    if header.license is not None:
        key("license", header.license, header.license_comments)
    if header.delay is not None:
        key("delay", header.delay, header.delay_comments)
    if header.loop is not None:
        key("loop", _flag(header.loop), header.loop_comments)
    if header.preview is not None:
        key("preview", header.preview, header.preview_comments)
    if header.colors is not None:
        key("colors", _flag(header.colors), header.colors_comments)
    elif colors and not implied:
        lines.append("colors yes")
    lines.extend(header.palette.format_lines())
    for tagline in header.tags:
        lines.extend(tagline.format_lines())
    for extra in header.extra_keys:
        lines.extend(_comments(extra.comments))
        lines.append(extra.line)
    lines.extend(_comments(header.trailing_comments))
    lines.append("")
    return lines


def _frame_block(name: str, frame_lines: list[list[str]]) -> list[str]:
    lines = [BLOCK_PREFIX + name]
    for frame in frame_lines:
        lines.extend(frame)
        lines.append("")
    return lines


def body_lines(frames: Frames, colors: bool) -> list[str]:
    """
    Format the frames as pin and body blocks.

    With colors, a channel that is the same in every frame is stored once
    in a pin block; a pinned color channel is preferred over pinned text.
    """
    if not colors:
        return _frame_block(BLOCK_BODY, [f.text_lines() for f in frames])
    text_pinned, color_pinned = frames.pinned()
    if color_pinned:
        return _frame_block(BLOCK_COLOR_PIN, [frames[0].color_lines()]) + _frame_block(
            BLOCK_BODY, [f.text_lines() for f in frames]
        )
    if text_pinned:
        return _frame_block(BLOCK_TEXT_PIN, [frames[0].text_lines()]) + _frame_block(
            BLOCK_BODY, [f.color_lines() for f in frames]
        )
    return _frame_block(BLOCK_BODY, [f.both_lines() for f in frames])


def colors_implied(art: Art) -> bool:
    """Whether a reader would find the color channel without a ``colors`` key."""
    palette = art.header.palette
    if len(palette) == 0:
        return False
    frames = art.content
    if len(frames) == 0 or any(frames.pinned()):
        return True
    return looks_interleaved(frames[0].both_lines(), palette)


def art_lines(art: Art) -> list[str]:
    colors = art.color()
    lines = header_lines(art.header, colors, colors_implied(art))
    if art.attached is not None:
        lines.extend([BLOCK_PREFIX + BLOCK_ATTACH, art.attached, ""])
    for block in art.extra:
        lines.append(BLOCK_PREFIX + block.title)
        if block.content:
            lines.extend(block.content.split("\n"))
        lines.append("")
    lines.extend(body_lines(art.content, colors))
    return lines


def format_art(art: Art) -> str:
    """Format an art as a modern 3a document."""
    return "\n".join(art_lines(art)) + "\n"
