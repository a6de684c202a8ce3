"""Tests for writing the modern dialect."""

from art3a.codec.parser import parse_text
from art3a.codec.writer import body_lines, colors_implied, format_art, header_lines
from art3a.core.art import Art, ExtraBlock
from art3a.core.cell import Cell
from art3a.core.chars import Char
from art3a.core.color import Color, ColorPair
from art3a.core.header import ExtraHeaderKey, Header
from art3a.io.writer import dumps

COLORED_OUTPUT = (
    "@3a\n"
    ";; the cat\n"
    "title Cat\n"
    ";; drawn again\n"
    "orig-author bob\n"
    "author alice\n"
    "delay 100 1:200\n"
    "loop no\n"
    "col r fg:red bg:blue\n"
    "#cat #animal #pet\n"
    "\n"
    "@text-pin\n"
    "/\\\n"
    "^^\n"
    "\n"
    "@body\n"
    "rr\n"
    "1_\n"
    "\n"
    "_r\n"
    "__\n"
    "\n"
)


def build_art() -> Art:
    """An art built only through the editing API."""
    art = Art.blank(2, 3, 2)
    art.set_title_key("Built")
    art.set_authors_key(["me"])
    art.add_orig_author("you")
    art.set_src_key("https://example.org/built")
    art.set_editor_key("art3a")
    art.set_license_key("CC-BY-4.0")
    art.set_loop_key(False)
    art.set_preview_key(1)
    art.set_global_delay(120)
    art.set_frame_delay(1, 30)
    art.add_tag("demo")
    art.add_tag("test")
    art.set_extra_keys([ExtraHeaderKey("font big")])
    name = art.search_or_create_color_map(ColorPair(Color.RED, Color.from_rgb(0, 0, 64)))
    art.print(0, 0, 0, "abc", name)
    art.print(1, 0, 1, "xyz")
    art.set(1, 2, 0, Cell.of("#", "4"))
    art.attached = "see dog.3a"
    art.extra.append(ExtraBlock("notes", "first\nsecond"))
    return art


class TestFormat:
    """Tests for the text produced by the writer."""

    def test_parsed_document_layout(self, colored_doc: str) -> None:
        assert format_art(parse_text(colored_doc)) == COLORED_OUTPUT

    def test_empty_art(self) -> None:
        assert format_art(Art()) == "@3a\n\n@body\n"

    def test_header_key_order(self) -> None:
        header = Header(
            title="T",
            license="L",
            editor="E",
            src="S",
            authors={"a": ["hi"]},
            orig_authors={"o": []},
            loop=True,
            preview=0,
            colors=False,
        )
        assert header_lines(header, False, False) == [
            "@3a",
            "title T",
            "orig-author o",
            ";; hi",
            "author a",
            "src S",
            "editor E",
            "license L",
            "loop yes",
            "preview 0",
            "colors no",
            "",
        ]

    def test_colors_yes_without_palette(self) -> None:
        art = Art.blank(1, 1, 1, Cell.of("x", "1"))
        assert "colors yes" in format_art(art).split("\n")

    def test_colors_yes_when_palette_cannot_tell(self) -> None:
        art = Art.blank(1, 1, 1, Cell.of("x", "q"))
        art.set_color_map(Char("r"), ColorPair(Color.RED))
        assert not colors_implied(art)
        assert "colors yes" in format_art(art).split("\n")

    def test_no_colors_key_when_implied(self) -> None:
        art = Art.blank(1, 1, 1, Cell.of("x", "r"))
        art.set_colors_key(None)
        art.set_color_map(Char("r"), ColorPair(Color.RED))
        assert colors_implied(art)
        assert "colors yes" not in format_art(art).split("\n")

    def test_body_text_only(self) -> None:
        art = Art.blank(2, 2, 1, Cell.of("."))
        assert body_lines(art.content, False) == ["@body", "..", "", "..", ""]

    def test_body_color_pinned(self) -> None:
        art = Art.blank(2, 1, 1, Cell.of("a", "1"))
        art.print(1, 0, 0, "b")
        assert body_lines(art.content, True) == ["@color-pin", "1", "", "@body", "a", "", "b", ""]

    def test_body_interleaved(self) -> None:
        art = Art.blank(2, 1, 1, Cell.of("a", "1"))
        art.set(1, 0, 0, Cell.of("b", "2"))
        assert body_lines(art.content, True) == ["@body", "a1", "", "b2", ""]

    def test_dumps_strip_comments_keeps_original(self, colored_doc: str) -> None:
        art = parse_text(colored_doc)
        stripped = dumps(art, strip_comments=True)
        assert ";;" not in stripped
        assert art.header.title_comments == ["the cat"]
        assert parse_text(stripped).content == art.content


class TestRoundTrip:
    """Tests for parse(format(art)) == art."""

    def test_api_built_art(self) -> None:
        art = build_art()
        parsed = parse_text(format_art(art))
        assert parsed.header == art.header
        assert parsed.content == art.content
        assert parsed.attached == art.attached
        assert parsed.extra == art.extra
        assert parsed == art

    def test_text_pinned_art(self) -> None:
        art = Art.blank(3, 2, 1, Cell.of("="))
        art.set_colors_key(True)
        art.print(1, 0, 0, "==", Char("1"))
        art.print(2, 1, 0, "=", Char("2"))
        text = format_art(art)
        assert "@text-pin" in text
        assert parse_text(text) == art

    def test_color_pinned_art(self) -> None:
        art = Art.blank(2, 2, 1, Cell.of(".", "r"))
        art.set_color_map(Char("r"), ColorPair(bg=Color.GREEN))
        art.print(1, 0, 0, "hi")
        text = format_art(art)
        assert "@color-pin" in text
        assert parse_text(text) == art

    def test_comments_survive(self, colored_doc: str) -> None:
        art = parse_text(colored_doc)
        assert parse_text(format_art(art)) == art

    def test_builtin_colors_without_palette(self) -> None:
        art = Art.blank(1, 2, 1, Cell.of("x", "1"))
        assert art.header.colors is True
        assert parse_text(format_art(art)).header == art.header

    def test_set_colored_cell_keeps_header(self) -> None:
        art = Art.blank(1, 2, 1)
        art.set(0, 1, 0, Cell.of("y", "4"))
        parsed = parse_text(format_art(art))
        assert parsed.header == art.header
        assert parsed.content == art.content

    def test_implied_colors_stay_unset(self) -> None:
        art = Art.blank(1, 1, 1, Cell.of("x", "r"))
        art.set_color_map(Char("r"), ColorPair(Color.RED))
        art.set_colors_key(None)
        assert parse_text(format_art(art)).header.colors is None

    def test_empty_attached_line(self) -> None:
        art = Art.blank(1, 1, 1, Cell.of("."))
        art.attached = ""
        assert "@attach" in format_art(art)
        assert parse_text(format_art(art)).attached == ""

    def test_art_without_frames_loses_size(self) -> None:
        art = Art.blank(0, 3, 2)
        parsed = parse_text(format_art(art))
        assert parsed.frames() == 0
        assert (parsed.width(), parsed.height()) == (0, 0)

    def test_str_matches_format(self) -> None:
        art = build_art()
        assert str(art) == format_art(art)
