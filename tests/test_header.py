"""Tests for header parsing and the Header model."""

import pytest

from art3a.codec.header_parser import parse_flag, parse_uint, read_header
from art3a.codec.lines import LineStream
from art3a.core.chars import Char
from art3a.core.color import Color, ColorPair
from art3a.core.header import ExtraHeaderKey, Header, LegacyColorMode, Tagline
from art3a.errors import (
    CharLengthError,
    ColorDuplicateError,
    ColorMapDuplicateError,
    ColorParseError,
    DelayDuplicateError,
    HeaderFlagError,
    HeaderKeyDuplicateError,
    HeaderKeyWithoutValueError,
    HeaderValueError,
)


def header_of(*lines: str) -> Header:
    """Read a modern header made of ``lines``."""
    return read_header(LineStream(["@3a", *lines, ""]))


class TestHeaderValues:
    """Tests for value helpers."""

    @pytest.mark.parametrize("value,expected", [("yes", True), ("TRUE", True), ("no", False), (" false ", False)])
    def test_parse_flag(self, value: str, expected: bool) -> None:
        assert parse_flag("loop", value) is expected

    def test_parse_flag_invalid(self) -> None:
        with pytest.raises(HeaderFlagError) as exc:
            parse_flag("loop", "maybe")
        assert exc.value.key == "loop"

    def test_parse_uint(self) -> None:
        assert parse_uint("preview", "12") == 12
        assert parse_uint("preview", "+3") == 3
        with pytest.raises(HeaderValueError):
            parse_uint("preview", "-1")
        with pytest.raises(HeaderValueError):
            parse_uint("preview", "x")


class TestModernHeader:
    """Tests for the modern header dialect."""

    def test_scalar_keys(self) -> None:
        header = header_of(
            "title Some Title",
            "src https://example.org/x",
            "editor vim",
            "license CC0",
            "loop no",
            "preview 2",
            "colors yes",
            "delay 80 1:10",
        )
        assert header.title == "Some Title"
        assert header.src == "https://example.org/x"
        assert header.editor == "vim"
        assert header.license == "CC0"
        assert header.loop is False
        assert header.preview == 2
        assert header.colors is True
        assert header.delay is not None
        assert header.delay.get_frame(1) == 10
        assert header.legacy is None

    def test_unset_keys_are_none(self) -> None:
        header = header_of()
        assert header.title is None
        assert header.loop is None
        assert header.delay is None
        assert header.get_colors() is False

    def test_comments_attach_to_next_key(self) -> None:
        header = header_of(";; first", ";;second", "title T", ";; trailing")
        assert header.title_comments == ["first", "second"]
        assert header.trailing_comments == ["trailing"]

    def test_authors_merge_comments(self) -> None:
        header = header_of("author a", ";; again", "author a", "orig-author b", "author c")
        assert header.authors == {"a": ["again"], "c": []}
        assert header.orig_authors == {"b": []}
        assert header.authors_line() == "b, a, c"

    def test_palette(self) -> None:
        header = header_of(";; warm", "col r fg:red bg:bright-yellow", "col x bg:17")
        assert header.palette.get_color(Char("r")) == ColorPair(Color.RED, Color.BRIGHT_YELLOW)
        assert header.palette.entries[Char("r")].comments == ["warm"]
        assert header.get_colors() is True

    def test_col_with_default_pair(self) -> None:
        header = header_of("col z")
        assert header.palette.get_color(Char("z")) == ColorPair()
        assert Char("z") in header.palette

    def test_taglines_merge_without_comment(self) -> None:
        header = header_of("#a #b", "#c #a", ";; more", "#d")
        assert [t.tags for t in header.tags] == [["a", "b", "c"], ["d"]]
        assert header.tags[1].comments == ["more"]
        assert header.all_tags() == {"a", "b", "c", "d"}

    def test_unknown_keys_kept(self) -> None:
        header = header_of(";; note", "font  big  ", "title T")
        assert len(header.extra_keys) == 1
        assert header.extra_keys[0].line == "font big"
        assert header.extra_keys[0].comments == ["note"]

    def test_unknown_key_with_blank_value(self) -> None:
        with pytest.raises(HeaderKeyWithoutValueError):
            header_of("draft  ")

    def test_bad_characters_dropped(self) -> None:
        header = header_of("title A\u200bB\x07")
        assert header.title == "AB"

    @pytest.mark.parametrize(
        "line,error",
        [
            ("title", HeaderKeyWithoutValueError),
            ("loop maybe", HeaderFlagError),
            ("preview first", HeaderValueError),
            ("col rr fg:red", CharLengthError),
            ("col r fg:red fg:blue", ColorDuplicateError),
            ("col r fg:purple", ColorParseError),
            ("delay 10 20", DelayDuplicateError),
        ],
    )
    def test_invalid_lines(self, line: str, error: type) -> None:
        with pytest.raises(error):
            header_of(line)

    @pytest.mark.parametrize("key", ["title a", "src a", "loop yes", "preview 1", "colors no", "delay 5"])
    def test_duplicate_keys(self, key: str) -> None:
        with pytest.raises(HeaderKeyDuplicateError):
            header_of(key, key)

    def test_duplicate_color_mapping(self) -> None:
        with pytest.raises(ColorMapDuplicateError):
            header_of("col r fg:red", "col r fg:blue")


class TestLegacyHeader:
    """Tests for the legacy header dialect."""

    def test_detected_without_magic(self) -> None:
        header = read_header(LineStream(["title Old", "colors full", "width 4", "height 3", ""]))
        assert header.title == "Old"
        assert header.legacy is not None
        assert header.legacy.colors == LegacyColorMode.FG_AND_BG
        assert (header.legacy.width, header.legacy.height) == (4, 3)
        assert header.get_colors() is True

    def test_comments(self) -> None:
        header = read_header(LineStream(["@ by hand", "title X\ttrailing note", "\tindented", "author me", ""]))
        assert header.title == "X"
        assert header.title_comments == ["by hand"]
        assert header.authors == {"me": ["indented"]}

    def test_utf8_marker_skipped(self) -> None:
        header = read_header(LineStream(["utf8", "width 1", "height 1", ""]))
        assert header.extra_keys == []
        assert header.legacy is not None

    def test_unknown_color_mode(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING"):
            header = read_header(LineStream(["colors rainbow", "width 1", "height 1", ""]))
        assert header.legacy is not None
        assert header.legacy.colors == LegacyColorMode.NONE
        assert "rainbow" in caplog.text

    def test_bad_geometry(self) -> None:
        with pytest.raises(HeaderValueError):
            read_header(LineStream(["width wide", ""]))

    def test_legacy_color_mode_parse(self) -> None:
        assert LegacyColorMode.parse("fg") == LegacyColorMode.FG_ONLY
        assert LegacyColorMode.parse(" BG ") == LegacyColorMode.BG_ONLY
        assert LegacyColorMode.parse("none") == LegacyColorMode.NONE
        assert LegacyColorMode.parse("all") is None


class TestHeaderModel:
    """Tests for Header methods."""

    @pytest.mark.parametrize("line", ["draft", "draft  ", " draft", ""])
    def test_extra_key_needs_value(self, line: str) -> None:
        with pytest.raises(HeaderKeyWithoutValueError):
            ExtraHeaderKey(line)

    def test_add_tag_only_when_absent(self) -> None:
        header = Header()
        header.add_tag("cat")
        header.add_tag("cat")
        header.add_tag("dog")
        assert [t.tags for t in header.tags] == [["cat", "dog"]]

    def test_add_tag_skips_existing_in_later_line(self) -> None:
        header = Header(tags=[Tagline(["a"]), Tagline(["b"])])
        header.add_tag("b")
        assert [t.tags for t in header.tags] == [["a"], ["b"]]

    def test_remove_tag_drops_empty_lines(self) -> None:
        header = Header(tags=[Tagline(["a"]), Tagline(["b", "c"])])
        header.remove_tag("a")
        header.remove_tag("c")
        assert [t.tags for t in header.tags] == [["b"]]
        header.remove_all_tags()
        assert header.all_tags() == set()

    def test_tagline_wraps(self) -> None:
        tagline = Tagline([f"tag{n:02d}" for n in range(20)])
        lines = tagline.format_lines()
        assert len(lines) > 1
        assert all(len(line) < 90 for line in lines)
        assert Tagline.parse(" ".join(lines)).tags == tagline.tags

    def test_strip_comments(self) -> None:
        header = header_of(";; a", "title T", ";; b", "author x", ";; c", "#t", ";; d", "foo bar", ";; e")
        header.strip_comments()
        assert header.title_comments == []
        assert header.authors == {"x": []}
        assert header.tags[0].comments == []
        assert header.extra_keys[0].comments == []
        assert header.trailing_comments == []
        assert header.title == "T"

    def test_title_line(self) -> None:
        assert Header().title_line() == ""
        assert Header(title="T").title_line() == "T"
        assert Header(authors={"a": []}).title_line() == "art by a"
        assert Header(title="T", authors={"a": []}, orig_authors={"o": []}).title_line() == "T by o, a"
