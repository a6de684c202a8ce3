"""Tests for the frame sequence and the pin/merge engine."""

import pytest

from art3a.core.cell import Cell
from art3a.core.chars import Char
from art3a.core.delay import Delay
from art3a.core.frame import Frame
from art3a.core.frames import Frames
from art3a.errors import EmptyBodyError, HeightMismatchError, WidthMismatchError


def text_frame(*rows: str) -> Frame:
    return Frame.from_rows([[Cell.of(ch) for ch in row] for row in rows])


def color_frame(*rows: str) -> Frame:
    return Frame.from_rows(
        [[Cell(color=None if ch == "_" else Char(ch)) for ch in row] for row in rows]
    )


def numbered(count: int) -> Frames:
    """Frames of 1x1 holding the digits 0..count-1."""
    return Frames(1, 1, [text_frame(str(i)) for i in range(count)])


def digits(frames: Frames) -> str:
    return "".join(f.text_lines()[0] for f in frames)


class TestFramesList:
    """Tests for frame list operations."""

    def test_blank(self) -> None:
        frames = Frames.blank(3, 4, 2)
        assert len(frames) == 3
        assert frames.count() == 3
        assert all(f.width == 4 and f.height == 2 for f in frames)

    def test_make_sure_frame_exist_repeats_last(self) -> None:
        frames = numbered(2)
        frames.make_sure_frame_exist(3)
        assert digits(frames) == "0111"

    def test_make_sure_frame_exist_from_empty(self) -> None:
        frames = Frames(2, 1)
        frames.make_sure_frame_exist(0)
        assert frames[0] == Frame.blank(2, 1)

    def test_dup_frame(self) -> None:
        frames = numbered(3)
        frames.dup_frame(1)
        assert digits(frames) == "0112"
        frames.set(1, 0, 0, Cell.of("x"))
        assert digits(frames) == "0x12"

    def test_remove_frame(self) -> None:
        frames = numbered(3)
        frames.remove_frame(1)
        frames.remove_frame(9)
        assert digits(frames) == "02"

    def test_slice_inclusive(self) -> None:
        frames = numbered(5)
        frames.slice(1, 3)
        assert digits(frames) == "123"

    def test_swap_and_reverse(self) -> None:
        frames = numbered(3)
        frames.swap(0, 2)
        assert digits(frames) == "210"
        frames.swap(0, 7)
        frames.reverse()
        assert digits(frames) == "012"

    def test_dedup_adjacent_only(self) -> None:
        frames = Frames(1, 1, [text_frame(c) for c in "aabba"])
        frames.dedup()
        assert digits(frames) == "aba"

    def test_rotation(self) -> None:
        frames = numbered(4)
        frames.rot_forth(1)
        assert digits(frames) == "3012"
        frames.rot_back(2)
        assert digits(frames) == "1230"
        frames.rot_back(4)
        assert digits(frames) == "1230"


class TestFramesEdit:
    """Tests for edits applied to one or all frames."""

    def test_print_one_frame(self) -> None:
        frames = Frames.blank(2, 3, 1)
        frames.print(1, 0, 0, "hi")
        assert frames[0].text_lines() == ["   "]
        assert frames[1].text_lines() == ["hi "]

    def test_fill_all_or_one(self) -> None:
        frames = Frames.blank(2, 1, 1)
        frames.fill(Cell.of("x"), frame=0)
        assert digits(frames) == "x "
        frames.fill(Cell.of("y"))
        assert digits(frames) == "yy"

    def test_shift_one_frame(self) -> None:
        frames = Frames(2, 1, [text_frame("ab"), text_frame("ab")])
        frames.shift_right(1, Cell.of("."), frame=1)
        assert frames[0].text_lines() == ["ab"]
        assert frames[1].text_lines() == [".a"]

    def test_resize_updates_dimensions(self) -> None:
        frames = Frames.blank(2, 2, 2)
        frames.resize(3, 1)
        assert (frames.width, frames.height) == (3, 1)
        assert all(f.width == 3 and f.height == 1 for f in frames)

    def test_crop_updates_dimensions(self) -> None:
        frames = Frames(3, 2, [text_frame("abc", "def")])
        frames.crop(0, 0, 1, 2)
        assert (frames.width, frames.height) == (2, 1)

    def test_remove_color(self) -> None:
        frames = Frames(1, 1, [color_frame("r"), color_frame("g")])
        frames.remove_color(Char("r"))
        assert not frames.contains_color(Char("r"))
        assert frames.contains_color(Char("g"))

    def test_duration(self) -> None:
        frames = numbered(3)
        assert frames.duration_ms(Delay(global_ms=100, per_frame={2: 10})) == 210


class TestPinned:
    """Tests for pinned channel detection."""

    def test_single_frame_never_pinned(self) -> None:
        assert numbered(1).pinned() == (False, False)
        assert Frames().pinned() == (False, False)

    def test_identical_frames(self) -> None:
        frames = Frames(2, 1, [text_frame("ab"), text_frame("ab"), text_frame("ab")])
        assert frames.pinned() == (True, True)

    def test_text_pinned_only(self) -> None:
        a = text_frame("ab")
        b = text_frame("ab")
        b.set(0, 0, Cell.of("a", "r"))
        assert Frames(2, 1, [a, b]).pinned() == (True, False)

    def test_color_pinned_only(self) -> None:
        assert numbered(2).pinned() == (False, True)


class TestMerge:
    """Tests for pins and merging."""

    def test_color_pin(self) -> None:
        frames = Frames(2, 1, [text_frame("ab"), text_frame("cd")])
        frames.color_pin = color_frame("r_")
        frames.merge()
        assert [f.both_lines() for f in frames] == [["abr_"], ["cdr_"]]
        assert frames.color_pin is None
        assert all(f.color_count == 1 for f in frames)

    def test_text_pin(self) -> None:
        frames = Frames(2, 1, [color_frame("rg"), color_frame("__")])
        frames.text_pin = text_frame("hi")
        frames.merge()
        assert [f.both_lines() for f in frames] == [["hirg"], ["hi__"]]
        assert frames.text_pin is None

    def test_both_pins(self) -> None:
        frames = Frames(1, 1, [text_frame("a"), text_frame("b")])
        frames.color_pin = color_frame("r")
        frames.text_pin = text_frame("z")
        frames.merge()
        assert [f.both_lines() for f in frames] == [["zr"], ["zr"]]

    def test_pin_size_mismatch(self) -> None:
        frames = Frames(2, 1, [text_frame("ab")])
        frames.color_pin = color_frame("rgb")
        with pytest.raises(WidthMismatchError):
            frames.merge()
        frames.color_pin = color_frame("r_", "r_")
        with pytest.raises(HeightMismatchError):
            frames.merge()

    def test_pin_without_frames(self) -> None:
        frames = Frames(1, 1)
        frames.text_pin = text_frame("a")
        with pytest.raises(EmptyBodyError):
            frames.merge()

    def test_merge_without_pins_is_noop(self) -> None:
        frames = numbered(2)
        frames.merge()
        assert digits(frames) == "01"

    def test_pin_color_of_frame(self) -> None:
        frames = Frames(1, 1, [color_frame("r"), text_frame("b")])
        frames.pin_color(0)
        assert frames.pinned()[1]
        assert frames[1].color_lines() == ["r"]
        assert frames[1].text_lines() == ["b"]

    def test_pin_text_of_frame(self) -> None:
        frames = Frames(1, 1, [text_frame("a"), color_frame("g")])
        frames.pin_text(0)
        assert frames[1].both_lines() == ["ag"]

    def test_check_frame(self) -> None:
        frames = Frames()
        frames.check_frame(text_frame("ab"))
        assert (frames.width, frames.height) == (2, 1)
        with pytest.raises(WidthMismatchError):
            frames.check_frame(text_frame("abc"))
        with pytest.raises(HeightMismatchError):
            frames.check_frame(text_frame("ab", "cd"))
