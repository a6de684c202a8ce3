"""Line stream with one line of pushback."""

from typing import Iterable, Iterator

from art3a.core.chars import normalize_text


class LineStream:
    """
    Iterator over input lines that can give back the last line read.

    Trailing carriage returns are stripped from every line.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self._pushed: list[str] = []
        self.line_no = 0

    def __iter__(self) -> "LineStream":
        return self

    def __next__(self) -> str:
        if self._pushed:
            line = self._pushed.pop()
        else:
            line = next(self._lines)
        self.line_no += 1
        return line.rstrip("\r\n")

    def next_line(self) -> str | None:
        """Return the next line, or None at the end of input."""
        return next(self, None)

    def push_back(self, line: str) -> None:
        """Make ``line`` the next line returned."""
        self._pushed.append(line)
        self.line_no -= 1

    def peek_block(self) -> list[str]:
        """Return the lines up to the next blank line without consuming them."""
        taken: list[str] = []
        for line in self:
            taken.append(line)
            if not normalize_text(line):
                break
        for line in reversed(taken):
            self.push_back(line)
        return [line for line in taken if normalize_text(line)]

    @classmethod
    def from_text(cls, text: str) -> "LineStream":
        """Split text into lines; a final newline does not start an empty line."""
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return cls(lines)
