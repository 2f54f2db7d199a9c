"""Source spans and line/column lookup."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Span", "line_col"]


def line_col(text: str, index: int) -> tuple[int, int]:
    """Return the 1-based (line, column) reached after walking ``index - 1`` characters."""
    line = 1
    column = 1
    for position, char in enumerate(text, start=1):
        if position >= index:
            break
        if char == "\n":
            line += 1
            column = 1
        else:
            column += 1
    return line, column


@dataclass(frozen=True)
class Span:
    """A half-open range ``[start, end)`` of character indices into a source text."""

    start: int
    end: int

    def line_col_start(self, text: str) -> tuple[int, int]:
        """Line and column of the span's start."""
        return line_col(text, self.start)

    def line_col_end(self, text: str) -> tuple[int, int]:
        """Line and column of the span's end."""
        return line_col(text, self.end)

    def slice(self, source: str) -> str:
        """Return the part of ``source`` covered by this span."""
        if not 0 <= self.start <= self.end <= len(source):
            raise IndexError(
                f"span {self.start}..{self.end} out of range for text of length {len(source)}"
            )
        return source[self.start : self.end]