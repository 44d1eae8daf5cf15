from dataclasses import dataclass
from typing import Optional, Tuple

from firstaid.errors import InvalidSpanError


@dataclass(eq=True, frozen=True, order=True)
class LineColumn:
    """A position in text, lines start at 1, columns at 0.

    Columns count characters (unicode scalar values), not bytes.
    """

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1:
            raise InvalidSpanError(f"Lines are 1-indexed, got line {self.line}")
        if self.column < 0:
            raise InvalidSpanError(f"Columns can not be negative, got {self.column}")

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(eq=True, frozen=True)
class Span:
    """An inclusive range of text, both `start` and `end` are covered."""

    start: LineColumn
    end: LineColumn

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidSpanError(f"Span start {self.start} is after end {self.end}")

    @classmethod
    def from_line_range(cls, line: int, columns: range) -> "Span":
        # `columns` is exclusive at the stop, the span end is inclusive.
        if columns.stop <= columns.start:
            raise InvalidSpanError(f"Empty column range {columns} on line {line}")
        return cls(LineColumn(line, columns.start), LineColumn(line, columns.stop - 1))

    def is_multiline(self) -> bool:
        return self.start.line != self.end.line

    def one_line_len(self) -> Optional[int]:
        if self.is_multiline():
            return None
        return self.end.column - self.start.column + 1

    def covers(self, other: "Span") -> bool:
        return self.start <= other.start and other.end <= self.end

    def __contains__(self, position: LineColumn) -> bool:
        return self.start <= position <= self.end

    def __str__(self) -> str:
        return (
            f"({self.start.line},{self.start.column})"
            f"..({self.end.line},{self.end.column})"
        )


@dataclass(eq=True, frozen=True)
class Edit:
    """Replacement text for a span that never crosses a line break."""

    span: Span
    replacement: str

    def __post_init__(self):
        if self.span.is_multiline():
            raise InvalidSpanError(f"Edit span {self.span} covers more than one line")

    @classmethod
    def from_tuple(cls, replacement_span: Tuple[str, Span]) -> "Edit":
        replacement, span = replacement_span
        return cls(span, replacement)


BandAid = Edit
