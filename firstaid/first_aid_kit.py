import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Union

from firstaid.edit import Edit, LineColumn, Span
from firstaid.errors import InvalidSpanError, MalformedInputError
from firstaid.suggestion import Suggestion

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split on `\\n`, dropping a trailing `\\r` per line.

    A final line break does not start another line, so `""` has no lines
    and `"\\n"` has a single empty one.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(eq=True, frozen=True)
class EditSet:
    """Edits for one accepted replacement, ordered from top to bottom.

    Every edit covers at most one line of the original document.
    """

    edits: Sequence[Edit] = ()

    def __post_init__(self):
        object.__setattr__(self, "edits", tuple(self.edits))

    def __len__(self) -> int:
        return len(self.edits)

    def __iter__(self) -> Iterator[Edit]:
        return iter(self.edits)

    def __getitem__(self, index: int) -> Edit:
        return self.edits[index]

    @classmethod
    def from_edit(cls, edit: Edit) -> "EditSet":
        return cls((edit,))

    @classmethod
    def from_suggestion(cls, suggestion: Suggestion, index: int) -> "EditSet":
        logger.debug("Picking replacement %d for suggestion at %s", index, suggestion.span)
        return cls.from_replacement(suggestion.replacement(index), suggestion.span)

    @classmethod
    def from_replacement(cls, replacement: str, span: Span) -> "EditSet":
        logger.debug("Converting replacement for span %s", span)
        if span.start > span.end:
            raise InvalidSpanError(f"Span start {span.start} is after end {span.end}")
        if not replacement:
            raise MalformedInputError("Replacement must contain at least one line")

        if not span.is_multiline():
            return cls.from_edit(Edit(span, replacement))

        replacement_lines = split_lines(replacement)
        original_lines = range(span.start.line, span.end.line + 1)
        if not original_lines:
            raise MalformedInputError("Span must cover at least one line")

        first = replacement_lines[0]
        # The end column follows the length of the new content, not the old one.
        first_span = Span(
            span.start,
            LineColumn(original_lines[0], span.start.column + len(first)),
        )
        edits = [Edit(first_span, first)]

        last_index = len(replacement_lines) - 1
        for i in range(1, len(replacement_lines)):
            line_replacement = replacement_lines[i]
            # Surplus replacement lines all land on the last original line.
            line = original_lines[i] if i < len(original_lines) else span.end.line
            if i < last_index:
                end_column = len(line_replacement)
            else:
                # Keeps whatever followed the original span on its last line.
                end_column = span.end.column
            line_span = Span(LineColumn(line, 0), LineColumn(line, end_column))
            edits.append(Edit(line_span, line_replacement))

        logger.debug("Span %s converted into %d edits", span, len(edits))
        return cls(edits)


FirstAidKit = EditSet


def convert(
    source: Union[str, Suggestion], selector: Union[int, Span]
) -> EditSet:
    """Build the edits for either `(suggestion, index)` or `(replacement, span)`."""
    if isinstance(source, Suggestion) and isinstance(selector, int):
        return EditSet.from_suggestion(source, selector)
    if isinstance(source, str) and isinstance(selector, Span):
        return EditSet.from_replacement(source, selector)
    raise TypeError(
        "convert expects (Suggestion, int) or (str, Span), "
        f"got ({type(source).__name__}, {type(selector).__name__})"
    )
