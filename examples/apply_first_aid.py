import logging
from typing import List

from firstaid import EditSet, LineColumn, Span, Suggestion, convert, load_span_from

logger = logging.getLogger(__name__)


def apply_edits(text: str, kit: EditSet) -> str:
    """Naive patcher, replaces each addressed column range in place."""
    lines: List[str] = text.split("\n")
    for edit in kit:
        index = edit.span.start.line - 1
        line = lines[index]
        lines[index] = (
            line[: edit.span.start.column]
            + edit.replacement
            + line[edit.span.end.column + 1 :]
        )
        logger.debug(f"Applied {edit.replacement!r} to {edit.span}")
    return "\n".join(lines)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    document = "/// Thsi is a line\n/// and anotehr one\n"
    span = Span(LineColumn(1, 4), LineColumn(2, 18))
    print(repr(load_span_from(document.encode("utf-8"), span)))
    suggestion = Suggestion(span, ["This is a line\n/// and another one"])
    print(apply_edits(document, convert(suggestion, 0)))
