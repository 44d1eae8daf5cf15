import logging
import pathlib
from typing import BinaryIO, List, Union

from firstaid.edit import Span
from firstaid.errors import MalformedInputError
from firstaid.first_aid_kit import split_lines

logger = logging.getLogger(__name__)


def load_span_from(source: Union[bytes, BinaryIO], span: Span) -> str:
    """Extract the text covered by `span` from an UTF-8 encoded document.

    Start and end column are both included, lines are joined with `\\n`.
    Useful to check edits against what is actually in the document.
    """
    logger.debug("Loading %s from source", span)
    raw = source if isinstance(source, bytes) else source.read()
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as err:
        raise MalformedInputError("Source is not valid UTF-8") from err

    lines = split_lines(content)
    if len(lines) < span.end.line:
        raise MalformedInputError(
            f"Span {span} ends on line {span.end.line}, "
            f"but the source only has {len(lines)} lines"
        )

    extracted: List[str] = []
    for line in range(span.start.line, span.end.line + 1):
        chars = lines[line - 1]
        first = span.start.column if line == span.start.line else 0
        if line == span.end.line:
            extracted.append(chars[first : span.end.column + 1])
        else:
            extracted.append(chars[first:])
    return "\n".join(extracted)


def load_span_from_file(path: Union[str, pathlib.Path], span: Span) -> str:
    with open(path, "rb") as source:
        return load_span_from(source, span)
