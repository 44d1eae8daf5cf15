from dataclasses import dataclass
from typing import Optional, Sequence

from firstaid.edit import Span
from firstaid.errors import MalformedInputError


@dataclass(eq=True, frozen=True)
class Suggestion:
    """A detected mistake together with its candidate replacements."""

    span: Span
    replacements: Sequence[str]
    description: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "replacements", tuple(self.replacements))

    def replacement(self, index: int) -> str:
        if index < 0 or index >= len(self.replacements):
            raise MalformedInputError(
                f"Suggestion for {self.span} does not contain a replacement "
                f"at index {index} ({len(self.replacements)} available)"
            )
        return self.replacements[index]
