class FirstAidError(ValueError):
    """Base class for errors raised while building edits."""


class MalformedInputError(FirstAidError):
    """Replacement text, suggestion or document content can not be used."""


class InvalidSpanError(FirstAidError):
    """A span or line/column position violates its ordering constraints."""
