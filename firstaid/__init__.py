from firstaid.edit import BandAid, Edit, LineColumn, Span
from firstaid.errors import FirstAidError, InvalidSpanError, MalformedInputError
from firstaid.first_aid_kit import EditSet, FirstAidKit, convert
from firstaid.suggestion import Suggestion
from firstaid.util import load_span_from, load_span_from_file

__version__ = "0.1.0"
