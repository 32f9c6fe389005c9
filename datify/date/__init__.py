"""Date extraction core.

The general YYYY?MM?DD format is tried first; everything else goes through positional token
assignment, with month names matched exactly or by inflected form.
"""

from .types import DateFields, DatePart, ParseSession
from .months import is_same_word, match_month
from .parsers import parse_general_format
from .assign import assign_parts, split_tokens
from .extract import parse
