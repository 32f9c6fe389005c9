"""Extract year, month and day from human-written date strings in any supported format."""

from .errors import DatifyError, RangeError, ValidationError
from .config import DEFAULT_CONFIG, DatifyConfig, load_config
from .date import DateFields, DatePart, parse

__version__ = "0.1.0"
