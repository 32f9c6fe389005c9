from __future__ import annotations


class DatifyError(ValueError):
    """Base class for configuration and conversion errors raised by datify."""


class RangeError(DatifyError):
    """A month ordinal outside 1..12, or a complete triple that is not a real calendar date."""


class ValidationError(DatifyError):
    """Malformed configuration input: a locale list, a month name, a separator, an env value."""
