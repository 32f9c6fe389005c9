from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from ..errors import RangeError

# One or two digit day, possibly followed by a suffix ("20th", "1st").
DAY_RE = re.compile(r"\b((0?[1-9])|([12]\d)|(3[01]))(\b|(?=\D))", re.ASCII)
# One or two digit month.
MONTH_DIGIT_RE = re.compile(r"\b((0?[1-9])|(1[012]))\b", re.ASCII)
# Four digit year, 1000..2999.
YEAR_RE = re.compile(r"\b[12]\d\d\d\b", re.ASCII)


class DatePart(Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    @property
    def pattern(self) -> re.Pattern[str]:
        return _PATTERNS[self]

    @classmethod
    def order(cls, day_first: bool, *, resolved: frozenset["DatePart"] = frozenset()) -> list["DatePart"]:
        """Positional resolution order: day/month (swapped unless day_first), then year.

        Parts in ``resolved`` are left out so a preset value is never competed for.
        """
        day_month = [cls.DAY, cls.MONTH] if day_first else [cls.MONTH, cls.DAY]
        return [p for p in (*day_month, cls.YEAR) if p not in resolved]


_PATTERNS = {
    DatePart.DAY: DAY_RE,
    DatePart.MONTH: MONTH_DIGIT_RE,
    DatePart.YEAR: YEAR_RE,
}


@dataclass(frozen=True)
class DateFields:
    """A possibly partial date: any of year, month and day may be None."""

    year: int | None = None
    month: int | None = None
    day: int | None = None

    @classmethod
    def from_date(cls, d: date) -> "DateFields":
        return cls(year=d.year, month=d.month, day=d.day)

    @property
    def is_complete(self) -> bool:
        return self.year is not None and self.month is not None and self.day is not None

    def to_calendar_date(self) -> date | None:
        """Return the ``datetime.date``, or None while any part is missing.

        Raises RangeError when the three parts do not form a real date (31 April, 29 February
        in a common year).
        """
        if not self.is_complete:
            return None
        try:
            return date(self.year, self.month, self.day)  # type: ignore[arg-type]
        except (ValueError, OverflowError) as e:
            raise RangeError(f"Not a calendar date: {self}: {e}") from e

    def to_structured_map(self) -> dict[str, int | None]:
        return {"year": self.year, "month": self.month, "day": self.day}

    def __str__(self) -> str:
        return f"DateFields(year={self.year}, month={self.month}, day={self.day})"


@dataclass
class ParseSession:
    """Mutable state of one parse call.

    Fields are first-writer-wins: ``assign`` never overwrites a value, so presets and the first
    token to claim a part are kept.
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    remaining: list[DatePart] = field(default_factory=list)

    @classmethod
    def start(cls, presets: DateFields) -> "ParseSession":
        return cls(year=presets.year, month=presets.month, day=presets.day)

    def get(self, part: DatePart) -> int | None:
        return getattr(self, part.value)

    def is_resolved(self, part: DatePart) -> bool:
        return self.get(part) is not None

    def resolved(self) -> frozenset[DatePart]:
        return frozenset(p for p in DatePart if self.is_resolved(p))

    def assign(self, part: DatePart, value: int) -> bool:
        """Set ``part`` if it is still empty. Returns True when the value was stored."""
        if self.is_resolved(part):
            return False
        setattr(self, part.value, value)
        return True

    def merge(self, other: DateFields) -> None:
        for part in DatePart:
            v = getattr(other, part.value)
            if v is not None:
                self.assign(part, v)

    def result(self) -> DateFields:
        return DateFields(year=self.year, month=self.month, day=self.day)
