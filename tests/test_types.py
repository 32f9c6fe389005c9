from __future__ import annotations

from datetime import date

import pytest

from datify import DateFields, DatePart, RangeError
from datify.date import ParseSession


def test_complete_fields_convert_to_date() -> None:
    d = DateFields(year=2021, month=12, day=31)
    assert d.is_complete
    assert d.to_calendar_date() == date(2021, 12, 31)
    assert DateFields.from_date(date(2021, 12, 31)) == d


@pytest.mark.parametrize(
    "fields",
    [
        DateFields(year=2021, month=4, day=31),
        DateFields(year=2021, month=2, day=29),
        DateFields(year=2021, month=13, day=1),
        DateFields(year=10**20, month=1, day=1),
    ],
)
def test_invalid_calendar_date_raises(fields: DateFields) -> None:
    assert fields.is_complete
    with pytest.raises(RangeError):
        fields.to_calendar_date()


def test_incomplete_fields() -> None:
    d = DateFields(month=5)
    assert not d.is_complete
    assert d.to_calendar_date() is None
    assert d.to_structured_map() == {"year": None, "month": 5, "day": None}
    assert str(d) == "DateFields(year=None, month=5, day=None)"


def test_fields_are_values() -> None:
    assert DateFields(2020, 1, 2) == DateFields(year=2020, month=1, day=2)
    assert len({DateFields(2020, 1, 2), DateFields(2020, 1, 2)}) == 1


@pytest.mark.parametrize(
    "day_first, resolved, expected",
    [
        (True, frozenset(), [DatePart.DAY, DatePart.MONTH, DatePart.YEAR]),
        (False, frozenset(), [DatePart.MONTH, DatePart.DAY, DatePart.YEAR]),
        (True, frozenset({DatePart.MONTH}), [DatePart.DAY, DatePart.YEAR]),
        (False, frozenset({DatePart.YEAR, DatePart.DAY}), [DatePart.MONTH]),
        (True, frozenset(DatePart), []),
    ],
)
def test_part_order(day_first: bool, resolved: frozenset, expected: list) -> None:
    assert DatePart.order(day_first, resolved=resolved) == expected


@pytest.mark.parametrize(
    "part, token, value",
    [
        (DatePart.DAY, "20th", "20"),
        (DatePart.DAY, "07", "07"),
        (DatePart.DAY, "31", "31"),
        (DatePart.DAY, "32", None),
        (DatePart.MONTH, "9", "9"),
        (DatePart.MONTH, "12", "12"),
        (DatePart.MONTH, "13", None),
        (DatePart.YEAR, "1999", "1999"),
        (DatePart.YEAR, "3000", None),
        (DatePart.YEAR, "20222", None),
    ],
)
def test_part_patterns(part: DatePart, token: str, value: str | None) -> None:
    m = part.pattern.search(token)
    assert (m.group(0) if m else None) == value


def test_session_is_first_writer_wins() -> None:
    s = ParseSession.start(DateFields(month=7))
    assert not s.assign(DatePart.MONTH, 1)
    assert s.assign(DatePart.DAY, 11)
    assert not s.assign(DatePart.DAY, 12)

    s.merge(DateFields(year=2004, month=6, day=1))
    assert s.result() == DateFields(year=2004, month=7, day=11)
    assert s.resolved() == frozenset(DatePart)
