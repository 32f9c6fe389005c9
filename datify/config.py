"""Locale and separator settings consumed by the parser.

A ``DatifyConfig`` is read (never written) by every parse call. ``DEFAULT_CONFIG`` is the
process-wide instance used when the caller does not pass one; tests and multi-tenant callers
build their own with ``DatifyConfig()`` or ``DEFAULT_CONFIG.copy()``.

There is no internal locking: finish mutating a config before parsing with it concurrently.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Iterable

from dotenv import load_dotenv

from .errors import RangeError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS = (" ", "/", ".", "-")

# English (full + abbreviation), Ukrainian and Russian nominative names, in month order.
DEFAULT_MONTH_NAMES: tuple[tuple[str, ...], ...] = (
    ("january", "jan", "січень", "январь"),
    ("february", "feb", "лютий", "февраль"),
    ("march", "mar", "березень", "март"),
    ("april", "apr", "квітень", "апрель"),
    ("may", "травень", "май"),
    ("june", "jun", "червень", "июнь"),
    ("july", "jul", "липень", "июль"),
    ("august", "aug", "серпень", "август"),
    ("september", "sep", "вересень", "сентябрь"),
    ("october", "oct", "жовтень", "октябрь"),
    ("november", "nov", "листопад", "ноябрь"),
    ("december", "dec", "грудень", "декабрь"),
)

# YYYY sep? MM sep? DD; "##" is replaced with the optional separator alternation.
_GENERAL_DATE_TEMPLATE = r"\b(?P<year>[12]\d\d\d)##(?P<month>0[1-9]|1[012])##(?P<day>[012]\d|3[01])\b"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def normalize(s: str) -> str:
    return s.strip().lower()


def _check_ordinal(ordinal: int) -> None:
    if isinstance(ordinal, bool) or not isinstance(ordinal, int) or not 1 <= ordinal <= 12:
        raise RangeError(f"Invalid month ordinal {ordinal!r}: must be between 1 and 12 inclusive")


class DatifyConfig:
    """Separators, part order preference and the month-name table.

    - ``day_first``: True parses ``01/03/2014`` as 1 March (DD.MM.YYYY), False as 3 January.
    - separators: strings that split the input into tokens; also allowed between the parts of the
      compact ``YYYY?MM?DD`` form.
    - month table: 12 sets of lowercase, trimmed spellings; index 0 is January.
    """

    def __init__(
        self,
        *,
        day_first: bool = True,
        separators: Iterable[str] = DEFAULT_SEPARATORS,
        month_names: Iterable[Iterable[str]] = DEFAULT_MONTH_NAMES,
    ) -> None:
        self.day_first = bool(day_first)

        seps = list(separators)
        for sep in seps:
            self._check_separator(sep)
        if not seps:
            raise ValidationError("At least one separator is required")
        # dict keeps insertion order, so the compiled alternation is deterministic
        self._separators: dict[str, None] = dict.fromkeys(seps)

        table = [{normalize(n) for n in names} for names in month_names]
        if len(table) != 12:
            raise ValidationError(f"Month table must have 12 entries; got {len(table)}")
        self._months: list[set[str]] = table

        self._separator_re: re.Pattern[str] | None = None
        self._general_re: re.Pattern[str] | None = None

    # -- read accessors -------------------------------------------------------------------------

    @property
    def separators(self) -> tuple[str, ...]:
        return tuple(self._separators)

    @property
    def months(self) -> tuple[frozenset[str], ...]:
        """Snapshot of the month table; index 0 is January."""
        return tuple(frozenset(s) for s in self._months)

    def month_names(self, ordinal: int) -> frozenset[str]:
        _check_ordinal(ordinal)
        return frozenset(self._months[ordinal - 1])

    def separator_alternation_pattern(self) -> re.Pattern[str]:
        """Compiled pattern matching any one configured separator literally."""
        if self._separator_re is None:
            # longest first so a multi-character separator wins over its own prefix
            seps = sorted(self._separators, key=len, reverse=True)
            self._separator_re = re.compile("(?:" + "|".join(re.escape(s) for s in seps) + ")")
        return self._separator_re

    def general_date_pattern(self) -> re.Pattern[str]:
        """Compiled ``YYYY sep? MM sep? DD`` pattern, word-bounded at both ends."""
        if self._general_re is None:
            sep = self.separator_alternation_pattern().pattern
            self._general_re = re.compile(_GENERAL_DATE_TEMPLATE.replace("##", sep + "?"), re.ASCII)
        return self._general_re

    # -- mutation -------------------------------------------------------------------------------

    def set_day_first(self, value: bool) -> None:
        self.day_first = bool(value)
        logger.debug("day_first set to %s", self.day_first)

    def add_separator(self, sep: str) -> None:
        self._check_separator(sep)
        if sep in self._separators:
            return
        self._separators[sep] = None
        self._invalidate()
        logger.debug("added separator %r", sep)

    def remove_separator(self, sep: str) -> None:
        if sep not in self._separators:
            return
        if len(self._separators) == 1:
            raise ValidationError("Cannot remove the last separator")
        del self._separators[sep]
        self._invalidate()
        logger.debug("removed separator %r", sep)

    def add_month_name(self, ordinal: int, name: str) -> None:
        """Add ``name`` as a spelling of month ``ordinal`` (1..12).

        Raises RangeError for an ordinal outside 1..12 and ValidationError for a blank name.
        Adding an existing spelling is a no-op.
        """
        _check_ordinal(ordinal)
        normalized = normalize(str(name))
        if not normalized:
            raise ValidationError("Month name must not be blank")
        self._months[ordinal - 1].add(normalized)
        logger.debug("added month name %r for month %d", normalized, ordinal)

    def add_month_locale(self, names: Iterable[str]) -> None:
        """Add one spelling per month, given in calendar order.

        The whole list is validated before anything is added, so a rejected locale leaves the
        table untouched:
        - exactly 12 names,
        - none blank,
        - pairwise distinct after normalisation.
        """
        normalized = [normalize(str(n)) for n in names]
        if len(normalized) != 12:
            raise ValidationError(f"A month locale must have 12 names; got {len(normalized)}")
        if not all(normalized):
            raise ValidationError("Month names must not be blank")
        if len(set(normalized)) != len(normalized):
            raise ValidationError(f"Month names must be unique: {normalized}")

        for ordinal, name in enumerate(normalized, start=1):
            self.add_month_name(ordinal, name)
        logger.info("added month locale starting with %r", normalized[0])

    def copy(self) -> "DatifyConfig":
        clone = copy.copy(self)
        clone._separators = dict(self._separators)
        clone._months = [set(s) for s in self._months]
        return clone

    # -- loading --------------------------------------------------------------------------------

    def load_locale_file(self, path: Path) -> None:
        """Apply a JSON locale file to this config.

        A rejected file leaves this config unchanged.

        Supports:
        1) JSON list of 12 names: a single locale, in month order.
        2) JSON object with optional keys:
           - "day_first": bool
           - "separators": ["@", ...]
           - "locales": [[12 names], ...]
           - "month_names": {"1": ["name", ...], ...}
        """
        path = Path(path)
        try:
            obj = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValidationError(f"Locale file is not valid JSON: {path}: {e}") from e

        # staged on a copy so a rejected file leaves this config untouched
        staged = self.copy()
        staged._apply_locale(obj, path)
        self._adopt(staged)
        logger.info("loaded locale file %s", path)

    def _apply_locale(self, obj: object, path: Path) -> None:
        if isinstance(obj, list):
            self.add_month_locale([_as_str(n, "locale", path) for n in obj])
            return
        if not isinstance(obj, dict):
            raise ValidationError(f"Locale file must hold a JSON object or list: {path}")

        if "day_first" in obj:
            if not isinstance(obj["day_first"], bool):
                raise ValidationError(f"'day_first' must be a boolean in {path}")
            self.set_day_first(obj["day_first"])

        for sep in _as_list(obj.get("separators", []), "separators", path):
            self.add_separator(_as_str(sep, "separators[]", path))

        for locale in _as_list(obj.get("locales", []), "locales", path):
            names = _as_list(locale, "locales[]", path)
            self.add_month_locale([_as_str(n, "locales[][]", path) for n in names])

        month_names = obj.get("month_names", {})
        if not isinstance(month_names, dict):
            raise ValidationError(f"'month_names' must be an object in {path}")
        for key, names in month_names.items():
            try:
                ordinal = int(key)
            except ValueError as e:
                raise ValidationError(f"Month ordinal key must be an integer: {key!r}") from e
            for name in _as_list(names, f"month_names[{key}]", path):
                self.add_month_name(ordinal, _as_str(name, f"month_names[{key}][]", path))

    def _adopt(self, other: "DatifyConfig") -> None:
        self.day_first = other.day_first
        self._separators = other._separators
        self._months = other._months
        self._invalidate()

    @classmethod
    def from_env(cls) -> "DatifyConfig":
        """Build a config from the defaults plus DATIFY_* environment variables (or .env).

        - DATIFY_DAY_FIRST: true/false/1/0/yes/no/on/off
        - DATIFY_EXTRA_SEPARATORS: every character is added as a separator
        - DATIFY_LOCALE_FILE: JSON locale file, see ``load_locale_file``
        """
        load_dotenv()
        cfg = cls()

        day_first = os.environ.get("DATIFY_DAY_FIRST", "").strip().lower()
        if day_first:
            if day_first in _TRUE:
                cfg.set_day_first(True)
            elif day_first in _FALSE:
                cfg.set_day_first(False)
            else:
                raise ValidationError(f"Invalid DATIFY_DAY_FIRST value: {day_first!r}")

        for ch in os.environ.get("DATIFY_EXTRA_SEPARATORS", ""):
            cfg.add_separator(ch)

        locale_file = os.environ.get("DATIFY_LOCALE_FILE", "").strip()
        if locale_file:
            cfg.load_locale_file(Path(locale_file).expanduser())

        return cfg

    # -- internals ------------------------------------------------------------------------------

    @staticmethod
    def _check_separator(sep: str) -> None:
        if not isinstance(sep, str) or not sep:
            raise ValidationError(f"Separator must be a non-empty string: {sep!r}")

    def _invalidate(self) -> None:
        self._separator_re = None
        self._general_re = None

    def __repr__(self) -> str:
        return f"DatifyConfig(day_first={self.day_first}, separators={self.separators!r})"


def _as_list(value: object, key: str, path: Path) -> list:
    if not isinstance(value, list):
        raise ValidationError(f"'{key}' must be a JSON list in {path}")
    return value


def _as_str(value: object, key: str, path: Path) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"'{key}' entries must be strings in {path}; got {value!r}")
    return value


def load_config(path: Path) -> DatifyConfig:
    """Default settings with the JSON locale file at ``path`` applied on top."""
    cfg = DatifyConfig()
    cfg.load_locale_file(path)
    return cfg


DEFAULT_CONFIG = DatifyConfig()
