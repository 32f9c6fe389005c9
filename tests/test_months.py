from __future__ import annotations

import pytest

from datify import DatifyConfig
from datify.date import is_same_word, match_month

UKRAINIAN_GENITIVE = [
    "січня", "лютого", "березня", "квітня", "травня", "червня",
    "липня", "серпня", "вересня", "жовтня", "листопада", "грудня",
]

RUSSIAN_GENITIVE = [
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря",
]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("лютого", "лютий", True),
        ("мая", "май", True),
        ("листопада", "листопад", True),
        ("sept", "september", True),
        # shared prefix but too many unique characters
        ("not", "november", False),
        ("июля", "июнь", False),
        # similar letters, different prefix
        ("ocean", "october", False),
        # short words compare two-character prefixes
        ("not", "nov", True),
        ("ab", "ac", False),
        ("", "may", False),
        ("may", "", False),
    ],
)
def test_is_same_word(a: str, b: str, expected: bool) -> None:
    assert is_same_word(a, b) is expected


@pytest.mark.parametrize("forms", [UKRAINIAN_GENITIVE, RUSSIAN_GENITIVE])
def test_inflected_forms(cfg: DatifyConfig, forms: list[str]) -> None:
    for ordinal, form in enumerate(forms, start=1):
        assert match_month(form, cfg) == ordinal, form


@pytest.mark.parametrize(
    "token, expected",
    [
        ("January", 1),
        ("  FEB ", 2),
        ("january,", 1),
        ("(may)", 5),
        ("Травень", 5),
        ("сентябрь", 9),
        ("not", None),
        ("of", None),
        ("date", None),
        ("2021", None),
        ("", None),
        (",", None),
    ],
)
def test_match_month(cfg: DatifyConfig, token: str, expected: int | None) -> None:
    assert match_month(token, cfg) == expected


def test_lower_ordinal_wins_for_shared_spelling(cfg: DatifyConfig) -> None:
    cfg.add_month_name(8, "shared")
    cfg.add_month_name(3, "shared")
    assert match_month("shared", cfg) == 3


def test_exact_match_beats_earlier_similar_name(cfg: DatifyConfig) -> None:
    # "juny" is similar to "june" (6) but spelled exactly under 7 here
    cfg.add_month_name(7, "juny")
    assert match_month("juny", cfg) == 7
