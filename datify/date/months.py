from __future__ import annotations

import logging
import string

from ..config import DatifyConfig, normalize

logger = logging.getLogger(__name__)

_PUNCT = string.punctuation + "«»“”„’"


def is_same_word(a: str, b: str) -> bool:
    """Guess whether ``a`` and ``b`` are forms of the same word ("лютого" / "лютий").

    Characters unique to either side must be fewer than half of that side's length, and the
    words must share a prefix: 2 characters when the shorter one is under 4 long, 3 otherwise.
    """
    sa = set(a)
    sb = set(b)
    prefix = 2 if min(len(a), len(b)) < 4 else 3
    return len(sa - sb) < len(a) / 2 and len(sb - sa) < len(b) / 2 and a[:prefix] == b[:prefix]


def _is_abbreviation(name: str, names: frozenset[str]) -> bool:
    return any(other != name and other.startswith(name) for other in names)


def match_month(token: str, config: DatifyConfig) -> int | None:
    """Return the month ordinal (1..12) named by ``token``, or None.

    Exact spellings are tried first across all months, then inflected forms via ``is_same_word``.
    Abbreviations ("nov", "jun") only match exactly; the full name covers their inflections, and
    a 3-letter candidate would otherwise claim unrelated words ("not" -> "nov").
    Lower month ordinals win when a spelling appears under several months.
    """
    tok = normalize(token).strip(_PUNCT)
    if not tok:
        return None

    months = config.months
    for ordinal, names in enumerate(months, start=1):
        if tok in names:
            logger.debug("month %r -> %d (exact)", tok, ordinal)
            return ordinal

    for ordinal, names in enumerate(months, start=1):
        for name in names:
            if _is_abbreviation(name, names):
                continue
            if is_same_word(tok, name):
                logger.debug("month %r -> %d (similar to %r)", tok, ordinal, name)
                return ordinal

    return None
