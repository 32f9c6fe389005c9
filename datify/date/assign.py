from __future__ import annotations

import logging

from ..config import DatifyConfig
from .months import match_month
from .types import DatePart, ParseSession

logger = logging.getLogger(__name__)


def split_tokens(text: str, config: DatifyConfig) -> list[str]:
    """Split on the configured separators; tokens are trimmed and empty ones dropped."""
    tokens = (t.strip() for t in config.separator_alternation_pattern().split(text))
    return [t for t in tokens if t]


def assign_parts(text: str, session: ParseSession, config: DatifyConfig) -> None:
    """Assign tokens of ``text`` to the parts ``session`` has not resolved yet.

    Tokens are visited left to right. Each one is offered to the remaining parts in order
    (day/month/year, or month/day/year when not ``config.day_first``); the first part whose
    pattern matches takes it and leaves the order. A token that fails the month digit pattern
    is also tried as a month name. Tokens nothing takes are skipped.

    A token above 12 never matches the month pattern, so in month-first mode it still ends up
    as the day ("25/12/2020" is 25 December either way).
    """
    tokens = split_tokens(text, config)

    # Month-first: a numeric day would take the month slot before a later month name is seen.
    if not config.day_first and not session.is_resolved(DatePart.MONTH):
        for tok in tokens:
            month = match_month(tok, config)
            if month is not None:
                session.assign(DatePart.MONTH, month)
                logger.debug("month pre-scan %r -> %d", tok, month)
                break

    session.remaining = DatePart.order(config.day_first, resolved=session.resolved())

    for tok in tokens:
        part = _take_token(tok, session, config)
        if part is None:
            logger.debug("token %r skipped", tok)
            continue
        session.remaining.remove(part)
        if not session.remaining:
            break


def _take_token(tok: str, session: ParseSession, config: DatifyConfig) -> DatePart | None:
    for part in session.remaining:
        m = part.pattern.search(tok)
        if m:
            value = int(m.group(0))
            session.assign(part, value)
            logger.debug("token %r -> %s=%d", tok, part.value, value)
            return part

        if part is DatePart.MONTH and not session.is_resolved(DatePart.MONTH):
            month = match_month(tok, config)
            if month is not None:
                session.assign(DatePart.MONTH, month)
                logger.debug("token %r -> month=%d (name)", tok, month)
                return part

    return None
