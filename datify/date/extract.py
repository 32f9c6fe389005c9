from __future__ import annotations

import logging

from ..config import DEFAULT_CONFIG, DatifyConfig
from .assign import assign_parts
from .parsers import parse_general_format
from .types import DateFields, ParseSession

logger = logging.getLogger(__name__)


def parse(
    text: str | None,
    *,
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    config: DatifyConfig | None = None,
) -> DateFields:
    """Extract a (possibly partial) date from free text.

    Supported shapes (``$`` is any configured separator, ``$?`` an optional one):
    - numeric day-first or month-first dates: 20.02.2020, 9-1-2005, 02/22/2020
    - the general format YYYY$?MM$?DD: 20190301, 2020-01-20
    - month names in any configured language, including inflected forms:
      "11th of July, 2020", "6 липня 2021", "31 декабря 2021"

    ``year``/``month``/``day`` are presets: they are kept as given and never overwritten.
    Never raises; parts that cannot be found are None. ``"7 2022"`` is day 7 when day-first and
    month 7 otherwise.
    """
    cfg = config or DEFAULT_CONFIG
    presets = DateFields(year=year, month=month, day=day)
    if text is None:
        return presets

    normalized = text.lower()
    session = ParseSession.start(presets)

    general = parse_general_format(normalized, cfg)
    if general is not None:
        session.merge(general)
        return session.result()

    assign_parts(normalized, session, cfg)
    result = session.result()
    logger.debug("parsed %r -> %s", text, result)
    return result
