from __future__ import annotations

import logging

from ..config import DatifyConfig
from .types import DateFields

logger = logging.getLogger(__name__)


def parse_general_format(text: str, config: DatifyConfig) -> DateFields | None:
    """Find the first ``YYYY?MM?DD`` date in ``text`` (e.g. 20220223, 2022-02-23, 2022.02 23).

    Month and day must be two digits here. Returns None when there is no such date.
    """
    m = config.general_date_pattern().search(text)
    if not m:
        return None

    fields = DateFields(year=int(m.group("year")), month=int(m.group("month")), day=int(m.group("day")))
    logger.debug("general format %r -> %s", m.group(0), fields)
    return fields
