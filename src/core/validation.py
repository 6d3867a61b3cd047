"""Input validation helpers."""

from __future__ import annotations

import re
from datetime import datetime

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def is_valid_date(raw: str) -> bool:
    """Return True if `raw` is a `YYYY-MM-DD` string naming a real calendar day.

    `2024-02-30` matches the pattern but is rejected. Never raises.
    """

    if not isinstance(raw, str) or not _DATE_PATTERN.fullmatch(raw):
        return False
    try:
        datetime.strptime(raw, DATE_FORMAT)
    except ValueError:
        return False
    return True
