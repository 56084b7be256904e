"""Domain primitives: scalar aliases and date helpers."""

from __future__ import annotations

import re
from datetime import UTC, date, datetime
from typing import Final

type ModelId = str
type ProviderId = str
type DateString = str
"""Calendar date in ``YYYY-MM`` or ``YYYY-MM-DD`` form."""

DATE_STRING_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{4}-\d{2}(-\d{2})?$")


def format_date(value: date) -> DateString:
    return value.strftime("%Y-%m-%d")


def date_from_timestamp(seconds: float) -> DateString:
    """Convert a unix timestamp (seconds) to a UTC calendar date."""

    return format_date(datetime.fromtimestamp(seconds, tz=UTC).date())


def is_date_string(value: str) -> bool:
    return DATE_STRING_PATTERN.fullmatch(value) is not None
