"""Fixed timestamp format for the date field."""

import re
from datetime import datetime

from blogmeta.domain.exceptions import InvalidDateFormat

TIMESTAMP_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}[+-][0-9]{2}:[0-9]{2}"
)
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def parse_timestamp(value: str) -> datetime:
    """Parse YYYY-MM-DDThh:mm:ss±hh:mm into an aware datetime.

    Raises InvalidDateFormat when the shape is wrong or the instant does not
    exist (e.g. month 13).
    """
    if not TIMESTAMP_PATTERN.fullmatch(value):
        raise InvalidDateFormat(value)
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise InvalidDateFormat(value) from e
