"""Record domain value objects."""

from datetime import datetime
from enum import StrEnum

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class RecordStatus(StrEnum):
    """Visible lifecycle state. NONEXISTENT -> LIVE -> DELETED, one-way."""

    LIVE = "live"
    DELETED = "deleted"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)
