"""Timestamp, date and identifier sources."""

from __future__ import annotations

import uuid
from datetime import datetime


class Clock:
    """Wall clock in the local timezone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def timestamp(self) -> str:
        """ISO-8601 with UTC offset, second precision (``2022-01-01T05:00:00-03:00``)."""
        return self.now().replace(microsecond=0).isoformat()

    def date(self) -> str:
        """Calendar date for filenames (``2022-01-01``)."""
        return self.now().strftime("%Y-%m-%d")


def new_id() -> str:
    return str(uuid.uuid4())
