from __future__ import annotations

import time
from datetime import date as date_type, datetime, time as time_type

from event_planner.core.config import settings

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DATETIME_SECONDS_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_timestamp() -> int:
    return int(time.time())


def _as_site_aware(dt: datetime) -> datetime:
    """Naive datetimes are wall-clock times in the site zone."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=settings.site_tz)
    return dt.astimezone(settings.site_tz)


def to_timestamp(dt: datetime) -> int:
    return int(_as_site_aware(dt).timestamp())


def day_start_timestamp(day: date_type) -> int:
    """Epoch seconds of 00:00:00 site time on the given day."""
    return int(datetime.combine(day, time_type(0, 0), tzinfo=settings.site_tz).timestamp())


def end_of_day_timestamp(dt: datetime) -> int:
    """Epoch seconds of 23:59:59 site time on the day of dt."""
    local = _as_site_aware(dt)
    return int(local.replace(hour=23, minute=59, second=59, microsecond=0).timestamp())


def site_date(dt: datetime) -> date_type:
    return _as_site_aware(dt).date()


def from_timestamp(ts: int) -> datetime:
    return datetime.fromtimestamp(int(ts), tz=settings.site_tz)


def format_timestamp(ts: int, fmt: str = DATE_FORMAT) -> str:
    return from_timestamp(ts).strftime(fmt)
