from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

import pytz


WINDOW_OFFSET = timedelta(hours=24)
RFC3339_UTC = "%Y-%m-%dT%H:%M:%SZ"
START_FORMAT = "%d/%m/%Y %H:%M"


def get_timezone(tz_name: str) -> pytz.BaseTzInfo:
    return pytz.timezone(tz_name)


def upcoming_window(now: datetime, interval_minutes: int) -> Tuple[str, str]:
    """Return the [start, end) window that begins 24h after ``now``.

    Both bounds are rendered in UTC with second precision, the form the
    calendar API accepts for ``timeMin``/``timeMax``.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    start = now.astimezone(timezone.utc) + WINDOW_OFFSET
    end = start + timedelta(minutes=interval_minutes)
    return start.strftime(RFC3339_UTC), end.strftime(RFC3339_UTC)


def parse_rfc3339(dt_iso: str) -> datetime:
    # fromisoformat only accepts a trailing "Z" from 3.11 on
    if dt_iso.endswith(("Z", "z")):
        dt_iso = dt_iso[:-1] + "+00:00"
    return datetime.fromisoformat(dt_iso)


def format_start(dt_iso: str, tz_name: Optional[str] = None) -> str:
    dt = parse_rfc3339(dt_iso)
    if tz_name:
        tz = get_timezone(tz_name)
        if dt.tzinfo is None:
            dt = tz.localize(dt)
        dt = dt.astimezone(tz)
    return dt.strftime(START_FORMAT)
