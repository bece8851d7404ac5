from __future__ import annotations

import datetime
from zoneinfo import ZoneInfo


def today_in_timezone(tz_name: str) -> datetime.date:
    """Current calendar date in the given IANA timezone."""
    return datetime.datetime.now(tz=ZoneInfo(tz_name)).date()


def format_calendar_date(value: datetime.date, fmt: str) -> str:
    # render a date for prompt text, e.g. 2024年06月07日
    return value.strftime(fmt)
