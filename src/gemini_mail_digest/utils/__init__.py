from .common import format_calendar_date, today_in_timezone

__all__ = ["format_calendar_date", "today_in_timezone"]
