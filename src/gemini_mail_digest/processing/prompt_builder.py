from __future__ import annotations

import datetime

from gemini_mail_digest.core.config import DEFAULT_DATE_FORMAT
from gemini_mail_digest.models import DigestKind
from gemini_mail_digest.processing.prompts import PROMPT_TEMPLATES
from gemini_mail_digest.utils import format_calendar_date

_ONE_DAY = datetime.timedelta(days=1)
_SATURDAY = 5  # date.weekday(): Monday == 0


def operative_date(reference_date: datetime.date) -> datetime.date:
    """The day a daily digest covers: the one before the run."""
    return reference_date - _ONE_DAY


def is_weekly_run_day(reference_date: datetime.date) -> bool:
    # the weekly digest is scheduled for Saturdays
    return reference_date.weekday() == _SATURDAY


def weekly_window(reference_date: datetime.date) -> tuple[datetime.date, datetime.date]:
    """(start, end) of the weekly tech window for a run on reference_date.

    The window starts on the Saturday one week before the most recent
    Saturday and ends the day before the run. A Saturday run therefore
    covers the previous Saturday through Friday; runs on other weekdays get
    a longer window that still ends yesterday.

    The start is counted from the most recent Saturday, not from Sunday:
    `ref - ((sunday_based_weekday + 7) % 7) - 7` would put a Saturday run
    13 days back instead of covering the previous Saturday to Friday.
    """
    days_since_saturday = (reference_date.weekday() - _SATURDAY) % 7
    start = reference_date - datetime.timedelta(days=days_since_saturday + 7)
    end = reference_date - _ONE_DAY
    return start, end


def build_prompt(
    kind: DigestKind,
    reference_date: datetime.date,
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    template = PROMPT_TEMPLATES[kind]
    if kind is DigestKind.WEEKLY_TECH:
        start, end = weekly_window(reference_date)
        date_range = (
            f"{format_calendar_date(start, date_format)}から"
            f"{format_calendar_date(end, date_format)}まで"
        )
        return template.format(date_range=date_range)
    return template.format(date=format_calendar_date(operative_date(reference_date), date_format))
