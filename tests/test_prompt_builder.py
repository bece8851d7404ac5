from __future__ import annotations

import datetime

import pytest

from gemini_mail_digest.models import DigestKind
from gemini_mail_digest.processing.prompt_builder import (
    build_prompt,
    is_weekly_run_day,
    operative_date,
    weekly_window,
)

SATURDAY = datetime.date(2024, 6, 8)


@pytest.mark.parametrize("kind", list(DigestKind))
def test_build_prompt_is_deterministic(kind: DigestKind) -> None:
    assert build_prompt(kind, SATURDAY) == build_prompt(kind, SATURDAY)


def test_weekly_window_on_saturday_covers_previous_saturday_to_friday() -> None:
    start, end = weekly_window(SATURDAY)
    assert start == datetime.date(2024, 6, 1)
    assert end == datetime.date(2024, 6, 7)
    assert is_weekly_run_day(SATURDAY)


def test_weekly_prompt_embeds_window() -> None:
    prompt = build_prompt(DigestKind.WEEKLY_TECH, SATURDAY)
    assert "2024年06月01日から2024年06月07日まで" in prompt
    assert "テクノロジーニュース専門" in prompt


def test_weekly_window_off_day_still_ends_yesterday() -> None:
    wednesday = datetime.date(2024, 6, 12)
    start, end = weekly_window(wednesday)
    assert not is_weekly_run_day(wednesday)
    assert end == datetime.date(2024, 6, 11)
    assert start == datetime.date(2024, 6, 1)
    assert start.weekday() == 5


def test_daily_news_prompt_references_yesterday() -> None:
    prompt = build_prompt(DigestKind.DAILY_NEWS, SATURDAY)
    assert operative_date(SATURDAY) == datetime.date(2024, 6, 7)
    assert "2024年06月07日の主要なビジネスニュース" in prompt
    assert "2024年06月08日" not in prompt


def test_daily_vocab_prompt_references_yesterday_across_month_boundary() -> None:
    prompt = build_prompt(DigestKind.DAILY_VOCAB, datetime.date(2024, 3, 1))
    assert "2024年02月29日" in prompt
    assert "C1レベル" in prompt


def test_custom_date_format_is_used() -> None:
    prompt = build_prompt(DigestKind.DAILY_NEWS, SATURDAY, date_format="%Y-%m-%d")
    assert "2024-06-07の主要なビジネスニュース" in prompt


@pytest.mark.parametrize("saturday", [datetime.date(2024, 6, 8), datetime.date(2025, 1, 4)])
def test_weekly_window_on_saturday_starts_seven_days_back_not_thirteen(saturday: datetime.date) -> None:
    start, end = weekly_window(saturday)
    assert (saturday - start).days == 7
    assert start.weekday() == 5
    assert (end - start).days == 6
