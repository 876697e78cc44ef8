"""Date formatting for post and job listings."""

from __future__ import annotations

import datetime


def format_date(value: datetime.date) -> str:
    """March 5, 2024"""
    return f"{value:%B} {value.day}, {value.year}"


def format_year_and_month(value: datetime.date) -> str:
    """March 2024"""
    return f"{value:%B} {value.year}"


def relative_time(value: datetime.date, today: datetime.date | None = None) -> str:
    """'today', 'N days ago' within the last month, otherwise the formatted date."""
    today = today or datetime.date.today()
    difference = (today - value).days
    if difference < 1:
        return "today"
    if difference < 30:
        return "1 day ago" if difference == 1 else f"{difference} days ago"
    return format_date(value)


def format_period(begin: datetime.date, end: datetime.date | str) -> str:
    """Job period such as 'January 2020 - Present'."""
    if isinstance(end, str):
        finish = end.capitalize()
    else:
        finish = format_year_and_month(end)
    return f"{format_year_and_month(begin)} - {finish}"
