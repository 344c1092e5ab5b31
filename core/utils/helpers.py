"""
MealPrep utility functions
"""

from __future__ import annotations
import math
import re
import uuid
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union


DATE_KEY_FORMAT = "%Y-%m-%d"

_SERVING_GRAMS = re.compile(r"(\d+(?:\.\d+)?)\s*g", re.IGNORECASE)


# Text utilities

def normalize_name(name: Optional[str]) -> str:
    """Join key for groceries and pantry items: trimmed, lowercase."""
    return (name or "").strip().lower()


def round_half_up(value: Union[int, float]) -> int:
    """Round to the nearest integer, .5 away from negative infinity (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def parse_serving_grams(serving: Optional[str]) -> Optional[int]:
    """Pull a gram weight out of serving text such as "1 bowl (350 g)".

    Returns None when the text has no "<number> g" in it.
    """
    if not serving:
        return None
    m = _SERVING_GRAMS.search(str(serving))
    if not m:
        return None
    return round_half_up(float(m.group(1)))


def new_item_id() -> str:
    return uuid.uuid4().hex


# Calendar utilities

def date_key(d: Union[date, datetime]) -> str:
    """Canonical YYYY-MM-DD key for a calendar day."""
    if isinstance(d, datetime):
        d = d.date()
    return d.strftime(DATE_KEY_FORMAT)


def parse_date_key(key: Union[str, date]) -> date:
    if isinstance(key, datetime):
        return key.date()
    if isinstance(key, date):
        return key
    return datetime.strptime(key, DATE_KEY_FORMAT).date()


def date_range(start: date, days: int) -> Iterator[date]:
    for i in range(days):
        yield start + timedelta(days=i)


def start_of_week(d: date, week_starts_on: int = 1) -> date:
    """
    First day of the week containing d.

    Args:
        d: any day in the week
        week_starts_on: 0 for Sunday, 1 for Monday

    Returns:
        The Sunday or Monday on or before d
    """
    # date.weekday() is Monday=0; shift so Sunday=0 like week_starts_on
    day = (d.weekday() + 1) % 7
    diff = (7 if day < week_starts_on else 0) + day - week_starts_on
    return d - timedelta(days=diff)
