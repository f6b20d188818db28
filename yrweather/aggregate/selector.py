"""Derived day views: today, tomorrow, and the observation closest to now."""

from collections.abc import Sequence
from datetime import datetime

from yrweather.errors import NotAvailable
from yrweather.models.common import to_utc
from yrweather.models.forecast import Day


def select_today(days: Sequence[Day]) -> Day:
    if not days:
        raise NotAvailable("today", "document has no days")
    return days[0]


def select_tomorrow(days: Sequence[Day]) -> Day:
    if len(days) < 2:
        raise NotAvailable("tomorrow", f"document has {len(days)} day(s)")
    return days[1]


def select_now(days: Sequence[Day], now: datetime) -> Day:
    """Synthesize a single-observation Day for today's reading closest to `now`.

    Ties go to the first observation scanned, i.e. the earlier one.
    """
    try:
        today = select_today(days)
    except NotAvailable as e:
        raise NotAvailable("now", "document has no days") from e

    now = to_utc(now)
    closest = None
    closest_diff = None
    for obs in today.observations:
        diff = abs((to_utc(obs.from_) - now).total_seconds())
        if closest_diff is None or diff < closest_diff:
            closest = obs
            closest_diff = diff

    if closest is None:
        raise NotAvailable("now", "today has no observations")

    return Day(date=closest.from_, observations=(closest,))
