"""Partition merged observations into UTC calendar days."""

from collections.abc import Iterable
from datetime import date

from yrweather.models.common import to_utc
from yrweather.models.forecast import Day, ObservationRecord


def day_key(observation: ObservationRecord) -> date:
    """UTC calendar date of an observation's `from` timestamp."""
    return to_utc(observation.from_).date()


def group_by_day(observations: Iterable[ObservationRecord]) -> list[Day]:
    """Group observations by UTC date, days sorted ascending.

    Observations keep their input order within a day.
    """
    buckets: dict[date, list[ObservationRecord]] = {}
    for obs in observations:
        buckets.setdefault(day_key(obs), []).append(obs)

    return [
        Day(date=key, observations=tuple(buckets[key]))
        for key in sorted(buckets)
    ]
