"""Location forecast data models: raw time-series entries and merged records."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import TypeAlias

from yrweather.models.fields import (
    Clouds,
    Dewpoint,
    Fog,
    Humidity,
    PrecipitationSymbol,
    Pressure,
    Temperature,
    WindDirection,
    WindSpeed,
)


@dataclass(frozen=True)
class InstantEntry:
    """A <time> element with readings valid at a single instant."""

    from_: datetime
    to: datetime
    temperature_celsius: float
    datatype: str | None = None
    wind_direction_degrees: float | None = None
    wind_direction_name: str | None = None
    wind_speed_mps: float | None = None
    wind_speed_beaufort: int | None = None
    wind_speed_name: str | None = None
    humidity_percent: float | None = None
    pressure_hpa: float | None = None
    cloudiness_percent: float | None = None
    low_clouds_percent: float | None = None
    medium_clouds_percent: float | None = None
    high_clouds_percent: float | None = None
    fog_percent: float | None = None
    dewpoint_celsius: float | None = None
    index: int | None = None  # position in document order


@dataclass(frozen=True)
class IntervalEntry:
    """A <time> element with precipitation accumulated over a time span."""

    from_: datetime
    to: datetime
    precipitation_mm: float
    precipitation_min_mm: float | None = None
    precipitation_max_mm: float | None = None
    symbol_id: str | None = None
    symbol_number: int | None = None
    index: int | None = None


RawEntry: TypeAlias = InstantEntry | IntervalEntry


@dataclass(frozen=True)
class PrecipitationRecord:
    from_: datetime
    to: datetime
    lang: str
    value: float
    min: float | None
    max: float | None
    symbol: PrecipitationSymbol


@dataclass(frozen=True)
class ObservationRecord:
    """One instant's weather snapshot plus the precipitation intervals after it."""

    from_: datetime
    to: datetime
    lang: str
    type: str | None
    temperature: Temperature
    wind_direction: WindDirection
    wind_speed: WindSpeed
    humidity: Humidity
    pressure: Pressure
    clouds: Clouds
    fog: Fog
    dewpoint: Dewpoint
    precipitations: tuple[PrecipitationRecord, ...] = ()


@dataclass(frozen=True)
class Day:
    """Observations whose `from` timestamp falls on one UTC calendar date.

    `date` is a plain date for grouped days, and the selected record's
    `from` timestamp for the synthesized "now" day.
    """

    date: date
    observations: tuple[ObservationRecord, ...]

    def __len__(self) -> int:
        return len(self.observations)

    def __iter__(self):
        return iter(self.observations)
