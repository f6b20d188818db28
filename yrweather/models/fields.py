"""Field-level value models for a single forecast reading.

Each model is a passive record: the time range it is valid for, the
language tag of the document it came from, and its typed values.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Temperature:
    from_: datetime
    to: datetime
    lang: str
    celsius: float


@dataclass(frozen=True)
class WindDirection:
    from_: datetime
    to: datetime
    lang: str
    degrees: float | None
    name: str | None  # compass abbreviation, e.g. "SW"


@dataclass(frozen=True)
class WindSpeed:
    from_: datetime
    to: datetime
    lang: str
    mps: float | None
    beaufort: int | None
    name: str | None


@dataclass(frozen=True)
class Humidity:
    from_: datetime
    to: datetime
    lang: str
    percent: float | None


@dataclass(frozen=True)
class Pressure:
    from_: datetime
    to: datetime
    lang: str
    hpa: float | None


@dataclass(frozen=True)
class Clouds:
    from_: datetime
    to: datetime
    lang: str
    cloudiness: float | None
    low: float | None
    medium: float | None
    high: float | None


@dataclass(frozen=True)
class Fog:
    from_: datetime
    to: datetime
    lang: str
    percent: float | None


@dataclass(frozen=True)
class Dewpoint:
    from_: datetime
    to: datetime
    lang: str
    celsius: float | None


@dataclass(frozen=True)
class PrecipitationSymbol:
    from_: datetime
    to: datetime
    lang: str
    id: str | None  # e.g. "LightRain"
    number: int | None
