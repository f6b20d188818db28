"""Merge raw time-series entries into per-instant observation records.

The forecast service emits each instant reading followed by zero or more
precipitation intervals that belong to it, so entries are consumed strictly
in document order and never re-sorted by timestamp.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from yrweather.errors import MalformedInput
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
from yrweather.models.forecast import (
    InstantEntry,
    IntervalEntry,
    ObservationRecord,
    PrecipitationRecord,
    RawEntry,
)

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    observations: list[ObservationRecord] = field(default_factory=list)
    rejected: list[MalformedInput] = field(default_factory=list)


@dataclass
class _Pending:
    entry: InstantEntry
    precipitations: list[PrecipitationRecord] = field(default_factory=list)


def merge_entries(
    entries: Iterable[RawEntry], lang: str = "nb", strict: bool = False
) -> MergeResult:
    """Fold raw entries into an ordered list of ObservationRecords.

    An interval entry with no preceding instant entry is malformed. With
    strict=True the first one raises MalformedInput; otherwise it is logged,
    collected on MergeResult.rejected and skipped.
    """
    result = MergeResult()
    pending: _Pending | None = None

    for position, entry in enumerate(entries):
        if isinstance(entry, InstantEntry):
            if pending is not None:
                result.observations.append(_build_observation(pending, lang))
            pending = _Pending(entry)
        elif isinstance(entry, IntervalEntry):
            if pending is None:
                error = MalformedInput(
                    "precipitation interval has no preceding instant reading",
                    index=_index_of(entry, position),
                    from_=entry.from_,
                )
                _reject(result, error, strict)
                continue
            pending.precipitations.append(build_precipitation(entry, lang))
        else:
            error = MalformedInput(
                f"unsupported entry type {type(entry).__name__}",
                index=position,
            )
            _reject(result, error, strict)

    if pending is not None:
        result.observations.append(_build_observation(pending, lang))

    logger.debug(
        "Merged %d observations (%d rejected)",
        len(result.observations), len(result.rejected),
    )
    return result


def build_precipitation(entry: IntervalEntry, lang: str) -> PrecipitationRecord:
    return PrecipitationRecord(
        from_=entry.from_,
        to=entry.to,
        lang=lang,
        value=entry.precipitation_mm,
        min=entry.precipitation_min_mm,
        max=entry.precipitation_max_mm,
        symbol=PrecipitationSymbol(
            from_=entry.from_,
            to=entry.to,
            lang=lang,
            id=entry.symbol_id,
            number=entry.symbol_number,
        ),
    )


def build_observation(
    entry: InstantEntry,
    lang: str,
    precipitations: Iterable[PrecipitationRecord] = (),
) -> ObservationRecord:
    span = {"from_": entry.from_, "to": entry.to, "lang": lang}
    return ObservationRecord(
        **span,
        type=entry.datatype,
        temperature=Temperature(**span, celsius=entry.temperature_celsius),
        wind_direction=WindDirection(
            **span,
            degrees=entry.wind_direction_degrees,
            name=entry.wind_direction_name,
        ),
        wind_speed=WindSpeed(
            **span,
            mps=entry.wind_speed_mps,
            beaufort=entry.wind_speed_beaufort,
            name=entry.wind_speed_name,
        ),
        humidity=Humidity(**span, percent=entry.humidity_percent),
        pressure=Pressure(**span, hpa=entry.pressure_hpa),
        clouds=Clouds(
            **span,
            cloudiness=entry.cloudiness_percent,
            low=entry.low_clouds_percent,
            medium=entry.medium_clouds_percent,
            high=entry.high_clouds_percent,
        ),
        fog=Fog(**span, percent=entry.fog_percent),
        dewpoint=Dewpoint(**span, celsius=entry.dewpoint_celsius),
        precipitations=tuple(precipitations),
    )


def _build_observation(pending: _Pending, lang: str) -> ObservationRecord:
    return build_observation(pending.entry, lang, pending.precipitations)


def _index_of(entry: RawEntry, position: int) -> int:
    return entry.index if entry.index is not None else position


def _reject(result: MergeResult, error: MalformedInput, strict: bool) -> None:
    if strict:
        raise error
    logger.warning("Skipping malformed forecast entry: %s", error)
    result.rejected.append(error)
