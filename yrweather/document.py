"""LocationForecast: the navigable view over one fetched forecast document."""

import logging
from collections.abc import Iterable
from functools import cached_property

from yrweather.aggregate.grouper import group_by_day
from yrweather.aggregate.merger import MergeResult, merge_entries
from yrweather.aggregate.selector import select_now, select_today, select_tomorrow
from yrweather.errors import MalformedInput
from yrweather.ingest.xml_reader import parse_xml, read_entries
from yrweather.models.common import Clock, utc_now
from yrweather.models.forecast import Day, ObservationRecord, RawEntry

logger = logging.getLogger(__name__)

DEFAULT_LANG = "nb"


class LocationForecast:
    """Observations of one document, grouped into days.

    Every derived view is computed on first access and kept for the lifetime
    of the instance. Views that raise NotAvailable are not cached.
    """

    def __init__(
        self,
        entries: Iterable[RawEntry],
        lang: str = DEFAULT_LANG,
        strict: bool = False,
        clock: Clock | None = None,
        rejected: Iterable[MalformedInput] = (),
    ):
        self.entries: tuple[RawEntry, ...] = tuple(entries)
        self.lang = lang
        self.strict = strict
        self.clock = clock or utc_now
        self._read_rejected = list(rejected)

    @classmethod
    def from_xml(
        cls,
        text: str | bytes,
        lang: str = DEFAULT_LANG,
        strict: bool = False,
        clock: Clock | None = None,
    ) -> "LocationForecast":
        result = read_entries(parse_xml(text), strict=strict)
        logger.info(
            "Read %d forecast entries (%d rejected)",
            len(result.entries), len(result.rejected),
        )
        return cls(
            result.entries,
            lang=lang,
            strict=strict,
            clock=clock,
            rejected=result.rejected,
        )

    @cached_property
    def _merged(self) -> MergeResult:
        return merge_entries(self.entries, lang=self.lang, strict=self.strict)

    @cached_property
    def observations(self) -> tuple[ObservationRecord, ...]:
        return tuple(self._merged.observations)

    @property
    def rejected(self) -> list[MalformedInput]:
        """Entries skipped while reading or merging, in lenient mode."""
        return self._read_rejected + self._merged.rejected

    @cached_property
    def days(self) -> tuple[Day, ...]:
        return tuple(group_by_day(self.observations))

    @cached_property
    def today(self) -> Day:
        return select_today(self.days)

    @cached_property
    def tomorrow(self) -> Day:
        return select_tomorrow(self.days)

    @cached_property
    def now(self) -> Day:
        """Single-observation day holding today's reading closest to the clock."""
        return select_now(self.days, self.clock())
