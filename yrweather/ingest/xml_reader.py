"""Read a location-forecast XML document into tagged raw entries.

Document shape (only the parts used here):

    <weatherdata>
      <product class="pointData">
        <time datatype="forecast" from="..." to="...">
          <location>
            <temperature value="13.2"/> <windSpeed mps="3.2" .../> ...
          </location>
        </time>
        <time datatype="forecast" from="..." to="...">
          <location>
            <precipitation value="0.4" minvalue="0.1" maxvalue="0.9"/>
            <symbol id="LightRain" number="9"/>
          </location>
        </time>
      </product>
    </weatherdata>
"""

import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime

from yrweather.errors import MalformedInput
from yrweather.models.common import parse_timestamp
from yrweather.models.forecast import InstantEntry, IntervalEntry, RawEntry

logger = logging.getLogger(__name__)


@dataclass
class ReadResult:
    entries: list[RawEntry] = field(default_factory=list)
    rejected: list[MalformedInput] = field(default_factory=list)


def parse_xml(text: str | bytes) -> ET.Element:
    """Parse document text into an element tree root."""
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise MalformedInput(f"invalid XML: {e}") from e


def read_entries(root: ET.Element, strict: bool = False) -> ReadResult:
    """Classify every <time> element under weatherdata/product, in document order.

    Elements that are neither an instant nor an interval reading, or that lack
    a value the merge needs, raise MalformedInput when strict and are logged
    and collected on ReadResult.rejected otherwise.
    """
    result = ReadResult()
    for index, time_el in enumerate(_time_elements(root)):
        try:
            result.entries.append(classify_entry(time_el, index))
        except MalformedInput as e:
            if strict:
                raise
            logger.warning("Skipping malformed forecast entry: %s", e)
            result.rejected.append(e)
    return result


def classify_entry(time_el: ET.Element, index: int | None = None) -> RawEntry:
    from_ = _timestamp(time_el, "from", index)
    to = _timestamp(time_el, "to", index)

    loc = time_el.find("location")
    if loc is None:
        raise MalformedInput("missing <location>", index=index, from_=from_)

    if loc.find("temperature") is not None:
        return InstantEntry(
            from_=from_,
            to=to,
            datatype=time_el.get("datatype"),
            temperature_celsius=_required_float(loc, "temperature", "value", index, from_),
            wind_direction_degrees=_float(loc, "windDirection", "deg"),
            wind_direction_name=_text(loc, "windDirection", "name"),
            wind_speed_mps=_float(loc, "windSpeed", "mps"),
            wind_speed_beaufort=_int(loc, "windSpeed", "beaufort"),
            wind_speed_name=_text(loc, "windSpeed", "name"),
            humidity_percent=_float(loc, "humidity", "value"),
            pressure_hpa=_float(loc, "pressure", "value"),
            cloudiness_percent=_float(loc, "cloudiness", "percent"),
            low_clouds_percent=_float(loc, "lowClouds", "percent"),
            medium_clouds_percent=_float(loc, "mediumClouds", "percent"),
            high_clouds_percent=_float(loc, "highClouds", "percent"),
            fog_percent=_float(loc, "fog", "percent"),
            dewpoint_celsius=_float(loc, "dewpointTemperature", "value"),
            index=index,
        )

    if loc.find("precipitation") is not None:
        return IntervalEntry(
            from_=from_,
            to=to,
            precipitation_mm=_required_float(loc, "precipitation", "value", index, from_),
            precipitation_min_mm=_float(loc, "precipitation", "minvalue"),
            precipitation_max_mm=_float(loc, "precipitation", "maxvalue"),
            symbol_id=_text(loc, "symbol", "id"),
            symbol_number=_int(loc, "symbol", "number"),
            index=index,
        )

    raise MalformedInput(
        "entry has neither temperature nor precipitation", index=index, from_=from_
    )


def _time_elements(root: ET.Element) -> list[ET.Element]:
    # Accept either the <weatherdata> root or a bare <product> element.
    if root.tag == "product":
        return root.findall("time")
    return root.findall("product/time")


def _timestamp(time_el: ET.Element, attr: str, index: int | None) -> datetime:
    raw = time_el.get(attr)
    if raw is None:
        raise MalformedInput(f"missing '{attr}' attribute", index=index)
    try:
        return parse_timestamp(raw)
    except ValueError as e:
        raise MalformedInput(f"bad '{attr}' timestamp {raw!r}", index=index) from e


def _text(loc: ET.Element, tag: str, attr: str) -> str | None:
    el = loc.find(tag)
    if el is None:
        return None
    return el.get(attr)


def _float(loc: ET.Element, tag: str, attr: str) -> float | None:
    raw = _text(loc, tag, attr)
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.debug("Ignoring non-numeric %s/@%s=%r", tag, attr, raw)
        return None
    if not math.isfinite(value):
        logger.debug("Ignoring non-finite %s/@%s=%r", tag, attr, raw)
        return None
    return value


def _int(loc: ET.Element, tag: str, attr: str) -> int | None:
    value = _float(loc, tag, attr)
    return int(value) if value is not None else None


def _required_float(
    loc: ET.Element, tag: str, attr: str, index: int | None, from_: datetime
) -> float:
    raw = _text(loc, tag, attr)
    if raw is None:
        raise MalformedInput(f"missing {tag}/@{attr}", index=index, from_=from_)
    try:
        value = float(raw)
    except ValueError as e:
        raise MalformedInput(
            f"non-numeric {tag}/@{attr}={raw!r}", index=index, from_=from_
        ) from e
    if not math.isfinite(value):
        raise MalformedInput(
            f"non-finite {tag}/@{attr}={raw!r}", index=index, from_=from_
        )
    return value
