"""Shared test fixtures."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import yaml

from yrweather.config.defaults import DEFAULT_LOCATIONS
from yrweather.config.schema import YrConfig
from yrweather.models.forecast import InstantEntry, IntervalEntry

T0 = datetime(2026, 2, 11, 18, 0, 0, tzinfo=UTC)


@pytest.fixture
def default_config() -> YrConfig:
    """Return default YrConfig with default locations."""
    return YrConfig(locations=DEFAULT_LOCATIONS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "client": {"max_retries": 1, "retry_base_delay_seconds": 0.01},
        "forecast": {"lang": "en"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def oslo_xml(fixtures_dir: Path) -> bytes:
    return (fixtures_dir / "forecast_oslo.xml").read_bytes()


@pytest.fixture
def instant():
    """Factory for instant entries; `hours` is the offset from T0."""

    def make(hours: float, celsius: float = 1.0, **kwargs) -> InstantEntry:
        at = T0 + timedelta(hours=hours)
        return InstantEntry(from_=at, to=at, temperature_celsius=celsius, **kwargs)

    return make


@pytest.fixture
def interval():
    """Factory for precipitation entries spanning [start, end] hours after T0."""

    def make(start: float, end: float, mm: float = 0.5, **kwargs) -> IntervalEntry:
        return IntervalEntry(
            from_=T0 + timedelta(hours=start),
            to=T0 + timedelta(hours=end),
            precipitation_mm=mm,
            **kwargs,
        )

    return make
