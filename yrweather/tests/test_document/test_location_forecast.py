"""Tests for the LocationForecast document views."""

from datetime import UTC, date, datetime, timedelta

import pytest

from yrweather.document import LocationForecast
from yrweather.errors import MalformedInput, NotAvailable

T0 = datetime(2026, 2, 11, 18, 0, 0, tzinfo=UTC)


def _fixed_clock(at: datetime):
    return lambda: at


class TestFromXml:
    def test_observations(self, oslo_xml: bytes):
        forecast = LocationForecast.from_xml(oslo_xml)
        assert len(forecast.observations) == 6
        first = forecast.observations[0]
        assert first.lang == "nb"
        assert [p.symbol.id for p in first.precipitations] == ["LightRain", "Rain"]
        assert forecast.observations[-1].precipitations[0].symbol.number == 13

    def test_days(self, oslo_xml: bytes):
        forecast = LocationForecast.from_xml(oslo_xml)
        assert [d.date for d in forecast.days] == [
            date(2026, 2, 11), date(2026, 2, 12), date(2026, 2, 13),
        ]
        # 2026-02-13T00:00+01:00 belongs to the 12th in UTC.
        assert [len(d) for d in forecast.days] == [2, 3, 1]

    def test_today_and_tomorrow(self, oslo_xml: bytes):
        forecast = LocationForecast.from_xml(oslo_xml)
        assert forecast.today == forecast.days[0]
        assert forecast.tomorrow == forecast.days[1]

    def test_now(self, oslo_xml: bytes):
        forecast = LocationForecast.from_xml(
            oslo_xml, clock=_fixed_clock(T0 + timedelta(hours=2))
        )
        assert forecast.now.observations[0].temperature.celsius == 0.8

    def test_strict_rejects_bad_document(self):
        xml = (
            "<weatherdata><product>"
            "<time from='2026-02-11T18:00:00Z' to='2026-02-11T19:00:00Z'>"
            "<location><precipitation value='0.1'/></location></time>"
            "</product></weatherdata>"
        )
        with pytest.raises(MalformedInput):
            LocationForecast.from_xml(xml, strict=True).observations

    def test_rejected_collects_read_and_merge_errors(self):
        xml = (
            "<weatherdata><product>"
            "<time from='2026-02-11T18:00:00Z' to='2026-02-11T19:00:00Z'>"
            "<location><precipitation value='0.1'/></location></time>"
            "<time from='2026-02-11T18:00:00Z' to='2026-02-11T18:00:00Z'>"
            "<location/></time>"
            "<time from='2026-02-11T19:00:00Z' to='2026-02-11T19:00:00Z'>"
            "<location><temperature value='2.0'/></location></time>"
            "</product></weatherdata>"
        )
        forecast = LocationForecast.from_xml(xml)
        assert len(forecast.observations) == 1
        assert len(forecast.rejected) == 2
        assert sorted(e.index for e in forecast.rejected) == [0, 1]


class TestScenarios:
    def test_instant_interval_next_day_instant(self, instant, interval):
        forecast = LocationForecast([instant(0), interval(0, 1), instant(8)])
        assert len(forecast.observations) == 2
        assert len(forecast.observations[0].precipitations) == 1
        assert len(forecast.days) == 2

    def test_only_interval(self, interval):
        forecast = LocationForecast([interval(0, 1)])
        assert forecast.observations == ()
        assert len(forecast.rejected) == 1
        assert isinstance(forecast.rejected[0], MalformedInput)

    def test_only_interval_strict(self, interval):
        forecast = LocationForecast([interval(0, 1)], strict=True)
        with pytest.raises(MalformedInput):
            forecast.observations

    def test_empty_document(self):
        forecast = LocationForecast([])
        assert forecast.observations == ()
        assert forecast.days == ()
        with pytest.raises(NotAvailable):
            forecast.today
        with pytest.raises(NotAvailable):
            forecast.tomorrow
        with pytest.raises(NotAvailable):
            forecast.now


class TestMemoization:
    def test_views_computed_once(self, instant):
        forecast = LocationForecast([instant(0), instant(6)])
        assert forecast.observations is forecast.observations
        assert forecast.days is forecast.days
        assert forecast.today is forecast.today

    def test_now_uses_clock_once(self, instant):
        calls = []

        def clock():
            calls.append(1)
            return T0

        forecast = LocationForecast([instant(0), instant(3)], clock=clock)
        first = forecast.now
        assert forecast.now is first
        assert len(calls) == 1

    def test_not_available_is_not_cached(self):
        forecast = LocationForecast([])
        for _ in range(2):
            with pytest.raises(NotAvailable):
                forecast.tomorrow

    def test_views_are_immutable(self, instant):
        forecast = LocationForecast([instant(0), instant(6)])
        assert isinstance(forecast.observations, tuple)
        assert isinstance(forecast.days, tuple)
        with pytest.raises(AttributeError):
            forecast.observations.append(forecast.observations[0])
        assert len(forecast.days) == 2

    def test_documents_are_independent(self, instant):
        a = LocationForecast([instant(0)])
        b = LocationForecast([instant(0), instant(6)])
        assert len(a.days) == 1
        assert len(b.days) == 2
