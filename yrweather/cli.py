"""CLI entry point for the location forecast reader."""

import argparse
import logging
from pathlib import Path

import httpx

from yrweather.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from yrweather.config.schema import YrConfig
from yrweather.document import LocationForecast
from yrweather.errors import ForecastError, NotAvailable
from yrweather.ingest.yr_client import YrClient
from yrweather.models.forecast import Day, ObservationRecord

DEFAULT_CONFIG = "yrweather.yaml"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yrweather",
        description="Yr.no location forecast reader",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--location", default=None, help="Location slug (default: first enabled)"
    )
    parser.add_argument(
        "--file", default=None, help="Read a saved forecast XML instead of fetching"
    )
    parser.add_argument(
        "--strict", action="store_true", help="Fail on the first malformed entry"
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("now", help="Show the observation closest to now")
    sub.add_parser("today", help="Show today's observations")
    sub.add_parser("tomorrow", help="Show tomorrow's observations")
    sub.add_parser("days", help="List forecast days")
    sub.add_parser("observations", help="List every observation")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "config":
        return _cmd_config(config, args)

    try:
        forecast = _load_forecast(config, args)
    except (ForecastError, KeyError, OSError, httpx.HTTPError) as e:
        logger.error("Could not load forecast: %s", e)
        print(f"Error: {e}")
        return 1

    try:
        if args.command == "now":
            _print_day("Now", forecast.now)
        elif args.command == "today":
            _print_day("Today", forecast.today)
        elif args.command == "tomorrow":
            _print_day("Tomorrow", forecast.tomorrow)
        elif args.command == "days":
            _cmd_days(forecast)
        elif args.command == "observations":
            for obs in forecast.observations:
                print(_format_observation(obs))
        else:
            parser.print_help()
            return 1
    except NotAvailable as e:
        print(f"Error: {e}")
        return 1

    if forecast.rejected:
        print(f"({len(forecast.rejected)} malformed entries skipped)")
    return 0


def _load_forecast(config: YrConfig, args) -> LocationForecast:
    strict = args.strict or config.forecast.strict
    lang = config.forecast.lang
    if args.file:
        text = Path(args.file).read_bytes()
        return LocationForecast.from_xml(text, lang=lang, strict=strict)

    if args.location:
        location = config.get_location(args.location)
    else:
        enabled = [loc for loc in config.locations if loc.enabled]
        if not enabled:
            raise KeyError("No enabled locations configured")
        location = enabled[0]

    client = YrClient(
        base_url=config.client.base_url,
        user_agent=config.client.user_agent,
        timeout=config.client.timeout_seconds,
        max_retries=config.client.max_retries,
        retry_base_delay=config.client.retry_base_delay_seconds,
    )
    return client.location_forecast(location, lang=lang, strict=strict)


def _cmd_days(forecast: LocationForecast) -> None:
    for day in forecast.days:
        temps = [obs.temperature.celsius for obs in day.observations]
        print(
            f"{day.date.isoformat()}: {len(day.observations)} observations, "
            f"{min(temps):.1f}..{max(temps):.1f} °C"
        )


def _cmd_config(config: YrConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, args.config)
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _print_day(label: str, day: Day) -> None:
    print(f"{label} ({day.date.isoformat()}):")
    for obs in day.observations:
        print(f"  {_format_observation(obs)}")


def _format_observation(obs: ObservationRecord) -> str:
    line = f"{obs.from_.isoformat()} {obs.temperature.celsius:.1f} °C"
    if obs.wind_speed.mps is not None:
        line += f", wind {obs.wind_speed.mps:.1f} m/s"
        if obs.wind_direction.name:
            line += f" {obs.wind_direction.name}"
    if obs.precipitations:
        first = obs.precipitations[0]
        line += f", precip {first.value:.1f} mm"
        if first.symbol.id:
            line += f" ({first.symbol.id})"
    return line
