"""Default locations used when the config file names none."""

from yrweather.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(name="Oslo", slug="oslo", lat=59.9139, lon=10.7522, msl=23),
    LocationConfig(name="Bergen", slug="bergen", lat=60.3913, lon=5.3221, msl=12),
    LocationConfig(name="Tromsø", slug="tromso", lat=69.6492, lon=18.9553, msl=10),
]
