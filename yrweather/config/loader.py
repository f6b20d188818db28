"""YAML config loader with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from yrweather.config.defaults import DEFAULT_LOCATIONS
from yrweather.config.schema import YrConfig


def load_config(path: str | Path | None = None) -> YrConfig:
    """Load and validate config from a YAML file.

    A missing path (None or a file that does not exist) means all defaults.
    If no locations are specified, injects DEFAULT_LOCATIONS.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    if not raw.get("locations"):
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    return YrConfig(**raw)


def get_config_value(config: YrConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'client.max_retries'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: YrConfig, dotted_key: str, value: Any) -> YrConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new YrConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target: Any = data
    for part in parts[:-1]:
        target = target[int(part)] if isinstance(target, list) else target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float):
            value = float(value)
    target[parts[-1]] = value
    return YrConfig(**data)


def save_config(config: YrConfig, path: str | Path) -> None:
    """Write config to a YAML file, replacing its contents."""
    path = Path(path)
    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False)
