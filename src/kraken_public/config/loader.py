"""Config loader — YAML file first, then KRAKEN_* environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from kraken_public.config.schema import AppConfig

# env var -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "KRAKEN_BASE_URL": ("client", "base_url"),
    "KRAKEN_TIMEOUT_S": ("client", "timeout_s"),
    "KRAKEN_LOG_LEVEL": ("logging", "level"),
    "KRAKEN_LOG_FORMAT": ("logging", "format"),
}


def _read_yaml(path: str | Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    return yaml.safe_load(p.read_text()) or {}


def _apply_env(data: dict[str, Any]) -> dict[str, Any]:
    for var, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(var)
        if value:
            data.setdefault(section, {})[key] = value
    return data


def load_config(path: str | Path | None = None) -> AppConfig:
    """Build the app config.

    A missing file (or no *path*) means defaults. Any variable listed in
    ``ENV_OVERRIDES`` that is set and non-empty replaces the matching value;
    pydantic coerces it to the field's type.
    """
    return AppConfig.model_validate(_apply_env(_read_yaml(path)))
