"""Configuration schema — Pydantic models for config.yaml."""

from __future__ import annotations

from pydantic import BaseModel, Field

from kraken_public.pairs import XXBTZEUR


class ClientConfig(BaseModel):
    base_url: str = "https://api.kraken.com"
    timeout_s: float = Field(default=15.0, gt=0)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"


class AppConfig(BaseModel):
    pairs: list[str] = Field(default_factory=lambda: [XXBTZEUR])
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
