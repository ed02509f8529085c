"""Configuration system."""

from kraken_public.config.loader import load_config
from kraken_public.config.schema import AppConfig, ClientConfig, LoggingConfig

__all__ = ["AppConfig", "ClientConfig", "LoggingConfig", "load_config"]
