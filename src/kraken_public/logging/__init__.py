"""Structured logging."""

from kraken_public.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
