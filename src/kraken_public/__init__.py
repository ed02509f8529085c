"""Client for the Kraken public market data API."""

from kraken_public.client import KrakenClient
from kraken_public.errors import (
    ApiError,
    DecodeError,
    InvalidArgument,
    KrakenError,
    TransportError,
)

__all__ = [
    "ApiError",
    "DecodeError",
    "InvalidArgument",
    "KrakenClient",
    "KrakenError",
    "TransportError",
]
