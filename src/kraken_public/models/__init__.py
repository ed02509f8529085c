"""Pydantic domain models."""

from kraken_public.models.book import (
    OHLCEntry,
    OHLCSeries,
    OrderBook,
    OrderBookEntry,
    Trade,
    TradeBook,
)
from kraken_public.models.market import (
    AssetInfo,
    AssetPairInfo,
    FeeTier,
    ServerTime,
    TickerInfo,
)
from kraken_public.models.types import WireDecimal, wire_text

__all__ = [
    "AssetInfo",
    "AssetPairInfo",
    "FeeTier",
    "OHLCEntry",
    "OHLCSeries",
    "OrderBook",
    "OrderBookEntry",
    "ServerTime",
    "TickerInfo",
    "Trade",
    "TradeBook",
    "WireDecimal",
    "wire_text",
]
