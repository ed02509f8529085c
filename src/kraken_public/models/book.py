"""Market data models — candles, order book levels, trades."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict

from kraken_public.models.types import WireDecimal

_NS_PER_S = 10**9


class OHLCEntry(BaseModel):
    """One candlestick bar."""

    model_config = ConfigDict(frozen=True)

    timestamp: int
    open: WireDecimal
    high: WireDecimal
    low: WireDecimal
    close: WireDecimal
    vwap: WireDecimal
    volume: WireDecimal
    trade_count: int

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


class OHLCSeries(BaseModel):
    """Candles for one pair.

    The final entry is the current, still-open candle and is always present
    whatever ``since`` was requested. ``last`` is the cursor to pass as
    ``since`` when polling for newly committed candles.
    """

    model_config = ConfigDict(frozen=True)

    pair: str
    entries: tuple[OHLCEntry, ...]
    last: int


class OrderBookEntry(BaseModel):
    """A single price level."""

    model_config = ConfigDict(frozen=True)

    price: WireDecimal
    volume: WireDecimal
    timestamp: int

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


class OrderBook(BaseModel):
    model_config = ConfigDict(frozen=True)

    pair: str
    asks: tuple[OrderBookEntry, ...]
    bids: tuple[OrderBookEntry, ...]


class Trade(BaseModel):
    """One executed trade.

    ``buy_or_sell`` is ``"b"`` or ``"s"``, ``market_or_limit`` is ``"m"``
    or ``"l"``.
    """

    model_config = ConfigDict(frozen=True)

    price: WireDecimal
    volume: WireDecimal
    timestamp_ns: int
    buy_or_sell: str
    market_or_limit: str
    misc: str

    @property
    def time(self) -> datetime:
        """Trade time in UTC, truncated to microseconds."""
        seconds, ns = divmod(self.timestamp_ns, _NS_PER_S)
        return datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(
            microseconds=ns // 1000
        )


class TradeBook(BaseModel):
    """Recent trades for one pair plus the ``since`` cursor for the next poll."""

    model_config = ConfigDict(frozen=True)

    pair: str
    trades: tuple[Trade, ...]
    last: str
