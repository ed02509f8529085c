"""Reference data models — server time, assets, asset pairs, tickers.

Field names are descriptive; the exchange's short wire keys are kept as
aliases so the models validate straight from the ``result`` payload and can
be dumped back to it with ``by_alias=True``.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from kraken_public.models.types import WireDecimal

# (volume, percent fee)
FeeTier = tuple[WireDecimal, WireDecimal]


class ServerTime(BaseModel):
    """Exchange clock reading, useful for estimating local clock skew."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    unix_seconds: int = Field(alias="unixtime")
    display_string: str = Field(alias="rfc1123")

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.unix_seconds, tz=timezone.utc)


class AssetInfo(BaseModel):
    """One asset from the Assets endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    alt_name: str = Field(alias="altname")
    asset_class: str = Field(alias="aclass")
    decimals: int
    display_decimals: int


class AssetPairInfo(BaseModel):
    """One tradable pair from the AssetPairs endpoint.

    Pairs on a maker/taker schedule carry the taker side in ``fees`` and the
    maker side in ``fees_maker``; other pairs only have ``fees``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    alt_name: str = Field(alias="altname")
    base_asset_class: str = Field(alias="aclass_base")
    base: str
    quote_asset_class: str = Field(alias="aclass_quote")
    quote: str
    lot_size: str = Field(alias="lot")
    pair_decimals: int
    lot_decimals: int
    lot_multiplier: int
    leverage_buy: tuple[int, ...]
    leverage_sell: tuple[int, ...]
    fees: tuple[FeeTier, ...]
    fees_maker: tuple[FeeTier, ...] | None = None
    fee_volume_currency: str
    margin_call: int
    margin_stop: int
    ordermin: WireDecimal | None = None


class TickerInfo(BaseModel):
    """Ticker snapshot for one pair.

    Two-element arrays are ``(today, last 24 hours)``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # (price, whole lot volume, lot volume)
    ask: tuple[WireDecimal, WireDecimal, WireDecimal] = Field(alias="a")
    bid: tuple[WireDecimal, WireDecimal, WireDecimal] = Field(alias="b")
    # (price, lot volume)
    last_trade: tuple[WireDecimal, WireDecimal] = Field(alias="c")
    volume: tuple[WireDecimal, WireDecimal] = Field(alias="v")
    vwap: tuple[WireDecimal, WireDecimal] = Field(alias="p")
    trade_count: tuple[int, int] = Field(alias="t")
    low: tuple[WireDecimal, WireDecimal] = Field(alias="l")
    high: tuple[WireDecimal, WireDecimal] = Field(alias="h")
    opening_price: WireDecimal = Field(alias="o")
