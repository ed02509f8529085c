"""Tests for the Pydantic domain models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from kraken_public.models import (
    AssetInfo,
    OHLCEntry,
    OHLCSeries,
    OrderBook,
    OrderBookEntry,
    ServerTime,
    TickerInfo,
    Trade,
    TradeBook,
)


def _candle(ts: int = 1493786460) -> OHLCEntry:
    return OHLCEntry(
        timestamp=ts,
        open=Decimal("1326.860"),
        high=Decimal("1326.880"),
        low=Decimal("1324.533"),
        close=Decimal("1326.880"),
        vwap=Decimal("1326.643"),
        volume=Decimal("3.93936569"),
        trade_count=9,
    )


class TestAliases:
    def test_server_time_from_wire_keys(self):
        st = ServerTime.model_validate({"unixtime": 1, "rfc1123": "Thu,  1 Jan 70 00:00:01 +0000"})
        assert st.unix_seconds == 1

    def test_server_time_by_field_name(self):
        st = ServerTime(unix_seconds=1, display_string="x")
        assert st.model_dump(by_alias=True) == {"unixtime": 1, "rfc1123": "x"}

    def test_asset_info_populate_by_name(self):
        a = AssetInfo(alt_name="XBT", asset_class="currency", decimals=10, display_decimals=5)
        assert a.model_dump(by_alias=True)["altname"] == "XBT"

    def test_ticker_requires_fixed_sizes(self):
        data = {
            "a": ["1", "1", "1"], "b": ["1", "1", "1"], "c": ["1", "1"],
            "v": ["1", "1"], "p": ["1", "1"], "t": [1, 2, 3],
            "l": ["1", "1"], "h": ["1", "1"], "o": "1",
        }
        with pytest.raises(ValidationError):
            TickerInfo.model_validate(data)


class TestImmutability:
    def test_candle_is_frozen(self):
        c = _candle()
        with pytest.raises(ValidationError):
            c.close = Decimal("1")

    def test_series_entries_are_a_tuple(self):
        s = OHLCSeries(pair="XXBTZEUR", entries=[_candle(1), _candle(2)], last=1)
        assert isinstance(s.entries, tuple)
        assert [e.timestamp for e in s.entries] == [1, 2]

    def test_order_book_is_frozen(self):
        level = OrderBookEntry(price=Decimal("1"), volume=Decimal("2"), timestamp=3)
        book = OrderBook(pair="XXBTZEUR", asks=[level], bids=[])
        with pytest.raises(ValidationError):
            book.pair = "XETHXXBT"


class TestDecimalText:
    def test_trailing_zeros_kept(self):
        t = Trade(
            price="1425.00000",
            volume="0.10000000",
            timestamp_ns=0,
            buy_or_sell="b",
            market_or_limit="l",
            misc="",
        )
        assert str(t.price) == "1425.00000"
        assert t.model_dump(mode="json")["volume"] == "0.10000000"

    def test_trade_book_dump(self):
        book = TradeBook(pair="XXBTZEUR", trades=[], last="1493926890306801911")
        assert book.model_dump(mode="json") == {
            "pair": "XXBTZEUR",
            "trades": [],
            "last": "1493926890306801911",
        }
