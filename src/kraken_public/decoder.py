"""Response decoding — envelope unwrapping and per-endpoint result shapes.

Every response is ``{"error": [...], "result": ...}``. ``unwrap`` turns the
envelope into either the raw ``result`` value or an ``ApiError``; the
``decode_*`` functions then reshape ``result`` into models.

Several endpoints send positional arrays instead of objects (candles, book
levels, trades) and objects whose keys are data rather than field names
(the pair code next to the ``last`` cursor). Those get hand-written
decoders; everything with fixed keys goes straight through pydantic.

JSON floats are parsed as ``Decimal`` so prices and volumes keep the exact
digits sent by the exchange.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError

from kraken_public.errors import ApiError, DecodeError
from kraken_public.models import (
    AssetInfo,
    AssetPairInfo,
    OHLCEntry,
    OHLCSeries,
    OrderBook,
    OrderBookEntry,
    ServerTime,
    TickerInfo,
    Trade,
    TradeBook,
    wire_text,
)

M = TypeVar("M", bound=BaseModel)

LAST_KEY = "last"

_NS_PER_S = 10**9


class Envelope(BaseModel):
    error: list[str] = Field(default_factory=list)
    result: Any = None


# --- envelope ---


def loads(raw: bytes | str) -> Any:
    """Parse JSON with floats kept as ``Decimal``."""
    try:
        return json.loads(raw, parse_float=Decimal)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"malformed JSON: {exc}") from exc


def unwrap(raw: bytes | str) -> Any:
    """Return the envelope's ``result``, or raise ``ApiError``/``DecodeError``.

    A non-empty ``error`` list wins over whatever ``result`` holds. A missing
    ``error`` key counts as no error.
    """
    body = loads(raw)
    if not isinstance(body, dict):
        raise DecodeError(f"expected a JSON object, got {type(body).__name__}")
    try:
        envelope = Envelope.model_validate(body)
    except ValidationError as exc:
        raise DecodeError(f"malformed envelope: {exc}") from exc

    if envelope.error:
        raise ApiError(envelope.error)
    if "result" not in envelope.model_fields_set:
        raise DecodeError("response has neither error nor result")
    return envelope.result


# --- scalar fields ---


def _decimal(value: Any, field: str) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int) and not isinstance(value, bool):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value)
        except InvalidOperation as exc:
            raise DecodeError(f"{field}: not a decimal: {value!r}") from exc
    else:
        raise DecodeError(f"{field}: expected a decimal, got {value!r}")
    if not result.is_finite():
        raise DecodeError(f"{field}: not a finite decimal: {value!r}")
    return result


def _integer(value: Any, field: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, Decimal) and value == value.to_integral_value():
        return int(value)
    raise DecodeError(f"{field}: expected an integer, got {value!r}")


def _text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"{field}: expected a string, got {value!r}")
    return value


def _array(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise DecodeError(f"{what}: expected an array, got {type(value).__name__}")
    return value


def _object(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise DecodeError(f"{what}: expected an object, got {type(value).__name__}")
    return value


def _fields(value: Any, arity: int, what: str) -> list:
    items = _array(value, what)
    if len(items) != arity:
        raise DecodeError(f"{what}: expected {arity} elements, got {len(items)}")
    return items


def _validate(model: type[M], data: Any, what: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(f"{what}: {exc}") from exc


# --- positional tuples ---


def decode_ohlc_entry(value: Any) -> OHLCEntry:
    """``[time, open, high, low, close, vwap, volume, count]``"""
    time, open_, high, low, close, vwap, volume, count = _fields(value, 8, "OHLC entry")
    return OHLCEntry(
        timestamp=_integer(time, "time"),
        open=_decimal(open_, "open"),
        high=_decimal(high, "high"),
        low=_decimal(low, "low"),
        close=_decimal(close, "close"),
        vwap=_decimal(vwap, "vwap"),
        volume=_decimal(volume, "volume"),
        trade_count=_integer(count, "count"),
    )


def decode_order_book_entry(value: Any) -> OrderBookEntry:
    """``[price, volume, timestamp]``"""
    price, volume, timestamp = _fields(value, 3, "order book entry")
    return OrderBookEntry(
        price=_decimal(price, "price"),
        volume=_decimal(volume, "volume"),
        timestamp=_integer(timestamp, "timestamp"),
    )


def trade_timestamp_ns(value: Any) -> int:
    """Convert fractional wire seconds (``1493926357.0243``) to nanoseconds.

    The wire value is already a ``Decimal``, so the scaling is exact and
    only digits beyond nanosecond resolution are dropped.
    """
    return int(_decimal(value, "time") * _NS_PER_S)


def decode_trade(value: Any) -> Trade:
    """``[price, volume, time, buy/sell, market/limit, misc]``"""
    price, volume, time, side, order_type, misc = _fields(value, 6, "trade")
    return Trade(
        price=_decimal(price, "price"),
        volume=_decimal(volume, "volume"),
        timestamp_ns=trade_timestamp_ns(time),
        buy_or_sell=_text(side, "buy/sell"),
        market_or_limit=_text(order_type, "market/limit"),
        misc=_text(misc, "misc"),
    )


# --- dynamic-key objects ---


def decode_order_book(pair: str, value: Any) -> OrderBook:
    book = _object(value, f"order book {pair}")
    sides = {}
    for side in ("asks", "bids"):
        if side not in book:
            raise DecodeError(f"order book {pair}: missing {side!r}")
        sides[side] = tuple(
            decode_order_book_entry(level) for level in _array(book[side], side)
        )
    return OrderBook(pair=pair, **sides)


def decode_ohlc_series(pair: str, value: Any) -> OHLCSeries:
    """Look up the requested pair's candles next to the ``last`` cursor."""
    data = _object(value, "OHLC result")
    if pair not in data:
        raise DecodeError(f"OHLC result: missing pair {pair!r}")
    if LAST_KEY not in data:
        raise DecodeError("OHLC result: missing 'last' cursor")
    return OHLCSeries(
        pair=pair,
        entries=tuple(decode_ohlc_entry(e) for e in _array(data[pair], pair)),
        last=_integer(data[LAST_KEY], LAST_KEY),
    )


def decode_trade_book(value: Any) -> TradeBook:
    """Split ``{<pair>: [...], "last": "<cursor>"}`` into a ``TradeBook``.

    The pair code is whatever key is left once ``last`` is removed; exactly
    one must remain.
    """
    data = _object(value, "trades result")
    if LAST_KEY not in data:
        raise DecodeError("trades result: missing 'last' cursor")
    pairs = [key for key in data if key != LAST_KEY]
    if len(pairs) != 1:
        raise DecodeError(f"trades result: expected exactly one pair key, got {pairs!r}")
    pair = pairs[0]

    last = data[LAST_KEY]
    if isinstance(last, int) and not isinstance(last, bool):
        last = str(last)
    return TradeBook(
        pair=pair,
        trades=tuple(decode_trade(t) for t in _array(data[pair], pair)),
        last=_text(last, LAST_KEY),
    )


# --- endpoints ---


def _mapping(result: Any, model: type[M], what: str) -> dict[str, M]:
    data = _object(result, what)
    return {code: _validate(model, info, f"{what} {code}") for code, info in data.items()}


def decode_server_time(raw: bytes | str) -> ServerTime:
    return _validate(ServerTime, unwrap(raw), "server time")


def decode_assets(raw: bytes | str) -> dict[str, AssetInfo]:
    return _mapping(unwrap(raw), AssetInfo, "asset")


def decode_asset_pairs(raw: bytes | str) -> dict[str, AssetPairInfo]:
    return _mapping(unwrap(raw), AssetPairInfo, "asset pair")


def decode_ticker(raw: bytes | str) -> dict[str, TickerInfo]:
    return _mapping(unwrap(raw), TickerInfo, "ticker")


def decode_ohlc(raw: bytes | str, pair: str) -> OHLCSeries:
    return decode_ohlc_series(pair, unwrap(raw))


def decode_depth(raw: bytes | str) -> dict[str, OrderBook]:
    data = _object(unwrap(raw), "depth result")
    return {pair: decode_order_book(pair, book) for pair, book in data.items()}


def decode_trades(raw: bytes | str) -> TradeBook:
    return decode_trade_book(unwrap(raw))


# --- encoders ---


def _listify(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_listify(v) for v in value]
    return value


def encode_asset_info(info: AssetInfo) -> dict[str, Any]:
    """Wire-shaped dict for an ``AssetInfo``."""
    return info.model_dump(by_alias=True)


def encode_asset_pair_info(info: AssetPairInfo) -> dict[str, Any]:
    """Wire-shaped dict for an ``AssetPairInfo``.

    Fee tiers arrive as JSON numbers and stay ``Decimal``; ``ordermin``
    arrives as a string and goes back out as one.
    """
    data = {
        key: _listify(value)
        for key, value in info.model_dump(by_alias=True, exclude_none=True).items()
    }
    if "ordermin" in data:
        data["ordermin"] = wire_text(data["ordermin"])
    return data
