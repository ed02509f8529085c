"""Kraken public REST client.

Every method is one GET against ``<base_url>/0/public/<Endpoint>``; the body
is handed to :mod:`kraken_public.decoder`. Nothing is cached or retried.
httpx errors (connection failures, timeouts, non-2xx statuses) propagate
unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx

from kraken_public import decoder
from kraken_public.config import ClientConfig
from kraken_public.errors import InvalidArgument
from kraken_public.logging import get_logger
from kraken_public.models import (
    AssetInfo,
    AssetPairInfo,
    OHLCSeries,
    OrderBook,
    ServerTime,
    TickerInfo,
    TradeBook,
)
from kraken_public.pairs import OHLC_INTERVALS

log = get_logger(__name__)

PUBLIC_PATH = "/0/public/"


def _require_pair(pair: str) -> None:
    if not pair:
        raise InvalidArgument("parameter pair cannot be empty")


class KrakenClient:
    """Synchronous client for the public market data endpoints."""

    def __init__(
        self,
        base_url: str = "https://api.kraken.com",
        timeout_s: float = 15.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._transport = transport
        self._http: httpx.Client | None = None

    @classmethod
    def from_config(cls, cfg: ClientConfig, **kwargs: Any) -> KrakenClient:
        return cls(base_url=cfg.base_url, timeout_s=cfg.timeout_s, **kwargs)

    def _get_http(self) -> httpx.Client:
        if self._http is None or self._http.is_closed:
            self._http = httpx.Client(
                base_url=self.base_url + PUBLIC_PATH,
                timeout=self.timeout_s,
                transport=self._transport,
            )
        return self._http

    def close(self) -> None:
        if self._http and not self._http.is_closed:
            self._http.close()

    def __enter__(self) -> KrakenClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _get(self, endpoint: str, params: dict[str, str] | None = None) -> bytes:
        http = self._get_http()
        log.debug("request", endpoint=endpoint, params=params)
        resp = http.get(endpoint, params=params)
        log.debug("response", endpoint=endpoint, status=resp.status_code)
        resp.raise_for_status()
        return resp.content

    # --- endpoints ---

    def get_server_time(self) -> ServerTime:
        """Server clock, to approximate the skew between server and client."""
        return decoder.decode_server_time(self._get("Time"))

    def get_assets_info(self) -> dict[str, AssetInfo]:
        return decoder.decode_assets(self._get("Assets"))

    def get_tradable_pairs(self) -> dict[str, AssetPairInfo]:
        """All tradable pairs keyed by pair code.

        Pairs on a maker/taker fee schedule have ``fees_maker`` set.
        """
        return decoder.decode_asset_pairs(self._get("AssetPairs"))

    def get_ticker_info(self, pairs: str | Sequence[str]) -> dict[str, TickerInfo]:
        """Ticker snapshots for *pairs*, keyed by the pair codes the exchange returns.

        A single pair code may be passed as a plain string.
        """
        if isinstance(pairs, str):
            pairs = [pairs]
        if not pairs:
            raise InvalidArgument("parameter pairs cannot be empty")
        for pair in pairs:
            _require_pair(pair)
        return decoder.decode_ticker(self._get("Ticker", {"pair": ",".join(pairs)}))

    def get_ohlc_data(
        self,
        pair: str,
        interval: int = 1,
        since: str | int | None = None,
    ) -> OHLCSeries:
        """Candles for *pair*.

        Args:
            pair: Pair code; the response is looked up under this exact key.
            interval: Candle width in minutes, one of ``OHLC_INTERVALS``.
            since: Exclusive cursor, normally the ``last`` of a previous call.

        The final entry is the current, not-yet-committed candle and is
        always returned regardless of *since*.
        """
        _require_pair(pair)
        if interval not in OHLC_INTERVALS:
            raise InvalidArgument(
                f"interval must be one of {', '.join(map(str, OHLC_INTERVALS))}, got {interval}"
            )
        params = {"pair": pair, "interval": str(interval)}
        if since not in (None, ""):
            params["since"] = str(since)
        return decoder.decode_ohlc(self._get("OHLC", params), pair)

    def get_order_book(self, pair: str, count: int = 100) -> dict[str, OrderBook]:
        """Order book depth for *pair*, at most *count* levels per side."""
        _require_pair(pair)
        if count < 1:
            raise InvalidArgument(f"count must be positive, got {count}")
        return decoder.decode_depth(self._get("Depth", {"pair": pair, "count": str(count)}))

    def get_trades(self, pair: str, since: str | None = None) -> TradeBook:
        """Recent trades for *pair*; pass the returned ``last`` as *since* to poll."""
        _require_pair(pair)
        params = {"pair": pair}
        if since:
            params["since"] = since
        return decoder.decode_trades(self._get("Trades", params))
