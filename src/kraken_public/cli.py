"""Command line access to the public endpoints.

Run: python -m kraken_public [--config config.yaml] <command> [args]

Results are printed to stdout as JSON; decimals are printed as strings
exactly as the exchange sent them.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from pydantic import BaseModel

from kraken_public.client import KrakenClient
from kraken_public.config import AppConfig, load_config
from kraken_public.errors import KrakenError, TransportError
from kraken_public.logging import get_logger, setup_logging
from kraken_public.pairs import OHLC_INTERVALS

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kraken-public", description="Kraken public market data"
    )
    parser.add_argument("--config", default="config.yaml", help="Path to config file")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("time", help="Server time")
    sub.add_parser("assets", help="Asset info")
    sub.add_parser("pairs", help="Tradable asset pairs")

    ticker = sub.add_parser("ticker", help="Ticker snapshots")
    ticker.add_argument("pair", nargs="*", help="Pair codes (default: pairs from config)")

    ohlc = sub.add_parser("ohlc", help="OHLC candles")
    ohlc.add_argument("pair")
    ohlc.add_argument("--interval", type=int, default=1, choices=OHLC_INTERVALS)
    ohlc.add_argument("--since", default=None)

    depth = sub.add_parser("depth", help="Order book")
    depth.add_argument("pair")
    depth.add_argument("--count", type=int, default=100)

    trades = sub.add_parser("trades", help="Recent trades")
    trades.add_argument("pair")
    trades.add_argument("--since", default=None)

    return parser


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, dict):
        return {key: _dump(v) for key, v in value.items()}
    return value


def execute(args: argparse.Namespace, client: KrakenClient, cfg: AppConfig) -> Any:
    """Run the parsed command against *client* and return the typed result."""
    if args.command == "time":
        return client.get_server_time()
    if args.command == "assets":
        return client.get_assets_info()
    if args.command == "pairs":
        return client.get_tradable_pairs()
    if args.command == "ticker":
        return client.get_ticker_info(args.pair or cfg.pairs)
    if args.command == "ohlc":
        return client.get_ohlc_data(args.pair, interval=args.interval, since=args.since)
    if args.command == "depth":
        return client.get_order_book(args.pair, count=args.count)
    if args.command == "trades":
        return client.get_trades(args.pair, since=args.since)
    raise ValueError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None, client: KrakenClient | None = None) -> None:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    setup_logging(level=cfg.logging.level, log_format=cfg.logging.format)

    if client is None:
        client = KrakenClient.from_config(cfg.client)

    try:
        with client:
            result = execute(args, client, cfg)
    except (KrakenError, TransportError) as exc:
        log.error("command failed", command=args.command, error=str(exc))
        sys.exit(1)

    print(json.dumps(_dump(result), indent=2))


if __name__ == "__main__":
    main()
