"""Tests for the command line entry point."""

from __future__ import annotations

import json

import pytest

from kraken_public.cli import build_parser, main

from payloads import DUST_TRADES, UNKNOWN_PAIR


@pytest.fixture
def no_config(tmp_path):
    return str(tmp_path / "absent.yaml")


@pytest.fixture
def run(make_client, capsys):
    def _run(argv, recorder):
        main(argv, client=make_client(recorder))
        return json.loads(capsys.readouterr().out)

    return _run


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_interval_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["ohlc", "XXBTZEUR", "--interval", "7"])

    def test_defaults(self):
        args = build_parser().parse_args(["depth", "XXBTZEUR"])
        assert args.count == 100
        assert args.config == "config.yaml"


class TestMain:
    def test_time(self, no_config, recorder, run):
        out = run(["--config", no_config, "time"], recorder)
        assert out["unix_seconds"] == 1493752708

    def test_ticker_uses_config_pairs(self, no_config, recorder, run):
        out = run(["--config", no_config, "ticker"], recorder)
        assert recorder.last.url.params["pair"] == "XXBTZEUR"
        assert out["XXBTZEUR"]["opening_price"] == "1418.99900"

    def test_ticker_explicit_pairs(self, no_config, recorder, run):
        run(["--config", no_config, "ticker", "XXBTZEUR", "XETHXXBT"], recorder)
        assert recorder.last.url.params["pair"] == "XXBTZEUR,XETHXXBT"

    def test_ohlc_prints_decimal_text(self, no_config, recorder, run):
        out = run(["--config", no_config, "ohlc", "XXBTZEUR", "--interval", "5"], recorder)
        assert recorder.last.url.params["interval"] == "5"
        assert out["entries"][-1]["volume"] == "3.93936569"
        assert out["last"] == 1493786400

    def test_trades(self, no_config, recorder, run):
        out = run(["--config", no_config, "trades", "XXBTZEUR"], recorder)
        assert out["pair"] == "XXBTZEUR"
        assert out["last"] == "1493926890306801911"
        assert len(out["trades"]) == 4

    def test_tiny_amounts_print_positionally(self, no_config, make_recorder, run):
        out = run(["--config", no_config, "trades", "XXDGXXBT"], make_recorder(routes={"Trades": DUST_TRADES}))
        assert out["trades"][0]["volume"] == "0.00000010"
        assert out["trades"][0]["price"] == "0.000000250"

    def test_api_error_exits_non_zero(self, no_config, make_client, make_recorder, capsys):
        client = make_client(make_recorder(routes={"Depth": UNKNOWN_PAIR}))
        with pytest.raises(SystemExit) as exc:
            main(["--config", no_config, "depth", "NOPE"], client=client)
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "EQuery:Unknown asset pair" in captured.err
