# tests/test_providers.py
"""
Provider Tests - Unit Tests for the Thornode Snapshot Provider

This module contains unit tests for the thornode provider, including
snapshot mapping helpers, HTTP error handling, and per-transaction detail
lookups.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- swapwatch.adapters.providers.thornode (ThornodeProvider and mapping helpers)
- swapwatch.config (Settings for endpoint URLs)
- swapwatch.domain (models and errors)
- unittest.mock (Mock for API mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from decimal import Decimal  # Expected price values
from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls
import requests  # HTTP library (used for mocking responses)

from swapwatch.adapters.providers.thornode import (
    ThornodeProvider,
    detail_from_snapshot,
    pool_from_snapshot,
    swap_from_snapshot,
)
from swapwatch.config import Settings, settings
from swapwatch.domain.errors import MalformedSnapshotError, ProviderUnavailableError
from swapwatch.domain.models import Coin, PoolState

TX_ID = "E" * 64


def _response(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class TestSnapshotMapping:
    def test_pool_from_snapshot(self):
        pool = pool_from_snapshot({
            "asset": "BTC.BTC",
            "balance_asset": "123400000",
            "balance_rune": "987600000000",
            "decimals": 8,
            "asset_tor_price": "6500000000000",
        })
        assert pool == PoolState(
            asset_tag="BTC.BTC",
            asset_depth=123400000,
            rune_depth=987600000000,
            decimals=8,
            asset_price_usd=Decimal(65000),
        )

    def test_pool_decimals_default(self):
        assert pool_from_snapshot({"asset": "BTC.BTC"}).decimals == 8
        assert pool_from_snapshot({"asset": "BTC.BTC", "decimals": 0}).decimals == 8
        assert pool_from_snapshot({"asset": "ETH.USDC-0XA0", "decimals": 6}).decimals == 6

    def test_pool_bad_numbers(self):
        pool = pool_from_snapshot({"asset": "X.Y", "balance_asset": "n/a", "asset_tor_price": "n/a"})
        assert pool.asset_depth == 0
        assert pool.asset_price_usd is None

    def test_pool_without_asset(self):
        with pytest.raises(MalformedSnapshotError):
            pool_from_snapshot({"balance_asset": "1"})

    def test_swap_from_snapshot(self):
        swap = swap_from_snapshot({
            "tx_id": TX_ID,
            "count": 3,
            "quantity": 10,
            "interval": 5,
            "source_asset": "ETH.ETH",
            "target_asset": "BTC.BTC",
            "deposit": "250000000",
            "trade_target": "1000",
        })
        assert swap.tx_id == TX_ID
        assert swap.count == 3
        assert swap.quantity == 10
        assert swap.interval_blocks == 5
        assert swap.source_asset_tag == "ETH.ETH"
        assert swap.target_asset_tag == "BTC.BTC"
        assert swap.deposit_base_units == 250000000
        assert swap.trade_target == 1000

    def test_swap_defaults(self):
        swap = swap_from_snapshot({"tx_id": TX_ID, "quantity": 0})
        assert swap.count == 0
        assert swap.quantity == 1
        assert swap.interval_blocks == 0
        assert swap.deposit_base_units == 0
        assert swap.trade_target is None

    def test_swap_without_tx_id(self):
        with pytest.raises(MalformedSnapshotError):
            swap_from_snapshot({"count": 1})

    def test_detail_from_snapshot(self):
        detail = detail_from_snapshot({
            "tx": {"coins": [{"asset": "ETH.ETH", "amount": "100"}]},
            "out_txs": [
                {"coins": [{"asset": "BTC.BTC", "amount": "5000"}, {"asset": "THOR.RUNE", "amount": "1"}]},
                {"coins": [{"asset": "THOR.RUNE", "amount": "2"}]},
            ],
        })
        assert detail.first_outbound_coin() == Coin(asset="BTC.BTC", amount=5000)
        assert len(detail.outbound_coins) == 2

    def test_detail_without_outbound(self):
        assert detail_from_snapshot({}).first_outbound_coin() is None
        assert detail_from_snapshot({"out_txs": [{"coins": []}]}).first_outbound_coin() is None


class TestThornodeProvider:
    def test_init_with_defaults(self):
        provider = ThornodeProvider()
        assert provider.timeout == 10
        assert provider.base_url == "https://thornode.ninerealms.com/thorchain"

    def test_init_custom(self):
        provider = ThornodeProvider(base_url="http://localhost:1317/thorchain/", timeout=3)
        assert provider.base_url == "http://localhost:1317/thorchain"
        assert provider.timeout == 3

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_get_pools(self, mock_get):
        mock_get.return_value = _response([
            {"asset": "BTC.BTC", "balance_asset": "100", "balance_rune": "200"},
            {"balance_asset": "1"},
            "garbage",
        ])

        pools = ThornodeProvider().get_pools()

        assert [p.asset_tag for p in pools] == ["BTC.BTC"]
        mock_get.assert_called_once_with("https://thornode.ninerealms.com/thorchain/pools", timeout=10)

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_get_streaming_swaps(self, mock_get):
        mock_get.return_value = _response([{"tx_id": TX_ID, "count": 1, "quantity": 2}])

        swaps = ThornodeProvider().get_streaming_swaps()

        assert len(swaps) == 1
        assert swaps[0].count == 1
        assert mock_get.call_args[0][0].endswith("/swaps/streaming")

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_request_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.RequestException("API Error")
        with pytest.raises(ProviderUnavailableError, match="Thornode request failed"):
            ThornodeProvider().get_pools()

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()
        with pytest.raises(ProviderUnavailableError, match="timeout"):
            ThornodeProvider().get_streaming_swaps()

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_invalid_json(self, mock_get):
        response = Mock()
        response.raise_for_status.return_value = None
        response.json.side_effect = ValueError("Invalid JSON")
        mock_get.return_value = response
        with pytest.raises(MalformedSnapshotError, match="invalid JSON"):
            ThornodeProvider().get_pools()

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_non_list_response(self, mock_get):
        mock_get.return_value = _response({"error": "not found"})
        with pytest.raises(MalformedSnapshotError, match="non-list"):
            ThornodeProvider().get_pools()

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_get_tx_detail(self, mock_get):
        mock_get.return_value = _response({"out_txs": [{"coins": [{"asset": "BTC.BTC", "amount": "7"}]}]})

        detail = ThornodeProvider().get_tx_detail(TX_ID)

        assert detail.first_outbound_coin() == Coin(asset="BTC.BTC", amount=7)
        assert mock_get.call_args[0][0].endswith(f"/tx/status/{TX_ID}")

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_get_tx_detail_failure_returns_none(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("down")
        assert ThornodeProvider().get_tx_detail(TX_ID) is None

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_get_tx_detail_unexpected_payload(self, mock_get):
        mock_get.return_value = _response(["not", "a", "dict"])
        assert ThornodeProvider().get_tx_detail(TX_ID) is None

    @pytest.mark.parametrize("tx_id", ["", "   ", None])
    def test_get_tx_detail_empty_id(self, tx_id):
        with patch('swapwatch.adapters.providers.thornode.requests.get') as mock_get:
            assert ThornodeProvider().get_tx_detail(tx_id) is None
            mock_get.assert_not_called()

    @patch('swapwatch.adapters.providers.thornode.requests.get')
    def test_get_tx_detail_non_hex_id_still_fetched(self, mock_get):
        mock_get.return_value = _response({"out_txs": [{"coins": [{"asset": "GAIA.ATOM", "amount": "3"}]}]})

        detail = ThornodeProvider().get_tx_detail("cosmos-tx/42")

        assert detail.first_outbound_coin() == Coin(asset="GAIA.ATOM", amount=3)
        assert mock_get.call_args[0][0].endswith("/tx/status/cosmos-tx%2F42")


class TestThornodeEndpoints:
    def test_default_urls_come_from_settings(self):
        provider = ThornodeProvider()
        assert provider.pools_url == settings.POOLS_URL
        assert provider.streaming_swaps_url == settings.STREAMING_SWAPS_URL
        assert provider.tx_status_url == settings.TX_STATUS_URL

    def test_custom_base_url(self):
        provider = ThornodeProvider(base_url="http://localhost:1317/thorchain/")
        assert provider.pools_url == "http://localhost:1317/thorchain/pools"
        assert provider.streaming_swaps_url == "http://localhost:1317/thorchain/swaps/streaming"
        assert provider.tx_status_url == "http://localhost:1317/thorchain/tx/status/"

    def test_configured_node_is_requested(self):
        custom = Settings(THORNODE_URL="http://node.local/thorchain")
        with patch('swapwatch.adapters.providers.thornode.settings', custom), \
                patch('swapwatch.adapters.providers.thornode.requests.get') as mock_get:
            mock_get.return_value = _response([])
            ThornodeProvider().get_streaming_swaps()
        mock_get.assert_called_once_with("http://node.local/thorchain/swaps/streaming", timeout=10)
