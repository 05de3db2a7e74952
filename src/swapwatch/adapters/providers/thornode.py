# src/swapwatch/adapters/providers/thornode.py
"""
Thornode API Provider for Pool and Streaming Swap Snapshots

This module implements the thornode REST client that supplies the raw
snapshots SwapWatch values: pool depths, in-flight streaming swaps, and the
per-transaction status used to find a swap's output coin. Responses are
mapped into domain models; nothing is cached and nothing is retried.

Files that USE this module:
- swapwatch.app (fetches snapshots on every refresh)
- tests.test_providers (unit tests)

Files that this module USES:
- swapwatch.config (settings for endpoint URLs and HTTP timeout)
- swapwatch.domain (snapshot models and provider errors)
- swapwatch.shared.validators (tx id format check)
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from swapwatch.config import settings
from swapwatch.domain.errors import MalformedSnapshotError, ProviderUnavailableError
from swapwatch.domain.models import Coin, PoolState, StreamingSwapRecord, TxDetail
from swapwatch.shared.validators import validate_tx_id

log = logging.getLogger(__name__)

# thornode reports asset_tor_price with 8 decimals
TOR_PRICE_SCALE = Decimal(10) ** 8


def _to_int(value: Any, default: int = 0) -> int:
    """
    Convert a thornode numeric field to int.

    Args:
        value: Integer or integer string (e.g. '150000000'), or None

    Returns:
        Integer value, or ``default`` when missing or not numeric
    """
    if value is None or value == "":
        return default
    try:
        return int(str(value))
    except ValueError:
        return default


def pool_from_snapshot(raw: Dict[str, Any]) -> PoolState:
    """
    Map one ``/pools`` entry to a PoolState.

    Raises:
        MalformedSnapshotError: If the entry has no asset tag
    """
    asset = raw.get("asset")
    if not asset:
        raise MalformedSnapshotError(f"Pool entry without asset: {raw!r}")

    price = None
    if raw.get("asset_tor_price"):
        try:
            price = Decimal(str(raw["asset_tor_price"])) / TOR_PRICE_SCALE
        except InvalidOperation:
            log.debug("Ignoring non-numeric asset_tor_price for %s", asset)

    return PoolState(
        asset_tag=asset,
        asset_depth=_to_int(raw.get("balance_asset")),
        rune_depth=_to_int(raw.get("balance_rune")),
        decimals=_to_int(raw.get("decimals"), 8) or 8,
        asset_price_usd=price,
    )


def swap_from_snapshot(raw: Dict[str, Any]) -> StreamingSwapRecord:
    """
    Map one ``/swaps/streaming`` entry to a StreamingSwapRecord.

    Missing counters default to count 0, quantity 1, interval 0, deposit 0.

    Raises:
        MalformedSnapshotError: If the entry has no tx id
    """
    tx_id = raw.get("tx_id")
    if not tx_id:
        raise MalformedSnapshotError(f"Streaming swap entry without tx_id: {raw!r}")

    trade_target = raw.get("trade_target")
    return StreamingSwapRecord(
        tx_id=tx_id,
        count=_to_int(raw.get("count")),
        quantity=_to_int(raw.get("quantity"), 1) or 1,
        interval_blocks=_to_int(raw.get("interval")),
        source_asset_tag=raw.get("source_asset") or "",
        target_asset_tag=raw.get("target_asset") or "",
        deposit_base_units=_to_int(raw.get("deposit")),
        trade_target=_to_int(trade_target) if trade_target not in (None, "") else None,
    )


def detail_from_snapshot(raw: Dict[str, Any]) -> TxDetail:
    """Map a ``/tx/status/{hash}`` response to a TxDetail (outbound coins only)."""
    outbound = []
    for out_tx in raw.get("out_txs") or []:
        coins = tuple(
            Coin(asset=coin.get("asset", ""), amount=_to_int(coin.get("amount")))
            for coin in (out_tx.get("coins") or [])
            if isinstance(coin, dict)
        )
        outbound.append(coins)
    return TxDetail(outbound_coins=tuple(outbound))


class ThornodeProvider:
    """
    Thornode REST provider for pool, streaming swap and tx status snapshots.

    The node returns JSON lists for ``/pools`` and ``/swaps/streaming`` and a
    JSON object for ``/tx/status/{hash}``.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize thornode provider.

        Args:
            base_url: Optional node URL (defaults to settings.thornode_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        node = settings if base_url is None else settings.model_copy(update={"thornode_url": base_url})
        self.base_url = node.thornode_url.rstrip("/")
        self.pools_url = node.POOLS_URL
        self.streaming_swaps_url = node.STREAMING_SWAPS_URL
        self.tx_status_url = node.TX_STATUS_URL
        self.timeout = timeout or settings.http_timeout_seconds

    def _get_json(self, url: str) -> Any:
        """
        GET ``url`` and decode the JSON body.

        Raises:
            ProviderUnavailableError: On timeout, connection or HTTP errors
            MalformedSnapshotError: If the body is not valid JSON
        """
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout:
            log.error("Thornode timeout after %d seconds: %s", self.timeout, url)
            raise ProviderUnavailableError(f"Thornode timeout after {self.timeout}s: {url}")
        except requests.exceptions.RequestException as e:
            log.error("Thornode request failed: %s", e)
            raise ProviderUnavailableError(f"Thornode request failed: {e}")

        try:
            return resp.json()
        except ValueError as e:
            log.error("Thornode returned invalid JSON for %s: %s", url, e)
            raise MalformedSnapshotError(f"Thornode returned invalid JSON: {e}")

    def _get_list(self, url: str) -> List[Dict[str, Any]]:
        data = self._get_json(url)
        if not isinstance(data, list):
            log.error("Thornode unexpected response type for %s: %r", url, type(data))
            raise MalformedSnapshotError(f"Thornode returned non-list JSON for {url}")
        return data

    def get_pools(self) -> List[PoolState]:
        """
        Fetch the pool snapshot.

        Malformed entries are skipped with a warning.

        Returns:
            PoolState list in node order
        """
        pools = []
        for raw in self._get_list(self.pools_url):
            try:
                pools.append(pool_from_snapshot(raw))
            except (MalformedSnapshotError, AttributeError) as e:
                log.warning("Skipping malformed pool entry: %s", e)
        log.info("Fetched %d pools from thornode", len(pools))
        return pools

    def get_streaming_swaps(self) -> List[StreamingSwapRecord]:
        """
        Fetch the in-flight streaming swaps.

        Malformed entries are skipped with a warning.
        """
        swaps = []
        for raw in self._get_list(self.streaming_swaps_url):
            try:
                swaps.append(swap_from_snapshot(raw))
            except (MalformedSnapshotError, AttributeError) as e:
                log.warning("Skipping malformed streaming swap entry: %s", e)
        log.info("Fetched %d streaming swaps from thornode", len(swaps))
        return swaps

    def get_tx_detail(self, tx_id: str) -> Optional[TxDetail]:
        """
        Fetch the status of one transaction.

        Returns:
            TxDetail, or None for an empty tx id or any fetch failure
        """
        if not tx_id or not tx_id.strip():
            log.warning("Not fetching detail for empty tx id %r", tx_id)
            return None
        if not validate_tx_id(tx_id):
            # some chains use other hash formats; let the node decide
            log.info("Fetching detail for non-standard tx id %r", tx_id)

        try:
            data = self._get_json(f"{self.tx_status_url}{quote(tx_id.strip(), safe='')}")
        except (ProviderUnavailableError, MalformedSnapshotError) as e:
            log.warning("Error fetching swap details for %s: %s", tx_id, e)
            return None

        if not isinstance(data, dict):
            log.warning("Unexpected tx status payload for %s: %r", tx_id, type(data))
            return None
        return detail_from_snapshot(data)
