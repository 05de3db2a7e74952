# src/swapwatch/application/swap_board.py
"""
Swap Board Service - Enrich a Streaming Swap Snapshot for Display

This module combines one pool snapshot and one streaming swap snapshot into
a SwapBoard: every swap gets its projected progress, the input and output
assets, and the USD value of its deposit. Per-transaction detail is looked
up through an injected callable so the service itself performs no I/O.

Detail lookups for one snapshot run concurrently on a thread pool; the
board keeps snapshot order. A failed or empty detail lookup drops that swap
from the board. It is logged and not retried.

Files that USE this module:
- swapwatch.app (composition root builds the board on every refresh)
- tests.test_swap_board (unit tests)

Files that this module USES:
- swapwatch.application.projector (progress and ETA)
- swapwatch.application.valuation (USD valuation, RUNE/USD rate)
- swapwatch.domain.models (snapshot and board value objects)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging dropped swaps
from concurrent.futures import ThreadPoolExecutor  # Concurrent detail lookups
from decimal import Decimal  # Human-scale amounts
from typing import Callable, Iterable, List, Optional, Sequence  # Type hints

from swapwatch.application.projector import BLOCK_TIME_SECONDS, project  # Progress projection
from swapwatch.application.valuation import (
    RUNE_BASE,  # 1e8 base-unit scale
    amount_to_usd,  # Per-deposit USD valuation
    total_usd_value,  # Snapshot-wide USD total
    usd_per_rune,  # Anchor RUNE/USD rate
)
from swapwatch.domain.models import (
    AssetAmount,
    PoolState,
    StreamingSwapRecord,
    SwapBoard,
    SwapView,
    TxDetail,
)

log = logging.getLogger(__name__)

DetailLookup = Callable[[str], Optional[TxDetail]]

MAX_LOOKUP_WORKERS = 8


def _human_amount(base_units: int) -> Decimal:
    return Decimal(base_units or 0) / RUNE_BASE


class SwapBoardService:
    """
    Builds a SwapBoard from pool and streaming swap snapshots.

    Holds no state between calls; the same snapshots always give the same
    board.
    """
    def __init__(
        self,
        detail_lookup: DetailLookup,
        block_time_seconds: int = BLOCK_TIME_SECONDS,
        max_workers: int = MAX_LOOKUP_WORKERS,
    ):
        """
        Initialize the service.

        Args:
            detail_lookup: Callable returning TxDetail for a tx id, or None
            block_time_seconds: Assumed seconds per block for ETAs
            max_workers: Upper bound on concurrent detail lookups
        """
        self.detail_lookup = detail_lookup
        self.block_time_seconds = block_time_seconds
        self.max_workers = max(1, max_workers)

    def _lookup(self, tx_id: str) -> Optional[TxDetail]:
        try:
            return self.detail_lookup(tx_id)
        except Exception as e:
            log.warning("Detail lookup failed for %s, dropping swap: %s", tx_id, e)
            return None

    def enrich(self, swap: StreamingSwapRecord, pools: Sequence[PoolState]) -> Optional[SwapView]:
        """
        Enrich one swap, or return None when its detail is unavailable.

        Args:
            swap: Streaming swap counters
            pools: Pool snapshot used for valuation

        Returns:
            SwapView, or None if the detail lookup failed
        """
        return self._view(swap, self._lookup(swap.tx_id), pools)

    def _view(
        self, swap: StreamingSwapRecord, detail: Optional[TxDetail], pools: Sequence[PoolState]
    ) -> Optional[SwapView]:
        if detail is None:
            log.warning("No detail for streaming swap %s, dropping it", swap.tx_id)
            return None

        output_coin = detail.first_outbound_coin()
        output_asset = (
            AssetAmount(asset=output_coin.asset, amount=_human_amount(output_coin.amount))
            if output_coin is not None
            else None
        )

        return SwapView(
            record=swap,
            progress=project(swap, self.block_time_seconds),
            input_asset=AssetAmount(
                asset=swap.source_asset_tag,
                amount=_human_amount(swap.deposit_base_units),
            ),
            output_asset=output_asset,
            deposit_usd=amount_to_usd(swap.source_asset_tag, swap.deposit_base_units, pools),
        )

    def build(self, pools: Sequence[PoolState], swaps: Iterable[StreamingSwapRecord]) -> SwapBoard:
        """
        Build the board for one snapshot.

        The USD total covers every swap in the snapshot, including swaps
        dropped for missing detail.
        """
        swaps = list(swaps)
        details: List[Optional[TxDetail]] = []
        if swaps:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(swaps))) as executor:
                details = list(executor.map(self._lookup, [swap.tx_id for swap in swaps]))

        views = []
        for swap, detail in zip(swaps, details):
            view = self._view(swap, detail, pools)
            if view is not None:
                views.append(view)

        board = SwapBoard(
            swaps=tuple(views),
            total_usd=total_usd_value(swaps, pools),
            usd_per_rune=usd_per_rune(pools),
        )
        log.info("Built swap board: %d/%d swaps, total_usd=%s", len(views), len(swaps), board.total_usd)
        return board
