# src/swapwatch/application/valuation.py
"""
Pool Valuation - RUNE/USD Rate and USD Value of Asset Amounts

This module prices assets from liquidity pool depths. RUNE is priced in USD
from a fixed set of stablecoin anchor pools, weighted by depth so that a
thin anchor cannot skew the rate. Any other asset is priced in RUNE from its
own pool and converted with that rate.

Every function here is pure and total: malformed or missing input degrades
to a zero valuation instead of raising.

Files that USE this module:
- swapwatch.application.swap_board (values deposits for the swap board)
- tests.test_valuation (unit tests)

Files that this module USES:
- swapwatch.domain.assets (asset resolution and pool-key normalization)
- swapwatch.domain.models (PoolState, StreamingSwapRecord)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging degraded valuations
from decimal import Decimal, InvalidOperation  # Exact decimal arithmetic for depth ratios
from typing import Iterable, Optional, Sequence, Union  # Type hints

from swapwatch.domain.assets import (
    format_asset,  # Canonical CHAIN.SYMBOL pool key
    is_native_rune,  # THOR.RUNE check
    normalize_for_pool_lookup,  # Clear synth/trade flags
    resolve_asset,  # Tag or identifier to AssetIdentifier
)
from swapwatch.domain.models import AssetIdentifier, PoolState, StreamingSwapRecord

log = logging.getLogger(__name__)

RUNE_BASE = Decimal(10) ** 8
ZERO = Decimal(0)

ANCHOR_POOLS: tuple[str, ...] = (
    "ETH.USDC-0XA0B86991C6218B36C1D19D4A2E9EB0CE3606EB48",
    "ETH.USDT-0XDAC17F958D2EE523A2206206994597C13D831EC7",
    "AVAX.USDC-0XB97EF9EF8734C71904D8002F8B6BC66DD9C48A6E",
    "BNB.BUSD-BD1",
)


def _to_decimal(value: Union[int, str, Decimal]) -> Optional[Decimal]:
    """
    Convert a base-unit amount to Decimal.

    Args:
        value: Integer, integer string (e.g. '150000000') or Decimal

    Returns:
        Decimal value, or None if the value is not numeric
    """
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def _scaled_asset_depth(pool: PoolState) -> Decimal:
    decimals = pool.decimals or 8
    return Decimal(pool.asset_depth or 0) / (Decimal(10) ** decimals)


def _scaled_rune_depth(pool: PoolState) -> Decimal:
    return Decimal(pool.rune_depth or 0) / RUNE_BASE


def usd_per_rune(pools: Iterable[PoolState], anchors: Sequence[str] = ANCHOR_POOLS) -> Decimal:
    """
    Depth-weighted USD price of one RUNE across the anchor pools.

    Sums the scaled stablecoin depth and the scaled RUNE depth of every
    anchor pool present and returns their ratio. This is not the mean of
    per-pool prices.

    Args:
        pools: Pool snapshot (non-anchor pools are ignored)
        anchors: Allowlisted anchor pool tags

    Returns:
        USD per RUNE, or 0 when no anchor RUNE depth is available
    """
    asset_total = ZERO
    rune_total = ZERO
    for pool in pools or ():
        if pool.asset_tag not in anchors:
            continue
        asset_total += _scaled_asset_depth(pool)
        rune_total += _scaled_rune_depth(pool)

    if rune_total == 0:
        log.debug("No anchor pool RUNE depth available, usd_per_rune=0")
        return ZERO
    return asset_total / rune_total


def find_pool(pools: Iterable[PoolState], asset_tag: str) -> Optional[PoolState]:
    """Return the first pool keyed by ``asset_tag``, or None."""
    for pool in pools or ():
        if pool.asset_tag == asset_tag:
            return pool
    return None


def price_in_rune(pool: PoolState) -> Decimal:
    """RUNE per one whole unit of the pool asset, or 0 for an empty pool."""
    asset_depth = _scaled_asset_depth(pool)
    rune_depth = _scaled_rune_depth(pool)
    if not asset_depth or not rune_depth:
        return ZERO
    return rune_depth / asset_depth


def amount_to_usd(
    asset: Union[str, AssetIdentifier, None],
    amount_base_units: Union[int, str, None],
    pools: Optional[Sequence[PoolState]],
) -> Decimal:
    """
    USD value of an asset amount given in base units.

    Synth and trade assets are valued through their layer-1 pool. Native RUNE
    is converted with the anchor rate directly.

    Args:
        asset: Asset tag in any layer notation, or an AssetIdentifier
        amount_base_units: Amount in base units (1e8 per whole unit)
        pools: Pool snapshot

    Returns:
        USD value, or 0 when the input is missing, the asset cannot be
        resolved, or no usable pool exists
    """
    if not asset or not amount_base_units or not pools:
        log.debug("amount_to_usd: missing input (asset=%r, amount=%r, pools=%d)",
                  asset, amount_base_units, len(pools or ()))
        return ZERO

    resolved = resolve_asset(asset)
    if resolved is None:
        log.debug("amount_to_usd: cannot resolve asset %r", asset)
        return ZERO

    base_units = _to_decimal(amount_base_units)
    if base_units is None:
        log.debug("amount_to_usd: non-numeric amount %r", amount_base_units)
        return ZERO

    lookup = normalize_for_pool_lookup(resolved)
    amount = base_units / RUNE_BASE

    if is_native_rune(lookup):
        return amount * usd_per_rune(pools)

    asset_tag = format_asset(lookup)
    pool = find_pool(pools, asset_tag)
    if pool is None:
        log.debug("amount_to_usd: no pool found for asset %s", asset_tag)
        return ZERO

    rune_price = price_in_rune(pool)
    if not rune_price:
        log.debug("amount_to_usd: empty pool depths for %s", asset_tag)
        return ZERO

    return amount * rune_price * usd_per_rune(pools)


def total_usd_value(swaps: Iterable[StreamingSwapRecord], pools: Optional[Sequence[PoolState]]) -> Decimal:
    """
    Sum the USD value of every swap deposit.

    Swaps without a deposit or a source asset are skipped.
    """
    if not pools:
        log.debug("No pools data available for USD calculation")
        return ZERO

    total = ZERO
    for swap in swaps:
        if not swap.deposit_base_units or not swap.source_asset_tag:
            log.debug("Skipping swap %s due to missing deposit or source asset", swap.tx_id)
            continue
        total += amount_to_usd(swap.source_asset_tag, swap.deposit_base_units, pools)
    return total
