# src/swapwatch/domain/assets.py
"""
Asset Identifiers - Parsing and Canonical Form

THORChain tags assets as ``<chain><sep><symbol>[-<id>]`` where the separator
selects the layer: "." for layer-1 assets, "/" for synths and "~" for trade
assets. Pools are always keyed by the layer-1 form.

Files that USE this module:
- swapwatch.application.valuation (resolves and normalizes assets for pool lookup)
- swapwatch.adapters.formatting.formatter (ticker display)
- tests.test_assets (unit tests)

Files that this module USES:
- swapwatch.domain.models (AssetIdentifier)
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Union

from swapwatch.domain.models import AssetIdentifier

NATIVE_RUNE_TAG = "THOR.RUNE"

LAYER1_SEPARATOR = "."
SYNTH_SEPARATOR = "/"
TRADE_SEPARATOR = "~"


def _build(chain: str, symbol: str, is_synth: bool = False, is_trade_asset: bool = False) -> AssetIdentifier:
    return AssetIdentifier(
        chain=chain,
        symbol=symbol,
        ticker=symbol.split("-")[0],
        is_synth=is_synth,
        is_trade_asset=is_trade_asset,
    )


def parse_asset(tag: Optional[str]) -> Optional[AssetIdentifier]:
    """
    Parse a layer-1 ``CHAIN.SYMBOL`` tag.

    Args:
        tag: Asset tag such as "BTC.BTC" or "ETH.USDC-0XA0B8..."

    Returns:
        AssetIdentifier, or None unless the tag splits into exactly two parts
    """
    if not tag:
        return None
    parts = tag.split(LAYER1_SEPARATOR)
    if len(parts) != 2:
        return None
    chain, symbol = parts
    return _build(chain, symbol)


def resolve_asset(asset: Union[str, AssetIdentifier, None]) -> Optional[AssetIdentifier]:
    """
    Resolve a tag in any layer notation, or pass an identifier through.

    Synth ("ETH/ETH") and trade ("ETH~ETH") tags set the matching flag.
    A tag must contain exactly one separator of a single kind.

    Returns:
        AssetIdentifier, or None for anything else
    """
    if isinstance(asset, AssetIdentifier):
        return asset
    if not asset:
        return None

    found = [sep for sep in (LAYER1_SEPARATOR, SYNTH_SEPARATOR, TRADE_SEPARATOR) if sep in asset]
    if len(found) != 1:
        return None

    separator = found[0]
    parts = asset.split(separator)
    if len(parts) != 2:
        return None
    chain, symbol = parts
    return _build(
        chain,
        symbol,
        is_synth=separator == SYNTH_SEPARATOR,
        is_trade_asset=separator == TRADE_SEPARATOR,
    )


def format_asset(asset: AssetIdentifier) -> str:
    """Return the canonical ``CHAIN.SYMBOL`` string (the ticker is not part of it)."""
    return f"{asset.chain}{LAYER1_SEPARATOR}{asset.symbol}"


def is_synth(asset: AssetIdentifier) -> bool:
    return bool(asset.is_synth)


def normalize_for_pool_lookup(asset: AssetIdentifier) -> AssetIdentifier:
    """Return a copy with the synth and trade flags cleared."""
    return replace(asset, is_synth=False, is_trade_asset=False)


def is_native_rune(asset: AssetIdentifier) -> bool:
    return format_asset(asset) == NATIVE_RUNE_TAG
