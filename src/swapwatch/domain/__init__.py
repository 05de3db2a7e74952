# src/swapwatch/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models, asset-tag parsing and error types.
No dependencies on infrastructure or external systems.
"""

from swapwatch.domain.models import (
    AssetAmount,
    AssetIdentifier,
    Coin,
    ParsedMemo,
    PoolState,
    StreamingSwapRecord,
    SwapBoard,
    SwapMemo,
    SwapProgress,
    SwapView,
    TxDetail,
)
from swapwatch.domain.assets import (
    NATIVE_RUNE_TAG,
    format_asset,
    is_native_rune,
    is_synth,
    normalize_for_pool_lookup,
    parse_asset,
    resolve_asset,
)
from swapwatch.domain.errors import (
    DomainError,
    MalformedSnapshotError,
    ProviderUnavailableError,
)

__all__ = [
    "AssetAmount",
    "AssetIdentifier",
    "Coin",
    "ParsedMemo",
    "PoolState",
    "StreamingSwapRecord",
    "SwapBoard",
    "SwapMemo",
    "SwapProgress",
    "SwapView",
    "TxDetail",
    "NATIVE_RUNE_TAG",
    "parse_asset",
    "resolve_asset",
    "format_asset",
    "is_synth",
    "is_native_rune",
    "normalize_for_pool_lookup",
    "DomainError",
    "MalformedSnapshotError",
    "ProviderUnavailableError",
]
