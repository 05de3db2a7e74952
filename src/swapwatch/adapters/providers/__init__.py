# src/swapwatch/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains the thornode client that supplies pool and streaming
swap snapshots.
"""

from swapwatch.adapters.providers.thornode import (
    ThornodeProvider,
    detail_from_snapshot,
    pool_from_snapshot,
    swap_from_snapshot,
)

__all__ = [
    "ThornodeProvider",
    "detail_from_snapshot",
    "pool_from_snapshot",
    "swap_from_snapshot",
]
