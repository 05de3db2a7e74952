# src/swapwatch/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains pool valuation, streaming swap projection, memo
decoding and the swap board use case.
No direct I/O dependencies - detail lookups are injected.
"""

from swapwatch.application.valuation import (
    ANCHOR_POOLS,
    amount_to_usd,
    find_pool,
    price_in_rune,
    total_usd_value,
    usd_per_rune,
)
from swapwatch.application.projector import BLOCK_TIME_SECONDS, format_eta, project
from swapwatch.application.memo import parse_memo
from swapwatch.application.swap_board import SwapBoardService

__all__ = [
    "ANCHOR_POOLS",
    "amount_to_usd",
    "find_pool",
    "price_in_rune",
    "total_usd_value",
    "usd_per_rune",
    "BLOCK_TIME_SECONDS",
    "format_eta",
    "project",
    "parse_memo",
    "SwapBoardService",
]
