# src/swapwatch/application/projector.py
"""
Streaming Swap Projector - Progress and ETA

Derives remaining legs, completion percentage and a human ETA from the
counters of a streaming swap. The block time is a fixed assumption (about
6 seconds per THORChain block), not read from chain state.

Files that USE this module:
- swapwatch.application.swap_board (projects every swap of a snapshot)
- tests.test_projector (unit tests)

Files that this module USES:
- swapwatch.domain.models (StreamingSwapRecord, SwapProgress)
"""
from __future__ import annotations

from swapwatch.domain.models import StreamingSwapRecord, SwapProgress

BLOCK_TIME_SECONDS = 6


def format_eta(remaining_intervals: int, block_time_seconds: int = BLOCK_TIME_SECONDS) -> str:
    """
    Format the time left for ``remaining_intervals`` blocks.

    Args:
        remaining_intervals: Blocks still to be produced (clamped to >= 0)
        block_time_seconds: Assumed seconds per block

    Returns:
        '2h 20m' when at least one hour remains, else '10m' (zero gives '0m')
    """
    seconds = max(0, remaining_intervals) * block_time_seconds
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def project(record: StreamingSwapRecord, block_time_seconds: int = BLOCK_TIME_SECONDS) -> SwapProgress:
    """
    Project the progress of a streaming swap.

    ``count`` is clamped to ``[0, quantity]`` and ``quantity`` is treated as
    at least 1, so remaining legs are never negative and the percentage
    stays within 0-100.
    """
    quantity = max(record.quantity or 0, 1)
    count = min(max(record.count or 0, 0), quantity)

    remaining_swaps = quantity - count
    completion_percent = count * 100 / quantity
    remaining_intervals = max(record.interval_blocks or 0, 0) * remaining_swaps

    return SwapProgress(
        remaining_swaps=remaining_swaps,
        completion_percent=completion_percent,
        eta=format_eta(remaining_intervals, block_time_seconds),
    )
