# src/swapwatch/app.py
"""
Application Entry Point - Composition Root

This module wires the thornode provider, the swap board service and the
formatter. ``refresh`` performs one on-demand update; scheduling it (timer,
event, manual) is left to the host, which can read
``settings.refresh_interval_seconds`` for a default cadence.

Files that USE this module:
- swapwatch.__main__ (python -m swapwatch)
- tests.test_app (unit tests)

Files that this module USES:
- swapwatch.shared.logging_conf (setup_logging for logging configuration)
- swapwatch.config (settings for configuration management)
- swapwatch.adapters.providers.thornode (ThornodeProvider for snapshots)
- swapwatch.application.swap_board (SwapBoardService for enrichment)
- swapwatch.adapters.formatting (board_lines and WidgetStyle for output)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages and errors
from typing import Optional  # Type hints for optional collaborators

from swapwatch.adapters.formatting import WidgetStyle, board_lines  # Board text rendering
from swapwatch.adapters.providers.thornode import ThornodeProvider  # Snapshot source
from swapwatch.application.swap_board import SwapBoardService  # Snapshot enrichment
from swapwatch.config import settings  # Application settings
from swapwatch.domain.errors import DomainError  # Snapshot-level failures
from swapwatch.domain.models import SwapBoard  # Refresh result
from swapwatch.shared.logging_conf import setup_logging  # Configure logging with file rotation

log = logging.getLogger(__name__)


def refresh(
    provider: Optional[ThornodeProvider] = None,
    service: Optional[SwapBoardService] = None,
) -> SwapBoard:
    """
    Fetch one pool and streaming swap snapshot and build the board.

    Args:
        provider: Snapshot source (defaults to ThornodeProvider())
        service: Board builder (defaults to one using the provider's detail lookup)

    Returns:
        SwapBoard for the snapshot

    Raises:
        DomainError: If either snapshot cannot be fetched or decoded
    """
    provider = provider or ThornodeProvider()
    service = service or SwapBoardService(
        detail_lookup=provider.get_tx_detail,
        block_time_seconds=settings.block_time_seconds,
    )

    pools = provider.get_pools()
    swaps = provider.get_streaming_swaps()
    return service.build(pools, swaps)


def main(provider: Optional[ThornodeProvider] = None) -> int:
    """
    Run a single refresh and print the board.

    Returns:
        Process exit code: 0 on success, 1 when the snapshot is unavailable
    """
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    log.info("Refreshing streaming swaps from %s", settings.thornode_url)

    try:
        board = refresh(provider=provider)
    except DomainError as e:
        log.error("Failed to fetch streaming swaps: %s", e)
        print("Error: Failed to fetch streaming swaps")
        return 1

    print(board_lines(board, WidgetStyle.from_settings(settings)))
    return 0
