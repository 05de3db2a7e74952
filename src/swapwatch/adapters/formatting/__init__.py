# src/swapwatch/adapters/formatting/__init__.py
"""
Formatting Adapters - Output Formatting

This package contains display helpers for the swap board.
"""

from swapwatch.adapters.formatting.formatter import (
    asset_color,
    base_amount_format,
    board_lines,
    describe_memo,
    format_address,
    format_number,
    format_usd_value,
    swap_lines,
    tx_url,
)
from swapwatch.adapters.formatting.style import WidgetStyle

__all__ = [
    "asset_color",
    "base_amount_format",
    "board_lines",
    "describe_memo",
    "format_address",
    "format_number",
    "format_usd_value",
    "swap_lines",
    "tx_url",
    "WidgetStyle",
]
