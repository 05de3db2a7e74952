# src/swapwatch/adapters/formatting/formatter.py
"""
Board Formatter - Text Formatting and Presentation

This module turns valuation and projection results into display strings:
USD values with K/M/B suffixes, grouped amounts, shortened addresses,
explorer links, deterministic asset colours, and plain-text lines for each
streaming swap on the board.

Files that USE this module:
- swapwatch.app (prints board_lines after each refresh)
- tests.test_formatter (unit tests)

Files that this module USES:
- swapwatch.adapters.formatting.style (WidgetStyle)
- swapwatch.application.memo (parse_memo for memo descriptions)
- swapwatch.config (explorer URL for transaction links)
- swapwatch.domain.models (SwapBoard, SwapView, SwapMemo)
"""
from __future__ import annotations

import hashlib
from decimal import Decimal
from typing import List, Optional, Union

from swapwatch.adapters.formatting.style import WidgetStyle
from swapwatch.application.memo import parse_memo
from swapwatch.config import settings
from swapwatch.domain.models import SwapBoard, SwapMemo, SwapView

Number = Union[int, float, Decimal]

ASSET_COLORS = {
    "BTC.BTC": "#EF8F1C",
    "ETH.ETH": "#627EEA",
    "LTC.LTC": "#335E9D",
    "DOGE.DOGE": "#BCA23E",
    "BNB.BNB": "#F0BC18",
    "BSC.BNB": "#F0BC18",
    "BCH.BCH": "#4DCA48",
    "AVAX.AVAX": "#E84142",
    "GAIA.ATOM": "#303249",
    "ETH.USDC-0XA0B86991C6218B36C1D19D4A2E9EB0CE3606EB48": "#2775ca",
    "AVAX.USDC-0XB97EF9EF8734C71904D8002F8B6BC66DD9C48A6E": "#2775ca",
    "BNB.BUSD-BD1": "#ffc300",
    "ETH.USDT-0XDAC17F958D2EE523A2206206994597C13D831EC7": "#26A17B",
}

FALLBACK_PALETTE = (
    "#5470c6", "#91cc75", "#fac858", "#ee6666", "#73c0de",
    "#3ba272", "#fc8452", "#9a60b4", "#ea7ccc",
)


def format_usd_value(value: Number) -> str:
    """
    Format a USD amount with a K/M/B suffix.

    Returns:
        '$1.2B', '$3.4M', '$5.6K' or '$7.89'
    """
    value = Decimal(value)
    if value >= Decimal("1e9"):
        return f"${value / Decimal('1e9'):.1f}B"
    if value >= Decimal("1e6"):
        return f"${value / Decimal('1e6'):.1f}M"
    if value >= Decimal("1e3"):
        return f"${value / Decimal('1e3'):.1f}K"
    return f"${value:.2f}"


def format_number(value: Number, decimals: int = 4) -> str:
    """Format a number with thousands separators and fixed decimals."""
    return f"{Decimal(value):,.{decimals}f}"


def format_address(address: Optional[str], length: int = 6, only_last: bool = False) -> Optional[str]:
    """
    Shorten an address or hash to 'abcdef...uvwxyz'.

    Args:
        address: Address to shorten; empty values are returned as-is
        length: Characters kept at each end (default: 6)
        only_last: Keep only the trailing characters

    Returns:
        Shortened address, or the original when it is not longer than 2 * length
    """
    if not address or len(address) <= 2 * length:
        return address
    if only_last:
        return address[-length:]
    return f"{address[:length]}...{address[-length:]}"


def base_amount_format(value: Union[int, str, None]) -> str:
    """Base units to whole units with 4 decimals, or '-' when empty."""
    if not value:
        return "-"
    return f"{Decimal(str(value)) / Decimal(10) ** 8:.4f}"


def tx_url(tx_id: str, explorer_url: Optional[str] = None) -> str:
    """Explorer link for a transaction (defaults to settings.explorer_tx_url)."""
    explorer_url = explorer_url or settings.explorer_tx_url
    return f"{explorer_url.rstrip('/')}/{tx_id}"


def asset_color(asset_tag: str) -> str:
    """
    Display colour for an asset.

    Well-known assets have a fixed colour; any other tag maps to a palette
    entry chosen from a SHA-256 hash of the tag, so the colour is stable
    across runs.
    """
    if asset_tag in ASSET_COLORS:
        return ASSET_COLORS[asset_tag]
    digest = hashlib.sha256(asset_tag.encode("utf-8")).digest()
    return FALLBACK_PALETTE[int.from_bytes(digest[:4], "big") % len(FALLBACK_PALETTE)]


def describe_memo(memo: Optional[str]) -> str:
    """
    One-line description of a transaction memo.

    Examples:
        'swap -> BTC.BTC to bc1qxyz (10 blocks x 5) via aff123'
        'withdraw BTC.BTC'
        'no memo'
    """
    parsed = parse_memo(memo)
    if parsed.type is None:
        return "no memo"
    if not isinstance(parsed, SwapMemo):
        return f"{parsed.type} {parsed.asset_tag}" if parsed.asset_tag else parsed.type

    text = f"swap -> {parsed.destination_asset or '?'}"
    if parsed.destination_address:
        text += f" to {format_address(parsed.destination_address)}"
    if parsed.interval_blocks is not None and parsed.quantity is not None:
        text += f" ({parsed.interval_blocks} blocks x {parsed.quantity})"
    if parsed.affiliate_address:
        text += f" via {parsed.affiliate_address}"
    return text


def swap_lines(view: SwapView, style: Optional[WidgetStyle] = None) -> List[str]:
    """
    Format one streaming swap as plain text lines.

    Args:
        view: Enriched swap
        style: Display options (defaults to WidgetStyle())

    Returns:
        Asset line, progress line, detail line and explorer link
    """
    style = style or WidgetStyle()
    inp = view.input_asset
    assets = f"{format_number(inp.amount, style.amount_decimals)} {inp.asset} →"
    if view.output_asset is not None:
        out = view.output_asset
        assets += f" {format_number(out.amount, style.amount_decimals)} {out.asset}"
    else:
        assets += f" {view.record.target_asset_tag or '?'}"

    progress = view.progress
    percent = f"{progress.completion_percent:.{style.percent_decimals}f}%"
    return [
        f"{assets} ({format_usd_value(view.deposit_usd)})",
        f"Progress: {percent} ({view.record.count}/{view.record.quantity})",
        (
            f"TX: {format_address(view.record.tx_id)} | "
            f"{view.record.interval_blocks} Blocks/Swap | "
            f"ETA: {progress.eta} | "
            f"Remaining: {progress.remaining_swaps} swaps"
        ),
        f"Explorer: {tx_url(view.record.tx_id)}",
    ]


def board_lines(board: SwapBoard, style: Optional[WidgetStyle] = None) -> str:
    """
    Format the whole board as a plain text message.

    Returns:
        Header with totals followed by each swap, or a notice when empty
    """
    if not board.swaps:
        return "No active streaming swaps"

    total = format_usd_value(board.total_usd) if board.total_usd else "-"
    lines = [
        "Ongoing Streaming Swaps",
        f"Total Swaps: {len(board.swaps)} | Total Value: {total} | RUNE: ${board.usd_per_rune:.2f}",
    ]
    for view in board.swaps:
        lines.append("")
        lines.extend(swap_lines(view, style))
    return "\n".join(lines)
