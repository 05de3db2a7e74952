# src/swapwatch/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the value objects the valuation, projection and memo
layers exchange:
- Asset identifiers and pool depth snapshots
- Streaming swap counters and their projected progress
- Decoded transaction memos
- The enriched swap board handed to the presentation shell

Files that USE this module:
- swapwatch.domain.assets (builds AssetIdentifier values)
- swapwatch.application.* (all services consume and produce domain models)
- swapwatch.adapters.* (providers build snapshots, formatters render them)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from decimal import Decimal  # Exact decimal arithmetic for USD values
from typing import Optional  # Type hints for optional values


@dataclass(frozen=True)
class AssetIdentifier:
    """
    Parsed ``<chain>.<symbol>[-<id>]`` asset tag.

    Attributes:
        chain: Chain prefix (e.g. "BTC", "ETH", "THOR")
        symbol: Full symbol including any contract id (e.g. "USDC-0XA0B8...")
        ticker: Symbol truncated at its first "-" (e.g. "USDC")
        is_synth: True for synthetic assets ("ETH/ETH")
        is_trade_asset: True for trade-account assets ("ETH~ETH")
    """
    chain: str
    symbol: str
    ticker: str
    is_synth: bool = False
    is_trade_asset: bool = False


@dataclass(frozen=True)
class PoolState:
    """
    Liquidity pool depth snapshot.

    Attributes:
        asset_tag: Pool key, always the layer-1 form (e.g. "BTC.BTC")
        asset_depth: Asset side depth in the asset's base units
        rune_depth: RUNE side depth in base units (1e8 per RUNE)
        decimals: Decimal precision of asset_depth (defaults to 8)
        asset_price_usd: Precomputed USD price reported by the node, if any
    """
    asset_tag: str
    asset_depth: int
    rune_depth: int
    decimals: int = 8
    asset_price_usd: Optional[Decimal] = None


@dataclass(frozen=True)
class StreamingSwapRecord:
    """
    In-flight streaming swap counters.

    Attributes:
        tx_id: Inbound transaction hash
        count: Legs already executed
        quantity: Total legs planned (at least 1)
        interval_blocks: Blocks between legs
        source_asset_tag: Asset being sold
        target_asset_tag: Asset being bought
        deposit_base_units: Deposited amount in base units
        trade_target: Minimum output requested, if reported
    """
    tx_id: str
    count: int = 0
    quantity: int = 1
    interval_blocks: int = 0
    source_asset_tag: str = ""
    target_asset_tag: str = ""
    deposit_base_units: int = 0
    trade_target: Optional[int] = None


@dataclass(frozen=True)
class SwapProgress:
    """Projected progress of a streaming swap."""
    remaining_swaps: int
    completion_percent: float
    eta: str


@dataclass(frozen=True)
class ParsedMemo:
    """
    Decoded transaction memo.

    ``type`` is the lowercase first segment, or None for an empty memo.
    Memo kinds without a dedicated variant carry only the asset segment.
    """
    type: Optional[str]
    asset_tag: Optional[str] = None


@dataclass(frozen=True)
class SwapMemo(ParsedMemo):
    """
    Decoded ``SWAP:ASSET:DEST:LIM/INTERVAL/QUANTITY:AFFILIATE:FEE`` memo.

    Attributes:
        destination_address: Address receiving the output
        price_limit: Minimum output, kept as raw text
        interval_blocks: Blocks between streaming legs, if given
        quantity: Number of streaming legs, if given
        affiliate_address: Affiliate receiving the fee
        affiliate_fee: Affiliate fee in basis points, kept as raw text
    """
    destination_address: Optional[str] = None
    price_limit: Optional[str] = None
    interval_blocks: Optional[int] = None
    quantity: Optional[int] = None
    affiliate_address: Optional[str] = None
    affiliate_fee: Optional[str] = None

    @property
    def destination_asset(self) -> Optional[str]:
        return self.asset_tag


@dataclass(frozen=True)
class AssetAmount:
    """Asset tag paired with a human-scale amount (base units / 1e8)."""
    asset: str
    amount: Decimal


@dataclass(frozen=True)
class Coin:
    """On-chain coin: asset tag and amount in base units."""
    asset: str
    amount: int


@dataclass(frozen=True)
class TxDetail:
    """
    Per-transaction detail fetched for a streaming swap.

    Attributes:
        outbound_coins: Coins of each outbound transaction, in node order
    """
    outbound_coins: tuple[tuple[Coin, ...], ...] = ()

    def first_outbound_coin(self) -> Optional[Coin]:
        """Return the first coin of the first outbound transaction, if any."""
        if not self.outbound_coins or not self.outbound_coins[0]:
            return None
        return self.outbound_coins[0][0]


@dataclass(frozen=True)
class SwapView:
    """A streaming swap enriched for display."""
    record: StreamingSwapRecord
    progress: SwapProgress
    input_asset: AssetAmount
    output_asset: Optional[AssetAmount] = None
    deposit_usd: Decimal = Decimal(0)


@dataclass(frozen=True)
class SwapBoard:
    """
    All swaps of one snapshot, ready for the presentation shell.

    Attributes:
        swaps: Enriched swaps in snapshot order
        total_usd: USD value of every deposit in the snapshot
        usd_per_rune: RUNE/USD rate implied by the anchor pools
    """
    swaps: tuple[SwapView, ...] = field(default_factory=tuple)
    total_usd: Decimal = Decimal(0)
    usd_per_rune: Decimal = Decimal(0)
