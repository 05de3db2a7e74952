# src/swapwatch/__init__.py
"""
SwapWatch - THORChain Streaming Swap Valuation and Progress

A small library that values asset amounts in USD from liquidity-pool depth
snapshots, projects the progress of streaming swaps, and decodes the
colon-delimited transaction memos that initiate them.
"""

__version__ = "0.3.0"
