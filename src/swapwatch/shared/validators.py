# src/swapwatch/shared/validators.py
"""
Input Validation Utilities - Configuration and Identifier Validation

This module validates the values SwapWatch accepts from configuration and
from upstream snapshots: node and explorer URLs, transaction hashes, and
style colours.

Files that USE this module:
- swapwatch.config.settings (uses validation functions in Settings field validators)
- swapwatch.adapters.formatting.style (validates colour options)
- swapwatch.adapters.providers.thornode (checks tx ids before detail lookups)

Files that this module USES:
- None (pure utility functions)
"""
import re
from urllib.parse import urlparse

_TX_ID = re.compile(r'^[0-9A-Fa-f]{64}$')
_HEX_COLOR = re.compile(r'^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$')
_CSS_KEYWORDS = {"inherit", "initial", "unset", "currentcolor", "transparent"}

# THORChain uses an all-zero hash for internally generated transactions
BLANK_TX_ID = "0" * 64


def validate_base_url(url: str) -> bool:
    """
    Validate an HTTP(S) base URL.

    Args:
        url: URL to validate

    Returns:
        True if the URL has an http/https scheme and a host, False otherwise
    """
    if not url:
        return False

    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_tx_id(tx_id: str) -> bool:
    """
    Validate a transaction hash.

    Args:
        tx_id: Transaction hash to validate

    Returns:
        True for a 64-character hex hash that is not the blank hash
    """
    if not tx_id:
        return False

    return bool(_TX_ID.match(tx_id)) and tx_id != BLANK_TX_ID


def validate_color(value: str) -> bool:
    """
    Validate a style colour: '#rgb', '#rrggbb' or a CSS keyword like 'inherit'.
    """
    if not value:
        return False

    return bool(_HEX_COLOR.match(value)) or value.lower() in _CSS_KEYWORDS
