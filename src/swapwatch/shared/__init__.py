# src/swapwatch/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from swapwatch.shared.validators import (
    BLANK_TX_ID,
    validate_base_url,
    validate_color,
    validate_tx_id,
)
from swapwatch.shared.logging_conf import setup_logging

__all__ = [
    "BLANK_TX_ID",
    "validate_base_url",
    "validate_color",
    "validate_tx_id",
    "setup_logging",
]
