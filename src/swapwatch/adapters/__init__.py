# src/swapwatch/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (thornode API)
- Formatting (output)
"""

__all__ = []
