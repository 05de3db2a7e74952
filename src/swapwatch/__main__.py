# src/swapwatch/__main__.py
"""Module entry point: ``python -m swapwatch`` runs a single refresh."""

import sys

from swapwatch.app import main

if __name__ == "__main__":
    sys.exit(main())
