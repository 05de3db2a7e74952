# src/swapwatch/domain/errors.py
"""
Domain Errors - Snapshot Source Exceptions

The valuation, projection and memo layers never raise. These exceptions are
reserved for the snapshot source, which surfaces whole-snapshot failures to
the host.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ProviderUnavailableError(DomainError):
    """Raised when the indexing node cannot be reached or answers with an HTTP error."""
    pass


class MalformedSnapshotError(DomainError):
    """Raised when a snapshot payload does not have the expected shape."""
    pass
