from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for the attendance pipeline."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when the schedule or run settings are missing or invalid."""


class ConnectivityError(DomainError):
    """Raised when a store or network call fails.

    ``errno`` carries the driver error code when one is available.
    """

    def __init__(self, message: str, *, errno: Optional[int] = None):
        super().__init__(message)
        self.errno = errno


class QuotaError(DomainError):
    """Raised when a write group exceeds the backing store's batch limit."""


class OrderingUnavailableError(DomainError):
    """Raised when the roster cannot be ordered by roll designator."""
