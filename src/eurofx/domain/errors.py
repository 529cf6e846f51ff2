"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised by the rate table,
the exchange calculator and the series builder, plus the feed error raised
by the provider adapters.
"""
from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ParseError(DomainError):
    """Raised when a feed entry is malformed during ingestion."""

    def __init__(
        self,
        message: str,
        entry_index: Optional[int] = None,
        pair_index: Optional[int] = None,
    ):
        self.entry_index = entry_index
        self.pair_index = pair_index
        if entry_index is not None:
            location = f"entry {entry_index}"
            if pair_index is not None:
                location = f"{location}, pair {pair_index}"
            message = f"{location}: {message}"
        super().__init__(message)


class EmptyTableError(DomainError):
    """Raised when the rate table is queried before anything was ingested."""
    pass


class CurrencyNotFoundError(DomainError):
    """Raised when a requested currency code is absent where it is required."""

    def __init__(self, currency_code: str, message: Optional[str] = None):
        self.currency_code = currency_code
        super().__init__(message or f"Currency not found: {currency_code}")


class InvalidAmountError(DomainError):
    """Raised when a conversion gets a non-finite amount or a non-positive rate."""
    pass


class FeedUnavailableError(DomainError):
    """Raised when the upstream rate feed cannot be fetched or read."""
    pass
