"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from eurofx.domain.models import (
    Conversion,
    DateSnapshot,
    RateRecord,
    SeriesPoint,
    round_half_up,
)
from eurofx.domain.errors import (
    CurrencyNotFoundError,
    DomainError,
    EmptyTableError,
    FeedUnavailableError,
    InvalidAmountError,
    ParseError,
)

__all__ = [
    "RateRecord",
    "DateSnapshot",
    "SeriesPoint",
    "Conversion",
    "round_half_up",
    "DomainError",
    "ParseError",
    "EmptyTableError",
    "CurrencyNotFoundError",
    "InvalidAmountError",
    "FeedUnavailableError",
]
