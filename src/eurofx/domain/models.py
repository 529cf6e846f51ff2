"""
Domain Models - Pure Business Objects

This module contains the domain models of the rate explorer:
- RateRecord: one currency's rate at one date
- DateSnapshot: all rates published for one calendar date
- SeriesPoint: one (timestamp, value) point of a chart series
- Conversion: the result of a cross-rate conversion

All models are frozen; once built during ingestion they never change.

Files that USE this module:
- eurofx.application.* (rate table, calculator, series builder, controller)
- eurofx.adapters.formatting (renders conversions, options and series)
- tests.* (tests use domain models for test data)

Files that this module USES:
- eurofx.domain.errors (ParseError for broken invariants)
- eurofx.shared.validators (currency code and number checks)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from eurofx.domain.errors import ParseError
from eurofx.shared.validators import is_finite_number, validate_currency_code

DISPLAY_DECIMALS = 3


@dataclass(frozen=True)
class RateRecord:
    """
    Rate of 1 unit of the base currency expressed in ``currency_code``.
    
    Attributes:
        currency_code: Uppercase three-letter code (e.g. 'USD')
        rate: Positive finite rate
    """
    currency_code: str
    rate: float

    def __post_init__(self) -> None:
        if not validate_currency_code(self.currency_code):
            raise ParseError(f"malformed currency code: {self.currency_code!r}")
        if not is_finite_number(self.rate) or self.rate <= 0:
            raise ParseError(f"rate must be a positive finite number, got {self.rate!r}")


@dataclass(frozen=True)
class DateSnapshot:
    """
    All rates published for a single calendar date.
    
    Attributes:
        date: Publication date (no time component)
        records: Rates in feed order, at most one per currency
    """
    date: date
    records: tuple[RateRecord, ...]

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "records", tuple(self.records))
        if not self.records:
            raise ParseError(f"snapshot {self.date} has no rates")
        seen: set[str] = set()
        for record in self.records:
            if record.currency_code in seen:
                raise ParseError(
                    f"duplicate currency {record.currency_code} in snapshot {self.date}"
                )
            seen.add(record.currency_code)

    def currency_codes(self) -> tuple[str, ...]:
        """Return the currency codes of this snapshot in feed order."""
        return tuple(record.currency_code for record in self.records)

    def get(self, currency_code: object) -> Optional[RateRecord]:
        """
        Case-insensitive lookup of a currency's record.
        
        Returns:
            The matching RateRecord, or None if the currency is not listed
            (non-string codes are never listed)
        """
        if not isinstance(currency_code, str):
            return None
        wanted = currency_code.strip().upper()
        for record in self.records:
            if record.currency_code == wanted:
                return record
        return None


@dataclass(frozen=True)
class SeriesPoint:
    """One chart point: UTC epoch seconds of a snapshot date and the rate."""
    timestamp: int
    value: float


@dataclass(frozen=True)
class Conversion:
    """
    Result of converting ``amount`` from one currency to another.
    
    ``value`` is the unrounded computed value and must be used for any
    further computation. ``display`` is the value rounded for presentation.
    
    Attributes:
        amount: Amount in the source currency
        from_rate: Base-relative rate of the source currency
        to_rate: Base-relative rate of the target currency
        value: Unrounded converted amount
        decimals: Display precision (default: 3)
    """
    amount: float
    from_rate: float
    to_rate: float
    value: float
    decimals: int = DISPLAY_DECIMALS

    @property
    def display(self) -> float:
        """Converted amount rounded half-up to ``decimals`` places."""
        return round_half_up(self.value, self.decimals)


def round_half_up(value: float, decimals: int = DISPLAY_DECIMALS) -> float:
    """
    Round ``value`` half-up to ``decimals`` places using Decimal arithmetic.
    
    Args:
        value: Value to round
        decimals: Number of decimal places (default: 3)
        
    Returns:
        Rounded value as float
    """
    if decimals < 0:
        raise ValueError("decimals must not be negative")
    number = Decimal(str(value))
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the requested places
        ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
        quantum = Decimal(1).scaleb(-decimals)
        return float(number.quantize(quantum, rounding=ROUND_HALF_UP))
