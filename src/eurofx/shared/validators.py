"""
Input Validation Utilities - Feed and User Input Validation

This module provides the validation and parsing helpers shared by the
domain models, the rate table, the settings and the application controller.
It validates currency codes, feed dates, rates and user-typed amounts.

Files that USE this module:
- eurofx.domain.models (RateRecord invariants)
- eurofx.application.rate_table (parses raw feed values)
- eurofx.application.calculator (finite-number checks)
- eurofx.application.exchange_app (parses typed amounts)
- eurofx.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import Decimal
from numbers import Real
from typing import Optional, Union

CURRENCY_CODE_RE = re.compile(r"^[A-Z]{3}$")
FEED_DATE_FORMAT = "%Y-%m-%d"


def validate_currency_code(code: object) -> bool:
    """
    Validate an already normalised ISO 4217 style currency code.
    
    Args:
        code: Value to validate
        
    Returns:
        True if ``code`` is a string of exactly three uppercase letters
    """
    if not isinstance(code, str):
        return False
    return bool(CURRENCY_CODE_RE.match(code))


def normalize_currency_code(code: object) -> str:
    """
    Strip and upper-case a currency code, then validate it.
    
    Args:
        code: Raw currency code (e.g. ' usd ')
        
    Returns:
        Normalised code (e.g. 'USD')
        
    Raises:
        ValueError: If the value is not a string or not three letters
    """
    if not isinstance(code, str):
        raise ValueError(f"currency code must be a string, got {type(code).__name__}")
    normalized = code.strip().upper()
    if not validate_currency_code(normalized):
        raise ValueError(f"malformed currency code: {code!r}")
    return normalized


def is_finite_number(value: object) -> bool:
    """Return True for real, finite, non-boolean numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if not isinstance(value, Real):
        return False
    return math.isfinite(value)


def _to_float(value: object) -> float:
    """Convert a feed or user value (string or number) to a finite float."""
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("empty numeric value")
        try:
            number = float(text)
        except ValueError:
            raise ValueError(f"not a number: {value!r}") from None
    elif isinstance(value, (Real, Decimal)):
        number = float(value)
    else:
        raise ValueError(f"not a number: {value!r}")

    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def parse_rate(value: object) -> float:
    """
    Parse a feed rate into a positive finite float.
    
    Args:
        value: Rate as delivered by the feed (string or number)
        
    Returns:
        The rate as float
        
    Raises:
        ValueError: If the rate is missing, non-numeric, non-finite or not positive
    """
    if value is None:
        raise ValueError("rate is missing")
    rate = _to_float(value)
    if rate <= 0:
        raise ValueError(f"rate must be positive, got {value!r}")
    return rate


def parse_feed_date(value: Union[str, date]) -> date:
    """
    Parse a feed date in ISO format (YYYY-MM-DD) to :class:`date`.
    
    Raises:
        ValueError: If the date is missing or unparseable
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"date is missing or not a string: {value!r}")
    try:
        return datetime.strptime(value.strip(), FEED_DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"unparseable date: {value!r}") from None


def parse_amount(value: object) -> Optional[float]:
    """
    Parse an amount typed by the user.
    
    Absence is signalled structurally: ``None`` or a blank string yields
    ``None``. Zero is a valid amount.
    
    Args:
        value: Raw amount (string, number or None)
        
    Returns:
        Amount as float, or None when no amount was given
        
    Raises:
        ValueError: If a value was given but is not a finite number
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return _to_float(value)
