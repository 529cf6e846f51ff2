"""
Exchange Calculator - Cross-Rate Arithmetic

Pure functions for converting an amount between two currencies whose rates
are both expressed against the base currency. No state, no I/O.

Files that USE this module:
- eurofx.application.exchange_app (exchange handler)
- tests.test_calculator (unit tests)

Files that this module USES:
- eurofx.application.rate_table (RateTable lookups for convert_currencies)
- eurofx.domain.models (Conversion result, display rounding)
- eurofx.domain.errors (InvalidAmountError)
"""
from __future__ import annotations

from typing import Optional

from eurofx.application.rate_table import RateTable
from eurofx.domain.errors import InvalidAmountError
from eurofx.domain.models import DISPLAY_DECIMALS, Conversion, DateSnapshot, round_half_up
from eurofx.shared.validators import is_finite_number

DEFAULT_BASE_CURRENCY = "EUR"


def _check_rate(name: str, rate: object) -> float:
    if not is_finite_number(rate) or rate <= 0:  # type: ignore[operator]
        raise InvalidAmountError(f"{name} must be a positive finite number, got {rate!r}")
    return float(rate)  # type: ignore[arg-type]


def convert(
    amount: float,
    from_rate: float,
    to_rate: float,
    decimals: int = DISPLAY_DECIMALS,
) -> Conversion:
    """
    Convert ``amount`` via the base currency: ``amount / from_rate * to_rate``.
    
    A zero amount is valid and converts to zero. The returned Conversion
    keeps the unrounded ``value`` next to the rounded ``display`` value.
    
    Args:
        amount: Amount in the source currency (any finite number)
        from_rate: Base-relative rate of the source currency
        to_rate: Base-relative rate of the target currency
        decimals: Display precision (default: 3)
        
    Returns:
        Conversion with computed and display values
        
    Raises:
        InvalidAmountError: If amount is not finite or a rate is not positive and finite
    """
    if not is_finite_number(amount):
        raise InvalidAmountError(f"amount must be a finite number, got {amount!r}")
    from_rate = _check_rate("from_rate", from_rate)
    to_rate = _check_rate("to_rate", to_rate)

    amount = float(amount)
    return Conversion(
        amount=amount,
        from_rate=from_rate,
        to_rate=to_rate,
        value=amount / from_rate * to_rate,
        decimals=decimals,
    )


def round_for_display(value: float, places: int = DISPLAY_DECIMALS) -> float:
    """Round a computed value for display (half-up, default 3 places)."""
    return round_half_up(value, places)


def _rate_for(
    table: RateTable,
    snapshot: DateSnapshot,
    currency_code: str,
    base_currency: str,
) -> float:
    # The base currency is never listed; its rate is 1 by definition
    if isinstance(currency_code, str) and currency_code.strip().upper() == base_currency:
        return 1.0
    return table.find_rate(snapshot, currency_code).rate


def convert_currencies(
    table: RateTable,
    amount: float,
    from_code: str,
    to_code: str,
    snapshot: Optional[DateSnapshot] = None,
    base_currency: str = DEFAULT_BASE_CURRENCY,
    decimals: int = DISPLAY_DECIMALS,
) -> Conversion:
    """
    Convert ``amount`` between two listed currencies of one snapshot.
    
    Args:
        table: Rate table to look rates up in
        amount: Amount in ``from_code``
        from_code: Source currency code (case-insensitive)
        to_code: Target currency code (case-insensitive)
        snapshot: Snapshot to use (default: the table's latest)
        base_currency: Code of the base currency, whose rate is 1
        decimals: Display precision
        
    Returns:
        Conversion result
        
    Raises:
        EmptyTableError: If no snapshot is given and the table is empty
        CurrencyNotFoundError: If either currency is not listed
        InvalidAmountError: If the amount is not finite
    """
    if snapshot is None:
        snapshot = table.latest_snapshot()
    base_currency = base_currency.upper()
    from_rate = _rate_for(table, snapshot, from_code, base_currency)
    to_rate = _rate_for(table, snapshot, to_code, base_currency)
    return convert(amount, from_rate, to_rate, decimals=decimals)
