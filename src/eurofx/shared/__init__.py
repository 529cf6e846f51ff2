"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation and parsing of feed and user input
- Logging configuration
"""

from eurofx.shared.validators import (
    is_finite_number,
    normalize_currency_code,
    parse_amount,
    parse_feed_date,
    parse_rate,
    validate_currency_code,
)
from eurofx.shared.logging_conf import setup_logging, setup_logging_from_settings

__all__ = [
    "validate_currency_code",
    "normalize_currency_code",
    "is_finite_number",
    "parse_rate",
    "parse_feed_date",
    "parse_amount",
    "setup_logging",
    "setup_logging_from_settings",
]
