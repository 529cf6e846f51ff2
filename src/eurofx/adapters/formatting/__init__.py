"""
Formatting Adapters - View Formatting

This package contains text formatting adapters for console views.
"""

from eurofx.adapters.formatting.formatter import (
    format_alert,
    format_conversion,
    format_currency_options,
    format_rate,
    format_series,
    series_to_xy,
)

__all__ = [
    "format_alert",
    "format_conversion",
    "format_currency_options",
    "format_rate",
    "format_series",
    "series_to_xy",
]
