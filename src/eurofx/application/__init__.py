"""
Application Layer - Use Cases and Services

This package contains the rate table, the pure calculation and projection
functions built on it, and the controller that drives them from events.
"""

from eurofx.application.rate_table import RateTable, parse_feed
from eurofx.application.calculator import convert, convert_currencies, round_for_display
from eurofx.application.series_builder import build_series, date_to_timestamp
from eurofx.application.events import AppEvents, CURRENCY_SELECTION_CHANGED, FEED_REFRESHED
from eurofx.application.exchange_app import ExchangeApp

__all__ = [
    "RateTable",
    "parse_feed",
    "convert",
    "convert_currencies",
    "round_for_display",
    "build_series",
    "date_to_timestamp",
    "AppEvents",
    "FEED_REFRESHED",
    "CURRENCY_SELECTION_CHANGED",
    "ExchangeApp",
]
