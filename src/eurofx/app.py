"""
Application Entry Point - Console Explorer

This module serves as the composition root for EuroFX. It wires the feed
provider, the controller and the console views, refreshes the rates once
and optionally performs one conversion and prints one chart series.

Usage:
    python -m eurofx.app --amount 100 --from USD --to GBP --chart JPY

Files that USE this module:
- eurofx console script (pyproject entry point)

Files that this module USES:
- eurofx.shared.logging_conf (setup_logging_from_settings for logging configuration)
- eurofx.config (settings for configuration management)
- eurofx.adapters.providers (EcbFeedProvider for the feed)
- eurofx.adapters.formatting (text views)
- eurofx.application (ExchangeApp controller and event names)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from eurofx.adapters.formatting import (
    format_alert,
    format_conversion,
    format_currency_options,
    format_series,
)
from eurofx.adapters.providers import EcbFeedProvider
from eurofx.application import CURRENCY_SELECTION_CHANGED, FEED_REFRESHED, ExchangeApp
from eurofx.config import settings
from eurofx.domain.errors import DomainError
from eurofx.shared.logging_conf import setup_logging_from_settings

log = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Explore the euro reference exchange rates.")
    parser.add_argument("--amount", help="Amount to convert (omit to skip conversion)")
    parser.add_argument("--from", dest="from_code", default="USD", help="Source currency code")
    parser.add_argument("--to", dest="to_code", default="GBP", help="Target currency code")
    parser.add_argument("--chart", dest="chart_code", help="Currency to chart")
    parser.add_argument("--url", dest="feed_url", help="Override the feed URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def register_console_views(app: ExchangeApp, out=None) -> None:
    """Print the selector options, the chart and the alert on every event."""
    out = out or sys.stdout

    def on_feed_refreshed(options, series, currency, alert):
        print(format_currency_options(options, base_currency=settings.base_currency), file=out)
        print(format_series(series, currency), file=out)
        print(format_alert(alert), file=out)

    def on_selection_changed(currency, series):
        print(format_series(series, currency), file=out)

    app.events.register(FEED_REFRESHED, on_feed_refreshed)
    app.events.register(CURRENCY_SELECTION_CHANGED, on_selection_changed)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Fetch the rates and run the requested views.

    Returns:
        Process exit code (0 on success, 1 on feed or rate errors)
    """
    args = parse_args(argv)

    setup_logging_from_settings(settings, verbose=args.verbose)

    app = ExchangeApp(provider=EcbFeedProvider(url=args.feed_url), settings=settings)
    register_console_views(app)

    try:
        app.refresh()
        if args.chart_code:
            app.select_chart_currency(args.chart_code)
        conversion = app.conversion_for(args.amount, args.from_code, args.to_code)
        if conversion is not None:
            print(format_conversion(conversion, args.from_code, args.to_code))
    except DomainError as e:
        log.error("%s: %s", type(e).__name__, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
