"""
Exchange App - Application Controller

This module wires the feed provider, the rate table, the calculator and the
series builder to the application's named events. It replaces the old
module-level state with one explicitly owned RateTable per controller.

Flow:
- refresh(): fetch -> ingest(replace) -> emit feedRefreshed
- select_chart_currency(code): rebuild series -> emit currencySelectionChanged
- exchange(amount, from, to): display value of the conversion, or None

Derived views are only re-run after ingestion has completed, so no handler
ever observes a partially replaced table.

Files that USE this module:
- eurofx.app (composition root)
- tests.test_exchange_app (unit tests)

Files that this module USES:
- eurofx.adapters.providers.base (FeedProvider interface)
- eurofx.application.rate_table (RateTable)
- eurofx.application.calculator (convert_currencies)
- eurofx.application.series_builder (build_series)
- eurofx.application.events (AppEvents and event names)
- eurofx.config (Settings and the global settings instance)
"""
from __future__ import annotations

import logging
from typing import Optional

from eurofx.adapters.providers.base import FeedProvider
from eurofx.application.calculator import convert_currencies
from eurofx.application.events import CURRENCY_SELECTION_CHANGED, FEED_REFRESHED, AppEvents
from eurofx.application.rate_table import RateTable
from eurofx.application.series_builder import build_series
from eurofx.config import Settings
from eurofx.config import settings as default_settings
from eurofx.domain.errors import (
    CurrencyNotFoundError,
    DomainError,
    InvalidAmountError,
)
from eurofx.domain.models import Conversion, SeriesPoint
from eurofx.shared.validators import normalize_currency_code, parse_amount

log = logging.getLogger(__name__)


class ExchangeApp:
    """Controller owning one RateTable and driving the derived views."""

    def __init__(
        self,
        provider: FeedProvider,
        table: Optional[RateTable] = None,
        events: Optional[AppEvents] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the controller.
        
        Args:
            provider: Feed provider used by refresh()
            table: Rate table to own (defaults to a new empty table)
            events: Event registry (defaults to a new registry)
            settings: Settings (defaults to the global settings instance)
        """
        if settings is None:
            settings = default_settings
        self.provider = provider
        self.table = table if table is not None else RateTable()
        self.events = events if events is not None else AppEvents()
        self.settings = settings
        self.selected_currency: str = settings.default_chart_currency

    def refresh(self) -> None:
        """
        Fetch the feed, replace the table and notify the views.
        
        Emits ``feedRefreshed`` with ``options`` (latest (code, rate) pairs),
        ``series`` (chart of the selected currency, or None when it is not
        in the history), ``currency`` and ``alert``.
        
        Raises:
            FeedUnavailableError: If the provider cannot fetch the feed
            ParseError: If the feed is malformed (the table is left untouched)
        """
        try:
            raw_feed = self.provider.fetch_feed()
            self.table.ingest(raw_feed, mode="replace")
        except DomainError as e:
            log.error("Feed refresh failed, keeping %d existing snapshots: %s", len(self.table), e)
            raise

        latest = self.table.latest_snapshot()
        log.info(
            "Feed refreshed: %d snapshots, latest %s with %d currencies",
            len(self.table), latest.date, len(latest.records),
        )

        options = self.table.list_currency_options()
        if self.selected_currency not in {code for code, _ in options}:
            # Fall back to the first listed currency when the default is not published
            self.selected_currency = options[0][0]

        self.events.emit(
            FEED_REFRESHED,
            options=options,
            series=self._series_or_none(self.selected_currency),
            currency=self.selected_currency,
            alert=self.settings.alert_text,
        )

    def _series_or_none(self, currency_code: str) -> Optional[list[SeriesPoint]]:
        try:
            return build_series(self.table, currency_code)
        except CurrencyNotFoundError as e:
            log.warning("No chart data: %s", e)
            return None

    def chart(self, currency_code: Optional[str] = None) -> list[SeriesPoint]:
        """
        Build the chart series of ``currency_code`` (default: selected currency).
        
        Raises:
            CurrencyNotFoundError: If no snapshot lists the currency
        """
        return build_series(self.table, currency_code or self.selected_currency)

    def select_chart_currency(self, currency_code: str) -> list[SeriesPoint]:
        """
        Change the charted currency and notify the views.
        
        Emits ``currencySelectionChanged`` with ``currency`` and ``series``.
        
        Raises:
            CurrencyNotFoundError: If the code is malformed or absent from the history
        """
        try:
            code = normalize_currency_code(currency_code)
        except ValueError as e:
            raise CurrencyNotFoundError(str(currency_code), str(e)) from e

        series = build_series(self.table, code)
        self.selected_currency = code
        self.events.emit(CURRENCY_SELECTION_CHANGED, currency=code, series=series)
        return series

    def conversion_for(self, amount: object, from_code: str, to_code: str) -> Optional[Conversion]:
        """
        Convert a typed amount using the latest snapshot.
        
        Args:
            amount: Amount as typed (string, number or None)
            from_code: Source currency code
            to_code: Target currency code
            
        Returns:
            Conversion result, or None when no amount was given
            
        Raises:
            InvalidAmountError: If the amount is not a finite number
            EmptyTableError: If nothing has been ingested yet
            CurrencyNotFoundError: If either currency is not listed
        """
        try:
            parsed = parse_amount(amount)
        except ValueError as e:
            raise InvalidAmountError(str(e)) from e
        if parsed is None:
            return None

        conversion = convert_currencies(
            self.table,
            parsed,
            from_code,
            to_code,
            base_currency=self.settings.base_currency,
            decimals=self.settings.display_decimals,
        )
        log.debug(
            "Converted %s %s -> %s %s (unrounded %s)",
            parsed, from_code, conversion.display, to_code, conversion.value,
        )
        return conversion

    def exchange(self, amount: object, from_code: str, to_code: str) -> Optional[float]:
        """Display value of conversion_for(), or None when no amount was given."""
        conversion = self.conversion_for(amount, from_code, to_code)
        return None if conversion is None else conversion.display
