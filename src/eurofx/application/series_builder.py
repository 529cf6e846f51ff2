"""
Series Builder - Chart Series Projection

Projects a RateTable into a chronological (timestamp, value) sequence for
one currency, ready to hand to a charting widget.

Files that USE this module:
- eurofx.application.exchange_app (chart rebuilds)
- tests.test_series_builder (unit tests)

Files that this module USES:
- eurofx.application.rate_table (RateTable)
- eurofx.domain.models (SeriesPoint)
- eurofx.domain.errors (CurrencyNotFoundError)
"""
from __future__ import annotations

from datetime import date, datetime, timezone

from eurofx.application.rate_table import RateTable
from eurofx.domain.errors import CurrencyNotFoundError
from eurofx.domain.models import SeriesPoint


def date_to_timestamp(day: date) -> int:
    """Unix epoch seconds of ``day`` at 00:00 UTC."""
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp())


def build_series(table: RateTable, currency_code: str) -> list[SeriesPoint]:
    """
    Build the chronological rate series of one currency.
    
    Snapshots are walked oldest-first. Snapshots that do not list the
    currency are skipped, so a currency added to the feed later simply
    yields a shorter series.
    
    Args:
        table: Rate table to project
        currency_code: Currency to chart (case-insensitive)
        
    Returns:
        Points with non-decreasing timestamps
        
    Raises:
        CurrencyNotFoundError: If no snapshot lists the currency
    """
    # TODO: index code -> [(date, rate)] at ingest time if histories grow past the 90-day feed
    points = []
    for snapshot in table.oldest_first():
        record = snapshot.get(currency_code)
        if record is not None:
            points.append(
                SeriesPoint(timestamp=date_to_timestamp(snapshot.date), value=float(record.rate))
            )

    if not points:
        raise CurrencyNotFoundError(
            str(currency_code), f"Currency {currency_code!r} not found in any snapshot"
        )
    return points
