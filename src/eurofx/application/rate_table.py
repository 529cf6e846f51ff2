"""
Rate Table - Owned, Normalised History of Daily Rates

This module holds the ingested rate history and answers lookups on it.
Ingestion validates the whole payload before touching the table, so a
failed ingest never leaves a half-built table behind.

Canonical order of ``snapshots`` is newest-first, whatever order the feed
delivered them in. Callers that need oldest-first use ``oldest_first()``,
which returns a reversed copy.

Files that USE this module:
- eurofx.application.calculator (convert_currencies looks rates up here)
- eurofx.application.series_builder (walks the snapshots)
- eurofx.application.exchange_app (owns one RateTable)
- tests.test_rate_table (unit tests)

Files that this module USES:
- eurofx.domain.models (RateRecord, DateSnapshot)
- eurofx.domain.errors (ParseError, EmptyTableError, CurrencyNotFoundError)
- eurofx.shared.validators (feed value parsing)
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from eurofx.domain.errors import CurrencyNotFoundError, EmptyTableError, ParseError
from eurofx.domain.models import DateSnapshot, RateRecord
from eurofx.shared.validators import normalize_currency_code, parse_feed_date, parse_rate

IngestMode = Literal["replace", "append"]
INGEST_MODES = ("replace", "append")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _build_record(pair: Any, entry_index: int, pair_index: int) -> RateRecord:
    if not isinstance(pair, Mapping):
        raise ParseError("rate pair is not a mapping", entry_index, pair_index)
    if "currencyCode" not in pair:
        raise ParseError("currencyCode is missing", entry_index, pair_index)
    if "rate" not in pair:
        raise ParseError("rate is missing", entry_index, pair_index)
    try:
        code = normalize_currency_code(pair["currencyCode"])
        rate = parse_rate(pair["rate"])
    except ValueError as e:
        raise ParseError(str(e), entry_index, pair_index) from e
    return RateRecord(currency_code=code, rate=rate)


def _build_snapshot(entry: Any, entry_index: int) -> DateSnapshot:
    if not isinstance(entry, Mapping):
        raise ParseError("feed entry is not a mapping", entry_index)
    try:
        snapshot_date = parse_feed_date(entry.get("date"))
    except ValueError as e:
        raise ParseError(str(e), entry_index) from e

    pairs = entry.get("entries")
    if not _is_sequence(pairs):
        raise ParseError("entries is missing or not a sequence", entry_index)
    if not pairs:
        raise ParseError(f"no rates for {snapshot_date}", entry_index)

    records = [_build_record(pair, entry_index, i) for i, pair in enumerate(pairs)]
    try:
        return DateSnapshot(date=snapshot_date, records=tuple(records))
    except ParseError as e:
        raise ParseError(str(e), entry_index) from e


def parse_feed(raw_feed: Any) -> list[DateSnapshot]:
    """
    Build snapshots from a structurally parsed feed payload.
    
    Args:
        raw_feed: Sequence of ``{"date": str, "entries": [{"currencyCode": str, "rate": str|number}]}``
        
    Returns:
        Snapshots in feed order
        
    Raises:
        ParseError: On the first malformed entry, pair, date, code or rate
    """
    if not _is_sequence(raw_feed):
        raise ParseError("feed payload is not a sequence of entries")
    if not raw_feed:
        raise ParseError("feed payload contains no entries")
    return [_build_snapshot(entry, i) for i, entry in enumerate(raw_feed)]


class RateTable:
    """
    In-memory history of daily rates, newest snapshot first.
    
    The table exclusively owns its snapshots. Readers get tuples of frozen
    objects and can never mutate the stored history.
    """

    def __init__(self) -> None:
        self._snapshots: tuple[DateSnapshot, ...] = ()

    @property
    def snapshots(self) -> tuple[DateSnapshot, ...]:
        """All snapshots, newest first."""
        return self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)

    def is_empty(self) -> bool:
        return not self._snapshots

    def clear(self) -> None:
        self._snapshots = ()

    def ingest(self, raw_feed: Any, mode: IngestMode = "replace") -> None:
        """
        Validate a feed payload and load it into the table.
        
        The whole payload is parsed before the table changes, then the new
        snapshot tuple is swapped in with a single assignment. On failure the
        previous contents are left untouched.
        
        ``replace`` discards the current history (manual refresh). ``append``
        adds to it; dates are not de-duplicated across separate calls. Either
        way the result is sorted newest-first, and snapshots sharing a date
        keep the order in which they were ingested.
        
        Args:
            raw_feed: Structurally parsed feed payload
            mode: 'replace' (default) or 'append'
            
        Raises:
            ParseError: If any entry of the payload is malformed
            ValueError: If ``mode`` is unknown
        """
        if mode not in INGEST_MODES:
            raise ValueError(f"unknown ingest mode: {mode!r}")

        parsed = parse_feed(raw_feed)
        combined = list(self._snapshots) + parsed if mode == "append" else parsed
        self._snapshots = tuple(sorted(combined, key=lambda s: s.date, reverse=True))

    def latest_snapshot(self) -> DateSnapshot:
        """
        Return the most recent snapshot.
        
        Raises:
            EmptyTableError: If nothing has been ingested
        """
        if not self._snapshots:
            raise EmptyTableError("rate table is empty")
        return self._snapshots[0]

    def oldest_first(self) -> list[DateSnapshot]:
        """Return a chronological copy of the snapshots."""
        return list(reversed(self._snapshots))

    def find_rate(self, snapshot: DateSnapshot, currency_code: str) -> RateRecord:
        """
        Find a currency's record in ``snapshot`` (case-insensitive).
        
        Raises:
            CurrencyNotFoundError: If the snapshot does not list the currency
        """
        record = snapshot.get(currency_code)
        if record is None:
            raise CurrencyNotFoundError(
                str(currency_code), f"Currency {currency_code!r} not listed on {snapshot.date}"
            )
        return record

    def list_currencies(self) -> frozenset[str]:
        """
        Codes listed in the latest snapshot.
        
        Raises:
            EmptyTableError: If nothing has been ingested
        """
        return frozenset(self.latest_snapshot().currency_codes())

    def list_currency_options(self) -> list[tuple[str, float]]:
        """
        (code, rate) pairs of the latest snapshot in feed order, for selectors.
        
        Raises:
            EmptyTableError: If nothing has been ingested
        """
        return [(r.currency_code, r.rate) for r in self.latest_snapshot().records]
