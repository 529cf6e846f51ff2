"""
Base Feed Provider Interface

This module defines the abstract base class for all rate feed providers and
a static provider serving an in-memory payload.

A provider returns the feed already parsed into plain Python structures:
a list of ``{"date": str, "entries": [{"currencyCode": str, "rate": str|number}]}``.
Validation of the values is left to RateTable.ingest.

Files that USE this module:
- eurofx.adapters.providers.ecb (EcbFeedProvider implements FeedProvider)
- eurofx.application.exchange_app (depends on the FeedProvider interface)
- tests.* (StaticFeedProvider for offline feeds)

Files that this module USES:
- None (pure interface definition)
"""
from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any


class FeedProvider(ABC):
    @abstractmethod
    def fetch_feed(self) -> list[dict[str, Any]]:
        """Return the structurally parsed feed payload."""
        raise NotImplementedError


class StaticFeedProvider(FeedProvider):
    """Serves a fixed payload; every call returns a fresh deep copy."""

    def __init__(self, payload: list[dict[str, Any]]):
        self.payload = payload

    def fetch_feed(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self.payload)
