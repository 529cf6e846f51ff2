"""
Application Events - Named Event Registry

A minimal registry binding view callbacks to the two application events.
The rate table, calculator and series builder know nothing about it; only
the ExchangeApp controller emits events.

Files that USE this module:
- eurofx.application.exchange_app (emits events)
- eurofx.app (registers console views)
"""
from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

FEED_REFRESHED = "feedRefreshed"
CURRENCY_SELECTION_CHANGED = "currencySelectionChanged"
EVENTS = (FEED_REFRESHED, CURRENCY_SELECTION_CHANGED)

Handler = Callable[..., Any]


class AppEvents:
    """Synchronous dispatcher for the application's named events."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    @staticmethod
    def _check(event: str) -> None:
        if event not in EVENTS:
            raise ValueError(f"unknown event: {event!r}")

    def register(self, event: str, handler: Handler) -> None:
        """
        Register ``handler`` for ``event``.
        
        Raises:
            ValueError: If the event name is unknown
        """
        self._check(event)
        self._handlers[event].append(handler)

    def handlers(self, event: str) -> list[Handler]:
        self._check(event)
        return list(self._handlers[event])

    def emit(self, event: str, **payload: Any) -> None:
        """
        Call every handler of ``event`` in registration order.
        
        Handler exceptions propagate to the emitter.
        """
        for handler in self.handlers(event):
            handler(**payload)
