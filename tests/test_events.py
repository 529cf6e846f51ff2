"""
Application Events Tests - Unit Tests for the Event Registry

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- eurofx.application.events (AppEvents and event names)
"""
from unittest.mock import Mock

import pytest

from eurofx.application.events import CURRENCY_SELECTION_CHANGED, FEED_REFRESHED, AppEvents


class TestAppEvents:
    def test_event_names(self):
        assert FEED_REFRESHED == "feedRefreshed"
        assert CURRENCY_SELECTION_CHANGED == "currencySelectionChanged"

    def test_emit_calls_handlers_in_order(self):
        events = AppEvents()
        calls = []
        events.register(FEED_REFRESHED, lambda **kw: calls.append(("first", kw)))
        events.register(FEED_REFRESHED, lambda **kw: calls.append(("second", kw)))

        events.emit(FEED_REFRESHED, alert="ok")

        assert calls == [("first", {"alert": "ok"}), ("second", {"alert": "ok"})]

    def test_emit_only_reaches_registered_event(self):
        events = AppEvents()
        handler = Mock()
        events.register(CURRENCY_SELECTION_CHANGED, handler)

        events.emit(FEED_REFRESHED, alert="ok")
        handler.assert_not_called()

        events.emit(CURRENCY_SELECTION_CHANGED, currency="USD", series=[])
        handler.assert_called_once_with(currency="USD", series=[])

    def test_unknown_event(self):
        events = AppEvents()
        with pytest.raises(ValueError, match="unknown event"):
            events.register("dataReady", Mock())
        with pytest.raises(ValueError):
            events.emit("dataReady")

    def test_handler_errors_propagate(self):
        events = AppEvents()
        events.register(FEED_REFRESHED, Mock(side_effect=RuntimeError("view broke")))
        with pytest.raises(RuntimeError, match="view broke"):
            events.emit(FEED_REFRESHED)

    def test_handlers_returns_copy(self):
        events = AppEvents()
        events.register(FEED_REFRESHED, Mock())
        events.handlers(FEED_REFRESHED).clear()
        assert len(events.handlers(FEED_REFRESHED)) == 1
