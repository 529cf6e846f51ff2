"""
Provider Tests - Unit Tests for Feed Provider Classes

This module contains unit tests for EcbFeedProvider and StaticFeedProvider.
It tests XML parsing, HTTP error handling and the hand-off to RateTable.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- eurofx.adapters.providers (EcbFeedProvider, StaticFeedProvider)
- eurofx.application.rate_table (RateTable for end-to-end ingestion)
- unittest.mock (Mock for HTTP mocking)
- pytest (testing framework)
"""
from datetime import date
from unittest.mock import Mock, patch

import pytest
import requests

from eurofx.adapters.providers import EcbFeedProvider, StaticFeedProvider
from eurofx.application.rate_table import RateTable
from eurofx.domain.errors import FeedUnavailableError, ParseError

ECB_XML = """<?xml version="1.0" encoding="UTF-8"?>
<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">
    <gesmes:subject>Reference rates</gesmes:subject>
    <gesmes:Sender>
        <gesmes:name>European Central Bank</gesmes:name>
    </gesmes:Sender>
    <Cube>
        <Cube time="2019-01-03">
            <Cube currency="USD" rate="1.1348"/>
            <Cube currency="JPY" rate="121.70"/>
            <Cube currency="GBP" rate="0.90050"/>
        </Cube>
        <Cube time="2019-01-02">
            <Cube currency="USD" rate="1.1309"/>
            <Cube currency="JPY" rate="125.27"/>
            <Cube currency="GBP" rate="0.89720"/>
        </Cube>
    </Cube>
</gesmes:Envelope>
"""


def _response(text=ECB_XML, status_error=None):
    resp = Mock()
    resp.text = text
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    else:
        resp.raise_for_status.return_value = None
    return resp


class TestEcbParseXml:
    def test_parse_xml(self):
        feed = EcbFeedProvider.parse_xml(ECB_XML)
        assert feed == [
            {"date": "2019-01-03", "entries": [
                {"currencyCode": "USD", "rate": "1.1348"},
                {"currencyCode": "JPY", "rate": "121.70"},
                {"currencyCode": "GBP", "rate": "0.90050"},
            ]},
            {"date": "2019-01-02", "entries": [
                {"currencyCode": "USD", "rate": "1.1309"},
                {"currencyCode": "JPY", "rate": "125.27"},
                {"currencyCode": "GBP", "rate": "0.89720"},
            ]},
        ]

    def test_missing_attributes_passed_through(self):
        xml = '<Cube><Cube time="2019-01-03"><Cube currency="USD"/></Cube></Cube>'
        feed = EcbFeedProvider.parse_xml(xml)
        assert feed == [{"date": "2019-01-03", "entries": [{"currencyCode": "USD", "rate": None}]}]
        with pytest.raises(ParseError, match="rate is missing"):
            RateTable().ingest(feed)

    def test_no_dated_cubes(self):
        with pytest.raises(FeedUnavailableError, match="no dated Cube"):
            EcbFeedProvider.parse_xml("<html><body>Service unavailable</body></html>")


class TestEcbFeedProvider:
    def test_init_with_defaults(self):
        provider = EcbFeedProvider()
        assert provider.url.endswith("eurofxref-hist-90d.xml")
        assert provider.timeout == 10

    def test_init_with_overrides(self):
        provider = EcbFeedProvider(url="https://example.test/feed.xml", timeout=3)
        assert provider.url == "https://example.test/feed.xml"
        assert provider.timeout == 3

    @patch("eurofx.adapters.providers.ecb.requests.get")
    def test_fetch_feed_success(self, mock_get):
        mock_get.return_value = _response()

        provider = EcbFeedProvider(url="https://example.test/feed.xml", timeout=5)
        feed = provider.fetch_feed()

        mock_get.assert_called_once_with("https://example.test/feed.xml", timeout=5)
        assert [entry["date"] for entry in feed] == ["2019-01-03", "2019-01-02"]

    @patch("eurofx.adapters.providers.ecb.requests.get")
    def test_fetched_feed_ingests(self, mock_get):
        mock_get.return_value = _response()

        table = RateTable()
        table.ingest(EcbFeedProvider().fetch_feed())

        latest = table.latest_snapshot()
        assert latest.date == date(2019, 1, 3)
        assert table.find_rate(latest, "GBP").rate == 0.9005
        assert table.list_currencies() == frozenset({"USD", "JPY", "GBP"})

    @patch("eurofx.adapters.providers.ecb.requests.get")
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(FeedUnavailableError, match="timeout"):
            EcbFeedProvider().fetch_feed()

    @patch("eurofx.adapters.providers.ecb.requests.get")
    def test_http_error(self, mock_get):
        mock_get.return_value = _response(status_error=requests.exceptions.HTTPError("503 Server Error"))
        with pytest.raises(FeedUnavailableError, match="HTTP error"):
            EcbFeedProvider().fetch_feed()

    @patch("eurofx.adapters.providers.ecb.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("no route")
        with pytest.raises(FeedUnavailableError, match="request failed"):
            EcbFeedProvider().fetch_feed()

    @patch("eurofx.adapters.providers.ecb.requests.get")
    def test_no_caching(self, mock_get):
        mock_get.return_value = _response()
        provider = EcbFeedProvider()
        provider.fetch_feed()
        provider.fetch_feed()
        assert mock_get.call_count == 2


class TestStaticFeedProvider:
    def test_returns_deep_copy(self):
        payload = [{"date": "2019-01-02", "entries": [{"currencyCode": "USD", "rate": "1.14"}]}]
        provider = StaticFeedProvider(payload)

        feed = provider.fetch_feed()
        feed[0]["entries"].clear()

        assert provider.fetch_feed() == payload
        assert payload[0]["entries"] == [{"currencyCode": "USD", "rate": "1.14"}]
