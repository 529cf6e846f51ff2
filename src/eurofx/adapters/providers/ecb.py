"""
ECB Reference Rate Feed Provider

This module implements the client for the European Central Bank's euro
foreign exchange reference rates (the 90-day history XML by default).
The XML is parsed into the plain feed structure RateTable.ingest expects:

    <Cube time="2019-01-03">
        <Cube currency="USD" rate="1.1348"/>
    </Cube>

becomes ``{"date": "2019-01-03", "entries": [{"currencyCode": "USD", "rate": "1.1348"}]}``.
Values are passed through as strings; the rate table validates them.

The provider does not cache: every call goes to the network.

Files that USE this module:
- eurofx.app (builds the provider for the controller)
- tests.test_providers (unit tests)

Files that this module USES:
- eurofx.adapters.providers.base (FeedProvider interface)
- eurofx.config (settings for feed URL and timeout)
- eurofx.domain.errors (FeedUnavailableError)
"""
from __future__ import annotations

import logging
import warnings
from typing import Any, Optional

import requests
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from eurofx.adapters.providers.base import FeedProvider
from eurofx.config import settings
from eurofx.domain.errors import FeedUnavailableError

log = logging.getLogger(__name__)


class EcbFeedProvider(FeedProvider):
    def __init__(self, url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize ECB feed provider.
        
        Args:
            url: Optional custom feed URL (defaults to settings.feed_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.url = url or settings.feed_url
        self.timeout = timeout or settings.http_timeout_seconds

    def fetch_xml(self) -> str:
        """
        Download the raw feed document.
        
        Returns:
            XML document as text
            
        Raises:
            FeedUnavailableError: On timeouts, HTTP errors or connection errors
        """
        try:
            log.info("Fetching rate feed from %s", self.url)
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.warning("Rate feed timeout after %d seconds", self.timeout)
            raise FeedUnavailableError(f"Rate feed timeout after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            log.error("Rate feed HTTP error: %s", e)
            raise FeedUnavailableError(f"Rate feed HTTP error: {e}") from e
        except requests.exceptions.RequestException as e:
            log.warning("Rate feed request failed (network/connection error): %s", e)
            raise FeedUnavailableError(f"Rate feed request failed: {e}") from e
        return resp.text

    @staticmethod
    def parse_xml(xml: str) -> list[dict[str, Any]]:
        """
        Turn the ECB XML document into the plain feed structure.
        
        Only dated ``Cube`` elements become entries. Their child ``Cube``
        elements become rate pairs; missing attributes are passed on as
        None so the rate table can reject them.
        
        Raises:
            FeedUnavailableError: If the document holds no dated Cube elements
        """
        # html.parser lower-cases tag and attribute names
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
            soup = BeautifulSoup(xml, "html.parser")
        feed = []
        for day in soup.find_all("cube", attrs={"time": True}):
            entries = [
                {"currencyCode": cube.get("currency"), "rate": cube.get("rate")}
                for cube in day.find_all("cube", recursive=False)
            ]
            feed.append({"date": day["time"], "entries": entries})

        if not feed:
            raise FeedUnavailableError("Rate feed contains no dated Cube elements")
        return feed

    def fetch_feed(self) -> list[dict[str, Any]]:
        """
        Fetch and parse the feed.
        
        Returns:
            Feed entries in document order (the ECB publishes newest first)
            
        Raises:
            FeedUnavailableError: If the feed cannot be fetched or holds no data
        """
        feed = self.parse_xml(self.fetch_xml())
        log.info("Rate feed fetched: %d dated entries", len(feed))
        return feed
