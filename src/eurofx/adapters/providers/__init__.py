"""
Provider Adapters - Rate Feed Clients

This package contains adapters for upstream rate feeds.
All providers implement the FeedProvider interface.
"""

from eurofx.adapters.providers.base import FeedProvider, StaticFeedProvider
from eurofx.adapters.providers.ecb import EcbFeedProvider

__all__ = [
    "FeedProvider",
    "StaticFeedProvider",
    "EcbFeedProvider",
]
