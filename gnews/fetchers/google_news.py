"""
Google News RSS fetcher for gnews.
"""
import asyncio
import logging
from typing import Callable, List, Optional, Protocol
from urllib.parse import urlencode

import aiohttp
import async_timeout

from gnews.config import get_config
from gnews.core.article import Article, FilterType
from gnews.core.errors import FeedFetchError
from gnews.core.parser import FeedParser

# Configure logging
logger = logging.getLogger(__name__)

TOP_STORIES_URL = "https://news.google.com/rss"
TOPIC_URL = "https://news.google.com/news/rss/headlines/section/topic/{code}"

# Japanese edition; the upstream feed expects exactly these parameters.
LOCALE_PARAMS = (
    ("hl", "ja"),
    ("gl", "JP"),
    ("ceid", "JP:ja"),
)


def build_feed_url(filter_type: FilterType) -> str:
    """
    Build the RSS URL for a category.

    Args:
        filter_type: The category to fetch

    Returns:
        The feed URL including the locale query string
    """
    if filter_type is FilterType.TOP:
        base = TOP_STORIES_URL
    else:
        base = TOPIC_URL.format(code=filter_type.code)
    return f"{base}?{urlencode(LOCALE_PARAMS, safe=':')}"


class FeedSource(Protocol):
    """
    Anything that can produce the articles of a category.
    """
    async def fetch(self, filter_type: FilterType) -> List[Article]:
        ...


class GoogleNewsClient:
    """
    Fetches and parses Google News RSS feeds.

    Every call opens its own session and performs a single GET; nothing is
    retried or cached.
    """
    def __init__(self,
                 timeout: Optional[float] = None,
                 session_factory: Callable[[], aiohttp.ClientSession] = aiohttp.ClientSession):
        """
        Initialize the GoogleNewsClient.

        Args:
            timeout: Total request timeout in seconds, defaults to http.timeout_seconds
            session_factory: Callable returning an aiohttp-compatible session
        """
        self.timeout = timeout if timeout is not None else get_config('http.timeout_seconds', 60)
        self.session_factory = session_factory

    async def fetch(self, filter_type: FilterType) -> List[Article]:
        """
        Fetch the feed of a category.

        Args:
            filter_type: The category to fetch

        Returns:
            List of Article objects in feed order

        Raises:
            FeedFetchError: if the request fails or returns a non-2xx status
            FeedParseError: if the body is not valid XML
        """
        url = build_feed_url(filter_type)
        logger.info(f"Fetching {filter_type.name} feed: {url}")

        try:
            async with async_timeout.timeout(self.timeout):
                async with self.session_factory() as session:
                    async with session.get(url) as response:
                        response.raise_for_status()
                        body = await response.read()
        except aiohttp.ClientResponseError as e:
            logger.error(f"Feed request for {filter_type.name} failed with status {e.status}")
            raise FeedFetchError(f"HTTP {e.status}: {e.message}") from e
        except asyncio.TimeoutError as e:
            logger.error(f"Timed out fetching {filter_type.name} feed after {self.timeout}s")
            raise FeedFetchError(f"Request timed out after {self.timeout} seconds") from e
        except aiohttp.ClientError as e:
            logger.error(f"An error occurred while fetching the feed: {e}")
            raise FeedFetchError(f"Network error: {e}") from e

        articles = FeedParser().parse(body)
        logger.info(f"Fetched {len(articles)} articles for {filter_type.name}")
        return articles
