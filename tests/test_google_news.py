"""
Tests for the Google News client.
"""
import asyncio
from unittest.mock import Mock

import aiohttp
import pytest

from gnews.config import Config
from gnews.core.article import FilterType
from gnews.core.errors import FeedFetchError, FeedParseError
from gnews.fetchers.google_news import GoogleNewsClient, build_feed_url


class FakeResponse:
    def __init__(self, body=b"", status=200):
        self.body = body
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                Mock(real_url="https://news.google.com/rss"), (),
                status=self.status, message="Service Unavailable",
            )

    async def read(self):
        return self.body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    def __init__(self, response=None, error=None, delay=0):
        self.response = response
        self.error = error
        self.delay = delay
        self.requested = []
        self.closed = False

    def get(self, url):
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self._delayed_response()

    def _delayed_response(self):
        session = self

        class _Ctx:
            async def __aenter__(self):
                if session.delay:
                    await asyncio.sleep(session.delay)
                return session.response

            async def __aexit__(self, *exc_info):
                return False

        return _Ctx()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True
        return False


def client_for(session, timeout=5):
    return GoogleNewsClient(timeout=timeout, session_factory=lambda: session)


class TestBuildFeedUrl:

    def test_top_stories(self):
        assert build_feed_url(FilterType.TOP) == "https://news.google.com/rss?hl=ja&gl=JP&ceid=JP:ja"

    @pytest.mark.parametrize("filter_type", [f for f in FilterType if f is not FilterType.TOP])
    def test_topic(self, filter_type):
        assert build_feed_url(filter_type) == (
            "https://news.google.com/news/rss/headlines/section/topic/"
            f"{filter_type.code}?hl=ja&gl=JP&ceid=JP:ja"
        )


class TestGoogleNewsClient:

    def test_fetch_parses_body(self, sample_feed):
        session = FakeSession(FakeResponse(sample_feed))

        articles = asyncio.run(client_for(session).fetch(FilterType.SCIENCE))

        assert len(articles) == 2
        assert articles[0].source == "科学新聞"
        assert session.requested == [build_feed_url(FilterType.SCIENCE)]
        assert session.closed

    def test_one_request_per_fetch(self, sample_feed):
        sessions = []

        def factory():
            sessions.append(FakeSession(FakeResponse(sample_feed)))
            return sessions[-1]

        client = GoogleNewsClient(timeout=5, session_factory=factory)
        asyncio.run(client.fetch(FilterType.TOP))
        asyncio.run(client.fetch(FilterType.TOP))

        assert [len(s.requested) for s in sessions] == [1, 1]

    def test_network_error_is_wrapped(self):
        cause = aiohttp.ClientConnectionError("connection refused")
        session = FakeSession(error=cause)

        with pytest.raises(FeedFetchError) as excinfo:
            asyncio.run(client_for(session).fetch(FilterType.TOP))

        assert excinfo.value.__cause__ is cause
        assert "connection refused" in str(excinfo.value)
        assert session.requested == [build_feed_url(FilterType.TOP)]

    def test_http_error_status(self):
        session = FakeSession(FakeResponse(status=503))

        with pytest.raises(FeedFetchError) as excinfo:
            asyncio.run(client_for(session).fetch(FilterType.WORLD))

        assert "503" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, aiohttp.ClientResponseError)

    def test_timeout(self):
        session = FakeSession(FakeResponse(b"<rss/>"), delay=1)

        with pytest.raises(FeedFetchError, match="timed out"):
            asyncio.run(client_for(session, timeout=0.01).fetch(FilterType.TOP))

    def test_invalid_xml_raises_parse_error(self):
        session = FakeSession(FakeResponse(b"<html><body>oops"))

        with pytest.raises(FeedParseError):
            asyncio.run(client_for(session).fetch(FilterType.TOP))

    def test_empty_body_yields_no_articles(self):
        session = FakeSession(FakeResponse(b""))

        assert asyncio.run(client_for(session).fetch(FilterType.TOP)) == []

    def test_timeout_defaults_to_config(self, monkeypatch):
        monkeypatch.delenv("GNEWS_HTTP__TIMEOUT_SECONDS", raising=False)
        monkeypatch.setattr("gnews.config.config", Config())
        assert GoogleNewsClient().timeout == 60

    def test_timeout_from_environment(self, monkeypatch):
        monkeypatch.setenv("GNEWS_HTTP__TIMEOUT_SECONDS", "15")
        monkeypatch.setattr("gnews.config.config", Config())
        assert GoogleNewsClient().timeout == 15
