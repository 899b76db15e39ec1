"""
Shared fixtures for the gnews tests.
"""
import pytest

from gnews.core.article import Article


SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <generator>NFE/5.0</generator>
    <title>トップニュース - Google ニュース</title>
    <link>https://news.google.com/?hl=ja&amp;gl=JP&amp;ceid=JP:ja</link>
    <language>ja</language>
    <item>
      <title>新型ロケット打ち上げ成功 - 科学新聞</title>
      <link>https://news.google.com/articles/abc123</link>
      <guid isPermaLink="false">abc123</guid>
      <pubDate>Mon, 02 Jan 2023 03:04:05 GMT</pubDate>
      <description>&lt;a href="https://example.jp/rocket"&gt;新型ロケット&lt;/a&gt;</description>
      <source url="https://example.jp">科学新聞</source>
    </item>
    <item>
      <title>株価が続伸 - 経済日報</title>
      <link>https://news.google.com/articles/def456</link>
      <guid isPermaLink="false">def456</guid>
      <pubDate>Sun, 31 Dec 2023 20:00:00 GMT</pubDate>
      <description>株価</description>
      <source url="https://keizai.example.jp">経済日報</source>
    </item>
  </channel>
</rss>
""".encode("utf-8")


class FakeSource:
    """
    FeedSource double returning (or raising) queued results in order.
    """
    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    async def fetch(self, filter_type):
        self.calls.append(filter_type)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def sample_feed():
    return SAMPLE_FEED


@pytest.fixture
def make_source():
    return FakeSource


@pytest.fixture
def articles():
    return [
        Article(
            title="新型ロケット打ち上げ成功 - 科学新聞",
            link="https://news.google.com/articles/abc123",
            pub_date_str="Mon, 02 Jan 2023 03:04:05 GMT",
            description="rocket",
            source="科学新聞",
        ),
        Article(
            title="株価が続伸 - 経済日報",
            link="https://news.google.com/articles/def456",
            pub_date_str="",
            description="",
            source="経済日報",
        ),
    ]
