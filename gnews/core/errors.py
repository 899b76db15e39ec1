"""
Exceptions raised while retrieving and parsing feeds.
"""


class FeedError(Exception):
    """
    Base class for every failure a feed source can report.

    Consumers only need to catch this; network and parse problems are
    presented the same way.
    """


class FeedFetchError(FeedError):
    """The HTTP request for a feed failed (connectivity, timeout or non-2xx)."""


class FeedParseError(FeedError):
    """The response body was not a well-formed XML document."""
