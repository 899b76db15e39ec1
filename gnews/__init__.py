"""
gnews - Google News RSS reader

Fetches the Japanese edition of the Google News RSS feeds, parses them into
articles and exposes a small observable view model for a presentation layer.
"""

__version__ = "0.1.0"
