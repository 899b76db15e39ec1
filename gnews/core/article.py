"""
Article data model for gnews.
"""
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Article:
    """
    Represents a single <item> of a Google News RSS feed.
    """
    title: str = ""
    link: str = ""
    pub_date_str: str = ""  # verbatim RFC 2822 string, parsed at display time
    description: str = ""
    source: str = ""


class FilterType(Enum):
    """
    News categories offered by Google News.

    Each member carries the topic code used in the request URL and the
    Japanese label shown as the screen title.
    """
    TOP = ("NONE", "トップニュース")
    WORLD = ("WORLD", "世界")
    NATION = ("NATION", "日本")
    BUSINESS = ("BUSINESS", "ビジネス")
    TECHNOLOGY = ("TECHNOLOGY", "テクノロジー")
    ENTERTAINMENT = ("ENTERTAINMENT", "エンタメ")
    SPORTS = ("SPORTS", "スポーツ")
    SCIENCE = ("SCIENCE", "科学")
    HEALTH = ("HEALTH", "健康")

    def __init__(self, code: str, label: str):
        self.code = code
        self.label = label

    @classmethod
    def from_name(cls, name: str) -> "FilterType":
        """
        Look up a category by member name or topic code, case-insensitively.

        Args:
            name: e.g. 'sports', 'TOP' or 'none'

        Returns:
            The matching FilterType

        Raises:
            ValueError: if nothing matches
        """
        key = name.strip().upper()
        for filter_type in cls:
            if key in (filter_type.name, filter_type.code):
                return filter_type
        raise ValueError(f"Unknown category: {name}")
