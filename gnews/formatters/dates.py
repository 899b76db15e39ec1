"""
Publication date helpers for gnews.
"""
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from dateutil.parser import parse as parse_date

DISPLAY_TIMEZONE = ZoneInfo("Asia/Tokyo")
DISPLAY_FORMAT = "%Y/%m/%d %H:%M"

# Timezone abbreviations seen in RSS pubDate values
TZINFOS = {
    "GMT": timezone.utc,
    "UT": timezone.utc,
    "UTC": timezone.utc,
    "JST": timezone(timedelta(hours=9)),
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
}


def parse_pub_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an RSS pubDate such as 'Mon, 02 Jan 2023 03:04:05 GMT'.

    Day and month names are matched in English regardless of the process
    locale. A date without zone information is taken as UTC.

    Args:
        value: The raw pubDate text

    Returns:
        An aware datetime, or None if the value is empty or unparsable
    """
    if not value or not value.strip():
        return None
    try:
        parsed = parse_date(value.strip(), tzinfos=TZINFOS)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_pub_date(value: Optional[str], tz: tzinfo = DISPLAY_TIMEZONE) -> Optional[str]:
    """
    Render a raw pubDate as 'yyyy/MM/dd HH:mm' in the display timezone.

    Args:
        value: The raw pubDate text
        tz: Target timezone, Asia/Tokyo by default

    Returns:
        The formatted string, or None when the date cannot be parsed
    """
    parsed = parse_pub_date(value)
    if parsed is None:
        return None
    return parsed.astimezone(tz).strftime(DISPLAY_FORMAT)
