"""
Tests for publication date parsing and formatting.
"""
from datetime import timezone

import pytest

from gnews.formatters.dates import format_pub_date, parse_pub_date


class TestFormatPubDate:

    def test_converts_gmt_to_tokyo(self):
        assert format_pub_date("Mon, 02 Jan 2023 03:04:05 GMT") == "2023/01/02 12:04"

    def test_crosses_the_date_line(self):
        assert format_pub_date("Sun, 31 Dec 2023 20:00:00 GMT") == "2024/01/01 05:00"

    def test_numeric_offset(self):
        assert format_pub_date("Mon, 02 Jan 2023 12:04:05 +0900") == "2023/01/02 12:04"

    def test_zero_offset(self):
        assert format_pub_date("Mon, 02 Jan 2023 03:04:05 -0000") == "2023/01/02 12:04"

    def test_missing_zone_is_treated_as_utc(self):
        assert format_pub_date("Mon, 02 Jan 2023 03:04:05") == "2023/01/02 12:04"

    def test_japan_zone_abbreviation(self):
        assert format_pub_date("Mon, 2 Jan 2023 03:04:05 JST") == "2023/01/02 03:04"

    def test_us_zone_abbreviation(self):
        assert format_pub_date("Mon, 2 Jan 2023 03:04:05 EST") == "2023/01/02 17:04"

    def test_iso_date_is_accepted(self):
        assert format_pub_date("2023-01-02") == "2023/01/02 09:00"

    def test_custom_timezone(self):
        assert format_pub_date("Mon, 02 Jan 2023 03:04:05 GMT", tz=timezone.utc) == "2023/01/02 03:04"

    @pytest.mark.parametrize("value", ["", "   ", None, "not a date", "yesterday", "Mon, 99 Foo 2023"])
    def test_unparsable_values_give_none(self, value):
        assert format_pub_date(value) is None


class TestParsePubDate:

    def test_result_is_timezone_aware(self):
        parsed = parse_pub_date("Mon, 02 Jan 2023 03:04:05 GMT")
        assert parsed.tzinfo is not None
        assert parsed.astimezone(timezone.utc).hour == 3

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_pub_date("\n  Mon, 02 Jan 2023 03:04:05 GMT  ") is not None
