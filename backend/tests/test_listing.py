"""
BlogHub Backend — List Filter Unit Tests
==========================================

What:  Tests for date-bound parsing and pagination arithmetic.
"""

from datetime import datetime, timezone

import pytest

from bloghub.schemas.common import ListParams
from bloghub.services.listing import _escape_like, parse_date_bound


class TestParseDateBound:

    def test_plain_date_is_midnight_utc(self):
        assert parse_date_bound("2024-03-01") == datetime(2024, 3, 1, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        assert parse_date_bound("2024-03-01T10:30:00Z") == datetime(
            2024, 3, 1, 10, 30, tzinfo=timezone.utc
        )

    def test_offset_converted_to_utc(self):
        assert parse_date_bound("2024-03-01T02:00:00+02:00") == datetime(
            2024, 3, 1, 0, 0, tzinfo=timezone.utc
        )

    def test_garbage_raises(self):
        with pytest.raises(ValueError):
            parse_date_bound("yesterday")


class TestListParams:

    def test_first_page_skips_nothing(self):
        assert ListParams().skip == 0

    def test_skip_is_page_minus_one_times_limit(self):
        assert ListParams(page=3, limit=5).skip == 10

    def test_page_must_be_positive(self):
        with pytest.raises(ValueError):
            ListParams(page=0)


def test_like_wildcards_escaped():
    assert _escape_like("100%_done\\") == "100\\%\\_done\\\\"
