"""
Tests for the DST status oracle (America/New_York rules).
"""

from datetime import date, timedelta

import pytest

from tempmap.engine.dst_status import (
    is_dst,
    dst_status,
)


class TestIsDst:
    def test_winter(self):
        assert is_dst(date(2020, 1, 15)) is False

    def test_summer(self):
        assert is_dst(date(2020, 7, 4)) is True

    def test_spring_forward_day_starts_in_standard_time(self):
        # Clocks jump at 2 AM; midnight is still EST
        assert is_dst(date(2020, 3, 8)) is False

    def test_fall_back_day_starts_in_dst(self):
        # Clocks fall back at 2 AM; midnight is still EDT
        assert is_dst(date(2020, 11, 1)) is True


class TestDstStatus:
    @pytest.mark.parametrize("d, expected", [
        (date(2020, 3, 7), (False, False)),
        (date(2020, 3, 8), (False, True)),
        (date(2020, 3, 9), (True, True)),
        (date(2020, 10, 31), (True, True)),
        (date(2020, 11, 1), (True, False)),
        (date(2020, 11, 2), (False, False)),
        (date(2021, 3, 14), (False, True)),
        (date(2021, 11, 7), (True, False)),
    ])
    def test_status_pairs(self, d, expected):
        assert dst_status(d) == expected

    def test_two_transitions_per_year(self):
        d = date(2020, 1, 1)
        spring, fall = [], []
        while d.year == 2020:
            if dst_status(d) == (False, True):
                spring.append(d)
            if dst_status(d) == (True, False):
                fall.append(d)
            d += timedelta(days=1)
        assert spring == [date(2020, 3, 8)]
        assert fall == [date(2020, 11, 1)]

    def test_last_representable_date(self):
        assert dst_status(date.max) == (False, False)

    def test_first_representable_date(self):
        assert dst_status(date.min) == (False, False)
