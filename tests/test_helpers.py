from datetime import date

import pytest

from utils.helpers import (
    format_date,
    generate_id,
    is_valid_phone_number,
    month_range,
    round_half_up,
)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4999) == 2
    assert round_half_up(66.666) == 67


@pytest.mark.parametrize("phone, expected", [
    ("0901234567", True),
    ("0123456789", True),
    ("901234567", False),
    ("09012345678", False),
    ("09012a4567", False),
    ("", False),
])
def test_is_valid_phone_number(phone, expected):
    assert is_valid_phone_number(phone) is expected


def test_generate_id_is_unique_string():
    ids = {generate_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(len(i) > 5 for i in ids)


class TestMonthRange:
    def test_regular_month(self):
        assert month_range("2024-03") == (date(2024, 3, 1), date(2024, 3, 31))

    def test_leap_february(self):
        assert month_range("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
        assert month_range("2023-02")[1] == date(2023, 2, 28)

    @pytest.mark.parametrize("month", ["2024-13", "2024", "abc", "", None])
    def test_invalid_month(self, month):
        with pytest.raises(ValueError):
            month_range(month)


def test_format_date():
    assert format_date(date(2024, 3, 5)) == "05/03/2024"
    assert format_date("2024-03-05") == "05/03/2024"
