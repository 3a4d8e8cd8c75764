from datetime import date, datetime

from reporting.format_utils import (
    format_cost,
    format_number,
    format_swedish_date,
    format_swedish_datetime,
    safe_string,
    yes_no,
)


def test_swedish_date_from_various_inputs():
    assert format_swedish_date(date(2026, 4, 1)) == "2026-04-01"
    assert format_swedish_date(datetime(2026, 3, 14, 9, 30)) == "2026-03-14"
    assert format_swedish_date("2026-03-14T09:30:00Z") == "2026-03-14"
    assert format_swedish_date("14/03/2026") == "2026-03-14"
    assert format_swedish_date(None) == ""
    assert format_swedish_date("snart") == "snart"


def test_swedish_datetime():
    assert format_swedish_datetime(datetime(2026, 10, 19, 7, 5, 9)) == "2026-10-19 07:05:09"


def test_format_number():
    assert format_number(62.0) == "62"
    assert format_number(62.5) == "62.5"
    assert format_number(1250.256) == "1250.26"
    assert format_number("48") == "48"
    assert format_number(None) == ""
    assert format_number("ca 50 kvm") == "ca 50 kvm"


def test_format_cost_is_zero_for_non_positive():
    assert format_cost(0) == "0"
    assert format_cost(-150) == "0"
    assert format_cost(1500) == "1500"
    assert format_cost(99.5) == "99.5"


def test_safe_string_and_yes_no():
    assert safe_string(None) == ""
    assert safe_string(705) == "705"
    assert yes_no(True) == "Ja"
    assert yes_no(False) == "Nej"
