from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from mailchimp_api import MailChimpError
from mailchimp_api.params import build_query, format_datetime, is_numeric, to_decimal


def test_build_query_flattens_nested_structures() -> None:
    params = {
        "order": {
            "id": "1001",
            "shipping": None,
            "items": [{"product_id": 7, "cost": 4.5}, {"product_id": 8, "cost": 1}],
        },
        "double_optin": False,
    }
    assert build_query(params) == {
        "order[id]": "1001",
        "order[items][0][product_id]": "7",
        "order[items][0][cost]": "4.5",
        "order[items][1][product_id]": "8",
        "order[items][1][cost]": "1",
        "double_optin": "false",
    }


def test_build_query_formats_datetimes() -> None:
    assert build_query({"since": datetime(2012, 3, 4, 5, 6, 7)}) == {"since": "2012-03-04 05:06:07"}


def test_format_datetime_converts_aware_values_to_utc() -> None:
    tz = timezone(timedelta(hours=2))
    assert format_datetime(datetime(2012, 3, 4, 12, 0, 0, tzinfo=tz)) == "2012-03-04 10:00:00"
    assert format_datetime(date(2012, 3, 4)) == "2012-03-04 00:00:00"
    assert format_datetime("2012-03-04") == "2012-03-04"
    assert format_datetime(None) is None


@pytest.mark.parametrize("value", [0, 3, 2.5, Decimal("1.10"), "12", "-0.5", " 1e3 ", ".5"])
def test_is_numeric_accepts(value) -> None:
    assert is_numeric(value)


@pytest.mark.parametrize("value", [True, False, None, "", "abc", "1,5", "0x1A", [1], "nan", float("nan"), float("inf"), Decimal("NaN")])
def test_is_numeric_rejects(value) -> None:
    assert not is_numeric(value)


def test_to_decimal_keeps_the_written_value() -> None:
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(" 2.50 ") == Decimal("2.50")
    assert to_decimal(3) == Decimal(3)


def test_decimals_are_sent_in_plain_notation() -> None:
    assert build_query({"total": Decimal("1E+3"), "tax": Decimal("0.30")}) == {"total": "1000", "tax": "0.30"}


def test_format_datetime_rejects_other_types() -> None:
    with pytest.raises(MailChimpError, match="Unsupported datetime value"):
        format_datetime(20120501)
