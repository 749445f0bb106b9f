"""Helpers that turn Python call arguments into MailChimp v1.3 wire parameters.

The v1.3 API takes form-encoded POST bodies in the nested bracket notation
(``order[items][0][cost]=9.5``). `build_query` produces that flat mapping from
nested dicts and lists.

Examples:
    >>> build_query({"cid": "abc", "opts": {"to_email": True}, "emails": ["a@x.io", "b@x.io"]})
    {'cid': 'abc', 'opts[to_email]': 'true', 'emails[0]': 'a@x.io', 'emails[1]': 'b@x.io'}
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from decimal import Decimal
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Union

from .errors import MailChimpError

API_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_numeric(value: Any) -> bool:
    """True for real numbers and numeric strings. Booleans are not numeric."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, Real):
        return math.isfinite(value)
    if isinstance(value, str):
        return bool(_NUMERIC_STRING.match(value))
    return False


def to_decimal(value: Any) -> Decimal:
    """Coerce a value accepted by `is_numeric` into a Decimal.

    Floats go through `str` so that 0.1 stays 0.1 rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, str)):
        return Decimal(str(value).strip())
    return Decimal(str(float(value)))


def format_datetime(value: Union[str, date, datetime, None]) -> Optional[str]:
    """Serialize a date/datetime in the API's ``YYYY-MM-DD HH:MM:SS`` format.

    Aware datetimes are converted to UTC. Strings and None pass through.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.strftime(API_DATETIME_FORMAT)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).strftime(API_DATETIME_FORMAT)
    raise MailChimpError(f"Unsupported datetime value: {value!r}")


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (date, datetime)):
        return format_datetime(value) or ""
    return str(value)


def build_query(params: Mapping[str, Any], prefix: Optional[str] = None) -> Dict[str, str]:
    """Flatten nested params into bracket-notation form fields, dropping None values."""
    out: Dict[str, str] = {}
    for k, v in params.items():
        key = f"{prefix}[{k}]" if prefix else str(k)
        if v is None:
            continue
        if isinstance(v, Mapping):
            out.update(build_query(v, key))
        elif isinstance(v, (list, tuple)):
            out.update(build_query({i: item for i, item in enumerate(v)}, key))
        else:
            out[key] = _scalar(v)
    return out
