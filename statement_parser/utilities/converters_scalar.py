# statement_parser/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Final, Tuple

SHORT_DATE_FORMAT: Final = "%m/%d/%y"


def to_amount(value: str) -> Decimal:
    """
    Convert a literal statement amount to an exact Decimal.

    Accepts an optional sign (leading or trailing, not both), digits with
    optional ``,`` thousands groups and an optional fractional part:
      - "1234.56", "1,234.56"  -> Decimal('1234.56')
      - "-25.00", "+3"         -> Decimal('-25.00'), Decimal('3')
      - ".50"                  -> Decimal('0.50')
      - "25.00-"               -> Decimal('-25.00')

    Raises:
        ValueError: if the text is not shaped like an amount.
    """
    if not isinstance(value, str):
        raise ValueError(
            f"Unsupported type for amount conversion: {type(value).__name__}"
        )
    s = value.strip()
    m = _AMOUNT_RE.fullmatch(s)
    if not m or (m.group("lead") and m.group("trail")):
        raise ValueError(f"Not an amount: {value!r}")
    cleaned = (m.group("lead") or m.group("trail") or "") + m.group("num").replace(",", "")
    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(
            f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
        ) from e


def parse_short_date(value: str) -> date:
    """Parse ``MM/dd/yy`` (e.g. ``12/15/22``) into a date."""
    txt = value.strip()
    if not _SHORT_DATE_RE.fullmatch(txt):
        raise ValueError(f"Expected MM/dd/yy date, got {value!r}")
    try:
        return datetime.strptime(txt, SHORT_DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(f"Invalid calendar date: {value!r}") from e


def parse_month_day(value: str) -> Tuple[int, int]:
    """Parse ``MM/dd`` into ``(month, day)`` without validating the calendar."""
    m = _MONTH_DAY_RE.fullmatch(value.strip())
    if not m:
        raise ValueError(f"Expected MM/dd date, got {value!r}")
    month, day = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range in {value!r}")
    return month, day


_AMOUNT_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<lead>[+-])?(?P<num>(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d*)?|\.\d+)(?P<trail>[+-])?"
)
_SHORT_DATE_RE: Final[re.Pattern[str]] = re.compile(r"\d{2}/\d{2}/\d{2}")
_MONTH_DAY_RE: Final[re.Pattern[str]] = re.compile(r"(\d{2})/(\d{2})")
