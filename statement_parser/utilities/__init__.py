from .config_logging import LOGGING, configure_logging
from .converters_scalar import parse_month_day, parse_short_date, to_amount
from .core_util import (
    ascii_text,
    is_null_or_whitespace,
    open_for_read,
    open_for_write,
    read_file_bytes,
)

__all__ = [
    "is_null_or_whitespace",
    "ascii_text",
    "to_amount",
    "parse_short_date",
    "parse_month_day",
    "open_for_read",
    "open_for_write",
    "read_file_bytes",
    "LOGGING",
    "configure_logging",
]
