# statement_parser/parsers/chase_credit.py
"""
Chase credit-card statements (2017 and 2018 layouts).

Both layouts print every text item as a ``(text)Tj`` line preceded by a
``Tm`` positioning line. A transaction row is a date line ``(MM/dd)Tj``, a
description line and an amount line. The 2018 layout has an extra
``[( )] TJ`` spacer (plus its own ``Tm`` line) before the description.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, List, Optional

from statement_parser.data_model import (
    StatementPeriod,
    StatementType,
    Transaction,
    YearMap,
)
from statement_parser.errors import FieldParseError
from statement_parser.utilities.converters_scalar import (
    parse_month_day,
    parse_short_date,
    to_amount,
)

from .byte_scanner import ByteScanner

log = logging.getLogger(__name__)

CHASE_2017_SIGNATURE: Final = b"(This Statement is a Facsimile - Not an original)Tj"
CHASE_2018_SIGNATURE: Final = (
    b"(payment by the date listed above, you may have to pay a late fee of)Tj"
)

DATE_RANGE_MARKER: Final = b"(Opening/Closing Date)Tj"
TABLE_START_MARKER: Final = b"($ Amount)Tj"
DATE_RANGE_SEPARATOR: Final = " - "
TEXT_PREFIX: Final = "("
TEXT_SUFFIX: Final = ")Tj"


@dataclass(frozen=True)
class ChaseLayout:
    """What differs between the Chase statement templates."""

    name: str
    statement_type: StatementType
    # a table ends at the first row line containing one of these
    table_ends: tuple[str, ...]
    # lines between the date line and the description line
    lines_before_description: int


# Only seen with two tables; a middle table may end differently.
CHASE_2017_LAYOUT: Final = ChaseLayout(
    name="Chase 2017",
    statement_type=StatementType.CHASE_CREDIT_2017,
    table_ends=("(CARDMEMBER SERVICE)Tj", "(Total fees charged in "),
    lines_before_description=1,
)

CHASE_2018_LAYOUT: Final = ChaseLayout(
    name="Chase 2018",
    statement_type=StatementType.CHASE_CREDIT_2018,
    table_ends=("(Total fees charged in ",),
    lines_before_description=3,
)


def shown_text(line: str, field: str, context: str = "") -> str:
    """Return the text of a ``(text)Tj`` line."""
    if not (line.startswith(TEXT_PREFIX) and line.endswith(TEXT_SUFFIX)):
        raise FieldParseError(field, line, context, "expected a '(text)Tj' line")
    return line[len(TEXT_PREFIX) : -len(TEXT_SUFFIX)]


def find_date_range(
    scanner: ByteScanner, context: str = "Chase"
) -> Optional[StatementPeriod]:
    """
    Locate the ``Opening/Closing Date`` header and parse the period under it.

    Returns ``None`` when the header is absent (the stream carries no data).
    """
    if scanner.scan_until(DATE_RANGE_MARKER) is None:
        return None

    # rest of the marker line, then its "Tm" line
    scanner.skip_lines(2)
    line = scanner.read_line()
    text = shown_text(line, "statement period", context)

    start_text, sep, end_text = text.partition(DATE_RANGE_SEPARATOR)
    if not sep:
        raise FieldParseError(
            "statement period", line, context, f"missing {DATE_RANGE_SEPARATOR!r}"
        )
    try:
        start = parse_short_date(start_text)
        end = parse_short_date(end_text)
    except ValueError as e:
        raise FieldParseError("statement period", line, context, str(e)) from e

    period = StatementPeriod.from_dates(start, end)
    log.debug(
        "%s: statement period %s to %s, year map %s",
        context,
        start,
        end,
        dict(period.year_map.months),
    )
    return period


@dataclass(frozen=True)
class ChaseCreditExtractor:
    """Walks the transaction tables of one Chase layout."""

    layout: ChaseLayout

    @property
    def statement_type(self) -> StatementType:
        return self.layout.statement_type

    def extract(self, scanner: ByteScanner) -> List[Transaction]:
        transactions: List[Transaction] = []

        period = find_date_range(scanner, self.layout.name)
        if period is None:
            log.debug("%s: no statement period found", self.layout.name)
            return transactions

        # one table per page, each headed like the first
        table = 0
        while scanner.scan_until(TABLE_START_MARKER) is not None:
            table += 1
            # rest of the header line and the first "Tm" line
            scanner.skip_lines(2)
            line = scanner.read_line()

            row = 0
            while not self._is_table_end(line):
                row += 1
                context = f"{self.layout.name} table {table} row {row}"
                transactions.append(
                    self._parse_row(scanner, line, period.year_map, context)
                )
                # "Tm" line, then the first line of the next row
                scanner.skip_lines(1)
                line = scanner.read_line()
            log.debug("%s: table %d had %d row(s)", self.layout.name, table, row)

        return transactions

    def _is_table_end(self, line: str) -> bool:
        return any(end in line for end in self.layout.table_ends)

    def _parse_row(
        self, scanner: ByteScanner, date_line: str, year_map: YearMap, context: str
    ) -> Transaction:
        date_text = shown_text(date_line, "date", context)
        try:
            month, day = parse_month_day(date_text)
        except ValueError as e:
            raise FieldParseError("date", date_text, context, str(e)) from e
        txn_date = year_map.resolve(month, day, context)

        scanner.skip_lines(self.layout.lines_before_description)
        description = shown_text(scanner.read_line(), "description", context)

        scanner.skip_lines(1)
        amount_text = shown_text(scanner.read_line(), "amount", context)
        try:
            amount = to_amount(amount_text)
        except ValueError as e:
            raise FieldParseError("amount", amount_text, context, str(e)) from e

        return Transaction(txn_date, description, amount)


def chase_2017_extractor() -> ChaseCreditExtractor:
    return ChaseCreditExtractor(CHASE_2017_LAYOUT)


def chase_2018_extractor() -> ChaseCreditExtractor:
    return ChaseCreditExtractor(CHASE_2018_LAYOUT)
