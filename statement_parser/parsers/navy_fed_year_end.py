# statement_parser/parsers/navy_fed_year_end.py
"""
Navy Federal credit-card year-end summary.

The transaction tables live in compressed page-content streams. Each text
item is a ``BT ... ET`` block of four lines: font (``Tf``), position
(``Tm``), the text itself as ``(text) Tj``, and ``ET``. A row is a date
field, one or more description fields and an amount field. Extra description
lines are separate fields printed at the same x-position as the table's
"Description" heading, which is how they are told apart from the amount.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, List

from statement_parser.data_model import (
    DESCRIPTION_LINE_BREAK,
    StatementType,
    Transaction,
)
from statement_parser.errors import FieldParseError
from statement_parser.utilities.converters_scalar import parse_short_date, to_amount
from statement_parser.utilities.core_util import ascii_text

from .byte_scanner import ByteScanner
from .stream_inflate import inflate_to_scanner

log = logging.getLogger(__name__)

# An empty compressed object that this producer writes before any page.
NAVY_FED_SIGNATURE: Final = (
    b" obj\n<<\n/Length 8\n/Filter [/FlateDecode]\n>>\nstream\n"
    + bytes([120, 156, 3, 0, 0, 0, 0, 1])
    + b"\nendstream\nendobj"
)

PAGE_MARKER: Final = b"\n/Type /Page\n"
# pages before the transaction detail
LEADING_PAGES: Final = 7
STREAM_START: Final = b"\nstream"
STREAM_END: Final = b"\nendstream"

TABLE_HEADER: Final = b"(Post Date) Tj"
HEADER_END: Final = b"(Credits) Tj"
FONT_OPERATOR: Final = b" Tf\n"
FIELD_START: Final = b"Tm\n("
FIELD_END: Final = b") Tj"
TABLE_CLOSE: Final = b"\n0.0000 0.0000 0.0000"
ROW_MARKERS: Final = (FIELD_START, TABLE_CLOSE)
# position of the x offset among the numbers of a "Tm" line
X_POSITION_TOKEN: Final = 5


def next_x_position(content: ByteScanner, context: str = "") -> bytes:
    """
    Skip to the next field's ``Tm`` line and return its x offset.

    The raw bytes are returned; they are only ever compared for an exact
    match.
    """
    content.expect_until(FONT_OPERATOR, context)
    x = b""
    for _ in range(X_POSITION_TOKEN):
        x = content.expect_until(b" ", context)
    return x


def next_field_text(content: ByteScanner, context: str = "") -> str:
    content.expect_until(FIELD_START, context)
    return ascii_text(content.expect_until(FIELD_END, context))


@dataclass(frozen=True)
class NavyFedYearEndExtractor:
    statement_type: StatementType = StatementType.NAVY_FED_YEAR_END_SUMMARY
    leading_pages: int = LEADING_PAGES

    def extract(self, scanner: ByteScanner) -> List[Transaction]:
        transactions: List[Transaction] = []

        for _ in range(self.leading_pages):
            if scanner.scan_until(PAGE_MARKER) is None:
                return transactions

        page = self.leading_pages
        while scanner.scan_until(PAGE_MARKER) is not None:
            page += 1
            content = self._page_content(scanner, f"page {page}")
            found = self._extract_page(content, page, transactions)
            log.debug("Navy Federal: page %d had %d transaction(s)", page, found)

        return transactions

    def _page_content(self, scanner: ByteScanner, context: str) -> ByteScanner:
        scanner.expect_until(STREAM_START, context)
        # rest of the "stream" keyword line
        scanner.read_line()
        block = scanner.expect_until(STREAM_END, context)
        return inflate_to_scanner(block, context)

    def _extract_page(
        self, content: ByteScanner, page: int, transactions: List[Transaction]
    ) -> int:
        found = 0
        table = 0
        while content.scan_until(TABLE_HEADER) is not None:
            table += 1
            context = f"Navy Federal page {page} table {table}"
            # the field after "Post Date" is the "Description" heading
            description_x = next_x_position(content, context)
            content.expect_until(HEADER_END, context)

            while content.scan_until_any(ROW_MARKERS).matched == FIELD_START:
                found += 1
                transactions.append(
                    self._parse_row(content, description_x, f"{context} row {found}")
                )
        return found

    def _parse_row(
        self, content: ByteScanner, description_x: bytes, context: str
    ) -> Transaction:
        # the cursor sits just inside the date field's "("
        date_text = ascii_text(content.expect_until(FIELD_END, context))
        try:
            txn_date = parse_short_date(date_text)
        except ValueError as e:
            raise FieldParseError("date", date_text, context, str(e)) from e

        lines = [next_field_text(content, context)]
        while next_x_position(content, context) == description_x:
            lines.append(next_field_text(content, context))

        amount_text = next_field_text(content, context)
        try:
            amount = to_amount(amount_text)
        except ValueError as e:
            raise FieldParseError("amount", amount_text, context, str(e)) from e

        return Transaction(txn_date, DESCRIPTION_LINE_BREAK.join(lines), amount)


def navy_fed_year_end_extractor() -> NavyFedYearEndExtractor:
    return NavyFedYearEndExtractor()
