# tests/parsers/test_chase_credit.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from statement_parser.controllers.statement_loader import parse_statement
from statement_parser.data_model import StatementType, Transaction
from statement_parser.errors import (
    EndOfStreamError,
    FieldParseError,
    MissingYearMappingError,
)
from statement_parser.parsers.byte_scanner import ByteScanner
from statement_parser.parsers.chase_credit import (
    CHASE_2017_LAYOUT,
    CHASE_2018_LAYOUT,
    ChaseCreditExtractor,
    chase_2017_extractor,
    chase_2018_extractor,
    find_date_range,
    shown_text,
)

TOTAL_FEES = "(Total fees charged in 2018 $0.00)Tj"
CARDMEMBER = "(CARDMEMBER SERVICE)Tj"


def test_chase_2018_single_row_end_to_end(chase_statement):
    """One table, one row: the whole pipeline yields exactly that transaction."""
    # Arrange
    data = chase_statement(
        2018,
        "01/01/18 - 01/31/18",
        [([("01/05", "COFFEE SHOP", "4.50")], TOTAL_FEES)],
    )

    # Act
    txns = parse_statement(data)

    # Assert
    assert txns == [Transaction(date(2018, 1, 5), "COFFEE SHOP", Decimal("4.50"))]


def test_chase_2017_reads_every_table(chase_statement):
    """A 2017 statement ends its first table at CARDMEMBER SERVICE, the last at the fee total."""
    data = chase_statement(
        2017,
        "03/02/17 - 04/01/17",
        [
            ([("03/04", "GROCERY OUTLET", "52.17"), ("03/09", "PAYMENT THANK YOU", "-300.00")], CARDMEMBER),
            ([("03/28", "HARDWARE STORE", "1,204.99")], TOTAL_FEES),
        ],
    )

    txns = parse_statement(data)

    assert [(t.date, t.description, t.amount) for t in txns] == [
        (date(2017, 3, 4), "GROCERY OUTLET", Decimal("52.17")),
        (date(2017, 3, 9), "PAYMENT THANK YOU", Decimal("-300.00")),
        (date(2017, 3, 28), "HARDWARE STORE", Decimal("1204.99")),
    ]


def test_chase_2018_ignores_cardmember_line_as_table_end(chase_statement):
    """Only the fee total ends a 2018 table; CARDMEMBER SERVICE is a 2017 marker."""
    data = chase_statement(
        2018,
        "05/01/18 - 05/31/18",
        [([("05/02", "BOOKS", "12.00")], CARDMEMBER + "\n1 0 0 1 0 0 Tm\n" + TOTAL_FEES)],
    )

    # the CARDMEMBER line is read as the date line of a second row
    with pytest.raises(FieldParseError) as ei:
        parse_statement(data)
    assert ei.value.field == "date"


def test_year_boundary_resolves_each_month(chase_statement):
    """A December-to-January period maps each month to its own year."""
    data = chase_statement(
        2018,
        "12/15/22 - 01/10/23",
        [([("12/20", "GIFT SHOP", "80.00"), ("01/05", "DINER", "23.10")], TOTAL_FEES)],
    )

    txns = parse_statement(data)

    assert [t.date for t in txns] == [date(2022, 12, 20), date(2023, 1, 5)]


def test_row_outside_statement_period_raises(chase_statement):
    data = chase_statement(
        2018,
        "12/15/22 - 01/10/23",
        [([("03/01", "SOMEWHERE", "1.00")], TOTAL_FEES)],
    )

    with pytest.raises(MissingYearMappingError) as ei:
        parse_statement(data)

    assert ei.value.month == 3
    assert "row 1" in ei.value.context


def test_malformed_amount_raises_field_error(chase_statement):
    data = chase_statement(
        2017,
        "01/01/18 - 01/31/18",
        [([("01/05", "COFFEE SHOP", "4.5O")], TOTAL_FEES)],
    )

    with pytest.raises(FieldParseError) as ei:
        parse_statement(data)

    assert ei.value.field == "amount"
    assert ei.value.raw == "4.5O"


def test_missing_table_end_runs_out_of_stream():
    """A table that never closes is an error, not a silent truncation."""
    s = ByteScanner(
        b"(Opening/Closing Date)Tj\nTm\n(01/01/18 - 01/31/18)Tj\nTm\n"
        b"($ Amount)Tj\nTm\n(01/05)Tj\nTm\n(COFFEE SHOP)Tj\nTm\n(4.50)Tj\n"
    )
    with pytest.raises(EndOfStreamError):
        chase_2017_extractor().extract(s)


def test_no_period_header_means_no_transactions():
    assert chase_2018_extractor().extract(ByteScanner(b"($ Amount)Tj\n")) == []


def test_period_without_tables_means_no_transactions(chase_statement):
    assert parse_statement(chase_statement(2018, "01/01/18 - 01/31/18")) == []


def test_find_date_range_parses_period():
    s = ByteScanner(b"x(Opening/Closing Date)Tj\n1 0 0 1 0 0 Tm\n(12/15/22 - 01/10/23)Tj\n")

    period = find_date_range(s)

    assert (period.start, period.end) == (date(2022, 12, 15), date(2023, 1, 10))
    assert dict(period.year_map.months) == {12: 2022, 1: 2023}


@pytest.mark.parametrize(
    "line",
    [
        "(12/15/22 to 01/10/23)Tj",
        "(12/15/2022 - 01/10/2023)Tj",
        "12/15/22 - 01/10/23",
    ],
)
def test_find_date_range_rejects_malformed_period(line):
    s = ByteScanner(b"(Opening/Closing Date)Tj\nTm\n" + line.encode("ascii") + b"\n")
    with pytest.raises(FieldParseError):
        find_date_range(s)


def test_shown_text_strips_operator():
    assert shown_text("(COFFEE SHOP)Tj", "description") == "COFFEE SHOP"
    with pytest.raises(FieldParseError):
        shown_text("[( )] TJ", "description")


def test_layouts_are_bound_to_their_statement_types():
    assert ChaseCreditExtractor(CHASE_2017_LAYOUT).statement_type is StatementType.CHASE_CREDIT_2017
    assert chase_2018_extractor().layout is CHASE_2018_LAYOUT
    assert CHASE_2018_LAYOUT.lines_before_description == 3


def test_trailing_minus_amount_is_a_credit(chase_statement):
    data = chase_statement(
        2018,
        "01/01/18 - 01/31/18",
        [([("01/12", "REFUND", "25.00-")], TOTAL_FEES)],
    )

    txns = parse_statement(data)

    assert txns[0].amount == Decimal("-25.00")
