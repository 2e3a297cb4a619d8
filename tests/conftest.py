# tests/conftest.py
"""
Builders for small synthetic statements, plus logging cleanup.

The bytes mimic just enough of each producer's output (text-drawing operator
lines, page objects, compressed content streams) for the extractors to run.
"""
from __future__ import annotations

import logging
import zlib
from typing import Iterable, Sequence, Tuple

import pytest

from statement_parser.parsers.chase_credit import (
    CHASE_2017_SIGNATURE,
    CHASE_2018_SIGNATURE,
)
from statement_parser.parsers.navy_fed_year_end import NAVY_FED_SIGNATURE

TM = "1 0 0 1 72.24 540.5 Tm"
CHASE_TOTAL_FEES = "(Total fees charged in 2018 $0.00)Tj"
CHASE_CARDMEMBER = "(CARDMEMBER SERVICE)Tj"

Row = Tuple[str, str, str]


def _chase_row(row: Row, year: int) -> list[str]:
    d, desc, amt = row
    lines = [f"({d})Tj", TM]
    if year == 2018:
        lines += ["[( )] TJ", TM]
    lines += [f"({desc})Tj", TM, f"({amt})Tj", TM]
    return lines


def build_chase_statement(
    year: int,
    period: str | None,
    tables: Sequence[Tuple[Iterable[Row], str]] = (),
) -> bytes:
    """A Chase statement: signature, optional period header, then tables."""
    signature = CHASE_2018_SIGNATURE if year == 2018 else CHASE_2017_SIGNATURE
    lines = ["BT", "/F1 9 Tf", TM]
    body: list[str] = []
    if period is not None:
        body += ["(Opening/Closing Date)Tj", TM, f"({period})Tj", TM]
    for rows, end_line in tables:
        body += ["(Date of Transaction)Tj", TM, "($ Amount)Tj", TM]
        for row in rows:
            body += _chase_row(row, year)
        body += [end_line, TM]
    text = "\n".join(lines) + "\n"
    return (
        b"%PDF-1.3\n"
        + text.encode("ascii")
        + signature
        + b"\n"
        + "\n".join(body + ["ET", "%%EOF", ""]).encode("ascii")
    )


def navy_field(x: str, y: str, text: str) -> str:
    """One text item as the Navy Federal producer draws it."""
    return f"BT\n/F2 8.0000 Tf\n1.0000 0.0000 0.0000 1.0000 {x} {y} Tm\n({text}) Tj\nET\n"


NAVY_HEADER = (
    navy_field("36.0000", "700.0000", "Post Date")
    + navy_field("90.0000", "700.0000", "Description")
    + navy_field("420.0000", "700.0000", "Amount")
    + navy_field("500.0000", "700.0000", "Credits")
)
NAVY_TABLE_CLOSE = "0.0000 0.0000 0.0000 rg\n"


def navy_row(date: str, lines: Sequence[str], amount: str, y: int) -> str:
    out = navy_field("36.0000", f"{y}.0000", date)
    for i, line in enumerate(lines):
        out += navy_field("90.0000", f"{y - 10 * i}.0000", line)
    out += navy_field("420.0000", f"{y}.0000", amount)
    return out


def navy_table(rows: Sequence[Tuple[str, Sequence[str], str]]) -> str:
    out = NAVY_HEADER
    y = 680
    for date, lines, amount in rows:
        out += navy_row(date, lines, amount, y)
        y -= 10 * (len(lines) + 1)
    return out + NAVY_TABLE_CLOSE


def build_navy_fed_statement(
    page_contents: Sequence[bytes | str], leading_pages: int = 7, *, compress: bool = True
) -> bytes:
    """
    A year-end summary PDF: signature object, ``leading_pages`` pages without
    detail, then one page per entry in ``page_contents``.
    """
    out = b"%PDF-1.4\n3 0" + NAVY_FED_SIGNATURE + b"\n"
    obj = 10
    for _ in range(leading_pages):
        out += f"{obj} 0 obj\n<<\n/Type /Page\n/Parent 2 0 R\n>>\nendobj\n".encode("ascii")
        obj += 1
    for content in page_contents:
        raw = content.encode("ascii") if isinstance(content, str) else content
        block = zlib.compress(raw) if compress else raw
        out += (
            f"{obj} 0 obj\n<<\n/Type /Page\n/Contents {obj + 1} 0 R\n>>\nendobj\n".encode("ascii")
            + f"{obj + 1} 0 obj\n<<\n/Length {len(block)}\n/Filter /FlateDecode\n>>\nstream\n".encode("ascii")
            + block
            + b"\nendstream\nendobj\n"
        )
        obj += 2
    return out + b"%%EOF\n"


@pytest.fixture
def chase_statement():
    return build_chase_statement


@pytest.fixture
def navy_fed_statement():
    return build_navy_fed_statement


@pytest.fixture
def navy_page():
    """Build one page's content stream text from table row tuples."""
    def _page(*tables):
        return "q\n" + "".join(navy_table(rows) for rows in tables) + "Q\n"
    return _page


@pytest.fixture
def restore_logging():
    """Undo ``configure_logging``: drop its handlers and restore levels."""
    root = logging.getLogger()
    level = root.level
    parsers = logging.getLogger("statement_parser.parsers")
    parsers_level = parsers.level
    yield
    for h in list(root.handlers):
        if h.get_name() in ("console", "file"):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    parsers.setLevel(parsers_level)
