# statement_parser/writers/__init__.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from statement_parser.data_model import ITransaction

from .csv_writer import (
    CSV_HEADERS,
    transaction_row,
    write_transactions_csv,
    write_transactions_csv_to,
)


def write_transactions(txns: Iterable[ITransaction], out_path: Path) -> int:
    """Pick the writer from the output suffix: ``.xlsx`` → Excel, else CSV."""
    if Path(out_path).suffix.lower() == ".xlsx":
        # pandas is only imported when a workbook is requested
        from .excel_writer import write_transactions_xlsx

        return write_transactions_xlsx(txns, out_path)
    return write_transactions_csv(txns, out_path)


__all__ = [
    "CSV_HEADERS",
    "transaction_row",
    "write_transactions",
    "write_transactions_csv",
    "write_transactions_csv_to",
]
