# statement_parser/writers/excel_writer.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from statement_parser.data_model import ITransaction

from .csv_writer import CSV_HEADERS

log = logging.getLogger(__name__)

SHEET_NAME = "Transactions"


def transactions_to_frame(txns: Iterable[ITransaction]) -> pd.DataFrame:
    """
    One row per transaction, columns ``Date, Description, Amount``.

    Amounts stay ``Decimal`` (object dtype) so no float rounding creeps in.
    """
    rows = [(t.date, t.description, t.amount) for t in txns]
    return pd.DataFrame(rows, columns=CSV_HEADERS)


def write_transactions_xlsx(txns: Iterable[ITransaction], out_path: Path) -> int:
    """
    Write an Excel workbook with a single ``Transactions`` sheet.

    Requires pandas and an Excel engine (openpyxl).
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df = transactions_to_frame(txns)
    df.to_excel(out_path, sheet_name=SHEET_NAME, index=False, engine="openpyxl")
    log.info("Wrote %d transaction(s) to %s", len(df), out_path)
    return len(df)
