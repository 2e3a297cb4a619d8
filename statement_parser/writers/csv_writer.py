# statement_parser/writers/csv_writer.py
"""
Transaction list → delimited text.

One row per transaction with ``Date,Description,Amount`` columns. The csv
module's minimal quoting wraps any field holding a delimiter, a quote or a
line break (multi-line descriptions).
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, TextIO

from statement_parser.data_model import ITransaction
from statement_parser.utilities.core_util import open_for_write

log = logging.getLogger(__name__)

CSV_HEADERS: List[str] = ["Date", "Description", "Amount"]


def transaction_row(txn: ITransaction) -> List[str]:
    return [txn.date.isoformat(), txn.description, str(txn.amount)]


def write_transactions_csv_to(txns: Iterable[ITransaction], f: TextIO) -> int:
    """Write header + rows to an open text stream; returns the row count."""
    writer = csv.writer(f)
    writer.writerow(CSV_HEADERS)
    n = 0
    for t in txns:
        writer.writerow(transaction_row(t))
        n += 1
    return n


def write_transactions_csv(txns: Iterable[ITransaction], out_path: Path) -> int:
    with open_for_write(Path(out_path), binary=False) as f:
        n = write_transactions_csv_to(txns, f)
    log.info("Wrote %d transaction(s) to %s", n, out_path)
    return n
