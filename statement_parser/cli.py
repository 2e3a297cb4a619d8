# statement_parser/cli.py
"""
Command-line entry point: parse statement PDFs into a CSV or Excel file.

Exit codes: 0 success, 1 some statements failed to parse, 2 invalid
arguments (or an unrecognized statement with ``--strict``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from statement_parser.controllers.batch import (
    BatchAborted,
    collect_input_files,
    parse_many,
)
from statement_parser.controllers.statement_loader import identify_statement
from statement_parser.data_model import StatementType
from statement_parser.errors import UnrecognizedStatementError
from statement_parser.utilities import configure_logging, read_file_bytes
from statement_parser.writers import write_transactions

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_FAILURES = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="statement-parser",
        description="Extract transactions from Chase and Navy Federal statement PDFs.",
    )
    ap.add_argument("inputs", nargs="+", help="Statement PDF file(s), or folder(s) with --folder")
    ap.add_argument("-o", "--output", type=Path, help="Output file (.csv or .xlsx)")
    ap.add_argument("--folder", action="store_true", help="Treat each input as a folder of PDFs")
    ap.add_argument("--recursive", action="store_true", help="With --folder: include subfolders")
    ap.add_argument("--type", dest="statement_type",
                    help="Skip recognition and parse every file as this layout "
                         "(chase_credit_2017, chase_credit_2018, navy_fed_year_end_summary)")
    ap.add_argument("--strict", action="store_true",
                    help="Stop at the first unrecognized statement instead of skipping it")
    ap.add_argument("--identify", action="store_true",
                    help="Only print the detected layout of each input")
    ap.add_argument("--verbose", action="store_true", help="Log extractor details to the console")
    ap.add_argument("--log-dir", type=Path, default=None, help="Directory for the rotating log file")
    return ap


def _gather(inputs: Sequence[str], folder: bool, recursive: bool) -> List[Path]:
    files: List[Path] = []
    for item in inputs:
        files.extend(collect_input_files(item, folder_mode=folder, include_subfolders=recursive))
    return files


def _identify(files: Sequence[Path]) -> int:
    for f in files:
        st = identify_statement(read_file_bytes(f))
        print(f"{f}: {st.label}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if not args.identify and args.output is None:
        ap.error("the following arguments are required: -o/--output")

    statement_type: Optional[StatementType] = None
    if args.statement_type:
        try:
            statement_type = StatementType.from_name(args.statement_type)
        except ValueError as e:
            ap.error(str(e))
        if statement_type is StatementType.UNKNOWN:
            ap.error("--type cannot be 'unknown'")

    configure_logging(log_dir=args.log_dir, verbose=args.verbose)

    try:
        files = _gather(args.inputs, args.folder, args.recursive)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    if not files:
        print("error: no PDF files were found", file=sys.stderr)
        return EXIT_USAGE

    if args.identify:
        return _identify(files)

    try:
        result = parse_many(
            files,
            on_unrecognized=lambda _p: not args.strict,
            statement_type=statement_type,
        )
    except UnrecognizedStatementError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE if args.strict else EXIT_PARSE_FAILURES
    except BatchAborted as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    for p in result.skipped_files:
        print(f"skipped (unrecognized): {p}", file=sys.stderr)
    for p, err in result.failed:
        print(f"failed: {p}: {err}", file=sys.stderr)

    count = write_transactions(result.transactions, args.output)
    log.info("Wrote %d transaction(s) from %d statement(s) to %s",
             count, len(result.parsed_files), args.output)
    return EXIT_OK if result.ok else EXIT_PARSE_FAILURES


if __name__ == "__main__":
    sys.exit(main())
