# statement_parser/controllers/batch.py
"""
Multi-file front end for the dispatcher: turn what the user typed into a list
of PDF paths, parse them in order and collect the transactions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from statement_parser.controllers.statement_loader import (
    parse_statement_file,
    parse_statement_file_as,
)
from statement_parser.data_model import ITransaction, StatementType
from statement_parser.errors import StatementParseError, UnrecognizedStatementError
from statement_parser.utilities.core_util import is_null_or_whitespace

log = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


class BatchAborted(Exception):
    """The caller chose to stop at an unrecognized statement."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Parsing stopped at unrecognized statement {str(path)!r}")


@dataclass
class BatchResult:
    transactions: List[ITransaction] = field(default_factory=list)
    parsed_files: List[Path] = field(default_factory=list)
    skipped_files: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, Exception]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def split_quoted_paths(text: str) -> List[Path]:
    """
    Split ``"a.pdf" "b.pdf"`` (the multi-select form) into paths.

    Only whitespace may appear between quoted names.
    """
    paths: List[Path] = []
    current: Optional[List[str]] = None
    for ch in text:
        if ch == '"':
            if current is None:
                current = []
            else:
                paths.append(Path("".join(current)))
                current = None
        elif current is None:
            if not ch.isspace():
                raise ValueError(
                    "Input path is not a valid file name or sequence of file names"
                )
        else:
            current.append(ch)
    if current is not None:
        raise ValueError("Input path has an unterminated quoted file name")
    return paths


def collect_input_files(
    input_path: str, folder_mode: bool = False, include_subfolders: bool = True
) -> List[Path]:
    """Resolve the input box of the UI/CLI into the list of statements to parse."""
    if is_null_or_whitespace(input_path):
        raise ValueError("Input path cannot be empty")
    input_path = input_path.strip()

    if folder_mode:
        folder = Path(input_path)
        if not folder.is_dir():
            raise ValueError("The input folder does not exist")
        found = folder.rglob("*") if include_subfolders else folder.iterdir()
        return sorted(p for p in found if p.suffix.lower() == PDF_SUFFIX and p.is_file())

    if '"' in input_path:
        files = split_quoted_paths(input_path)
    else:
        files = [Path(input_path)]

    for f in files:
        if not f.is_file():
            raise ValueError(f"Input file does not exist: {f}")
    return files


def parse_many(
    paths: List[Path],
    on_unrecognized: Optional[Callable[[Path], bool]] = None,
    statement_type: Optional[StatementType] = None,
) -> BatchResult:
    """
    Parse each file in order and concatenate the transactions.

    An unrecognized file aborts a single-file batch (the error propagates).
    With several files ``on_unrecognized(path)`` decides: True skips the
    file, False raises ``BatchAborted``; without a callback the file is
    skipped. Any other parse failure, or a file that cannot be read, is
    recorded in ``failed`` and the batch moves on.
    """
    result = BatchResult()
    for path in paths:
        try:
            if statement_type is None:
                batch = parse_statement_file(path)
            else:
                batch = parse_statement_file_as(path, statement_type)
        except UnrecognizedStatementError:
            if len(paths) == 1:
                raise
            if on_unrecognized is not None and not on_unrecognized(path):
                raise BatchAborted(path) from None
            log.warning("Skipping unrecognized statement %s", path)
            result.skipped_files.append(path)
            continue
        except (StatementParseError, OSError) as e:
            log.warning("Failed to parse %s: %s", path, e)
            result.failed.append((path, e))
            continue

        result.transactions.extend(batch)
        result.parsed_files.append(path)
    return result
