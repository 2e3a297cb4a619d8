# statement_parser/controllers/statement_loader.py
"""
Statement recognition and dispatch.

The registry pairs a byte signature with the layout it identifies. A
signature appears in its layout before any transaction data and in no other
registered layout, so the first one found in the stream picks the extractor.
Adding a layout means adding a ``StatementType`` member, a ``SignatureEntry``
and an ``EXTRACTORS`` factory; existing extractors are untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Final, List, Mapping, Optional, Sequence, Tuple

from statement_parser.data_model import (
    IStatementExtractor,
    ITransaction,
    StatementType,
)
from statement_parser.errors import UnrecognizedStatementError
from statement_parser.parsers.byte_scanner import ByteScanner
from statement_parser.parsers.chase_credit import (
    CHASE_2017_SIGNATURE,
    CHASE_2018_SIGNATURE,
    chase_2017_extractor,
    chase_2018_extractor,
)
from statement_parser.parsers.navy_fed_year_end import (
    NAVY_FED_SIGNATURE,
    navy_fed_year_end_extractor,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignatureEntry:
    signature: bytes
    statement_type: StatementType


SignatureRegistry = Tuple[SignatureEntry, ...]

DEFAULT_REGISTRY: Final[SignatureRegistry] = (
    SignatureEntry(CHASE_2017_SIGNATURE, StatementType.CHASE_CREDIT_2017),
    SignatureEntry(CHASE_2018_SIGNATURE, StatementType.CHASE_CREDIT_2018),
    SignatureEntry(NAVY_FED_SIGNATURE, StatementType.NAVY_FED_YEAR_END_SUMMARY),
)

EXTRACTORS: Final[Mapping[StatementType, Callable[[], IStatementExtractor]]] = (
    MappingProxyType(
        {
            StatementType.CHASE_CREDIT_2017: chase_2017_extractor,
            StatementType.CHASE_CREDIT_2018: chase_2018_extractor,
            StatementType.NAVY_FED_YEAR_END_SUMMARY: navy_fed_year_end_extractor,
        }
    )
)


def _as_scanner(data: bytes | ByteScanner) -> ByteScanner:
    return data if isinstance(data, ByteScanner) else ByteScanner(data)


def make_extractor(statement_type: StatementType) -> IStatementExtractor:
    try:
        factory = EXTRACTORS[statement_type]
    except KeyError:
        raise ValueError(f"No extractor for {statement_type.name}") from None
    return factory()


def _detect(
    scanner: ByteScanner, registry: Sequence[SignatureEntry]
) -> Optional[StatementType]:
    """Consume the stream up to the first registered signature."""
    if not registry:
        raise ValueError("Signature registry is empty")
    by_signature = {e.signature: e.statement_type for e in registry}
    match = scanner.scan_until_any([e.signature for e in registry])
    if match.matched is None:
        return None
    return by_signature[match.matched]


def identify_statement(
    data: bytes | ByteScanner, registry: Sequence[SignatureEntry] = DEFAULT_REGISTRY
) -> StatementType:
    """Return the layout of ``data``, or ``StatementType.UNKNOWN``."""
    found = _detect(_as_scanner(data), registry)
    return StatementType.UNKNOWN if found is None else found


def parse_statement(
    data: bytes | ByteScanner,
    registry: Sequence[SignatureEntry] = DEFAULT_REGISTRY,
    source: Optional[str] = None,
) -> List[ITransaction]:
    """
    Recognise the statement layout and extract its transactions.

    The extractor runs on the stream right after the matched signature.

    Raises
    ------
    UnrecognizedStatementError
        If no registered signature occurs in ``data``.
    StatementParseError
        Any other extraction failure (truncated input, corrupt stream,
        malformed field).
    """
    scanner = _as_scanner(data)
    statement_type = _detect(scanner, registry)
    if statement_type is None:
        log.info("No supported statement signature found in %s", source or "input")
        raise UnrecognizedStatementError(source)

    log.info("Detected %s in %s", statement_type.label, source or "input")
    transactions = make_extractor(statement_type).extract(scanner)
    log.info("Extracted %d transaction(s) from %s", len(transactions), source or "input")
    return transactions


def parse_statement_as(
    data: bytes | ByteScanner, statement_type: StatementType
) -> List[ITransaction]:
    """Run the extractor for ``statement_type`` from the start of ``data``."""
    return make_extractor(statement_type).extract(_as_scanner(data))


def parse_statement_file(
    path: Path, registry: Sequence[SignatureEntry] = DEFAULT_REGISTRY
) -> List[ITransaction]:
    return parse_statement(ByteScanner.from_path(path), registry, source=str(path))


def parse_statement_file_as(
    path: Path, statement_type: StatementType
) -> List[ITransaction]:
    return parse_statement_as(ByteScanner.from_path(path), statement_type)
