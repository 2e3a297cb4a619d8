"""
statement_parser: extract transactions from credit-card and bank statement PDFs.

Recognises a statement layout by a byte signature and walks the PDF's text
drawing operators (inflating compressed content streams where the layout
needs it) to produce dated, signed transactions.
"""

from statement_parser.controllers.statement_loader import (
    DEFAULT_REGISTRY,
    identify_statement,
    parse_statement,
    parse_statement_file,
)
from statement_parser.data_model import StatementType, Transaction
from statement_parser.errors import (
    CorruptStreamError,
    EndOfStreamError,
    FieldParseError,
    MissingYearMappingError,
    StatementParseError,
    UnrecognizedStatementError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_REGISTRY",
    "identify_statement",
    "parse_statement",
    "parse_statement_file",
    "StatementType",
    "Transaction",
    "StatementParseError",
    "UnrecognizedStatementError",
    "EndOfStreamError",
    "CorruptStreamError",
    "FieldParseError",
    "MissingYearMappingError",
]
