# statement_parser/data_model/interfaces/i_statement_extractor.py
"""
Runtime-checkable protocol for per-layout statement extractors.

An extractor owns the cursor it is handed for the whole of one statement: it
walks the positional text operators of its layout, front to back, and returns
the transactions in document order. It never seeks backwards; content that
has to be re-read (decompressed page streams) gets a fresh cursor.

### Expectations for implementers

- **Order preservation:** transactions are returned in the order they appear
  in the source document.
- **Empty input:** a stream that holds the layout's signature but no data
  yields an empty list, not an error.
- **Errors:** malformed fields raise ``FieldParseError`` (or a subclass);
  truncated input raises ``EndOfStreamError``; bad compressed blocks raise
  ``CorruptStreamError``. All of these are ``ValueError`` subclasses.
- **Purity:** no state survives between ``extract`` calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, runtime_checkable

from typing_extensions import Protocol

from .enum_statement_type import StatementType
from .i_transaction import ITransaction

if TYPE_CHECKING:
    from statement_parser.parsers.byte_scanner import ByteScanner


@runtime_checkable
class IStatementExtractor(Protocol):
    """
    Attributes
    ----------
    statement_type : StatementType
        The layout this extractor understands. Constant per instance.
    """

    statement_type: StatementType

    def extract(self, scanner: "ByteScanner") -> list[ITransaction]:
        """
        Consume ``scanner`` (positioned just after the layout's signature, or at
        the start of the file when detection was skipped) and return the
        transactions found.
        """
        ...
