# statement_parser/errors.py
"""
Error kinds raised while recognising and extracting a statement.

Every error is a ``ValueError`` so callers that only care about "this file
could not be parsed" can catch one type. All of them are fatal to the current
statement only; nothing is retried.
"""

from __future__ import annotations

from typing import Optional


class StatementParseError(ValueError):
    """Base class for every statement recognition/extraction failure."""


class UnrecognizedStatementError(StatementParseError):
    """No registered signature was found before the end of the stream."""

    def __init__(self, source: Optional[str] = None):
        self.source = source
        where = f" {source!r}" if source else ""
        super().__init__(
            f"The file{where} was not recognized as a supported statement type."
        )


class EndOfStreamError(StatementParseError):
    """A mandatory scan or line read ran out of bytes."""

    def __init__(self, expected: str = "", position: int = -1):
        self.expected = expected
        self.position = position
        msg = "Unexpected end of stream"
        if expected:
            msg += f" while looking for {expected}"
        if position >= 0:
            msg += f" (offset {position})"
        super().__init__(msg)


class CorruptStreamError(StatementParseError):
    """An embedded compressed content stream could not be inflated."""


class FieldParseError(StatementParseError):
    """A date, description or amount field did not have the expected shape."""

    def __init__(self, field: str, raw: str, context: str = "", reason: str = ""):
        self.field = field
        self.raw = raw
        self.context = context
        self.reason = reason
        msg = f"Could not parse {field} field {raw!r}"
        if context:
            msg += f" in {context}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MissingYearMappingError(FieldParseError):
    """A row's month is not covered by the statement period."""

    def __init__(self, month: int, known_months: tuple[int, ...] = (), context: str = ""):
        self.month = month
        self.known_months = known_months
        super().__init__(
            "date",
            f"{month:02d}",
            context,
            f"month {month} is outside the statement period (months {list(known_months)})",
        )
