# statement_parser/data_model/__init__.py
from .interfaces import (
    IStatementExtractor,
    ITransaction,
    StatementType,
)
from .transaction import DESCRIPTION_LINE_BREAK, Transaction
from .year_map import StatementPeriod, YearMap

__all__ = [
    "StatementType", "ITransaction", "IStatementExtractor",
    "Transaction", "DESCRIPTION_LINE_BREAK", "YearMap", "StatementPeriod"]
