# statement_parser/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the statement data model.
"""

from .enum_statement_type import StatementType
from .i_statement_extractor import IStatementExtractor
from .i_transaction import ITransaction

__all__ = [
    "StatementType",
    "ITransaction",
    "IStatementExtractor",
]
