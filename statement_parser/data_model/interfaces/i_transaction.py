# statement_parser/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import runtime_checkable

from typing_extensions import Protocol


@runtime_checkable
class ITransaction(Protocol):
    """
    Structural shape of one statement transaction, as consumed by writers.

    Transactions are value objects: equal when all three fields are equal,
    hashable, and ordered by ``(date, description, amount)``. ``to_dict``
    renders every field as text (ISO date, exact decimal string).
    """

    date: date
    description: str
    amount: Decimal

    def __eq__(self, other: object) -> bool: ...
    def __hash__(self) -> int: ...
    def __lt__(self, other: object) -> bool: ...
    def to_dict(self) -> dict[str, str]: ...
