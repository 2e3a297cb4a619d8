# statement_parser/data_model/transaction.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING

from statement_parser.data_model.interfaces import ITransaction

DESCRIPTION_LINE_BREAK = "\n"


@total_ordering
@dataclass(frozen=True)
class Transaction:
    """
    One row of a statement: posting date, description and exact amount.

    Created once all three fields of a row are parsed and never mutated.
    Descriptions that span several printed lines keep the lines joined with
    ``DESCRIPTION_LINE_BREAK``.
    """

    date: date
    description: str
    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError(
                f"amount must be Decimal, got {type(self.amount).__name__}"
            )

    # region ordering

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return (self.date, self.description, self.amount) < (
            other.date,
            other.description,
            other.amount,
        )

    # endregion ordering

    def to_dict(self) -> dict[str, str]:
        return {
            "date": self.date.isoformat(),
            "description": self.description,
            "amount": str(self.amount),
        }


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = Transaction
