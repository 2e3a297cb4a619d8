# statement_parser/data_model/interfaces/enum_statement_type.py
from enum import Enum


class StatementType(Enum):
    """
    Closed set of statement layouts the extractors understand.
    """
    CHASE_CREDIT_2017 = "Chase credit card (2017 layout)"
    CHASE_CREDIT_2018 = "Chase credit card (2018 layout)"
    NAVY_FED_YEAR_END_SUMMARY = "Navy Federal year-end summary"
    UNKNOWN = "UNKNOWN"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "StatementType":
        """Look a member up by its name, case-insensitively (``chase_credit_2018``)."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Unknown statement type {name!r}; expected one of "
                f"{[m.name.lower() for m in cls if m is not cls.UNKNOWN]}"
            ) from None
