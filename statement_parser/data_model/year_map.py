# statement_parser/data_model/year_map.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping

from statement_parser.errors import FieldParseError, MissingYearMappingError


@dataclass(frozen=True)
class YearMap:
    """
    Month → year lookup for a statement whose rows only print ``MM/dd``.

    Built from exactly the two boundary dates of the statement period, so a
    period straddling New Year maps the two months to different years.
    """

    months: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "months", MappingProxyType(dict(self.months)))

    @classmethod
    def from_period(cls, start: date, end: date) -> "YearMap":
        if start.month == end.month and start.year != end.year:
            raise FieldParseError(
                "statement period",
                f"{start:%m/%d/%y} - {end:%m/%d/%y}",
                reason="both boundary dates share a month but not a year",
            )
        return cls({start.month: start.year, end.month: end.year})

    def year_for(self, month: int, context: str = "") -> int:
        if month not in self:
            raise MissingYearMappingError(month, tuple(sorted(self.months)), context)
        return self.months[month]

    def resolve(self, month: int, day: int, context: str = "") -> date:
        """Return the full date for a ``MM/dd`` row."""
        year = self.year_for(month, context)
        try:
            return date(year, month, day)
        except ValueError as e:
            raise FieldParseError(
                "date", f"{month:02d}/{day:02d}", context, str(e)
            ) from e

    def __contains__(self, month: object) -> bool:
        return month in self.months


@dataclass(frozen=True)
class StatementPeriod:
    """Opening/closing dates of a statement plus the derived year lookup."""

    start: date
    end: date
    year_map: YearMap

    @classmethod
    def from_dates(cls, start: date, end: date) -> "StatementPeriod":
        return cls(start, end, YearMap.from_period(start, end))
