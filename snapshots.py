"""Immutable day and month values, decoupled from live date objects."""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace
from datetime import date, timedelta

from calendar_logic import add_months, check_month, days_in_month, next_month, prev_month


def compare(a: DateSnapshot | MonthSnapshot, b: DateSnapshot | MonthSnapshot) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to, or after ``b``."""
    if a == b:
        return 0
    return -1 if a < b else 1


@functools.total_ordering
@dataclass(frozen=True)
class DateSnapshot:
    """A calendar day. ``month`` is zero-based."""

    month: int
    day: int
    year: int

    def __post_init__(self) -> None:
        if self.year < 1:
            raise ValueError(f"year must be positive, got {self.year}")
        total = days_in_month(self.year, self.month)
        if not 1 <= self.day <= total:
            raise ValueError(f"day must be in 1..{total}, got {self.day}")

    def _key(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateSnapshot):
            return NotImplemented
        return self._key() < other._key()

    @classmethod
    def from_date(cls, value: date) -> DateSnapshot:
        """Project the year/month/day fields of ``value`` (date or datetime)."""
        return cls(month=value.month - 1, day=value.day, year=value.year)

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    @property
    def month_snapshot(self) -> MonthSnapshot:
        return MonthSnapshot(month=self.month, year=self.year)

    @property
    def is_first_in_month(self) -> bool:
        return self.day == 1

    @property
    def is_last_in_month(self) -> bool:
        return self.day == days_in_month(self.year, self.month)

    def add_days(self, delta: int) -> DateSnapshot:
        """Return the snapshot ``delta`` days away, crossing months and years."""
        return DateSnapshot.from_date(self.to_date() + timedelta(days=delta))

    def with_day(self, day: int) -> DateSnapshot:
        return replace(self, day=day)

    def with_year(self, year: int) -> DateSnapshot:
        return replace(self, year=year)

    def __str__(self) -> str:
        return self.to_date().isoformat()


@functools.total_ordering
@dataclass(frozen=True)
class MonthSnapshot:
    """A calendar month. ``month`` is zero-based."""

    month: int
    year: int

    def __post_init__(self) -> None:
        check_month(self.month)
        if self.year < 1:
            raise ValueError(f"year must be positive, got {self.year}")

    def _key(self) -> tuple[int, int]:
        return self.year, self.month

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthSnapshot):
            return NotImplemented
        return self._key() < other._key()

    @classmethod
    def from_date(cls, value: date | DateSnapshot) -> MonthSnapshot:
        if isinstance(value, DateSnapshot):
            return value.month_snapshot
        return cls(month=value.month - 1, year=value.year)

    def to_date(self, day: int = 1) -> date:
        return date(self.year, self.month + 1, day)

    def day(self, day: int) -> DateSnapshot:
        """Return the snapshot of ``day`` within this month."""
        return DateSnapshot(month=self.month, day=day, year=self.year)

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def plus_months(self, delta: int) -> MonthSnapshot:
        year, month = add_months(self.year, self.month, delta)
        return MonthSnapshot(month=month, year=year)

    def previous(self) -> MonthSnapshot:
        year, month = prev_month(self.year, self.month)
        return MonthSnapshot(month=month, year=year)

    def next(self) -> MonthSnapshot:
        year, month = next_month(self.year, self.month)
        return MonthSnapshot(month=month, year=year)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}"
