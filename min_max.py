"""Selectable date bounds and the shapes of the disabled runs around them."""

from __future__ import annotations

import logging
from datetime import date
from enum import Enum

from snapshots import DateSnapshot, MonthSnapshot

logger = logging.getLogger(__name__)


class BoundaryStyle(Enum):
    """Where a disabled day sits within its visually contiguous run."""

    START = "start"
    END = "end"
    START_AND_END = "start_and_end"
    MIDDLE = "middle"


def _style(is_start: bool, is_end: bool) -> BoundaryStyle:
    if is_start and is_end:
        return BoundaryStyle.START_AND_END
    if is_start:
        return BoundaryStyle.START
    if is_end:
        return BoundaryStyle.END
    return BoundaryStyle.MIDDLE


def _coerce(
    value: DateSnapshot | date | None,
    year: int | None,
    month: int | None,
    day: int | None,
) -> DateSnapshot:
    if value is not None:
        if isinstance(value, DateSnapshot):
            return value
        return DateSnapshot.from_date(value)
    if year is None or month is None or day is None:
        raise ValueError("either a date or year, month and day are required")
    return DateSnapshot(month=month, day=day, year=year)


class MinMaxController:
    """Holds the optional inclusive min/max dates."""

    def __init__(self) -> None:
        self.min_date: DateSnapshot | None = None
        self.max_date: DateSnapshot | None = None

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------
    def get_min_date(self) -> date | None:
        return self.min_date.to_date() if self.min_date else None

    def set_min_date(self, value: DateSnapshot | date | None = None, *,
                     year: int | None = None, month: int | None = None,
                     day: int | None = None) -> None:
        snapshot = _coerce(value, year, month, day)
        self._validate(snapshot, self.max_date)
        self.min_date = snapshot
        logger.debug("min date set to %s", snapshot)

    def get_max_date(self) -> date | None:
        return self.max_date.to_date() if self.max_date else None

    def set_max_date(self, value: DateSnapshot | date | None = None, *,
                     year: int | None = None, month: int | None = None,
                     day: int | None = None) -> None:
        snapshot = _coerce(value, year, month, day)
        self._validate(self.min_date, snapshot)
        self.max_date = snapshot
        logger.debug("max date set to %s", snapshot)

    @staticmethod
    def _validate(min_date: DateSnapshot | None, max_date: DateSnapshot | None) -> None:
        if min_date is not None and max_date is not None and not min_date < max_date:
            raise ValueError(
                f"min date must precede max date (min={min_date}, max={max_date})"
            )

    # ------------------------------------------------------------------
    # Range checks
    # ------------------------------------------------------------------
    def is_out_of_min_range(self, value: DateSnapshot | None) -> bool:
        if value is None or self.min_date is None:
            return False
        return value < self.min_date

    def is_out_of_max_range(self, value: DateSnapshot | None) -> bool:
        if value is None or self.max_date is None:
            return False
        return value > self.max_date

    def is_out_of_range(self, value: DateSnapshot | None) -> bool:
        return self.is_out_of_min_range(value) or self.is_out_of_max_range(value)

    def can_go_back(self, from_month: MonthSnapshot) -> bool:
        """False when the month before ``from_month`` lies wholly before the min date."""
        if self.min_date is None:
            return True
        return from_month.previous() >= self.min_date.month_snapshot

    def can_go_forward(self, from_month: MonthSnapshot) -> bool:
        """False when the month after ``from_month`` lies wholly after the max date."""
        if self.max_date is None:
            return True
        return from_month.next() <= self.max_date.month_snapshot

    # ------------------------------------------------------------------
    # Boundary shapes (cosmetic only)
    # ------------------------------------------------------------------
    def get_out_of_min_range_style(self, value: DateSnapshot) -> BoundaryStyle:
        if self.min_date is None:
            raise RuntimeError("no min date is set")
        is_start = value.is_first_in_month
        is_end = value.is_last_in_month or value == self.min_date.add_days(-1)
        return _style(is_start, is_end)

    def get_out_of_max_range_style(self, value: DateSnapshot) -> BoundaryStyle:
        if self.max_date is None:
            raise RuntimeError("no max date is set")
        is_start = value.is_first_in_month or value == self.max_date.add_days(1)
        is_end = value.is_last_in_month
        return _style(is_start, is_end)
