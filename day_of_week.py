"""The seven weekdays and their locale-relative orderings."""

from __future__ import annotations

import calendar
from datetime import date
from enum import IntEnum


class DayOfWeek(IntEnum):
    """Sunday-first ordinals (SUNDAY == 1 … SATURDAY == 7)."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


_ORDERED: tuple[DayOfWeek, ...] = tuple(DayOfWeek)


def from_raw(value: int) -> DayOfWeek:
    """Return the weekday for a raw ordinal, raising ValueError outside 1–7."""
    if not DayOfWeek.SUNDAY <= value <= DayOfWeek.SATURDAY:
        raise ValueError(f"Invalid enum value: {value}")
    return _ORDERED[value - 1]


def rest(start: DayOfWeek) -> list[DayOfWeek]:
    """Return all seven weekdays beginning at ``start`` and wrapping around."""
    offset = start - 1
    return [_ORDERED[(offset + i) % 7] for i in range(7)]


def next_day(day: DayOfWeek) -> DayOfWeek:
    """Return the weekday after ``day`` (SATURDAY wraps to SUNDAY)."""
    return _ORDERED[day % 7]


def from_python_weekday(weekday: int) -> DayOfWeek:
    """Convert ``calendar``/``date.weekday()`` numbering (Monday == 0)."""
    if not calendar.MONDAY <= weekday <= calendar.SUNDAY:
        raise ValueError(f"Invalid enum value: {weekday}")
    return _ORDERED[(weekday + 1) % 7]


def of_date(value: date) -> DayOfWeek:
    return from_python_weekday(value.weekday())


def default_first_day_of_week() -> DayOfWeek:
    """Week start configured for the ``calendar`` module (Monday by default)."""
    return from_python_weekday(calendar.firstweekday())
