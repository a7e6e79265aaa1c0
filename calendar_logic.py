"""Pure calendar calculations with no UI dependencies.

Months are zero-based throughout (January == 0), matching the snapshots.
"""

import calendar

(JANUARY, FEBRUARY, MARCH, APRIL, MAY, JUNE,
 JULY, AUGUST, SEPTEMBER, OCTOBER, NOVEMBER, DECEMBER) = range(12)


def check_month(month: int) -> int:
    """Return ``month`` unchanged, raising ValueError outside 0–11."""
    if not 0 <= month <= DECEMBER:
        raise ValueError(f"month must be in 0..11, got {month}")
    return month


def days_in_month(year: int, month: int) -> int:
    """Return 28–31 for the zero-based ``month`` of ``year``."""
    return calendar.monthrange(year, check_month(month) + 1)[1]


def clamp_day(year: int, month: int, day: int) -> int:
    """Pull ``day`` into the valid range of the given month."""
    return max(1, min(day, days_in_month(year, month)))


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == JANUARY:
        return year - 1, DECEMBER
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == DECEMBER:
        return year + 1, JANUARY
    return year, month + 1


def add_months(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return (year, month) shifted by ``delta`` months in either direction."""
    return divmod(year * 12 + month + delta, 12)


def visible_year_range(year: int) -> tuple[int, int]:
    """Return the (first, last) years offered by the year list around ``year``.

    The window is centred on the century containing ``year``.
    """
    middle = (year // 100) * 100
    return middle - 100, middle + 100
