"""Fixed 6-week grid for one month, laid out for a given week start."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from day_of_week import DayOfWeek, next_day, of_date, rest
from snapshots import DateSnapshot, MonthSnapshot

WEEK_LENGTH = 7
WEEK_ROWS = 6
EXPECTED_SIZE = WEEK_LENGTH + WEEK_ROWS * WEEK_LENGTH  # header + 6 weeks


@dataclass(frozen=True)
class WeekHeader:
    """Column header cell; carries only the weekday."""

    day_of_week: DayOfWeek


@dataclass(frozen=True)
class DayOfMonth:
    """A day cell. ``day`` is None for filler cells."""

    day_of_week: DayOfWeek
    month: MonthSnapshot
    day: int | None = None
    is_selected: bool = False
    is_today: bool = False

    @property
    def is_filler(self) -> bool:
        return self.day is None

    def snapshot(self) -> DateSnapshot | None:
        if self.day is None:
            return None
        return self.month.day(self.day)


MonthItem = WeekHeader | DayOfMonth


def same_item(old: MonthItem, new: MonthItem) -> bool:
    """True when both cells stand for the same header or the same day slot."""
    if isinstance(old, WeekHeader) and isinstance(new, WeekHeader):
        return old.day_of_week == new.day_of_week
    if isinstance(old, DayOfMonth) and isinstance(new, DayOfMonth):
        return (old.day_of_week == new.day_of_week
                and old.month == new.month
                and old.day == new.day)
    return False


def same_contents(old: MonthItem, new: MonthItem) -> bool:
    """Like :func:`same_item`, but a change in selection counts as a change."""
    if not same_item(old, new):
        return False
    if isinstance(old, DayOfMonth):
        return old.is_selected == new.is_selected
    return True


class MonthGraph:
    """Builds the 49 cells (7 headers + 42 days) shown for ``month``."""

    def __init__(
        self,
        month: MonthSnapshot | DateSnapshot | date,
        first_day_of_week: DayOfWeek,
        today: DateSnapshot,
    ) -> None:
        if not isinstance(month, MonthSnapshot):
            month = MonthSnapshot.from_date(month)
        self.month: MonthSnapshot = month
        self.today = today
        self.days_in_month: int = month.days_in_month
        self.first_week_day_in_month: DayOfWeek = of_date(month.to_date(1))
        self.ordered_week_days: list[DayOfWeek] = rest(first_day_of_week)

    def get_month_items(self, selected_date: DateSnapshot | None) -> list[MonthItem]:
        month = self.month
        items: list[MonthItem] = [WeekHeader(d) for d in self.ordered_week_days]

        # Leading filler: the tail of the previous month
        for weekday in self.ordered_week_days:
            if weekday == self.first_week_day_in_month:
                break
            items.append(DayOfMonth(weekday, month))

        weekday = self.first_week_day_in_month
        for day in range(1, self.days_in_month + 1):
            snapshot = month.day(day)
            items.append(DayOfMonth(
                day_of_week=weekday,
                month=month,
                day=day,
                is_selected=snapshot == selected_date,
                is_today=snapshot == self.today,
            ))
            weekday = next_day(weekday)

        if len(items) < EXPECTED_SIZE:
            # Complete the last week
            loop_target = next_day(self.ordered_week_days[-1])
            for filler in rest(weekday):
                if filler == loop_target:
                    break
                items.append(DayOfMonth(filler, month))

        # Always 6 weeks so the grid height stays constant
        while len(items) < EXPECTED_SIZE:
            items.extend(DayOfMonth(d, month) for d in self.ordered_week_days)

        if len(items) != EXPECTED_SIZE:
            raise RuntimeError(f"{len(items)} must equal {EXPECTED_SIZE}")
        return items

    def weeks(self, selected_date: DateSnapshot | None) -> list[list[DayOfMonth]]:
        """Return the six day rows of :meth:`get_month_items`, headers dropped."""
        days = self.get_month_items(selected_date)[WEEK_LENGTH:]
        return [days[i:i + WEEK_LENGTH] for i in range(0, len(days), WEEK_LENGTH)]
