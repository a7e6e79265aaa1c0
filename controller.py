"""Drives the viewed month and the selection, and pushes render calls out."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable

from calendar_logic import clamp_day
from day_of_week import DayOfWeek, default_first_day_of_week
from min_max import MinMaxController
from month_graph import MonthGraph, MonthItem
from selected_date import SelectedDate, SelectionMode
from snapshots import DateSnapshot, MonthSnapshot
from vibrator import VibratorController

logger = logging.getLogger(__name__)

OnDateChanged = Callable[[date, date], None]

INPUT_DATE_FORMAT = "%m/%d/%Y"


class DatePickerController:
    """State machine behind the picker.

    Nothing is computed until :meth:`maybe_init` (or any setter) runs; from
    then on every change rebuilds the month graph as needed and re-renders
    through the injected callables.
    """

    def __init__(
        self,
        vibrator: VibratorController,
        min_max: MinMaxController,
        render_headers: Callable[[MonthSnapshot, DateSnapshot], None],
        render_month_items: Callable[[list[MonthItem]], None],
        go_back_visibility: Callable[[bool], None],
        go_forward_visibility: Callable[[bool], None],
        switch_to_days_of_month_mode: Callable[[], None],
        get_now: Callable[[], date] = date.today,
        first_day_of_week: DayOfWeek | None = None,
        selection_mode: SelectionMode = SelectionMode.SINGLE,
        input_format: str = INPUT_DATE_FORMAT,
    ) -> None:
        self.vibrator = vibrator
        self.min_max = min_max
        self._render_headers = render_headers
        self._render_month_items = render_month_items
        self._go_back_visibility = go_back_visibility
        self._go_forward_visibility = go_forward_visibility
        self._switch_to_days_of_month_mode = switch_to_days_of_month_mode
        self._get_now = get_now
        self.first_day_of_week = first_day_of_week or default_first_day_of_week()
        self.input_format = input_format

        self.did_init = False
        self.viewing_month: MonthSnapshot | None = None
        self.month_graph: MonthGraph | None = None
        self.selected_date = SelectedDate(selection_mode)
        self._listeners: list[OnDateChanged] = []

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------
    def maybe_init(self) -> None:
        """Seed from "now", or from the nearer bound when now is out of range."""
        if self.did_init:
            return
        start = self._now()
        if self.min_max.is_out_of_min_range(start):
            start = self.min_max.min_date
        elif self.min_max.is_out_of_max_range(start):
            start = self.min_max.max_date
        logger.debug("Initialising picker at %s", start)
        self.set_full_date(start)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def previous_month(self) -> None:
        self._shift_month(-1)

    def next_month(self) -> None:
        self._shift_month(1)

    def set_month(self, month: int) -> None:
        """Show ``month`` (zero-based) of the currently viewed year."""
        self._switch_to_days_of_month_mode()
        viewing = self._require_viewing_month()
        self._update_current_month(MonthSnapshot(month=month, year=viewing.year))
        self.render()
        self.vibrator.vibrate_for_selection()

    def _shift_month(self, delta: int) -> None:
        self._switch_to_days_of_month_mode()
        self._update_current_month(self._require_viewing_month().plus_months(delta))
        self.render()
        self.vibrator.vibrate_for_selection()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def set_full_date(
        self,
        value: DateSnapshot | date | None = None,
        *,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        notify_listeners: bool = True,
    ) -> None:
        """Replace the viewed month and the selection in one step.

        Pass a date/snapshot, or ``month`` with optional ``year`` and ``day``;
        missing parts come from "now".
        """
        snapshot = self._full_date(value, year, month, day)
        old = self._current_selected_or_now()
        self.did_init = True
        self.selected_date.set(snapshot)
        if notify_listeners:
            self._notify_listeners(old, snapshot)
        self._update_current_month(snapshot.month_snapshot)
        self.render()

    def set_day_of_month(self, day: int) -> None:
        if not self.did_init:
            self.set_full_date(self._now().with_day(day))
            return

        old = self._current_selected_or_now()
        snapshot = self._require_viewing_month().day(day)
        self.selected_date.set(snapshot)
        self.vibrator.vibrate_for_selection()
        self._notify_listeners(old, snapshot)
        self.render()

    def set_year(self, year: int) -> None:
        """Move the selection to ``year``, keeping its month and day."""
        selected = self.selection
        if self.viewing_month is not None:
            month = self.viewing_month.month
        elif selected is not None:
            month = selected.month
        else:
            raise RuntimeError("Cannot set a year before a month is known")
        day = clamp_day(year, month, selected.day) if selected else None
        self.set_full_date(year=year, month=month, day=day)
        self._switch_to_days_of_month_mode()

    def maybe_set_date_from_input(self, text: str) -> None:
        """Select a typed date; text that doesn't parse is ignored."""
        text = text.strip()
        if not text:
            return
        try:
            parsed = datetime.strptime(text, self.input_format).date()
        except ValueError:
            logger.debug("Ignoring unparsable date input %r", text)
            return
        self.set_full_date(parsed)

    def get_full_date(self) -> date | None:
        """The selected date, or None before anything is selected."""
        selected = self.selection
        return selected.to_date() if selected else None

    @property
    def selection(self) -> DateSnapshot | None:
        """The most recently written selection endpoint."""
        return self.selected_date.latest()

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_date_changed_listener(self, listener: OnDateChanged) -> None:
        self._listeners.append(listener)

    def remove_date_changed_listener(self, listener: OnDateChanged) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    def clear_date_changed_listeners(self) -> None:
        self._listeners.clear()

    def _notify_listeners(self, old: DateSnapshot, new: DateSnapshot) -> None:
        if not self._listeners:
            return
        # Copy first: a listener may add or clear listeners while we iterate
        for listener in list(self._listeners):
            listener(old.to_date(), new.to_date())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _now(self) -> DateSnapshot:
        return DateSnapshot.from_date(self._get_now())

    def _current_selected_or_now(self) -> DateSnapshot:
        return self.selection or self._now()

    def _require_viewing_month(self) -> MonthSnapshot:
        if self.viewing_month is None:
            raise RuntimeError("Picker is not initialised; call maybe_init() first")
        return self.viewing_month

    def _full_date(
        self,
        value: DateSnapshot | date | None,
        year: int | None,
        month: int | None,
        day: int | None,
    ) -> DateSnapshot:
        if value is not None:
            if year is not None or month is not None or day is not None:
                raise ValueError("pass either a date or year/month/day parts, not both")
            if isinstance(value, DateSnapshot):
                return value
            return DateSnapshot.from_date(value)
        if month is None:
            raise ValueError("month is required when no date is given")
        now = self._now()
        if year is None:
            year = now.year
        if day is None:
            day = clamp_day(year, month, now.day)
        return DateSnapshot(month=month, day=day, year=year)

    def _update_current_month(self, month: MonthSnapshot) -> None:
        self.viewing_month = month
        self.month_graph = MonthGraph(month, self.first_day_of_week, self._now())

    def _validated_selection(self) -> DateSnapshot | None:
        selected = self.selection
        if selected is None or self.min_max.is_out_of_range(selected):
            return None
        return selected

    def render(self) -> None:
        viewing = self.viewing_month
        selected = self.selection
        if viewing is not None and selected is not None:
            self._render_headers(viewing, selected)
        if self.month_graph is not None:
            self._render_month_items(
                self.month_graph.get_month_items(self._validated_selection()))
        if viewing is not None:
            self._go_back_visibility(self.min_max.can_go_back(viewing))
            self._go_forward_visibility(self.min_max.can_go_forward(viewing))
