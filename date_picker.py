"""Public picker: glues the controller, bounds, haptics and display mode."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from PIL import Image

from calendar_logic import visible_year_range
from controller import DatePickerController, OnDateChanged
from day_of_week import DayOfWeek, from_raw
from grid_image import render_month_image
from min_max import MinMaxController
from month_graph import MonthItem
from observable import Mode, ObservableValue, toggle_mode
from selected_date import SelectionMode
from settings import load_settings, snapshot_from_state, snapshot_to_state
from snapshots import DateSnapshot, MonthSnapshot
from vibrator import VibratorController

logger = logging.getLogger(__name__)


class DatePicker:
    """Headless date picker.

    Keeps the last rendered headers, cells and navigation visibility so a
    view (or :meth:`render_image`) can draw them.
    """

    def __init__(
        self,
        get_now: Callable[[], date] = date.today,
        first_day_of_week: DayOfWeek | None = None,
        selection_mode: SelectionMode = SelectionMode.SINGLE,
        vibrate: Callable[[], None] | None = None,
        selection_vibrates: bool = True,
    ) -> None:
        self._get_now = get_now
        self.mode: ObservableValue[Mode] = ObservableValue(Mode.CALENDAR)
        self.min_max = MinMaxController()
        self.vibrator = VibratorController(vibrate, enabled=selection_vibrates)

        self.headers: tuple[MonthSnapshot, DateSnapshot] | None = None
        self.month_items: list[MonthItem] = []
        self.go_back_visible = False
        self.go_forward_visible = False

        self.controller = DatePickerController(
            vibrator=self.vibrator,
            min_max=self.min_max,
            render_headers=self._render_headers,
            render_month_items=self._render_month_items,
            go_back_visibility=self._set_go_back_visible,
            go_forward_visibility=self._set_go_forward_visible,
            switch_to_days_of_month_mode=self._switch_to_days_of_month_mode,
            get_now=get_now,
            first_day_of_week=first_day_of_week,
            selection_mode=selection_mode,
        )

    @classmethod
    def from_settings(cls, settings: dict | None = None, **kwargs) -> DatePicker:
        """Build a picker from :func:`settings.load_settings` output."""
        if settings is None:
            settings = load_settings()
        first_day = settings.get("first_day_of_week")
        picker = cls(
            first_day_of_week=from_raw(first_day) if first_day else None,
            selection_mode=SelectionMode(settings.get("selection_mode", "single")),
            selection_vibrates=settings.get("selection_vibrates", True),
            **kwargs,
        )
        if settings.get("min_date"):
            picker.set_min_date(date.fromisoformat(settings["min_date"]))
        if settings.get("max_date"):
            picker.set_max_date(date.fromisoformat(settings["max_date"]))
        picker.restore_state(settings.get("selected_date"))
        return picker

    def to_settings(self) -> dict:
        """Inverse of :meth:`from_settings`; suitable for ``save_settings``."""
        min_date = self.get_min_date()
        max_date = self.get_max_date()
        return {
            "first_day_of_week": int(self.controller.first_day_of_week),
            "selection_mode": self.controller.selected_date.mode.value,
            "selection_vibrates": self.vibrator.selection_vibrates,
            "min_date": min_date.isoformat() if min_date else None,
            "max_date": max_date.isoformat() if max_date else None,
            "selected_date": self.save_state(),
        }

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def attach(self) -> None:
        """Seed the picker the first time it is shown."""
        self.controller.maybe_init()

    def save_state(self) -> dict | None:
        return snapshot_to_state(self.controller.selection)

    def restore_state(self, state: dict | None) -> None:
        snapshot = snapshot_from_state(state)
        if snapshot is not None:
            self.controller.set_full_date(snapshot, notify_listeners=False)

    # ------------------------------------------------------------------
    # Dates and bounds
    # ------------------------------------------------------------------
    def set_date(self, value: DateSnapshot | date | None = None, *,
                 year: int | None = None, month: int | None = None,
                 day: int | None = None) -> None:
        self.controller.set_full_date(value, year=year, month=month, day=day)

    def get_date(self) -> date | None:
        return self.controller.get_full_date()

    def get_min_date(self) -> date | None:
        return self.min_max.get_min_date()

    def set_min_date(self, value: DateSnapshot | date | None = None, **parts) -> None:
        """Dates before this are not selectable."""
        self.min_max.set_min_date(value, **parts)
        self._refresh()

    def get_max_date(self) -> date | None:
        return self.min_max.get_max_date()

    def set_max_date(self, value: DateSnapshot | date | None = None, **parts) -> None:
        """Dates after this are not selectable."""
        self.min_max.set_max_date(value, **parts)
        self._refresh()

    def on_date_changed(self, listener: OnDateChanged) -> None:
        self.controller.add_date_changed_listener(listener)

    def remove_on_date_changed(self, listener: OnDateChanged) -> bool:
        return self.controller.remove_date_changed_listener(listener)

    def clear_on_date_changed(self) -> None:
        self.controller.clear_date_changed_listeners()

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def previous_month(self) -> bool:
        """Go back a month if the bounds allow it; return whether it moved."""
        if not self.go_back_visible:
            return False
        self.controller.previous_month()
        return True

    def next_month(self) -> bool:
        """Go forward a month if the bounds allow it; return whether it moved."""
        if not self.go_forward_visible:
            return False
        self.controller.next_month()
        return True

    def select_day(self, day: int) -> bool:
        """Select ``day`` of the viewed month unless it is outside min/max."""
        month = self.controller.viewing_month or MonthSnapshot.from_date(self._get_now())
        target = month.day(day)
        if self.min_max.is_out_of_range(target):
            logger.debug("Ignoring selection of disabled day %s", target)
            return False
        self.controller.set_day_of_month(day)
        return True

    def select_year(self, year: int) -> None:
        self.controller.set_year(year)

    def years(self) -> list[int]:
        """Years offered by the year list, narrowed to the min/max bounds."""
        selected = self.controller.selection
        centre = selected.year if selected else self._get_now().year
        first, last = visible_year_range(centre)
        if self.min_max.min_date is not None:
            first = max(first, self.min_max.min_date.year)
        if self.min_max.max_date is not None:
            last = min(last, self.min_max.max_date.year)
        return list(range(max(first, 1), last + 1))

    def toggle_mode(self, wanted: Mode = Mode.YEAR_LIST) -> None:
        toggle_mode(self.mode, wanted)

    def render_image(self, cell_size: int = 32) -> Image.Image:
        return render_month_image(self.month_items, self.min_max, cell_size)

    # ------------------------------------------------------------------
    # Render callbacks
    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        if self.controller.did_init:
            self.controller.render()

    def _render_headers(self, month: MonthSnapshot, selected: DateSnapshot) -> None:
        self.headers = (month, selected)

    def _render_month_items(self, items: list[MonthItem]) -> None:
        self.month_items = items

    def _set_go_back_visible(self, visible: bool) -> None:
        self.go_back_visible = visible

    def _set_go_forward_visible(self, visible: bool) -> None:
        self.go_forward_visible = visible

    def _switch_to_days_of_month_mode(self) -> None:
        if self.mode.get() is not Mode.CALENDAR:
            self.mode.set(Mode.CALENDAR)
