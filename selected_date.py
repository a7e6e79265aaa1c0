"""Single or range selection, tracked as a tiny two-slot state machine."""

from __future__ import annotations

from datetime import date
from enum import Enum

from snapshots import DateSnapshot


class SelectionMode(Enum):
    SINGLE = "single"
    RANGE = "range"


class Slot(Enum):
    LOW = "low"
    HIGH = "high"


class SelectedDate:
    """Holds ``low`` (and ``high`` in RANGE mode).

    In RANGE mode writes alternate LOW, HIGH, LOW… and :meth:`get` reads the
    slot that will be written *next*, not the one written last.
    """

    __slots__ = ("mode", "_current", "low", "high")

    def __init__(self, mode: SelectionMode = SelectionMode.SINGLE) -> None:
        self.mode = mode
        self._current = Slot.LOW
        self.low: DateSnapshot | None = None
        self.high: DateSnapshot | None = None

    @property
    def current(self) -> Slot:
        return self._current

    @current.setter
    def current(self, value: Slot) -> None:
        if self.mode is SelectionMode.SINGLE:
            raise RuntimeError("Only use range functions in RANGE selection mode.")
        self._current = Slot(value)

    def set(self, snapshot: DateSnapshot | None) -> None:
        if self.mode is SelectionMode.SINGLE:
            self.low = snapshot
            return
        if self._current is Slot.LOW:
            self.low = snapshot
            self._current = Slot.HIGH
        else:
            self.high = snapshot
            self._current = Slot.LOW

    def get(self) -> DateSnapshot | None:
        if self.mode is SelectionMode.SINGLE or self._current is Slot.LOW:
            return self.low
        return self.high

    def latest(self) -> DateSnapshot | None:
        """The endpoint written most recently."""
        if self.mode is SelectionMode.SINGLE or self._current is Slot.HIGH:
            return self.low
        return self.high

    def get_date(self) -> date | None:
        snapshot = self.get()
        return snapshot.to_date() if snapshot else None

    def get_range(self) -> tuple[DateSnapshot, DateSnapshot] | None:
        """Return (low, high) in write order, or None until both are set."""
        if self.mode is SelectionMode.SINGLE:
            return None
        if self.low is None or self.high is None:
            return None
        return self.low, self.high

    def clear(self) -> None:
        self.low = None
        self.high = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectedDate):
            return NotImplemented
        return (self.mode == other.mode
                and self.low == other.low
                and self.high == other.high
                and self._current == other._current)

    def __hash__(self) -> int:
        return hash((self.mode, self.low, self.high, self._current))

    def __repr__(self) -> str:
        return (f"SelectedDate(mode={self.mode.name}, low={self.low}, "
                f"high={self.high}, current={self._current.name})")
