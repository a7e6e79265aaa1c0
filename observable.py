"""Publish/subscribe value holder and the picker's display modes."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Mode(Enum):
    CALENDAR = "calendar"
    YEAR_LIST = "year_list"
    INPUT_EDIT = "input_edit"


class ObservableValue(Generic[T]):
    """A value that tells its observers whenever it is set."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._observers: list[Callable[[T], None]] = []

    def on(self, observer: Callable[[T], None]) -> ObservableValue[T]:
        if observer not in self._observers:
            self._observers.append(observer)
        return self

    def off(self, observer: Callable[[T], None]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        # Observers may subscribe or set again while being notified
        for observer in list(self._observers):
            observer(value)


def toggle_mode(mode: ObservableValue[Mode], wanted: Mode = Mode.YEAR_LIST) -> None:
    """Leave the calendar for ``wanted``, or come back to the calendar."""
    if mode.get() is Mode.CALENDAR:
        mode.set(wanted)
    else:
        mode.set(Mode.CALENDAR)
