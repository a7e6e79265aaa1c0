"""JSON-based settings and saved-state persistence for the date picker."""

import json
import logging
import os
from datetime import date

from selected_date import SelectionMode
from snapshots import DateSnapshot

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-date-picker.json")

_DEFAULTS = {
    "first_day_of_week": None,
    "selection_mode": SelectionMode.SINGLE.value,
    "selection_vibrates": True,
    "min_date": None,
    "max_date": None,
    "selected_date": None,
}


def _iso_or_none(value) -> str | None:
    """Return ``value`` if it is an ISO date string, else None."""
    if not isinstance(value, str):
        return None
    try:
        date.fromisoformat(value)
    except ValueError:
        return None
    return value


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError):
        logger.warning("Ignoring unreadable settings file %s", _SETTINGS_PATH)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring malformed settings file %s", _SETTINGS_PATH)
        return settings

    day = stored.get("first_day_of_week")
    if isinstance(day, int) and not isinstance(day, bool) and 1 <= day <= 7:
        settings["first_day_of_week"] = day
    mode = stored.get("selection_mode")
    if mode in {m.value for m in SelectionMode}:
        settings["selection_mode"] = mode
    if isinstance(stored.get("selection_vibrates"), bool):
        settings["selection_vibrates"] = stored["selection_vibrates"]
    for key in ("min_date", "max_date"):
        settings[key] = _iso_or_none(stored.get(key))
    if snapshot_from_state(stored.get("selected_date")) is not None:
        settings["selected_date"] = dict(stored["selected_date"])
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


# ------------------------------------------------------------------
# Saved state: a single optional (year, month, day) triple
# ------------------------------------------------------------------
def snapshot_to_state(snapshot: DateSnapshot | None) -> dict | None:
    if snapshot is None:
        return None
    return {"year": snapshot.year, "month": snapshot.month, "day": snapshot.day}


def snapshot_from_state(state) -> DateSnapshot | None:
    """Rebuild a snapshot from a saved triple; None if absent or invalid."""
    if not isinstance(state, dict):
        return None
    try:
        return DateSnapshot(month=state["month"], day=state["day"], year=state["year"])
    except (KeyError, TypeError, ValueError):
        return None
