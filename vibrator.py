"""Best-effort haptic feedback on selection."""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class VibratorController:
    """Calls the platform ``vibrate`` hook; never lets it fail the caller."""

    def __init__(self, vibrate: Callable[[], None] | None = None,
                 enabled: bool = True) -> None:
        self._vibrate = vibrate
        self.selection_vibrates = enabled

    def vibrate_for_selection(self) -> None:
        if not self.selection_vibrates or self._vibrate is None:
            return
        try:
            self._vibrate()
        except Exception:
            # e.g. missing permission on the host platform
            logger.debug("Selection vibration failed", exc_info=True)
