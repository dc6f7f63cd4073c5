"""Millisecond countdown timer."""

from __future__ import annotations

import time
from typing import Callable, Optional


class Countdown:
    """A deadline that can be checked for expiry and remaining time.

    ``clock`` returns the current time in seconds; it defaults to
    ``time.monotonic``. A timer created without a duration is already expired.
    """

    def __init__(
        self, ms: Optional[int] = None, clock: Optional[Callable[[], float]] = None
    ) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._end = self._clock()
        if ms is not None:
            self.countdown_ms(ms)

    def _remaining_ms(self) -> float:
        return round((self._end - self._clock()) * 1000.0, 6)

    def expired(self) -> bool:
        """Return True once the deadline has been reached."""
        return self._remaining_ms() <= 0

    def countdown_ms(self, ms: int) -> None:
        """Set the deadline ``ms`` milliseconds from now."""
        self._end = self._clock() + ms / 1000.0

    def countdown(self, seconds: int) -> None:
        """Set the deadline ``seconds`` seconds from now."""
        self.countdown_ms(seconds * 1000)

    def left_ms(self) -> int:
        """Milliseconds until the deadline, never below zero."""
        remaining = self._remaining_ms()
        return int(remaining) if remaining > 0 else 0