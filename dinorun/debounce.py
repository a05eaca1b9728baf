"""Restart debounce timer.

After a game over the restart input must stay ignored for a short delay so
the key press that caused the crash does not immediately start a new run.
The timer is advanced by the game loop's own frame delta, which keeps arming
and firing on the same single-threaded schedule as the simulation.
"""

from __future__ import annotations


class DebounceTimer:
    def __init__(self) -> None:
        self._armed = False
        self._remaining = 0.0

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def remaining(self) -> float:
        return self._remaining if self._armed else 0.0

    @property
    def ready(self) -> bool:
        return self._armed and self._remaining <= 0

    def arm(self, delay: float) -> bool:
        """Start the countdown. Returns False if already armed (no double registration)."""
        if self._armed:
            return False
        self._armed = True
        self._remaining = max(0.0, float(delay))
        return True

    def advance(self, dt: float) -> None:
        if self._armed and self._remaining > 0:
            self._remaining = max(0.0, self._remaining - dt)

    def disarm(self) -> None:
        self._armed = False
        self._remaining = 0.0


__all__ = ["DebounceTimer"]
