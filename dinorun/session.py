"""Mutable per-session game state.

Everything that used to be loose module globals in a browser runner (speed,
game-over flag, cutscene bookkeeping) lives in one ``SessionState`` owned by
the game loop, which is its only writer.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from dinorun.constants import GAME_SPEED_INCREMENT, GAME_SPEED_START


class GamePhase(enum.Enum):
    WAITING_TO_START = "waiting"
    RUNNING = "running"
    CUTSCENE = "cutscene"
    GAME_OVER = "game_over"


@dataclass
class SessionState:
    game_speed: float = GAME_SPEED_START
    phase: GamePhase = GamePhase.WAITING_TO_START
    cutscene_passed: bool = False

    @property
    def is_running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    def advance_speed(self, dt: float) -> None:
        self.game_speed += dt * GAME_SPEED_INCREMENT

    def reset(self) -> None:
        """Start a fresh run. The cutscene stays one-shot for the whole session."""
        self.game_speed = GAME_SPEED_START
        self.phase = GamePhase.RUNNING


__all__ = ["GamePhase", "SessionState"]
