from __future__ import annotations

import math

from dinorun.constants import SCORE_COLOR, SCORE_FONT_SIZE, SCORE_RATE
from dinorun.logger import get_logger
from dinorun.services import HighScorePort, RenderPort

log = get_logger("score")


class Score:
    """Time-driven score with a persisted best.

    ``value`` grows with elapsed time while the game runs. The best is only
    written on a game over, and only when the floored score beats it.
    """

    def __init__(self, high_scores: HighScorePort, scale_ratio: float, canvas_width: float, value: float = 0.0):
        self.high_scores = high_scores
        self.scale_ratio = scale_ratio
        self.canvas_width = canvas_width
        self.value = value
        self.persisted_best = high_scores.get_high_score()

    @property
    def points(self) -> int:
        return math.floor(self.value)

    def update(self, dt: float) -> None:
        self.value += dt * SCORE_RATE

    def record_if_high_score(self) -> bool:
        """Persist the floored score if it beats the stored best."""
        stored = self.high_scores.get_high_score()
        self.persisted_best = max(self.persisted_best, stored)
        if self.points > stored:
            self.high_scores.set_high_score(self.points)
            self.persisted_best = self.points
            log.info("High score", self.points, "beats", stored)
            return True
        return False

    def reset(self) -> None:
        self.value = 0.0

    def draw(self, renderer: RenderPort) -> None:
        y = 20 * self.scale_ratio
        size = SCORE_FONT_SIZE * self.scale_ratio
        score_x = self.canvas_width - 100 * self.scale_ratio
        high_score_x = score_x - 125 * self.scale_ratio

        renderer.draw_text(f"{self.points}", score_x, y, size, SCORE_COLOR)
        renderer.draw_text(f"HS {self.persisted_best}", high_score_x, y, size, SCORE_COLOR)


__all__ = ["Score"]
