from __future__ import annotations

import enum
from typing import Any, Sequence

from dinorun.constants import (
    GRAVITY,
    JUMP_SPEED,
    PLAYER_GROUND_GAP,
    PLAYER_X,
    RUN_ANIMATION_TIMER,
)
from dinorun.services import RenderPort


class PlayerPhase(enum.Enum):
    GROUNDED = "grounded"
    ASCENDING = "ascending"
    DESCENDING = "descending"


class Player:
    """The runner sprite.

    The player never moves horizontally; the world scrolls past it. Vertical
    motion is a three-phase machine (grounded, ascending, descending) driven
    by a single ``jump_intent`` flag that the input layer sets while the jump
    key is held. Tapping the key gives the minimum jump height, holding it
    keeps ascending until the maximum height.
    """

    JUMP_SPEED = JUMP_SPEED
    GRAVITY = GRAVITY
    RUN_ANIMATION_TIMER = RUN_ANIMATION_TIMER

    def __init__(
        self,
        width: float,
        height: float,
        min_jump_height: float,
        max_jump_height: float,
        scale_ratio: float,
        canvas_height: float,
        run_images: Sequence[Any],
        jump_image: Any,
    ):
        if not run_images:
            raise ValueError("player needs at least one running image")
        self.width = width
        self.height = height
        self.min_jump_height = min_jump_height
        self.max_jump_height = max_jump_height
        self.scale_ratio = scale_ratio
        self.canvas_height = canvas_height
        self.run_images = list(run_images)
        self.jump_image = jump_image

        self.x = PLAYER_X * scale_ratio
        self.y_standing = canvas_height - height - PLAYER_GROUND_GAP * scale_ratio
        self.y = self.y_standing

        self.jump_intent = False
        self.jump_in_progress = False
        self.falling = False
        self.run_index = 0
        self.run_timer = self.RUN_ANIMATION_TIMER

    # --- Derived state -------------------------------------------------
    @property
    def ceiling(self) -> float:
        """Highest point (smallest y) a jump may reach."""
        return self.canvas_height - self.max_jump_height

    @property
    def phase(self) -> PlayerPhase:
        if not self.jump_in_progress:
            return PlayerPhase.GROUNDED
        if self.falling:
            return PlayerPhase.DESCENDING
        return PlayerPhase.ASCENDING

    @property
    def image(self) -> Any:
        if self.jump_in_progress:
            return self.jump_image
        return self.run_images[self.run_index]

    # --- Per-frame update ----------------------------------------------
    def update(self, game_speed: float, dt: float) -> None:
        """Advance animation then vertical physics.

        Steps:
          1. run      -> run-cycle timer scaled by game speed
          2. jump     -> ascend / fall / land
        """
        self.run(game_speed, dt)
        self.jump(dt)

    def run(self, game_speed: float, dt: float) -> None:
        self.run_timer -= game_speed * dt
        if self.run_timer <= 0:
            self.run_index = (self.run_index + 1) % len(self.run_images)
            self.run_timer = self.RUN_ANIMATION_TIMER

    def jump(self, dt: float) -> None:
        if self.jump_intent:
            self.jump_in_progress = True

        if self.jump_in_progress and not self.falling:
            below_min = self.y > self.canvas_height - self.min_jump_height
            held_below_max = self.y > self.ceiling and self.jump_intent
            if below_min or held_below_max:
                self.y = max(self.ceiling, self.y - self.JUMP_SPEED * self.scale_ratio * dt)
            else:
                self.falling = True
            return

        if self.y < self.y_standing:
            self.y = min(self.y_standing, self.y + self.GRAVITY * self.scale_ratio * dt)
        if self.y >= self.y_standing:
            self.land()

    def land(self) -> None:
        self.y = self.y_standing
        self.falling = False
        self.jump_in_progress = False

    def reset(self) -> None:
        self.land()
        self.jump_intent = False
        self.run_index = 0
        self.run_timer = self.RUN_ANIMATION_TIMER

    def draw(self, renderer: RenderPort) -> None:
        renderer.draw_image(self.image, self.x, self.y, self.width, self.height)


__all__ = ["Player", "PlayerPhase"]
