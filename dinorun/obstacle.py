from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dinorun.constants import COLLISION_ADJUST
from dinorun.services import PositionedSprite, RenderPort


@dataclass(frozen=True)
class ObstacleType:
    """Catalog entry: an image and its already scaled size."""

    width: float
    height: float
    image: Any


class Obstacle:
    """A ground obstacle that only ever moves left.

    Size and image are fixed at creation; ``x`` is the only mutable field.
    """

    def __init__(self, x: float, y: float, width: float, height: float, image: Any):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.image = image

    def update(self, speed: float, game_speed: float, dt: float, scale_ratio: float) -> None:
        self.x -= speed * game_speed * dt * scale_ratio

    def draw(self, renderer: RenderPort) -> None:
        renderer.draw_image(self.image, self.x, self.y, self.width, self.height)

    @property
    def is_off_screen(self) -> bool:
        return self.x < -self.width

    def collides_with(self, other: PositionedSprite, adjust_by: float = COLLISION_ADJUST) -> bool:
        """AABB overlap test with both boxes shrunk by ``adjust_by``.

        The shrink forgives visually near-miss contacts. The test is
        symmetric: swapping the two sprites gives the same answer.
        """
        if adjust_by < 1:
            raise ValueError(f"collision tolerance must be >= 1, got {adjust_by}")
        return (
            other.x < self.x + self.width / adjust_by
            and other.x + other.width / adjust_by > self.x
            and other.y < self.y + self.height / adjust_by
            and other.y + other.height / adjust_by > self.y
        )

    def __repr__(self) -> str:
        return f"Obstacle(x={self.x:.1f}, y={self.y:.1f}, w={self.width:.1f}, h={self.height:.1f})"


__all__ = ["Obstacle", "ObstacleType"]
