from __future__ import annotations

from typing import Any

from dinorun.services import RenderPort


class Ground:
    """Endlessly scrolling ground strip made of two side-by-side tiles."""

    def __init__(self, width: float, height: float, speed: float, scale_ratio: float, canvas_height: float, image: Any):
        self.width = width
        self.height = height
        self.speed = speed
        self.scale_ratio = scale_ratio
        self.image = image
        self.x = 0.0
        self.y = canvas_height - height  # bottom of the canvas

    def update(self, game_speed: float, dt: float) -> None:
        self.x -= game_speed * dt * self.speed * self.scale_ratio

    def draw(self, renderer: RenderPort) -> None:
        renderer.draw_image(self.image, self.x, self.y, self.width, self.height)
        renderer.draw_image(self.image, self.x + self.width, self.y, self.width, self.height)

        # Wrap only after both tiles used this frame's offset.
        if self.x < -self.width:
            self.x = 0.0

    def reset(self) -> None:
        self.x = 0.0


__all__ = ["Ground"]
