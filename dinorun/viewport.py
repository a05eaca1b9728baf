"""Viewport fit and scale ratio.

The game is designed on a fixed GAME_WIDTH x GAME_HEIGHT canvas. The window
can be any size, so the canvas is scaled uniformly to the largest size that
fits and centred (letterboxed). Every component is rebuilt from a fresh
``Viewport`` whenever the window changes size.
"""

from __future__ import annotations

from dataclasses import dataclass

from dinorun.constants import GAME_HEIGHT, GAME_WIDTH


def compute_scale_ratio(
    screen_w: float,
    screen_h: float,
    design_w: float = GAME_WIDTH,
    design_h: float = GAME_HEIGHT,
) -> float:
    """Return the factor that maps design units onto the screen.

    Screens narrower than the design aspect are width-bound, wider ones are
    height-bound.
    """
    if screen_w <= 0 or screen_h <= 0:
        raise ValueError(f"viewport size must be positive, got {screen_w}x{screen_h}")
    if screen_w / screen_h < design_w / design_h:
        return screen_w / design_w
    return screen_h / design_h


@dataclass(frozen=True)
class Viewport:
    scale_ratio: float
    canvas_width: float
    canvas_height: float

    @classmethod
    def from_screen(cls, screen_w: float, screen_h: float) -> "Viewport":
        ratio = compute_scale_ratio(screen_w, screen_h)
        return cls(ratio, GAME_WIDTH * ratio, GAME_HEIGHT * ratio)

    @property
    def canvas_size(self) -> tuple[int, int]:
        return int(self.canvas_width), int(self.canvas_height)

    def offset_in(self, screen_w: float, screen_h: float) -> tuple[int, int]:
        """Top-left position that centres the canvas in a window."""
        return int((screen_w - self.canvas_width) // 2), int((screen_h - self.canvas_height) // 2)


__all__ = ["Viewport", "compute_scale_ratio"]
