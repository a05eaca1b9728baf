"""Collaborator interfaces.

The simulation depends on narrow protocol-style ports instead of pygame
directly. This keeps the physics testable without a display:

- RenderPort        -> clear / draw_image / draw_text
- HighScorePort     -> single persisted integer
- PositionedSprite  -> shared shape of Player, Obstacle and Ground

Conformance is structural; nothing inherits from these.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple

Color = Tuple[int, int, int]


class RenderPort(Protocol):
    def clear(self, color: Color) -> None: ...

    def draw_image(self, image: Any, x: float, y: float, width: float, height: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float, size: float, color: Color) -> None: ...


class HighScorePort(Protocol):
    def get_high_score(self) -> int: ...

    def set_high_score(self, value: int) -> None: ...


class PositionedSprite(Protocol):
    x: float
    y: float
    width: float
    height: float

    def draw(self, renderer: RenderPort) -> None: ...


__all__ = ["Color", "RenderPort", "HighScorePort", "PositionedSprite"]
