"""Pygame implementation of the rendering port.

The simulation only issues three kinds of draw command (clear, image,
text). ``PygameRenderer`` turns them into blits on an off-screen canvas
surface which the running state later letterboxes onto the window.

Design Notes:
- Scaled images are cached per (image, size) so a sprite that keeps its size
  is only transformed once.
- Fonts are cached per pixel size.
- Text ``y`` is the baseline, so glyphs are lifted by the font ascent.
- Optional ``capture_sequence`` records the high-level commands executed,
  which lets tests assert layer order without sampling pixels.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pygame

from dinorun.logger import get_logger
from dinorun.services import Color

_log = get_logger("renderer")

FONT_NAME = "georgia"


class PygameRenderer:
    def __init__(self, surface: pygame.Surface, capture_sequence: Optional[List[str]] = None) -> None:
        self.surface = surface
        self.capture_sequence = capture_sequence
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._scaled: Dict[Tuple[int, int, int], pygame.Surface] = {}

    def _record(self, step: str) -> None:
        if self.capture_sequence is not None:
            self.capture_sequence.append(step)

    def font(self, size: float) -> pygame.font.Font:
        px = max(1, int(size))
        font = self._fonts.get(px)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(FONT_NAME, px)
            self._fonts[px] = font
        return font

    def clear(self, color: Color) -> None:
        self.surface.fill(color)
        self._record("clear")

    def draw_image(self, image: Any, x: float, y: float, width: float, height: float) -> None:
        self._record("image")
        if not isinstance(image, pygame.Surface):
            return
        size = (max(1, int(width)), max(1, int(height)))
        key = (id(image), size[0], size[1])
        scaled = self._scaled.get(key)
        if scaled is None:
            scaled = image if image.get_size() == size else pygame.transform.scale(image, size)
            self._scaled[key] = scaled
        self.surface.blit(scaled, (int(x), int(y)))

    def draw_text(self, text: str, x: float, y: float, size: float, color: Color) -> None:
        font = self.font(size)
        rendered = font.render(text, True, color)
        self.surface.blit(rendered, (int(x), int(y) - font.get_ascent()))
        self._record(f"text:{text}")

    def resize(self, surface: pygame.Surface) -> None:
        """Swap the target canvas after a viewport change."""
        self.surface = surface
        self._scaled.clear()
        _log.debug("canvas resized", surface.get_size())


__all__ = ["PygameRenderer", "FONT_NAME"]
