"""AssetManager

Centralized lazy loading and caching for images under ``data/images/``.

Design:
- Singleton-style access via ``AssetManager.get()``.
- Image cache keyed by relative path without leading slash.
- A missing or unreadable file never stops the game: a warning is logged and
  a solid placeholder surface is cached in its place. Collision logic only
  uses bounding boxes, so the run stays playable.
"""

from __future__ import annotations

import os
import zlib
from typing import Dict

import pygame

from dinorun.logger import get_logger

IMG_ROOT = "data/images/"
PLACEHOLDER_SIZE = (32, 32)

log = get_logger("assets")


class AssetManager:
    _instance: "AssetManager | None" = None

    def __init__(self, root: str = IMG_ROOT) -> None:
        self.root = root
        self._images: Dict[str, pygame.Surface] = {}
        self.missing: set[str] = set()

    @classmethod
    def get(cls) -> "AssetManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_image(self, rel_path: str) -> pygame.Surface:
        surf = self._images.get(rel_path)
        if surf is None:
            full = os.path.join(self.root, rel_path)
            try:
                raw = pygame.image.load(full)
            except (pygame.error, FileNotFoundError) as e:
                log.warn("Image unavailable, using placeholder:", rel_path, e)
                self.missing.add(rel_path)
                surf = self._placeholder(rel_path)
            else:
                # convert_alpha needs a display mode; headless tests keep the original format.
                if pygame.display.get_init() and pygame.display.get_surface():
                    try:
                        raw = raw.convert_alpha()
                    except pygame.error:
                        pass
                surf = raw
            self._images[rel_path] = surf
        return surf

    def _placeholder(self, rel_path: str) -> pygame.Surface:
        # Stable colour per path so distinct sprites stay distinguishable.
        h = zlib.crc32(rel_path.encode("utf-8"))
        color = (h & 0x7F, (h >> 8) & 0x7F, (h >> 16) & 0x7F)
        surf = pygame.Surface(PLACEHOLDER_SIZE)
        surf.fill(color)
        return surf

    def clear(self) -> None:
        self._images.clear()
        self.missing.clear()


__all__ = ["AssetManager", "IMG_ROOT"]
