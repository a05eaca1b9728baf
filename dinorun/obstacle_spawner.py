"""Obstacle population and spawn timing.

Owns every live ``Obstacle``. A countdown drawn uniformly from the spawn
interval is decremented by the frame delta; each time it crosses zero
exactly one obstacle is created off-screen to the right and the countdown is
redrawn. Obstacles are discarded once they have fully left the screen.

Per-tick order is spawn, then move, then cull, so a freshly spawned obstacle
also receives that frame's motion.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from dinorun.constants import (
    COLLISION_ADJUST,
    OBSTACLE_INTERVAL_MAX,
    OBSTACLE_INTERVAL_MIN,
    OBSTACLE_SPAWN_X_FACTOR,
)
from dinorun.logger import get_logger
from dinorun.obstacle import Obstacle, ObstacleType
from dinorun.rng_service import RNGService
from dinorun.services import PositionedSprite, RenderPort

log = get_logger("spawner")


class ObstacleSpawner:
    def __init__(
        self,
        catalog: Sequence[ObstacleType],
        scale_ratio: float,
        speed: float,
        canvas_width: float,
        canvas_height: float,
        rng: RNGService | None = None,
        interval: Tuple[int, int] = (OBSTACLE_INTERVAL_MIN, OBSTACLE_INTERVAL_MAX),
        collision_adjust: float = COLLISION_ADJUST,
    ):
        if not catalog:
            raise ValueError("obstacle catalog must not be empty")
        if interval[0] > interval[1]:
            raise ValueError(f"spawn interval min > max: {interval}")
        if collision_adjust < 1:
            raise ValueError(f"collision tolerance must be >= 1, got {collision_adjust}")
        self.catalog: List[ObstacleType] = list(catalog)
        self.scale_ratio = scale_ratio
        self.speed = speed
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.rng = rng or RNGService.get()
        self.interval = interval
        self.collision_adjust = collision_adjust
        self._obstacles: List[Obstacle] = []
        self.countdown = 0
        self.set_next_spawn_interval()

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        return tuple(self._obstacles)

    def set_next_spawn_interval(self) -> None:
        self.countdown = self.rng.randint(self.interval[0], self.interval[1])

    def create_obstacle(self) -> Obstacle:
        kind = self.rng.choice(self.catalog)
        x = self.canvas_width * OBSTACLE_SPAWN_X_FACTOR
        y = self.canvas_height - kind.height
        obstacle = Obstacle(x, y, kind.width, kind.height, kind.image)
        self._obstacles.append(obstacle)
        log.debug("spawned", obstacle)
        return obstacle

    def update(self, game_speed: float, dt: float) -> None:
        self.countdown -= dt
        if self.countdown <= 0:
            self.create_obstacle()
            self.set_next_spawn_interval()

        for obstacle in self._obstacles:
            obstacle.update(self.speed, game_speed, dt, self.scale_ratio)

        self._obstacles = [o for o in self._obstacles if not o.is_off_screen]

    def draw(self, renderer: RenderPort) -> None:
        for obstacle in self._obstacles:
            obstacle.draw(renderer)

    def collides_with(self, sprite: PositionedSprite) -> bool:
        return any(o.collides_with(sprite, self.collision_adjust) for o in self._obstacles)

    def extend_catalog(self, kinds: Iterable[ObstacleType]) -> None:
        added = list(kinds)
        self.catalog.extend(added)
        log.info("Obstacle catalog extended by", len(added), "->", len(self.catalog))

    def reset(self) -> None:
        # The pending countdown is kept; it still fires on schedule after a restart.
        self._obstacles = []


__all__ = ["ObstacleSpawner"]
