"""Per-frame simulation driver.

``GameLoop`` owns one instance of every component plus the session state
and advances them from monotonic timestamps supplied by the frame
scheduler. It derives its own frame delta; the first tick only records the
baseline timestamp.

Phase machine:

    WAITING_TO_START --restart--> RUNNING --collision--> GAME_OVER
                                     |                       |
                                     +--score milestone--> CUTSCENE
    GAME_OVER / CUTSCENE --restart (after debounce)--> RUNNING

Restart requests arrive from the input layer between ticks. They are only
accepted once the debounce timer is ready and are applied at the start of
the next tick, so a restart can never interleave with an update.

Layer order (bottom -> top): ground, obstacles, player, score, overlay text.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from dinorun.asset_manager import AssetManager
from dinorun.constants import (
    BACKGROUND_COLOR,
    COLLISION_ADJUST,
    CUTSCENE_COLOR,
    CUTSCENE_FONT_SIZE,
    CUTSCENE_INIT_SCORE,
    CUTSCENE_RESTART_DELAY,
    CUTSCENE_UNLOCKS,
    GAME_OVER_COLOR,
    GAME_OVER_FONT_SIZE,
    GAME_OVER_RESTART_DELAY,
    GROUND_AND_OBSTACLE_SPEED,
    GROUND_HEIGHT,
    GROUND_IMAGE,
    GROUND_WIDTH,
    MAX_JUMP_HEIGHT,
    MIN_JUMP_HEIGHT,
    OBSTACLE_CATALOG,
    PLAYER_HEIGHT,
    PLAYER_JUMP_IMAGE,
    PLAYER_RUN_IMAGES,
    PLAYER_WIDTH,
    START_COLOR,
    START_FONT_SIZE,
)
from dinorun.debounce import DebounceTimer
from dinorun.ground import Ground
from dinorun.logger import get_logger
from dinorun.obstacle import ObstacleType
from dinorun.obstacle_spawner import ObstacleSpawner
from dinorun.player import Player
from dinorun.rng_service import RNGService
from dinorun.score import Score
from dinorun.services import HighScorePort, RenderPort
from dinorun.session import GamePhase, SessionState
from dinorun.viewport import Viewport

log = get_logger("loop")

ImageLoader = Callable[[str], Any]


class GameLoop:
    def __init__(
        self,
        renderer: RenderPort,
        high_scores: HighScorePort,
        screen_size: Tuple[float, float],
        rng: RNGService | None = None,
        load_image: ImageLoader | None = None,
        cutscene_score: Optional[float] = CUTSCENE_INIT_SCORE,
        obstacle_catalog: Iterable[Mapping[str, Any]] = OBSTACLE_CATALOG,
        collision_adjust: float = COLLISION_ADJUST,
    ) -> None:
        self.renderer = renderer
        self.high_scores = high_scores
        self.rng = rng or RNGService.get()
        self.load_image = load_image or AssetManager.get().get_image
        self.cutscene_score = cutscene_score
        self.collision_adjust = collision_adjust
        self._catalog_config: List[Mapping[str, Any]] = list(obstacle_catalog)
        if not self._catalog_config:
            raise ValueError("obstacle catalog must not be empty")

        self.session = SessionState()
        # Armed immediately with no delay so the very first input starts the game.
        self.restart_gate = DebounceTimer()
        self.restart_gate.arm(0)
        self._restart_pending = False
        self._prev_time: float | None = None

        self.viewport = Viewport.from_screen(*screen_size)
        self.create_sprites()
        log.info("GameLoop ready, scale ratio", round(self.viewport.scale_ratio, 3))

    # Construction -----------------------------------------------------
    def _scale_catalog(self, entries: Iterable[Mapping[str, Any]]) -> List[ObstacleType]:
        s = self.viewport.scale_ratio
        return [ObstacleType(e["width"] * s, e["height"] * s, self.load_image(e["image"])) for e in entries]

    def create_sprites(self, score_value: float = 0.0) -> None:
        """Build every component from the current viewport."""
        vp = self.viewport
        s = vp.scale_ratio
        self.player = Player(
            PLAYER_WIDTH * s,
            PLAYER_HEIGHT * s,
            MIN_JUMP_HEIGHT * s,
            MAX_JUMP_HEIGHT * s,
            s,
            vp.canvas_height,
            [self.load_image(p) for p in PLAYER_RUN_IMAGES],
            self.load_image(PLAYER_JUMP_IMAGE),
        )
        self.ground = Ground(
            GROUND_WIDTH * s,
            GROUND_HEIGHT * s,
            GROUND_AND_OBSTACLE_SPEED,
            s,
            vp.canvas_height,
            self.load_image(GROUND_IMAGE),
        )
        self.spawner = ObstacleSpawner(
            self._scale_catalog(self._catalog_config),
            s,
            GROUND_AND_OBSTACLE_SPEED,
            vp.canvas_width,
            vp.canvas_height,
            rng=self.rng,
            collision_adjust=self.collision_adjust,
        )
        self.score = Score(self.high_scores, s, vp.canvas_width, value=score_value)

    def resize(self, screen_w: float, screen_h: float) -> None:
        """Rebuild components for a new window size.

        The run itself (phase, speed, score, unlocked obstacles) carries
        over; live obstacles do not.
        """
        intent = self.player.jump_intent
        score_value = self.score.value
        self.viewport = Viewport.from_screen(screen_w, screen_h)
        self.create_sprites(score_value=score_value)
        self.player.jump_intent = intent
        log.info("Resized to", screen_w, "x", screen_h, "scale", round(self.viewport.scale_ratio, 3))

    # Input ------------------------------------------------------------
    @property
    def phase(self) -> GamePhase:
        return self.session.phase

    @property
    def game_speed(self) -> float:
        return self.session.game_speed

    def set_jump_intent(self, pressed: bool) -> None:
        self.player.jump_intent = bool(pressed)

    def request_restart(self) -> bool:
        """Queue a restart for the next tick if the debounce window has passed."""
        if not self.restart_gate.ready:
            log.debug("restart ignored, gate not ready", self.restart_gate.remaining)
            return False
        self._restart_pending = True
        return True

    # Frame ------------------------------------------------------------
    def tick(self, timestamp: float) -> None:
        if self._prev_time is None:
            self._prev_time = timestamp
            self.draw()
            return

        dt = max(0.0, timestamp - self._prev_time)
        self._prev_time = timestamp

        self.restart_gate.advance(dt)
        if self._restart_pending:
            self.restart()

        if self.session.is_running:
            self.update(dt)

        self.draw()

    def update(self, dt: float) -> None:
        s = self.session
        self.ground.update(s.game_speed, dt)
        self.spawner.update(s.game_speed, dt)
        self.player.update(s.game_speed, dt)
        self.score.update(dt)
        s.advance_speed(dt)

        if self.spawner.collides_with(self.player):
            self._enter_game_over()
        elif self._cutscene_due():
            self._enter_cutscene()

    def _cutscene_due(self) -> bool:
        if self.cutscene_score is None or self.session.cutscene_passed:
            return False
        return self.score.value >= self.cutscene_score

    def _enter_game_over(self) -> None:
        self.session.phase = GamePhase.GAME_OVER
        self.score.record_if_high_score()
        self.restart_gate.arm(GAME_OVER_RESTART_DELAY)
        log.info("Game over at score", self.score.points, "speed", round(self.session.game_speed, 4))

    def _enter_cutscene(self) -> None:
        self.session.phase = GamePhase.CUTSCENE
        self.session.cutscene_passed = True
        self._catalog_config.extend(CUTSCENE_UNLOCKS)
        self.spawner.extend_catalog(self._scale_catalog(CUTSCENE_UNLOCKS))
        self.restart_gate.arm(CUTSCENE_RESTART_DELAY)
        log.info("Cutscene reached at score", self.score.points)

    def restart(self) -> None:
        self._restart_pending = False
        self.restart_gate.disarm()
        self.ground.reset()
        self.spawner.reset()
        self.score.reset()
        self.player.reset()
        previous = self.session.phase
        self.session.reset()
        log.info("Run started from", previous.value)

    # Drawing ----------------------------------------------------------
    def draw(self) -> None:
        r = self.renderer
        r.clear(BACKGROUND_COLOR)
        self.ground.draw(r)
        self.spawner.draw(r)
        self.player.draw(r)
        self.score.draw(r)
        self.draw_overlay()

    def draw_overlay(self) -> None:
        vp = self.viewport
        s = vp.scale_ratio
        phase = self.session.phase
        if phase is GamePhase.GAME_OVER:
            self.renderer.draw_text(
                "GAME OVER", vp.canvas_width / 4.5, vp.canvas_height / 2, GAME_OVER_FONT_SIZE * s, GAME_OVER_COLOR
            )
        elif phase is GamePhase.WAITING_TO_START:
            self.renderer.draw_text(
                "PRESS SPACE TO START", vp.canvas_width / 7.5, vp.canvas_height / 1.75, START_FONT_SIZE * s, START_COLOR
            )
        elif phase is GamePhase.CUTSCENE:
            self.renderer.draw_text(
                "CUTSCENE", vp.canvas_width / 4, vp.canvas_height / 2, CUTSCENE_FONT_SIZE * s, CUTSCENE_COLOR
            )


__all__ = ["GameLoop"]
