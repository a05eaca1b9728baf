"""Application states.

A minimal stack based state manager drives the top-level screens. The
running game lives in ``RunnerState``; pressing ESC pushes a ``PauseState``
overlay on top of it without discarding it.

Usage (see ``app.py`` for the runnable harness):

    sm = StateManager()
    sm.set(RunnerState(screen.get_size()))
    while running:
        actions = router.process(pygame.event.get(), sm.current.name)
        sm.handle_actions(actions)
        sm.update(dt)
        sm.render(screen)

Design Notes:
- Only the top state receives loop callbacks. While paused the runner is
  not updated at all, so its simulation clock stands still and resuming
  does not produce a large frame delta.
- Transition helpers ``push``, ``pop`` and ``set`` invoke lifecycle hooks.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import pygame

from dinorun.constants import CUTSCENE_INIT_SCORE, LETTERBOX_COLOR
from dinorun.game_loop import GameLoop
from dinorun.high_score import JsonHighScoreStore
from dinorun.logger import get_logger
from dinorun.renderer import PygameRenderer
from dinorun.services import HighScorePort

_state_log = get_logger("state")


class State:
    """Base class for an application state.

    All hooks are optional no-ops.
    """

    name: str = "State"
    manager: "StateManager | None" = None

    # Lifecycle -----------------------------------------------------
    def on_enter(self, previous: "State | None") -> None:  # pragma: no cover - default no-op
        pass

    def on_exit(self, next_state: "State | None") -> None:  # pragma: no cover - default no-op
        pass

    # Main loop hooks -----------------------------------------------
    def handle_actions(self, actions: Sequence[str]) -> None:  # pragma: no cover
        pass

    def update(self, dt: float) -> None:  # pragma: no cover - default no-op
        pass

    def render(self, surface: pygame.Surface) -> None:  # pragma: no cover - default no-op
        pass


class StateManager:
    """Stack-based state manager with push/pop/set semantics."""

    def __init__(self) -> None:
        self._stack: List[State] = []
        _state_log.debug("StateManager init (empty stack)")

    @property
    def current(self) -> State | None:
        return self._stack[-1] if self._stack else None

    def stack_size(self) -> int:
        return len(self._stack)

    # Transitions ---------------------------------------------------
    def push(self, state: State) -> None:
        state.manager = self
        prev = self.current
        self._stack.append(state)
        state.on_enter(prev)
        _state_log.debug("push", state.name, "-> stack:", [s.name for s in self._stack])

    def pop(self) -> State | None:
        if not self._stack:
            return None
        top = self._stack.pop()
        next_state = self.current
        top.on_exit(next_state)
        _state_log.debug("pop", top.name, "-> stack:", [s.name for s in self._stack])
        return top

    def set(self, state: State) -> None:
        state.manager = self
        while self._stack:
            popped = self._stack.pop()
            popped.on_exit(None if not self._stack else state)
            _state_log.debug("discard", popped.name)
        self._stack.append(state)
        state.on_enter(None)
        _state_log.debug("set", state.name, "(root)")

    # Loop dispatch -------------------------------------------------
    def handle_actions(self, actions: Sequence[str]) -> None:
        if self.current:
            if actions:
                _state_log.debug("actions ->", self.current.name, actions)
            self.current.handle_actions(actions)

    def update(self, dt: float) -> None:
        if self.current:
            self.current.update(dt)

    def render(self, surface: pygame.Surface) -> None:
        if self.current:
            self.current.render(surface)


class RunnerState(State):
    """Hosts the game loop and letterboxes its canvas onto the window."""

    name = "RunnerState"

    def __init__(
        self,
        screen_size: Tuple[int, int],
        high_scores: HighScorePort | None = None,
        cutscene_enabled: bool = True,
        **loop_kwargs,
    ) -> None:
        from dinorun.settings import settings

        if high_scores is None:
            high_scores = JsonHighScoreStore(settings.high_score_file)
        self.canvas = pygame.Surface((1, 1))
        self.renderer = PygameRenderer(self.canvas)
        loop_kwargs.setdefault("cutscene_score", CUTSCENE_INIT_SCORE if cutscene_enabled else None)
        self.loop = GameLoop(self.renderer, high_scores, screen_size, **loop_kwargs)
        self._sync_canvas()
        self.screen_size = tuple(screen_size)
        self.clock_ms = 0.0
        self.request_pause = False

    def _sync_canvas(self) -> None:
        size = self.loop.viewport.canvas_size
        if self.canvas.get_size() != size:
            self.canvas = pygame.Surface((max(1, size[0]), max(1, size[1])))
            self.renderer.resize(self.canvas)

    def resize(self, screen_w: int, screen_h: int) -> None:
        self.screen_size = (screen_w, screen_h)
        self.loop.resize(screen_w, screen_h)
        self._sync_canvas()

    def handle_actions(self, actions: Sequence[str]) -> None:
        self.request_pause = False
        for act in actions:
            if act == "jump":
                self.loop.set_jump_intent(True)
            elif act == "stop_jump":
                self.loop.set_jump_intent(False)
            elif act == "restart":
                self.loop.request_restart()
            elif act == "pause_toggle":
                # Releases during the pause go to PauseState; drop the held jump now.
                self.loop.set_jump_intent(False)
                self.request_pause = True

    def update(self, dt: float) -> None:
        """Advance the simulation clock (dt in seconds) and tick the loop in ms."""
        self.clock_ms += dt * 1000.0
        self.loop.tick(self.clock_ms)

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(LETTERBOX_COLOR)
        surface.blit(self.canvas, self.loop.viewport.offset_in(*surface.get_size()))


class PauseState(State):
    """Overlay that freezes the runner until ESC is pressed again."""

    name = "PauseState"

    def __init__(self) -> None:
        self.closed = False
        self.quit_requested = False
        self._underlying: State | None = None
        self._renderer: PygameRenderer | None = None

    def on_enter(self, previous: "State | None") -> None:
        self._underlying = previous
        _state_log.info("Paused")

    def on_exit(self, next_state: "State | None") -> None:
        _state_log.info("Resumed")

    def handle_actions(self, actions: Sequence[str]) -> None:
        for act in actions:
            if act == "pause_close":
                self.closed = True
            elif act == "quit":
                self.quit_requested = True
                self.closed = True

    def render(self, surface: pygame.Surface) -> None:
        # Underlying frame is shown frozen; its loop is not ticked here.
        if self._underlying is not None:
            self._underlying.render(surface)
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        surface.blit(overlay, (0, 0))

        if self._renderer is None:
            self._renderer = PygameRenderer(surface)
        renderer = self._renderer
        renderer.surface = surface
        w, h = surface.get_size()
        size = max(12, h // 5)
        font = renderer.font(size)
        text_w = font.size("PAUSED")[0]
        renderer.draw_text("PAUSED", (w - text_w) / 2, h / 2, size, (255, 255, 255))


__all__ = ["State", "StateManager", "RunnerState", "PauseState"]
