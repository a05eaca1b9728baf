"""Application entry harness.

Opens a resizable window, polls events once per frame, routes them to
actions for the active state and drives the StateManager. ESC pushes a
PauseState on top of the running game; closing the window exits.
"""

from __future__ import annotations

import pygame

from dinorun.constants import GAME_HEIGHT, GAME_WIDTH
from dinorun.input_router import InputRouter
from dinorun.logger import get_logger
from dinorun.rng_service import RNGService
from dinorun.settings import settings
from dinorun.state_manager import PauseState, RunnerState, StateManager

log = get_logger("app")


def _open_window() -> pygame.Surface:
    if settings.fullscreen:
        return pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    return pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT), pygame.RESIZABLE)


def main():
    pygame.init()
    pygame.display.set_caption("Dino Run")
    screen = _open_window()
    clock = pygame.time.Clock()

    RNGService.initialize(settings.rng_seed)

    sm = StateManager()
    router = InputRouter()
    runner = RunnerState(screen.get_size(), cutscene_enabled=settings.cutscene_enabled)
    sm.set(runner)
    log.info("Started", screen.get_size(), "fps", settings.target_fps)

    running = True
    while running:
        # Single central event poll
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.VIDEORESIZE:
                screen = pygame.display.get_surface() or screen
                runner.resize(*screen.get_size())

        current_name = sm.current.name if sm.current else ""
        sm.handle_actions(router.process(events, current_name))

        cur = sm.current
        if isinstance(cur, RunnerState) and cur.request_pause:
            cur.request_pause = False
            sm.push(PauseState())
        elif isinstance(cur, PauseState) and cur.closed:
            sm.pop()
            if cur.quit_requested:
                running = False

        dt = clock.tick(settings.target_fps) / 1000.0  # dt in seconds
        sm.update(dt)
        sm.render(screen)
        pygame.display.flip()

    settings.flush()
    pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
