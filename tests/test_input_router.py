import pygame

from dinorun.input_router import InputRouter


def key(event_type, k):
    return pygame.event.Event(event_type, {"key": k})


def test_jump_press_and_release():
    router = InputRouter()
    assert router.process([key(pygame.KEYDOWN, pygame.K_SPACE)], "RunnerState") == ["jump"]
    assert router.process([key(pygame.KEYUP, pygame.K_UP)], "RunnerState") == ["stop_jump"]


def test_space_release_also_requests_restart():
    router = InputRouter()
    actions = router.process([key(pygame.KEYUP, pygame.K_SPACE)], "RunnerState")
    assert actions == ["stop_jump", "restart"]


def test_enter_release_restarts_without_jump():
    router = InputRouter()
    assert router.process([key(pygame.KEYUP, pygame.K_RETURN)], "RunnerState") == ["restart"]


def test_pause_actions():
    router = InputRouter()
    assert router.process([key(pygame.KEYDOWN, pygame.K_ESCAPE)], "RunnerState") == ["pause_toggle"]
    events = [key(pygame.KEYDOWN, pygame.K_ESCAPE), key(pygame.KEYDOWN, pygame.K_q)]
    assert router.process(events, "PauseState") == ["pause_close", "quit"]


def test_duplicates_collapsed_in_order():
    router = InputRouter()
    events = [key(pygame.KEYDOWN, pygame.K_SPACE), key(pygame.KEYDOWN, pygame.K_UP)]
    assert router.process(events, "RunnerState") == ["jump"]


def test_unknown_state_yields_nothing():
    router = InputRouter()
    assert router.process([key(pygame.KEYDOWN, pygame.K_SPACE)], "Nope") == []


def test_configurable_bindings():
    from dinorun.settings import settings

    original = settings.key_bindings["RunnerState"]["jump"]
    try:
        settings.key_bindings["RunnerState"]["jump"] = [pygame.K_z]
        router = InputRouter()
        assert "jump" in router.process([key(pygame.KEYDOWN, pygame.K_z)], "RunnerState")
        assert "jump" not in router.process([key(pygame.KEYDOWN, pygame.K_SPACE)], "RunnerState")
    finally:
        settings.key_bindings["RunnerState"]["jump"] = original
