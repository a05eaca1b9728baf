import pytest

from dinorun.player import Player, PlayerPhase

CANVAS_H = 200
RUN = ["run1", "run3", "run5"]


def make_player(scale=1.0, min_jump=150, max_jump=200):
    return Player(
        88 / 1.75 * scale,
        94 / 1.75 * scale,
        min_jump * scale,
        max_jump * scale,
        scale,
        CANVAS_H * scale,
        RUN,
        "jumping",
    )


def test_initial_standing_position():
    p = make_player()
    assert p.x == 10
    assert p.y == pytest.approx(200 - 94 / 1.75 - 1.5)
    assert p.y == p.y_standing
    assert p.phase is PlayerPhase.GROUNDED


def test_idle_running_stays_grounded():
    p = make_player()
    for _ in range(200):
        p.update(1.0, 16)
        assert p.phase is PlayerPhase.GROUNDED
        assert p.y == p.y_standing


def test_held_jump_reaches_ceiling_then_lands():
    p = make_player()
    p.jump_intent = True
    elapsed = 0
    ys = []
    while elapsed < 300:
        p.update(1.0, 16)
        elapsed += 16
        ys.append(p.y)
        assert p.phase in (PlayerPhase.ASCENDING, PlayerPhase.DESCENDING)
    # Passed the minimum jump height and hit the max-height ceiling while held
    assert min(ys) < CANVAS_H - 150
    assert min(ys) == pytest.approx(CANVAS_H - 200)

    p.jump_intent = False
    for _ in range(100):
        p.update(1.0, 16)
        if p.phase is PlayerPhase.GROUNDED:
            break
    assert p.phase is PlayerPhase.GROUNDED
    assert p.y == pytest.approx(p.y_standing)


def test_tap_reaches_min_jump_height_only():
    p = make_player()
    p.jump_intent = True
    p.update(1.0, 16)
    p.jump_intent = False
    peak = p.y
    for _ in range(100):
        p.update(1.0, 16)
        peak = min(peak, p.y)
        if p.phase is PlayerPhase.GROUNDED:
            break
    assert peak <= CANVAS_H - 150
    assert peak > CANVAS_H - 150 - 0.6 * 16 - 1e-9
    assert p.y == p.y_standing


def test_y_bounds_hold_for_arbitrary_input():
    p = make_player(scale=1.3)
    pattern = [True, True, False, True, False, False, True] * 40
    dts = [16, 7, 33, 1, 50, 16, 100]
    for i, intent in enumerate(pattern):
        p.jump_intent = intent
        p.update(1.2, dts[i % len(dts)])
        assert p.ceiling - 1e-9 <= p.y <= p.y_standing + 1e-9


def test_ascent_uses_jump_speed_and_descent_gravity():
    p = make_player()
    start = p.y
    p.jump_intent = True
    p.update(1.0, 10)
    assert p.y == pytest.approx(start - 0.6 * 10)
    p.jump_intent = False
    # Force the fall and check one gravity step
    p.falling = True
    before = p.y
    p.update(1.0, 10)
    assert p.y == pytest.approx(before + 0.4 * 10)
    assert p.phase is PlayerPhase.DESCENDING


def test_run_animation_cycles_and_speeds_up():
    p = make_player()
    assert p.image == "run1"
    p.update(1.0, 199)
    assert p.image == "run1"
    p.update(1.0, 1)
    assert p.image == "run3"
    # Double game speed halves the frame period
    p.update(2.0, 100)
    assert p.image == "run5"
    p.update(2.0, 100)
    assert p.image == "run1"


def test_jump_pose_overrides_run_cycle(renderer):
    p = make_player()
    p.jump_intent = True
    p.update(1.0, 16)
    assert p.image == "jumping"
    p.draw(renderer)
    assert renderer.calls[0][1] == "jumping"


def test_reset_lands_player():
    p = make_player()
    p.jump_intent = True
    for _ in range(5):
        p.update(1.0, 16)
    p.reset()
    assert p.y == p.y_standing
    assert p.phase is PlayerPhase.GROUNDED
    assert not p.jump_intent


def test_needs_run_images():
    with pytest.raises(ValueError):
        Player(10, 10, 150, 200, 1.0, 200, [], "jump")
