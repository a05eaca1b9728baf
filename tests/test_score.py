import pytest

from conftest import MemoryHighScores
from dinorun.score import Score


def test_update_accrues_by_elapsed_time():
    s = Score(MemoryHighScores(), 1.0, 800)
    s.update(16)
    s.update(84)
    assert s.value == pytest.approx(1.0)
    assert s.points == 1


def test_value_is_monotonic():
    s = Score(MemoryHighScores(), 1.0, 800)
    last = s.value
    for dt in [0, 5, 16, 0, 33, 1000]:
        s.update(dt)
        assert s.value >= last
        last = s.value


def test_record_persists_floored_score_when_higher():
    store = MemoryHighScores(10)
    s = Score(store, 1.0, 800, value=12.9)
    assert s.record_if_high_score() is True
    assert store.writes == [12]
    assert s.persisted_best == 12


def test_record_never_decreases_best():
    store = MemoryHighScores(50)
    s = Score(store, 1.0, 800, value=49.99)
    assert s.record_if_high_score() is False
    assert store.writes == []
    assert s.persisted_best == 50


def test_equal_floor_is_not_a_new_best():
    store = MemoryHighScores(7)
    s = Score(store, 1.0, 800, value=7.8)
    assert s.record_if_high_score() is False
    assert store.value == 7


def test_reset():
    s = Score(MemoryHighScores(), 1.0, 800, value=3.2)
    s.reset()
    assert s.value == 0


def test_draw_shows_score_and_best(renderer):
    s = Score(MemoryHighScores(42), 1.0, 800, value=17.6)
    s.draw(renderer)
    assert renderer.texts() == ["17", "HS 42"]
