import math

import pytest

from tilepath.walker import Sprite, PathWalker
from tilepath.config import SPRITE_SPEED, TILE_SIZE


def test_sprite_repr():
    s = Sprite(1.25, 2.5, name="hero")
    r = repr(s)
    assert "hero" in r and "x=1.2" in r and "y=2.5" in r


def test_walker_defaults_from_config():
    w = PathWalker(Sprite(0, 0), [(0, 0)])
    assert w.speed == SPRITE_SPEED
    assert w.tile_size == TILE_SIZE


def test_walker_steps_through_tile_centers():
    s = Sprite(5, 5)
    w = PathWalker(s, [(0, 0), (1, 0), (2, 0)], tile_size=10, speed=1.0)
    # Already standing on the first waypoint
    w.update(0.0)
    assert len(w.waypoints) == 2
    assert not w.finished
    w.update(0.5)
    assert math.isclose(s.x, 10.0) and math.isclose(s.y, 5.0)
    w.update(0.5)
    assert (s.x, s.y) == (15.0, 5.0)
    assert len(w.waypoints) == 1
    assert not w.finished
    w.update(1.0)
    assert (s.x, s.y) == (25.0, 5.0)
    assert w.finished


def test_walker_large_step_snaps_to_last_waypoint():
    s = Sprite(5, 5)
    w = PathWalker(s, [(0, 0), (1, 1), (2, 2)], tile_size=10, speed=2.0)
    w.update(10.0)
    assert (s.x, s.y) == (25.0, 25.0)
    assert w.finished


def test_walker_moves_diagonally_at_speed():
    s = Sprite(5, 5)
    w = PathWalker(s, [(0, 0), (1, 1)], tile_size=10, speed=1.0)
    w.update(0.5)
    # Half a tile along the diagonal
    assert math.isclose(math.hypot(s.x - 5, s.y - 5), 5.0)
    assert math.isclose(s.x, s.y)


def test_walker_empty_path_is_finished():
    w = PathWalker(Sprite(0, 0), [])
    assert w.finished
    w.update(1.0)
    assert w.finished


def test_walker_rejects_negative_speed_and_dt():
    with pytest.raises(ValueError):
        PathWalker(Sprite(0, 0), [(0, 0)], speed=-1.0)
    w = PathWalker(Sprite(0, 0), [(0, 0)])
    with pytest.raises(ValueError):
        w.update(-0.1)
