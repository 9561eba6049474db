import random

from lanerush.constants import LANES
from lanerush.models import GameState
from lanerush.spawner import spawn_obstacle


def test_first_call_of_a_run_spawns():
    s = GameState.fresh()
    obs = spawn_obstacle(s, 10_000.0, random.Random(3))
    assert obs is not None
    assert s.obstacles == [obs]
    assert obs.y == -60
    assert 0 <= obs.lane < LANES
    assert s.last_spawn_ms == 10_000.0


def test_spawn_waits_for_interval():
    s = GameState.fresh()
    s.last_spawn_ms = 1000.0
    assert spawn_obstacle(s, 2800.0) is None  # exactly 1800 elapsed
    assert spawn_obstacle(s, 2801.0) is not None
    assert s.last_spawn_ms == 2801.0


def test_interval_follows_level():
    s = GameState.fresh()
    s.level = 3
    s.last_spawn_ms = 0.0
    assert spawn_obstacle(s, 701.0) is not None


def test_no_catch_up_burst():
    s = GameState.fresh()
    s.last_spawn_ms = 0.0
    spawn_obstacle(s, 1_000_000.0)
    spawn_obstacle(s, 1_000_001.0)
    assert len(s.obstacles) == 1


def test_lanes_are_all_reachable():
    rng = random.Random(0)
    lanes = set()
    s = GameState.fresh()
    for i in range(200):
        obs = spawn_obstacle(s, (i + 1) * 2000.0, rng)
        lanes.add(obs.lane)
    assert lanes == set(range(LANES))
