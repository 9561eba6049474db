import random

import pygame
import pytest

from lanerush.constants import LANES
from lanerush.controls import resolve_input
from lanerush.enums import BurstKind, Phase
from lanerush.input_queue import HeldKeys
from lanerush.models import LEVELS, GameState

DIRECTIONS = (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN)


@pytest.fixture
def state():
    return GameState.fresh()


@pytest.fixture
def keys():
    return HeldKeys()


def test_lane_change_is_edge_triggered(state, keys):
    keys.press(pygame.K_RIGHT)
    res = resolve_input(state, keys, rng=random.Random(1))
    assert res.lane_delta == 1
    assert state.current_lane == 2
    assert not keys.is_held(pygame.K_RIGHT)

    res = resolve_input(state, keys)
    assert not res.changed
    assert state.current_lane == 2


def test_lane_change_emits_burst(state, keys):
    keys.press(pygame.K_a)
    resolve_input(state, keys, rng=random.Random(1))
    assert state.current_lane == 0
    assert len(state.particles) == 10
    assert all(p.kind is BurstKind.LANE_CHANGE and p.life == 30 for p in state.particles)


def test_left_at_lane_zero_is_rejected_silently(state, keys):
    state.current_lane = 0
    keys.press(pygame.K_LEFT)
    res = resolve_input(state, keys)
    assert res.lane_delta == 0
    assert state.current_lane == 0
    assert state.particles == []


def test_right_at_last_lane_is_rejected(state, keys):
    state.current_lane = LANES - 1
    keys.press(pygame.K_RIGHT)
    resolve_input(state, keys)
    assert state.current_lane == LANES - 1


def test_level_up_and_down(state, keys):
    keys.press(pygame.K_UP)
    resolve_input(state, keys)
    assert state.level == 1 and state.speed == 4
    keys.press(pygame.K_DOWN)
    resolve_input(state, keys)
    assert state.level == 0
    keys.press(pygame.K_DOWN)
    resolve_input(state, keys)
    assert state.level == 0


def test_one_lane_and_one_level_change_per_call(state, keys):
    for k in DIRECTIONS:
        keys.press(k)
    res = resolve_input(state, keys, rng=random.Random(2))
    assert res.lane_delta == -1
    assert res.level_delta == 1
    assert keys.is_held(pygame.K_RIGHT)


def test_ignored_unless_running(state, keys):
    state.phase = Phase.ENDED
    keys.press(pygame.K_RIGHT)
    resolve_input(state, keys)
    assert state.current_lane == 1
    assert keys.is_held(pygame.K_RIGHT)


def test_lane_and_level_stay_in_bounds(state, keys):
    rng = random.Random(1234)
    for _ in range(2000):
        keys.press(rng.choice(DIRECTIONS))
        resolve_input(state, keys, rng=rng)
        if rng.random() < 0.3:
            keys.clear()
        assert 0 <= state.current_lane < LANES
        assert 0 <= state.level < len(LEVELS)
