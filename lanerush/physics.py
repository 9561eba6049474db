from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    CANVAS_HEIGHT,
    OBSTACLE_PULSE_AMP,
    OBSTACLE_PULSE_BASE,
    OBSTACLE_PULSE_FREQ,
    OBSTACLE_ROT_STEP,
    PASS_REWARD,
)
from .enums import BurstKind
from .fx import spawn_burst
from .models import GameState, player_rect

Rect = Tuple[float, float, float, float]


def overlaps(a: Rect, b: Rect) -> bool:
    """Strict AABB test: boxes sharing only an edge do not overlap."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def pulse_scale(now_ms: float, index: int) -> float:
    return OBSTACLE_PULSE_BASE + math.sin(now_ms * OBSTACLE_PULSE_FREQ + index) * OBSTACLE_PULSE_AMP


@dataclass
class UpdateResult:
    passed: int = 0
    collided: bool = False


def update_obstacles(
    state: GameState,
    now_ms: float,
    *,
    canvas_height: float = CANVAS_HEIGHT,
    rng: Optional[random.Random] = None,
) -> UpdateResult:
    """Advance every obstacle one tick, score the ones that left the road and test the player hitbox.

    Walks the list backwards so removing an entry never shifts one that is
    still to be visited. The bottom-exit check runs before the collision
    test. On a hit the walk stops and the caller is expected to end the run.
    """
    out = UpdateResult()
    car = player_rect(state.current_lane, canvas_height)
    speed = state.speed

    for i in range(len(state.obstacles) - 1, -1, -1):
        obs = state.obstacles[i]
        obs.y += speed
        obs.rotation += OBSTACLE_ROT_STEP
        obs.scale = pulse_scale(now_ms, i)

        if obs.y > canvas_height:
            del state.obstacles[i]
            state.score += PASS_REWARD
            out.passed += 1
            spawn_burst(state.particles, (obs.x, obs.y), kind=BurstKind.PASS, rng=rng)
            continue

        if overlaps(obs.rect(), car):
            out.collided = True
            break

    return out


__all__ = ["overlaps", "pulse_scale", "update_obstacles", "UpdateResult"]
