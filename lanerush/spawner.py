from __future__ import annotations

import random
from typing import Optional

from .constants import LANES, OBSTACLE_SIZE
from .models import GameState, Obstacle


def spawn_obstacle(state: GameState, now_ms: float, rng: Optional[random.Random] = None) -> Optional[Obstacle]:
    """Drop one obstacle above the road once the level's spawn interval has passed.

    Never spawns more than one per call, however long the gap was.
    """
    if now_ms - state.last_spawn_ms <= state.level_cfg.spawn_interval_ms:
        return None
    lane = (rng or random).randrange(LANES)
    obs = Obstacle.in_lane(lane, y=-OBSTACLE_SIZE)
    state.obstacles.append(obs)
    state.last_spawn_ms = now_ms
    return obs


__all__ = ["spawn_obstacle"]
