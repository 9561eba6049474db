from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

import pygame

from .constants import CANVAS_HEIGHT, LANE_WIDTH, LANES, ROAD_LEFT
from .enums import BurstKind
from .fx import spawn_burst
from .input_queue import HeldKeys
from .models import LEVELS, GameState

logger = logging.getLogger(__name__)

KEYS_LEFT = (pygame.K_LEFT, pygame.K_a)
KEYS_RIGHT = (pygame.K_RIGHT, pygame.K_d)
KEYS_UP = (pygame.K_UP, pygame.K_w)
KEYS_DOWN = (pygame.K_DOWN, pygame.K_s)

LANE_BURST_Y_OFFSET = 50


@dataclass
class InputResult:
    lane_delta: int = 0
    level_delta: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.lane_delta or self.level_delta)


def lane_burst_origin(lane: int, canvas_height: float) -> tuple[float, float]:
    return (ROAD_LEFT + lane * LANE_WIDTH + LANE_WIDTH / 2, canvas_height - LANE_BURST_Y_OFFSET)


def resolve_input(
    state: GameState,
    keys: HeldKeys,
    *,
    canvas_height: float = CANVAS_HEIGHT,
    rng: Optional[random.Random] = None,
) -> InputResult:
    """Turn held keys into at most one lane and one level step.

    Honoured keys are consumed so that holding them does not repeat the
    action; rejected ones stay held and do nothing.
    """
    out = InputResult()
    if not state.running:
        return out

    if keys.any_held(KEYS_LEFT) and state.current_lane > 0:
        out.lane_delta = -1
        keys.consume(KEYS_LEFT)
    elif keys.any_held(KEYS_RIGHT) and state.current_lane < LANES - 1:
        out.lane_delta = 1
        keys.consume(KEYS_RIGHT)

    if out.lane_delta:
        state.current_lane += out.lane_delta
        spawn_burst(
            state.particles,
            lane_burst_origin(state.current_lane, canvas_height),
            kind=BurstKind.LANE_CHANGE,
            rng=rng,
        )

    if keys.any_held(KEYS_UP) and state.level < len(LEVELS) - 1:
        out.level_delta = 1
        keys.consume(KEYS_UP)
    elif keys.any_held(KEYS_DOWN) and state.level > 0:
        out.level_delta = -1
        keys.consume(KEYS_DOWN)

    if out.level_delta:
        state.level += out.level_delta
        logger.debug("level -> %s (%s)", state.level + 1, state.level_cfg.label)

    return out


__all__ = ["InputResult", "resolve_input", "lane_burst_origin", "KEYS_LEFT", "KEYS_RIGHT", "KEYS_UP", "KEYS_DOWN"]
