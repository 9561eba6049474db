from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import (
    CAR_BOTTOM_MARGIN,
    CAR_HEIGHT,
    CAR_WIDTH,
    LANE_WIDTH,
    LANES,
    OBSTACLE_SIZE,
    ROAD_LEFT,
    START_LANE,
)
from .enums import BurstKind, Phase


@dataclass(frozen=True)
class Level:
    speed: float
    spawn_interval_ms: int
    label: str


LEVELS: Tuple[Level, ...] = (
    Level(2, 1800, "Slow"),
    Level(4, 1400, "Medium"),
    Level(6, 1000, "Fast"),
    Level(8, 700, "Insane"),
)


def lane_x(lane: int, width: float) -> float:
    """Left edge of a `width`-wide box centred in `lane`."""
    return ROAD_LEFT + lane * LANE_WIDTH + (LANE_WIDTH - width) / 2


@dataclass
class Obstacle:
    lane: int
    x: float
    y: float
    rotation: float = 0.0
    scale: float = 1.0

    @classmethod
    def in_lane(cls, lane: int, y: float = -OBSTACLE_SIZE) -> "Obstacle":
        return cls(lane=lane, x=lane_x(lane, OBSTACLE_SIZE), y=float(y))

    def rect(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, OBSTACLE_SIZE, OBSTACLE_SIZE)


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: int
    max_life: int
    kind: BurstKind = BurstKind.LANE_CHANGE
    color: Optional[Tuple[int, int, int]] = None


def player_rect(lane: int, canvas_height: float) -> Tuple[float, float, float, float]:
    return (
        lane_x(lane, CAR_WIDTH),
        canvas_height - CAR_HEIGHT - CAR_BOTTOM_MARGIN,
        CAR_WIDTH,
        CAR_HEIGHT,
    )


@dataclass
class GameState:
    score: int = 0
    level: int = 0
    current_lane: int = START_LANE
    phase: Phase = Phase.READY
    obstacles: List[Obstacle] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    last_spawn_ms: float = 0.0
    final_score: int = 0

    @classmethod
    def fresh(cls, phase: Phase = Phase.RUNNING) -> "GameState":
        return cls(phase=phase)

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def level_cfg(self) -> Level:
        return LEVELS[self.level]

    @property
    def speed(self) -> float:
        return LEVELS[self.level].speed


__all__ = [
    "Level", "LEVELS", "Obstacle", "Particle", "GameState",
    "lane_x", "player_rect", "LANES",
]
