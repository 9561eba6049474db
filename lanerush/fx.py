from __future__ import annotations
from typing import List, Optional, Tuple
import random as _rand

from .constants import (
    LANE_BURST_COUNT,
    LANE_BURST_LIFE,
    LANE_WIDTH,
    OBSTACLE_SIZE,
    PARTICLE_GRAVITY,
    PASS_BURST_COUNT,
    PASS_BURST_LIFE,
    PASS_PARTICLE_COLOR,
    SHAKE_DECAY,
    SHAKE_EPSILON,
    SHAKE_KICK,
)
from .enums import BurstKind
from .models import Particle

# Burst presets: (default count, lifetime in ticks, colour)
BURSTS = {
    BurstKind.LANE_CHANGE: (LANE_BURST_COUNT, LANE_BURST_LIFE, None),
    BurstKind.PASS:        (PASS_BURST_COUNT, PASS_BURST_LIFE, PASS_PARTICLE_COLOR),
}


# ---------- particles ----------

def spawn_burst(
    particles: List[Particle],
    origin: Tuple[float, float],
    count: Optional[int] = None,
    kind: BurstKind = BurstKind.LANE_CHANGE,
    rng: Optional[_rand.Random] = None,
) -> List[Particle]:
    """Append `count` particles around `origin` and return the new ones.

    Lane-change sparks spread across the lane and shoot upward; pass sparks
    spread over the obstacle width and drift more slowly.
    """
    rng = rng or _rand
    default_count, life, color = BURSTS[kind]
    n = default_count if count is None else max(0, int(count))
    ox, oy = origin
    born: List[Particle] = []
    for _ in range(n):
        if kind is BurstKind.LANE_CHANGE:
            x = ox + (rng.random() - 0.5) * LANE_WIDTH
            vx = (rng.random() - 0.5) * 4
            vy = -rng.random() * 3 - 2
        else:
            x = ox + rng.random() * OBSTACLE_SIZE
            vx = (rng.random() - 0.5) * 2
            vy = -rng.random() * 2
        born.append(Particle(x=x, y=oy, vx=vx, vy=vy, life=life, max_life=life, kind=kind, color=color))
    particles.extend(born)
    return born


def update_particles(particles: List[Particle]) -> int:
    """One integration step; returns how many particles expired."""
    removed = 0
    for i in range(len(particles) - 1, -1, -1):
        p = particles[i]
        p.x += p.vx
        p.y += p.vy
        p.life -= 1
        p.vy += PARTICLE_GRAVITY
        if p.life <= 0:
            del particles[i]
            removed += 1
    return removed


def particle_alpha(p: Particle) -> float:
    return max(0.0, min(1.0, p.life / max(1, p.max_life)))


# ---------- shake ----------

class ScreenShake:
    """Crash shake: kicked once on game over, then decays geometrically per frame."""

    def __init__(self, *, decay: float = SHAKE_DECAY, epsilon: float = SHAKE_EPSILON) -> None:
        self.decay_factor = decay
        self.epsilon = epsilon
        self.x = 0.0
        self.y = 0.0

    def kick(self, amount: float = SHAKE_KICK) -> None:
        self.x = float(amount)
        self.y = float(amount)

    def decay(self) -> None:
        self.x *= self.decay_factor
        self.y *= self.decay_factor
        if abs(self.x) < self.epsilon and abs(self.y) < self.epsilon:
            self.x = self.y = 0.0

    def reset(self) -> None:
        self.x = self.y = 0.0

    @property
    def active(self) -> bool:
        return self.x != 0.0 or self.y != 0.0

    def offset(self, factor: float = 1.0) -> Tuple[float, float]:
        return (self.x * factor, self.y * factor)


__all__ = ["BURSTS", "spawn_burst", "update_particles", "particle_alpha", "ScreenShake"]
