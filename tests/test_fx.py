import random

import pygame

from lanerush.controls import resolve_input
from lanerush.enums import BurstKind
from lanerush.fx import ScreenShake, particle_alpha, spawn_burst, update_particles
from lanerush.input_queue import HeldKeys
from lanerush.models import GameState, Particle


def test_spawn_burst_counts_and_lifetimes():
    ps = []
    born = spawn_burst(ps, (100, 200), 4, BurstKind.LANE_CHANGE, random.Random(1))
    assert len(ps) == 4 and born == ps
    assert all(p.max_life == 30 and p.y == 200 and p.vy < 0 for p in ps)
    assert all(60 <= p.x <= 140 for p in ps)

    spawn_burst(ps, (100, 200), kind=BurstKind.PASS, rng=random.Random(1))
    passes = [p for p in ps if p.kind is BurstKind.PASS]
    assert len(passes) == 5
    assert all(p.max_life == 20 and p.color is not None for p in passes)
    assert all(100 <= p.x <= 160 for p in passes)


def test_particle_integrates_velocity_and_gravity():
    p = Particle(x=10, y=10, vx=1, vy=-2, life=3, max_life=3)
    ps = [p]
    update_particles(ps)
    assert (p.x, p.y) == (11, 8)
    assert abs(p.vy - (-1.9)) < 1e-9
    assert p.life == 2
    assert particle_alpha(p) == 2 / 3


def test_particles_expire_within_max_life():
    ps = []
    spawn_burst(ps, (0, 0), kind=BurstKind.LANE_CHANGE, rng=random.Random(4))
    for _ in range(29):
        update_particles(ps)
    assert len(ps) == 10
    assert update_particles(ps) == 10
    assert ps == []


def test_particle_count_bounded_under_constant_lane_changes():
    s = GameState.fresh()
    keys = HeldKeys()
    rng = random.Random(9)
    peak = 0
    for i in range(300):
        keys.press(pygame.K_LEFT if i % 2 else pygame.K_RIGHT)
        resolve_input(s, keys, rng=rng)
        update_particles(s.particles)
        peak = max(peak, len(s.particles))
    assert peak <= 10 * 30
    for _ in range(30):
        update_particles(s.particles)
    assert s.particles == []


def test_shake_decays_to_zero():
    sh = ScreenShake()
    assert not sh.active
    sh.kick(10)
    assert sh.offset(0.1) == (1.0, 1.0)
    sh.decay()
    assert abs(sh.x - 9.0) < 1e-9
    for _ in range(200):
        sh.decay()
    assert (sh.x, sh.y) == (0.0, 0.0)
    assert not sh.active


def test_shake_reset():
    sh = ScreenShake()
    sh.kick()
    sh.reset()
    assert sh.offset() == (0.0, 0.0)
