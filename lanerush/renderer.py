from __future__ import annotations

import math
import random
from typing import Optional

import pygame

from .constants import *  # noqa: F401,F403
from .fx import ScreenShake, particle_alpha
from .models import GameState, Obstacle, player_rect


class Renderer:
    """Draws one frame of the world from a GameState it never mutates."""

    def __init__(self, size: tuple[int, int], *, rng: Optional[random.Random] = None) -> None:
        self.w, self.h = size
        self.rng = rng or random.Random()
        self.road_rect = pygame.Rect(ROAD_LEFT, 0, LANE_WIDTH * LANES, self.h)
        self._obstacle_sprite = self._build_obstacle_sprite()
        self._particle_sprites: dict[tuple, pygame.Surface] = {}

    # ---- cached sprites ----

    def _build_obstacle_sprite(self) -> pygame.Surface:
        s = OBSTACLE_SIZE
        surf = pygame.Surface((s, s), pygame.SRCALPHA)
        c = s // 2
        pygame.draw.circle(surf, (*OBSTACLE_COLOR, 70), (c, c), c)
        pygame.draw.circle(surf, (*OBSTACLE_COLOR, 240), (c, int(s * 0.42)), int(s * 0.32))
        jaw = pygame.Rect(0, 0, int(s * 0.40), int(s * 0.22))
        jaw.midtop = (c, int(s * 0.62))
        pygame.draw.rect(surf, (*OBSTACLE_COLOR, 240), jaw, border_radius=4)
        for ex in (int(s * 0.36), int(s * 0.64)):
            pygame.draw.circle(surf, (0, 0, 0, 255), (ex, int(s * 0.40)), int(s * 0.09))
        for tx in range(jaw.left + 5, jaw.right - 2, 6):
            pygame.draw.line(surf, (0, 0, 0, 255), (tx, jaw.top + 2), (tx, jaw.bottom - 2), 2)
        return surf

    def _particle_sprite(self, color: tuple[int, int, int]) -> pygame.Surface:
        spr = self._particle_sprites.get(color)
        if spr is None:
            d = PARTICLE_RADIUS * 2 + 1
            spr = pygame.Surface((d, d), pygame.SRCALPHA)
            pygame.draw.circle(spr, color, (PARTICLE_RADIUS, PARTICLE_RADIUS), PARTICLE_RADIUS)
            self._particle_sprites[color] = spr
        return spr

    # ---- layers ----

    def draw_side_chrome(self, surface: pygame.Surface, now_ms: float, shake: ScreenShake) -> None:
        dx, dy = shake.offset(SHAKE_ROAD_FACTOR)
        layer = pygame.Surface((self.w, self.h), pygame.SRCALPHA)
        layer.fill(SIDE_PANEL_COLOR, pygame.Rect(0, 0, ROAD_LEFT, self.h))
        layer.fill(SIDE_PANEL_COLOR, pygame.Rect(self.road_rect.right, 0, self.w - self.road_rect.right, self.h))
        # flickering blood blobs along the left margin
        for i in range(5):
            cx = 20 + self.rng.random() * 20
            cy = 100 + i * 120 + math.sin(now_ms * 0.005 + i) * 10
            r = 30 + self.rng.random() * 20
            pygame.draw.circle(layer, SIDE_BLOB_COLOR, (int(cx), int(cy)), int(r))
        surface.blit(layer, (dx, dy))

    def draw_road(self, surface: pygame.Surface, now_ms: float, shake: ScreenShake) -> None:
        dx, dy = shake.offset(SHAKE_ROAD_FACTOR)
        road = self.road_rect.move(int(dx), int(dy))
        pygame.draw.rect(surface, ROAD_COLOR, road)

        for i in range(1, LANES):
            x = int(road.left + i * LANE_WIDTH)
            pygame.draw.line(surface, LANE_LINE_COLOR, (x, road.top), (x, road.bottom), 4)

        period = LANE_DASH * 2
        shift = (now_ms * 0.01 * 5) % period
        for i in range(1, LANES):
            x = int(road.left + i * LANE_WIDTH)
            y = road.top - period + shift
            while y < road.bottom:
                pygame.draw.line(surface, LANE_DASH_COLOR, (x, int(y)), (x, int(y + LANE_DASH)), 5)
                y += period

    def draw_particles(self, surface: pygame.Surface, state: GameState) -> None:
        for p in state.particles:
            spr = self._particle_sprite(p.color or PARTICLE_COLOR)
            spr.set_alpha(int(255 * particle_alpha(p)))
            surface.blit(spr, (int(p.x) - PARTICLE_RADIUS, int(p.y) - PARTICLE_RADIUS))

    def draw_obstacle(self, surface: pygame.Surface, obs: Obstacle) -> None:
        img = pygame.transform.rotozoom(self._obstacle_sprite, -math.degrees(obs.rotation), max(0.01, obs.scale))
        center = (obs.x + OBSTACLE_SIZE / 2, obs.y + OBSTACLE_SIZE / 2)
        surface.blit(img, img.get_rect(center=(int(center[0]), int(center[1]))))

    def draw_obstacles(self, surface: pygame.Surface, state: GameState) -> None:
        for obs in state.obstacles:
            self.draw_obstacle(surface, obs)

    def draw_player(self, surface: pygame.Surface, state: GameState, now_ms: float, shake: ScreenShake) -> None:
        x, y, w, h = player_rect(state.current_lane, self.h)
        dx, dy = shake.offset(SHAKE_CAR_FACTOR)
        body = pygame.Rect(int(x + dx), int(y + dy), int(w), int(h))
        pygame.draw.rect(surface, CAR_BODY_COLOR, body)

        stripe = pygame.Color(0, 0, 0)
        lightness = 40 + math.sin(now_ms * 0.01) * 10
        stripe.hsla = (0, 100, lightness, 100)
        pygame.draw.rect(surface, stripe, (body.x + 5, body.y + 10, body.w - 10, 20))
        pygame.draw.rect(surface, stripe, (body.x + 5, body.bottom - 30, body.w - 10, 20))

        intensity = 0.8 + math.sin(now_ms * 0.02) * 0.2
        lamp = pygame.Surface((12, 15), pygame.SRCALPHA)
        lamp.fill((*HEADLIGHT_COLOR, int(255 * max(0.0, min(1.0, intensity)))))
        surface.blit(lamp, (body.x + 8, body.y - 15))
        surface.blit(lamp, (body.right - 20, body.y - 15))

    def draw(self, surface: pygame.Surface, state: GameState, now_ms: float, shake: ScreenShake) -> None:
        surface.fill(BG)
        self.draw_side_chrome(surface, now_ms, shake)
        self.draw_road(surface, now_ms, shake)
        self.draw_particles(surface, state)
        self.draw_obstacles(surface, state)
        self.draw_player(surface, state, now_ms, shake)


__all__ = ["Renderer"]
