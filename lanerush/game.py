from __future__ import annotations

import logging
import random
import sys
import time
from typing import Callable, Optional

import pygame

from .config import CFG
from .constants import SHAKE_KICK
from .controls import resolve_input
from .enums import Phase
from .fx import ScreenShake, update_particles
from .input_queue import HeldKeys
from .models import GameState
from .music import AudioController
from .physics import update_obstacles
from .renderer import Renderer
from .spawner import spawn_obstacle
from .ui_components import Hud

logger = logging.getLogger(__name__)

RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r)


class Game:

    # ---- Core lifecycle wiring ----

    def __init__(
        self,
        screen: pygame.Surface,
        *,
        audio: Optional[AudioController] = None,
        now_fn: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.screen = screen
        self.w, self.h = self.screen.get_size()
        self.clock = pygame.time.Clock()
        self._now_fn = now_fn
        self.rng = rng or random.Random()

        self.keys = HeldKeys()
        self.state = GameState.fresh(Phase.READY)
        self.shake = ScreenShake()

        self.renderer = Renderer((self.w, self.h), rng=random.Random())
        self.hud = Hud((self.w, self.h))
        if audio is None:
            audio = AudioController(
                music_path=CFG["audio"]["music"],
                crash_path=CFG["audio"]["crash"],
                music_volume=CFG["audio"]["music_volume"],
                sfx_volume=CFG["audio"]["sfx_volume"],
            )
        self.audio = audio
        self.update_hud()

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def now(self) -> float:
        """Wall clock in milliseconds."""
        if self._now_fn is not None:
            return float(self._now_fn())
        return time.time() * 1000.0

    def start_game(self) -> None:
        # a fresh state replaces the old one wholesale between frames
        self.state = GameState.fresh(Phase.RUNNING)
        self.shake.reset()
        self.keys.clear()
        self.hud.hide_game_over()
        self.audio.play()
        self.update_hud()
        logger.info("run started")

    def end_game(self) -> None:
        self.state.phase = Phase.ENDED
        self.state.final_score = self.state.score
        self.hud.show_game_over(self.state.final_score)
        self.audio.play_crash()
        self.audio.pause()
        self.shake.kick(SHAKE_KICK)
        logger.info("game over, final score %s", self.state.final_score)

    # ---- Input ----

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                pygame.quit(); sys.exit(0)
            if event.key == pygame.K_SPACE:
                self.audio.toggle()
                return
            if event.key in RESTART_KEYS and not self.state.running:
                self.start_game()
                return
            self.keys.press(event.key)

        elif event.type == pygame.KEYUP:
            self.keys.release(event.key)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.hud.hits_restart(event.pos):
                self.start_game()

    # ---- Simulation ----

    def tick(self) -> bool:
        """Advance one frame of the run. Returns True while another tick should follow."""
        if not self.state.running:
            return False
        now = self.now()

        resolve_input(self.state, self.keys, canvas_height=self.h, rng=self.rng)
        spawn_obstacle(self.state, now, self.rng)
        result = update_obstacles(self.state, now, canvas_height=self.h, rng=self.rng)
        if result.collided:
            self.end_game()
        update_particles(self.state.particles)

        self.render(now)
        self.update_hud()
        return self.state.running

    def frame(self) -> None:
        """One step of the window loop: a full tick while running, otherwise render only."""
        if self.state.running:
            self.tick()
        else:
            self.render()

    # ---- Rendering ----

    def render(self, now: Optional[float] = None) -> None:
        now = self.now() if now is None else now
        self.renderer.draw(self.screen, self.state, now, self.shake)
        self.hud.draw(self.screen)
        self.shake.decay()

    def update_hud(self) -> None:
        self.hud.set_level(self.state.level + 1)
        self.hud.set_score(self.state.score)
        self.hud.set_speed(self.state.level_cfg.label)


__all__ = ["Game", "RESTART_KEYS"]
