from __future__ import annotations

import logging
import os
from typing import Optional

import pygame

logger = logging.getLogger(__name__)


class AudioController:
    """Background music plus a crash sound.

    Every mixer call may fail (no audio device, blocked playback, missing
    file); such failures are dropped and the game carries on silently.
    """

    def __init__(
        self,
        *,
        music_path: Optional[str] = None,
        crash_path: Optional[str] = None,
        music_volume: float = 0.5,
        sfx_volume: float = 0.8,
    ) -> None:
        self.music_path = music_path
        self.music_volume = max(0.0, min(1.0, float(music_volume)))
        self.sfx_volume = max(0.0, min(1.0, float(sfx_volume)))
        self.music_ok = False
        self.paused = True
        self._started = False
        self.crash: Optional[pygame.mixer.Sound] = None
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            logger.debug("mixer unavailable: %s", exc)
            return
        self._load_music()
        self._load_crash(crash_path)

    def _load_music(self) -> None:
        if not self.music_path or not os.path.exists(self.music_path):
            return
        try:
            pygame.mixer.music.load(self.music_path)
            pygame.mixer.music.set_volume(self.music_volume)
            self.music_ok = True
        except pygame.error as exc:
            logger.debug("music load failed: %s", exc)
            self.music_ok = False

    def _load_crash(self, path: Optional[str]) -> None:
        if not path or not os.path.exists(path):
            return
        try:
            self.crash = pygame.mixer.Sound(path)
            self.crash.set_volume(self.sfx_volume)
        except pygame.error as exc:
            logger.debug("crash sound load failed: %s", exc)
            self.crash = None

    def play(self) -> None:
        self.paused = False
        if not self.music_ok:
            return
        try:
            if self._started:
                pygame.mixer.music.unpause()
            else:
                pygame.mixer.music.play(-1)
                self._started = True
        except pygame.error as exc:
            logger.debug("music playback blocked: %s", exc)

    def pause(self) -> None:
        self.paused = True
        if not self.music_ok:
            return
        try:
            pygame.mixer.music.pause()
        except pygame.error as exc:
            logger.debug("music pause failed: %s", exc)

    def toggle(self) -> None:
        if self.paused:
            self.play()
        else:
            self.pause()

    def play_crash(self) -> None:
        if self.crash is None:
            return
        try:
            self.crash.play()
        except pygame.error as exc:
            logger.debug("crash sound failed: %s", exc)


__all__ = ["AudioController"]
