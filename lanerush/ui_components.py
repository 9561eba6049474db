from __future__ import annotations

from typing import Optional

import pygame

from .constants import (
    GAME_OVER_TITLE,
    HUD_FONT_SIZE,
    INK,
    PANEL_BG,
    PANEL_BORDER,
    PANEL_FONT_SIZE,
    PANEL_TITLE_FONT_SIZE,
    RESTART_LABEL,
)


class Hud:
    """Level / score / speed readouts and the game-over panel.

    Setters only store text; `draw` renders whatever was set last.
    """

    def __init__(self, size: tuple[int, int]) -> None:
        self.w, self.h = size
        self.level_text = "1"
        self.score_text = "0"
        self.speed_text = ""
        self.game_over_visible = False
        self.final_score_text = "0"
        self.restart_rect = pygame.Rect(0, 0, 160, 44)
        self.restart_rect.center = (self.w // 2, int(self.h * 0.58))
        self._font_cache: dict[int, pygame.font.Font] = {}

    # ---- setters ----

    def set_level(self, text: str) -> None:
        self.level_text = str(text)

    def set_score(self, value: int) -> None:
        self.score_text = str(value)

    def set_speed(self, text: str) -> None:
        self.speed_text = str(text)

    def show_game_over(self, final_score: int) -> None:
        self.final_score_text = str(final_score)
        self.game_over_visible = True

    def hide_game_over(self) -> None:
        self.game_over_visible = False

    def hits_restart(self, pos: tuple[int, int]) -> bool:
        return self.game_over_visible and self.restart_rect.collidepoint(pos)

    # ---- drawing ----

    def _font(self, px: int) -> pygame.font.Font:
        f = self._font_cache.get(px)
        if f is None:
            f = pygame.font.Font(None, px)
            self._font_cache[px] = f
        return f

    def _blit_text(self, surface: pygame.Surface, text: str, px: int, *, center=None, topleft=None, color=INK) -> pygame.Rect:
        img = self._font(px).render(text, True, color)
        rect = img.get_rect()
        if center is not None:
            rect.center = center
        elif topleft is not None:
            rect.topleft = topleft
        surface.blit(img, rect)
        return rect

    def draw(self, surface: pygame.Surface) -> None:
        pad = 8
        self._blit_text(surface, f"LEVEL {self.level_text}", HUD_FONT_SIZE, topleft=(pad, pad))
        score_img = self._font(HUD_FONT_SIZE).render(f"SCORE {self.score_text}", True, INK)
        surface.blit(score_img, score_img.get_rect(midtop=(self.w // 2, pad)))
        speed_img = self._font(HUD_FONT_SIZE).render(self.speed_text.upper(), True, INK)
        surface.blit(speed_img, speed_img.get_rect(topright=(self.w - pad, pad)))
        if self.game_over_visible:
            self._draw_game_over(surface)

    def _draw_game_over(self, surface: pygame.Surface) -> None:
        panel = pygame.Rect(0, 0, int(self.w * 0.8), int(self.h * 0.36))
        panel.center = (self.w // 2, self.h // 2)
        bg = pygame.Surface(panel.size, pygame.SRCALPHA)
        pygame.draw.rect(bg, PANEL_BG, bg.get_rect(), border_radius=12)
        pygame.draw.rect(bg, PANEL_BORDER, bg.get_rect(), width=2, border_radius=12)
        surface.blit(bg, panel.topleft)

        self._blit_text(surface, GAME_OVER_TITLE, PANEL_TITLE_FONT_SIZE,
                        center=(panel.centerx, panel.top + int(panel.height * 0.22)), color=PANEL_BORDER)
        self._blit_text(surface, f"Final score: {self.final_score_text}", PANEL_FONT_SIZE,
                        center=(panel.centerx, panel.top + int(panel.height * 0.48)))

        pygame.draw.rect(surface, PANEL_BORDER, self.restart_rect, width=2, border_radius=8)
        self._blit_text(surface, RESTART_LABEL, PANEL_FONT_SIZE, center=self.restart_rect.center)


__all__ = ["Hud"]
