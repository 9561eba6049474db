from __future__ import annotations

import logging
import sys

import pygame

from .config import CFG
from .constants import CANVAS_SIZE, FPS, WINDOW_TITLE
from .game import Game


# ============================== MAIN LOOP ============================== #
def main():
    logging.basicConfig(
        level=getattr(logging, CFG["logging"]["level"], logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()
    pygame.key.set_repeat()
    flags = pygame.FULLSCREEN | pygame.SCALED if CFG["display"]["fullscreen"] else 0
    screen = pygame.display.set_mode(CANVAS_SIZE, flags)
    pygame.display.set_caption(WINDOW_TITLE)
    game = Game(screen)
    game.start_game()

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            game.handle_event(event)
        game.frame()
        pygame.display.flip()
        game.clock.tick(FPS)


def run():
    try:
        main()
    except KeyboardInterrupt:
        pygame.quit(); sys.exit(0)


if __name__ == "__main__":
    run()
