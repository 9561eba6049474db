import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from lanerush.game import Game


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


class FakeClock:
    def __init__(self, t: float = 0.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t


class FakeAudio:
    def __init__(self) -> None:
        self.calls = []

    def play(self):
        self.calls.append("play")

    def pause(self):
        self.calls.append("pause")

    def toggle(self):
        self.calls.append("toggle")

    def play_crash(self):
        self.calls.append("crash")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def audio():
    return FakeAudio()


@pytest.fixture
def game(clock, audio):
    screen = pygame.Surface((400, 600))
    return Game(screen, audio=audio, now_fn=clock, rng=random.Random(7))
