import os
import random
import sys
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pygame
import pytest


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def keydown():
    def make(key):
        return pygame.event.Event(pygame.KEYDOWN, key=key)
    return make


@pytest.fixture
def keyup():
    def make(key):
        return pygame.event.Event(pygame.KEYUP, key=key)
    return make
