import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from core import Dimensions, GameState, GamePhase


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def dims():
    return Dimensions(700, 400)


@pytest.fixture
def playing(dims, rng):
    state = GameState.new(dims, rng)
    state.phase = GamePhase.PLAYING
    return state
