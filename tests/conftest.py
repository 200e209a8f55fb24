import os

# Headless SDL so the suite runs without a display or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pong.config import GameConfig
from pong.game_engine import GameEngine


@pytest.fixture
def config():
    return GameConfig(800, 400)


@pytest.fixture
def engine(config):
    return GameEngine(config)


@pytest.fixture
def headless_pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def place_ball(engine):
    def place(x, y, vx=0.0, vy=0.0):
        ball = engine.ball
        ball.x, ball.y, ball.vx, ball.vy = float(x), float(y), float(vx), float(vy)
        return ball
    return place
