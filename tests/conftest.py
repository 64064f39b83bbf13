import os

# pygame must come up headless in CI
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gridsnake.config import Config
from gridsnake.session import GameSession
from gridsnake.storage import MemoryScoreStore


class ScriptedSpawner:
    """Hands out food cells from a list, then parks food in the bottom-left corner."""

    def __init__(self, cells=None, grid_count=30):
        self.cells = list(cells or [])
        self.fallback = (0, grid_count - 1)
        self.calls = []

    def spawn(self, snake):
        self.calls.append(tuple(snake))
        if self.cells:
            return self.cells.pop(0)
        return self.fallback


@pytest.fixture
def cfg():
    return Config(seed=1234, high_score_path=None)


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def spawner():
    return ScriptedSpawner()


@pytest.fixture
def session(cfg, store, spawner):
    return GameSession(cfg, store=store, spawner=spawner)


@pytest.fixture
def running(session):
    session.start()
    return session
