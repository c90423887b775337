"""Shared fixtures for Brick Breaker tests."""

import os

# Headless pygame for anything that touches the mixer or fonts
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
os.environ.setdefault('BRICKBREAKER_AUDIO_ENABLED', 'false')

import pytest

from brickbreaker.events import EventLog
from brickbreaker.game.brick_field import BrickField
from brickbreaker.game.entities import Ball, BallConfig, Brick, BrickType
from brickbreaker.game.playfield import Playfield, Scoreboard
from brickbreaker.game.powerups import PowerupSystem
from brickbreaker.game.physics.simulation import Physics
from brickbreaker.logging import disable_logging
from brickbreaker.session import GameSession
from brickbreaker.storage import LeaderboardStore, MemoryStore, StatsStore


class FixedRandom:
    """Deterministic stand-in for random.Random.

    Args:
        uniform: Value returned by uniform() (launch vx)
        roll: Value returned by random() (drop rolls; 1.0 never drops)
        choice_index: Index picked by choice()
    """

    def __init__(self, uniform: float = 0.0, roll: float = 1.0, choice_index: int = 0):
        self.uniform_value = uniform
        self.roll = roll
        self.choice_index = choice_index

    def uniform(self, a: float, b: float) -> float:
        return self.uniform_value

    def random(self) -> float:
        return self.roll

    def choice(self, seq):
        return seq[self.choice_index]


@pytest.fixture(autouse=True)
def quiet_logs():
    """Keep test output clean."""
    disable_logging()
    yield


@pytest.fixture
def rng():
    return FixedRandom()


@pytest.fixture
def events():
    return EventLog()


@pytest.fixture
def playfield():
    field = Playfield()
    field.bricks.generate(1)
    field.serve()
    return field


@pytest.fixture
def scoreboard():
    return Scoreboard()


@pytest.fixture
def powerups(playfield, scoreboard, events, rng):
    return PowerupSystem(playfield, scoreboard, events, rng)


@pytest.fixture
def physics(playfield, powerups, scoreboard, events, rng):
    return Physics(playfield, powerups, scoreboard, events, rng)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def session(store, rng):
    return GameSession(
        stats_store=StatsStore(store),
        leaderboard=LeaderboardStore(store),
        rng=rng,
    )


@pytest.fixture
def make_ball():
    """Factory for flying balls with the default config."""
    def _make(x: float = 240.0, y: float = 300.0, vx: float = 0.0, vy: float = -4.0, **kwargs) -> Ball:
        return Ball(BallConfig(), x, y, vx, vy, resting=False, **kwargs)
    return _make


@pytest.fixture
def make_brick():
    """Factory for 50x20 bricks."""
    def _make(x: float = 100.0, y: float = 100.0, brick_type: BrickType = BrickType.NORMAL) -> Brick:
        return Brick(x, y, 50, 20, brick_type)
    return _make


@pytest.fixture
def clear_bricks():
    """Destroy every brick on a field."""
    def _clear(field: BrickField) -> None:
        for index in range(len(field.bricks)):
            field.destroy(index)
    return _clear


@pytest.fixture
def fixed_random():
    """Factory for FixedRandom instances."""
    return FixedRandom
