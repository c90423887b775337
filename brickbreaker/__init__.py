"""Brick Breaker - a fixed-step brick-breaking arcade game.

The simulation core lives in `brickbreaker.game`; `GameSession` drives
it. Rendering, audio and storage are pluggable collaborators.
"""

from .game_state import GameState
from .session import FrameSnapshot, GameSession

__version__ = "1.0.0"

__all__ = [
    'FrameSnapshot',
    'GameSession',
    'GameState',
]
