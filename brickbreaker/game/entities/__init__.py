"""Brick Breaker game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig
from .brick import Brick, BrickType
from .powerup import Powerup, PowerupType, Laser

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig',
    'Brick', 'BrickType',
    'Powerup', 'PowerupType', 'Laser',
]
