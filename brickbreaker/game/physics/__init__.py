"""Brick Breaker physics and collision detection."""

from .collision import (
    check_wall_collision,
    has_fallen_below,
    check_paddle_collision,
    get_collision_direction,
    resolve_brick_collision,
    check_powerup_collision,
)

__all__ = [
    'check_wall_collision',
    'has_fallen_below',
    'check_paddle_collision',
    'get_collision_direction',
    'resolve_brick_collision',
    'check_powerup_collision',
]
