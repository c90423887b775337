"""Shared simulation state for one game.

The playfield groups the entities that physics and power-ups both act
on. The scoreboard tracks score and lives; it is the only place either
changes.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import CANVAS_WIDTH, CANVAS_HEIGHT, STARTING_LIVES, MAX_LIVES
from .brick_field import BrickField
from .entities.ball import Ball, BallConfig
from .entities.paddle import Paddle, PaddleConfig
from .entities.powerup import Laser, Powerup
from .pool import EntityPool


@dataclass
class Scoreboard:
    """Score and lives for a session."""

    score: int = 0
    lives: int = STARTING_LIVES
    max_lives: int = MAX_LIVES

    def add_points(self, points: int) -> None:
        """Add points to the score (negative amounts are ignored)."""
        if points > 0:
            self.score += points

    def gain_life(self) -> bool:
        """Add a life unless already at max_lives.

        Returns:
            True if a life was added
        """
        if self.lives >= self.max_lives:
            return False
        self.lives += 1
        return True

    def lose_life(self) -> int:
        """Remove a life, never going below zero.

        Returns:
            Lives remaining
        """
        self.lives = max(0, self.lives - 1)
        return self.lives


class Playfield:
    """Canvas, paddle, balls, bricks, power-ups and laser."""

    def __init__(
        self,
        width: float = CANVAS_WIDTH,
        height: float = CANVAS_HEIGHT,
        bricks: Optional[BrickField] = None,
        paddle_config: Optional[PaddleConfig] = None,
        ball_config: Optional[BallConfig] = None,
    ):
        self.width = width
        self.height = height
        self.paddle = Paddle(paddle_config or PaddleConfig(), width, height)
        self.ball_config = ball_config or BallConfig()
        self.bricks = bricks or BrickField()
        self.balls: EntityPool[Ball] = EntityPool()
        self.powerups: EntityPool[Powerup] = EntityPool()
        self.laser: Optional[Laser] = None

    @property
    def laser_active(self) -> bool:
        return self.laser is not None and self.laser.active

    def resting_position(self, ball: Optional[Ball] = None) -> tuple[float, float]:
        """Get where a resting ball sits: centered, one diameter above the paddle."""
        radius = ball.radius if ball is not None else self.ball_config.radius
        return self.paddle.center_x, self.paddle.y - radius * 2

    def serve(self) -> int:
        """Replace all balls with a single fresh ball resting on the paddle.

        Returns:
            Id of the new ball
        """
        self.balls.clear()
        x, y = self.resting_position()
        return self.balls.add(Ball(self.ball_config, x, y))

    def rest_all_balls(self) -> None:
        """Put every live ball back on the paddle, keeping its speed state."""
        for ball_id, ball in self.balls.items():
            x, y = self.resting_position(ball)
            self.balls.replace(ball_id, ball.rest_on(x, y))
