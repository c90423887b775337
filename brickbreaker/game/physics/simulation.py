"""Per-tick ball physics.

Moves every ball one fixed step and resolves, in order: walls, the
bottom edge, the paddle, at most one brick, and power-up pickups.
"""

import random
from typing import Optional

from ...events import EventLog, EventType
from ...logging import get_logger
from ..playfield import Playfield, Scoreboard
from ..powerups import PowerupSystem
from .collision import (
    check_wall_collision,
    has_fallen_below,
    check_paddle_collision,
    get_collision_direction,
    resolve_brick_collision,
)

log = get_logger('physics')


class Physics:
    """Ball and paddle kinematics with collision resolution."""

    def __init__(
        self,
        playfield: Playfield,
        powerups: PowerupSystem,
        scoreboard: Scoreboard,
        events: EventLog,
        rng: Optional[random.Random] = None,
    ):
        self._playfield = playfield
        self._powerups = powerups
        self._scoreboard = scoreboard
        self._events = events
        self._rng = rng or random.Random()

    def launch(self) -> int:
        """Send every resting ball into free flight.

        Each ball leaves upward at its base speed with a random
        horizontal velocity in [-base_speed, base_speed].

        Returns:
            Number of balls launched
        """
        launched = 0
        balls = self._playfield.balls
        for ball_id, ball in balls.items():
            if not ball.is_resting:
                continue
            vx = self._rng.uniform(-ball.base_speed, ball.base_speed)
            balls.replace(ball_id, ball.launch(vx))
            launched += 1
        return launched

    def follow_paddle(self) -> None:
        """Keep resting balls centered on the paddle."""
        balls = self._playfield.balls
        for ball_id, ball in balls.items():
            if ball.is_resting:
                x, y = self._playfield.resting_position(ball)
                balls.replace(ball_id, ball.set_position(x, y))

    def step(self) -> None:
        """Advance every live ball by one tick."""
        for ball_id in self._playfield.balls.ids():
            self.step_ball(ball_id)

    def step_ball(self, ball_id: int) -> None:
        """Advance one ball by one tick and resolve its collisions."""
        playfield = self._playfield
        ball = playfield.balls.get(ball_id)
        if ball is None:
            return

        if ball.is_resting:
            x, y = playfield.resting_position(ball)
            playfield.balls.replace(ball_id, ball.set_position(x, y))
            return

        ball = ball.update()

        # Walls and ceiling
        ball, bounced = check_wall_collision(ball, playfield.width)
        if bounced:
            self._events.emit(EventType.WALL_BOUNCE)

        # Bottom edge: ball is gone for good
        if has_fallen_below(ball, playfield.height):
            playfield.balls.remove(ball_id)
            log.debug("Ball %d lost (%d left)", ball_id, len(playfield.balls))
            return

        # Paddle
        paddle = playfield.paddle
        if ball.vy > 0 and check_paddle_collision(ball, paddle):
            ball = ball.bounce_off_paddle(paddle.left, paddle.width)
            self._events.emit(EventType.PADDLE_BOUNCE)

        # Bricks: one per ball per tick
        hit = playfield.bricks.find_colliding_brick(ball)
        if hit is not None:
            index, brick = hit
            direction = get_collision_direction(ball, brick)
            ball = resolve_brick_collision(ball, direction)
            result = playfield.bricks.apply_damage(index)
            log.trace("Ball %d hit brick %s on %s", ball_id, brick.grid_position, direction)
            self._events.emit(EventType.BRICK_HIT, brick_type=brick.brick_type.name)

            if result.destroyed:
                self._scoreboard.add_points(result.points)
                self._events.emit(
                    EventType.BRICK_DESTROYED,
                    brick_type=brick.brick_type.name,
                    x=brick.center_x,
                    y=brick.center_y,
                    points=result.points,
                    source='ball',
                )
                self._powerups.maybe_spawn(brick.center_x, brick.center_y)

        playfield.balls.replace(ball_id, ball)

        # Power-ups (effects may touch every ball, so store this one first)
        pickup = self._powerups.find_pickup(ball)
        if pickup is not None:
            self._powerups.collect(pickup)
