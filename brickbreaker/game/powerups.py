"""Power-up system.

Spawns falling pickups where bricks die, moves them, applies their
effects when a ball catches one, and counts down timed effects.

Timed effects store their remaining ticks on the state they changed
(paddle expansion on the paddle, slow-ball on each slowed ball, the
laser on its overlay) and revert when the count reaches zero. Nothing
counts down while the session is paused.
"""

import random
from typing import List, Optional

from ..config import (
    POWERUP_DROP_CHANCE, POWERUP_POINTS, PADDLE_EXPAND_STEP,
    PADDLE_EXPAND_TICKS, SLOW_BALL_FACTOR, SLOW_BALL_TICKS, MAX_BALLS,
    LASER_TICKS, LASER_POINTS,
)
from ..events import EventLog, EventType
from ..logging import get_logger
from .entities.ball import Ball
from .entities.powerup import Laser, Powerup, PowerupType
from .physics.collision import check_powerup_collision
from .playfield import Playfield, Scoreboard

log = get_logger('powerups')


class PowerupSystem:
    """Spawns, moves and applies power-ups."""

    def __init__(
        self,
        playfield: Playfield,
        scoreboard: Scoreboard,
        events: EventLog,
        rng: Optional[random.Random] = None,
        drop_chance: float = POWERUP_DROP_CHANCE,
    ):
        """Initialize power-up system.

        Args:
            playfield: Shared entities the effects act on
            scoreboard: Receives pickup and laser points, extra lives
            events: Event sink for the current tick
            rng: Random source for drops and types
            drop_chance: Probability a destroyed brick drops a power-up
        """
        self._playfield = playfield
        self._scoreboard = scoreboard
        self._events = events
        self._rng = rng or random.Random()
        self._drop_chance = drop_chance

    def maybe_spawn(self, x: float, y: float) -> Optional[Powerup]:
        """Roll for a drop at a destroyed brick's center.

        Returns:
            The spawned power-up, or None if the roll failed
        """
        if self._rng.random() >= self._drop_chance:
            return None
        kind = self._rng.choice(list(PowerupType))
        return self.spawn(x, y, kind)

    def spawn(self, x: float, y: float, kind: PowerupType) -> Powerup:
        """Add a falling power-up."""
        powerup = Powerup(x, y, kind)
        self._playfield.powerups.add(powerup)
        self._events.emit(EventType.POWERUP_SPAWNED, kind=kind.name, x=x, y=y)
        return powerup

    def update(self) -> None:
        """Move power-ups down one tick; drop those past the bottom."""
        pool = self._playfield.powerups
        for powerup_id, powerup in pool.items():
            moved = powerup.update()
            if moved.y >= self._playfield.height:
                pool.remove(powerup_id)
            else:
                pool.replace(powerup_id, moved)

    def find_pickup(self, ball: Ball) -> Optional[int]:
        """Find the first power-up the ball overlaps.

        Returns:
            Power-up id, or None
        """
        for powerup_id, powerup in self._playfield.powerups.items():
            if check_powerup_collision(ball, powerup):
                return powerup_id
        return None

    def collect(self, powerup_id: int) -> Optional[PowerupType]:
        """Remove a power-up and apply its effect.

        Returns:
            The collected type, or None if the id was already gone
        """
        powerup = self._playfield.powerups.remove(powerup_id)
        if powerup is None:
            return None

        self.activate(powerup.kind)
        self._events.emit(EventType.POWERUP_COLLECTED, kind=powerup.kind.name)
        return powerup.kind

    def activate(self, kind: PowerupType) -> None:
        """Apply a power-up effect and award the flat pickup bonus."""
        playfield = self._playfield

        if kind == PowerupType.PADDLE_EXPAND:
            playfield.paddle.expand(PADDLE_EXPAND_STEP, PADDLE_EXPAND_TICKS)

        elif kind == PowerupType.SLOW_BALL:
            for ball_id, ball in playfield.balls.items():
                slowed = ball.scale_speed(SLOW_BALL_FACTOR).with_slow_timer(SLOW_BALL_TICKS)
                playfield.balls.replace(ball_id, slowed)

        elif kind == PowerupType.MULTI_BALL:
            first = playfield.balls.first()
            if first is not None and len(playfield.balls) < MAX_BALLS:
                playfield.balls.add(first[1].mirrored())

        elif kind == PowerupType.LASER:
            playfield.laser = Laser(LASER_TICKS)

        elif kind == PowerupType.EXTRA_LIFE:
            self._scoreboard.gain_life()

        self._scoreboard.add_points(POWERUP_POINTS)
        log.debug("Activated %s", kind.name)

    def tick_effects(self) -> None:
        """Count down timed effects and revert the expired ones."""
        playfield = self._playfield

        if playfield.paddle.tick_effects():
            self._events.emit(EventType.POWERUP_EXPIRED, kind=PowerupType.PADDLE_EXPAND.name)

        for ball_id, ball in playfield.balls.items():
            ball, expired = ball.tick_slow_timers()
            for _ in range(expired):
                ball = ball.scale_speed(1.0 / SLOW_BALL_FACTOR)
            playfield.balls.replace(ball_id, ball)
            if expired:
                self._events.emit(EventType.POWERUP_EXPIRED, kind=PowerupType.SLOW_BALL.name)

    def fire_laser(self) -> List[int]:
        """Destroy bricks above the paddle's span while the laser is on.

        A brick is hit when its horizontal extent overlaps the paddle's
        and its top is above the paddle. This bypasses health, so
        UNBREAKABLE bricks are destroyed too. Spends one tick of budget.

        Returns:
            Indices of bricks destroyed this tick
        """
        playfield = self._playfield
        laser = playfield.laser
        if laser is None or not laser.active:
            return []

        paddle = playfield.paddle
        destroyed = []
        for index, brick in enumerate(playfield.bricks.bricks):
            if not brick.is_active:
                continue
            overlaps = brick.x < paddle.right and brick.x + brick.width > paddle.left
            if overlaps and brick.y < paddle.y and playfield.bricks.destroy(index):
                self._scoreboard.add_points(LASER_POINTS)
                self._events.emit(
                    EventType.BRICK_DESTROYED,
                    brick_type=brick.brick_type.name,
                    x=brick.center_x,
                    y=brick.center_y,
                    points=LASER_POINTS,
                    source='laser',
                )
                destroyed.append(index)

        if laser.tick():
            playfield.laser = None
            self._events.emit(EventType.POWERUP_EXPIRED, kind=PowerupType.LASER.name)

        return destroyed
