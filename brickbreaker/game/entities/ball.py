"""Ball entity with velocity-based physics.

The ball bounces off walls, paddle, and bricks. Ball angle depends
on where it hits the paddle. Velocities are in pixels per tick.

Ball is immutable: every operation returns a new Ball.
"""

from dataclasses import dataclass
import math
from typing import Tuple

from ...config import (
    BALL_RADIUS, BALL_SPEED, BALL_MAX_SPEED_FACTOR, PADDLE_SPIN_FACTOR,
)


@dataclass(frozen=True)
class BallConfig:
    """Ball configuration."""

    radius: float = BALL_RADIUS
    speed: float = BALL_SPEED                     # Base speed in pixels/tick
    max_speed_factor: float = BALL_MAX_SPEED_FACTOR  # Cap after paddle spin
    spin_factor: float = PADDLE_SPIN_FACTOR


class Ball:
    """Ball with velocity-based movement and bouncing physics."""

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
        base_speed: float | None = None,
        resting: bool = True,
        slow_timers: Tuple[int, ...] = (),
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Center X position
            y: Center Y position
            vx: X velocity (pixels/tick)
            vy: Y velocity (pixels/tick)
            base_speed: Launch speed, scaled by slow-ball effects
                (defaults to config.speed)
            resting: Whether the ball sits on the paddle waiting for launch
            slow_timers: Remaining ticks of each slow-ball effect on this ball
        """
        self._config = config
        self._x = x
        self._y = y
        self._vx = vx
        self._vy = vy
        self._base_speed = config.speed if base_speed is None else base_speed
        self._resting = resting
        self._slow_timers = tuple(slow_timers)

    def _copy(self, **changes) -> 'Ball':
        """Create a new Ball with some fields replaced."""
        fields = {
            'x': self._x,
            'y': self._y,
            'vx': self._vx,
            'vy': self._vy,
            'base_speed': self._base_speed,
            'resting': self._resting,
            'slow_timers': self._slow_timers,
        }
        fields.update(changes)
        return Ball(self._config, **fields)

    @property
    def config(self) -> BallConfig:
        """Get ball configuration."""
        return self._config

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def vx(self) -> float:
        """Get X velocity."""
        return self._vx

    @property
    def vy(self) -> float:
        """Get Y velocity."""
        return self._vy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.radius

    @property
    def base_speed(self) -> float:
        """Get base (launch) speed."""
        return self._base_speed

    @property
    def max_speed(self) -> float:
        """Get the speed cap applied after paddle bounces."""
        return self._base_speed * self._config.max_speed_factor

    @property
    def speed(self) -> float:
        """Get current velocity magnitude."""
        return math.sqrt(self._vx**2 + self._vy**2)

    @property
    def is_resting(self) -> bool:
        """Check if ball is resting on the paddle."""
        return self._resting

    @property
    def slow_timers(self) -> Tuple[int, ...]:
        """Get remaining ticks of slow-ball effects applied to this ball."""
        return self._slow_timers

    def launch(self, vx: float) -> 'Ball':
        """Launch ball upward from the paddle.

        Args:
            vx: Horizontal launch velocity, normally in [-base_speed, base_speed]

        Returns:
            New Ball in free flight
        """
        return self._copy(vx=vx, vy=-self._base_speed, resting=False)

    def rest_on(self, x: float, y: float) -> 'Ball':
        """Put ball back on the paddle at the given position.

        Returns:
            New resting Ball with zero velocity
        """
        return self._copy(x=x, y=y, vx=0.0, vy=0.0, resting=True)

    def update(self) -> 'Ball':
        """Advance position by one tick of velocity.

        Returns:
            New Ball with updated position
        """
        if self._resting:
            return self

        return self._copy(x=self._x + self._vx, y=self._y + self._vy)

    def set_position(self, x: float, y: float) -> 'Ball':
        """Set ball position.

        Returns:
            New Ball at new position
        """
        return self._copy(x=x, y=y)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off vertical surface (reverse X velocity)."""
        return self._copy(vx=-self._vx)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off horizontal surface (reverse Y velocity)."""
        return self._copy(vy=-self._vy)

    def mirrored(self) -> 'Ball':
        """Get a copy travelling with mirrored horizontal velocity."""
        return self._copy(vx=-self._vx)

    def bounce_off_paddle(self, paddle_left: float, paddle_width: float) -> 'Ball':
        """Bounce off paddle with spin based on hit position.

        The ball is always sent upward. Hitting left of center pushes
        the ball left, right of center pushes it right. The resulting
        speed is capped at max_speed, preserving direction.

        Args:
            paddle_left: Paddle left edge X
            paddle_width: Paddle width

        Returns:
            New Ball with new velocity
        """
        # Offset from paddle center, -0.5 (left edge) to 0.5 (right edge)
        offset_ratio = (self._x - paddle_left) / paddle_width - 0.5

        vy = -abs(self._vy)
        vx = self._vx + offset_ratio * self._config.spin_factor

        speed = math.sqrt(vx * vx + vy * vy)
        cap = self.max_speed
        if speed > cap:
            vx = vx / speed * cap
            vy = vy / speed * cap

        return self._copy(vx=vx, vy=vy)

    def scale_speed(self, factor: float) -> 'Ball':
        """Scale base speed and current velocity by factor.

        Returns:
            New Ball with scaled speed
        """
        return self._copy(
            vx=self._vx * factor,
            vy=self._vy * factor,
            base_speed=self._base_speed * factor,
        )

    def with_slow_timer(self, ticks: int) -> 'Ball':
        """Record a slow-ball effect that expires after ticks."""
        return self._copy(slow_timers=self._slow_timers + (ticks,))

    def tick_slow_timers(self) -> Tuple['Ball', int]:
        """Count down slow-ball effects by one tick.

        Returns:
            Tuple of (updated ball, number of effects that expired)
        """
        if not self._slow_timers:
            return self, 0

        remaining = tuple(t - 1 for t in self._slow_timers)
        expired = sum(1 for t in remaining if t <= 0)
        return self._copy(slow_timers=tuple(t for t in remaining if t > 0)), expired

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        return (
            self._x - self._config.radius,
            self._y - self._config.radius,
            self._x + self._config.radius,
            self._y + self._config.radius,
        )

    def __repr__(self) -> str:
        state = "resting" if self._resting else "flying"
        return (f"Ball(({self._x:.1f}, {self._y:.1f}), "
                f"v=({self._vx:.2f}, {self._vy:.2f}), {state})")
