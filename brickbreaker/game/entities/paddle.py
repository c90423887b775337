"""Paddle entity.

The paddle moves horizontally along a fixed row near the bottom of the
canvas. Keyboard input sets a velocity; pointer input eases the paddle
toward a target position.
"""

from dataclasses import dataclass
from typing import Tuple

from ...config import (
    PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_MARGIN, PADDLE_MAX_SPEED,
    PADDLE_MAX_WIDTH, PADDLE_POINTER_SMOOTHING,
)


@dataclass(frozen=True)
class PaddleConfig:
    """Paddle configuration."""

    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT
    margin: float = PADDLE_MARGIN          # Gap below the paddle
    max_speed: float = PADDLE_MAX_SPEED    # Pixels per tick
    max_width: float = PADDLE_MAX_WIDTH
    smoothing: float = PADDLE_POINTER_SMOOTHING


class Paddle:
    """Paddle with clamped velocity and width.

    Position is stored as the left edge, matching the rectangle used
    for collision tests.
    """

    def __init__(
        self,
        config: PaddleConfig,
        screen_width: float,
        screen_height: float,
    ):
        """Initialize paddle.

        Args:
            config: Paddle configuration
            screen_width: Canvas width in pixels
            screen_height: Canvas height in pixels
        """
        self._config = config
        self._screen_width = screen_width
        self._y = screen_height - config.margin - config.height
        self._width = config.width
        self._velocity = 0.0
        self._expand_ticks = 0
        # Start centered
        self._x = (screen_width - self._width) / 2

    @property
    def x(self) -> float:
        """Get paddle left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top Y position."""
        return self._y

    @property
    def width(self) -> float:
        """Get current paddle width."""
        return self._width

    @property
    def base_width(self) -> float:
        """Get unexpanded paddle width."""
        return self._config.width

    @property
    def height(self) -> float:
        """Get paddle height."""
        return self._config.height

    @property
    def velocity(self) -> float:
        """Get horizontal velocity (pixels/tick)."""
        return self._velocity

    @property
    def max_speed(self) -> float:
        """Get maximum horizontal speed."""
        return self._config.max_speed

    @property
    def center_x(self) -> float:
        """Get paddle center X."""
        return self._x + self._width / 2

    @property
    def left(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def right(self) -> float:
        """Get paddle right edge X."""
        return self._x + self._width

    @property
    def top(self) -> float:
        """Get paddle top Y."""
        return self._y

    @property
    def bottom(self) -> float:
        """Get paddle bottom Y."""
        return self._y + self._config.height

    @property
    def expand_ticks(self) -> int:
        """Get ticks left before an expansion reverts (0 = not expanded)."""
        return self._expand_ticks

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._config.height)

    def _clamp_x(self, x: float) -> float:
        return max(0.0, min(x, self._screen_width - self._width))

    def set_velocity(self, velocity: float) -> None:
        """Set horizontal velocity, clamped to ±max_speed."""
        limit = self._config.max_speed
        self._velocity = max(-limit, min(limit, velocity))

    def set_direction(self, direction: int) -> None:
        """Set velocity from a keyboard direction (-1 left, 0 stop, 1 right)."""
        self.set_velocity(direction * self._config.max_speed)

    def move_toward(self, target_center_x: float) -> None:
        """Ease paddle toward a pointer position.

        The target is clamped so the paddle stays on screen, then the
        paddle covers a fixed fraction of the remaining distance.

        Args:
            target_center_x: Desired paddle center X
        """
        target_x = self._clamp_x(target_center_x - self._width / 2)
        self._x += (target_x - self._x) * self._config.smoothing

    def update(self) -> None:
        """Move paddle by its velocity for one tick, staying on screen."""
        self._x = self._clamp_x(self._x + self._velocity)

    def expand(self, step: float, duration_ticks: int) -> None:
        """Widen the paddle, capped at max_width.

        Picking up another expansion while expanded widens further and
        restarts the countdown.

        Args:
            step: Width to add
            duration_ticks: Ticks until width reverts to base
        """
        self._width = min(self._width + step, self._config.max_width)
        self._expand_ticks = duration_ticks
        self._x = self._clamp_x(self._x)

    def tick_effects(self) -> bool:
        """Count down the expansion timer.

        Returns:
            True if the expansion expired this tick and width was reset
        """
        if self._expand_ticks <= 0:
            return False

        self._expand_ticks -= 1
        if self._expand_ticks == 0:
            self._width = self._config.width
            return True
        return False
