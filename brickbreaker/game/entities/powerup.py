"""Power-up pickups and the laser overlay."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ...config import POWERUP_WIDTH, POWERUP_HEIGHT, POWERUP_FALL_SPEED


class PowerupType(Enum):
    """Effects a falling pickup can grant."""
    PADDLE_EXPAND = "paddle_expand"
    SLOW_BALL = "slow_ball"
    MULTI_BALL = "multi_ball"
    LASER = "laser"
    EXTRA_LIFE = "extra_life"


@dataclass(frozen=True)
class Powerup:
    """A falling pickup.

    Attributes:
        x: Center X (the destroyed brick's center)
        y: Top edge Y
        kind: Effect granted on pickup
        width: Box width
        height: Box height
        speed: Fall speed in pixels per tick
    """
    x: float
    y: float
    kind: PowerupType
    width: float = POWERUP_WIDTH
    height: float = POWERUP_HEIGHT
    speed: float = POWERUP_FALL_SPEED

    def update(self) -> 'Powerup':
        """Fall by one tick."""
        return Powerup(self.x, self.y + self.speed, self.kind,
                       self.width, self.height, self.speed)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (
            self.x - self.width / 2,
            self.y,
            self.x + self.width / 2,
            self.y + self.height,
        )


@dataclass
class Laser:
    """Timed laser overlay; active until its tick budget runs out."""
    remaining_ticks: int

    @property
    def active(self) -> bool:
        return self.remaining_ticks > 0

    def tick(self) -> bool:
        """Spend one tick of budget.

        Returns:
            True if the laser ran out this tick
        """
        if self.remaining_ticks <= 0:
            return False
        self.remaining_ticks -= 1
        return self.remaining_ticks == 0
