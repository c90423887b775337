"""Brick entity.

Every brick has a type that fixes its starting health. Bricks are
immutable: `hit()` and `destroy()` return new Brick instances, and the
owning BrickField swaps them in place.
"""

from enum import Enum
import math
from typing import Tuple

from ...config import POINTS_PER_HEALTH


class BrickType(Enum):
    """Brick types and their starting health."""

    NORMAL = 1
    STRONG = 2
    SPECIAL = 3
    UNBREAKABLE = math.inf

    @property
    def health(self) -> float:
        """Starting health (infinite for UNBREAKABLE)."""
        return self.value

    @property
    def is_breakable(self) -> bool:
        """Whether ball hits can ever destroy this type."""
        return not math.isinf(self.value)


class Brick:
    """A brick on the field.

    Invariant: `is_active` is exactly `health > 0`. Once a brick is
    destroyed it never becomes active again.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        brick_type: BrickType,
        grid_position: Tuple[int, int] = (0, 0),
        health: float | None = None,
    ):
        """Initialize brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
            brick_type: Type determining starting health
            grid_position: (row, col) position in grid
            health: Remaining health (defaults to the type's starting health)
        """
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._type = brick_type
        self._grid_position = grid_position
        self._health = brick_type.health if health is None else max(0, health)

    @property
    def x(self) -> float:
        """Get left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y position."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def center_x(self) -> float:
        """Get center X position."""
        return self._x + self._width / 2

    @property
    def center_y(self) -> float:
        """Get center Y position."""
        return self._y + self._height / 2

    @property
    def brick_type(self) -> BrickType:
        return self._type

    @property
    def health(self) -> float:
        """Get remaining health (never negative, may be infinite)."""
        return self._health

    @property
    def original_health(self) -> float:
        """Get the health this brick started with."""
        return self._type.health

    @property
    def points(self) -> int:
        """Points awarded when a ball destroys this brick."""
        if not self._type.is_breakable:
            return 0
        return int(POINTS_PER_HEALTH * self._type.health)

    @property
    def is_active(self) -> bool:
        """Check if brick is still on the field."""
        return self._health > 0

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return self._grid_position

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (
            self._x,
            self._y,
            self._x + self._width,
            self._y + self._height,
        )

    def contains_point(self, px: float, py: float) -> bool:
        """Check if a point lies strictly inside the brick."""
        return (self._x < px < self._x + self._width and
                self._y < py < self._y + self._height)

    def _with_health(self, health: float) -> 'Brick':
        return Brick(
            self._x, self._y, self._width, self._height,
            self._type, self._grid_position, health,
        )

    def hit(self) -> 'Brick':
        """Apply one point of damage.

        Infinite health is unaffected, so UNBREAKABLE bricks return
        themselves unchanged.

        Returns:
            New Brick with updated health
        """
        if not self.is_active or math.isinf(self._health):
            return self
        return self._with_health(self._health - 1)

    def destroy(self) -> 'Brick':
        """Destroy the brick regardless of health (laser).

        Returns:
            New inactive Brick
        """
        if not self.is_active:
            return self
        return self._with_health(0)

    def __repr__(self) -> str:
        return (f"Brick({self._type.name}, grid={self._grid_position}, "
                f"health={self._health})")
