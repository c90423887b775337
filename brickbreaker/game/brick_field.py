"""Brick field: the grid of bricks for the current stage.

Owns brick placement, damage and the stage-cleared check. Bricks are
kept in row-major order; collision queries return the first match in
that order.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import (
    BRICK_ROWS, BRICK_COLS, BRICK_WIDTH, BRICK_HEIGHT, BRICK_PADDING,
    GRID_OFFSET_X, GRID_OFFSET_Y,
)
from ..logging import get_logger
from .entities.ball import Ball
from .entities.brick import Brick
from .stages import StagePatternProvider

log = get_logger('brick_field')


@dataclass(frozen=True)
class GridLayout:
    """Brick grid geometry."""
    rows: int = BRICK_ROWS
    cols: int = BRICK_COLS
    brick_width: float = BRICK_WIDTH
    brick_height: float = BRICK_HEIGHT
    padding: float = BRICK_PADDING
    offset_x: float = GRID_OFFSET_X
    offset_y: float = GRID_OFFSET_Y

    def position(self, row: int, col: int) -> Tuple[float, float]:
        """Get the top-left corner of the brick at (row, col)."""
        return (
            col * (self.brick_width + self.padding) + self.offset_x,
            row * (self.brick_height + self.padding) + self.offset_y,
        )


@dataclass(frozen=True)
class DamageResult:
    """Outcome of damaging a brick.

    Attributes:
        brick: The brick after damage
        destroyed: True if this hit took the brick from active to inactive
        points: Points awarded (non-zero only when destroyed)
    """
    brick: Brick
    destroyed: bool
    points: int


class BrickField:
    """The current stage's bricks."""

    def __init__(
        self,
        provider: Optional[StagePatternProvider] = None,
        layout: Optional[GridLayout] = None,
    ):
        """Initialize an empty field.

        Args:
            provider: Stage layouts (defaults to the packaged stages)
            layout: Grid geometry
        """
        self._provider = provider or StagePatternProvider()
        self._layout = layout or GridLayout()
        self._bricks: List[Brick] = []
        self._destroyed_count = 0
        self._stage = 0

    @property
    def bricks(self) -> Tuple[Brick, ...]:
        """Get all bricks, active and destroyed, in row-major order."""
        return tuple(self._bricks)

    @property
    def active_bricks(self) -> List[Brick]:
        return [b for b in self._bricks if b.is_active]

    @property
    def destroyed_count(self) -> int:
        """Get number of bricks destroyed since this field was created."""
        return self._destroyed_count

    @property
    def stage(self) -> int:
        """Get the stage number of the current layout."""
        return self._stage

    @property
    def provider(self) -> StagePatternProvider:
        return self._provider

    def generate(self, stage: int) -> None:
        """Replace all bricks with a fresh layout for stage.

        Args:
            stage: Stage number (clamped by the provider)
        """
        pattern = self._provider.pattern_for(stage)
        layout = self._layout

        bricks = []
        for row in range(layout.rows):
            for col in range(layout.cols):
                brick_type = pattern[row * layout.cols + col]
                x, y = layout.position(row, col)
                bricks.append(Brick(
                    x, y, layout.brick_width, layout.brick_height,
                    brick_type, (row, col),
                ))

        self.set_bricks(bricks)
        self._stage = stage
        log.debug("Generated stage %d: %d bricks", stage, len(self._bricks))

    def set_bricks(self, bricks: List[Brick]) -> None:
        """Replace the field with an explicit brick list.

        The destroyed counter and stage number are left alone.
        """
        self._bricks = list(bricks)

    def find_colliding_brick(self, ball: Ball) -> Optional[Tuple[int, Brick]]:
        """Find the first active brick containing the ball center.

        Uses a point-in-rectangle test on the ball center rather than a
        true circle-rectangle overlap.

        Args:
            ball: Ball to test

        Returns:
            (index, brick) of the first match in row-major order, or None
        """
        for i, brick in enumerate(self._bricks):
            if brick.is_active and brick.contains_point(ball.x, ball.y):
                return i, brick
        return None

    def apply_damage(self, index: int) -> DamageResult:
        """Apply one hit to the brick at index.

        Args:
            index: Brick index from find_colliding_brick

        Returns:
            DamageResult describing the outcome
        """
        brick = self._bricks[index]
        new_brick = brick.hit()
        self._bricks[index] = new_brick

        destroyed = brick.is_active and not new_brick.is_active
        points = 0
        if destroyed:
            points = brick.points
            self._destroyed_count += 1
            log.debug("Brick %s destroyed (+%d)", brick.grid_position, points)

        return DamageResult(new_brick, destroyed, points)

    def destroy(self, index: int) -> bool:
        """Destroy the brick at index regardless of type.

        Returns:
            True if the brick was active and is now destroyed
        """
        brick = self._bricks[index]
        if not brick.is_active:
            return False

        self._bricks[index] = brick.destroy()
        self._destroyed_count += 1
        return True

    def all_cleared(self) -> bool:
        """Check if every brick is inactive."""
        return all(not b.is_active for b in self._bricks)
