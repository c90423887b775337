"""Base class for Brick Breaker skins.

Skins handle ALL rendering - the session only manages state. A skin
draws a FrameSnapshot and may keep its own cosmetic state (particles,
flashes) fed by the events each tick returns. Nothing flows back into
the simulation.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, List

import pygame

from ..config import BACKGROUND_COLOR

if TYPE_CHECKING:
    from ..events import GameEvent
    from ..game.entities import Ball, Brick, Powerup
    from ..models import LeaderboardEntry, Stats
    from ..session import FrameSnapshot, PaddleView


class BrickBreakerSkin(ABC):
    """Base class for game skins.

    Subclasses implement the three entity renderers; everything else
    has a no-op default.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_paddle(self, paddle: 'PaddleView', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle geometry
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render a ball.

        Args:
            ball: Ball to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render a brick based on its type and remaining health.

        Args:
            brick: Brick to render (inactive bricks are skipped)
            screen: Pygame surface to draw on
        """
        pass

    def render_powerup(self, powerup: 'Powerup', screen: pygame.Surface) -> None:
        """Render a falling power-up."""
        pass

    def render_laser(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Render the laser beams while the laser is active."""
        pass

    def render_effects(self, screen: pygame.Surface) -> None:
        """Render cosmetic effects (particles etc.)."""
        pass

    def render_hud(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Render the heads-up display (score, lives, stage)."""
        pass

    def render_overlay(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Render state screens (menu, pause, game over, stats)."""
        pass

    def render_stats(
        self,
        screen: pygame.Surface,
        stats: 'Stats',
        top_scores: List['LeaderboardEntry'],
    ) -> None:
        """Render the stats screen (cumulative stats and leaderboard)."""
        pass

    def on_events(self, events: Iterable['GameEvent']) -> None:
        """Receive one tick's events for cosmetic effects."""
        pass

    def update(self) -> None:
        """Advance cosmetic animations by one tick."""
        pass

    def render(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Draw a complete frame.

        Args:
            snapshot: Session state to draw
            screen: Pygame surface sized to the playfield
        """
        screen.fill(BACKGROUND_COLOR)

        for brick in snapshot.bricks:
            if brick.is_active:
                self.render_brick(brick, screen)
        for powerup in snapshot.powerups:
            self.render_powerup(powerup, screen)

        self.render_paddle(snapshot.paddle, screen)
        if snapshot.laser_active:
            self.render_laser(snapshot, screen)
        for ball in snapshot.balls:
            self.render_ball(ball, screen)

        self.render_effects(screen)
        self.render_hud(snapshot, screen)
        self.render_overlay(snapshot, screen)
