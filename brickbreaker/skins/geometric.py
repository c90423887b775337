"""Geometric skin - flat shapes with a little particle flair."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

import pygame

from .base import BrickBreakerSkin
from ..config import BRICK_COLORS, POWERUP_COLORS
from ..events import EventType
from ..game_state import GameState

if TYPE_CHECKING:
    from ..events import GameEvent
    from ..game.entities import Ball, Brick, Powerup
    from ..models import LeaderboardEntry, Stats
    from ..session import FrameSnapshot, PaddleView


PARTICLES_PER_BRICK = 8
PARTICLE_SPEED = 3.0
PARTICLE_GRAVITY = 0.15
PARTICLE_LIFE = 20


@dataclass
class Particle:
    """A short-lived spark from a destroyed brick."""
    x: float
    y: float
    vx: float
    vy: float
    color: Tuple[int, int, int]
    life: int = PARTICLE_LIFE

    def update(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.vy += PARTICLE_GRAVITY
        self.life -= 1

    @property
    def alive(self) -> bool:
        return self.life > 0


class GeometricSkin(BrickBreakerSkin):
    """Renders the game using simple geometric shapes.

    - Paddle: Red rectangle with a light outline
    - Ball: Orange circle
    - Bricks: Colored by type, darkened as they take damage
    - Multi-hit bricks: Remaining health printed in the middle
    - Unbreakable bricks: X across the face
    - Laser: Green beams rising from both paddle edges
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes with particle bursts"

    PADDLE_COLOR = (231, 76, 60)
    PADDLE_OUTLINE = (245, 160, 150)
    BALL_COLOR = (243, 156, 18)
    LASER_COLOR = (46, 204, 113)
    HUD_COLOR = (255, 255, 255)
    DIM_COLOR = (0, 0, 0, 160)

    def __init__(self):
        """Initialize geometric skin."""
        self._font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None
        self.particles: List[Particle] = []

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 28)
            self._small_font = pygame.font.Font(None, 16)

    def _get_brick_color(self, brick: 'Brick') -> Tuple[int, int, int]:
        """Get color for brick, darkened based on damage."""
        base_color = BRICK_COLORS.get(brick.brick_type.name, (255, 255, 255))

        if brick.brick_type.is_breakable and brick.original_health > 1:
            damage_pct = 1 - (brick.health / brick.original_health)
            darkening = 1 - (damage_pct * 0.5)
            return tuple(int(c * darkening) for c in base_color)  # type: ignore

        return base_color

    # =========================================================================
    # Cosmetic state
    # =========================================================================

    def on_events(self, events: Iterable['GameEvent']) -> None:
        """Burst particles where bricks were destroyed."""
        for event in events:
            if event.type != EventType.BRICK_DESTROYED:
                continue
            color = BRICK_COLORS.get(event.data.get('brick_type', ''), (255, 255, 255))
            self.spawn_particles(event.data.get('x', 0.0), event.data.get('y', 0.0), color)

    def spawn_particles(self, x: float, y: float, color: Tuple[int, int, int]) -> None:
        """Add a ring of particles flying outward from (x, y)."""
        for i in range(PARTICLES_PER_BRICK):
            angle = (i / PARTICLES_PER_BRICK) * math.pi * 2
            self.particles.append(Particle(
                x, y,
                math.cos(angle) * PARTICLE_SPEED,
                math.sin(angle) * PARTICLE_SPEED,
                color,
            ))

    def update(self) -> None:
        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if p.alive]

    # =========================================================================
    # Entities
    # =========================================================================

    def render_paddle(self, paddle: 'PaddleView', screen: pygame.Surface) -> None:
        """Render paddle as a filled rectangle with outline."""
        rect = (paddle.x, paddle.y, paddle.width, paddle.height)
        pygame.draw.rect(screen, self.PADDLE_COLOR, rect)
        pygame.draw.rect(screen, self.PADDLE_OUTLINE, rect, 2)

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render ball as a filled circle."""
        pos = (int(ball.x), int(ball.y))
        pygame.draw.circle(screen, self.BALL_COLOR, pos, int(ball.radius))

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render brick as a colored rectangle with indicators."""
        color = self._get_brick_color(brick)
        rect = brick.rect

        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, (255, 255, 255), rect, 1)

        # Unbreakable indicator: X
        if not brick.brick_type.is_breakable:
            margin = 4
            x, y, w, h = rect
            pygame.draw.line(screen, (0, 0, 0), (x + margin, y + margin), (x + w - margin, y + h - margin), 2)
            pygame.draw.line(screen, (0, 0, 0), (x + w - margin, y + margin), (x + margin, y + h - margin), 2)
            return

        # Multi-hit indicator: remaining health
        if brick.health > 1:
            self._ensure_font()
            text = self._small_font.render(str(int(brick.health)), True, (255, 255, 255))
            screen.blit(text, text.get_rect(center=(int(brick.center_x), int(brick.center_y))))

    def render_powerup(self, powerup: 'Powerup', screen: pygame.Surface) -> None:
        """Render power-up as a colored box."""
        color = POWERUP_COLORS.get(powerup.kind.name, (255, 255, 255))
        left, top, right, bottom = powerup.get_bounds()
        pygame.draw.rect(screen, color, (left, top, right - left, bottom - top))

    def render_laser(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Render vertical beams from both paddle edges to the top."""
        paddle = snapshot.paddle
        for x in (paddle.x, paddle.x + paddle.width):
            pygame.draw.line(screen, self.LASER_COLOR, (int(x), int(paddle.y)), (int(x), 0), 3)

    def render_effects(self, screen: pygame.Surface) -> None:
        for particle in self.particles:
            fade = particle.life / PARTICLE_LIFE
            color = tuple(int(c * fade) for c in particle.color)
            pygame.draw.circle(screen, color, (int(particle.x), int(particle.y)), 2)

    # =========================================================================
    # HUD and screens
    # =========================================================================

    def render_hud(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Render score (left), stage (center) and lives (right)."""
        if snapshot.state != GameState.PLAYING:
            return
        self._ensure_font()

        score_text = self._font.render(f"Score: {snapshot.score}", True, self.HUD_COLOR)
        screen.blit(score_text, (10, 10))

        stage_text = self._font.render(f"Stage {snapshot.stage}", True, self.HUD_COLOR)
        stage_rect = stage_text.get_rect()
        stage_rect.midtop = (screen.get_width() // 2, 10)
        screen.blit(stage_text, stage_rect)

        lives_text = self._font.render(f"Lives: {snapshot.lives}", True, self.HUD_COLOR)
        lives_rect = lives_text.get_rect()
        lives_rect.topright = (screen.get_width() - 10, 10)
        screen.blit(lives_text, lives_rect)

        if snapshot.laser_active:
            laser_text = self._small_font.render(f"LASER {snapshot.laser_ticks}", True, self.LASER_COLOR)
            screen.blit(laser_text, (10, 36))

    def _render_lines(self, screen: pygame.Surface, lines: List[str]) -> None:
        """Dim the playfield and center text lines on it."""
        self._ensure_font()
        dim = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        dim.fill(self.DIM_COLOR)
        screen.blit(dim, (0, 0))

        line_height = self._font.get_linesize() + 6
        top = screen.get_height() // 2 - line_height * len(lines) // 2
        for i, line in enumerate(lines):
            text = self._font.render(line, True, self.HUD_COLOR)
            rect = text.get_rect(center=(screen.get_width() // 2, top + i * line_height))
            screen.blit(text, rect)

    def render_overlay(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        if snapshot.state == GameState.MENU:
            self._render_lines(screen, [
                "BRICK BREAKER",
                f"Best: {snapshot.high_score}",
                "",
                "Enter / click: play",
                "S: stats   M: sound",
            ])
        elif snapshot.state == GameState.GAME_OVER:
            self._render_lines(screen, self.game_over_lines(snapshot))
        elif snapshot.paused:
            self._render_lines(screen, ["PAUSED", "Space to resume"])
        elif snapshot.state == GameState.PLAYING and snapshot.awaiting_launch:
            self._ensure_font()
            hint = self._small_font.render(
                f"Stage {snapshot.stage}: {snapshot.stage_name} - click or Space to launch",
                True, self.HUD_COLOR,
            )
            rect = hint.get_rect(center=(screen.get_width() // 2, screen.get_height() * 2 // 3))
            screen.blit(hint, rect)

    @staticmethod
    def game_over_lines(snapshot: 'FrameSnapshot') -> List[str]:
        """Text for the game-over screen.

        Shows the final score, the leaderboard notifications and the
        top scores, with this game's entry marked.
        """
        lines = [
            "GAME OVER",
            f"Score: {snapshot.score}",
            f"Best: {snapshot.high_score}",
            f"Stage: {snapshot.stage}",
        ]

        result = snapshot.last_result
        rank = result.rank if result is not None else None
        if result is not None:
            lines.extend(result.notifications)

        if snapshot.top_scores:
            lines.append("")
            lines.append("Top Scores")
            for i, entry in enumerate(snapshot.top_scores, start=1):
                marker = ">" if i == rank else " "
                lines.append(f"{marker}{i}. {entry.score:>6}  {entry.date}")

        lines.append("")
        lines.append("R: retry   C: continue   Esc: menu")
        lines.append("X: reset records")
        return lines

    def render_stats(
        self,
        screen: pygame.Surface,
        stats: 'Stats',
        top_scores: List['LeaderboardEntry'],
    ) -> None:
        """Render the stats screen with the leaderboard."""
        lines = [
            "STATS",
            f"Games played: {stats.games_played}",
            f"Average score: {stats.average_score}",
            f"Best stage: {stats.max_stage}",
            f"Bricks destroyed: {stats.bricks_destroyed}",
            "",
        ]
        for rank, entry in enumerate(top_scores, start=1):
            lines.append(f"{rank:>2}. {entry.score:>6}  {entry.date}")
        lines.append("X: reset records   Esc: menu")
        self._render_lines(screen, lines)
