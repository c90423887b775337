"""Brick Breaker game session.

The session owns one game's state machine and drives the fixed-step
simulation. Front-ends call the command methods (start, launch, pause,
paddle input) and `tick()` once per frame, then draw `snapshot()`.

Collaborators are injected; every one of them is optional:
    audio        AudioNotifier receiving sound cues (silent by default)
    stats_store  StatsStore for cumulative stats and high score
    leaderboard  LeaderboardStore receiving final scores
    rng          random.Random driving launch angles and power-up drops
    provider     StagePatternProvider with the brick layouts

Commands issued in the wrong state are ignored and return False.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .audio import AudioNotifier
from .config import (
    CANVAS_WIDTH, CANVAS_HEIGHT, STARTING_LIVES, MAX_LIVES, GAME_OVER_TOP_SCORES,
)
from .events import EventLog, EventType, GameEvent
from .game.brick_field import BrickField
from .game.entities import Ball, Brick, Powerup
from .game.physics.simulation import Physics
from .game.playfield import Playfield, Scoreboard
from .game.powerups import PowerupSystem
from .game.stages import StagePatternProvider
from .game_state import GameState
from .logging import get_logger
from .models import LeaderboardEntry, LeaderboardResult, Stats
from .storage import LeaderboardStore, StatsStore

log = get_logger('session')


@dataclass(frozen=True)
class PaddleView:
    """Paddle geometry at snapshot time."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of everything a renderer needs for one frame."""
    state: GameState
    paused: bool
    awaiting_launch: bool
    tick: int
    width: float
    height: float
    score: int
    high_score: int
    lives: int
    stage: int
    stage_name: str
    paddle: PaddleView
    balls: Tuple[Ball, ...]
    bricks: Tuple[Brick, ...]
    powerups: Tuple[Powerup, ...]
    laser_ticks: int
    last_result: Optional[LeaderboardResult]
    top_scores: Tuple[LeaderboardEntry, ...]

    @property
    def laser_active(self) -> bool:
        return self.laser_ticks > 0


class GameSession:
    """One player's run through the stages."""

    def __init__(
        self,
        audio: Optional[AudioNotifier] = None,
        stats_store: Optional[StatsStore] = None,
        leaderboard: Optional[LeaderboardStore] = None,
        rng: Optional[random.Random] = None,
        provider: Optional[StagePatternProvider] = None,
        width: float = CANVAS_WIDTH,
        height: float = CANVAS_HEIGHT,
        starting_lives: int = STARTING_LIVES,
    ):
        self._audio = audio or AudioNotifier()
        self._stats_store = stats_store or StatsStore()
        self._leaderboard = leaderboard or LeaderboardStore()
        self._rng = rng or random.Random()
        self._provider = provider or StagePatternProvider()
        self._width = width
        self._height = height
        self._starting_lives = starting_lives

        self._state = GameState.MENU
        self._paused = False
        self._awaiting_launch = True
        self._stage = 1
        self._tick = 0
        self._last_result: Optional[LeaderboardResult] = None
        self._top_scores: Tuple[LeaderboardEntry, ...] = ()
        self._bricks_recorded = 0

        self._stats = self._stats_store.load()
        self._high_score = self._stats_store.high_score

        self._events = EventLog()
        self._reset_world()

    def _reset_world(self) -> None:
        """Build fresh entities for a new game at stage 1."""
        self._scoreboard = Scoreboard(lives=self._starting_lives, max_lives=MAX_LIVES)
        self._playfield = Playfield(
            self._width, self._height, BrickField(self._provider),
        )
        self._powerups = PowerupSystem(
            self._playfield, self._scoreboard, self._events, self._rng,
        )
        self._physics = Physics(
            self._playfield, self._powerups, self._scoreboard, self._events, self._rng,
        )
        self._stage = 1
        self._tick = 0
        self._bricks_recorded = 0
        self._events.tick = 0
        self._events.drain()
        self._paused = False
        self._awaiting_launch = True
        self._playfield.bricks.generate(self._stage)
        self._playfield.serve()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def awaiting_launch(self) -> bool:
        """Balls are resting on the paddle until launch()."""
        return self._awaiting_launch

    @property
    def score(self) -> int:
        return self._scoreboard.score

    @property
    def lives(self) -> int:
        return self._scoreboard.lives

    @property
    def stage(self) -> int:
        return self._stage

    @property
    def tick_count(self) -> int:
        return self._tick

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def stats(self) -> Stats:
        return self._stats

    @property
    def bricks_destroyed(self) -> int:
        """Bricks destroyed in the current game."""
        return self._playfield.bricks.destroyed_count

    @property
    def last_result(self) -> Optional[LeaderboardResult]:
        """Leaderboard outcome of the most recent game over."""
        return self._last_result

    @property
    def top_scores(self) -> Tuple[LeaderboardEntry, ...]:
        """Best scores shown on the game-over screen."""
        return self._top_scores

    @property
    def leaderboard(self) -> LeaderboardStore:
        return self._leaderboard

    @property
    def playfield(self) -> Playfield:
        return self._playfield

    @property
    def powerups(self) -> PowerupSystem:
        return self._powerups

    # =========================================================================
    # Commands
    # =========================================================================

    def _ignored(self, command: str) -> bool:
        log.debug("Ignoring %s in state %s", command, self._state.name)
        return False

    def start(self) -> bool:
        """Begin a new game from the menu."""
        if self._state != GameState.MENU:
            return self._ignored('start')

        self._reset_world()
        self._state = GameState.PLAYING
        log.info("Game started")
        return True

    def retry(self) -> bool:
        """Start over after a game over."""
        if self._state != GameState.GAME_OVER:
            return self._ignored('retry')

        self._reset_world()
        self._state = GameState.PLAYING
        log.info("Game restarted")
        return True

    def revive(self) -> bool:
        """Continue a lost game with one extra life.

        Score, stage and bricks are kept; a fresh ball waits on the
        paddle. Only a game that ended by running out of lives can be
        revived.
        """
        if self._state != GameState.GAME_OVER or self._scoreboard.lives > 0:
            return self._ignored('revive')

        self._scoreboard.gain_life()
        self._playfield.serve()
        self._awaiting_launch = True
        self._paused = False
        self._state = GameState.PLAYING
        log.info("Revived at stage %d with score %d", self._stage, self.score)
        return True

    def quit_to_menu(self) -> bool:
        """Abandon the current game (or screen) and return to the menu."""
        if self._state == GameState.MENU:
            return self._ignored('quit_to_menu')

        self._state = GameState.MENU
        self._reset_world()
        log.info("Returned to menu")
        return True

    def show_stats(self) -> Optional[Stats]:
        """Open the stats screen from the menu.

        Returns:
            Current cumulative stats, or None if ignored
        """
        if self._state != GameState.MENU:
            self._ignored('show_stats')
            return None

        self._state = GameState.STATS
        return self._stats

    def reset_records(self) -> bool:
        """Clear the leaderboard and the high score.

        Available from the game-over and stats screens. Cumulative
        stats are kept.
        """
        if self._state not in (GameState.GAME_OVER, GameState.STATS):
            return self._ignored('reset_records')

        self._leaderboard.clear()
        self._stats_store.high_score = 0
        self._high_score = 0
        self._top_scores = ()
        if self._last_result is not None:
            self._last_result = LeaderboardResult(is_new_record=False)
        log.info("Records reset")
        return True

    def toggle_pause(self) -> bool:
        """Pause or resume play."""
        if self._state != GameState.PLAYING:
            return self._ignored('toggle_pause')

        self._paused = not self._paused
        self._playfield.paddle.set_velocity(0)
        log.info("Paused" if self._paused else "Resumed")
        return True

    def _accepts_input(self) -> bool:
        return self._state == GameState.PLAYING and not self._paused

    def launch(self) -> bool:
        """Release the resting balls."""
        if not self._accepts_input() or not self._awaiting_launch:
            return self._ignored('launch')

        count = self._physics.launch()
        self._awaiting_launch = False
        log.debug("Launched %d ball(s)", count)
        return True

    def set_paddle_direction(self, direction: int) -> bool:
        """Keyboard steering: -1 left, 0 stop, 1 right."""
        if not self._accepts_input():
            return self._ignored('set_paddle_direction')

        direction = (direction > 0) - (direction < 0)
        self._playfield.paddle.set_direction(direction)
        return True

    def move_paddle_toward(self, x: float) -> bool:
        """Pointer steering: ease the paddle center toward x."""
        if not self._accepts_input():
            return self._ignored('move_paddle_toward')

        self._playfield.paddle.move_toward(x)
        if self._awaiting_launch:
            self._physics.follow_paddle()
        return True

    # =========================================================================
    # Simulation
    # =========================================================================

    def tick(self) -> List[GameEvent]:
        """Advance the game by one fixed step.

        Does nothing outside PLAYING or while paused. While waiting for
        a launch only the paddle moves; falling power-ups and effect
        timers hold still.

        Returns:
            Events emitted during this tick, in order
        """
        if not self._accepts_input():
            return []

        self._tick += 1
        self._events.tick = self._tick
        score_before = self._scoreboard.score

        self._playfield.paddle.update()

        if self._awaiting_launch:
            self._physics.follow_paddle()
        else:
            self._physics.step()
            self._powerups.update()
            self._powerups.tick_effects()
            self._powerups.fire_laser()

            if self._scoreboard.score != score_before:
                self._events.emit(
                    EventType.SCORE_CHANGED,
                    score=self._scoreboard.score,
                    delta=self._scoreboard.score - score_before,
                )

            self._check_terminal()

        events = self._events.drain()
        self._audio.on_events(events)
        return events

    def _check_terminal(self) -> None:
        """Handle losing the last ball and clearing the stage."""
        playfield = self._playfield

        if len(playfield.balls) == 0:
            lives = self._scoreboard.lose_life()
            self._events.emit(EventType.LIFE_LOST, lives=lives)
            log.info("Life lost, %d remaining", lives)
            if lives <= 0:
                self._end_game()
                return
            playfield.serve()
            self._awaiting_launch = True

        if playfield.bricks.all_cleared():
            self._events.emit(EventType.STAGE_CLEARED, stage=self._stage)
            if self._stage >= self._provider.max_stages:
                log.info("Final stage %d cleared", self._stage)
                self._end_game()
                return
            self._advance_stage()

    def _advance_stage(self) -> None:
        self._stage += 1
        self._playfield.bricks.generate(self._stage)
        self._playfield.rest_all_balls()
        self._awaiting_launch = True
        log.info("Stage %d: %s", self._stage, self._provider.name_for(self._stage))

    def _end_game(self) -> None:
        """Record the finished game. Runs once per transition to GAME_OVER."""
        if self._state == GameState.GAME_OVER:
            return

        self._state = GameState.GAME_OVER
        self._playfield.paddle.set_velocity(0)
        score = self._scoreboard.score
        bricks = self._playfield.bricks.destroyed_count
        # A revived game only adds the bricks destroyed since the last record
        new_bricks = bricks - self._bricks_recorded
        self._bricks_recorded = bricks

        self._last_result = self._leaderboard.add_score(score, {
            'stage': self._stage,
            'bricks_destroyed': bricks,
        })
        self._top_scores = tuple(self._leaderboard.get_top_scores(GAME_OVER_TOP_SCORES))
        if score > self._high_score:
            self._high_score = score
            self._stats_store.high_score = score

        self._stats = self._stats.record_game(score, self._stage, new_bricks)
        self._stats_store.save(self._stats)

        self._events.emit(
            EventType.GAME_OVER,
            score=score,
            stage=self._stage,
            is_new_record=self._last_result.is_new_record,
        )
        log.info("Game over: score=%d stage=%d bricks=%d", score, self._stage, bricks)

    # =========================================================================
    # Rendering
    # =========================================================================

    def snapshot(self) -> FrameSnapshot:
        """Capture the current frame for renderers."""
        playfield = self._playfield
        paddle = playfield.paddle
        laser = playfield.laser

        return FrameSnapshot(
            state=self._state,
            paused=self._paused,
            awaiting_launch=self._awaiting_launch,
            tick=self._tick,
            width=playfield.width,
            height=playfield.height,
            score=self._scoreboard.score,
            high_score=max(self._high_score, self._scoreboard.score),
            lives=self._scoreboard.lives,
            stage=self._stage,
            stage_name=self._provider.name_for(self._stage),
            paddle=PaddleView(paddle.x, paddle.y, paddle.width, paddle.height),
            balls=tuple(playfield.balls.values()),
            bricks=playfield.bricks.bricks,
            powerups=tuple(playfield.powerups.values()),
            laser_ticks=laser.remaining_ticks if laser is not None and laser.active else 0,
            last_result=self._last_result,
            top_scores=self._top_scores,
        )
