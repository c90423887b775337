"""
Persisted data models for Brick Breaker.

Pydantic models validate everything read back from storage, so a
corrupt or hand-edited save file fails validation instead of leaking
bad values into a session.

Examples:
    >>> stats = Stats(total_score=300, games_played=2)
    >>> stats.average_score
    150
    >>> entry = LeaderboardEntry(score=120, date='2026-10-19')
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Stats(BaseModel):
    """Cumulative statistics across sessions.

    Attributes:
        total_score: Sum of final scores of all games
        games_played: Number of finished games
        max_stage: Highest stage reached
        bricks_destroyed: Bricks destroyed across all games
    """
    total_score: int = 0
    games_played: int = 0
    max_stage: int = 1
    bricks_destroyed: int = 0

    @field_validator('total_score', 'games_played', 'bricks_destroyed')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate counters are non-negative."""
        if v < 0:
            raise ValueError(f'Stat values must be non-negative, got {v}')
        return v

    @field_validator('max_stage')
    @classmethod
    def validate_stage(cls, v: int) -> int:
        """Validate stage is at least 1."""
        if v < 1:
            raise ValueError(f'max_stage must be at least 1, got {v}')
        return v

    @computed_field
    @property
    def average_score(self) -> int:
        """Average final score, rounded; 0 before the first game."""
        return round(self.total_score / max(1, self.games_played))

    model_config = ConfigDict(frozen=True)

    def record_game(self, score: int, stage: int, bricks_destroyed: int) -> 'Stats':
        """Fold a finished game into the totals.

        Returns:
            New Stats instance
        """
        return Stats(
            total_score=self.total_score + score,
            games_played=self.games_played + 1,
            max_stage=max(self.max_stage, stage),
            bricks_destroyed=self.bricks_destroyed + bricks_destroyed,
        )


class LeaderboardEntry(BaseModel):
    """One leaderboard row."""
    score: int = Field(..., ge=0)
    date: str = Field(..., description="ISO date the score was set")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class LeaderboardResult(BaseModel):
    """Outcome of submitting a score.

    Attributes:
        is_new_record: Score beats every previous entry
        rank: 1-based position on the board, None if it did not place
        notifications: Human-readable messages for the game-over screen
    """
    is_new_record: bool
    rank: Optional[int] = Field(default=None, ge=1)
    notifications: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
