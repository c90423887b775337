"""
Persistence for high score, stats and leaderboard.

Everything is stored in an opaque key-value store. The default backend
is a single JSON document on disk; tests use the in-memory backend.
Reads never fail: missing, unreadable or invalid data falls back to
defaults with a warning.

Keys:
    bb_highscore   -> int
    bb_stats       -> Stats fields
    bb_leaderboard -> list of LeaderboardEntry fields, best first
    sound_enabled  -> bool
"""

import json
import os
import sys
from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from .config import DATA_DIR, LEADERBOARD_SIZE
from .logging import get_logger
from .models import LeaderboardEntry, LeaderboardResult, Stats

log = get_logger('storage')

HIGH_SCORE_KEY = 'bb_highscore'
STATS_KEY = 'bb_stats'
LEADERBOARD_KEY = 'bb_leaderboard'
SOUND_KEY = 'sound_enabled'


def get_data_dir() -> Path:
    """Get the save directory, respecting BRICKBREAKER_DATA_DIR.

    Falls back to a platform-specific user data directory:
       - macOS: ~/Library/Application Support/BrickBreaker
       - Windows: %APPDATA%/BrickBreaker
       - Linux: $XDG_DATA_HOME/brickbreaker (~/.local/share/brickbreaker)
    """
    if DATA_DIR:
        return Path(DATA_DIR).expanduser()

    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / 'BrickBreaker'
    if sys.platform == 'win32':
        return Path(os.environ.get('APPDATA', str(Path.home()))) / 'BrickBreaker'

    xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
    return Path(xdg_data) / 'brickbreaker'


class KeyValueStore(ABC):
    """Minimal key-value persistence interface."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a stored value, or default if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value."""
        pass


class MemoryStore(KeyValueStore):
    """Dictionary-backed store (tests, or when no disk is available)."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """Store backed by one JSON document.

    The file is read lazily on first access and rewritten on every set
    via a temporary file and atomic rename. A failed write keeps the
    value in memory for the rest of the run.

    Args:
        path: JSON file (default: <data dir>/save.json)
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path else get_data_dir() / 'save.json'
        self._data: Optional[Dict[str, Any]] = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, Any]:
        if self._data is not None:
            return self._data

        self._data = {}
        if not self._path.exists():
            return self._data

        try:
            with open(self._path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Could not read %s, starting fresh: %s", self._path, e)
            return self._data

        if isinstance(data, dict):
            self._data = data
        else:
            log.warning("Ignoring %s: expected a JSON object", self._path)
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value

        tmp_path = self._path.with_suffix('.tmp')
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w') as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self._path)
        except OSError as e:
            log.warning("Could not write %s, keeping changes in memory: %s", self._path, e)
            if tmp_path.exists():
                tmp_path.unlink()


class StatsStore:
    """Loads and saves cumulative stats and the best score."""

    def __init__(self, store: Optional[KeyValueStore] = None):
        self._store = store or MemoryStore()

    def load(self) -> Stats:
        """Load stats, falling back to defaults on missing or invalid data."""
        raw = self._store.get(STATS_KEY)
        if raw is None:
            return Stats()
        try:
            return Stats.model_validate(raw)
        except ValidationError as e:
            log.warning("Invalid saved stats, using defaults: %s", e.error_count())
            return Stats()

    def save(self, stats: Stats) -> None:
        """Persist stats."""
        self._store.set(STATS_KEY, stats.model_dump(exclude={'average_score'}))

    @property
    def high_score(self) -> int:
        """Best score ever recorded (0 if none or invalid)."""
        raw = self._store.get(HIGH_SCORE_KEY, 0)
        try:
            return max(0, int(raw))
        except (TypeError, ValueError):
            log.warning("Invalid saved high score %r, using 0", raw)
            return 0

    @high_score.setter
    def high_score(self, score: int) -> None:
        self._store.set(HIGH_SCORE_KEY, int(score))


class LeaderboardStore:
    """Top scores, best first, capped at a fixed size.

    Args:
        store: Backing key-value store
        size: Maximum number of entries kept
        today: Date provider for new entries (injectable for tests)
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        size: int = LEADERBOARD_SIZE,
        today: Callable[[], date] = date.today,
    ):
        self._store = store or MemoryStore()
        self._size = size
        self._today = today

    @property
    def size(self) -> int:
        return self._size

    def _load(self) -> List[LeaderboardEntry]:
        raw = self._store.get(LEADERBOARD_KEY, [])
        if not isinstance(raw, list):
            log.warning("Invalid saved leaderboard, starting empty")
            return []

        entries = []
        for item in raw:
            try:
                entries.append(LeaderboardEntry.model_validate(item))
            except ValidationError:
                log.warning("Dropping invalid leaderboard entry: %r", item)
        entries.sort(key=lambda e: e.score, reverse=True)
        return entries[:self._size]

    def _save(self, entries: List[LeaderboardEntry]) -> None:
        self._store.set(LEADERBOARD_KEY, [e.model_dump() for e in entries])

    def get_top_scores(self, n: Optional[int] = None) -> List[LeaderboardEntry]:
        """Get up to n best entries (all kept entries if n is None)."""
        entries = self._load()
        return entries if n is None else entries[:max(0, n)]

    def add_score(
        self,
        score: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> LeaderboardResult:
        """Submit a final score.

        Ties keep the older entry ahead of the new one.

        Args:
            score: Final score
            metadata: Extra data stored with the entry (stage, bricks)

        Returns:
            LeaderboardResult with record flag, rank and notifications
        """
        entries = self._load()
        previous_best = entries[0].score if entries else None
        is_new_record = score > 0 and (previous_best is None or score > previous_best)

        entry = LeaderboardEntry(
            score=max(0, score),
            date=self._today().isoformat(),
            metadata=dict(metadata or {}),
        )
        entries.append(entry)
        entries.sort(key=lambda e: e.score, reverse=True)
        entries = entries[:self._size]

        rank = None
        for i, kept in enumerate(entries):
            if kept is entry:
                rank = i + 1
                break

        notifications = []
        if is_new_record:
            notifications.append("New record!")
        if rank is not None:
            notifications.append(f"Ranked #{rank} of {len(entries)}")

        self._save(entries)
        log.info("Score %d submitted (rank=%s, record=%s)", score, rank, is_new_record)
        return LeaderboardResult(
            is_new_record=is_new_record,
            rank=rank,
            notifications=notifications,
        )

    def clear(self) -> None:
        """Remove all entries."""
        self._save([])
