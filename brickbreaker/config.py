"""Configuration for the Brick Breaker game.

Contains canvas dimensions, physics constants, brick grid layout,
power-up tuning and color definitions. Display, storage and audio
settings can be overridden from the environment or a `.env` file.
"""

import os
from pathlib import Path
from typing import Dict, Tuple

from dotenv import load_dotenv

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Canvas (simulation units are pixels, one step per tick)
CANVAS_WIDTH: int = 480
CANVAS_HEIGHT: int = 600
TICKS_PER_SECOND: int = 60

# Window scale for the standalone runner
WINDOW_SCALE: float = _get_float('BRICKBREAKER_WINDOW_SCALE', 1.0)

# Paddle
PADDLE_WIDTH: float = 80.0
PADDLE_HEIGHT: float = 12.0
PADDLE_MARGIN: float = 10.0       # Gap between paddle bottom and canvas bottom
PADDLE_MAX_SPEED: float = 8.0     # Pixels per tick
PADDLE_MAX_WIDTH: float = 150.0
PADDLE_POINTER_SMOOTHING: float = 0.2

# Ball
BALL_RADIUS: float = 6.0
BALL_SPEED: float = 4.0           # Pixels per tick
BALL_MAX_SPEED_FACTOR: float = 1.5
PADDLE_SPIN_FACTOR: float = 3.0

# Brick grid
BRICK_ROWS: int = 4
BRICK_COLS: int = 8
BRICK_WIDTH: float = 50.0
BRICK_HEIGHT: float = 20.0
BRICK_PADDING: float = 4.0
GRID_OFFSET_X: float = 10.0
GRID_OFFSET_Y: float = 60.0
POINTS_PER_HEALTH: int = 10

# Power-ups
POWERUP_DROP_CHANCE: float = 0.15
POWERUP_WIDTH: float = 20.0
POWERUP_HEIGHT: float = 10.0
POWERUP_FALL_SPEED: float = 2.0
POWERUP_POINTS: int = 50
PADDLE_EXPAND_STEP: float = 20.0
PADDLE_EXPAND_TICKS: int = 10 * TICKS_PER_SECOND
SLOW_BALL_FACTOR: float = 0.8
SLOW_BALL_TICKS: int = 8 * TICKS_PER_SECOND
MAX_BALLS: int = 5
LASER_TICKS: int = 300
LASER_POINTS: int = 15

# Session rules
STARTING_LIVES: int = 3
MAX_LIVES: int = 5
MAX_STAGES: int = 20
LEADERBOARD_SIZE: int = 10
GAME_OVER_TOP_SCORES: int = 5

# Storage
DATA_DIR: str = os.getenv('BRICKBREAKER_DATA_DIR', '')

# Audio
AUDIO_ENABLED: bool = _get_bool('BRICKBREAKER_AUDIO_ENABLED', True)
MASTER_VOLUME: float = _get_float('BRICKBREAKER_MASTER_VOLUME', 0.3)

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (15, 15, 35)

# Brick colors by type name
BRICK_COLORS: Dict[str, Tuple[int, int, int]] = {
    'NORMAL': (231, 76, 60),
    'STRONG': (192, 57, 43),
    'SPECIAL': (243, 156, 18),
    'UNBREAKABLE': (52, 73, 94),
}

# Power-up colors by type name
POWERUP_COLORS: Dict[str, Tuple[int, int, int]] = {
    'PADDLE_EXPAND': (52, 152, 219),
    'SLOW_BALL': (155, 89, 182),
    'MULTI_BALL': (241, 196, 15),
    'LASER': (46, 204, 113),
    'EXTRA_LIFE': (231, 76, 60),
}
