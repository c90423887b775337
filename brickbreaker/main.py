#!/usr/bin/env python3
"""Brick Breaker - Standalone Entry Point.

Play with mouse or keyboard.

Usage:
    python -m brickbreaker
    python -m brickbreaker --scale 1.5
    python -m brickbreaker --no-sound --seed 42
"""

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

import pygame

from .audio import ToneAudio
from .config import CANVAS_WIDTH, CANVAS_HEIGHT, TICKS_PER_SECOND, WINDOW_SCALE
from .game_state import GameState
from .input import KeyboardMouseInput
from .logging import get_logger
from .session import GameSession
from .skins import SKINS
from .storage import JsonFileStore, LeaderboardStore, StatsStore

log = get_logger('main')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Brick Breaker - Standalone")

    # Display options
    parser.add_argument('--scale', type=float, default=WINDOW_SCALE,
                        help='Window size multiplier')
    parser.add_argument('--skin', type=str, default='geometric',
                        choices=sorted(SKINS), help='Visual skin')

    # Game options
    parser.add_argument('--no-sound', action='store_true', help='Disable audio')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for launch angles and drops')
    parser.add_argument('--save-file', type=Path, default=None,
                        help='Save file (default: platform data directory)')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run Brick Breaker standalone."""
    args = parse_args(argv)

    # Initialize pygame
    pygame.init()
    pygame.font.init()

    scale = max(0.25, args.scale)
    window_size = (int(CANVAS_WIDTH * scale), int(CANVAS_HEIGHT * scale))
    window = pygame.display.set_mode(window_size)
    pygame.display.set_caption("Brick Breaker")
    canvas = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))

    # Collaborators
    store = JsonFileStore(args.save_file)
    audio = ToneAudio(enabled=not args.no_sound, store=store)
    session = GameSession(
        audio=audio,
        stats_store=StatsStore(store),
        leaderboard=LeaderboardStore(store),
        rng=random.Random(args.seed),
    )
    skin = SKINS[args.skin]()
    controls = KeyboardMouseInput(scale=scale, on_toggle_sound=audio.toggle)
    log.info("Saving to %s", store.path)

    print("\n" + "=" * 50)
    print("BRICK BREAKER")
    print("=" * 50)
    print("Controls:")
    print("  - Mouse or Left/Right to move the paddle")
    print("  - Click or SPACE to launch")
    print("  - SPACE / P to pause")
    print("  - M to toggle sound")
    print("  - ESC for menu (ESC again to quit)")
    print("=" * 50 + "\n")

    clock = pygame.time.Clock()

    while not controls.quit_requested:
        clock.tick(TICKS_PER_SECOND)

        for event in pygame.event.get():
            controls.handle_event(event, session)

        controls.update(session)
        events = session.tick()
        skin.on_events(events)
        if not session.is_paused:
            skin.update()

        snapshot = session.snapshot()
        skin.render(snapshot, canvas)
        if snapshot.state == GameState.STATS:
            skin.render_stats(canvas, session.stats, session.leaderboard.get_top_scores())

        if scale == 1.0:
            window.blit(canvas, (0, 0))
        else:
            pygame.transform.smoothscale(canvas, window_size, window)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
