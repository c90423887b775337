"""Game states for a Brick Breaker session.

The session reports one of these values via its `state` property.
Pausing and waiting for a launch are sub-flags of PLAYING, not states
of their own; `GameSession.is_paused` and `GameSession.awaiting_launch`
expose them.

Transitions:
    MENU -> PLAYING        start()
    PLAYING -> GAME_OVER   lives exhausted or final stage cleared
    GAME_OVER -> PLAYING   retry() or revive()
    MENU -> STATS          show_stats()
    any -> MENU            quit_to_menu()
"""
from enum import Enum


class GameState(Enum):
    """Top-level session states."""
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    STATS = "stats"
