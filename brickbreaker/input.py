"""
Input sources for Brick Breaker.

An input source turns device events into GameSession commands:
`set_paddle_direction(-1|0|1)` for keys, `move_paddle_toward(x)` for a
pointer, and `launch()` for a tap or click. It also maps keys to the
session's screen commands (start, pause, retry, menu).

Classes:
    InputSource: Abstract interface for input backends
    KeyboardMouseInput: pygame keyboard and mouse
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

import pygame

from .game_state import GameState
from .logging import get_logger

if TYPE_CHECKING:
    from .session import GameSession

log = get_logger('input')


class InputSource(ABC):
    """Abstract base class for input sources."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event, session: 'GameSession') -> None:
        """Process one device event.

        Args:
            event: pygame event
            session: Session receiving the resulting commands
        """
        pass

    @abstractmethod
    def update(self, session: 'GameSession') -> None:
        """Apply continuous steering for this tick.

        Args:
            session: Session receiving paddle commands
        """
        pass


class KeyboardMouseInput(InputSource):
    """Arrow keys or the mouse steer; click or Space launches.

    Keyboard steering wins while a direction key is held. Moving the
    mouse hands control back to the pointer.

    Keys:
        Left/Right, A/D   steer
        Space             launch, or pause once the ball is in play
        P                 pause
        Enter             start / retry
        R                 retry after game over
        C                 continue (revive) after game over
        S                 stats screen from the menu
        X                 reset records on the game-over or stats screen
        M                 toggle sound
        Esc               back to menu, quit from the menu

    Attributes:
        quit_requested: Player asked to leave the program
    """

    LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
    RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)

    def __init__(
        self,
        scale: float = 1.0,
        on_toggle_sound: Optional[Callable[[], bool]] = None,
    ):
        """Initialize input state.

        Args:
            scale: Window pixels per playfield pixel
            on_toggle_sound: Called when the sound key is pressed
        """
        self._scale = scale
        self._on_toggle_sound = on_toggle_sound
        self._left = False
        self._right = False
        self._pointer_x: Optional[float] = None
        self.quit_requested = False

    @property
    def pointer_x(self) -> Optional[float]:
        """Last pointer position in playfield coordinates."""
        return self._pointer_x

    @property
    def direction(self) -> int:
        return int(self._right) - int(self._left)

    def handle_event(self, event: pygame.event.Event, session: 'GameSession') -> None:
        if event.type == pygame.QUIT:
            self.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            self._handle_key(event.key, session)

        elif event.type == pygame.KEYUP:
            if event.key in self.LEFT_KEYS:
                self._left = False
            elif event.key in self.RIGHT_KEYS:
                self._right = False

        elif event.type == pygame.MOUSEMOTION:
            self._pointer_x = event.pos[0] / self._scale

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._pointer_x = event.pos[0] / self._scale
            if session.state == GameState.MENU:
                session.start()
            elif session.state == GameState.PLAYING and session.awaiting_launch:
                session.launch()

    def _handle_key(self, key: int, session: 'GameSession') -> None:
        state = session.state

        if key in self.LEFT_KEYS:
            self._left = True
        elif key in self.RIGHT_KEYS:
            self._right = True

        elif key == pygame.K_SPACE:
            if state == GameState.MENU:
                session.start()
            elif state == GameState.PLAYING:
                if session.awaiting_launch and not session.is_paused:
                    session.launch()
                else:
                    session.toggle_pause()

        elif key == pygame.K_p:
            session.toggle_pause()

        elif key == pygame.K_RETURN:
            if state == GameState.MENU:
                session.start()
            elif state == GameState.GAME_OVER:
                session.retry()

        elif key == pygame.K_r and state == GameState.GAME_OVER:
            session.retry()

        elif key == pygame.K_c and state == GameState.GAME_OVER:
            session.revive()

        elif key == pygame.K_s and state == GameState.MENU:
            session.show_stats()

        elif key == pygame.K_x and state in (GameState.GAME_OVER, GameState.STATS):
            session.reset_records()

        elif key == pygame.K_m and self._on_toggle_sound is not None:
            self._on_toggle_sound()

        elif key == pygame.K_ESCAPE:
            if state == GameState.MENU:
                self.quit_requested = True
            else:
                session.quit_to_menu()

    def update(self, session: 'GameSession') -> None:
        if session.state != GameState.PLAYING or session.is_paused:
            return

        direction = self.direction
        if direction != 0:
            self._pointer_x = None
            session.set_paddle_direction(direction)
        elif self._pointer_x is not None:
            session.set_paddle_direction(0)
            session.move_paddle_toward(self._pointer_x)
        else:
            session.set_paddle_direction(0)
