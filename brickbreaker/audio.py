"""
Audio feedback for Brick Breaker.

The simulation reports sounds through the AudioNotifier interface. The
base class is silent; ToneAudio synthesizes short tones with numpy and
plays them through pygame's mixer.

Classes:
    AudioNotifier: Silent base implementation, dispatches events
    ToneAudio: Procedurally generated tones via pygame.sndarray
"""

from typing import Dict, Iterable, Optional, Sequence

import numpy as np
import pygame

from .config import AUDIO_ENABLED, MASTER_VOLUME
from .events import EventType, GameEvent
from .logging import get_logger
from .storage import SOUND_KEY, KeyValueStore

log = get_logger('audio')


class AudioNotifier:
    """Receives sound cues from the session.

    Every cue is a no-op here, so the base class doubles as the
    silent default. Subclasses override only what they can play.
    """

    def wall_bounce(self) -> None:
        """Ball bounced off a side wall or the ceiling."""
        pass

    def paddle_bounce(self) -> None:
        """Ball bounced off the paddle."""
        pass

    def brick_hit(self, brick_type: str) -> None:
        """Ball hit a brick of the given type name."""
        pass

    def powerup_collected(self, kind: str) -> None:
        """A power-up of the given type name was caught."""
        pass

    def laser_fired(self) -> None:
        """The laser destroyed at least one brick this tick."""
        pass

    def stage_cleared(self) -> None:
        """Every brick on the stage is gone."""
        pass

    def life_lost(self) -> None:
        """The last ball fell past the paddle."""
        pass

    def game_over(self) -> None:
        """The session ended."""
        pass

    def on_events(self, events: Iterable[GameEvent]) -> None:
        """Translate one tick's events into sound cues.

        Laser destructions collapse into a single cue per tick.
        """
        laser_fired = False
        for event in events:
            if event.type == EventType.WALL_BOUNCE:
                self.wall_bounce()
            elif event.type == EventType.PADDLE_BOUNCE:
                self.paddle_bounce()
            elif event.type == EventType.BRICK_HIT:
                self.brick_hit(event.data.get('brick_type', 'NORMAL'))
            elif event.type == EventType.BRICK_DESTROYED:
                if event.data.get('source') == 'laser':
                    laser_fired = True
            elif event.type == EventType.POWERUP_COLLECTED:
                self.powerup_collected(event.data.get('kind', ''))
            elif event.type == EventType.STAGE_CLEARED:
                self.stage_cleared()
            elif event.type == EventType.LIFE_LOST:
                self.life_lost()
            elif event.type == EventType.GAME_OVER:
                self.game_over()

        if laser_fired:
            self.laser_fired()


def synthesize_tone(
    start_freq: float,
    end_freq: float,
    duration: float,
    sample_rate: int,
    waveform: str = 'sine',
    amplitude: float = 1.0,
) -> np.ndarray:
    """Generate a mono tone with an exponential pitch sweep and decay.

    Args:
        start_freq: Frequency at t=0 in Hz
        end_freq: Frequency at t=duration in Hz (equal to start for a flat tone)
        duration: Length in seconds
        sample_rate: Samples per second
        waveform: 'sine' or 'square'
        amplitude: Peak amplitude in [0, 1]

    Returns:
        Float array in [-amplitude, amplitude]
    """
    num_samples = max(1, int(sample_rate * duration))
    t = np.linspace(0.0, 1.0, num_samples, endpoint=False)

    frequencies = start_freq * (end_freq / start_freq) ** t
    phase = np.cumsum(2.0 * np.pi * frequencies / sample_rate)
    wave = np.sin(phase)
    if waveform == 'square':
        wave = np.sign(wave)

    # Exponential decay to 1% of the peak
    envelope = 0.01 ** t
    return wave * envelope * amplitude


def synthesize_notes(
    frequencies: Sequence[float],
    spacing: float,
    note_duration: float,
    sample_rate: int,
    amplitude: float = 1.0,
) -> np.ndarray:
    """Mix a sequence of flat sine notes starting `spacing` seconds apart."""
    offset = int(sample_rate * spacing)
    note_samples = max(1, int(sample_rate * note_duration))
    total = offset * (len(frequencies) - 1) + note_samples
    mix = np.zeros(total)

    for i, freq in enumerate(frequencies):
        note = synthesize_tone(freq, freq, note_duration, sample_rate, amplitude=amplitude)
        start = i * offset
        mix[start:start + len(note)] += note

    return np.clip(mix, -1.0, 1.0)


# Brick tone by type name
BRICK_FREQUENCIES: Dict[str, float] = {
    'NORMAL': 600.0,
    'STRONG': 700.0,
    'SPECIAL': 800.0,
    'UNBREAKABLE': 500.0,
}


class ToneAudio(AudioNotifier):
    """Plays synthesized tones for each sound cue.

    If the mixer cannot start (no audio device, headless CI) the
    notifier stays silent and the game runs normally.

    Attributes:
        available: Mixer started and sounds were generated

    Examples:
        >>> audio = ToneAudio(enabled=False)
        >>> audio.enabled
        False
    """

    def __init__(
        self,
        enabled: bool = True,
        store: Optional[KeyValueStore] = None,
        volume: float = MASTER_VOLUME,
    ):
        """Initialize and, if enabled, generate all sounds.

        Args:
            enabled: Master switch for this instance
            store: Where the player's sound on/off preference lives
            volume: Playback volume in [0, 1]
        """
        self._store = store
        self._volume = volume
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self.available = False

        preference = store.get(SOUND_KEY, True) if store is not None else True
        self._preference = bool(preference)

        if enabled and AUDIO_ENABLED:
            self._init_audio()

    @property
    def enabled(self) -> bool:
        """Sounds will actually play."""
        return self.available and self._preference

    def toggle(self) -> bool:
        """Flip and persist the sound preference.

        Returns:
            New preference value
        """
        self._preference = not self._preference
        if self._store is not None:
            self._store.set(SOUND_KEY, self._preference)
        log.info("Sound %s", 'on' if self._preference else 'off')
        return self._preference

    def _init_audio(self) -> None:
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
            sample_rate, _, channels = pygame.mixer.get_init()

            waves = self._generate_waves(sample_rate)
            for name, wave in waves.items():
                sound = self._make_sound(wave, channels)
                sound.set_volume(self._volume)
                self._sounds[name] = sound

        except (pygame.error, ValueError) as e:
            log.warning("Audio initialization failed, continuing silently: %s", e)
            self._sounds = {}
            return

        self.available = True
        log.debug("Generated %d sounds at %d Hz", len(self._sounds), sample_rate)

    @staticmethod
    def _generate_waves(sample_rate: int) -> Dict[str, np.ndarray]:
        waves = {
            'paddle': synthesize_tone(400, 400, 0.1, sample_rate),
            'wall': synthesize_tone(350, 350, 0.08, sample_rate, amplitude=0.6),
            'powerup': synthesize_tone(800, 1200, 0.15, sample_rate),
            'laser': synthesize_tone(1500, 600, 0.1, sample_rate, 'square', amplitude=0.5),
            'life_lost': synthesize_tone(500, 200, 0.3, sample_rate),
            'stage_cleared': synthesize_notes([600, 800, 1000], 0.1, 0.15, sample_rate),
            'game_over': synthesize_notes([400, 350, 300, 250], 0.1, 0.1, sample_rate),
        }
        for name, freq in BRICK_FREQUENCIES.items():
            waves[f'brick_{name}'] = synthesize_tone(
                freq, freq, 0.15, sample_rate, 'square', amplitude=0.5
            )
        return waves

    @staticmethod
    def _make_sound(wave: np.ndarray, channels: int) -> pygame.mixer.Sound:
        samples = (wave * 32767).astype(np.int16)
        if channels > 1:
            samples = np.ascontiguousarray(np.column_stack([samples] * channels))
        return pygame.sndarray.make_sound(samples)

    def _play(self, name: str) -> None:
        if not self.enabled:
            return
        sound = self._sounds.get(name)
        if sound is not None:
            sound.play()

    def wall_bounce(self) -> None:
        self._play('wall')

    def paddle_bounce(self) -> None:
        self._play('paddle')

    def brick_hit(self, brick_type: str) -> None:
        self._play(f'brick_{brick_type}' if brick_type in BRICK_FREQUENCIES else 'brick_NORMAL')

    def powerup_collected(self, kind: str) -> None:
        self._play('powerup')

    def laser_fired(self) -> None:
        self._play('laser')

    def stage_cleared(self) -> None:
        self._play('stage_cleared')

    def life_lost(self) -> None:
        self._play('life_lost')

    def game_over(self) -> None:
        self._play('game_over')
