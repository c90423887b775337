"""Tests for audio cues and tone synthesis."""

from unittest.mock import patch

import numpy as np
import pygame
import pytest

from brickbreaker.audio import (
    BRICK_FREQUENCIES, AudioNotifier, ToneAudio, synthesize_notes, synthesize_tone,
)
from brickbreaker.events import EventLog, EventType
from brickbreaker.storage import SOUND_KEY, MemoryStore


class RecordingAudio(AudioNotifier):
    """Notifier that remembers every cue it receives."""

    def __init__(self):
        self.cues = []

    def wall_bounce(self):
        self.cues.append('wall')

    def paddle_bounce(self):
        self.cues.append('paddle')

    def brick_hit(self, brick_type):
        self.cues.append(f'brick:{brick_type}')

    def powerup_collected(self, kind):
        self.cues.append(f'powerup:{kind}')

    def laser_fired(self):
        self.cues.append('laser')

    def stage_cleared(self):
        self.cues.append('stage_cleared')

    def life_lost(self):
        self.cues.append('life_lost')

    def game_over(self):
        self.cues.append('game_over')


class TestOnEvents:
    """Tests for event-to-cue dispatch."""

    def test_dispatch(self, events):
        events.emit(EventType.WALL_BOUNCE)
        events.emit(EventType.PADDLE_BOUNCE)
        events.emit(EventType.BRICK_HIT, brick_type='STRONG')
        events.emit(EventType.POWERUP_COLLECTED, kind='LASER')
        events.emit(EventType.SCORE_CHANGED, score=50, delta=50)
        events.emit(EventType.LIFE_LOST, lives=2)
        events.emit(EventType.STAGE_CLEARED, stage=1)
        events.emit(EventType.GAME_OVER, score=50, stage=1, is_new_record=True)

        audio = RecordingAudio()
        audio.on_events(events.drain())

        assert audio.cues == [
            'wall', 'paddle', 'brick:STRONG', 'powerup:LASER',
            'life_lost', 'stage_cleared', 'game_over',
        ]

    def test_laser_collapses_to_one_cue(self):
        events = EventLog()
        for _ in range(4):
            events.emit(EventType.BRICK_DESTROYED, brick_type='NORMAL', source='laser')
        events.emit(EventType.BRICK_DESTROYED, brick_type='NORMAL', source='ball')

        audio = RecordingAudio()
        audio.on_events(events.drain())
        assert audio.cues == ['laser']

    def test_base_notifier_is_silent(self, events):
        events.emit(EventType.WALL_BOUNCE)
        events.emit(EventType.BRICK_DESTROYED, source='laser')
        AudioNotifier().on_events(events.drain())


class TestSynthesis:
    """Tests for tone generation."""

    def test_tone_length_and_range(self):
        wave = synthesize_tone(400, 400, 0.1, 22050)
        assert len(wave) == int(22050 * 0.1)
        assert np.max(np.abs(wave)) <= 1.0

    def test_tone_decays(self):
        wave = synthesize_tone(400, 400, 0.2, 22050)
        head = np.max(np.abs(wave[:200]))
        tail = np.max(np.abs(wave[-200:]))
        assert tail < head * 0.05

    def test_square_wave_amplitude(self):
        wave = synthesize_tone(700, 700, 0.1, 22050, 'square', amplitude=0.5)
        assert np.max(np.abs(wave)) == pytest.approx(0.5)

    def test_tiny_duration_still_produces_a_sample(self):
        assert len(synthesize_tone(400, 400, 0.0, 22050)) == 1

    def test_notes_are_spaced(self):
        mix = synthesize_notes([600, 800, 1000], 0.1, 0.15, 1000)
        assert len(mix) == 100 * 2 + 150
        assert np.max(np.abs(mix)) <= 1.0


class TestToneAudio:
    """Tests for the synthesized-tone notifier."""

    def test_disabled_is_silent(self):
        audio = ToneAudio(enabled=False)
        assert not audio.available
        assert not audio.enabled
        audio.brick_hit('NORMAL')

    def test_reads_saved_preference(self):
        store = MemoryStore({SOUND_KEY: False})
        audio = ToneAudio(enabled=False, store=store)
        assert audio.toggle() is True
        assert store.get(SOUND_KEY) is True

    def test_toggle_persists(self):
        store = MemoryStore()
        audio = ToneAudio(enabled=False, store=store)
        assert audio.toggle() is False
        assert store.get(SOUND_KEY) is False

    def test_mixer_failure_leaves_audio_off(self):
        audio = ToneAudio(enabled=False)
        with patch('brickbreaker.audio.pygame.mixer.get_init', return_value=None), \
                patch('brickbreaker.audio.pygame.mixer.init', side_effect=pygame.error("no device")):
            audio._init_audio()
        assert not audio.available
        assert not audio.enabled

    def test_generates_every_sound(self):
        waves = ToneAudio._generate_waves(22050)
        expected = {'paddle', 'wall', 'powerup', 'laser', 'life_lost', 'stage_cleared', 'game_over'}
        expected |= {f'brick_{name}' for name in BRICK_FREQUENCIES}
        assert set(waves) == expected
        assert all(len(w) > 0 for w in waves.values())
