import logging
import math
import os
import struct
import wave

import pygame

from .effects import PaddleHit, ScoreChanged, WallBounce

logger = logging.getLogger(__name__)

DEFAULT_ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")

# name -> (frequency Hz, duration ms, volume)
TONES = {
    "wall": (600, 70, 0.35),
    "paddle": (440, 55, 0.40),
    "score": (220, 120, 0.45),
}

EFFECT_SOUNDS = {
    WallBounce: "wall",
    PaddleHit: "paddle",
    ScoreChanged: "score",
}


def generate_tone(path, freq=440, duration_ms=100, volume=0.5, sample_rate=44100):
    """Write a mono 16-bit sine blip with a linear fade-out."""
    n_samples = int(sample_rate * (duration_ms / 1000.0))
    with wave.open(path, "w") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        frames = bytearray()
        for i in range(n_samples):
            t = i / sample_rate
            amp = volume * (1.0 - i / n_samples)
            frames += struct.pack("<h", int(amp * 32767 * math.sin(2 * math.pi * freq * t)))
        wf.writeframes(bytes(frames))


class SoundManager:
    """
    Plays a short blip for every effect of a frame. Tones are generated into
    assets_dir on first run. Without an audio device every call is a no-op.
    """

    def __init__(self, assets_dir=DEFAULT_ASSETS_DIR, enabled=True):
        self.assets_dir = assets_dir
        self.sounds = {}

        # Rate limit so a ball stuck on a paddle doesn't buzz
        self._last_play = {}
        self._min_gap_ms = 40

        if not enabled:
            return

        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as exc:
                logger.warning("Audio unavailable, sound disabled: %s", exc)
                return

        os.makedirs(self.assets_dir, exist_ok=True)
        for name, (freq, duration_ms, volume) in TONES.items():
            path = os.path.join(self.assets_dir, f"{name}.wav")
            if not os.path.exists(path):
                generate_tone(path, freq=freq, duration_ms=duration_ms, volume=volume)
            try:
                self.sounds[name] = pygame.mixer.Sound(path)
            except pygame.error as exc:
                logger.warning("Could not load %s, skipping: %s", path, exc)

    @property
    def enabled(self):
        return bool(self.sounds)

    def play(self, name):
        sound = self.sounds.get(name)
        if sound is None:
            return
        now = pygame.time.get_ticks()
        if now - self._last_play.get(name, -self._min_gap_ms) >= self._min_gap_ms:
            sound.play()
            self._last_play[name] = now

    def handle(self, effects):
        for effect in effects:
            name = EFFECT_SOUNDS.get(type(effect))
            if name:
                self.play(name)
