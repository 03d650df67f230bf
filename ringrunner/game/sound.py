# ringrunner/game/sound.py
from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, Optional, Protocol

import numpy as np
import pygame

from .config import SAMPLE_RATE, SOUND_VOLUME, TONES

logger = logging.getLogger(__name__)


class SoundKind(str, Enum):
    JUMP = "jump"
    COLLECT = "collect"


class SoundEmitter(Protocol):
    def emit(self, kind: SoundKind) -> None: ...


class NullSound:
    """Silent emitter (muted sessions, headless env)."""

    def emit(self, kind: SoundKind) -> None:
        pass


def render_tone(wave: str, freq: float, decay_s: float,
                sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    One tone as int16 samples: oscillator * exponential decay that reaches
    1e-5 of full gain at `decay_s`.
    """
    n = max(1, int(sample_rate * decay_s))
    t = np.arange(n, dtype=np.float64) / sample_rate
    phase = (t * freq) % 1.0
    if wave == "sine":
        osc = np.sin(2.0 * np.pi * phase)
    elif wave == "triangle":
        osc = 4.0 * np.abs(phase - 0.5) - 1.0
    else:
        raise ValueError(f"Unknown waveform {wave!r}")
    env = np.power(1e-5, t / decay_s)
    return np.clip(osc * env * 32767.0, -32767, 32767).astype(np.int16)


class SynthSound:
    """
    Pre-renders one pygame Sound per SoundKind and plays it fire-and-forget.
    If the mixer can't start, stays silent (the game keeps running).
    """

    def __init__(self, volume: float = SOUND_VOLUME):
        self.volume = float(volume)
        self._sounds: Dict[SoundKind, pygame.mixer.Sound] = {}
        self._initialized = False

    def init(self) -> bool:
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)
            pygame.mixer.init()
            # the device may not honour pre_init (mixer already up): render at its rate
            rate, _, channels = pygame.mixer.get_init()
            for kind in SoundKind:
                wave, freq, decay = TONES[kind.value]
                mono = render_tone(wave, freq, decay, sample_rate=rate)
                if channels > 1:
                    buf = np.ascontiguousarray(np.repeat(mono[:, None], channels, axis=1))
                else:
                    buf = mono
                snd = pygame.sndarray.make_sound(buf)
                snd.set_volume(self.volume)
                self._sounds[kind] = snd
            self._initialized = True
            logger.info("Audio initialized (%d sounds)", len(self._sounds))
        except (pygame.error, ValueError) as e:
            logger.error("Failed to initialize audio: %s", e)
            self._initialized = False
        return self._initialized

    def emit(self, kind: SoundKind) -> None:
        if not self._initialized:
            return
        snd: Optional[pygame.mixer.Sound] = self._sounds.get(kind)
        if snd is None:
            logger.warning("Sound not found: %s", kind)
            return
        snd.play()

    def close(self):
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
