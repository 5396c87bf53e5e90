"""Completion alert: a synthesized chime played through QSoundEffect.

The chime is generated with numpy sine synthesis and an ADSR envelope,
written once as a WAV file into the sounds directory, and reused on
later launches.

Playback is best-effort.  A missing audio device, an unwritable cache
directory or a broken file only produce a log line.
"""

from __future__ import annotations

import io
import logging
import os
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect


# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = Path(
    os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache")
) / "studytimer" / "sounds"

ALERT_FILENAME = "timer_complete.wav"

SAMPLE_RATE = 44100

logger = logging.getLogger("studytimer.audio")


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    # Attack
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    # Decay
    d_end = min(a + decay, length)
    if decay > 0 and d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    # Sustain
    s_end = max(length - release, d_end)
    if s_end > d_end:
        env[d_end:s_end] = sustain_level
    # Release
    if release > 0 and s_end < length:
        env[s_end:] = np.linspace(sustain_level, 0.0, length - s_end)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    # Clip and scale
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


def generate_alert() -> bytes:
    """Three short beeps at 880 Hz followed by a held A5 + octave."""
    beep_dur = 0.09
    gap = 0.07
    parts: list[np.ndarray] = []
    for _ in range(3):
        tone = _sine(880.0, beep_dur) * 0.45
        env = _make_envelope(len(tone), attack=60, decay=150, sustain_level=0.5, release=300)
        parts.append(tone * env)
        parts.append(np.zeros(int(SAMPLE_RATE * gap)))

    held = _sine(880.0, 0.45) * 0.4 + _sine(1760.0, 0.45) * 0.08
    env = _make_envelope(
        len(held),
        attack=int(SAMPLE_RATE * 0.01),
        decay=int(SAMPLE_RATE * 0.1),
        sustain_level=0.45,
        release=int(SAMPLE_RATE * 0.3),
    )
    parts.append(held * env)
    parts.append(np.zeros(int(SAMPLE_RATE * 0.05)))
    return _to_wav_bytes(np.concatenate(parts))


# ═══════════════════════════════════════════════════════════════════════════
#  PLAYER
# ═══════════════════════════════════════════════════════════════════════════


class AlertSound(QObject):
    """The ``play_alert()`` collaborator used by ``TimerEngine``.

    Usage::

        alert = AlertSound(parent=self)
        alert.set_volume(70)
        alert.play_alert()
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
        enabled: bool = True,
        volume: int = 70,
    ) -> None:
        super().__init__(parent)
        self._enabled = enabled
        self._volume = max(0, min(volume, 100)) / 100.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effect: QSoundEffect | None = None

        path = self._ensure_wav_file()
        if path is not None:
            self._load_effect(path)

    # ── public API ────────────────────────────────────────────────────

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def is_loaded(self) -> bool:
        return self._effect is not None

    def set_volume(self, level: int) -> None:
        self._volume = max(0, min(level, 100)) / 100.0
        if self._effect is not None:
            self._effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play_alert(self) -> None:
        """Play the chime.  No-op when disabled or nothing is loaded."""
        if not self._enabled:
            return
        if self._effect is None:
            logger.debug("Alert sound not loaded, skipping playback")
            return
        if self._effect.status() == QSoundEffect.Status.Error:
            logger.warning("Alert sound could not be decoded: %s", self.path)
            return
        self._effect.play()

    @property
    def path(self) -> Path:
        return self._sounds_dir / ALERT_FILENAME

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_file(self) -> Path | None:
        path = self.path
        try:
            if not path.exists():
                self._sounds_dir.mkdir(parents=True, exist_ok=True)
                path.write_bytes(generate_alert())
        except OSError as error:
            logger.warning("Could not write alert sound to %s: %s", path, error)
            return None
        return path

    def _load_effect(self, path: Path) -> None:
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        effect.setVolume(self._volume)
        self._effect = effect
