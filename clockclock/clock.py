"""Real-time clock of clocks on the oscilloscope."""

from datetime import datetime

import numpy as np
import soundfile as sf

from .animation import ANIM_DURATION_FRAMES, FaceAnimator
from .base import VectorScopePlayer
from .face import build
from .layout import FaceLayout, build_xy_from_face


def parse_time(text):
    """Parse 'HH:MM:SS' (or 'HH:MM') into an (hours, minutes, seconds) tuple."""
    parts = text.strip().split(':')
    if len(parts) not in (2, 3):
        raise ValueError(f"Expected HH:MM:SS (got {text!r})")
    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"Expected HH:MM:SS (got {text!r})") from None
    if len(values) == 2:
        values.append(0)
    return tuple(values)


class ClockFacePlayer(VectorScopePlayer):
    """
    Digital HH:MM:SS readout drawn with 144 small analog clocks.

    The audio sample clock doubles as the frame clock: every
    sample_rate / fps samples is one animation frame. On each new second
    all hands sweep forward to the new digits over duration_frames frames.
    """

    def __init__(self, fps=60, duration_frames=ANIM_DURATION_FRAMES,
                 padding=30.0, dials=False, now=datetime.now, **kwargs):
        super().__init__(**kwargs)
        if fps <= 0:
            raise ValueError(f"Frame rate must be positive (got {fps})")
        self.fps = fps
        self.dials = dials
        self.layout = FaceLayout(padding=padding)
        self._now = now

        t = self._now()
        self.animator = FaceAnimator(t.hour, t.minute, t.second,
                                     duration=duration_frames)
        self._frame_clock = 0
        self._shown = None
        self._shown_minute = None
        self._update_face()

    def _update_face(self):
        """Step the animation to the current sample position and retrace if needed."""
        frame_clock = self.global_sample * self.fps // self.sample_rate
        if frame_clock != self._frame_clock:
            self.animator.advance(frame_clock - self._frame_clock)
            self._frame_clock = frame_clock

        t = self._now()
        self.animator.observe(t.hour, t.minute, t.second)

        state = self.animator.render()
        if state is self._shown:
            return
        self._shown = state
        self.set_trace(build_xy_from_face(state, self.samples,
                                          self.layout, dials=self.dials))

        minute = (t.hour, t.minute)
        if minute != self._shown_minute:
            self._shown_minute = minute
            print(f"  {t.hour:02d}:{t.minute:02d}")

    def audio_callback(self, outdata, frames, time, status):
        """Custom callback that animates the face between seconds."""
        self._check_status(status)

        self._update_face()
        self._fill_buffer(outdata, frames)
        self.global_sample += frames

    def _on_start(self):
        print(f"🕐 Clock of clocks ({self.fps} fps, "
              f"{self.animator.duration}-frame sweeps)")
        print("  Press Ctrl+C to stop.")


def generate_wav(hours, minutes, seconds, output, rate=48000, secs=0.1,
                 amp=0.7, padding=30.0, dials=False):
    """Write one still face for the given time to a WAV file. L=X, R=Y."""
    state = build(hours, minutes, seconds)
    samples = int(rate * secs)
    xy = build_xy_from_face(state, samples, FaceLayout(padding=padding),
                            dials=dials)
    xy = np.clip(xy * float(amp), -1.0, 1.0)

    sf.write(output, xy.astype(np.float32), rate)
    print(f"Wrote {output} ({rate} Hz, {samples} frames). L=X, R=Y")
    return state
