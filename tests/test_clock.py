"""Tests for the oscilloscope player, driven without an audio device."""

from datetime import time

import numpy as np
import pytest
import soundfile as sf

from clockclock.base import VectorScopePlayer
from clockclock.clock import ClockFacePlayer, generate_wav, parse_time
from clockclock.face import InvalidTimeComponent, build


class FakeClock:
    """Callable stand-in for datetime.now with a settable time."""

    def __init__(self, h, m, s):
        self.t = time(h, m, s)

    def set(self, h, m, s):
        self.t = time(h, m, s)

    def __call__(self):
        return self.t


def _callback(player, frames):
    out = np.zeros((frames, 2), dtype=np.float32)
    player.audio_callback(out, frames, None, None)
    return out


def test_fill_buffer_loops_trace():
    player = VectorScopePlayer(sample_rate=100, secs=0.04, amp=1.0)
    player.set_trace(np.array([[0.1, 0.1], [0.2, 0.2], [0.3, 0.3], [0.4, 0.4]]))
    out = np.zeros((6, 2), dtype=np.float32)
    player.audio_callback(out, 6, None, None)
    np.testing.assert_allclose(out[:, 0], [0.1, 0.2, 0.3, 0.4, 0.1, 0.2], rtol=1e-6)
    assert player.position == 2
    assert player.global_sample == 6


def test_set_trace_keeps_position_and_clips():
    player = VectorScopePlayer(sample_rate=100, secs=0.1, amp=2.0)
    player.position = 7
    player.set_trace(np.full((5, 2), 0.9))
    assert player.position == 2
    assert np.all(player.xy_data == np.float32(1.0))


def test_silence_without_trace():
    player = VectorScopePlayer(sample_rate=100, secs=0.1)
    out = np.ones((4, 2), dtype=np.float32)
    player.audio_callback(out, 4, None, None)
    assert not out.any()


def test_player_validates_args():
    with pytest.raises(ValueError):
        VectorScopePlayer(sample_rate=0)
    with pytest.raises(ValueError):
        ClockFacePlayer(fps=0, now=FakeClock(1, 2, 3))


def test_player_shows_current_time():
    clock = FakeClock(10, 0, 0)
    player = ClockFacePlayer(sample_rate=1200, secs=0.1, now=clock)
    assert player.xy_data.shape == (120, 2)
    assert player.animator.current == build(10, 0, 0)
    assert not player.animator.is_animating


def test_player_animates_on_new_second():
    clock = FakeClock(10, 0, 0)
    # 1200 Hz at 60 fps: one animation frame every 20 samples
    player = ClockFacePlayer(sample_rate=1200, secs=0.1, fps=60, now=clock)
    before = player.xy_data.copy()

    clock.set(10, 0, 1)
    _callback(player, 20)
    assert player.animator.is_animating
    assert player.animator.frame == 0

    _callback(player, 20 * 10)
    _callback(player, 20)
    assert player.animator.frame == 11
    assert player.animator.is_animating
    assert not np.array_equal(player.xy_data, before)

    for _ in range(15):
        _callback(player, 20)
    assert not player.animator.is_animating
    assert player.animator.current == build(10, 0, 1)


def test_idle_player_keeps_trace():
    clock = FakeClock(10, 0, 0)
    player = ClockFacePlayer(sample_rate=1200, secs=0.1, now=clock)
    trace = player.xy_data
    for _ in range(5):
        _callback(player, 40)
    assert player.xy_data is trace


def test_parse_time():
    assert parse_time("12:34:56") == (12, 34, 56)
    assert parse_time(" 7:05 ") == (7, 5, 0)
    with pytest.raises(ValueError):
        parse_time("noon")
    with pytest.raises(ValueError):
        parse_time("1:2:3:4")


def test_generate_wav(tmp_path):
    out = tmp_path / "face.wav"
    state = generate_wav(1, 2, 3, str(out), rate=8000, secs=0.25, amp=0.5)
    assert state.digits == (0, 1, 0, 2, 0, 3)
    data, rate = sf.read(str(out))
    assert rate == 8000
    assert data.shape == (2000, 2)
    assert np.abs(data).max() <= 0.5 + 1e-4


def test_generate_wav_rejects_bad_time(tmp_path):
    with pytest.raises(InvalidTimeComponent):
        generate_wav(24, 0, 0, str(tmp_path / "x.wav"))
