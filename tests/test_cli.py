"""Tests for the command line interface."""

import pytest
import soundfile as sf

from clockclock.cli import build_parser, main


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: clockclock" in capsys.readouterr().out


def test_run_defaults():
    args = build_parser().parse_args(["run"])
    assert args.fps == 60
    assert args.duration_frames == 20
    assert args.dials is False
    assert args.rate == 48000


def test_wav_time_is_parsed():
    args = build_parser().parse_args(["wav", "--time", "23:59:58"])
    assert args.time == (23, 59, 58)
    assert build_parser().parse_args(["wav"]).time == (12, 34, 56)


def test_wav_writes_file(tmp_path, capsys):
    out = tmp_path / "clock.wav"
    assert main(["wav", "--time", "01:02:03", "-o", str(out),
                 "--rate", "8000", "--secs", "0.1"]) == 0
    data, rate = sf.read(str(out))
    assert rate == 8000
    assert data.shape == (800, 2)
    assert "Wrote" in capsys.readouterr().out


@pytest.mark.parametrize("bad", ["25:00:00", "12:61:00", "half past"])
def test_wav_rejects_bad_time(tmp_path, bad):
    with pytest.raises(SystemExit):
        main(["wav", "--time", bad, "-o", str(tmp_path / "x.wav")])
