"""Base class for streaming XY traces to an oscilloscope."""

import numpy as np


class VectorScopePlayer:
    """
    Real-time XY oscilloscope audio streaming.

    Left channel drives X, right channel drives Y. Subclasses either set
    a looping trace with set_trace() or override audio_callback().
    """

    def __init__(self, sample_rate=48000, secs=0.1, amp=0.7, device=None):
        if sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive (got {sample_rate})")
        if secs <= 0:
            raise ValueError(f"Trace duration must be positive (got {secs})")
        self.sample_rate = sample_rate
        self.secs = secs
        self.amp = amp
        self.device = device
        self.samples = int(sample_rate * secs)
        self.xy_data = None
        self.position = 0
        self.global_sample = 0

    def set_trace(self, xy):
        """
        Replace the looping trace, scaled by amp.

        The read position carries over so a trace that is swapped many
        times per loop is still drawn end to end.
        """
        self.xy_data = np.clip(np.asarray(xy) * self.amp, -1.0, 1.0).astype(np.float32)
        self.position %= len(self.xy_data)

    def _check_status(self, status):
        if status:
            print(f"Audio status: {status}")

    def _fill_buffer(self, outdata, frames):
        """Fill output buffer by looping through xy_data."""
        if self.xy_data is None:
            outdata.fill(0)
            return

        data_len = len(self.xy_data)
        out_idx = 0

        while out_idx < frames:
            chunk_size = min(frames - out_idx, data_len - self.position)
            outdata[out_idx:out_idx + chunk_size] = self.xy_data[self.position:self.position + chunk_size]
            self.position = (self.position + chunk_size) % data_len
            out_idx += chunk_size

    def audio_callback(self, outdata, frames, time, status):
        """Sounddevice callback. Override for custom behavior."""
        self._check_status(status)
        self._fill_buffer(outdata, frames)
        self.global_sample += frames

    def _on_start(self):
        """Called when stream starts. Override for custom message."""
        print("Playing. Press Ctrl+C to stop.")

    def _on_stop(self):
        """Called when stream stops. Override for custom message."""
        print("\nStopped.")

    def run(self):
        """Start the audio stream and block until Ctrl+C."""
        # PortAudio is only needed once we actually play
        import sounddevice as sd

        with sd.OutputStream(
            samplerate=self.sample_rate,
            channels=2,
            dtype='float32',
            callback=self.audio_callback,
            device=self.device
        ):
            self._on_start()
            try:
                while True:
                    sd.sleep(1000)
            except KeyboardInterrupt:
                self._on_stop()


def add_common_args(parser, secs_default=0.1):
    """Add stream arguments shared by every subcommand."""
    parser.add_argument("--rate", type=int, default=48000,
                        help="Sample rate in Hz")
    parser.add_argument("--secs", type=float, default=secs_default,
                        help="Duration of one trace cycle")
    parser.add_argument("--amp", type=float, default=0.7,
                        help="Output amplitude (0-1)")
    parser.add_argument("--device", type=str, default=None,
                        help="Audio output device")


def common_args_from_parsed(args):
    """Extract common arguments as a dict for passing to VectorScopePlayer."""
    return {
        'sample_rate': args.rate,
        'secs': args.secs,
        'amp': args.amp,
        'device': args.device,
    }
