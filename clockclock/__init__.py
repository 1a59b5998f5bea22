"""
Clockclock - a digital clock made of analog clocks.

Each digit of an HH:MM:SS readout is a 4x6 grid of small analog clocks
whose hands trace the digit. When the second changes every hand sweeps
forward to its new position instead of jumping.

Basic usage (oscilloscope in XY mode on the sound card):
    $ clockclock run
    $ clockclock run --dials --fps 50
    $ clockclock wav --time 12:34:56 -o face.wav

Or use as a library:
    from clockclock import FaceAnimator
    anim = FaceAnimator(10, 0, 0)
    anim.observe(10, 0, 1)
    frame = anim.render()
"""

__version__ = "0.1.0"

from .angles import normalize_angle, forward_distance
from .digits import HandPair, InvalidDigit, lookup
from .face import DigitCell, DisplayState, InvalidTimeComponent, build
from .animation import ANIM_DURATION_FRAMES, FaceAnimator, interpolate
from .layout import FaceLayout, build_xy_from_face

__all__ = [
    # Angles
    "normalize_angle",
    "forward_distance",
    # Digits and display
    "HandPair",
    "InvalidDigit",
    "lookup",
    "DigitCell",
    "DisplayState",
    "InvalidTimeComponent",
    "build",
    # Animation
    "ANIM_DURATION_FRAMES",
    "FaceAnimator",
    "interpolate",
    # Drawing
    "FaceLayout",
    "build_xy_from_face",
    # Meta
    "__version__",
]
