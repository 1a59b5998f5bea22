"""
Hand animation between two display states.

Every hand sweeps forward (increasing angle) from where it was to where
it needs to be, at constant speed, and lands exactly on the target after
ANIM_DURATION_FRAMES frames. Hands that are already in place do not move.
"""

import numpy as np

from .angles import forward_distance, normalize_angle
from .face import DisplayState, build

ANIM_DURATION_FRAMES = 20

# Forward distances below this are treated as "already there"
SNAP_EPSILON = 0.001


def _check_frames(elapsed_frames, duration):
    if duration <= 0:
        raise ValueError(f"Animation duration must be positive (got {duration})")
    if elapsed_frames < 0:
        raise ValueError(f"Elapsed frames must be >= 0 (got {elapsed_frames})")


def interpolate_angle(start, end, elapsed_frames, duration=ANIM_DURATION_FRAMES):
    """
    Angle (or array of angles) elapsed_frames into a forward sweep from
    start to end.
    """
    _check_frames(elapsed_frames, duration)
    end = normalize_angle(end)
    if elapsed_frames >= duration:
        return end

    start = normalize_angle(start)
    distance = forward_distance(start, end)
    step = np.asarray(distance) / duration
    moved = normalize_angle(start + step * elapsed_frames)
    out = np.where(np.asarray(distance) < SNAP_EPSILON, end, moved)
    if np.ndim(out) == 0:
        return float(out)
    return out


def interpolate(previous, target, elapsed_frames, duration=ANIM_DURATION_FRAMES):
    """
    Display state elapsed_frames into the transition from previous to target.

    All hands share the same frame count. Once the duration is reached the
    target itself is returned.
    """
    _check_frames(elapsed_frames, duration)
    if elapsed_frames >= duration:
        return target
    angles = interpolate_angle(previous.angles, target.angles,
                               elapsed_frames, duration)
    return DisplayState.from_angles(target.digits, angles)


class FaceAnimator:
    """
    Frame-driven animation state for a render loop.

    Holds the two snapshots being animated between, the last frame that
    was computed and the frame counter. The render loop calls observe()
    with the wall-clock time, render() once per frame and advance() after
    each frame.
    """

    def __init__(self, hours, minutes, seconds, duration=ANIM_DURATION_FRAMES):
        if duration <= 0:
            raise ValueError(f"Animation duration must be positive (got {duration})")
        self.duration = duration
        self.target = build(hours, minutes, seconds)
        self.previous = self.target
        self.current = self.target
        self.frame = duration
        self.last_second = seconds

    @property
    def is_animating(self):
        return self.frame < self.duration

    def observe(self, hours, minutes, seconds):
        """
        Start a transition if the second has changed. Returns True when a
        new transition begins.

        An in-flight transition is abandoned and the new one starts from
        the last computed frame.
        """
        if seconds == self.last_second:
            return False
        target = build(hours, minutes, seconds)
        self.previous = self.current
        self.target = target
        self.frame = 0
        self.last_second = seconds
        return True

    def render(self):
        """Compute the frame for the current counter and remember it."""
        self.current = interpolate(self.previous, self.target,
                                   min(self.frame, self.duration), self.duration)
        return self.current

    def advance(self, frames=1):
        if frames < 0:
            raise ValueError(f"Cannot advance by {frames} frames")
        # Saturate once idle so the counter doesn't grow forever
        self.frame = min(self.frame + frames, self.duration)
