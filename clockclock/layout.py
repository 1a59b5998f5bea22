"""Screen geometry for the clock face and conversion to an XY trace."""

import numpy as np

from .angles import normalize_angle
from .digits import GRID_COLUMNS, GRID_ROWS
from .face import CELL_COUNT


def point_on_circle(cx, cy, radius, angle):
    """
    Point at angle degrees on a circle, 0 pointing right and 90 up.

    Works on scalars or numpy arrays.
    """
    rad = np.radians(normalize_angle(angle))
    return cx + radius * np.cos(rad), cy + radius * np.sin(rad)


class FaceLayout:
    """
    Positions of the 144 small clocks.

    Cells sit side by side. The two digits of a pair are padding / 3
    apart and pairs are padding apart. Units are arbitrary; y grows up
    with row 0 at the top.
    """

    def __init__(self, diameter=45.0, padding=30.0):
        if diameter <= 0:
            raise ValueError(f"Clock diameter must be positive (got {diameter})")
        if padding < 0:
            raise ValueError(f"Padding can't be negative (got {padding})")
        self.diameter = float(diameter)
        self.padding = float(padding)

    @property
    def radius(self):
        return self.diameter / 2.0

    @property
    def cell_width(self):
        return self.diameter * GRID_COLUMNS

    @property
    def cell_height(self):
        return self.diameter * GRID_ROWS

    def cell_offsets(self):
        """Left edge of each cell."""
        offsets = []
        x = 0.0
        for i in range(CELL_COUNT):
            offsets.append(x)
            gap = self.padding / 3.0 if i % 2 == 0 else self.padding
            x += self.cell_width + gap
        return np.array(offsets)

    @property
    def width(self):
        return self.cell_offsets()[-1] + self.cell_width

    @property
    def height(self):
        return self.cell_height

    def centers(self):
        """Clock centres, shaped (CELL_COUNT, GRID_ROWS, GRID_COLUMNS, 2)."""
        cols = np.arange(GRID_COLUMNS) * self.diameter + self.radius
        rows = -(np.arange(GRID_ROWS) * self.diameter + self.radius)
        out = np.empty((CELL_COUNT, GRID_ROWS, GRID_COLUMNS, 2))
        out[..., 0] = self.cell_offsets()[:, None, None] + cols[None, None, :]
        out[..., 1] = rows[None, :, None]
        return out

    def to_unit(self, xy):
        """Map layout coordinates into [-1, 1], centred, aspect preserved."""
        center = np.array([self.width / 2.0, -self.height / 2.0])
        span = max(self.width, self.height)
        return (np.asarray(xy) - center) / (span / 2.0)


def resample_polyline(p, n):
    """Resample a polyline p (Nx2) to n points at approximately constant speed."""
    if len(p) < 2:
        return np.repeat(p[:1], n, axis=0) if len(p) == 1 else np.zeros((n, 2), dtype=np.float64)
    diffs = np.diff(p, axis=0)
    seglen = np.sqrt((diffs**2).sum(axis=1))
    s = np.concatenate(([0.0], np.cumsum(seglen)))
    total = s[-1]
    if total <= 0:
        return np.repeat(p[:1], n, axis=0)
    t = np.linspace(0.0, total, n)
    x = np.interp(t, s, p[:, 0])
    y = np.interp(t, s, p[:, 1])
    return np.column_stack((x, y))


def face_polyline(state, layout=None, dials=False, dial_pts=24):
    """
    One continuous path through every clock of a display state.

    Each clock is visited centre -> hour tip -> centre -> minute tip ->
    centre, optionally followed by a lap of its dial.
    """
    layout = layout or FaceLayout()
    centers = layout.centers().reshape(-1, 2)
    angles = state.angles.reshape(-1, 2)
    r = layout.radius
    cx, cy = centers[:, 0], centers[:, 1]

    hx, hy = point_on_circle(cx, cy, r, angles[:, 0])
    mx, my = point_on_circle(cx, cy, r, angles[:, 1])
    hour_tip = np.column_stack((hx, hy))
    minute_tip = np.column_stack((mx, my))

    parts = [centers, hour_tip, centers, minute_tip, centers]
    if dials:
        lap = np.linspace(0.0, 360.0, dial_pts + 1)
        for a in lap:
            parts.append(np.column_stack(point_on_circle(cx, cy, r, a)))
        parts.append(centers)

    # (clocks, points per clock, 2) -> flat path, clock by clock
    return np.stack(parts, axis=1).reshape(-1, 2)


def build_xy_from_face(state, samples, layout=None, dials=False):
    """Convert a display state to an XY array of shape (samples, 2) in [-1, 1]."""
    layout = layout or FaceLayout()
    path = face_polyline(state, layout, dials=dials)
    xy = layout.to_unit(resample_polyline(path, samples))
    # Force seamless loop wrap
    xy[-1] = xy[0]
    return xy
