"""
Digit glyphs drawn with a grid of tiny analog clocks.

Each decimal digit is a fixed 4 column x 6 row grid of clocks. A clock that
is part of the glyph has its two hands pointing along the strokes of the
digit; every other clock rests with both hands folded onto the same corner.

Angles are in degrees, 0 pointing right and growing counter-clockwise,
so 90 points up and 270 points down.
"""

from collections import namedtuple

import numpy as np

GRID_ROWS = 6
GRID_COLUMNS = 4

# Both hands of an unused clock
REST_ANGLE = 225.0

HandPair = namedtuple('HandPair', ['hour', 'minute'])


class InvalidDigit(ValueError):
    """Raised when a glyph is requested for anything other than 0..9."""


# Clocks left as _ are not part of the glyph and take the rest pose.
_ = None

# Row-major: DIGIT_GLYPHS[digit][row][column] = (hour, minute)
DIGIT_GLYPHS = {
    0: (
        ((0, 270), (0, 180), (0, 180), (180, 270)),
        ((90, 270), (0, 270), (180, 270), (90, 270)),
        ((90, 270), (90, 270), (90, 270), (90, 270)),
        ((90, 270), (90, 270), (90, 270), (90, 270)),
        ((90, 270), (0, 90), (90, 180), (90, 270)),
        ((0, 90), (0, 180), (0, 180), (90, 180)),
    ),
    1: (
        ((0, 270), (0, 180), (180, 270), _),
        ((0, 90), (180, 270), (90, 270), _),
        (_, (90, 270), (90, 270), _),
        (_, (90, 270), (90, 270), _),
        ((0, 270), (90, 180), (0, 90), (180, 270)),
        ((0, 90), (0, 180), (0, 180), (90, 180)),
    ),
    2: (
        ((0, 270), (0, 180), (0, 180), (180, 270)),
        ((0, 90), (0, 180), (180, 270), (90, 270)),
        ((0, 270), (0, 180), (90, 180), (90, 270)),
        ((90, 270), (0, 270), (0, 180), (90, 180)),
        ((90, 270), (0, 90), (0, 180), (180, 270)),
        ((0, 90), (0, 180), (0, 180), (90, 180)),
    ),
    3: (
        ((0, 270), (0, 180), (0, 180), (180, 270)),
        ((0, 90), (0, 180), (180, 270), (90, 270)),
        (_, (0, 270), (90, 180), (90, 270)),
        (_, (0, 90), (180, 270), (90, 270)),
        ((0, 270), (0, 180), (90, 180), (90, 270)),
        ((0, 90), (0, 180), (0, 180), (90, 180)),
    ),
    4: (
        ((0, 270), (180, 270), (0, 270), (180, 270)),
        ((90, 270), (90, 270), (90, 270), (90, 270)),
        ((90, 270), (0, 90), (90, 180), (90, 270)),
        ((0, 90), (0, 180), (180, 270), (90, 270)),
        (_, _, (90, 270), (90, 270)),
        (_, _, (0, 90), (90, 180)),
    ),
    5: (
        ((0, 270), (0, 180), (0, 180), (180, 270)),
        ((90, 270), (0, 270), (0, 180), (90, 180)),
        ((90, 270), (0, 90), (0, 180), (180, 270)),
        ((0, 90), (0, 180), (180, 270), (90, 270)),
        ((0, 270), (0, 180), (90, 180), (90, 270)),
        ((0, 90), (0, 180), (0, 180), (90, 180)),
    ),
    6: (
        ((0, 270), (0, 180), (0, 180), (180, 270)),
        ((90, 270), (0, 270), (0, 180), (90, 180)),
        ((90, 270), (0, 90), (0, 180), (180, 270)),
        ((90, 270), (0, 270), (180, 270), (90, 270)),
        ((90, 270), (0, 90), (90, 180), (90, 270)),
        ((0, 90), (0, 180), (0, 180), (90, 180)),
    ),
    7: (
        ((0, 270), (0, 180), (0, 180), (180, 270)),
        ((0, 90), (0, 180), (180, 270), (90, 270)),
        (_, _, (90, 270), (90, 270)),
        (_, _, (90, 270), (90, 270)),
        (_, _, (90, 270), (90, 270)),
        (_, _, (0, 90), (90, 180)),
    ),
    8: (
        ((0, 270), (0, 180), (0, 180), (180, 270)),
        ((90, 270), (0, 270), (180, 270), (90, 270)),
        ((90, 270), (0, 90), (90, 180), (90, 270)),
        ((90, 270), (0, 270), (180, 270), (90, 270)),
        ((90, 270), (0, 90), (90, 180), (90, 270)),
        ((0, 90), (0, 180), (0, 180), (90, 180)),
    ),
    9: (
        ((0, 270), (0, 180), (0, 180), (180, 270)),
        ((90, 270), (0, 270), (180, 270), (90, 270)),
        ((90, 270), (0, 90), (90, 180), (90, 270)),
        ((0, 90), (0, 180), (180, 270), (90, 270)),
        ((0, 270), (0, 180), (90, 180), (90, 270)),
        ((0, 90), (0, 180), (0, 180), (90, 180)),
    ),
}

del _


def _build_grid(glyph):
    """Start from the rest pose and overlay the clocks the glyph uses."""
    grid = np.full((GRID_ROWS, GRID_COLUMNS, 2), REST_ANGLE, dtype=np.float64)
    for row, clocks in enumerate(glyph):
        for col, pair in enumerate(clocks):
            if pair is not None:
                grid[row, col] = pair
    grid.flags.writeable = False
    return grid


_GRIDS = {digit: _build_grid(glyph) for digit, glyph in DIGIT_GLYPHS.items()}


def lookup(digit):
    """
    Return the hand grid for a digit.

    The result is a read-only array of shape (GRID_ROWS, GRID_COLUMNS, 2)
    holding (hour, minute) angles, indexed [row, column].
    """
    if isinstance(digit, bool) or not isinstance(digit, (int, np.integer)):
        raise InvalidDigit(f"Digit must be an integer 0-9 (got {digit!r})")
    if not 0 <= digit <= 9:
        raise InvalidDigit(f"Digit must be 0-9 (got {digit})")
    return _GRIDS[int(digit)]


def hand_at(digit, row, col):
    """HandPair of a single clock in a digit's glyph."""
    hour, minute = lookup(digit)[row, col]
    return HandPair(float(hour), float(minute))
