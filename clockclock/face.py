"""HH:MM:SS display state made of six digit cells."""

import numpy as np

from .digits import GRID_COLUMNS, GRID_ROWS, HandPair, lookup

CELL_COUNT = 6

_FIELD_LIMITS = (('hours', 23), ('minutes', 59), ('seconds', 59))


class InvalidTimeComponent(ValueError):
    """Raised when an hour, minute or second is out of range."""


def _frozen(array):
    array = np.array(array, dtype=np.float64)
    array.flags.writeable = False
    return array


class DigitCell:
    """One digit of the display and the hands of its clock grid."""

    __slots__ = ('digit', 'hands')

    def __init__(self, digit, hands):
        hands = _frozen(hands)
        if hands.shape != (GRID_ROWS, GRID_COLUMNS, 2):
            raise ValueError(f"Hand grid must be {GRID_ROWS}x{GRID_COLUMNS}x2 "
                             f"(got {hands.shape})")
        object.__setattr__(self, 'digit', int(digit))
        object.__setattr__(self, 'hands', hands)

    @classmethod
    def for_digit(cls, digit):
        return cls(digit, lookup(digit))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def hand(self, row, col):
        hour, minute = self.hands[row, col]
        return HandPair(float(hour), float(minute))

    def __eq__(self, other):
        if not isinstance(other, DigitCell):
            return NotImplemented
        return (self.digit == other.digit
                and np.array_equal(self.hands, other.hands))

    def __hash__(self):
        return hash((self.digit, self.hands.tobytes()))

    def __repr__(self):
        return f"DigitCell(digit={self.digit})"


class DisplayState:
    """
    Six digit cells in display order: tens and units of hours, minutes
    and seconds.

    States are values. Nothing mutates one in place; every change to the
    display is a new DisplayState.
    """

    __slots__ = ('cells', 'angles')

    def __init__(self, cells):
        cells = tuple(cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"Display needs {CELL_COUNT} cells (got {len(cells)})")
        object.__setattr__(self, 'cells', cells)
        object.__setattr__(self, 'angles',
                           _frozen(np.stack([c.hands for c in cells])))

    @classmethod
    def from_angles(cls, digits, angles):
        """Build a state from raw angles shaped (6, GRID_ROWS, GRID_COLUMNS, 2)."""
        angles = np.asarray(angles, dtype=np.float64)
        return cls(DigitCell(d, a) for d, a in zip(digits, angles))

    @classmethod
    def from_time(cls, t):
        """Build from anything with hour, minute and second attributes."""
        return build(t.hour, t.minute, t.second)

    @property
    def digits(self):
        return tuple(c.digit for c in self.cells)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index):
        return self.cells[index]

    def __eq__(self, other):
        if not isinstance(other, DisplayState):
            return NotImplemented
        return (self.digits == other.digits
                and np.array_equal(self.angles, other.angles))

    def __hash__(self):
        return hash((self.digits, self.angles.tobytes()))

    def __repr__(self):
        d = self.digits
        return f"DisplayState({d[0]}{d[1]}:{d[2]}{d[3]}:{d[4]}{d[5]})"


def split_digits(hours, minutes, seconds):
    """Validate a time of day and return its six decimal digits."""
    digits = []
    for (name, limit), value in zip(_FIELD_LIMITS, (hours, minutes, seconds)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidTimeComponent(f"{name} must be an integer (got {value!r})")
        if not 0 <= value <= limit:
            raise InvalidTimeComponent(f"{name} must be 0-{limit} (got {value})")
        digits.extend(divmod(int(value), 10))
    return digits


def build(hours, minutes, seconds):
    """DisplayState for a time of day."""
    return DisplayState(DigitCell.for_digit(d)
                        for d in split_digits(hours, minutes, seconds))
