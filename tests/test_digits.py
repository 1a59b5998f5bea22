"""Unit tests for the digit glyph table."""

import numpy as np
import pytest

from clockclock.digits import (
    DIGIT_GLYPHS, GRID_COLUMNS, GRID_ROWS, REST_ANGLE, HandPair, InvalidDigit,
    hand_at, lookup,
)


def _rest_count(grid):
    return int(np.all(grid == REST_ANGLE, axis=-1).sum())


def test_every_digit_has_a_full_grid():
    for digit in range(10):
        grid = lookup(digit)
        assert grid.shape == (GRID_ROWS, GRID_COLUMNS, 2)
        assert not np.isnan(grid).any()
        assert np.all((grid >= 0) & (grid < 360))


def test_table_rows_match_grid_shape():
    for digit, glyph in DIGIT_GLYPHS.items():
        assert len(glyph) == GRID_ROWS, digit
        for row in glyph:
            assert len(row) == GRID_COLUMNS, digit


def test_unused_clocks_rest_on_the_corner():
    assert hand_at(1, 0, 3) == HandPair(REST_ANGLE, REST_ANGLE)
    assert hand_at(7, 5, 0) == HandPair(REST_ANGLE, REST_ANGLE)
    assert hand_at(4, 4, 1) == HandPair(REST_ANGLE, REST_ANGLE)


@pytest.mark.parametrize("digit, rest", [
    (0, 0), (1, 6), (3, 2), (4, 4), (7, 8), (8, 0),
])
def test_rest_counts(digit, rest):
    assert _rest_count(lookup(digit)) == rest


def test_known_hand_positions():
    assert hand_at(0, 0, 0) == HandPair(0.0, 270.0)
    assert hand_at(0, 5, 3) == HandPair(90.0, 180.0)
    assert hand_at(4, 0, 1) == HandPair(180.0, 270.0)
    assert hand_at(2, 3, 1) == HandPair(0.0, 270.0)
    assert hand_at(9, 3, 0) == HandPair(0.0, 90.0)
    assert hand_at(6, 3, 0) == HandPair(90.0, 270.0)


def test_lookup_is_read_only():
    grid = lookup(5)
    with pytest.raises(ValueError):
        grid[0, 0, 0] = 12.0


@pytest.mark.parametrize("bad", [-1, 10, 42, 1.5, "3", None, True])
def test_lookup_rejects_non_digits(bad):
    with pytest.raises(InvalidDigit):
        lookup(bad)


def test_invalid_digit_is_a_value_error():
    with pytest.raises(ValueError):
        lookup(10)
