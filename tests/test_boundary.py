"""Tests for search-space bounds."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import numpy as np
import pytest

from turtles.boundary import Boundary
from turtles.errors import ConfigurationError


def test_cubic_broadcasts_to_every_dimension():
    """Scalar bounds are repeated for every dimension."""
    b = Boundary.cubic(3, -2.0, 5.0)
    assert b.dimensions == 3
    np.testing.assert_array_equal(b.lower, [-2.0, -2.0, -2.0])
    np.testing.assert_array_equal(b.upper, [5.0, 5.0, 5.0])
    np.testing.assert_array_equal(b.width, [7.0, 7.0, 7.0])


def test_parse_single_pair():
    """A lone (lower, upper) pair applies to all dimensions."""
    b = Boundary.parse(2, (-1, 1))
    np.testing.assert_array_equal(b.lower, [-1.0, -1.0])
    np.testing.assert_array_equal(b.upper, [1.0, 1.0])


def test_parse_pair_per_dimension():
    """One pair per dimension is taken as given."""
    b = Boundary.parse(2, [(-1, 1), (0, 10)])
    np.testing.assert_array_equal(b.lower, [-1.0, 0.0])
    np.testing.assert_array_equal(b.upper, [1.0, 10.0])


def test_parse_rejects_dimension_mismatch():
    """The number of pairs must match the dimensionality."""
    with pytest.raises(ConfigurationError):
        Boundary.parse(3, [(-1, 1), (0, 10)])
    with pytest.raises(ConfigurationError):
        Boundary.parse(1, Boundary.cubic(2, 0, 1))


def test_parse_rejects_malformed_bounds():
    """Anything that is not a pair or a list of pairs is refused."""
    with pytest.raises(ConfigurationError):
        Boundary.parse(2, [1, 2, 3])
    with pytest.raises(ConfigurationError):
        Boundary.parse(2, "wide")


def test_inverted_bounds_rejected():
    """Lower above upper in any dimension is an error, never silently swapped."""
    with pytest.raises(ConfigurationError, match="dimension 1"):
        Boundary.parse(2, [(0, 1), (2, 1)])
    with pytest.raises(ConfigurationError):
        Boundary.cubic(1, 1.0, -1.0)


def test_degenerate_bounds_allowed():
    """Equal lower and upper bounds describe a single point."""
    b = Boundary.cubic(1, 3.0, 3.0)
    assert b.contains(np.array([3.0]))


def test_non_finite_bounds_rejected():
    """Infinite or NaN bounds are refused."""
    with pytest.raises(ConfigurationError):
        Boundary.cubic(1, -np.inf, 0.0)
    with pytest.raises(ConfigurationError):
        Boundary.parse(1, (0.0, np.nan))


def test_zero_dimensions_rejected():
    """A search space needs at least one dimension."""
    with pytest.raises(ConfigurationError):
        Boundary.cubic(0, 0.0, 1.0)


def test_contains_and_clip():
    """Membership is inclusive and clipping pulls points onto the edge."""
    b = Boundary.cubic(2, 0.0, 1.0)
    assert b.contains(np.array([0.0, 1.0]))
    assert not b.contains(np.array([0.5, 1.5]))
    np.testing.assert_array_equal(b.clip(np.array([-3.0, 0.25])), [0.0, 0.25])


def test_representable_rounds_inward():
    """Bounds cast to float32 are rounded toward the interior."""
    b = Boundary.cubic(1, 0.1 - 1e-8, 0.1)
    lower, upper = b.representable(np.float32)
    assert lower.dtype == np.float32 and upper.dtype == np.float32
    assert lower[0] >= b.lower[0]
    assert upper[0] <= b.upper[0]
    assert lower[0] <= upper[0]


def test_representable_can_be_empty():
    """No float32 value equals 0.1, so a zero-width range there is empty."""
    lower, upper = Boundary.cubic(1, 0.1, 0.1).representable(np.float32)
    assert lower[0] > upper[0]


def test_clip_keeps_precision():
    """Clipping a float32 point stays in float32 and inside the float64 bounds."""
    b = Boundary.cubic(1, 0.1 - 1e-8, 0.1)
    clipped = b.clip(np.array([0.2], dtype=np.float32))
    assert clipped.dtype == np.float32
    assert b.contains(clipped)
