import numpy as np
import pytest

from valuenoise.interpolation import Bilinear, Fade, Linear
from valuenoise.octave import (Octave, latticeShape, nodeValues, octave1D,
                               octave2D)
from valuenoise.rng import NumpySource


def test_octave_from_index():
    o = Octave.fromIndex(3, 200)
    assert o.index == 3
    assert o.frequency == 8
    assert o.amplitude == 25.0


def test_node_values_range_and_order():
    values = nodeValues(NumpySource(1), 10.0, 500)
    draws = NumpySource(1).take(500)
    assert np.array_equal(values, 5.0 - draws * 10.0)
    assert np.abs(values).max() <= 5.0


@pytest.mark.parametrize("length, frequency", [(0, 4), (-5, 4)])
def test_octave1d_empty_domain(length, frequency):
    src = NumpySource(0)
    wave = octave1D(src, frequency, 10.0, length, Fade())
    assert wave.shape == (0,)
    assert src.draws == 0


def test_octave1d_zero_frequency_gives_zeros():
    src = NumpySource(0)
    wave = octave1D(src, 0, 10.0, 6, Fade())
    assert np.array_equal(wave, np.zeros(6))
    assert src.draws == 0


def test_octave1d_nodes_are_exact():
    # step 4, nodes at 0, 4, 8, 12, 16
    wave = octave1D(NumpySource(11), 4, 50.0, 16, Fade())
    nodes = nodeValues(NumpySource(11), 50.0, 5)
    assert wave[0] == nodes[0]
    assert wave[4] == nodes[1]
    assert wave[8] == nodes[2]
    assert wave[12] == nodes[3]


def test_octave1d_fills_between_nodes():
    # step 4, nodes at 0, 4, 8
    wave = octave1D(NumpySource(3), 2, 20.0, 8, Linear())
    n = nodeValues(NumpySource(3), 20.0, 3)
    assert wave[2] == pytest.approx((n[0] + n[1]) / 2)
    assert wave[1] == pytest.approx(n[0] + (n[1] - n[0]) / 4)
    assert wave[6] == pytest.approx((n[1] + n[2]) / 2)


def test_octave1d_legacy_fill_starts_after_node():
    # step 4, nodes at 0, 4, 8; segment interpolated from sample 1
    wave = octave1D(NumpySource(3), 2, 20.0, 8, Linear(), legacyFill=True)
    plain = octave1D(NumpySource(3), 2, 20.0, 8, Linear())
    n = nodeValues(NumpySource(3), 20.0, 3)
    assert wave[1] == n[0]
    assert wave[2] == pytest.approx(n[0] + (n[1] - n[0]) / 3)
    assert wave[4] == plain[4] == n[1]
    assert wave[5] == n[1]
    assert plain[1] != wave[1]


def test_octave1d_short_last_segment_stays_in_bounds():
    # step 2, nodes at 0, 2, 4, 6, 8, 10; node 10 lies past the end
    src = NumpySource(8)
    wave = octave1D(src, 4, 10.0, 10, Linear())
    n = nodeValues(NumpySource(8), 10.0, 6)
    assert wave.shape == (10,)
    assert src.draws == 6
    assert wave[8] == n[4]
    assert wave[9] == pytest.approx((n[4] + n[5]) / 2)


def test_octave1d_step_clamped_to_one():
    # more cells than samples: every sample is a node
    src = NumpySource(21)
    wave = octave1D(src, 8, 4.0, 3, Fade())
    assert src.draws == 15
    assert np.array_equal(wave, nodeValues(NumpySource(21), 4.0, 3))


def test_lattice_shape():
    assert latticeShape(2, 8, 4) == (4, 2, 4, 4)
    assert latticeShape(4, 10, 10) == (2, 2, 7, 7)
    assert latticeShape(8, 4, 4) == (1, 1, 6, 6)


def test_octave2d_nodes_are_exact():
    width, height, freq, amp = 8, 6, 2, 40.0
    stepX, stepY, rows, cols = latticeShape(freq, width, height)
    src = NumpySource(17)
    wave = octave2D(src, freq, amp, width, height, Bilinear())
    lattice = nodeValues(NumpySource(17), amp, rows * cols).reshape(rows, cols)
    assert wave.shape == (height, width)
    assert src.draws == rows * cols
    for i in range(0, height, stepY):
        for j in range(0, width, stepX):
            assert wave[i, j] == lattice[i // stepY, j // stepX]


def test_octave2d_interior_matches_strategy():
    width, height, freq, amp = 8, 6, 2, 40.0
    stepX, stepY, rows, cols = latticeShape(freq, width, height)
    wave = octave2D(NumpySource(17), freq, amp, width, height, Bilinear())
    lat = nodeValues(NumpySource(17), amp, rows * cols).reshape(rows, cols)
    expected = Bilinear()(0, 0, stepX, stepY,
                          lat[1, 1], lat[1, 2], lat[2, 1], lat[2, 2], 2, 1)
    assert wave[4, 6] == pytest.approx(expected)


def test_octave2d_empty_domain():
    src = NumpySource(0)
    assert octave2D(src, 2, 10.0, 0, 5, Bilinear()).shape == (5, 0)
    assert octave2D(src, 2, 10.0, -3, -3, Bilinear()).shape == (0, 0)
    assert np.array_equal(octave2D(src, 0, 10.0, 3, 2, Bilinear()),
                          np.zeros((2, 3)))
    assert src.draws == 0


def test_octave2d_frequency_above_size_is_clamped():
    src = NumpySource(4)
    wave = octave2D(src, 8, 10.0, 3, 3, Bilinear())
    lattice = nodeValues(NumpySource(4), 10.0, 25).reshape(5, 5)
    assert np.isfinite(wave).all()
    assert np.array_equal(wave, lattice[:3, :3])
