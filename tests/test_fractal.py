import numpy as np
import pytest

import valuenoise as vn
from valuenoise.fractal import (N_OCTAVES, ValueNoise, amplitudeSum, generate,
                                generate2D, octaves)
from valuenoise.octave import latticeShape, nodeValues
from valuenoise.rng import NumpySource


def test_octave_sequence_doubles_and_halves():
    layers = list(octaves(256))
    assert len(layers) == N_OCTAVES == 7
    assert [o.frequency for o in layers] == [2, 4, 8, 16, 32, 64, 128]
    assert [o.amplitude for o in layers] == [128, 64, 32, 16, 8, 4, 2]


def test_amplitude_sum():
    assert amplitudeSum(128, 7) == 127
    assert amplitudeSum(200, 1) == 100


def test_generate_is_deterministic():
    a = generate(8, 200, seed=42)
    b = generate(8, 200, seed=42)
    assert a.shape == (8,)
    assert np.array_equal(a, b)


def test_generate2d_is_deterministic():
    a = generate2D(4, 4, 255, seed=7)
    b = generate2D(4, 4, 255, seed=7)
    assert a.shape == (4, 4)
    assert np.array_equal(a, b)


def test_seeds_change_the_field():
    assert not np.array_equal(generate(64, 200, 1), generate(64, 200, 2))
    assert not np.array_equal(generate2D(16, 8, 255, 1),
                              generate2D(16, 8, 255, 2))


def test_zero_size_guard():
    assert generate(0, 200, 5).shape == (0,)
    assert generate(-5, 200, 5).shape == (0,)
    assert generate2D(0, 4, 255, 5).shape == (4, 0)
    assert generate2D(-1, -1, 255, 5).shape == (0, 0)


def test_generate2d_shape_is_rows_by_columns():
    assert generate2D(10, 3, 255, 0).shape == (3, 10)


def test_generate_first_sample_sums_first_nodes():
    length, amp, seed = 20, 200, 9
    src = NumpySource(seed)
    expected = 0.0
    for o in octaves(amp):
        step = max(1, length // o.frequency)
        count = 1 + len(range(step, (step + 1) * o.frequency - 1, step))
        expected += nodeValues(src, o.amplitude, count)[0]
    assert generate(length, amp, seed)[0] == pytest.approx(expected)


def test_generate2d_origin_sums_first_nodes():
    src = NumpySource(7)
    expected = 0.0
    for o in octaves(255):
        _, _, rows, cols = latticeShape(o.frequency, 4, 4)
        expected += nodeValues(src, o.amplitude, rows * cols)[0]
    assert generate2D(4, 4, 255, seed=7)[0][0] == pytest.approx(expected)


def test_single_octave_node_exactness_1d():
    wave = generate(16, 200, seed=3, nOctaves=1)
    assert wave[0] == 50.0 - NumpySource(3).next() * 100.0


def test_single_octave_node_exactness_2d():
    width, height, seed = 8, 8, 12
    stepX, stepY, rows, cols = latticeShape(2, width, height)
    grid = generate2D(width, height, 100, seed, nOctaves=1)
    lattice = nodeValues(NumpySource(seed), 50.0, rows * cols).reshape(rows, cols)
    for i in range(0, height, stepY):
        for j in range(0, width, stepX):
            assert grid[i, j] == lattice[i // stepY, j // stepX]


def test_amplitude_envelope_over_many_seeds():
    bound = 200 * 127 / 128
    for seed in range(40):
        line = generate(97, 200, seed)
        grid = generate2D(23, 17, 200, seed)
        assert np.abs(line).max() <= bound + 1e-9
        assert np.abs(grid).max() <= bound + 1e-9
        assert np.abs(grid).max() <= amplitudeSum(200) / 2 + 1e-9


def test_interpolator_choice_keeps_nodes():
    fade = generate(50, 200, 4)
    linear = generate(50, 200, 4, interpolator='linear')
    assert fade[0] == linear[0]
    assert not np.array_equal(fade, linear)


def test_parametric_bilinear_close_to_area_weighted():
    a = generate2D(32, 24, 255, 6)
    b = generate2D(32, 24, 255, 6, interpolator='parametric')
    assert np.allclose(a, b)


def test_legacy_source_is_reproducible_and_distinct():
    a = generate2D(12, 9, 255, 27184235, source='legacy')
    b = generate2D(12, 9, 255, 27184235, source='legacy')
    c = generate2D(12, 9, 255, 27184235)
    assert np.array_equal(a, b)
    assert not np.array_equal(a, c)


def test_package_level_exports():
    assert vn.generate is generate
    assert vn.generate2D is generate2D


def test_value_noise_2d():
    noise = ValueNoise((20, 10), maxAmplitude=255, seed=5)
    assert noise.dims == 2
    assert noise.noise.shape == (10, 20)
    assert np.array_equal(noise.noise, generate2D(20, 10, 255, 5))
    assert np.allclose(noise.shifted(), noise.noise + 127.5)
    assert "seed=5" in repr(noise)
    assert "Value Noise 2D" in str(noise)


def test_value_noise_1d_normalized():
    noise = ValueNoise(64, maxAmplitude=200, seed=1, interpolator='linear')
    assert noise.dims == 1
    assert noise.interpolator.name == 'linear'
    norm = noise.normalized()
    assert norm.min() == 0.0
    assert norm.max() == 1.0
    assert noise.envelope() == pytest.approx(100 * 127 / 128)


def test_value_noise_random_seed_is_recorded():
    noise = ValueNoise(16, random=True)
    assert isinstance(noise.seed, int)
    assert np.array_equal(noise.noise, generate(16, 255, noise.seed))


def test_value_noise_empty_field():
    noise = ValueNoise(0)
    assert noise.range() == (0.0, 0.0)
    assert noise.normalized().shape == (0,)
