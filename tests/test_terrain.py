import numpy as np
import pytest

import constants as C
from noise_field import NoiseField
from terrain import (
    NoiseParameters, zoom_factor, generate_noise_grid,
    normalize, solid_mask, noise_map_colors, wall_colors, floor_alphas, grid_statistics,
)


def make_params(**overrides):
    values = dict(grid_size=12, scale=50, octaves=4, persistence=0.5, lacunarity=2.0, threshold=0.0)
    values.update(overrides)
    return NoiseParameters(**values)


def test_zoom_factor_inverts_scale():
    assert zoom_factor(50) == 60
    assert zoom_factor(100) == C.ZOOM_BASE - 100
    assert zoom_factor(1) > zoom_factor(99)


def test_grid_shape_and_cell_values():
    field = NoiseField(12345)
    params = make_params()
    grid = generate_noise_grid(field, params)
    assert grid.shape == (12, 12)
    zoom = zoom_factor(params.scale)
    for y, x in [(0, 0), (3, 7), (11, 2), (11, 11)]:
        expected = field.fractal_sample(x / zoom, y / zoom, 4, 0.5, 2.0)
        assert grid[y, x] == pytest.approx(expected, abs=1e-12)


def test_grid_offset_shifts_the_window():
    field = NoiseField(9)
    params = make_params(grid_size=8)
    base = generate_noise_grid(field, params)
    shifted = generate_noise_grid(field, params, offset_x=2, offset_y=3)
    np.testing.assert_allclose(shifted[:-3, :-2], base[3:, 2:], atol=1e-12)


def test_grid_is_deterministic_and_bounded():
    params = make_params(grid_size=40, scale=90, octaves=6, persistence=0.7, lacunarity=2.5)
    a = generate_noise_grid(NoiseField(55), params)
    b = generate_noise_grid(NoiseField(55), params)
    assert np.array_equal(a, b)
    assert np.all(np.abs(a) <= 1.0)


def test_normalize_and_solid_mask():
    values = np.array([-1.0, -0.2, 0.0, 0.4, 1.0])
    np.testing.assert_allclose(normalize(values), [0.0, 0.4, 0.5, 0.7, 1.0])
    assert list(solid_mask(values, 0.0)) == [True, True, False, False, False]
    assert list(solid_mask(values, 0.25)) == [True, True, True, True, False]
    assert list(solid_mask(values, -0.5)) == [False, False, False, False, False]


def test_noise_map_colors():
    values = np.array([[-1.0, 0.0, 1.0]])
    colors = noise_map_colors(values, 0.0)
    assert colors.shape == (1, 3, 3)
    assert colors.dtype == np.uint8
    assert tuple(colors[0, 0]) == (0, 0, 100)
    assert tuple(colors[0, 1]) == (151, 194, 63)
    assert tuple(colors[0, 2]) == (254, 255, 127)


def test_noise_map_colors_follow_threshold():
    colors = noise_map_colors(np.array([0.0]), 0.1)
    assert tuple(colors[0]) == (0, 88, 227)


def test_wall_colors():
    colors = wall_colors(np.array([-1.0, 0.0, 1.0]))
    assert tuple(colors[0]) == (26, 26, 80)
    assert tuple(colors[1]) == (46, 66, 255)
    # Blue overflows and is clipped.
    assert tuple(colors[2]) == (66, 106, 255)


def test_floor_alphas():
    np.testing.assert_allclose(floor_alphas(np.array([-1.0, 0.0, 1.0])), [0.05, 0.1, 0.15])


def test_grid_statistics():
    values = np.array([[-1.0, 0.0], [0.5, 1.0]])
    stats = grid_statistics(values, 0.0)
    assert stats['min'] == -1.0
    assert stats['max'] == 1.0
    assert stats['mean'] == pytest.approx(0.125)
    assert stats['std'] == pytest.approx(np.std(values))
    assert stats['solid_fraction'] == 0.25
