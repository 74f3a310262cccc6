#terrain.py

from collections import namedtuple
import numpy as np
import constants as C

NoiseParameters = namedtuple(
    "NoiseParameters",
    ["grid_size", "scale", "octaves", "persistence", "lacunarity", "threshold"]
)

def zoom_factor(scale):
    """Higher scale means a smaller divisor, i.e. zoomed in."""
    return C.ZOOM_BASE - scale

def generate_noise_grid(field, params, offset_x=0.0, offset_y=0.0):
    """
    Samples a grid_size x grid_size array of fBm values, indexed [y, x].
    Every cell is independent, so the whole grid goes through one vectorised call.
    """
    zoom = zoom_factor(params.scale)
    cells = np.arange(params.grid_size, dtype=np.float64)
    nx = (cells + offset_x) / zoom
    ny = (cells + offset_y) / zoom
    x_grid, y_grid = np.meshgrid(nx, ny)
    return field.fractal_sample(
        x_grid, y_grid,
        params.octaves, params.persistence, params.lacunarity
    )

def normalize(values):
    "Maps [-1, 1] to [0, 1]."
    return (values + 1) / 2

def solid_mask(values, threshold):
    return normalize(values) < (C.SOLID_BASE_LEVEL + threshold)

def noise_map_colors(values, threshold):
    """Blue ramp for solid cells, green/brown ramp for land. Returns (h, w, 3) uint8."""
    values = np.asarray(values, dtype=np.float64)
    intensity = np.floor(normalize(values) * 255)
    solid = solid_mask(values, threshold)

    colors = np.zeros((*values.shape, 3), dtype=np.uint8)
    if np.any(solid):
        i = intensity[solid]
        colors[solid, 0] = 0
        colors[solid, 1] = np.floor(i * C.WATER_GREEN_FACTOR)
        colors[solid, 2] = np.minimum(255, i + C.WATER_BLUE_OFFSET)
    land = ~solid
    if np.any(land):
        i = intensity[land]
        colors[land, 0] = np.minimum(255, np.floor(i * C.LAND_RED_FACTOR + C.LAND_RED_OFFSET))
        colors[land, 1] = np.minimum(255, np.floor(i * C.LAND_GREEN_FACTOR + C.LAND_GREEN_OFFSET))
        colors[land, 2] = np.floor(i * C.LAND_BLUE_FACTOR)
    return colors

def wall_colors(values):
    """Colour of raised walls in the game view, brighter for higher values."""
    depth = normalize(np.asarray(values, dtype=np.float64)) * C.WALL_DEPTH_MULTIPLIER
    base = np.array(C.WALL_BASE_COLOR, dtype=np.float64)
    span = np.array(C.WALL_DEPTH_RANGE, dtype=np.float64)
    colors = np.floor(base + depth[..., np.newaxis] * span)
    return np.clip(colors, 0, 255).astype(np.uint8)

def floor_alphas(values):
    return C.FLOOR_BASE_ALPHA + normalize(np.asarray(values, dtype=np.float64)) * C.FLOOR_ALPHA_RANGE

def grid_statistics(values, threshold):
    """Summary numbers for a noise grid."""
    values = np.asarray(values, dtype=np.float64)
    return {
        'min': float(np.min(values)),
        'max': float(np.max(values)),
        'mean': float(np.mean(values)),
        'std': float(np.std(values)),
        'solid_fraction': float(np.mean(solid_mask(values, threshold))),
    }
