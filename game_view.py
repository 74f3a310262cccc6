#game_view.py

import pygame
import numpy as np
import constants as C
from terrain import normalize, solid_mask, noise_map_colors, wall_colors, floor_alphas

VIEW_MODES = C.VIEW_MODES

# Translucent rectangles are blitted from small pre-filled surfaces.
# Keyed by (width, height, rgba).
_alpha_rect_cache = {}
# Ambient light overlays, keyed by panel size.
_ambient_cache = {}

def _alpha_rect(surface, rgba, rect):
    """Blends a translucent rectangle onto the surface."""
    width, height = int(rect[2]), int(rect[3])
    if width <= 0 or height <= 0:
        return
    key = (width, height, rgba)
    fill = _alpha_rect_cache.get(key)
    if fill is None:
        fill = pygame.Surface((width, height), pygame.SRCALPHA)
        fill.fill(rgba)
        _alpha_rect_cache[key] = fill
    surface.blit(fill, (int(rect[0]), int(rect[1])))

def _alpha(value):
    return max(0, min(255, int(round(value * 255))))

def _cell_edges(start, length, count):
    """Integer pixel edges for `count` equal cells, so neighbours never leave gaps."""
    return np.floor(start + np.arange(count + 1) * (length / count)).astype(int)

def draw_noise_map(surface, rect, values, threshold):
    """Paints one coloured rectangle per grid cell."""
    colors = noise_map_colors(values, threshold)
    # surfarray is indexed [x, y]; the grid is [y, x].
    grid_surface = pygame.surfarray.make_surface(np.transpose(colors, (1, 0, 2)))
    scaled = pygame.transform.scale(grid_surface, (rect.width, rect.height))
    surface.blit(scaled, rect.topleft)

def ambient_overlay(width, height):
    """Radial light: faint white in the centre fading to a dark rim."""
    key = (width, height)
    if key in _ambient_cache:
        return _ambient_cache[key]

    radius = width / 2
    xs = np.arange(width) - width / 2
    ys = np.arange(height) - height / 2
    distance = np.sqrt(xs[:, np.newaxis] ** 2 + ys[np.newaxis, :] ** 2)
    t = np.clip(distance / radius, 0.0, 1.0) if radius > 0 else np.ones((width, height))

    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    rgb = pygame.surfarray.pixels3d(overlay)
    rgb[...] = ((1 - t) * 255).astype(np.uint8)[..., np.newaxis]
    del rgb
    alpha = pygame.surfarray.pixels_alpha(overlay)
    alpha[...] = np.round(((1 - t) * C.AMBIENT_CENTER_ALPHA + t * C.AMBIENT_EDGE_ALPHA) * 255).astype(np.uint8)
    del alpha

    _ambient_cache[key] = overlay
    return overlay

def draw_perspective_view(surface, rect, values, threshold):
    """
    Flat-perspective game level. Solid cells become walls lifted towards the
    viewer with a lit top/left edge and a shaded right/bottom edge; every cell
    gets a floor tile, and an ambient light is laid over the whole panel.
    """
    values = np.asarray(values, dtype=np.float64)
    rows, cols = values.shape
    solid = solid_mask(values, threshold)
    walls = wall_colors(values)
    floors = floor_alphas(values)

    previous_clip = surface.get_clip()
    surface.set_clip(rect)
    surface.fill(C.COLOR_GAME_FLOOR, rect)

    x_edges = _cell_edges(rect.left, rect.width, cols)
    y_edges = _cell_edges(rect.top, rect.height, rows)
    cell_height = rect.height / rows
    wall_height = int(round(cell_height * C.WALL_HEIGHT_CELLS))
    wall_lift = int(round(wall_height * C.PERSPECTIVE_FACTOR))
    edge = C.WALL_EDGE_PIXELS

    highlight = (255, 255, 255, _alpha(C.HIGHLIGHT_ALPHA))
    shadow = (0, 0, 0, _alpha(C.SHADOW_ALPHA))

    for y in range(rows):
        for x in range(cols):
            screen_x = x_edges[x]
            screen_y = y_edges[y]
            cell_w = x_edges[x + 1] - screen_x
            cell_h = y_edges[y + 1] - screen_y

            if solid[y, x]:
                top = screen_y - wall_lift
                pygame.draw.rect(surface, tuple(int(c) for c in walls[y, x]),
                                 (screen_x, top, cell_w, wall_height))
                _alpha_rect(surface, highlight, (screen_x, top, cell_w, edge))
                _alpha_rect(surface, highlight, (screen_x, top, edge, wall_height))
                _alpha_rect(surface, shadow, (screen_x + cell_w - edge, top, edge, wall_height))
                _alpha_rect(surface, shadow, (screen_x, top + wall_height - edge, cell_w, edge))
                _alpha_rect(surface, shadow, (screen_x, screen_y, cell_w, cell_h))
            else:
                tile = (255, 255, 255, _alpha(floors[y, x]))
                _alpha_rect(surface, tile, (screen_x, screen_y, cell_w, cell_h))

    surface.blit(ambient_overlay(rect.width, rect.height), rect.topleft)
    surface.set_clip(previous_clip)

def _shade(color, factor):
    return tuple(int(c * factor) for c in color)

def iso_tile_size(rect, count):
    """Width and height of one isometric diamond for a count x count grid."""
    tile_w = rect.width / count
    return tile_w, tile_w * C.ISO_TILE_ASPECT

def draw_isometric_view(surface, rect, values, threshold):
    """
    Isometric columns, one per cell, drawn back to front. Column height follows
    the normalised noise value; solid cells take the wall colour.
    """
    values = np.asarray(values, dtype=np.float64)
    rows, cols = values.shape
    count = max(rows, cols)
    tile_w, tile_h = iso_tile_size(rect, count)
    max_height = C.ISO_MAX_HEIGHT_TILES * tile_h

    heights = normalize(values) * max_height
    solid = solid_mask(values, threshold)
    walls = wall_colors(values)
    land = noise_map_colors(values, threshold)

    # Centre the diamond vertically in the panel.
    total_height = count * tile_h + max_height
    origin_x = rect.centerx
    origin_y = rect.top + (rect.height - total_height) / 2 + max_height

    previous_clip = surface.get_clip()
    surface.set_clip(rect)
    surface.fill(C.COLOR_GAME_FLOOR, rect)

    half_w = tile_w / 2
    half_h = tile_h / 2
    for y in range(rows):
        for x in range(cols):
            cx = origin_x + (x - y) * half_w
            cy = origin_y + (x + y) * half_h
            lift = heights[y, x]
            color = tuple(int(c) for c in (walls[y, x] if solid[y, x] else land[y, x]))

            top = (cx, cy - lift)
            right = (cx + half_w, cy + half_h - lift)
            bottom = (cx, cy + tile_h - lift)
            left = (cx - half_w, cy + half_h - lift)

            if lift > 0:
                pygame.draw.polygon(surface, _shade(color, C.ISO_SIDE_SHADE_LEFT),
                                    [left, bottom, (bottom[0], bottom[1] + lift), (left[0], left[1] + lift)])
                pygame.draw.polygon(surface, _shade(color, C.ISO_SIDE_SHADE_RIGHT),
                                    [bottom, right, (right[0], right[1] + lift), (bottom[0], bottom[1] + lift)])
            pygame.draw.polygon(surface, color, [top, right, bottom, left])

    surface.set_clip(previous_clip)

VIEW_PAINTERS = {
    "perspective": draw_perspective_view,
    "isometric": draw_isometric_view,
}

def draw_game_view(surface, rect, values, threshold, view_mode):
    VIEW_PAINTERS[view_mode](surface, rect, values, threshold)
