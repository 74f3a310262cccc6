import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from collections import defaultdict

import numpy as np
import pygame
import pytest

import constants as C
import logger
from noise_field import NoiseField
from preview import TerrainPreview
from terrain import generate_noise_grid


@pytest.fixture
def preview(tmp_path):
    p = TerrainPreview(seed=12345, rng=np.random.default_rng(7))
    p.graphing_manager.output_dir = str(tmp_path)
    yield p
    logger.set_preview(None)


def test_generate_builds_default_grid(preview):
    grid = preview.generate(new_seed=True)
    params = preview.parameters()
    assert grid.shape == (params.grid_size, params.grid_size)
    expected = generate_noise_grid(NoiseField(12345), params)
    assert np.array_equal(grid, expected)
    assert preview.generation_count == 1
    assert preview.graphing_manager.has_data()


def test_parameters_convert_slider_values(preview):
    preview.slider("persistence").set_value(65)
    preview.slider("lacunarity").set_value(31)
    preview.slider("threshold").set_value(-20)
    params = preview.parameters()
    assert params.persistence == 0.65
    assert params.lacunarity == 3.1
    assert params.threshold == -0.2


def test_set_parameter_regenerates_only_on_change(preview):
    preview.generate()
    assert preview.set_parameter("octaves", 1) is True
    assert preview.generation_count == 2

    field = NoiseField(12345)
    params = preview.parameters()
    zoom = C.ZOOM_BASE - params.scale
    assert preview.grid[3, 5] == field.sample(5 / zoom, 3 / zoom)

    assert preview.set_parameter("octaves", 1) is False
    assert preview.generation_count == 2


def test_set_parameter_resizes_grid(preview):
    preview.set_parameter("grid_size", 20)
    assert preview.grid.shape == (20, 20)


def test_unknown_parameter_raises(preview):
    with pytest.raises(KeyError):
        preview.set_parameter("roughness", 3)


def test_randomize_seed_is_reproducible_with_same_rng():
    a = TerrainPreview(seed=1, rng=np.random.default_rng(99))
    b = TerrainPreview(seed=1, rng=np.random.default_rng(99))
    grid_a = a.randomize_seed()
    grid_b = b.randomize_seed()
    assert a.current_seed == b.current_seed
    assert 0 <= a.current_seed < C.SEED_RANGE
    assert a.field.seed_value == a.current_seed
    assert np.array_equal(grid_a, grid_b)


def test_randomize_changes_the_grid(preview):
    before = preview.generate().copy()
    after = preview.randomize_seed()
    assert not np.array_equal(before, after)


def test_toggle_view_mode_cycles(preview):
    seen = [preview.view_mode]
    for _ in range(len(C.VIEW_MODES)):
        preview.toggle_view_mode()
        seen.append(preview.view_mode)
    assert seen[0] == seen[-1]
    assert set(seen) == set(C.VIEW_MODES)


def test_arrow_keys_pan_and_regenerate(preview):
    preview.generate()
    keys = defaultdict(bool)
    preview.update(keys, 0.1)
    assert preview.generation_count == 1

    keys[pygame.K_RIGHT] = True
    preview.update(keys, 0.5)
    assert preview.generation_count == 2
    assert preview.camera.x == pytest.approx(C.CAMERA_PAN_SPEED_CELLS * 0.5)

    preview.reset_camera()
    assert preview.camera.x == 0.0
    assert preview.generation_count == 3


def test_slider_event_regenerates(preview):
    preview.generate()
    slider = preview.slider("octaves")
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(slider.rect.left, slider.rect.centery))
    assert preview.handle_event(event) is True
    assert slider.value == slider.minimum
    assert preview.generation_count == 2


def test_draw_both_views(preview):
    pygame.font.init()
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    screen = pygame.Surface((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    preview.set_parameter("grid_size", 16)
    for _ in C.VIEW_MODES:
        preview.draw(screen, font)
        preview.toggle_view_mode()
    pygame.font.quit()


def test_draw_generates_when_empty(preview):
    pygame.font.init()
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    screen = pygame.Surface((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    assert preview.grid is None
    preview.draw(screen, font)
    assert preview.grid is not None
    pygame.font.quit()


def test_logger_prefix_tracks_generations(preview, capsys):
    logger.set_preview(preview)
    capsys.readouterr()
    logger.log("hello")
    assert capsys.readouterr().out.startswith("[Start] hello")
    preview.generate()
    capsys.readouterr()
    logger.log("again")
    assert capsys.readouterr().out.startswith("[Gen 0001] again")


def test_status_text_mentions_seed_and_view(preview):
    text = preview.status_text()
    assert "12345.00" in text
    assert preview.view_mode in text


def test_parameters_start_at_slider_defaults(preview):
    params = preview.parameters()
    assert params.grid_size == 50
    assert params.scale == 50
    assert params.octaves == 4
    assert params.persistence == 0.5
    assert params.lacunarity == 2.0
    assert params.threshold == 0.0


def test_panning_keeps_one_graph_row_and_stays_quiet(preview, capsys):
    preview.generate()
    capsys.readouterr()
    keys = defaultdict(bool)
    keys[pygame.K_RIGHT] = True
    for _ in range(30):
        preview.update(keys, 1 / 60)
    assert preview.generation_count == 31
    assert len(preview.graphing_manager.data['generation']) == 1
    assert preview.graphing_manager.data['generation'] == [31]
    assert "Generated" not in capsys.readouterr().out

    preview.set_parameter("octaves", 2)
    assert len(preview.graphing_manager.data['generation']) == 2
    assert "Generated" in capsys.readouterr().out
