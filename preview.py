#preview.py

import pygame
import numpy as np
import constants as C
from camera import Camera
from noise_field import NoiseField
from terrain import NoiseParameters, generate_noise_grid, grid_statistics
from game_view import VIEW_MODES, draw_noise_map, draw_game_view
from graphing_manager import GraphingManager
from ui import build_sliders, draw_sliders, draw_status
import logger as log

class TerrainPreview:
    def __init__(self, seed=None, rng=None):
        log.log("Creating a new TerrainPreview...")
        # The rng only picks seeds for "randomize"; the noise itself never touches it.
        self.rng = rng if rng is not None else np.random.default_rng()
        self.current_seed = seed if seed is not None else self._draw_seed()
        self.field = NoiseField(self.current_seed)
        self.camera = Camera()
        self.sliders = build_sliders()
        self.graphing_manager = GraphingManager()
        self.view_mode = VIEW_MODES[0]
        self.grid = None
        self.generation_count = 0

        self.noise_rect = pygame.Rect(C.NOISE_PANEL_X, C.PANEL_TOP, C.PANEL_SIZE, C.PANEL_SIZE)
        self.game_rect = pygame.Rect(C.GAME_PANEL_X, C.PANEL_TOP, C.PANEL_SIZE, C.PANEL_SIZE)

        # Painted panels are kept until the grid or the view mode changes.
        self._noise_surface = None
        self._game_surface = None
        log.log(f"TerrainPreview created with seed {self.current_seed:.4f}. Default view: {self.view_mode}")

    def _draw_seed(self):
        return float(self.rng.random() * C.SEED_RANGE)

    def slider(self, name):
        for slider in self.sliders:
            if slider.name == name:
                return slider
        raise KeyError(name)

    def parameters(self):
        """The current generation parameters as read from the sliders."""
        return NoiseParameters(**{slider.name: slider.parameter for slider in self.sliders})

    def generate(self, new_seed=False):
        """Rebuilds the noise grid, reseeding first if asked."""
        if new_seed:
            self.field.seed(self.current_seed)

        params = self.parameters()
        self.grid = generate_noise_grid(self.field, params, self.camera.x, self.camera.y)
        self.camera.dirty = False
        self.generation_count += 1

        stats = grid_statistics(self.grid, params.threshold)
        is_new_row = self.graphing_manager.add_data_point(
            self.generation_count, self.current_seed, params, stats, self.grid
        )
        self._noise_surface = None
        self._game_surface = None

        # Panning rebuilds every frame; only seed or parameter changes are worth a line.
        if is_new_row:
            log.log(f"Generated {params.grid_size}x{params.grid_size} grid "
                    f"(octaves={params.octaves}, persistence={params.persistence:.2f}, "
                    f"lacunarity={params.lacunarity:.1f}). Solid fraction: {stats['solid_fraction']:.2f}")
        return self.grid

    def randomize_seed(self):
        self.current_seed = self._draw_seed()
        log.log(f"Event: New seed {self.current_seed:.4f}.")
        return self.generate(new_seed=True)

    def set_parameter(self, name, value):
        """Sets a slider's raw value. Regenerates and returns True if it changed."""
        if self.slider(name).set_value(value):
            self.generate()
            return True
        return False

    def toggle_view_mode(self):
        """Switches the game view and drops its painted panel."""
        index = VIEW_MODES.index(self.view_mode)
        self.view_mode = VIEW_MODES[(index + 1) % len(VIEW_MODES)]
        self._game_surface = None
        log.log(f"Event: View switched to '{self.view_mode}'.")

    def handle_event(self, event):
        """Forwards mouse events to the sliders. Returns True if the grid was rebuilt."""
        changed = False
        for slider in self.sliders:
            if slider.handle_event(event):
                changed = True
        if changed:
            self.generate()
        return changed

    def update(self, keys, delta_seconds):
        """Pans with the arrow keys and regenerates if the camera moved."""
        self.camera.pan_for_keys(
            keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_UP], keys[pygame.K_DOWN],
            delta_seconds
        )
        if self.camera.dirty:
            self.generate()

    def reset_camera(self):
        self.camera.reset()
        if self.camera.dirty:
            self.generate()

    def status_text(self):
        return (f"Seed: {self.current_seed:.2f} | View: {self.view_mode} | "
                f"Offset: ({self.camera.x:.1f}, {self.camera.y:.1f}) | "
                f"[R] Randomize  [V] View  [Arrows] Pan  [Home] Reset")

    def _panel_surfaces(self):
        params = self.parameters()
        if self._noise_surface is None:
            self._noise_surface = pygame.Surface(self.noise_rect.size)
            draw_noise_map(self._noise_surface, self._noise_surface.get_rect(), self.grid, params.threshold)
        if self._game_surface is None:
            self._game_surface = pygame.Surface(self.game_rect.size)
            draw_game_view(self._game_surface, self._game_surface.get_rect(), self.grid,
                           params.threshold, self.view_mode)
        return self._noise_surface, self._game_surface

    def draw(self, screen, font):
        if self.grid is None:
            self.generate()
        noise_surface, game_surface = self._panel_surfaces()
        screen.blit(noise_surface, self.noise_rect.topleft)
        screen.blit(game_surface, self.game_rect.topleft)
        pygame.draw.rect(screen, C.COLOR_PANEL_BORDER, self.noise_rect, 1)
        pygame.draw.rect(screen, C.COLOR_PANEL_BORDER, self.game_rect, 1)
        draw_sliders(screen, font, self.sliders)
        draw_status(screen, font, self.status_text())
