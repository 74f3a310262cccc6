# graphing_manager.py

import os
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import logger as log
import constants as C
from terrain import normalize

class GraphingManager:
    """
    Collects summary statistics for every generated noise grid and
    writes graphs of them after the preview closes.
    """
    def __init__(self, output_dir="."):
        self.output_dir = output_dir
        self.data = {
            'generation': [],
            'seed': [],
            'octaves': [],
            'persistence': [],
            'lacunarity': [],
            'min': [],
            'max': [],
            'mean': [],
            'std': [],
            'solid_fraction': [],
        }
        self.last_grid = None
        self.last_threshold = 0.0
        self._last_key = None
        log.log("GraphingManager initialized.")

    def add_data_point(self, generation, seed, params, stats, grid):
        """
        Adds one row of statistics and keeps the grid it came from.

        A grid built with the same seed and parameters as the previous row
        (the camera moved, nothing else) replaces that row instead of adding
        one. Returns True when a new row was added.
        """
        key = (seed, params)
        is_new_row = key != self._last_key or not self.has_data()
        if is_new_row:
            self.data['generation'].append(generation)
            self.data['seed'].append(seed)
            self.data['octaves'].append(params.octaves)
            self.data['persistence'].append(params.persistence)
            self.data['lacunarity'].append(params.lacunarity)
            for key_name in ('min', 'max', 'mean', 'std', 'solid_fraction'):
                self.data[key_name].append(stats[key_name])
        else:
            self.data['generation'][-1] = generation
            for key_name in ('min', 'max', 'mean', 'std', 'solid_fraction'):
                self.data[key_name][-1] = stats[key_name]
        self._last_key = key
        self.last_grid = np.array(grid, copy=True)
        self.last_threshold = params.threshold
        return is_new_row

    def has_data(self):
        return len(self.data['generation']) > 0

    def _save(self, fig, file_name, description):
        file_path = os.path.join(self.output_dir, file_name)
        try:
            fig.savefig(file_path)
            log.log(f"[GraphingManager] {description} saved to {file_path}")
        except Exception as e:
            log.log(f"[GraphingManager] ERROR: Could not save {description.lower()}. Reason: {e}")
        finally:
            plt.close(fig)

    def generate_and_save_histogram(self):
        """
        Histogram of the values in the last grid, with the solid/land threshold marked.
        """
        log.log(f"[GraphingManager] Generating value histogram for a {self.last_grid.shape[1]}x{self.last_grid.shape[0]} grid...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        ax.hist(self.last_grid.ravel(), bins=C.GRAPH_HISTOGRAM_BINS, range=(-1.0, 1.0), color='tab:blue')

        # The threshold is defined on the normalised scale; convert it back to [-1, 1].
        cutoff = (C.SOLID_BASE_LEVEL + self.last_threshold) * 2 - 1
        ax.axvline(cutoff, color='r', linestyle='--', linewidth=0.8, label=f'Solid Threshold ({cutoff:.2f})')

        ax.set_title('Last Grid: Noise Value Distribution')
        ax.set_xlabel('Noise Value')
        ax.set_ylabel('Cell Count')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()
        fig.tight_layout()

        self._save(fig, C.GRAPH_HISTOGRAM_FILE, "Histogram")

    def generate_and_save_cross_section(self):
        """
        The centre row of the last grid, raw and normalised.
        """
        log.log("[GraphingManager] Generating cross-section plot...")
        row = self.last_grid[self.last_grid.shape[0] // 2]

        fig, ax1 = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        ax1.set_title('Last Grid: Centre Row Cross Section')
        ax1.set_xlabel('Cell')
        ax1.grid(True, which='both', linestyle='--', linewidth=0.5)

        ax1.set_ylabel('Noise Value', color='tab:blue')
        line1, = ax1.plot(row, color='tab:blue', label='Noise Value')
        ax1.tick_params(axis='y', labelcolor='tab:blue')
        ax1.set_ylim(-1.0, 1.0)

        ax2 = ax1.twinx()
        ax2.set_ylabel('Normalised Height', color='tab:green')
        line2, = ax2.plot(normalize(row), color='tab:green', linestyle=':', label='Normalised Height')
        ax2.tick_params(axis='y', labelcolor='tab:green')
        ax2.set_ylim(0.0, 1.0)

        ax1.legend(handles=[line1, line2], loc='upper left')
        fig.tight_layout()

        self._save(fig, C.GRAPH_CROSS_SECTION_FILE, "Cross section")

    def generate_and_save_solid_fraction_graph(self):
        """
        Solid fraction and mean value across all generations of the session.
        """
        log.log("[GraphingManager] Generating solid fraction plot...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        ax.plot(self.data['generation'], self.data['solid_fraction'], marker='o', label='Solid Fraction', color='tab:purple')
        ax.plot(self.data['generation'], self.data['mean'], marker='.', label='Mean Value', color='tab:orange')
        ax.axhline(0, color='gray', linestyle='--', linewidth=0.8)

        ax.set_title('Solid Fraction per Generation')
        ax.set_xlabel('Generation')
        ax.set_ylabel('Fraction / Value')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()
        fig.tight_layout()

        self._save(fig, C.GRAPH_SOLID_FRACTION_FILE, "Solid fraction graph")

    def generate_and_save_graphs(self):
        """
        Generates and saves all configured graphs if data exists.
        """
        if not self.has_data():
            log.log("[GraphingManager] No data collected, skipping plot generation.")
            return

        self.generate_and_save_histogram()
        self.generate_and_save_cross_section()
        self.generate_and_save_solid_fraction_graph()
