# constants.py

# =============================================================================
# --- DISPLAY & PERFORMANCE SETTINGS ---
# =============================================================================
CLOCK_TICK_RATE = 60
MILLISECONDS_PER_SECOND = 1000.0
PROFILER_PRINT_LINE_COUNT = 20
WINDOW_TITLE = "Perlin Noise Terrain Preview"

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 720

# =============================================================================
# --- LAYOUT ---
# =============================================================================
# Two square panels side by side: the noise map on the left, the game view on the right.
PANEL_MARGIN = 20
PANEL_SIZE = 470
PANEL_TOP = 20
NOISE_PANEL_X = PANEL_MARGIN
GAME_PANEL_X = PANEL_MARGIN * 2 + PANEL_SIZE

# The slider block sits under the panels, in two columns of three.
SLIDER_TOP = PANEL_TOP + PANEL_SIZE + 30
SLIDER_WIDTH = 300
SLIDER_HEIGHT = 8
SLIDER_KNOB_RADIUS = 9
SLIDER_ROW_SPACING = 50
SLIDER_COLUMN_SPACING = 480
SLIDER_LABEL_OFFSET_Y = 22
SLIDERS_PER_COLUMN = 3

UI_FONT_SIZE = 24
STATUS_POS_X = PANEL_MARGIN
STATUS_POS_Y = SCREEN_HEIGHT - 28

# =============================================================================
# --- NOISE PARAMETERS ---
# =============================================================================
# Sliders hold integers. The divisor turns the slider value into the real parameter.
# Each entry: (name, label, minimum, maximum, default, divisor, decimals)
SLIDER_DEFINITIONS = (
    ("grid_size", "Grid Size", 10, 120, 50, 1, 0),
    ("scale", "Scale", 1, 100, 50, 1, 0),
    ("octaves", "Octaves", 1, 8, 4, 1, 0),
    ("persistence", "Persistence", 0, 100, 50, 100, 2),
    ("lacunarity", "Lacunarity", 10, 40, 20, 10, 1),
    ("threshold", "Threshold", -50, 50, 0, 100, 2),
)

# The sampling divisor is ZOOM_BASE - scale, so a higher scale zooms in.
ZOOM_BASE = 110

# Random seeds are drawn from [0, SEED_RANGE).
SEED_RANGE = 65536

# The normalised value below which a cell counts as solid, before the threshold offset.
SOLID_BASE_LEVEL = 0.5

# =============================================================================
# --- CAMERA ---
# =============================================================================
# Pan speed in grid cells per second.
CAMERA_PAN_SPEED_CELLS = 12.0

# =============================================================================
# --- COLORS ---
# =============================================================================
COLOR_WHITE = (255, 255, 255); COLOR_BLACK = (0, 0, 0)
COLOR_BACKGROUND = (18, 18, 24)
COLOR_PANEL_BORDER = (70, 70, 80)
COLOR_SLIDER_TRACK = (60, 60, 70); COLOR_SLIDER_FILL = (90, 160, 255)
COLOR_SLIDER_KNOB = (230, 230, 240); COLOR_SLIDER_KNOB_ACTIVE = (255, 210, 90)
COLOR_TEXT = (220, 220, 225)

# Noise map: solid cells get a blue ramp, land cells a green/brown ramp.
WATER_GREEN_FACTOR = 0.7
WATER_BLUE_OFFSET = 100
LAND_RED_FACTOR = 0.8; LAND_RED_OFFSET = 50
LAND_GREEN_FACTOR = 0.9; LAND_GREEN_OFFSET = 80
LAND_BLUE_FACTOR = 0.5

# =============================================================================
# --- GAME VIEW ---
# =============================================================================
VIEW_MODES = ("perspective", "isometric")

COLOR_GAME_FLOOR = (26, 26, 26)
# Wall base colour and how far it moves per unit of depth intensity.
WALL_BASE_COLOR = (26, 26, 80)
WALL_DEPTH_RANGE = (20, 40, 175)
WALL_DEPTH_MULTIPLIER = 2.0

PERSPECTIVE_FACTOR = 0.7
WALL_HEIGHT_CELLS = 2
WALL_EDGE_PIXELS = 2
HIGHLIGHT_ALPHA = 0.1
SHADOW_ALPHA = 0.3
FLOOR_BASE_ALPHA = 0.05
FLOOR_ALPHA_RANGE = 0.1

# Ambient light runs from white at the centre to black at the rim.
AMBIENT_CENTER_ALPHA = 0.1
AMBIENT_EDGE_ALPHA = 0.3

# Isometric tiles: width/height ratio of a diamond and the tallest column in tile heights.
ISO_TILE_ASPECT = 0.5
ISO_MAX_HEIGHT_TILES = 3.0
ISO_SIDE_SHADE_LEFT = 0.75
ISO_SIDE_SHADE_RIGHT = 0.55

# =============================================================================
# --- GRAPHS ---
# =============================================================================
GRAPH_FIGURE_SIZE = (12, 7)
GRAPH_HISTOGRAM_BINS = 40
GRAPH_HISTOGRAM_FILE = "noise_value_histogram.png"
GRAPH_CROSS_SECTION_FILE = "noise_cross_section.png"
GRAPH_SOLID_FRACTION_FILE = "solid_fraction_graph.png"
