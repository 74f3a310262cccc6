#noise_field.py

import math
import numpy as np

# The 8 gradient directions. A permutation value picks one with `value % 8`.
GRADIENT_VECTORS = np.array([
    [1, 1], [-1, 1], [1, -1], [-1, -1],
    [1, 0], [-1, 0], [0, 1], [0, -1]
], dtype=np.float64)

LCG_MULTIPLIER = 16807
LCG_MODULUS = 2147483647
UNIT_SEED_SCALE = 65536
TABLE_SIZE = 256

def lerp(a, b, t):
    "Linear interpolation."
    return (1 - t) * a + t * b

def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

def gradient(grad_table, h, x, y):
    """Looks up the gradient for hash h and returns its dot product with (x,y)"""
    g = grad_table[h & 255]
    return g[..., 0] * x + g[..., 1] * y

def normalize_seed(value):
    """
    Turns any real seed into the integer that drives the shuffle.
    Unit-interval seeds are scaled out, small seeds are folded with themselves.
    """
    if not math.isfinite(value):
        raise ValueError(f"Seed must be a finite number, got {value!r}")
    if 0 < value < 1:
        value *= UNIT_SEED_SCALE
    seed = abs(int(math.floor(value)))
    if seed < TABLE_SIZE:
        seed |= seed << 8
    return seed

def build_tables(value):
    """Builds a fresh (permutation, gradient) table pair for a seed value."""
    seed = normalize_seed(value)
    p = list(range(TABLE_SIZE))

    # Fisher-Yates shuffle driven by a Park-Miller LCG.
    for i in range(TABLE_SIZE - 1, 0, -1):
        seed = (seed * LCG_MULTIPLIER) % LCG_MODULUS
        r = math.floor((seed / LCG_MODULUS) * (i + 1))
        p[i], p[r] = p[r], p[i]

    # Doubled so that perm[X + 1] + Y + 1 never needs a modulo.
    perm = np.array(p + p, dtype=np.int64)
    grad = GRADIENT_VECTORS[perm % 8]
    perm.setflags(write=False)
    grad.setflags(write=False)
    return perm, grad

def _sample_tables(perm, grad, x, y):
    """Single-octave noise against an explicit table pair. Always returns an array."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    # NaN and inf coordinates are allowed to come out as NaN.
    with np.errstate(invalid='ignore'):
        x_floor = np.floor(x)
        y_floor = np.floor(y)

        # Unit grid cell containing the point
        X = x_floor.astype(np.int64) & 255
        Y = y_floor.astype(np.int64) & 255

        # Relative coordinates inside that cell
        xf = x - x_floor
        yf = y - y_floor

        u = fade(xf)
        v = fade(yf)

        # Hash the 4 corners
        aa = perm[X] + Y
        ab = perm[X] + Y + 1
        ba = perm[X + 1] + Y
        bb = perm[X + 1] + Y + 1

        g00 = gradient(grad, perm[aa], xf, yf)
        g01 = gradient(grad, perm[ab], xf, yf - 1)
        g10 = gradient(grad, perm[ba], xf - 1, yf)
        g11 = gradient(grad, perm[bb], xf - 1, yf - 1)

        nx0 = lerp(g00, g01, v)
        nx1 = lerp(g10, g11, v)
        return lerp(nx0, nx1, u)


class NoiseField:
    """
    Seeded 2D Perlin noise plus fractal Brownian motion.

    Both sampling methods take python floats or numpy arrays. Floats come back
    as floats, arrays come back as arrays of the same shape.
    """
    def __init__(self, seed=None):
        if seed is None:
            # Same range as a unit-interval seed after scaling.
            seed = np.random.default_rng().random() * UNIT_SEED_SCALE
        self.seed_value = None
        self._tables = None
        self.seed(seed)

    def seed(self, value):
        """Replaces both tables. Readers never see a half-built pair."""
        self._tables = build_tables(value)
        self.seed_value = value

    @property
    def permutation(self):
        return self._tables[0]

    @property
    def gradients(self):
        return self._tables[1]

    def sample(self, x, y):
        """Single-octave noise in [-1, 1]."""
        scalar = np.isscalar(x) and np.isscalar(y)
        perm, grad = self._tables
        value = _sample_tables(perm, grad, x, y)
        if scalar:
            return float(value)
        return value

    def fractal_sample(self, x, y, octaves, persistence, lacunarity):
        """
        Sums `octaves` layers of noise, each at `lacunarity` times the previous
        frequency and `persistence` times the previous amplitude, and divides by
        the summed amplitudes so the result stays in [-1, 1].

        Octaves are counted while the layer index is below `octaves`, so 4.0
        means 4 layers and 2.5 means 3. A zero amplitude sum (octaves < 1,
        non-finite octaves, or persistence values that cancel out) returns 0.0
        instead of dividing by zero.
        """
        scalar = np.isscalar(x) and np.isscalar(y)
        # One table pair for every layer, even if the field is reseeded meanwhile.
        perm, grad = self._tables
        if not scalar:
            x = np.asarray(x, dtype=np.float64)
            y = np.asarray(y, dtype=np.float64)

        total = 0.0
        frequency = 1.0
        amplitude = 1.0
        max_value = 0.0

        layer = 0
        while math.isfinite(octaves) and layer < octaves:
            total += _sample_tables(perm, grad, x * frequency, y * frequency) * amplitude
            max_value += amplitude
            amplitude *= persistence
            frequency *= lacunarity
            layer += 1

        if max_value == 0:
            if scalar:
                return 0.0
            return np.zeros(np.broadcast(x, y).shape)
        if scalar:
            return float(total / max_value)
        return total / max_value
