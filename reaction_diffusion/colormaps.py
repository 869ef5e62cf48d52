"""
Palettes for the render step

Each palette is a (256, 3) uint8 lookup table indexed by the same 0..255
intensity the grayscale render uses. Passing one to GrayScott.draw()
colours the output; alpha stays opaque.
"""

import numpy as np


def _interpolate_colors(stops, n=256):
    """
    Build a LUT by smoothstep-interpolating between color stops.

    Args:
        stops: List of (position, (r, g, b)) with positions ascending in [0, 1]
        n: Number of entries in the LUT
    """
    positions = np.array([s[0] for s in stops], dtype=np.float64)
    colors = np.array([s[1] for s in stops], dtype=np.float64)
    t = np.linspace(0.0, 1.0, n)

    # Segment index for each t, then local fraction within the segment
    seg = np.clip(np.searchsorted(positions, t, side="right") - 1, 0, len(stops) - 2)
    span = positions[seg + 1] - positions[seg]
    frac = np.divide(t - positions[seg], span, out=np.zeros_like(t), where=span > 0)
    frac = np.clip(frac, 0.0, 1.0)
    frac = frac * frac * (3 - 2 * frac)  # smoothstep

    lut = colors[seg] + frac[:, None] * (colors[seg + 1] - colors[seg])
    return lut.astype(np.uint8)


# --- Palette Definitions ---

def gray():
    """Plain ramp; same output as drawing without a palette."""
    ramp = np.arange(256, dtype=np.uint8)
    return np.stack([ramp, ramp, ramp], axis=1)


def inverted():
    """White background, dark patterns (classic print look)."""
    return gray()[::-1].copy()


def coral():
    """Dark teal water to warm coral."""
    return _interpolate_colors([
        (0.00, (2, 10, 18)),
        (0.25, (10, 60, 80)),
        (0.50, (40, 150, 150)),
        (0.75, (240, 120, 90)),
        (1.00, (255, 230, 200)),
    ])


def fire():
    """Black through red to yellow-white fire."""
    return _interpolate_colors([
        (0.00, (0, 0, 0)),
        (0.20, (60, 5, 0)),
        (0.40, (180, 30, 0)),
        (0.60, (240, 100, 10)),
        (0.80, (255, 200, 50)),
        (1.00, (255, 255, 200)),
    ])


def ocean():
    """Deep blue to cyan to white."""
    return _interpolate_colors([
        (0.00, (0, 2, 15)),
        (0.25, (5, 20, 80)),
        (0.50, (10, 80, 160)),
        (0.75, (40, 180, 220)),
        (1.00, (200, 250, 255)),
    ])


def moss():
    """Dark earth to vibrant green."""
    return _interpolate_colors([
        (0.00, (5, 5, 2)),
        (0.30, (25, 40, 12)),
        (0.60, (60, 160, 40)),
        (1.00, (180, 255, 150)),
    ])


# Registry of all palettes
PALETTES = {
    "gray": gray,
    "inverted": inverted,
    "coral": coral,
    "fire": fire,
    "ocean": ocean,
    "moss": moss,
}

PALETTE_ORDER = list(PALETTES.keys())


def get_palette(name):
    """Get a palette LUT (256, 3) uint8 array by name."""
    try:
        return PALETTES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown palette: {name!r}. Available: {PALETTE_ORDER}") from None
