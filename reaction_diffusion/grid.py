"""
Concentration Grid

Dense float32 field for one chemical species, stored row-major as a
(height, width) numpy array. Cell access is bounds-checked: reads outside
the grid return None and writes outside the grid are ignored, which keeps
seeding code near the edges simple.

The Laplacian uses a weighted 3x3 stencil:

    0.05  0.2  0.05
    0.2  -1.0  0.2
    0.05  0.2  0.05

Neighbours outside the grid are dropped and their weight is not
redistributed, so border cells see a smaller response than interior cells
(equivalent to zero padding).
"""

import numpy as np

from .errors import InvalidDimensions

W_ORTHO = np.float32(0.2)
W_DIAG = np.float32(0.05)
W_CENTER = np.float32(1.0)

_ZERO = np.float32(0.0)


def is_dimension(n):
    return isinstance(n, (int, np.integer)) and not isinstance(n, bool) and n > 0


def stencil_rows(padded, y0, y1):
    """
    Laplacian for rows [y0, y1) of a zero-padded field.

    Args:
        padded: (H + 2, W + 2) float32 array, field in [1:-1, 1:-1], zero border
        y0, y1: row band of the unpadded field

    Returns:
        (y1 - y0, W) float32 array
    """
    # Row y of the field is row y + 1 of the padded array.
    up = padded[y0:y1]
    mid = padded[y0 + 1:y1 + 1]
    down = padded[y0 + 2:y1 + 2]

    out = up[:, 1:-1] + down[:, 1:-1]
    out += mid[:, :-2]
    out += mid[:, 2:]
    out *= W_ORTHO

    diag = up[:, :-2] + up[:, 2:]
    diag += down[:, :-2]
    diag += down[:, 2:]
    diag *= W_DIAG

    out += diag
    out -= mid[:, 1:-1] * W_CENTER
    return out


class Grid:
    """Fixed-size float32 field with bounds-checked access."""

    def __init__(self, width, height, fill=0.0):
        if not (is_dimension(width) and is_dimension(height)):
            raise InvalidDimensions(width, height)
        self._width = int(width)
        self._height = int(height)
        self.cells = np.full((self._height, self._width), fill, dtype=np.float32)

    @classmethod
    def from_array(cls, array):
        """Grid holding a float32 copy of a 2-D array."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise InvalidDimensions(
                None, None, f"Grid needs a 2-D array, got shape {arr.shape}")
        height, width = arr.shape
        if width == 0 or height == 0:
            raise InvalidDimensions(width, height)
        return cls._wrap(np.array(arr, dtype=np.float32))

    @classmethod
    def _wrap(cls, cells):
        # Takes ownership of a 2-D float32 array without copying.
        grid = cls.__new__(cls)
        grid._height, grid._width = cells.shape
        grid.cells = cells
        return grid

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def shape(self):
        """(height, width), numpy order."""
        return self.cells.shape

    def in_bounds(self, x, y):
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x, y):
        """Cell value, or None when (x, y) is outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return float(self.cells[y, x])

    def set(self, x, y, value):
        """Write a cell. Out-of-range coordinates are ignored."""
        if self.in_bounds(x, y):
            self.cells[y, x] = value

    def fill(self, value):
        self.cells.fill(value)

    def copy(self):
        return Grid.from_array(self.cells)

    def _neighbour(self, x, y):
        if not self.in_bounds(x, y):
            return _ZERO
        return self.cells[y, x]

    def laplacian(self, x, y):
        """
        Stencil value at (x, y), or None when (x, y) is outside the grid.

        Summation order matches stencil_rows so both give the same float32.
        """
        if not self.in_bounds(x, y):
            return None
        n = self._neighbour
        ortho = n(x, y - 1) + n(x, y + 1)
        ortho += n(x - 1, y)
        ortho += n(x + 1, y)
        ortho *= W_ORTHO

        diag = n(x - 1, y - 1) + n(x + 1, y - 1)
        diag += n(x - 1, y + 1)
        diag += n(x + 1, y + 1)
        diag *= W_DIAG

        return float(np.float32(ortho + diag) - self.cells[y, x] * W_CENTER)

    def padded(self):
        """Zero-bordered (H + 2, W + 2) copy for the vectorized stencil."""
        p = np.zeros((self._height + 2, self._width + 2), dtype=np.float32)
        p[1:-1, 1:-1] = self.cells
        return p

    def laplacian_field(self, y0=0, y1=None):
        """Stencil over rows [y0, y1) as a float32 array."""
        if y1 is None:
            y1 = self._height
        return stencil_rows(self.padded(), y0, y1)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.cells, other.cells)

    __hash__ = None

    def __repr__(self):
        return f"Grid({self._width}x{self._height})"
