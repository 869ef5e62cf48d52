"""
Initial perturbations for species B.

Both strategies write through Grid.set, so parts of a seed that fall
outside the grid are dropped instead of raising.
"""

from abc import ABC, abstractmethod

import numpy as np

from .errors import InvalidParameter


class Seed(ABC):
    """Marks the starting region where B = value."""

    value = 1.0

    @abstractmethod
    def cells(self, width, height):
        """Return the list of (x, y) cells to mark. May include out-of-range cells."""

    def apply(self, concentration_b):
        for x, y in self.cells(concentration_b.width, concentration_b.height):
            concentration_b.set(x, y, self.value)


class DiskSeed(Seed):
    """Filled disk: every cell with (x-cx)^2 + (y-cy)^2 <= radius^2."""

    def __init__(self, cx, cy, radius, value=1.0):
        if radius < 0:
            raise InvalidParameter(f"radius must be >= 0, got {radius}")
        self.cx = cx
        self.cy = cy
        self.radius = radius
        self.value = value

    def cells(self, width, height):
        r = int(np.ceil(self.radius))
        cx = int(np.floor(self.cx))
        cy = int(np.floor(self.cy))
        r_sq = self.radius * self.radius
        out = []
        for y in range(cy - r - 1, cy + r + 2):
            for x in range(cx - r - 1, cx + r + 2):
                if (x - self.cx) ** 2 + (y - self.cy) ** 2 <= r_sq:
                    out.append((x, y))
        return out

    @classmethod
    def centered(cls, width, height, radius=None):
        """Disk at the grid centre; default radius is a tenth of the short side."""
        if radius is None:
            radius = max(1, min(width, height) // 10)
        return cls(width // 2, height // 2, radius)

    def __repr__(self):
        return f"DiskSeed({self.cx}, {self.cy}, radius={self.radius})"


class RandomCellSeed(Seed):
    """One random cell plus its four orthogonal neighbours.

    The cell is drawn from numpy's PCG64 generator seeded with ``seed``, so
    the same seed gives the same cell on every platform.
    """

    def __init__(self, seed, value=1.0):
        self.seed = int(seed)
        self.value = value

    def pick(self, width, height):
        rng = np.random.default_rng(self.seed)
        x = int(rng.integers(0, width))
        y = int(rng.integers(0, height))
        return x, y

    def cells(self, width, height):
        x, y = self.pick(width, height)
        return [(x, y), (x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)]

    def __repr__(self):
        return f"RandomCellSeed({self.seed})"


def as_seed(seed, width, height):
    """Coerce None, an int or a Seed into a Seed. None means a centred disk."""
    if isinstance(seed, Seed):
        return seed
    if seed is None:
        return DiskSeed.centered(width, height)
    if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool):
        return RandomCellSeed(seed)
    raise InvalidParameter(f"seed must be an int or a Seed, got {seed!r}")
