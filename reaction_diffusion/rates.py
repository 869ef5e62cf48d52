"""
Spatially-Varying Rate Parameters

Feed and kill rates are functions of normalized position (u, v) = (x/W, y/H)
in [0, 1). A Rate evaluates over whole coordinate arrays so the engine can
sample it once into a (H, W) float32 field.

  ConstantRate  - same value everywhere (the common case)
  LinearRate    - linear ramp along x or y (Pearson-style parameter map)
  RadialRate    - normal value in the middle, ramps up toward the edges
  FunctionRate  - any callable f(u, v)
"""

from abc import ABC, abstractmethod

import numpy as np

from .errors import InvalidDimensions, InvalidParameter


def normalized_coords(width, height):
    """(u, v) arrays of shape (H, W) with u = x/W and v = y/H."""
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    u = np.arange(width, dtype=np.float64) / width
    v = np.arange(height, dtype=np.float64) / height
    return np.meshgrid(u, v)


class Rate(ABC):
    """Rate parameter as a pure function of normalized position."""

    @abstractmethod
    def evaluate(self, u, v):
        """Evaluate on broadcastable coordinate arrays."""

    def __call__(self, u, v):
        return float(np.asarray(self.evaluate(np.float64(u), np.float64(v))))

    def field(self, width, height):
        """Sample at (x/W, y/H) for every cell, as a (H, W) float32 array."""
        u, v = normalized_coords(width, height)
        values = np.broadcast_to(self.evaluate(u, v), u.shape)
        return np.ascontiguousarray(values, dtype=np.float32)


class ConstantRate(Rate):

    def __init__(self, value):
        self.value = float(value)

    def evaluate(self, u, v):
        return np.full(np.broadcast(u, v).shape, self.value)

    def __call__(self, u, v):
        return self.value

    def __repr__(self):
        return f"ConstantRate({self.value})"


class LinearRate(Rate):
    """Linear ramp from ``start`` at coordinate 0 to ``end`` at coordinate 1."""

    def __init__(self, start, end, axis="x"):
        if axis not in ("x", "y"):
            raise InvalidParameter(f"axis must be 'x' or 'y', got {axis!r}")
        self.start = float(start)
        self.end = float(end)
        self.axis = axis

    def evaluate(self, u, v):
        t = u if self.axis == "x" else v
        return self.start + (self.end - self.start) * np.asarray(t)

    def __repr__(self):
        return f"LinearRate({self.start}, {self.end}, axis={self.axis!r})"


class RadialRate(Rate):
    """Radial containment.

    Within ``inner`` (fraction of the half-size) the rate is ``value``;
    between ``inner`` and ``outer`` it ramps linearly to
    ``value * edge_multiplier``; beyond ``outer`` it stays there. Used as a
    feed rate, a high edge value kills B and restores A so patterns stay
    centred.
    """

    def __init__(self, value, inner=0.40, outer=0.70, edge_multiplier=5.0):
        if not 0.0 <= inner < outer:
            raise InvalidParameter(
                f"need 0 <= inner < outer, got inner={inner}, outer={outer}")
        self.value = float(value)
        self.inner = float(inner)
        self.outer = float(outer)
        self.edge_multiplier = float(edge_multiplier)

    def evaluate(self, u, v):
        dist = np.sqrt((np.asarray(u) - 0.5) ** 2 + (np.asarray(v) - 0.5) ** 2) / 0.5
        ramp = np.clip((dist - self.inner) / (self.outer - self.inner), 0.0, 1.0)
        return self.value * (1.0 + ramp * (self.edge_multiplier - 1.0))

    def __repr__(self):
        return (f"RadialRate({self.value}, inner={self.inner}, "
                f"outer={self.outer}, edge_multiplier={self.edge_multiplier})")


class FunctionRate(Rate):
    """Wraps a plain callable f(u, v) -> float.

    The callable only has to handle scalars; it is vectorized here.
    """

    def __init__(self, fn):
        if not callable(fn):
            raise InvalidParameter(f"rate function must be callable, got {fn!r}")
        self.fn = fn
        self._vectorized = np.vectorize(fn, otypes=[np.float64])

    def evaluate(self, u, v):
        return self._vectorized(u, v)

    def __call__(self, u, v):
        return float(self.fn(u, v))

    def __repr__(self):
        name = getattr(self.fn, "__name__", type(self.fn).__name__)
        return f"FunctionRate({name})"


def as_rate(value):
    """Coerce a float, callable or Rate into a Rate."""
    if isinstance(value, Rate):
        return value
    if isinstance(value, (int, float, np.number)) and not isinstance(value, bool):
        return ConstantRate(value)
    if callable(value):
        return FunctionRate(value)
    raise InvalidParameter(
        f"rate must be a number, a callable or a Rate, got {value!r}")
