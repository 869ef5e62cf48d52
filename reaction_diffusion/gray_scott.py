"""
Gray-Scott Reaction-Diffusion Engine

Two chemical species (A, B) react and diffuse on a 2D grid:
  A + 2B -> 3B  (autocatalytic reaction)
  A is continuously fed in, B is continuously removed.

Equations (explicit Euler, one step of size dt):
  A' = A + dt * (Da * laplacian(A) - A*B^2 + F*(1-A))
  B' = B + dt * (Db * laplacian(B) + A*B^2 - (F+k)*B)

F (feed) and k (kill) are Rates: functions of normalized position, sampled
once into per-cell fields. Every update reads only the previous grids and
writes fresh arrays, then swaps both grids in one assignment, so nobody
ever sees a half-updated state. Rows are handed to an executor, which may
spread them over threads; results do not depend on the executor.

No stability guard: too large a dt or diffusion blows up to inf/NaN.

References:
  Pearson, "Complex Patterns in a Simple System" (1993)
  Karl Sims, Reaction-Diffusion Tutorial (karlsims.com/rd.html)
"""

import math

import numpy as np

from .engine_base import SimulationEngine
from .errors import BufferSizeMismatch, InvalidDimensions, InvalidParameter
from .executor import SequentialExecutor
from .grid import Grid, is_dimension, stencil_rows
from .pixel import pack_gray, pack_rgb
from .rates import as_rate
from .seeding import DiskSeed, as_seed

_ONE = np.float32(1.0)


def _as_float(name, value):
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a number, got {value!r}") from None


def _check_diffusion(name, value):
    value = _as_float(name, value)
    if not math.isfinite(value) or value < 0.0:
        raise InvalidParameter(f"{name} must be a finite value >= 0, got {value}")
    return value


def _check_time_step(value):
    value = _as_float("time_step", value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameter(f"time_step must be a finite value > 0, got {value}")
    return value


class GrayScott(SimulationEngine):

    engine_name = "gray_scott"
    engine_label = "Gray-Scott"

    def __init__(self, width, height, feed_rate=0.055, kill_rate=0.062,
                 diffusion_a=1.0, diffusion_b=0.5, time_step=1.0,
                 seed=None, executor=None):
        """
        Args:
            width, height: Grid dimensions (positive ints)
            feed_rate: float, callable f(u, v) or Rate
            kill_rate: float, callable f(u, v) or Rate
            diffusion_a, diffusion_b: Diffusion coefficients (>= 0)
            time_step: Euler step size (> 0)
            seed: Seed strategy, an int (random cell) or None (centred disk)
            executor: SequentialExecutor (default) or ThreadedExecutor
        """
        if not (is_dimension(width) and is_dimension(height)):
            raise InvalidDimensions(width, height)
        super().__init__(int(width), int(height))

        self.feed_rate = as_rate(feed_rate)
        self.kill_rate = as_rate(kill_rate)
        self.diffusion_a = _check_diffusion("diffusion_a", diffusion_a)
        self.diffusion_b = _check_diffusion("diffusion_b", diffusion_b)
        self.time_step = _check_time_step(time_step)
        self.seed = as_seed(seed, self.width, self.height)
        self.executor = executor if executor is not None else SequentialExecutor()

        self._rebuild_rate_fields()
        self.concentration_a, self.concentration_b = self._seeded_grids()

    def _rebuild_rate_fields(self):
        self._feed_field = self.feed_rate.field(self.width, self.height)
        self._kill_field = self.kill_rate.field(self.width, self.height)
        # F + k per cell, summed once in float32
        self._fk_field = self._kill_field + self._feed_field

    def _seeded_grids(self):
        a = Grid(self.width, self.height, fill=1.0)
        b = Grid(self.width, self.height, fill=0.0)
        self.seed.apply(b)
        return a, b

    @property
    def rate_fields(self):
        """(feed, kill) per-cell float32 arrays, copies."""
        return self._feed_field.copy(), self._kill_field.copy()

    def update(self):
        """Advance one Euler step. Returns the engine."""
        a_old = self.concentration_a.cells
        b_old = self.concentration_b.cells
        pad_a = self.concentration_a.padded()
        pad_b = self.concentration_b.padded()
        new_a = np.empty_like(a_old)
        new_b = np.empty_like(b_old)

        dt = np.float32(self.time_step)
        da = np.float32(self.diffusion_a)
        db = np.float32(self.diffusion_b)
        feed = self._feed_field
        fk = self._fk_field

        def rows(y0, y1):
            A = a_old[y0:y1]
            B = b_old[y0:y1]

            reaction = B * B
            reaction *= A

            # dA = Da*lap_A - A*B^2 + F*(1-A)
            d_a = stencil_rows(pad_a, y0, y1)
            d_a *= da
            d_a -= reaction
            d_a += feed[y0:y1] * (_ONE - A)
            d_a *= dt
            np.add(A, d_a, out=new_a[y0:y1])

            # dB = Db*lap_B + A*B^2 - (F+k)*B
            d_b = stencil_rows(pad_b, y0, y1)
            d_b *= db
            d_b += reaction
            d_b -= fk[y0:y1] * B
            d_b *= dt
            np.add(B, d_b, out=new_b[y0:y1])

        self.executor.run(rows, self.height)

        self.concentration_a, self.concentration_b = (
            Grid._wrap(new_a), Grid._wrap(new_b))
        self.generation += 1
        return self

    def _check_target(self, width, height, out):
        if width is None:
            width = self.width
        if height is None:
            height = self.height
        if (width, height) != (self.width, self.height):
            raise BufferSizeMismatch((self.width, self.height), f"{width}x{height}")
        n = self.width * self.height
        if out is None:
            return np.empty(n, dtype=np.uint32)
        if not isinstance(out, np.ndarray) or out.dtype != np.uint32:
            raise InvalidParameter("out must be a uint32 numpy array")
        if out.shape != (n,):
            raise BufferSizeMismatch((self.width, self.height), f"{out.size} pixels")
        if not out.flags.c_contiguous:
            raise InvalidParameter("out must be C-contiguous")
        return out

    def draw(self, width=None, height=None, out=None, palette=None):
        """
        Render B to a flat row-major ARGB buffer of width*height pixels.

        Intensity is clamp(B, 0, 1) * 255 truncated to uint8, written as
        opaque gray, or looked up in ``palette`` ((256, 3) uint8) if given.
        A diverged field still renders: NaN and -inf draw as 0, +inf as 255.

        Raises:
            BufferSizeMismatch: width/height or ``out`` do not match the grid
        """
        out = self._check_target(width, height, out)
        if palette is not None:
            palette = np.asarray(palette, dtype=np.uint8)
            if palette.shape != (256, 3):
                raise InvalidParameter(
                    f"palette must have shape (256, 3), got {palette.shape}")
        frame = out.reshape(self.height, self.width)
        b = self.concentration_b.cells

        def rows(y0, y1):
            band = np.nan_to_num(b[y0:y1], nan=0.0, posinf=1.0, neginf=0.0)
            intensity = (np.clip(band, 0.0, 1.0) * 255).astype(np.uint8)
            if palette is None:
                pack_gray(intensity, out=frame[y0:y1])
            else:
                pack_rgb(palette[intensity], out=frame[y0:y1])

        self.executor.run(rows, self.height)
        return out

    def reset(self):
        self.concentration_a, self.concentration_b = self._seeded_grids()
        self.generation = 0

    def add_blob(self, cx, cy, radius=5):
        """Paint B = 1 in a disk, e.g. at the mouse position."""
        DiskSeed(cx, cy, radius).apply(self.concentration_b)

    def remove_blob(self, cx, cy, radius=5):
        """Erase B and restore A in a disk."""
        DiskSeed(cx, cy, radius, value=1.0).apply(self.concentration_a)
        DiskSeed(cx, cy, radius, value=0.0).apply(self.concentration_b)

    def set_params(self, feed_rate=None, kill_rate=None, diffusion_a=None,
                   diffusion_b=None, time_step=None, **kwargs):
        """Change parameters. All or nothing: if any value is rejected,
        the engine keeps every old value."""
        if kwargs:
            raise InvalidParameter(f"Unknown parameters: {sorted(kwargs)}")
        feed = self.feed_rate if feed_rate is None else as_rate(feed_rate)
        kill = self.kill_rate if kill_rate is None else as_rate(kill_rate)
        da = (self.diffusion_a if diffusion_a is None
              else _check_diffusion("diffusion_a", diffusion_a))
        db = (self.diffusion_b if diffusion_b is None
              else _check_diffusion("diffusion_b", diffusion_b))
        dt = self.time_step if time_step is None else _check_time_step(time_step)

        if feed is not self.feed_rate or kill is not self.kill_rate:
            feed_field = feed.field(self.width, self.height)
            kill_field = kill.field(self.width, self.height)
            self._feed_field = feed_field
            self._kill_field = kill_field
            self._fk_field = kill_field + feed_field
        self.feed_rate, self.kill_rate = feed, kill
        self.diffusion_a, self.diffusion_b, self.time_step = da, db, dt

    def get_params(self):
        return {
            "feed_rate": self.feed_rate,
            "kill_rate": self.kill_rate,
            "diffusion_a": self.diffusion_a,
            "diffusion_b": self.diffusion_b,
            "time_step": self.time_step,
        }

    @property
    def stats(self):
        b = self.concentration_b.cells
        return {
            "generation": self.generation,
            "mass": float(b.sum()),
            "mean": float(b.mean()),
            "max": float(b.max()),
            "alive_pct": float((b > 0.01).sum()) / b.size * 100,
        }

    def close(self):
        self.executor.close()

    def __repr__(self):
        return (f"GrayScott({self.width}x{self.height}, feed={self.feed_rate!r}, "
                f"kill={self.kill_rate!r}, Da={self.diffusion_a}, "
                f"Db={self.diffusion_b}, dt={self.time_step})")
