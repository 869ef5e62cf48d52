"""Gray-Scott reaction-diffusion simulator rendering to packed ARGB pixel buffers."""

from .errors import (
    BufferSizeMismatch,
    InvalidDimensions,
    InvalidParameter,
    ReactionDiffusionError,
)
from .executor import SequentialExecutor, ThreadedExecutor, split_rows
from .grid import Grid
from .gray_scott import GrayScott
from .pixel import Pixel, pack, unpack
from .rates import ConstantRate, FunctionRate, LinearRate, RadialRate, Rate, as_rate
from .seeding import DiskSeed, RandomCellSeed, Seed

__all__ = [
    "BufferSizeMismatch",
    "ConstantRate",
    "DiskSeed",
    "FunctionRate",
    "GrayScott",
    "Grid",
    "InvalidDimensions",
    "InvalidParameter",
    "LinearRate",
    "Pixel",
    "RadialRate",
    "RandomCellSeed",
    "Rate",
    "ReactionDiffusionError",
    "Seed",
    "SequentialExecutor",
    "ThreadedExecutor",
    "as_rate",
    "pack",
    "split_rows",
    "unpack",
]
