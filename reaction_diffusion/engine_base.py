"""
Abstract Base Class for Simulation Engines

The presentation layer only talks to this interface: it asks for one
update per tick and a pixel buffer to blit. It owns the window, input and
frame pacing; engines know nothing about any of that.
"""

from abc import ABC, abstractmethod


class SimulationEngine(ABC):
    """Per-tick loop contract: update() then draw()."""

    engine_name = ""   # e.g. "gray_scott"
    engine_label = ""  # e.g. "Gray-Scott"

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.generation = 0

    @abstractmethod
    def update(self):
        """Advance one time step. Returns the engine."""

    def step_n(self, n):
        """Advance n steps. Returns the engine."""
        for _ in range(n):
            self.update()
        return self

    @abstractmethod
    def draw(self, width, height, out=None, palette=None):
        """Render the current state to a flat uint32 ARGB buffer."""

    @abstractmethod
    def reset(self):
        """Return to the initial seeded state."""

    @abstractmethod
    def set_params(self, **params):
        """Update engine parameters."""

    @abstractmethod
    def get_params(self):
        """Return dict of current parameter values."""

    @property
    @abstractmethod
    def stats(self):
        """Return current state statistics."""

    def close(self):
        """Release worker resources, if any."""

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
