"""
Error types for the reaction-diffusion core.

All errors subclass ValueError so callers that already guard engine
construction with ``except ValueError`` keep working.
"""


class ReactionDiffusionError(ValueError):
    """Base class for simulator errors."""


class InvalidDimensions(ReactionDiffusionError):
    """Grid width or height is zero, negative or not an integer."""

    def __init__(self, width, height, message=None):
        super().__init__(message or
            f"Grid dimensions must be positive integers, got {width!r}x{height!r}")
        self.width = width
        self.height = height


class InvalidParameter(ReactionDiffusionError):
    """A simulation parameter is outside its allowed range."""


class BufferSizeMismatch(ReactionDiffusionError):
    """draw() was asked for a buffer that does not match the grid."""

    def __init__(self, expected, got):
        super().__init__(
            f"Pixel buffer must be {expected[0]}x{expected[1]} "
            f"({expected[0] * expected[1]} pixels), got {got}")
        self.expected = expected
        self.got = got
