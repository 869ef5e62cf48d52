"""
Packed ARGB8888 Pixels

One pixel is a 32-bit unsigned value laid out as

    alpha << 24 | red << 16 | green << 8 | blue

which is what minifb / SDL style framebuffers expect. The scalar helpers
are for single values; the array helpers are what the render step uses.
"""

import numpy as np

OPAQUE = 0xFF


def _check_channel(name, value):
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} channel must be in 0..255, got {value!r}")


def pack(alpha, red, green, blue):
    """Pack four 8-bit channels into one 32-bit ARGB value."""
    _check_channel("alpha", alpha)
    _check_channel("red", red)
    _check_channel("green", green)
    _check_channel("blue", blue)
    return (int(alpha) << 24) | (int(red) << 16) | (int(green) << 8) | int(blue)


def unpack(value):
    """Split a packed ARGB value into (alpha, red, green, blue)."""
    value = int(value)
    return (
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


class Pixel:
    """Immutable wrapper around one packed ARGB value."""

    __slots__ = ("argb",)

    def __init__(self, argb=0):
        object.__setattr__(self, "argb", int(argb) & 0xFFFFFFFF)

    @classmethod
    def from_channels(cls, alpha, red, green, blue):
        return cls(pack(alpha, red, green, blue))

    @property
    def channels(self):
        """(alpha, red, green, blue)"""
        return unpack(self.argb)

    def __setattr__(self, name, value):
        raise AttributeError("Pixel is immutable")

    def __eq__(self, other):
        if isinstance(other, Pixel):
            return self.argb == other.argb
        return NotImplemented

    def __hash__(self):
        return hash(self.argb)

    def __int__(self):
        return self.argb

    def __repr__(self):
        return f"Pixel(0x{self.argb:08X})"


# --- Array helpers ---

def pack_gray(intensity, out=None):
    """
    Pack a uint8 intensity array into opaque gray ARGB pixels.

    Args:
        intensity: uint8 array of any shape
        out: optional uint32 array of the same shape to write into

    Returns:
        uint32 array, same shape as ``intensity``
    """
    i = intensity.astype(np.uint32)
    if out is None:
        out = np.empty(i.shape, dtype=np.uint32)
    np.left_shift(i, 16, out=out)
    out |= i << 8
    out |= i
    out |= np.uint32(OPAQUE << 24)
    return out


def pack_rgb(rgb, out=None):
    """Pack an (..., 3) uint8 RGB array into opaque ARGB pixels."""
    r = rgb[..., 0].astype(np.uint32)
    g = rgb[..., 1].astype(np.uint32)
    b = rgb[..., 2].astype(np.uint32)
    if out is None:
        out = np.empty(r.shape, dtype=np.uint32)
    np.left_shift(r, 16, out=out)
    out |= g << 8
    out |= b
    out |= np.uint32(OPAQUE << 24)
    return out


def unpack_rgb(buffer, width, height):
    """
    Turn a flat ARGB buffer back into an (H, W, 3) uint8 RGB image.

    Used by the viewer and by the headless snapshot writer.
    """
    argb = np.asarray(buffer, dtype=np.uint32).reshape(height, width)
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[..., 0] = (argb >> 16) & 0xFF
    rgb[..., 1] = (argb >> 8) & 0xFF
    rgb[..., 2] = argb & 0xFF
    return rgb
