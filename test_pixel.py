#!/usr/bin/env python3
"""
Test script for ARGB pixel packing.

Verifies:
1. pack/unpack bit layout and round trip
2. Channel range checking
3. Pixel value type
4. Array packers used by the render step
"""

import itertools

import numpy as np
import pytest

from reaction_diffusion.pixel import (
    Pixel, pack, pack_gray, pack_rgb, unpack, unpack_rgb,
)


def test_bit_layout():
    """alpha << 24 | red << 16 | green << 8 | blue"""
    assert pack(0xFF, 0x12, 0x34, 0x56) == 0xFF123456
    assert pack(0, 0, 0, 0) == 0
    assert pack(255, 255, 255, 255) == 0xFFFFFFFF
    assert pack(1, 0, 0, 0) == 1 << 24
    assert pack(0, 0, 0, 1) == 1
    assert unpack(0xAABBCCDD) == (0xAA, 0xBB, 0xCC, 0xDD)


def test_round_trip_boundaries():
    """Every quadruple of edge-ish channel values survives pack/unpack."""
    values = (0, 1, 127, 128, 254, 255)
    for quad in itertools.product(values, repeat=4):
        assert unpack(pack(*quad)) == quad, f"Round trip failed for {quad}"


def test_round_trip_random():
    rng = np.random.default_rng(1234)
    for quad in rng.integers(0, 256, size=(2000, 4)):
        quad = tuple(int(c) for c in quad)
        assert unpack(pack(*quad)) == quad


def test_channel_range():
    with pytest.raises(ValueError):
        pack(256, 0, 0, 0)
    with pytest.raises(ValueError):
        pack(0, -1, 0, 0)
    with pytest.raises(ValueError):
        pack(0, 0, 0, 300)


def test_pixel_value_type():
    p = Pixel.from_channels(255, 10, 20, 30)
    assert p.argb == 0xFF0A141E
    assert p.channels == (255, 10, 20, 30)
    assert p == Pixel(0xFF0A141E)
    assert hash(p) == hash(Pixel(0xFF0A141E))
    assert int(p) == 0xFF0A141E
    with pytest.raises(AttributeError):
        p.argb = 0


def test_pack_gray():
    intensity = np.array([[0, 128], [255, 7]], dtype=np.uint8)
    packed = pack_gray(intensity)
    assert packed.dtype == np.uint32
    assert packed.shape == (2, 2)
    assert packed[0, 0] == 0xFF000000
    assert packed[0, 1] == 0xFF808080
    assert packed[1, 0] == 0xFFFFFFFF
    assert unpack(packed[1, 1]) == (255, 7, 7, 7)


def test_pack_rgb_and_unpack_rgb():
    rgb = np.array([[[1, 2, 3], [250, 251, 252]]], dtype=np.uint8)
    packed = pack_rgb(rgb)
    assert packed[0, 0] == 0xFF010203
    assert packed[0, 1] == 0xFFFAFBFC

    back = unpack_rgb(packed.ravel(), 2, 1)
    assert back.shape == (1, 2, 3)
    assert np.array_equal(back, rgb)


def test_pack_into_existing_buffer():
    out = np.zeros(3, dtype=np.uint32)
    result = pack_gray(np.array([0, 1, 2], dtype=np.uint8), out=out)
    assert result is out
    assert out.tolist() == [0xFF000000, 0xFF010101, 0xFF020202]


if __name__ == "__main__":
    print("\n=== Testing Pixel Packing ===\n")
    for name, fn in list(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
            print(f"  ✓ {name}")
    print("\n✓ All tests passed!\n")
