"""
Gray-Scott Reaction-Diffusion Viewer - Entry Point

Usage:
    python -m reaction_diffusion [preset] [--size WxH] [--scale N]
                                 [--steps N] [--workers N]
                                 [--palette NAME] [--snap N]

Examples:
    python -m reaction_diffusion
    python -m reaction_diffusion mitosis --size 256x256 --scale 3
    python -m reaction_diffusion parameter_map --workers 4
    python -m reaction_diffusion maze --snap 5000 --palette ocean

Options:
    --size WxH     simulation grid size (default 200x150)
    --scale N      window pixels per cell (default 4)
    --steps N      updates per displayed frame (default 8)
    --workers N    update/draw on N threads (default: sequential)
    --palette NAME render palette (default gray)
    --snap N       headless: run N updates, save a PNG, exit
    --list         list presets and palettes

Use --list to see all available presets.
"""

import os
import sys
import time

from .colormaps import PALETTE_ORDER, get_palette
from .executor import SequentialExecutor, ThreadedExecutor
from .pixel import unpack_rgb
from .presets import PRESET_ORDER, create_engine, list_presets


def snap(engine, preset, steps, palette_name):
    """Headless mode: run N updates, save a PNG, exit."""
    from PIL import Image

    screenshots_dir = os.path.join(os.getcwd(), "screenshots")
    os.makedirs(screenshots_dir, exist_ok=True)

    print(f"  {preset}: running {steps} steps...", end="", flush=True)
    t0 = time.perf_counter()
    engine.step_n(steps)
    elapsed = time.perf_counter() - t0

    palette = None if palette_name == "gray" else get_palette(palette_name)
    buffer = engine.draw(engine.width, engine.height, palette=palette)
    rgb = unpack_rgb(buffer, engine.width, engine.height)

    path = os.path.join(screenshots_dir, f"rd_{preset}_{engine.generation}.png")
    Image.fromarray(rgb).save(path)
    print(f" {elapsed:.2f}s, saved: {path}")


def _parse_size(text):
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise ValueError(text)
    return int(parts[0]), int(parts[1])


def main(argv=None):
    preset = "coral"
    width, height = 200, 150
    scale = 4
    steps = 8
    workers = 0
    palette = "gray"
    snap_steps = 0

    args = sys.argv[1:] if argv is None else argv
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--size", "--scale", "--steps", "--workers", "--snap") \
                and i + 1 < len(args):
            value = args[i + 1]
            try:
                if arg == "--size":
                    width, height = _parse_size(value)
                elif arg == "--scale":
                    scale = int(value)
                elif arg == "--steps":
                    steps = int(value)
                elif arg == "--workers":
                    workers = int(value)
                else:
                    snap_steps = int(value)
            except ValueError:
                print(f"[RD] Invalid value for {arg}: {value}")
                return 2
            i += 2
        elif arg == "--palette" and i + 1 < len(args):
            palette = args[i + 1]
            if palette not in PALETTE_ORDER:
                print(f"[RD] Unknown palette: {palette}")
                print(f"[RD] Available: {', '.join(PALETTE_ORDER)}")
                return 2
            i += 2
        elif arg == "--list":
            print("\nAvailable presets:")
            for key, name, desc in list_presets():
                print(f"    {key:16s} {name:16s} {desc}")
            print(f"\nPalettes: {', '.join(PALETTE_ORDER)}")
            print()
            return 0
        elif arg in ("--help", "-h"):
            print(__doc__)
            return 0
        elif arg in PRESET_ORDER:
            preset = arg
            i += 1
        else:
            print(f"[RD] Unknown argument: {arg}")
            print("[RD] Use --list to see available presets")
            return 2

    executor = ThreadedExecutor(workers) if workers > 0 else SequentialExecutor()
    try:
        engine = create_engine(preset, width, height, executor=executor)
    except ValueError as e:
        executor.close()
        print(f"[RD] {e}")
        return 2

    with engine:
        if snap_steps > 0:
            print(f"[RD] Headless snap mode: {preset} @ {width}x{height}, "
                  f"{snap_steps} steps, {executor!r}")
            snap(engine, preset, snap_steps, palette)
            return 0

        # pygame is only needed for the interactive window
        from .viewer import Viewer

        print("[RD] Starting Reaction-Diffusion Viewer")
        print(f"[RD]   Preset: {preset}")
        print(f"[RD]   Grid: {width}x{height} @ scale {scale}")
        print(f"[RD]   Executor: {executor!r}")
        print()

        viewer = Viewer(engine, scale=scale, steps_per_frame=steps, palette=palette)
        viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
