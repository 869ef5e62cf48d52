"""
Gray-Scott Parameter Presets

Each preset is a parameter set known to produce a recognisable pattern.
"feed"/"kill" are plain numbers or Rate objects; "seed" is "disk" (centred
disk of B) or "random" (seeded random cell, see "rng_seed").

Regimes follow Pearson's classification with Karl Sims' diffusion
(Da=1.0, Db=0.5, dt=1.0), which is stable for this stencil.
"""

from .gray_scott import GrayScott
from .rates import LinearRate, RadialRate
from .seeding import DiskSeed, RandomCellSeed

PRESETS = {
    "coral": {
        "name": "Coral Growth",
        "description": "Branching coral fingers filling the grid",
        "feed": 0.0545, "kill": 0.062,
        "diffusion_a": 1.0, "diffusion_b": 0.5, "time_step": 1.0,
        "seed": "disk",
    },
    "mitosis": {
        "name": "Mitosis",
        "description": "Spots that grow and divide like cells",
        "feed": 0.0367, "kill": 0.0649,
        "diffusion_a": 1.0, "diffusion_b": 0.5, "time_step": 1.0,
        "seed": "disk",
    },
    "maze": {
        "name": "Maze",
        "description": "Winding labyrinth stripes",
        "feed": 0.029, "kill": 0.057,
        "diffusion_a": 1.0, "diffusion_b": 0.5, "time_step": 1.0,
        "seed": "disk",
    },
    "worms": {
        "name": "Worms",
        "description": "Long worm-like segments",
        "feed": 0.078, "kill": 0.061,
        "diffusion_a": 1.0, "diffusion_b": 0.5, "time_step": 1.0,
        "seed": "disk",
    },
    "solitons": {
        "name": "Solitons",
        "description": "Isolated stable spots that drift apart",
        "feed": 0.030, "kill": 0.062,
        "diffusion_a": 1.0, "diffusion_b": 0.5, "time_step": 1.0,
        "seed": "disk",
    },
    "spots": {
        "name": "Moving Spots",
        "description": "Restless spots with slightly slower B diffusion",
        "feed": 0.055, "kill": 0.062,
        "diffusion_a": 1.0, "diffusion_b": 0.45, "time_step": 1.0,
        "seed": "disk",
    },
    "parameter_map": {
        "name": "Parameter Map",
        "description": "Feed rises down the grid, kill rises across it",
        "feed": LinearRate(0.01, 0.10, axis="y"),
        "kill": LinearRate(0.045, 0.07, axis="x"),
        "diffusion_a": 1.0, "diffusion_b": 0.5, "time_step": 1.0,
        "seed": "random", "rng_seed": 7,
    },
    "contained": {
        "name": "Contained",
        "description": "Radial feed ramp keeps the pattern in the middle",
        "feed": RadialRate(0.055), "kill": 0.062,
        "diffusion_a": 1.0, "diffusion_b": 0.5, "time_step": 1.0,
        "seed": "disk",
    },
    "origin": {
        "name": "Slow Origin",
        "description": "Very slow diffusion from a single random cell",
        "feed": 0.01, "kill": 0.001,
        "diffusion_a": 0.001, "diffusion_b": 0.001, "time_step": 0.1,
        "seed": "random", "rng_seed": 1,
    },
}

PRESET_ORDER = list(PRESETS.keys())


def get_preset(name):
    """Get a preset by name. Returns None if not found."""
    return PRESETS.get(name)


def list_presets():
    """Return list of (key, name, description) for every preset."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER]


def _build_seed(preset, width, height):
    if preset.get("seed") == "random":
        return RandomCellSeed(preset.get("rng_seed", 0))
    return DiskSeed.centered(width, height, preset.get("radius"))


def create_engine(name, width, height, executor=None):
    """Instantiate a GrayScott engine from a named preset."""
    preset = get_preset(name)
    if preset is None:
        raise ValueError(f"Unknown preset: {name!r}. Available: {PRESET_ORDER}")
    return GrayScott(
        width, height,
        feed_rate=preset["feed"],
        kill_rate=preset["kill"],
        diffusion_a=preset["diffusion_a"],
        diffusion_b=preset["diffusion_b"],
        time_step=preset["time_step"],
        seed=_build_seed(preset, width, height),
        executor=executor,
    )
