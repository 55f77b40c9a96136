"""
YAML render configuration.

Example (configs/render.yaml):

    variant: julia
    c: "-0.15+0.65j"
    width: 750
    height: 750
    cutoff: 500
    palette: bands
    workers: 1
    outfile: figures/julia.png

Missing keys fall back to DEFAULTS, which mirror the web front end
(750 x 750 Julia at c = -0.15 + 0.65i, cutoff 500).
"""
from pathlib import Path

import yaml

from .coloring import PALETTES
from .utils import parse_complex

DEFAULTS = {
    "variant": "julia",
    "c": "-0.15+0.65j",
    "width": 750,
    "height": 750,
    "cutoff": 500,
    "palette": "bands",
    "workers": 1,
    "outfile": "figures/fractal.png",
}


def load_config(config_path) -> dict:
    with open(config_path, "r") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{config_path}: expected a mapping at top level")
    return cfg


def resolve_settings(cfg=None, overrides=None) -> dict:
    """
    Merge DEFAULTS <- cfg <- overrides (None values in overrides are ignored)
    and coerce types. The constant is returned as a ComplexNumber under "c".
    """
    merged = dict(DEFAULTS)
    merged.update(cfg or {})
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value

    palette = str(merged.get("palette", "bands"))
    if palette not in PALETTES:
        raise ValueError(f"Unknown palette: {palette}")

    return {
        # left as a string: unknown variants are a no-op, not a config error
        "variant": str(merged.get("variant")),
        "c": parse_complex(merged.get("c")),
        "width": int(merged.get("width")),
        "height": int(merged.get("height")),
        "cutoff": int(merged.get("cutoff")),
        "palette": palette,
        "workers": int(merged.get("workers")),
        "outfile": Path(merged.get("outfile")),
    }
