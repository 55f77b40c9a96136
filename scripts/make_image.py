import argparse
import os
import sys
import time

# Ensure repository root is on sys.path so `from escape_fractals...` works when
# running this script directly (e.g. `python scripts/make_image.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from escape_fractals.config import load_config, resolve_settings
from escape_fractals.display import save_frame
from escape_fractals.render import render


def build_parser():
    parser = argparse.ArgumentParser(description="Render an escape-time fractal to PNG")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML file with render settings; flags override it")
    parser.add_argument("--variant", type=str, default=None,
                        help="julia | mandel | ship (anything else draws nothing)")
    parser.add_argument("--c", type=str, default=None,
                        help="complex constant, e.g. '-0.15+0.65j'")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--cutoff", type=int, default=None)
    parser.add_argument("--palette", type=str, default=None, choices=["bands", "hue"])
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--outfile", type=str, default=None)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    cfg = load_config(args.config) if args.config else {}
    settings = resolve_settings(cfg, overrides={
        "variant": args.variant,
        "c": args.c,
        "width": args.width,
        "height": args.height,
        "cutoff": args.cutoff,
        "palette": args.palette,
        "workers": args.workers,
        "outfile": args.outfile,
    })

    c = settings["c"]
    print(f"[run] variant={settings['variant']}, c={c.to_complex()}, "
          f"size={settings['width']}x{settings['height']}, cutoff={settings['cutoff']}")

    start = time.time()
    frame = render(
        settings["width"],
        settings["height"],
        settings["variant"],
        c.real,
        c.imaginary,
        settings["cutoff"],
        palette=settings["palette"],
        workers=settings["workers"],
    )
    elapsed = time.time() - start

    if frame is None:
        print(f"[run] unknown variant '{settings['variant']}', nothing drawn.")
        return None

    out_path = save_frame(frame, settings["outfile"])
    print(f"[run] {frame.width}x{frame.height} rendered in {elapsed * 1000:.0f} ms, saved to {out_path}")
    return out_path


if __name__ == "__main__":
    main()
