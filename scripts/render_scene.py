"""Render one demo scene to a PPM file.

Usage:
    python -m scripts.render_scene --scene reflection --width 200 --height 100 --out artifacts/reflection.ppm
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from plots.preview import preview_canvas
from rt_io.ppm import save_ppm
from scenes.runner import SCENE_MODULES, load_scene


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Render a demo scene with the Whitted ray tracer.")
    parser.add_argument("--scene", default="three_spheres", choices=sorted(SCENE_MODULES), help="Scene to render")
    parser.add_argument("--case", default=None, help="Sweep case id (defaults to the scene's first case)")
    parser.add_argument("--width", type=int, default=None, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Image height in pixels")
    parser.add_argument("--depth", type=int, default=10, help="Reflection/refraction recursion budget")
    parser.add_argument("--out", default=None, help="Output PPM path")
    parser.add_argument("--no-clamp", action="store_true", help="Write channels without clamping to [0, 1]")
    parser.add_argument("--preview", action="store_true", help="Also write a PNG preview next to the PPM")
    parser.add_argument("--verbose", action="store_true", help="Log per-row progress")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    mod = load_scene(args.scene)
    cases = mod.build_sweep_params()
    if args.case is None:
        params = dict(cases[0])
    else:
        matches = [c for c in cases if c["case_id"] == args.case]
        if not matches:
            parser.error(f"unknown case '{args.case}' for scene '{args.scene}'")
        params = dict(matches[0])
    if args.width is not None:
        params["width"] = args.width
    if args.height is not None:
        params["height"] = args.height
    if args.depth < 0:
        parser.error("--depth must be >= 0")
    params["max_depth"] = args.depth

    _, canvas = mod.run_case(params)
    out_path = Path(args.out or f"artifacts/{args.scene}_{params['case_id']}.ppm")
    save_ppm(canvas, out_path, clamp=not args.no_clamp)
    if args.preview:
        preview_canvas(canvas, str(out_path.parent), out_path.stem)
    print(out_path)


if __name__ == "__main__":
    main()
