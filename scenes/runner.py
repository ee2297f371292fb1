"""Scene sweep runner + previews + markdown render report."""

from __future__ import annotations

from importlib import import_module
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np

from plots import preview
from rt_io.hdf5_io import RenderData, save_render_hdf5
from rt_io.ppm import save_ppm

logger = logging.getLogger(__name__)

SCENE_MODULES = {
    "three_spheres": "scenes.three_spheres",
    "stripes": "scenes.stripes",
    "reflection": "scenes.reflection",
    "refraction": "scenes.refraction",
}


def load_scene(name: str):
    if name not in SCENE_MODULES:
        raise ValueError(f"Unknown scene: {name} (expected one of {sorted(SCENE_MODULES)})")
    return import_module(SCENE_MODULES[name])


def render_all(
    out_dir: str = "artifacts",
    width: Optional[int] = None,
    height: Optional[int] = None,
    scenes: Optional[Sequence[str]] = None,
    max_depth: int = 10,
    previews: bool = True,
) -> str:
    """Render every sweep case of the selected scenes; returns the report path."""

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    archive: Dict[str, RenderData] = {}
    report_lines: List[str] = [
        "# Render Report",
        "",
        "- values are linear radiance before clamping",
        "- `clipped` counts channels outside [0, 1]",
        "",
    ]

    for sid in scenes or list(SCENE_MODULES):
        mod = load_scene(sid)
        report_lines.append(f"## {sid}")
        for p in mod.build_sweep_params():
            params = dict(p)
            if width is not None:
                params["width"] = width
            if height is not None:
                params["height"] = height
            params["max_depth"] = max_depth
            key = f"{sid}/{params['case_id']}"

            _, canvas = mod.run_case(params)
            logger.info("rendered %s (%dx%d)", key, canvas.width, canvas.height)
            archive[f"{sid}__{params['case_id']}"] = RenderData(params=params, canvas=canvas)

            case_dir = out / sid
            ppm_path = save_ppm(canvas, case_dir / f"{params['case_id']}.ppm")
            px = canvas.pixels
            clipped = int(np.count_nonzero((px < 0.0) | (px > 1.0)))
            report_lines.append(f"- case `{params['case_id']}`: {canvas.width}x{canvas.height}, depth={max_depth}")
            report_lines.append(f"  - mean rgb: {[round(float(v), 4) for v in px.mean(axis=(0, 1))]}")
            report_lines.append(f"  - max channel: {float(px.max()):.4f}, clipped channels: {clipped}")
            report_lines.append(f"  - ppm: [{Path(ppm_path).name}]({ppm_path})")
            if previews:
                png = preview.preview_canvas(canvas, str(case_dir), params["case_id"], title=key)
                hist = preview.channel_histogram(canvas, str(case_dir), f"{params['case_id']}_hist")
                report_lines.append(f"  - plots: [preview]({png}), [histogram]({hist})")
        report_lines.append("")

    h5_path = out / "renders.h5"
    save_render_hdf5(str(h5_path), archive)
    report_lines.append(f"archive: `{h5_path}`")

    report = out / "render_report.md"
    report.write_text("\n".join(report_lines) + "\n", encoding="utf-8")
    return str(report)
