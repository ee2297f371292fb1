"""HDF5 archive for linear (unclamped) render buffers.

The schema stores any number of renders keyed by scene id.

Structure:
    /
      meta                       (attrs: created_at, color_space, convention)
      renders/{scene_id}/
          params_json            (scalar utf-8 JSON)
          pixels                 (H,W,3) float64, row-major, top-left origin

Example:
    >>> import numpy as np
    >>> from rt_core.canvas import Canvas
    >>> c = Canvas(4, 2)
    >>> save_render_hdf5("/tmp/rt_render_example.h5", {"demo": RenderData({"fov": 1.0}, c)})
    >>> loaded, meta = load_render_hdf5("/tmp/rt_render_example.h5")
    >>> loaded["demo"].canvas.pixels.shape, meta.color_space
    ((2, 4, 3), 'linear')
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import json
from typing import Any, Dict, Mapping, Tuple

import h5py
import numpy as np

from rt_core.canvas import Canvas
from rt_io.ppm import canvas_to_ppm


@dataclass
class RenderData:
    params: Dict[str, Any]
    canvas: Canvas


@dataclass
class Hdf5Meta:
    created_at: str
    color_space: str
    convention: str


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (np.integer, np.floating)):
        return obj.item()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    raise TypeError(f"Unsupported JSON type: {type(obj)}")


def save_render_hdf5(
    filepath: str,
    renders: Mapping[str, RenderData | Mapping[str, Any]],
    color_space: str = "linear",
    convention: str = "row-major top-left origin",
) -> None:
    """Save renders to HDF5 using a fixed schema contract."""

    with h5py.File(filepath, "w") as h5:
        meta = h5.create_group("meta")
        meta.attrs["created_at"] = datetime.now(timezone.utc).isoformat()
        meta.attrs["color_space"] = color_space
        meta.attrs["convention"] = convention

        g_renders = h5.create_group("renders")
        for scene_id, render in renders.items():
            data = render if isinstance(render, RenderData) else RenderData(params=dict(render["params"]), canvas=render["canvas"])
            g = g_renders.create_group(str(scene_id))
            g.create_dataset("params_json", data=json.dumps(data.params, default=_json_default))
            g.create_dataset("pixels", data=np.asarray(data.canvas.pixels, dtype=np.float64))


def load_render_hdf5(filepath: str) -> Tuple[Dict[str, RenderData], Hdf5Meta]:
    """Load an archive written by :func:`save_render_hdf5`."""

    renders: Dict[str, RenderData] = {}
    with h5py.File(filepath, "r") as h5:
        meta = Hdf5Meta(
            created_at=str(h5["meta"].attrs.get("created_at", "")),
            color_space=str(h5["meta"].attrs.get("color_space", "linear")),
            convention=str(h5["meta"].attrs.get("convention", "row-major top-left origin")),
        )
        for scene_id, g in h5["renders"].items():
            raw = g["params_json"][()]
            params = json.loads(raw.decode() if isinstance(raw, bytes) else raw)
            pixels = np.asarray(g["pixels"][()], dtype=np.float64)
            renders[scene_id] = RenderData(params=params, canvas=Canvas.from_array(pixels))
    return renders, meta


def self_test_roundtrip(filepath: str, atol: float = 0.0) -> bool:
    """Write->read equivalence check on pixels and on the PPM encoding."""

    rng = np.random.default_rng(7)
    # out-of-range values must survive the archive unclamped
    canvas = Canvas.from_array(rng.uniform(-0.5, 1.5, size=(6, 8, 3)))
    save_render_hdf5(filepath, {"selftest": RenderData(params={"seed": 7}, canvas=canvas)})
    renders, _ = load_render_hdf5(filepath)
    loaded = renders["selftest"]
    return bool(
        np.allclose(canvas.pixels, loaded.canvas.pixels, atol=atol, rtol=0.0)
        and canvas_to_ppm(canvas, clamp=False) == canvas_to_ppm(loaded.canvas, clamp=False)
        and loaded.params == {"seed": 7}
    )
