"""Matplotlib previews of rendered canvases."""

from __future__ import annotations

from pathlib import Path
import warnings

import matplotlib.pyplot as plt
import numpy as np

from rt_core.canvas import Canvas


def _save(fig: plt.Figure, outdir: str, name: str) -> str:
    Path(outdir).mkdir(parents=True, exist_ok=True)
    png = Path(outdir) / f"{name}.png"
    pdf = Path(outdir) / f"{name}.pdf"
    fig.savefig(png, dpi=150, bbox_inches="tight")
    try:
        fig.savefig(pdf, bbox_inches="tight")
    except PermissionError:
        warnings.warn(
            f"Could not write '{pdf}' (permission denied). Saved PNG only.",
            RuntimeWarning,
            stacklevel=2,
        )
    plt.close(fig)
    return str(png)


def preview_canvas(canvas: Canvas, outdir: str, name: str, title: str | None = None) -> str:
    fig, ax = plt.subplots(figsize=(canvas.width / 100.0 + 1.0, canvas.height / 100.0 + 1.0))
    ax.imshow(np.clip(canvas.pixels, 0.0, 1.0), interpolation="nearest")
    ax.set_axis_off()
    ax.set_title(title or name)
    return _save(fig, outdir, name)


def channel_histogram(canvas: Canvas, outdir: str, name: str, bins: int = 32) -> str:
    """Per-channel histogram of the unclamped linear values."""

    fig, ax = plt.subplots()
    for i, label in enumerate(("R", "G", "B")):
        ax.hist(canvas.pixels[:, :, i].ravel(), bins=bins, histtype="step", color=label.lower(), label=label)
    ax.axvline(1.0, color="k", linestyle="--", linewidth=0.8)
    ax.set_xlabel("linear value")
    ax.set_ylabel("pixels")
    ax.legend()
    ax.set_title(f"{name} channels")
    return _save(fig, outdir, name)
