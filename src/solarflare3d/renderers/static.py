"""Matplotlib static PNG renderer for the Sun disk as seen from the default camera."""

import re
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from solarflare3d import config
from solarflare3d.models import FlareView

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(view: FlareView, chart_size: int = 8) -> Figure:
    """Render the Sun disk with the flare marker as a static matplotlib image.

    Orthographic view along -z: scene (x, y) maps straight onto the image.
    The marker is drawn only when the flare faces the viewer (z > 0).

    Args:
        view: Selected flare, its position and styling.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    r = config.SUN_RADIUS
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    # Limb-darkened disk
    grid = np.linspace(-r, r, 400)
    gx, gy = np.meshgrid(grid, grid)
    mu = np.sqrt(np.clip(1 - (gx**2 + gy**2) / r**2, 0, 1))
    img = ax.imshow(
        0.35 + 0.65 * mu,
        extent=(-r, r, -r, r),
        origin="lower",
        cmap="afmhot",
        vmin=0,
        vmax=1.3,
        zorder=1,
    )
    disk = Circle((0, 0), radius=r, transform=ax.transData)
    img.set_clip_path(disk)

    pos = view.position
    if pos is not None and pos.z > 0:
        size = 0.15 * view.intensity
        for scale, alpha in ((3, 0.2), (2, 0.4), (1, 0.9)):
            ax.add_patch(
                Circle((pos.x, pos.y), size * scale, color=view.color, alpha=alpha, zorder=2)
            )
        ax.add_patch(Circle((pos.x, pos.y), size * 0.5, color="white", zorder=3))

    if view.flare is not None:
        label = view.flare.class_type or "?"
        if view.flare.source_location:
            label += f"  {view.flare.source_location}"
        ax.text(-r, r * 1.05, label, color="#FFD47F", fontsize=14, va="bottom")

    margin = r * 1.15
    ax.set_xlim(-margin, margin)
    ax.set_ylim(-margin, margin)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_chart(view: FlareView, output_path: Path | None = None) -> Path:
    """Save the flare view as a PNG file.

    Args:
        view: Selected flare, its position and styling.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        flr_id = view.flare.flr_id if view.flare is not None else ""
        stem = re.sub(r"[^0-9A-Za-z]+", "_", flr_id).strip("_") or "no_flare"
        output_path = _ROOT / "results" / f"{stem}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(view)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path
