"""
Plotting helpers for fastener patterns.

All save outputs are forced to `.svg` when `save_path` is provided.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.colors as mcolors

from .geometry import BoltPattern
from .layout import Point2D
from .units import convert_force, convert_length

if TYPE_CHECKING:
    from .analysis import LoadedPattern


def plot_bolt_pattern(
    pattern: BoltPattern,
    *,
    pivot: Point2D | None = None,
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
    length_unit: str = "mm",
) -> plt.Axes:
    """Plot fastener positions and the pivot without analysis results."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    xc, yc = pattern.centroid(pivot)

    ax.scatter(
        pattern.x,
        pattern.y,
        marker="h",
        s=200,
        c="grey",
        edgecolors="black",
        zorder=3,
    )
    for i, (x, y) in enumerate(pattern.points):
        ax.annotate(str(i + 1), (x, y), ha="center", va="center", fontsize=8, color="white", zorder=4)

    _plot_pivot(ax, xc, yc, label="Pivot" if pivot is not None else "Centroid")

    _set_limits(ax, pattern.x, pattern.y, scale=0.1)
    ax.set_aspect("equal")
    ax.set_xlabel(f"x coordinate [{length_unit}]", fontsize=11)
    ax.set_ylabel(f"y coordinate [{length_unit}]", fontsize=11)
    ax.grid(True, alpha=0.3, linestyle="--")
    ax.legend(loc="upper right")
    ax.set_title(f"Fastener Pattern: {pattern.n} fasteners", fontsize=12)

    plt.tight_layout()
    _finish(fig, show=show, save_path=save_path)
    return ax


def plot_bolt_loads(
    result: "LoadedPattern",
    *,
    colorbar: bool = True,
    cmap: str = "viridis",
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
    length_unit: str | None = None,
    force_unit: str | None = None,
) -> plt.Axes:
    """Plot fasteners coloured by tensile axial load with shear arrows.

    Compressive (negative) axial loads are coloured as zero. Arrows are scaled
    so the largest shear spans 20% of the pattern extent.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 8))
    else:
        fig = ax.figure

    units = result.units
    length_unit = length_unit or units.length
    force_unit = force_unit or units.force

    forces = result.to_bolt_forces()
    x = np.array([convert_length(bf.x, units.length, length_unit) for bf in forces])
    y = np.array([convert_length(bf.y, units.length, length_unit) for bf in forces])
    vx = np.array([convert_force(bf.shear_x, units.force, force_unit) for bf in forces])
    vy = np.array([convert_force(bf.shear_y, units.force, force_unit) for bf in forces])
    tension = np.array([convert_force(bf.tension, units.force, force_unit) for bf in forces])

    t_max = float(np.max(tension))
    norm = mcolors.Normalize(vmin=0.0, vmax=t_max if t_max > 1e-12 else 1.0)

    ax.scatter(
        x,
        y,
        marker="h",
        s=250,
        c=tension,
        cmap=cmap,
        norm=norm,
        edgecolors="grey",
        zorder=3,
    )
    for i, (xi, yi) in enumerate(zip(x, y)):
        ax.annotate(str(i + 1), (xi, yi), xytext=(0, -14), textcoords="offset points",
                    ha="center", va="top", fontsize=8, fontweight="bold", zorder=4)

    xc, yc = result.centroid
    xc = convert_length(xc, units.length, length_unit)
    yc = convert_length(yc, units.length, length_unit)
    _plot_pivot(ax, xc, yc, label="Pivot" if result.properties.pivot_override else "Centroid")

    extent = max(float(np.ptp(x)), float(np.ptp(y)))
    v_mag = np.hypot(vx, vy)
    v_max = float(np.max(v_mag))
    if v_max > 1e-12 and extent > 0.0:
        arrow_scale = 0.2 * extent / v_max
        head = 0.04 * extent
        for xi, yi, vxi, vyi, vi in zip(x, y, vx, vy, v_mag):
            if vi <= 1e-12:
                continue
            ax.arrow(
                xi,
                yi,
                vxi * arrow_scale,
                vyi * arrow_scale,
                head_width=head,
                head_length=head * 0.8,
                length_includes_head=True,
                fc="palevioletred",
                ec="palevioletred",
                linewidth=1.0,
                zorder=4,
            )

    if colorbar:
        sm = plt.cm.ScalarMappable(cmap=cmap, norm=norm)
        sm.set_array([])
        cbar = fig.colorbar(sm, ax=ax, shrink=0.8, aspect=30)
        cbar.set_label(f"Axial tension ({force_unit})", fontsize=10)

    _set_limits(ax, x, y, scale=0.25)
    ax.set_aspect("equal")
    ax.set_xlabel(f"x coordinate [{length_unit}]", fontsize=11)
    ax.set_ylabel(f"y coordinate [{length_unit}]", fontsize=11)
    ax.grid(True, alpha=0.3, linestyle="--")

    title = f"Fastener Loads ({result.n} fasteners)"
    title += f"\nMax Shear: {convert_force(result.max_shear, units.force, force_unit):.2f} {force_unit}"
    title += f" | Max Axial: {convert_force(result.max_axial, units.force, force_unit):.2f} {force_unit}"
    ax.set_title(title, fontsize=12)

    plt.tight_layout()
    _finish(fig, show=show, save_path=save_path)
    return ax


def _plot_pivot(ax: plt.Axes, xc: float, yc: float, *, label: str) -> None:
    """Mark the pivot with a dot and cross-hair lines."""
    ax.plot(xc, yc, "o", color="grey", markersize=8, alpha=0.7, label=label, zorder=5)
    ax.axvline(xc, color="grey", linewidth=1.0, zorder=1)
    ax.axhline(yc, color="grey", linewidth=1.0, zorder=1)


def _set_limits(ax: plt.Axes, x, y, *, scale: float) -> None:
    x_range = float(np.ptp(x))
    y_range = float(np.ptp(y))
    # Single points or lines still need a visible window
    pad = max(x_range, y_range, 1.0)
    x_margin = scale * (x_range if x_range > 0.0 else pad)
    y_margin = scale * (y_range if y_range > 0.0 else pad)
    ax.set_xlim(float(np.min(x)) - x_margin, float(np.max(x)) + x_margin)
    ax.set_ylim(float(np.min(y)) - y_margin, float(np.max(y)) + y_margin)


def _finish(fig, *, show: bool, save_path: str | Path | None) -> None:
    if save_path is not None:
        out = Path(save_path)
        if out.suffix.lower() != ".svg":
            out = out.with_suffix(".svg")
        fig.savefig(str(out), format="svg", bbox_inches="tight")

    if show:
        plt.show()


__all__ = ["plot_bolt_loads", "plot_bolt_pattern"]
