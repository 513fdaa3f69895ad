"""Plotting utilities.

Functions
---------
plot_deformation
    Map of terrain lowering and raising over the grid.
plot_profile
    Down-slope elevation profile before and after deformation.
plot_history
    FoS, PoF and saturation against time.
"""

from __future__ import annotations

from typing import Any

import numpy as np


def plot_deformation(
    terrain: Any,
    deformation: Any,
    ax: Any = None,
    cmap: str = "RdBu",
    colorbar: bool = True,
    title: str = "Elevation change (m)",
) -> Any:
    """Plot the net elevation change (deposition minus scarp).

    Args:
        terrain: :class:`~pylandslide.terrain.HeightField`.
        deformation: :class:`~pylandslide.landslide.TerrainDeformation`.
        ax: Matplotlib axes (creates new figure if None).
        cmap: Diverging colour map; blue = raised, red = lowered.
        colorbar: Show colour bar.
        title: Plot title.

    Returns:
        Matplotlib axes.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(6, 6))

    change = np.asarray(deformation.net_change).reshape(terrain.shape)
    vmax = max(float(np.abs(change).max()), 1e-9)
    extent = (0.0, terrain.world_scale, 0.0, terrain.world_scale)
    im = ax.imshow(
        change, origin="lower", extent=extent, cmap=cmap, vmin=-vmax, vmax=vmax
    )
    if colorbar:
        plt.colorbar(im, ax=ax, label="Δz (m)")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("z (upslope)")
    return ax


def plot_profile(
    terrain: Any,
    deformation: Any,
    x: float | None = None,
    ax: Any = None,
) -> Any:
    """Elevation along z at column *x* (default: centre of the grid).

    Returns:
        Matplotlib axes.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))

    x = 0.5 * terrain.world_scale if x is None else x
    col = int(round(x / terrain.world_scale * (terrain.nx - 1)))
    col = min(max(col, 0), terrain.nx - 1)

    z = np.linspace(0.0, terrain.world_scale, terrain.nz)
    before = terrain.elevations[:, col]
    change = np.asarray(deformation.net_change).reshape(terrain.shape)[:, col]

    ax.plot(z, before, "k--", linewidth=1.0, label="before")
    ax.plot(z, before + change, "b-", linewidth=1.5, label="after")
    ax.set_xlabel("z (m)")
    ax.set_ylabel("elevation (m)")
    ax.set_title(f"Profile at x = {x:.1f}")
    ax.grid(True, alpha=0.3)
    ax.legend()
    return ax


def plot_history(history: Any) -> Any:
    """Plot FoS, PoF and saturation depth against time.

    Args:
        history: :class:`~pylandslide.postprocess.History`.

    Returns:
        Array of matplotlib axes, shape ``(3, 1)``.
    """
    import matplotlib.pyplot as plt

    data = history.as_arrays()
    t = data["time"]
    fig, axes = plt.subplots(3, 1, figsize=(10, 8), sharex=True, squeeze=False)

    axes[0, 0].plot(t, data["fos"], "b-", linewidth=1.5)
    axes[0, 0].axhline(1.0, color="r", linestyle="--", linewidth=0.8)
    axes[0, 0].set_ylabel("FoS")

    axes[1, 0].plot(t, data["pof"], "r-", linewidth=1.5)
    axes[1, 0].set_ylabel("PoF (%)")

    axes[2, 0].plot(t, data["saturation_depth"], "g-", linewidth=1.5)
    axes[2, 0].set_ylabel("saturation (m)")
    axes[2, 0].set_xlabel("time (s)")

    for ax in axes[:, 0]:
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return axes
