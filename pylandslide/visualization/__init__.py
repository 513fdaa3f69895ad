"""Visualization: deformation maps, profiles and metric histories."""

from pylandslide.visualization.plots import plot_deformation, plot_profile, plot_history

__all__ = [
    "plot_deformation",
    "plot_profile",
    "plot_history",
]
