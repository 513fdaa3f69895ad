"""Smoke tests for the plotting helpers."""

import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from pylandslide.landslide import (  # noqa: E402
    DeformationGrid,
    compute_failure_zone,
    compute_terrain_deformation,
)
from pylandslide.postprocess import History  # noqa: E402
from pylandslide.simulation import SimulationEngine  # noqa: E402
from pylandslide.terrain import HeightField  # noqa: E402
from pylandslide.visualization import plot_deformation, plot_history, plot_profile  # noqa: E402


@pytest.fixture
def slide():
    heights = np.tile(np.linspace(0.0, 1.0, 32)[:, None], (1, 32))
    terrain = HeightField(heights=heights)
    zone = compute_failure_zone(terrain, 30.0, 3.0, 0.5)
    grid = DeformationGrid.from_heightfield(terrain)
    deformation = compute_terrain_deformation(zone, 0.8, grid)
    yield terrain, deformation
    plt.close("all")


def test_plot_deformation(slide):
    terrain, deformation = slide
    ax = plot_deformation(terrain, deformation)
    assert ax.get_title() == "Elevation change (m)"


def test_plot_profile(slide):
    terrain, deformation = slide
    fig, ax = plt.subplots()
    out = plot_profile(terrain, deformation, x=50.0, ax=ax)
    assert out is ax
    assert len(ax.get_lines()) == 2


def test_plot_history():
    engine = SimulationEngine(terrain=HeightField(heights=np.zeros((8, 8))))
    axes = plot_history(History(engine.run(duration=0.5)))
    assert axes.shape == (3, 1)
    plt.close("all")
