"""Landslide: failure zone, phase state machine and terrain deformation.

Example::

    from pylandslide.landslide import (
        DeformationGrid, TerrainDeformation, compute_failure_zone,
        compute_terrain_deformation, trigger, advance, LandslideState,
    )

    zone = compute_failure_zone(terrain, slope_angle=35, soil_depth=3,
                                saturation=0.8)
    state = trigger(LandslideState(), zone)
    grid = DeformationGrid.from_heightfield(terrain)
    buffers = TerrainDeformation.allocate(grid)
    while state.is_active:
        state = advance(state, dt=0.1)
        compute_terrain_deformation(zone, state.progress, grid, buffers)
"""

from pylandslide.landslide.zone import FailureZone, compute_failure_zone
from pylandslide.landslide.state import (
    Phase,
    PHASE_ORDER,
    LandslideState,
    phase_for_progress,
    trigger,
    advance,
    reset,
)
from pylandslide.landslide.deformation import (
    DeformationGrid,
    TerrainDeformation,
    compute_terrain_deformation,
    compute_displaced_volume,
)

__all__ = [
    "FailureZone",
    "compute_failure_zone",
    "Phase",
    "PHASE_ORDER",
    "LandslideState",
    "phase_for_progress",
    "trigger",
    "advance",
    "reset",
    "DeformationGrid",
    "TerrainDeformation",
    "compute_terrain_deformation",
    "compute_displaced_volume",
]
