"""Simulation: tick driver and status classification."""

from pylandslide.simulation.engine import SimulationEngine, Snapshot
from pylandslide.simulation.status import (
    STATUS_LEVELS,
    THRESHOLDS,
    fos_status,
    pof_status,
    ru_status,
    cohesion_status,
    overall_status,
    simulation_status,
)

__all__ = [
    "SimulationEngine",
    "Snapshot",
    "STATUS_LEVELS",
    "THRESHOLDS",
    "fos_status",
    "pof_status",
    "ru_status",
    "cohesion_status",
    "overall_status",
    "simulation_status",
]
