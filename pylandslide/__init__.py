"""
pylandslide: educational slope-stability and landslide-deformation
simulation engine.

Subpackages
-----------
slope
    Infinite-slope factor of safety and effective cohesion.
hydrology
    Infiltration, evapotranspiration, pore pressure, rainfall series.
reliability
    FOSM probability of failure.
landslide
    Failure zone, phase state machine, terrain deformation.
materials
    Geotechnical parameters and hazard presets.
terrain
    Height fields and synthetic hillslopes.
simulation
    Tick-driven engine and status classification.
time
    Fixed-tick stepping.
postprocess
    Metric histories and CSV export.
visualization
    Deformation maps, profiles and history plots.
"""

from pylandslide import (
    slope,
    hydrology,
    reliability,
    landslide,
    materials,
    terrain,
    simulation,
    time,
    postprocess,
    visualization,
)
from pylandslide.config import (
    EnvironmentalParams,
    SimulationConfig,
    SteepDecay,
    TerrainConfig,
)
from pylandslide.materials import GeotechnicalParams
from pylandslide.simulation import SimulationEngine

__version__ = "0.1.0"

__all__ = [
    "slope",
    "hydrology",
    "reliability",
    "landslide",
    "materials",
    "terrain",
    "simulation",
    "time",
    "postprocess",
    "visualization",
    "EnvironmentalParams",
    "SimulationConfig",
    "SteepDecay",
    "TerrainConfig",
    "GeotechnicalParams",
    "SimulationEngine",
]
