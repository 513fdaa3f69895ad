"""Hydrology: infiltration, evapotranspiration and pore pressure.

Classes
-------
HydrologicalState
    Saturation depth, pore pressure, ru, infiltration rate.
InfiltrationParams
    Inputs of :func:`update_infiltration`.
Hyetograph
    Rainfall intensity time series.
"""

from pylandslide.hydrology.state import (
    WATER_UNIT_WEIGHT,
    HydrologicalState,
    pore_pressure,
)
from pylandslide.hydrology.infiltration import (
    InfiltrationParams,
    infiltration_capacity,
    update_infiltration,
)
from pylandslide.hydrology.evapotranspiration import (
    compute_evapotranspiration,
    apply_evapotranspiration,
)
from pylandslide.hydrology.rainfall import Hyetograph

__all__ = [
    "WATER_UNIT_WEIGHT",
    "HydrologicalState",
    "pore_pressure",
    "InfiltrationParams",
    "infiltration_capacity",
    "update_infiltration",
    "compute_evapotranspiration",
    "apply_evapotranspiration",
    "Hyetograph",
]
