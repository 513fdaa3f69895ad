"""Rainfall infiltration into the soil layer.

A capacity-limited bucket model: rain not intercepted by the canopy
infiltrates up to the soil's infiltration capacity and raises the
saturated zone by the infiltrated depth divided by porosity.

Capacity (mm/hr) follows a Green–Ampt-like form,

    f_c = K · (1 + α (1 − S)),   α = 0.5 · vegetation

where S is the saturated fraction of the column: the drier the soil and
the denser the root network, the faster water can enter.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pylandslide.hydrology.state import DEFAULT_UNIT_WEIGHT, HydrologicalState

MAX_INTERCEPTION = 0.30
MAX_ROOT_ENHANCEMENT = 0.50
MM_PER_HR_TO_M_PER_S = 1.0 / 3.6e6
MICROMETRE_PER_S_TO_MM_PER_HR = 3.6


@dataclass(frozen=True)
class InfiltrationParams:
    """Inputs of :func:`update_infiltration`.

    Args:
        rainfall_intensity: Rainfall rate (mm/hr).
        hydraulic_conductivity: Saturated conductivity (×10⁻⁶ m/s).
        vegetation: Vegetation cover fraction (0–1).
        soil_depth: Soil thickness (m).
        porosity: Soil porosity n (0–1).
        unit_weight: Soil unit weight (kN/m³), used for ru.
    """

    rainfall_intensity: float
    hydraulic_conductivity: float
    vegetation: float
    soil_depth: float
    porosity: float = 0.35
    unit_weight: float = DEFAULT_UNIT_WEIGHT


def infiltration_capacity(
    hydraulic_conductivity: float,
    vegetation: float,
    saturation_ratio: float,
    conductivity_factor: float = MICROMETRE_PER_S_TO_MM_PER_HR,
) -> float:
    """Infiltration capacity (mm/hr).

    Args:
        hydraulic_conductivity: K (×10⁻⁶ m/s).
        vegetation: Vegetation cover fraction.
        saturation_ratio: Saturated fraction of the soil column.
        conductivity_factor: K-to-mm/hr conversion factor.
    """
    k_mmhr = max(hydraulic_conductivity, 0.0) * conductivity_factor
    alpha = float(np.clip(vegetation, 0.0, 1.0)) * MAX_ROOT_ENHANCEMENT
    s = float(np.clip(saturation_ratio, 0.0, 1.0))
    return k_mmhr * (1.0 + alpha * (1.0 - s))


def update_infiltration(
    state: HydrologicalState,
    params: InfiltrationParams,
    dt: float,
    conductivity_factor: float = MICROMETRE_PER_S_TO_MM_PER_HR,
) -> HydrologicalState:
    """Advance the saturated zone by one time step of rainfall.

    Args:
        state: Current hydrological state.
        params: Rainfall, soil and vegetation inputs.
        dt: Time-step size (s).  Non-finite or negative values count as 0.
        conductivity_factor: K-to-mm/hr conversion factor.

    Returns:
        New :class:`HydrologicalState` with the saturation depth clamped
        to ``[0, soil_depth]`` and Pw / ru re-derived.
    """
    soil_depth = max(float(np.nan_to_num(params.soil_depth, posinf=0.0)), 0.0)
    veg = float(np.clip(params.vegetation, 0.0, 1.0))
    rain = max(float(params.rainfall_intensity), 0.0)

    # Canopy interception
    effective_rain = rain * (1.0 - MAX_INTERCEPTION * veg)

    saturation_ratio = state.saturation_ratio(soil_depth)
    capacity = infiltration_capacity(
        params.hydraulic_conductivity, veg, saturation_ratio, conductivity_factor
    )
    rate = min(effective_rain, capacity)
    if not np.isfinite(rate):
        rate = 0.0

    # Only the pore volume fills
    if params.porosity > 0 and soil_depth > 0:
        step = dt if np.isfinite(dt) and dt > 0 else 0.0
        delta = rate * MM_PER_HR_TO_M_PER_S * step / params.porosity
    else:
        delta = 0.0

    return HydrologicalState.from_depth(
        state.saturation_depth + delta,
        soil_depth,
        params.unit_weight,
        infiltration_rate=rate,
    )
