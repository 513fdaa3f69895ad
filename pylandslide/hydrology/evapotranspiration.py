"""Evapotranspiration drying of the soil layer."""

from __future__ import annotations

import math

from pylandslide.hydrology.state import DEFAULT_UNIT_WEIGHT, HydrologicalState

MM_PER_DAY_TO_M_PER_S = 1.0 / (1000.0 * 86400.0)


def compute_evapotranspiration(
    vegetation: float,
    saturation_ratio: float,
    potential_et: float,
) -> float:
    """Actual evapotranspiration rate.

    ET_a = ET_p · veg · √S, converted from mm/day to m/s.  Transpiration
    stops without plants and without available water.

    Args:
        vegetation: Vegetation cover fraction (0–1).
        saturation_ratio: Saturated fraction of the soil column (0–1).
        potential_et: Potential evapotranspiration (mm/day).

    Returns:
        Actual ET rate (m/s), never negative.
    """
    if not vegetation > 0 or not saturation_ratio > 0 or not potential_et > 0:
        return 0.0
    veg = min(vegetation, 1.0)
    ratio = min(saturation_ratio, 1.0)
    rate = potential_et * veg * math.sqrt(ratio) * MM_PER_DAY_TO_M_PER_S
    return rate if math.isfinite(rate) else 0.0


def apply_evapotranspiration(
    state: HydrologicalState,
    vegetation: float,
    soil_depth: float,
    dt: float,
    potential_et: float = 5.0,
    porosity: float = 0.35,
    unit_weight: float = DEFAULT_UNIT_WEIGHT,
) -> HydrologicalState:
    """Remove one time step of evapotranspiration from the saturated zone.

    The infiltration rate is carried over unchanged.  A non-finite or
    non-positive *dt* removes nothing.
    """
    rate = compute_evapotranspiration(
        vegetation, state.saturation_ratio(soil_depth), potential_et
    )
    if not (rate > 0 and porosity > 0 and dt > 0) or math.isinf(dt):
        return state
    loss = rate * dt / porosity
    return HydrologicalState.from_depth(
        state.saturation_depth - loss,
        soil_depth,
        unit_weight,
        infiltration_rate=state.infiltration_rate,
    )
