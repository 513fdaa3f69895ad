"""Hydrological state of the soil layer and pore pressure.

Classes
-------
HydrologicalState
    Saturation depth, pore pressure, ru and infiltration rate.

Functions
---------
pore_pressure
    Pore pressure and pore-pressure ratio from a saturation depth.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

WATER_UNIT_WEIGHT = 9.81  # kN/m³
DEFAULT_UNIT_WEIGHT = 18.0  # kN/m³


def pore_pressure(
    saturation_depth: float,
    soil_depth: float,
    unit_weight: float = DEFAULT_UNIT_WEIGHT,
) -> tuple[float, float]:
    """Pore pressure from the height of the saturated zone.

    Pw = γw · hw and ru = Pw / (γ · z).

    Args:
        saturation_depth: Saturated thickness hw (m).
        soil_depth: Soil thickness z (m).
        unit_weight: Soil unit weight γ (kN/m³).

    Returns:
        Tuple ``(Pw, ru)`` with Pw in kPa and ru clamped to [0, 1]
        (0 when the total stress is not positive).
    """
    pw = WATER_UNIT_WEIGHT * saturation_depth
    total_stress = unit_weight * soil_depth
    ru = pw / total_stress if total_stress > 0 else 0.0
    if not np.isfinite(ru):
        ru = 0.0
    return float(pw), float(np.clip(ru, 0.0, 1.0))


@dataclass(frozen=True)
class HydrologicalState:
    """Water content of the soil layer.

    Attributes:
        saturation_depth: Saturated thickness above the slip plane (m),
            always within ``[0, soil_depth]``.
        pore_pressure: Pore-water pressure Pw (kPa).
        pore_pressure_ratio: ru ∈ [0, 1].
        infiltration_rate: Current infiltration rate (mm/hr).
    """

    saturation_depth: float = 0.0
    pore_pressure: float = 0.0
    pore_pressure_ratio: float = 0.0
    infiltration_rate: float = 0.0

    @classmethod
    def from_depth(
        cls,
        saturation_depth: float,
        soil_depth: float,
        unit_weight: float = DEFAULT_UNIT_WEIGHT,
        infiltration_rate: float = 0.0,
    ) -> HydrologicalState:
        """Build a state from a saturation depth, clamped to the soil.

        Non-finite inputs are replaced by finite values before clamping.
        """
        soil = max(float(np.nan_to_num(soil_depth, posinf=0.0)), 0.0)
        depth = float(np.clip(np.nan_to_num(saturation_depth), 0.0, soil))
        pw, ru = pore_pressure(depth, soil, unit_weight)
        return cls(
            saturation_depth=depth,
            pore_pressure=pw,
            pore_pressure_ratio=ru,
            infiltration_rate=max(float(np.nan_to_num(infiltration_rate, posinf=0.0)), 0.0),
        )

    @classmethod
    def initial(
        cls,
        soil_moisture: float,
        soil_depth: float,
        unit_weight: float = DEFAULT_UNIT_WEIGHT,
    ) -> HydrologicalState:
        """Start state for an initial moisture fraction (0–1)."""
        moisture = float(np.clip(np.nan_to_num(soil_moisture), 0.0, 1.0))
        return cls.from_depth(moisture * soil_depth, soil_depth, unit_weight)

    def saturation_ratio(self, soil_depth: float) -> float:
        """Saturated fraction of the soil column (0 for a zero-depth soil)."""
        if not soil_depth > 0:
            return 0.0
        return float(np.clip(self.saturation_depth / soil_depth, 0.0, 1.0))
