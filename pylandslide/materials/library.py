"""Hazard-level parameter presets.

Pre-configured scenarios matching the three landslide hazard classes
(1 = low, 2 = moderate, 3 = high).  Values are illustrative mid-range
estimates for residual soils on vegetated hillslopes.

Usage::

    from pylandslide.materials import preset
    scenario = preset("high")
    scenario.params.slope_angle  # 45.0
"""

from __future__ import annotations

from dataclasses import dataclass

from pylandslide.config import EnvironmentalParams
from pylandslide.materials.params import GeotechnicalParams


@dataclass(frozen=True)
class HazardPreset:
    """A complete simulator scenario for one hazard level.

    Attributes:
        level: Hazard level (1, 2 or 3).
        label: ``"low"``, ``"moderate"`` or ``"high"``.
        params: Geotechnical parameters.
        environment: Vegetation, erosion, moisture and rainfall.
        max_elevation: Terrain peak elevation (m).
        coefficient_of_variation: FoS uncertainty for FOSM.
    """

    level: int
    label: str
    params: GeotechnicalParams
    environment: EnvironmentalParams
    max_elevation: float
    coefficient_of_variation: float


# ------------------------------------------------------------------
# Presets
# ------------------------------------------------------------------

low = HazardPreset(
    level=1,
    label="low",
    params=GeotechnicalParams(
        slope_angle=20.0,
        soil_depth=2.0,
        unit_weight=18.0,          # kN/m³
        cohesion=20.0,             # kPa
        friction_angle=35.0,       # degrees
        hydraulic_conductivity=8.0,
    ),
    environment=EnvironmentalParams(
        vegetation=0.80, erosion=0.15, soil_moisture=0.25, rainfall=20.0,
    ),
    max_elevation=30.0,
    coefficient_of_variation=0.1,
)

moderate = HazardPreset(
    level=2,
    label="moderate",
    params=GeotechnicalParams(
        slope_angle=30.0,
        soil_depth=3.0,
        unit_weight=19.0,
        cohesion=12.0,
        friction_angle=30.0,
        hydraulic_conductivity=5.0,
    ),
    environment=EnvironmentalParams(
        vegetation=0.50, erosion=0.40, soil_moisture=0.45, rainfall=35.0,
    ),
    max_elevation=50.0,
    coefficient_of_variation=0.2,
)

high = HazardPreset(
    level=3,
    label="high",
    params=GeotechnicalParams(
        slope_angle=45.0,
        soil_depth=4.5,
        unit_weight=17.0,
        cohesion=8.0,
        friction_angle=25.0,
        hydraulic_conductivity=3.0,
    ),
    environment=EnvironmentalParams(
        vegetation=0.25, erosion=0.70, soil_moisture=0.60, rainfall=50.0,
    ),
    max_elevation=80.0,
    coefficient_of_variation=0.3,
)

PRESETS: dict[str, HazardPreset] = {p.label: p for p in (low, moderate, high)}


def preset(key: str | int) -> HazardPreset:
    """Look up a preset by label or hazard level.

    Args:
        key: ``"low"``, ``"moderate"``, ``"high"`` or 1, 2, 3.

    Raises:
        KeyError: If no preset matches *key*.
    """
    if isinstance(key, int):
        for p in PRESETS.values():
            if p.level == key:
                return p
        raise KeyError(f"No preset for hazard level {key}.")
    try:
        return PRESETS[key.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown preset {key!r}. Available: {sorted(PRESETS)}"
        ) from None
