"""Infinite slope stability analysis.

FoS = [c' + (γ z cos²β − u) tan φ'] / (γ z sin β cos β)

A closed-form 1-D approximation for long, uniform, planar failure
surfaces parallel to the ground.  Every function here is total: no
input raises, degenerate cases map to the bounds of the FoS range.

Functions
---------
compute_fos
    Factor of safety for given parameters and pore pressure.
effective_cohesion
    Cohesion after root reinforcement and saturation softening.
slope_normal_pore_pressure
    Pore pressure from ru measured against the slope-normal stress.

References
----------
- Skempton & DeLory (1957), Stability of natural slopes in London Clay.
- Duncan, Wright & Brandon (2014), *Soil Strength and Slope Stability*,
  2nd ed., Wiley, ch. 6.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

FOS_MIN = 0.1
FOS_MAX = 5.0
MIN_DRIVING_FORCE = 1e-3


def compute_fos(
    params: Any,
    pore_pressure: float,
    steep_decay: Any = None,
) -> float:
    """Factor of safety of an infinite slope.

    Args:
        params: :class:`~pylandslide.materials.params.GeotechnicalParams`
            (cohesion should already be the effective cohesion).
        pore_pressure: Pore-water pressure u on the slip plane (kPa).
        steep_decay: Optional :class:`~pylandslide.config.SteepDecay`.

    Returns:
        FoS clamped to ``[0.1, 5.0]``.  Flat slopes return 5.0 and
        vertical slopes 0.1.
    """
    beta = params.slope_angle
    if beta <= 0:
        return FOS_MAX
    if beta >= 90:
        return FOS_MIN

    theta = math.radians(beta)
    phi = math.radians(float(np.clip(params.friction_angle, 0.0, 90.0)))
    gamma_z = params.unit_weight * params.soil_depth

    normal_stress = gamma_z * math.cos(theta) ** 2
    effective_normal = normal_stress - pore_pressure
    resistance = params.cohesion + effective_normal * math.tan(phi)
    driving = gamma_z * math.sin(theta) * math.cos(theta)

    if driving <= MIN_DRIVING_FORCE:
        return FOS_MAX

    fos = resistance / driving
    if steep_decay is not None and beta > steep_decay.threshold:
        fos *= math.exp(-steep_decay.rate * (beta - steep_decay.threshold))

    if not math.isfinite(fos):
        return FOS_MAX if fos > 0 else FOS_MIN
    return min(FOS_MAX, max(FOS_MIN, fos))


def effective_cohesion(
    cohesion: float,
    vegetation: float = 0.0,
    erosion: float = 0.0,
    ru: float = 0.0,
    root_cohesion: float = 10.0,
) -> float:
    """Effective cohesion of the soil layer.

    c_eff = (c' + c_root · veg · (1 − erosion)) · (1 − 0.5 ru)

    Roots add cohesion in proportion to vegetation cover; erosion strips
    part of the rooted layer; pore pressure softens the bond.

    Args:
        cohesion: Base cohesion c' (kPa).
        vegetation: Vegetation cover fraction.
        erosion: Erosion fraction.
        ru: Pore-pressure ratio.
        root_cohesion: Root cohesion at full cover (kPa).

    Returns:
        Effective cohesion (kPa), never negative.
    """
    veg = float(np.clip(vegetation, 0.0, 1.0))
    ero = float(np.clip(erosion, 0.0, 1.0))
    ru_c = float(np.clip(ru, 0.0, 1.0))
    base = max(float(cohesion), 0.0) + max(root_cohesion, 0.0) * veg * (1.0 - ero)
    c_eff = base * (1.0 - 0.5 * ru_c)
    return c_eff if math.isfinite(c_eff) else 0.0


def slope_normal_pore_pressure(ru: float, params: Any) -> float:
    """Pore pressure u = ru · γ z cos²β.

    Useful when ru is prescribed directly instead of being derived from
    a saturation depth.
    """
    theta = math.radians(float(np.clip(params.slope_angle, 0.0, 90.0)))
    return float(ru) * params.unit_weight * params.soil_depth * math.cos(theta) ** 2
