"""Slope stability analysis (infinite slope).

Example::

    from pylandslide.materials import GeotechnicalParams
    from pylandslide.slope import compute_fos

    params = GeotechnicalParams(
        slope_angle=30, soil_depth=3.0, unit_weight=19.0,
        cohesion=15.0, friction_angle=32.0,
    )
    compute_fos(params, pore_pressure=0.0)  # ≈ 1.69
"""

from pylandslide.slope.infinite import (
    FOS_MIN,
    FOS_MAX,
    compute_fos,
    effective_cohesion,
    slope_normal_pore_pressure,
)

__all__ = [
    "FOS_MIN",
    "FOS_MAX",
    "compute_fos",
    "effective_cohesion",
    "slope_normal_pore_pressure",
]
