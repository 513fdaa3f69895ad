"""Geotechnical parameters of the sliding soil layer.

Classes
-------
GeotechnicalParams
    Slope geometry and soil strength for one homogeneous layer.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np


def _clip(value: float, lo: float, hi: float) -> float:
    return float(np.clip(value, lo, hi))


@dataclass(frozen=True)
class GeotechnicalParams:
    """Soil and slope parameters for the infinite slope model.

    Attributes:
        slope_angle: Slope inclination β (degrees, 0–90).
        soil_depth: Thickness z of the soil above the slip plane (m).
        unit_weight: Bulk unit weight γ (kN/m³).
        cohesion: Effective cohesion c' before saturation effects (kPa).
        friction_angle: Effective friction angle φ' (degrees, 0–90).
        hydraulic_conductivity: Saturated conductivity K (×10⁻⁶ m/s).

    The model is only meaningful for ``slope_angle < friction_angle``
    with positive cohesion or for shallow slopes, but values outside
    that envelope are accepted; see :meth:`validate`.

    Example::

        params = GeotechnicalParams(
            slope_angle=30, soil_depth=3.0, unit_weight=19.0,
            cohesion=15.0, friction_angle=32.0,
        )
    """

    slope_angle: float = 30.0
    soil_depth: float = 3.0
    unit_weight: float = 18.0
    cohesion: float = 10.0
    friction_angle: float = 30.0
    hydraulic_conductivity: float = 1.0

    def clamped(self) -> GeotechnicalParams:
        """Return a copy with every value inside its documented range."""
        return replace(
            self,
            slope_angle=_clip(self.slope_angle, 0.0, 90.0),
            friction_angle=_clip(self.friction_angle, 0.0, 90.0),
            soil_depth=max(float(self.soil_depth), 0.0),
            unit_weight=max(float(self.unit_weight), 0.0),
            cohesion=max(float(self.cohesion), 0.0),
            hydraulic_conductivity=max(float(self.hydraulic_conductivity), 0.0),
        )

    def validate(self) -> list[str]:
        """Run basic plausibility checks.

        Returns:
            List of warning strings (empty if all OK).  Nothing is
            raised: the engine still evaluates implausible inputs.
        """
        issues: list[str] = []
        values = (
            self.slope_angle, self.soil_depth, self.unit_weight,
            self.cohesion, self.friction_angle, self.hydraulic_conductivity,
        )
        if not all(np.isfinite(v) for v in values):
            issues.append("Non-finite parameter value.")
        if not 0.0 <= self.slope_angle <= 90.0:
            issues.append(f"Slope angle {self.slope_angle} outside [0, 90].")
        if not 0.0 <= self.friction_angle <= 90.0:
            issues.append(f"Friction angle {self.friction_angle} outside [0, 90].")
        if self.soil_depth <= 0:
            issues.append("Soil depth must be positive.")
        if self.unit_weight <= 0:
            issues.append("Unit weight must be positive.")
        if self.slope_angle >= self.friction_angle:
            issues.append(
                "Slope angle at or above friction angle: results lie outside "
                "the model's validity envelope."
            )
        return issues
