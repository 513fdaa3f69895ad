"""Materials: geotechnical parameters and hazard presets."""

from pylandslide.materials.params import GeotechnicalParams
from pylandslide.materials.library import (
    HazardPreset,
    PRESETS,
    preset,
    low,
    moderate,
    high,
)

__all__ = [
    "GeotechnicalParams",
    "HazardPreset",
    "PRESETS",
    "preset",
    "low",
    "moderate",
    "high",
]
