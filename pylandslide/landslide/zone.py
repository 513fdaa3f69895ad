"""Failure-zone geometry.

Orientation: high z is the top of the slope (head scarp), low z the
bottom (toe).  The zone spans most of the terrain width.

Parameter effects
-----------------
- Steeper slopes fail higher up, deeper, and run out further.
- Wetter soil fails deeper and runs out further.
- Deeper soil gives a thicker sliding mass.
- Depth is kept between 2 % and 15 % of the terrain elevation range so
  the deformation stays proportionate whatever the inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

MARGIN_X = 0.10
HEAD_BASE = 0.70
HEAD_SPAN = 0.15
TOE_LIMIT = 0.10
RUNOUT_BASE = 0.35
MIN_DEPTH_FRACTION = 0.02
MAX_DEPTH_FRACTION = 0.15


@dataclass(frozen=True)
class FailureZone:
    """Geometry of a sliding mass, fixed for one landslide event.

    Attributes:
        start_x: Left edge (world units).
        end_x: Right edge.
        head_z: Head scarp position (upper edge).
        toe_z: Runout terminus (lower edge), ``toe_z < head_z``.
        depth: Maximum failure thickness (m).
        angle: Slope angle at failure (degrees).
        width: ``end_x - start_x``.
        length: ``head_z - toe_z``.
    """

    start_x: float
    end_x: float
    head_z: float
    toe_z: float
    depth: float
    angle: float
    width: float
    length: float


def compute_failure_zone(
    terrain: Any,
    slope_angle: float,
    soil_depth: float,
    saturation: float,
) -> FailureZone:
    """Derive the failure zone for a triggered landslide.

    Args:
        terrain: :class:`~pylandslide.terrain.HeightField` providing the
            world scale and elevation range.
        slope_angle: Slope angle (degrees), clamped to [0, 90].
        soil_depth: Soil thickness (m).
        saturation: Saturated fraction of the soil column, clamped to
            [0, 1].

    Returns:
        A :class:`FailureZone`.
    """
    scale = float(terrain.world_scale)
    beta = float(np.clip(np.nan_to_num(slope_angle), 0.0, 90.0))
    sat = float(np.clip(np.nan_to_num(saturation), 0.0, 1.0))
    z = max(float(np.nan_to_num(soil_depth)), 0.0)

    start_x = scale * MARGIN_X
    end_x = scale - start_x

    head_z = scale * (HEAD_BASE + beta / 60.0 * HEAD_SPAN)

    slope_factor = beta / 30.0
    runout_factor = 1.5 + 1.5 * slope_factor + 1.5 * sat
    runout = scale * RUNOUT_BASE * runout_factor
    toe_z = max(head_z - runout, scale * TOE_LIMIT)

    slope_amplifier = 1.0 + (beta - 20.0) / 30.0
    saturation_amplifier = 1.0 + 1.5 * sat
    raw_depth = 0.8 * z * slope_amplifier * saturation_amplifier
    elevation = float(terrain.elevation_range)
    depth = max(MIN_DEPTH_FRACTION * elevation, min(raw_depth, MAX_DEPTH_FRACTION * elevation))

    return FailureZone(
        start_x=start_x,
        end_x=end_x,
        head_z=head_z,
        toe_z=toe_z,
        depth=depth,
        angle=beta,
        width=end_x - start_x,
        length=head_z - toe_z,
    )
