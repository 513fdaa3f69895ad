"""Terrain deformation of a rotational / translational slump.

A deformation front sweeps from the head scarp toward the toe,
``front = head_z − length · progress``; only vertices at or above the
front (upslope of it) deform.  Along the normalized downslope
coordinate r (0 at the head, 1 at the toe):

head scarp (r ≤ 0.12)
    Steep power-curve erosion approximating a near-vertical back wall.
slump body (0.12 < r < 0.60)
    Backward-tilted blocks separated by fixed fracture lines, giving a
    stepped, terraced surface.
toe bulge (0.60 ≤ r ≤ 1.1)
    Bell-shaped deposition whose peak migrates downslope with progress.

Both output buffers are overwritten on every call: the result depends
only on ``(zone, progress)`` and the grid, never on what the buffers
held before.

Classes
-------
DeformationGrid
    Per-vertex coordinates and variation patterns, computed once.
TerrainDeformation
    The pair of output buffers.

Functions
---------
compute_terrain_deformation
    Fill the buffers for one ``(zone, progress)``.
compute_displaced_volume
    Coarse displaced-volume metric.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

HEAD_SCARP_START = -0.02
HEAD_SCARP_END = 0.12
BODY_END = 0.60
TOE_END = 1.1
FRACTURES = np.array([0.15, 0.28, 0.42, 0.55])
FRACTURE_HALF_WIDTH = 0.025

_BLOCK_STARTS = np.concatenate(([HEAD_SCARP_END], FRACTURES))
_BLOCK_ENDS = np.concatenate((FRACTURES, [BODY_END]))


@dataclass
class DeformationGrid:
    """Static per-vertex data for deformation fields.

    Attributes:
        world_x: World x coordinate of each vertex, shape ``(nz, nx)``.
        world_z: World z coordinate of each vertex.
        scarp_variation: Surface roughness factor in the head scarp.
        body_variation: Roughness factor in the slump body.
        toe_variation: Roughness factor in the toe bulge.
    """

    world_x: np.ndarray
    world_z: np.ndarray
    scarp_variation: np.ndarray
    body_variation: np.ndarray
    toe_variation: np.ndarray

    @property
    def shape(self) -> tuple[int, int]:
        return self.world_x.shape

    @property
    def size(self) -> int:
        return self.world_x.size

    @classmethod
    def from_heightfield(cls, terrain: Any) -> DeformationGrid:
        return cls.regular(terrain.nx, terrain.nz, terrain.world_scale)

    @classmethod
    def regular(cls, nx: int, nz: int, world_scale: float) -> DeformationGrid:
        """Grid of ``nz`` rows by ``nx`` columns spanning *world_scale*."""
        if nx < 2 or nz < 2:
            raise ValueError("A deformation grid needs at least 2x2 vertices.")
        gz, gx = np.mgrid[0:nz, 0:nx]
        world_x = gx / (nx - 1) * world_scale
        world_z = gz / (nz - 1) * world_scale
        # Deterministic hash-like patterns; identical on every call.
        return cls(
            world_x=world_x,
            world_z=world_z,
            scarp_variation=0.95 + ((gx * 7 + gz * 13) % 100) * 0.001,
            body_variation=0.90 + ((gx * 11 + gz * 17) % 100) * 0.002,
            toe_variation=0.85 + ((gx * 13 + gz * 11) % 100) * 0.003,
        )


@dataclass
class TerrainDeformation:
    """Per-vertex deformation buffers.

    Attributes:
        scarp_depth: Terrain lowering (≥ 0).
        deposition_depth: Terrain raising (≥ 0).
    """

    scarp_depth: np.ndarray
    deposition_depth: np.ndarray

    @classmethod
    def allocate(cls, grid: Any, dtype: Any = np.float32) -> TerrainDeformation:
        """Allocate zeroed buffers shaped like *grid* (or a height field)."""
        shape = grid.shape
        return cls(np.zeros(shape, dtype=dtype), np.zeros(shape, dtype=dtype))

    def clear(self) -> None:
        self.scarp_depth.fill(0)
        self.deposition_depth.fill(0)

    @property
    def net_change(self) -> np.ndarray:
        """Elevation change (deposition minus scarp)."""
        return self.deposition_depth - self.scarp_depth


def _grid_view(buffer: np.ndarray, grid: DeformationGrid, name: str) -> np.ndarray:
    if buffer.size != grid.size:
        raise ValueError(
            f"{name} has {buffer.size} entries, grid has {grid.size} vertices."
        )
    if not buffer.flags.c_contiguous:
        raise ValueError(f"{name} must be C-contiguous.")
    return buffer.reshape(grid.shape)


def _x_factor(world_x: np.ndarray, zone: Any) -> np.ndarray:
    """Soft lateral edges: 1 inside [start_x, end_x], fading outside."""
    margin = max(zone.width * 0.1, 1e-12)
    factor = np.ones_like(world_x)
    left = world_x < zone.start_x
    right = world_x > zone.end_x
    factor[left] = np.maximum(0.0, 1.0 - (zone.start_x - world_x[left]) / margin)
    factor[right] = np.maximum(0.0, 1.0 - (world_x[right] - zone.end_x) / margin)
    return factor


def _slump_body_depth(r: np.ndarray, depth: float) -> np.ndarray:
    """Erosion depth inside the slump body for normalized positions *r*."""
    # Tilted blocks between fractures
    idx = np.searchsorted(FRACTURES, r, side="right")
    start = _BLOCK_STARTS[idx]
    end = _BLOCK_ENDS[idx]
    block_r = (r - start) / (end - start)
    tilt = 0.3 + 0.5 * block_r
    depth_factor = np.maximum(0.0, 0.5 - (r - HEAD_SCARP_END))
    out = depth * depth_factor * tilt

    # Fracture troughs override the blocks; the first matching fracture wins
    assigned = np.zeros(r.shape, dtype=bool)
    for f in FRACTURES:
        lo = f - FRACTURE_HALF_WIDTH
        in_fracture = ~assigned & (r > lo) & (r <= f + FRACTURE_HALF_WIDTH)
        rel = (r[in_fracture] - lo) / (2 * FRACTURE_HALF_WIDTH)
        out[in_fracture] = depth * (0.4 - 0.3 * f) * (1.0 - rel) ** 2.5
        assigned |= in_fracture
    return out


def _toe_bulge(r: np.ndarray, progress: float) -> np.ndarray:
    """Normalized deposition intensity in the toe zone."""
    deposition_progress = min(1.0, max(0.0, progress - 0.2) / 0.8)
    peak = 0.75 + 0.1 * progress
    dist = np.abs(r - peak)
    upslope = np.maximum(0.0, 1.0 - dist / 0.2) ** 1.5
    downslope = np.maximum(0.0, 1.0 - dist / 0.4) ** 2.0
    return np.where(r < peak, upslope, downslope) * deposition_progress


def compute_terrain_deformation(
    zone: Any,
    progress: float,
    grid: DeformationGrid,
    out: TerrainDeformation | None = None,
) -> TerrainDeformation:
    """Compute scarp and deposition depths for one landslide state.

    Args:
        zone: :class:`~pylandslide.landslide.zone.FailureZone`.
        progress: Landslide progress in [0, 1].
        grid: Precomputed :class:`DeformationGrid`.
        out: Buffers to fill in place.  Each must hold exactly one value
            per grid vertex (2-D ``(nz, nx)`` or flat).  Allocated when
            omitted.

    Returns:
        The filled :class:`TerrainDeformation` (*out* when given).

    Raises:
        ValueError: If a buffer does not match the grid size.
    """
    if out is None:
        out = TerrainDeformation.allocate(grid)
    scarp = _grid_view(out.scarp_depth, grid, "scarp_depth")
    deposition = _grid_view(out.deposition_depth, grid, "deposition_depth")
    scarp.fill(0)
    deposition.fill(0)

    p = float(np.clip(np.nan_to_num(progress), 0.0, 1.0))
    if p <= 0 or zone.length <= 0:
        return out

    depth = zone.depth
    front = zone.head_z - zone.length * p
    x_factor = _x_factor(grid.world_x, zone)
    r = (zone.head_z - grid.world_z) / zone.length
    active = (x_factor > 0) & (grid.world_z >= front)

    # Head scarp
    m = active & (r >= HEAD_SCARP_START) & (r <= HEAD_SCARP_END)
    s = (r[m] - HEAD_SCARP_START) / (HEAD_SCARP_END - HEAD_SCARP_START)
    curve = (1.0 - s) ** 3.5
    scarp[m] = depth * (0.7 + 0.3 * p) * curve * x_factor[m] * grid.scarp_variation[m]

    # Slump body
    m = active & (r > HEAD_SCARP_END) & (r < BODY_END)
    body = _slump_body_depth(r[m], depth)
    scarp[m] = np.maximum(0.0, body * x_factor[m] * grid.body_variation[m])

    # Toe bulge
    m = active & (r >= BODY_END) & (r <= TOE_END)
    intensity = _toe_bulge(r[m], p)
    bulge = depth * (0.8 + 0.4 * p) * intensity * x_factor[m]
    deposition[m] = bulge * grid.toe_variation[m]

    return out


def compute_displaced_volume(zone: Any, progress: float) -> float:
    """Displaced volume metric (m³).

    V = width · (length / 2) · (depth · progress · 0.7) — a display
    figure that grows with progress, not a mass balance.
    """
    p = float(np.clip(np.nan_to_num(progress), 0.0, 1.0))
    return zone.width * (zone.length * 0.5) * (zone.depth * p * 0.7)
