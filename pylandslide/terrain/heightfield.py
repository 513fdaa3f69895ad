"""Height-field container and synthetic hillslope generator.

Orientation
-----------
Rows run along z, columns along x.  High z is the top of the slope,
low z the bottom.  Vertex ``(gz, gx)`` sits at world position
``x = gx / (nx - 1) * world_scale``, ``z = gz / (nz - 1) * world_scale``
and has flat index ``gz * nx + gx``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike
from scipy.ndimage import gaussian_filter

from pylandslide.config import TerrainConfig


@dataclass
class HeightField:
    """Normalized elevation grid.

    Attributes:
        heights: Normalized heights in [0, 1], shape ``(nz, nx)``.
        world_scale: World units spanned by the grid on each axis.
        max_elevation: Elevation (m) of a normalized height of 1.
    """

    heights: np.ndarray
    world_scale: float = 100.0
    max_elevation: float = 40.0

    def __post_init__(self) -> None:
        self.heights = np.asarray(self.heights, dtype=np.float32)
        if self.heights.ndim != 2 or min(self.heights.shape) < 2:
            raise ValueError("heights must be a 2-D grid of at least 2x2 vertices.")

    @property
    def nx(self) -> int:
        return self.heights.shape[1]

    @property
    def nz(self) -> int:
        return self.heights.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        return self.heights.shape

    @property
    def n_vertices(self) -> int:
        return self.heights.size

    @property
    def elevations(self) -> np.ndarray:
        """Elevations in metres."""
        return self.heights * self.max_elevation

    @property
    def elevation_range(self) -> float:
        """Span of elevations the normalized grid can represent (m)."""
        return float(self.max_elevation)

    def world_coordinates(self) -> tuple[np.ndarray, np.ndarray]:
        """World x and z coordinate arrays, each of shape ``(nz, nx)``."""
        x = np.linspace(0.0, self.world_scale, self.nx)
        z = np.linspace(0.0, self.world_scale, self.nz)
        return np.meshgrid(x, z)

    def height_at(self, world_x: float, world_z: float) -> float:
        """Bilinearly interpolated normalized height.

        Returns 0 outside the grid.
        """
        gx = world_x / self.world_scale * (self.nx - 1)
        gz = world_z / self.world_scale * (self.nz - 1)
        if not (0 <= gx < self.nx - 1 and 0 <= gz < self.nz - 1):
            return 0.0

        x0 = int(np.floor(gx))
        z0 = int(np.floor(gz))
        fx = gx - x0
        fz = gz - z0
        h = self.heights
        top = h[z0, x0] * (1 - fx) + h[z0, x0 + 1] * fx
        bottom = h[z0 + 1, x0] * (1 - fx) + h[z0 + 1, x0 + 1] * fx
        return float(top * (1 - fz) + bottom * fz)

    @classmethod
    def from_elevations(
        cls,
        elevations: ArrayLike,
        world_scale: float = 100.0,
    ) -> HeightField:
        """Normalize an elevation grid (m) to a height field."""
        elev = np.asarray(elevations, dtype=float)
        lo, hi = float(elev.min()), float(elev.max())
        span = hi - lo
        heights = (elev - lo) / span if span > 0 else np.zeros_like(elev)
        return cls(heights=heights, world_scale=world_scale, max_elevation=span)


def _smoothstep(edge0: float, edge1: float, x: np.ndarray) -> np.ndarray:
    t = np.clip((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def _octave_noise(
    shape: tuple[int, int],
    config: TerrainConfig,
    rng: np.random.Generator,
) -> np.ndarray:
    """Multi-octave smoothed noise in roughly [-1, 1]."""
    noise = np.zeros(shape)
    amplitude = 1.0
    frequency = config.noise_scale
    total = 0.0
    for _ in range(config.octaves):
        # Features span about 1/frequency vertices
        sigma = max(0.25 / frequency, 0.5)
        layer = gaussian_filter(rng.standard_normal(shape), sigma=sigma, mode="reflect")
        peak = np.abs(layer).max()
        if peak > 0:
            layer /= peak
        noise += amplitude * layer
        total += amplitude
        amplitude *= config.persistence
        frequency *= 2.0
    return noise / total if total > 0 else noise


def generate_heightfield(
    config: TerrainConfig | None = None,
    seed: Any = None,
) -> HeightField:
    """Generate a synthetic mountain hillslope.

    Heights combine a base incline rising with z, a rounded peak near
    the back of the slope, ridged fractal noise and a smooth falloff at
    the grid edges, normalized to [0, 1].

    Args:
        config: Terrain settings (defaults to :class:`TerrainConfig`).
        seed: Seed for :func:`numpy.random.default_rng`.

    Returns:
        A :class:`HeightField`.
    """
    config = config or TerrainConfig()
    rng = np.random.default_rng(seed)
    shape = (config.nz, config.nx)

    nx_ = np.linspace(0.0, 1.0, config.nx)
    nz_ = np.linspace(0.0, 1.0, config.nz)
    X, Z = np.meshgrid(nx_, nz_)

    base = Z * np.tan(np.radians(np.clip(config.slope_angle, 0.0, 89.0)))

    dist_x = np.abs(X - 0.5)
    dist_ridge = np.abs(Z - 0.7)
    peak = np.maximum(0.0, 1.0 - np.sqrt(0.5 * dist_x**2 + dist_ridge**2)) * 0.6

    noise = _octave_noise(shape, config, rng)
    s = config.ridge_sharpness
    ridged = (1.0 - np.abs(noise)) * s + noise * (1.0 - s)
    detail = ridged * 0.35

    edge = 0.08
    falloff = np.minimum(_smoothstep(0, edge, X), _smoothstep(0, edge, 1 - X)) * np.minimum(
        _smoothstep(0, edge, Z), _smoothstep(0, edge, 1 - Z)
    )

    raw = (0.5 * base + peak + 0.5 * detail) * falloff
    span = raw.max() - raw.min()
    heights = (raw - raw.min()) / span if span > 0 else np.zeros(shape)

    return HeightField(
        heights=heights,
        world_scale=config.world_scale,
        max_elevation=config.max_elevation,
    )
