"""Terrain: height-field grid and synthetic hillslope generation."""

from pylandslide.terrain.heightfield import HeightField, generate_heightfield

__all__ = [
    "HeightField",
    "generate_heightfield",
]
