"""Simulation configuration.

Classes
-------
SteepDecay
    Optional exponential FoS reduction for very steep slopes.
SimulationConfig
    Tick size, reliability, hydrology and landslide settings.
TerrainConfig
    Synthetic height-field settings.
EnvironmentalParams
    Vegetation, erosion, moisture and rainfall inputs.

All configuration objects are plain dataclasses; derive variants with
:func:`dataclasses.replace`::

    from dataclasses import replace
    cfg = replace(SimulationConfig(), auto_trigger=True)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SteepDecay:
    """Exponential FoS decay beyond a threshold slope angle.

    When enabled, the raw factor of safety is multiplied by
    ``exp(-rate * (slope_angle - threshold))`` for slopes steeper than
    *threshold*.

    Args:
        threshold: Slope angle (degrees) where the decay starts.
        rate: Decay rate per degree.
    """

    threshold: float = 60.0
    rate: float = 0.05


@dataclass(frozen=True)
class SimulationConfig:
    """Engine settings.

    Args:
        dt: Default tick size (s).
        coefficient_of_variation: COV of the FoS for FOSM analysis.
        porosity: Soil porosity n (–).
        potential_et: Potential evapotranspiration (mm/day).
        root_cohesion: Root cohesion at full vegetation cover (kPa).
        conductivity_factor: Conversion from the hydraulic conductivity
            input (×10⁻⁶ m/s) to an infiltration capacity in mm/hr.
            1 µm/s is 3.6 mm/hr.
        time_acceleration: Hydrological seconds simulated per tick
            second.  Landslide motion is not accelerated.
        landslide_rate: Base progress rate of a landslide (1/s).
        initial_progress: Progress assigned when a landslide is
            triggered.
        auto_trigger: Trigger a landslide as soon as FoS drops below 1.
        steep_decay: Optional :class:`SteepDecay` for the FoS.
    """

    dt: float = 0.1
    coefficient_of_variation: float = 0.2
    porosity: float = 0.35
    potential_et: float = 5.0
    root_cohesion: float = 10.0
    conductivity_factor: float = 3.6
    time_acceleration: float = 1.0
    landslide_rate: float = 0.08
    initial_progress: float = 0.01
    auto_trigger: bool = False
    steep_decay: SteepDecay | None = None


@dataclass(frozen=True)
class TerrainConfig:
    """Synthetic terrain settings.

    Args:
        nx: Grid vertices along x (across the slope).
        nz: Grid vertices along z (up the slope).
        world_scale: World units spanned by the grid on each axis.
        max_elevation: Peak elevation (m).
        slope_angle: Main slope angle (degrees) of the base incline.
        octaves: Number of noise octaves.
        persistence: Amplitude decay per octave.
        noise_scale: Base noise frequency (cycles per vertex).
        ridge_sharpness: Blend between plain and ridged noise (0–1).
    """

    nx: int = 128
    nz: int = 128
    world_scale: float = 100.0
    max_elevation: float = 40.0
    slope_angle: float = 30.0
    octaves: int = 5
    persistence: float = 0.5
    noise_scale: float = 0.025
    ridge_sharpness: float = 0.4


@dataclass(frozen=True)
class EnvironmentalParams:
    """Environmental inputs.

    Args:
        vegetation: Vegetation cover fraction (0–1).
        erosion: Erosion level fraction (0–1).
        soil_moisture: Initial soil moisture fraction (0–1).
        rainfall: Rainfall intensity (mm/hr).
        is_raining: Whether rain is currently falling.
    """

    vegetation: float = 0.7
    erosion: float = 0.3
    soil_moisture: float = 0.5
    rainfall: float = 0.0
    is_raining: bool = False
