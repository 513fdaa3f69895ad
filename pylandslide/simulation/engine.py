"""Tick-driven slope-stability and landslide simulation.

Each tick runs, strictly in order:

1. hydrology — rainfall infiltration (while raining) and
   evapotranspiration (always);
2. effective cohesion from vegetation, erosion and ru;
3. factor of safety (infinite slope);
4. probability of failure (FOSM);
5. status classification and, if enabled, automatic triggering;
6. landslide progress and regeneration of the deformation buffers.

Later stages read the values produced earlier in the same tick.  The
engine is single-threaded and not reentrant; commands such as
:meth:`SimulationEngine.stop_rain` or :meth:`SimulationEngine.reset`
take effect at the next tick boundary.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Callable

from pylandslide.config import EnvironmentalParams, SimulationConfig
from pylandslide.hydrology import (
    HydrologicalState,
    InfiltrationParams,
    apply_evapotranspiration,
    update_infiltration,
)
from pylandslide.landslide import (
    DeformationGrid,
    LandslideState,
    Phase,
    TerrainDeformation,
    advance,
    compute_displaced_volume,
    compute_failure_zone,
    compute_terrain_deformation,
)
from pylandslide.landslide import reset as dormant_state
from pylandslide.landslide import trigger as trigger_landslide
from pylandslide.logging_config import get_logger
from pylandslide.materials import GeotechnicalParams
from pylandslide.reliability import compute_pof
from pylandslide.simulation.status import simulation_status
from pylandslide.slope import compute_fos, effective_cohesion
from pylandslide.terrain import HeightField, generate_heightfield
from pylandslide.time import Ticker

logger = get_logger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Metrics published after a tick.

    Attributes:
        time: Simulation time (s).
        fos: Factor of safety.
        pof: Probability of failure (%).
        ru: Pore-pressure ratio.
        cohesion: Effective cohesion (kPa).
        saturation_depth: Saturated thickness (m).
        pore_pressure: Pore-water pressure (kPa).
        infiltration_rate: Infiltration rate (mm/hr).
        runoff_rate: Rain that did not infiltrate (mm/hr).
        status: Slope status (``"stable"`` … ``"failed"``).
        phase: Landslide phase name.
        progress: Landslide progress (0–1).
        displaced_volume: Displaced volume metric (m³).
    """

    time: float
    fos: float
    pof: float
    ru: float
    cohesion: float
    saturation_depth: float
    pore_pressure: float
    infiltration_rate: float
    runoff_rate: float
    status: str
    phase: str
    progress: float
    displaced_volume: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


class SimulationEngine:
    """Slope-stability simulator driven by fixed ticks.

    Args:
        params: Geotechnical parameters.
        terrain: Height field the landslide deforms.  A synthetic
            hillslope is generated when omitted.
        config: Engine settings.
        environment: Vegetation, erosion, moisture and rainfall.
        deformation: Pre-allocated output buffers.  Allocated once here
            when omitted; the engine overwrites them in place and never
            reallocates.

    Example::

        engine = SimulationEngine(params, terrain)
        engine.start_rain(80.0)
        for _ in range(100):
            snap = engine.tick()
        engine.trigger()
        engine.run(duration=20.0)
        engine.deformation.scarp_depth  # consumed by a renderer
    """

    def __init__(
        self,
        params: GeotechnicalParams | None = None,
        terrain: HeightField | None = None,
        config: SimulationConfig | None = None,
        environment: EnvironmentalParams | None = None,
        deformation: TerrainDeformation | None = None,
    ) -> None:
        self.params = params or GeotechnicalParams()
        self.terrain = terrain if terrain is not None else generate_heightfield(seed=0)
        self.config = config or SimulationConfig()
        self.environment = environment or EnvironmentalParams()
        self.grid = DeformationGrid.from_heightfield(self.terrain)
        self.deformation = deformation or TerrainDeformation.allocate(self.grid)
        if self.deformation.scarp_depth.size != self.grid.size:
            raise ValueError("Deformation buffers do not match the terrain grid.")

        self._log_validity()
        self.reset()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_rain(self, intensity: float = 50.0) -> None:
        """Start rain at *intensity* (mm/hr)."""
        self.environment = replace(
            self.environment, rainfall=max(float(intensity), 0.0), is_raining=True
        )
        logger.info("Rain started at %.1f mm/hr", self.environment.rainfall)

    def stop_rain(self) -> None:
        self.environment = replace(self.environment, rainfall=0.0, is_raining=False)
        logger.info("Rain stopped")

    def trigger(self) -> None:
        """Trigger a landslide on a dormant slope.

        Computes the failure zone from the current slope angle, soil
        depth and saturation.  Ignored unless the landslide is dormant.
        """
        if self.landslide.phase is not Phase.DORMANT:
            logger.debug("Trigger ignored in phase %s", self.landslide.phase.value)
            return

        soil_depth = self.params.soil_depth
        zone = compute_failure_zone(
            self.terrain,
            self.params.slope_angle,
            soil_depth,
            self.hydrology.saturation_ratio(soil_depth),
        )
        self.landslide = trigger_landslide(
            self.landslide, zone, self.config.initial_progress
        )
        self._regenerate_deformation()
        logger.info(
            "Landslide triggered: head z=%.1f, toe z=%.1f, depth=%.2f m",
            zone.head_z, zone.toe_z, zone.depth,
        )

    def reset(self) -> None:
        """Return to a dormant, dry-weather state at t = 0.

        Clears the failure zone and the deformation buffers and
        re-derives the saturation from the initial soil moisture.
        Geotechnical parameters and environment settings other than
        rain are kept.
        """
        self.time = 0.0
        self.environment = replace(self.environment, rainfall=0.0, is_raining=False)
        self.hydrology = HydrologicalState.initial(
            self.environment.soil_moisture,
            self.params.soil_depth,
            self.params.unit_weight,
        )
        self.landslide = dormant_state()
        self.deformation.clear()
        self.snapshot = self._evaluate(runoff_rate=0.0)
        logger.info("Simulation reset")

    def set_params(self, **changes: Any) -> None:
        """Replace geotechnical parameters, e.g. ``set_params(cohesion=5)``."""
        self.params = replace(self.params, **changes)
        self._fit_hydrology()
        self._log_validity()

    def set_environment(self, **changes: Any) -> None:
        self.environment = replace(self.environment, **changes)

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def tick(self, dt: float | None = None) -> Snapshot:
        """Advance the simulation by one tick.

        Args:
            dt: Tick size (s).  Defaults to ``config.dt``.

        Returns:
            The :class:`Snapshot` of the new state.

        Raises:
            ValueError: If *dt* is not positive.
        """
        dt = self.config.dt if dt is None else dt
        if not dt > 0:
            raise ValueError(f"Tick size must be positive, got {dt}.")

        runoff = self._update_hydrology(dt * self.config.time_acceleration)
        stability = self._stability()
        fos = stability[1]

        if (
            self.config.auto_trigger
            and self.landslide.phase is Phase.DORMANT
            and fos < 1.0
        ):
            logger.info("FoS %.3f below 1: automatic trigger", fos)
            self.trigger()

        if self.landslide.is_active:
            previous = self.landslide.phase
            self.landslide = advance(self.landslide, dt, self.config.landslide_rate)
            self._regenerate_deformation()
            if self.landslide.phase is not previous:
                logger.info(
                    "Landslide phase %s -> %s (progress %.2f)",
                    previous.value, self.landslide.phase.value, self.landslide.progress,
                )

        self.time += dt
        self.snapshot = self._evaluate(runoff, stability)
        logger.debug(
            "t=%.2f FoS=%.3f PoF=%.2f%% ru=%.3f phase=%s",
            self.time, self.snapshot.fos, self.snapshot.pof,
            self.snapshot.ru, self.snapshot.phase,
        )
        return self.snapshot

    def run(
        self,
        duration: float,
        rainfall: Callable[[float], float] | None = None,
    ) -> list[Snapshot]:
        """Run fixed ticks of ``config.dt`` for *duration* seconds.

        Args:
            duration: Simulated time (s).
            rainfall: Optional intensity schedule ``f(t) -> mm/hr`` (for
                example a :class:`~pylandslide.hydrology.Hyetograph`),
                evaluated at the start of each tick.  Zero stops the rain.

        Returns:
            One :class:`Snapshot` per tick.
        """
        snapshots: list[Snapshot] = []
        for _, _, dt in Ticker(duration, self.config.dt):
            if rainfall is not None:
                intensity = max(float(rainfall(self.time)), 0.0)
                self.environment = replace(
                    self.environment, rainfall=intensity, is_raining=intensity > 0
                )
            snapshots.append(self.tick(dt))
        return snapshots

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _update_hydrology(self, dt: float) -> float:
        """Rain infiltration then evapotranspiration; returns runoff (mm/hr)."""
        env = self.environment
        p = self.params
        cfg = self.config
        runoff = 0.0

        self._fit_hydrology()

        if env.is_raining and env.rainfall > 0:
            self.hydrology = update_infiltration(
                self.hydrology,
                InfiltrationParams(
                    rainfall_intensity=env.rainfall,
                    hydraulic_conductivity=p.hydraulic_conductivity,
                    vegetation=env.vegetation,
                    soil_depth=p.soil_depth,
                    porosity=cfg.porosity,
                    unit_weight=p.unit_weight,
                ),
                dt,
                conductivity_factor=cfg.conductivity_factor,
            )
            runoff = max(env.rainfall - self.hydrology.infiltration_rate, 0.0)
        elif self.hydrology.infiltration_rate:
            self.hydrology = replace(self.hydrology, infiltration_rate=0.0)

        self.hydrology = apply_evapotranspiration(
            self.hydrology,
            env.vegetation,
            p.soil_depth,
            dt,
            potential_et=cfg.potential_et,
            porosity=cfg.porosity,
            unit_weight=p.unit_weight,
        )
        return runoff

    def _fit_hydrology(self) -> None:
        """Re-clamp the saturation to the current soil depth and re-derive ru."""
        self.hydrology = HydrologicalState.from_depth(
            self.hydrology.saturation_depth,
            self.params.soil_depth,
            self.params.unit_weight,
            infiltration_rate=self.hydrology.infiltration_rate,
        )

    def _stability(self) -> tuple[float, float, float]:
        """Effective cohesion, FoS and PoF from the current hydrology."""
        h = self.hydrology
        env = self.environment
        c_eff = effective_cohesion(
            self.params.cohesion,
            env.vegetation,
            env.erosion,
            h.pore_pressure_ratio,
            root_cohesion=self.config.root_cohesion,
        )
        fos = compute_fos(
            replace(self.params, cohesion=c_eff),
            h.pore_pressure,
            steep_decay=self.config.steep_decay,
        )
        pof = compute_pof(fos, self.config.coefficient_of_variation)
        return c_eff, fos, pof

    def _evaluate(
        self,
        runoff_rate: float,
        stability: tuple[float, float, float] | None = None,
    ) -> Snapshot:
        """Snapshot of the current state.

        *stability* is reused when hydrology and parameters have not
        changed since it was computed.
        """
        h = self.hydrology
        c_eff, fos, pof = stability if stability is not None else self._stability()
        triggered = self.landslide.phase is not Phase.DORMANT

        return Snapshot(
            time=self.time,
            fos=fos,
            pof=pof,
            ru=h.pore_pressure_ratio,
            cohesion=c_eff,
            saturation_depth=h.saturation_depth,
            pore_pressure=h.pore_pressure,
            infiltration_rate=h.infiltration_rate,
            runoff_rate=runoff_rate,
            status=simulation_status(fos, triggered),
            phase=self.landslide.phase.value,
            progress=self.landslide.progress,
            displaced_volume=self.landslide.total_volume,
        )

    def _regenerate_deformation(self) -> None:
        zone = self.landslide.failure_zone
        progress = self.landslide.progress
        compute_terrain_deformation(zone, progress, self.grid, self.deformation)
        self.landslide = replace(
            self.landslide, total_volume=compute_displaced_volume(zone, progress)
        )

    def _log_validity(self) -> None:
        for issue in self.params.validate():
            logger.warning(issue)

    def __repr__(self) -> str:
        return (
            f"SimulationEngine(t={self.time:.2f}, fos={self.snapshot.fos:.3f}, "
            f"phase={self.landslide.phase.value!r})"
        )
