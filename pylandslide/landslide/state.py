"""Landslide phase state machine.

Phases
------
dormant
    No landslide.  Initial state, and the state after :func:`reset`.
initiating
    progress < 0.2 — the head scarp opens.
flowing
    0.2 ≤ progress < 0.7 — the mass moves downslope.
depositing
    0.7 ≤ progress < 1.0 — material accumulates at the toe.
complete
    progress = 1.0 — terminal until :func:`reset`.

Progress advances at ``rate · (1 − 0.7 · progress)`` per second, fast
at first and settling near completion, and the phase follows from the
progress thresholds.  Progress never decreases, so phases only move
forward; the only way back to ``dormant`` is :func:`reset`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

INITIATING_END = 0.2
FLOWING_END = 0.7
DEFAULT_RATE = 0.08
RATE_DECAY = 0.7


class Phase(str, Enum):
    DORMANT = "dormant"
    INITIATING = "initiating"
    FLOWING = "flowing"
    DEPOSITING = "depositing"
    COMPLETE = "complete"

    @property
    def is_active(self) -> bool:
        """True while the landslide is moving."""
        return self not in (Phase.DORMANT, Phase.COMPLETE)


PHASE_ORDER = (
    Phase.DORMANT,
    Phase.INITIATING,
    Phase.FLOWING,
    Phase.DEPOSITING,
    Phase.COMPLETE,
)


@dataclass(frozen=True)
class LandslideState:
    """State of one landslide event.

    Attributes:
        phase: Current :class:`Phase`.
        progress: Deformation progress in [0, 1].
        failure_zone: Geometry of the sliding mass, ``None`` while dormant.
        total_volume: Displaced volume (m³).
        runout_distance: Distance travelled by the deformation front.
        elapsed_time: Seconds since the trigger.
    """

    phase: Phase = Phase.DORMANT
    progress: float = 0.0
    failure_zone: Any = None
    total_volume: float = 0.0
    runout_distance: float = 0.0
    elapsed_time: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.phase.is_active


def phase_for_progress(progress: float) -> Phase:
    """Phase implied by a progress value (for a triggered landslide)."""
    if progress < INITIATING_END:
        return Phase.INITIATING
    if progress < FLOWING_END:
        return Phase.FLOWING
    if progress < 1.0:
        return Phase.DEPOSITING
    return Phase.COMPLETE


def reset() -> LandslideState:
    """Fresh dormant state with no failure zone."""
    return LandslideState()


def trigger(
    state: LandslideState,
    failure_zone: Any,
    initial_progress: float = 0.01,
) -> LandslideState:
    """Start a landslide on *failure_zone*.

    Only a dormant state can be triggered; any other state is returned
    unchanged.
    """
    if state.phase is not Phase.DORMANT:
        return state
    progress = min(max(float(initial_progress), 1e-6), 1.0)
    return LandslideState(
        phase=phase_for_progress(progress),
        progress=progress,
        failure_zone=failure_zone,
        runout_distance=failure_zone.length * progress,
    )


def advance(
    state: LandslideState,
    dt: float,
    rate: float = DEFAULT_RATE,
) -> LandslideState:
    """Advance an active landslide by *dt* seconds.

    Dormant and complete states are returned unchanged.
    """
    if not state.is_active:
        return state

    step = max(rate, 0.0) * (1.0 - RATE_DECAY * state.progress) * max(dt, 0.0)
    progress = min(1.0, state.progress + step)
    zone = state.failure_zone
    runout = zone.length * progress if zone is not None else 0.0

    return replace(
        state,
        phase=phase_for_progress(progress),
        progress=progress,
        runout_distance=runout,
        elapsed_time=state.elapsed_time + max(dt, 0.0),
    )
