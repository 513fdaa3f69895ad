"""Status classification of stability metrics.

Each metric maps to one of ``"safe"``, ``"marginal"``, ``"critical"``
or ``"failure"``:

=========  ======  ========  ========  =======
metric     safe    marginal  critical  failure
=========  ======  ========  ========  =======
FoS        ≥ 1.5   ≥ 1.2     ≥ 1.0     < 1.0
PoF (%)    < 5     < 20      < 50      ≥ 50
ru         < 0.25  < 0.35    < 0.5     ≥ 0.5
c (kPa)    ≥ 20    ≥ 10      ≥ 5       < 5
=========  ======  ========  ========  =======
"""

from __future__ import annotations

STATUS_LEVELS = ("safe", "marginal", "critical", "failure")

THRESHOLDS = {
    "fos": (1.5, 1.2, 1.0),
    "pof": (5.0, 20.0, 50.0),
    "ru": (0.25, 0.35, 0.5),
    "cohesion": (20.0, 10.0, 5.0),
}


def _higher_is_safer(value: float, limits: tuple[float, float, float]) -> str:
    for level, limit in zip(STATUS_LEVELS, limits):
        if value >= limit:
            return level
    return "failure"


def _lower_is_safer(value: float, limits: tuple[float, float, float]) -> str:
    for level, limit in zip(STATUS_LEVELS, limits):
        if value < limit:
            return level
    return "failure"


def fos_status(value: float) -> str:
    return _higher_is_safer(value, THRESHOLDS["fos"])


def pof_status(value: float) -> str:
    return _lower_is_safer(value, THRESHOLDS["pof"])


def ru_status(value: float) -> str:
    return _lower_is_safer(value, THRESHOLDS["ru"])


def cohesion_status(value: float) -> str:
    return _higher_is_safer(value, THRESHOLDS["cohesion"])


def overall_status(fos: float, pof: float) -> str:
    """Most critical of the FoS and PoF statuses."""
    return max(fos_status(fos), pof_status(pof), key=STATUS_LEVELS.index)


def simulation_status(fos: float, triggered: bool = False) -> str:
    """Slope status shown by the simulator.

    ``"failing"`` / ``"failed"`` once a landslide is triggered or FoS
    drops below 1 (``"failed"`` below 0.8), otherwise ``"critical"``,
    ``"marginal"`` or ``"stable"``.
    """
    if triggered or fos < 1.0:
        return "failed" if fos < 0.8 else "failing"
    if fos < 1.2:
        return "critical"
    if fos < 1.5:
        return "marginal"
    return "stable"
