"""Rainfall time series.

Classes
-------
Hyetograph
    Piecewise-linear rainfall intensity over time.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


class Hyetograph:
    """Piecewise-linear rainfall intensity (mm/hr).

    Outside the time range the first / last intensity is held.

    Args:
        times: Increasing time values (s).
        intensities: Rainfall intensity at each time (mm/hr).

    Example::

        storm = Hyetograph(
            times=[0, 600, 1800, 3600],
            intensities=[0.0, 60.0, 60.0, 0.0],
        )
        storm(900)  # 60.0
    """

    def __init__(
        self,
        times: Sequence[float],
        intensities: Sequence[float],
    ) -> None:
        self.times = np.asarray(times, dtype=float)
        self.intensities = np.asarray(intensities, dtype=float)
        if len(self.times) != len(self.intensities):
            raise ValueError("times and intensities must have the same length.")
        if len(self.times) == 0:
            raise ValueError("A hyetograph needs at least one point.")
        if np.any(np.diff(self.times) < 0):
            raise ValueError("times must be non-decreasing.")

    def __call__(self, t: float) -> float:
        """Interpolate the intensity at time *t* (never negative)."""
        return max(float(np.interp(t, self.times, self.intensities)), 0.0)

    @property
    def duration(self) -> float:
        """Time span covered by the series (s)."""
        return float(self.times[-1] - self.times[0])

    def __repr__(self) -> str:
        return f"Hyetograph(n_points={len(self.times)}, duration={self.duration})"
