"""Fixed-tick time stepping.

The engine advances in fixed ticks independent of any rendering frame
rate; :class:`Ticker` produces that sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass
class Ticker:
    """Fixed tick sequence.

    Args:
        duration: Total simulated time (s).
        dt: Tick size (s).  Defaults to 100 ms.
        t_start: Start time (s).

    Example::

        for tick, t, dt in Ticker(duration=2.0):
            ...  # 20 ticks of 0.1 s
    """

    duration: float
    dt: float = 0.1
    t_start: float = 0.0

    def __post_init__(self) -> None:
        if not self.dt > 0:
            raise ValueError(f"Tick size must be positive, got {self.dt}.")

    @property
    def n_ticks(self) -> int:
        """Number of ticks (the last one may be shorter)."""
        return max(int(np.ceil(self.duration / self.dt - 1e-9)), 0)

    @property
    def times(self) -> np.ndarray:
        """Time at the end of each tick."""
        return np.array([t for _, t, _ in self])

    def __iter__(self) -> Iterator[tuple[int, float, float]]:
        """Yield ``(tick_index, t_end_of_tick, dt)``."""
        t_end = self.t_start + self.duration
        t = self.t_start
        for i in range(self.n_ticks):
            step = min(self.dt, t_end - t)
            t += step
            yield i, t, step

    def __len__(self) -> int:
        return self.n_ticks
