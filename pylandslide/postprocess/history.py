"""Time series of simulation metrics.

Classes
-------
History
    Collects :class:`~pylandslide.simulation.Snapshot` records and
    exports them as arrays or CSV.
"""

from __future__ import annotations

import csv
from dataclasses import fields
from pathlib import Path
from typing import Any, Iterable

import numpy as np


class History:
    """Ordered record of snapshots.

    Example::

        history = History()
        history.extend(engine.run(duration=60.0))
        arrays = history.as_arrays()
        arrays["fos"].min()
        history.to_csv("run.csv")
    """

    def __init__(self, snapshots: Iterable[Any] = ()) -> None:
        self._records: list[Any] = []
        self.extend(snapshots)

    def append(self, snapshot: Any) -> None:
        self._records.append(snapshot)

    def extend(self, snapshots: Iterable[Any]) -> None:
        for s in snapshots:
            self.append(s)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> Any:
        return self._records[index]

    @property
    def columns(self) -> list[str]:
        if not self._records:
            return []
        return [f.name for f in fields(self._records[0])]

    def as_arrays(self) -> dict[str, np.ndarray]:
        """One array per snapshot field (numeric fields as float)."""
        out: dict[str, np.ndarray] = {}
        for name in self.columns:
            values = [getattr(r, name) for r in self._records]
            if all(isinstance(v, (int, float)) for v in values):
                out[name] = np.asarray(values, dtype=float)
            else:
                out[name] = np.asarray(values, dtype=object)
        return out

    def first_time(self, column: str, predicate: Any) -> float | None:
        """Time of the first snapshot whose *column* satisfies *predicate*.

        Example: ``history.first_time("fos", lambda v: v < 1.0)``.
        """
        for r in self._records:
            if predicate(getattr(r, column)):
                return float(r.time)
        return None

    def to_csv(self, path: str | Path) -> Path:
        """Write all snapshots to a CSV file with a header row.

        Returns:
            The output path.
        """
        path = Path(path)
        columns = self.columns
        with open(path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(columns)
            for r in self._records:
                writer.writerow([getattr(r, c) for c in columns])
        return path

    def __repr__(self) -> str:
        return f"History(n_records={len(self)})"
