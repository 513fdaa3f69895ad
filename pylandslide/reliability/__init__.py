"""Reliability: FOSM probability of failure."""

from pylandslide.reliability.fosm import (
    erf,
    standard_normal_cdf,
    reliability_index,
    compute_pof,
)

__all__ = [
    "erf",
    "standard_normal_cdf",
    "reliability_index",
    "compute_pof",
]
