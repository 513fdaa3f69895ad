"""First-Order Second-Moment (FOSM) reliability analysis.

Treats the factor of safety as a random variable with mean FoS and
standard deviation FoS · COV.  The reliability index

    β = (FoS − 1) / (FoS · COV)

counts standard deviations between the mean and the limit state
FoS = 1, and the probability of failure is PoF = Φ(−β).

Functions
---------
reliability_index
    β from FoS and COV.
compute_pof
    Probability of failure in percent.
standard_normal_cdf
    Φ(x) through the Abramowitz–Stegun error function.
erf
    Abramowitz–Stegun approximation 7.1.26 (|error| < 1.5e-7 on erf).

References
----------
- Abramowitz & Stegun (1964), *Handbook of Mathematical Functions*,
  eq. 7.1.26.
- Baecher & Christian (2003), *Reliability and Statistics in
  Geotechnical Engineering*, Wiley, ch. 13.
"""

from __future__ import annotations

import math

# Abramowitz & Stegun 7.1.26
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

MIN_DENOMINATOR = 1e-4


def erf(x: float) -> float:
    """Error function approximation (Abramowitz & Stegun 7.1.26)."""
    sign = 1.0 if x >= 0 else -1.0
    ax = abs(x)
    t = 1.0 / (1.0 + _P * ax)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    return sign * (1.0 - poly * math.exp(-ax * ax))


def standard_normal_cdf(x: float) -> float:
    """Φ(x) = ½ (1 + erf(x / √2))."""
    return 0.5 * (1.0 + erf(x / math.sqrt(2.0)))


def reliability_index(fos: float, cov: float) -> float:
    """Reliability index β = (FoS − 1) / (FoS · COV).

    Returns ``nan`` when the denominator is not positive, and 0 when it
    is vanishingly small (``0 < FoS · COV ≤ 1e-4``).  In that band the
    PoF is therefore 50 % whatever the FoS, e.g.
    ``compute_pof(2.0, 1e-5) == 50``; pass ``cov = 0`` for a
    deterministic answer instead.
    """
    denominator = fos * cov
    if not denominator > 0:
        return float("nan")
    if denominator <= MIN_DENOMINATOR:
        return 0.0
    return (fos - 1.0) / denominator


def compute_pof(fos: float, cov: float) -> float:
    """Probability of failure (%) by FOSM.

    Args:
        fos: Factor of safety (mean).
        cov: Coefficient of variation of the FoS, typically 0.1–0.3.

    Returns:
        PoF in ``[0, 100]``.  When COV or FoS is not positive, or β is
        not finite, the deterministic answer is returned: 100 for
        FoS < 1, otherwise 0.
    """
    deterministic = 100.0 if fos < 1 else 0.0
    if not (cov > 0 and fos > 0):
        return deterministic

    beta = reliability_index(fos, cov)
    if not math.isfinite(beta):
        return deterministic

    pof = standard_normal_cdf(-beta) * 100.0
    return min(100.0, max(0.0, pof))
