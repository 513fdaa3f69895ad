"""Tests for infinite slope stability.

Tests cover:
- Worked example against hand calculation
- Degenerate inputs (flat, vertical, zero depth, non-finite)
- Monotonicity in slope angle, pore pressure, cohesion, friction
- Optional steep-slope decay
- Effective cohesion composition
"""

import math

import numpy as np
import pytest

from pylandslide.config import SteepDecay
from pylandslide.materials import GeotechnicalParams
from pylandslide.slope import (
    FOS_MAX,
    FOS_MIN,
    compute_fos,
    effective_cohesion,
    slope_normal_pore_pressure,
)


def _example_params(**changes):
    """30° slope, 3 m of soil, γ=19 kN/m³, c'=15 kPa, φ'=32°."""
    base = dict(
        slope_angle=30.0,
        soil_depth=3.0,
        unit_weight=19.0,
        cohesion=15.0,
        friction_angle=32.0,
    )
    base.update(changes)
    return GeotechnicalParams(**base)


class TestComputeFoS:
    def test_worked_example(self):
        # normal stress 42.75, resistance 41.72, driving 24.68
        assert compute_fos(_example_params(), 0.0) == pytest.approx(1.69, abs=5e-3)

    def test_matches_closed_form(self):
        p = _example_params()
        b = math.radians(30.0)
        expected = (15.0 + 57.0 * math.cos(b) ** 2 * math.tan(math.radians(32.0))) / (
            57.0 * math.sin(b) * math.cos(b)
        )
        assert compute_fos(p, 0.0) == pytest.approx(expected)

    def test_flat_slope(self):
        assert compute_fos(_example_params(slope_angle=0.0), 0.0) == 5.0

    def test_negative_slope(self):
        assert compute_fos(_example_params(slope_angle=-10.0), 0.0) == 5.0

    def test_vertical_slope(self):
        assert compute_fos(_example_params(slope_angle=90.0), 0.0) == 0.1

    def test_beyond_vertical(self):
        assert compute_fos(_example_params(slope_angle=120.0), 0.0) == 0.1

    def test_near_zero_driving_force(self):
        assert compute_fos(_example_params(slope_angle=1e-6), 0.0) == 5.0

    def test_zero_soil_depth(self):
        assert compute_fos(_example_params(soil_depth=0.0), 0.0) == 5.0

    def test_large_pore_pressure_clamps_low(self):
        assert compute_fos(_example_params(cohesion=0.0), 1e4) == FOS_MIN

    def test_non_finite_inputs_stay_bounded(self):
        for p in (
            _example_params(slope_angle=float("nan")),
            _example_params(friction_angle=float("nan")),
            _example_params(unit_weight=float("inf")),
        ):
            fos = compute_fos(p, 0.0)
            assert FOS_MIN <= fos <= FOS_MAX

    def test_friction_angle_above_90_is_clamped(self):
        fos = compute_fos(_example_params(friction_angle=135.0), 0.0)
        assert fos == compute_fos(_example_params(friction_angle=90.0), 0.0)

    def test_range_over_parameter_grid(self):
        for beta in np.linspace(-10, 100, 23):
            for u in (0.0, 10.0, 50.0, 500.0):
                for c in (0.0, 5.0, 50.0):
                    fos = compute_fos(_example_params(slope_angle=beta, cohesion=c), u)
                    assert FOS_MIN <= fos <= FOS_MAX


class TestMonotonicity:
    def test_non_increasing_in_slope_angle(self):
        betas = np.linspace(1.0, 45.0, 89)
        fos = [compute_fos(_example_params(slope_angle=b), 0.0) for b in betas]
        assert np.all(np.diff(fos) <= 1e-12)

    def test_non_increasing_in_pore_pressure(self):
        pressures = np.linspace(0.0, 100.0, 101)
        fos = [compute_fos(_example_params(), u) for u in pressures]
        assert np.all(np.diff(fos) <= 1e-12)

    def test_non_decreasing_in_cohesion(self):
        cs = np.linspace(0.0, 60.0, 61)
        fos = [compute_fos(_example_params(cohesion=c), 5.0) for c in cs]
        assert np.all(np.diff(fos) >= -1e-12)

    def test_non_decreasing_in_friction_angle(self):
        phis = np.linspace(0.0, 60.0, 61)
        fos = [compute_fos(_example_params(friction_angle=phi), 0.0) for phi in phis]
        assert np.all(np.diff(fos) >= -1e-12)


class TestSteepDecay:
    def test_reduces_fos_beyond_threshold(self):
        p = _example_params(slope_angle=75.0)
        plain = compute_fos(p, 0.0)
        decayed = compute_fos(p, 0.0, steep_decay=SteepDecay())
        assert decayed == pytest.approx(plain * math.exp(-0.05 * 15.0))
        assert decayed < plain

    def test_no_effect_below_threshold(self):
        p = _example_params(slope_angle=40.0)
        assert compute_fos(p, 0.0, steep_decay=SteepDecay()) == compute_fos(p, 0.0)


class TestEffectiveCohesion:
    def test_root_reinforcement(self):
        c = effective_cohesion(10.0, vegetation=0.7, erosion=0.3, ru=0.0)
        assert c == pytest.approx(10.0 + 10.0 * 0.7 * 0.7)

    def test_saturation_softening(self):
        dry = effective_cohesion(10.0, ru=0.0)
        wet = effective_cohesion(10.0, ru=1.0)
        assert wet == pytest.approx(0.5 * dry)

    def test_fractions_are_clamped(self):
        assert effective_cohesion(10.0, vegetation=2.0) == effective_cohesion(10.0, vegetation=1.0)
        assert effective_cohesion(10.0, ru=5.0) == effective_cohesion(10.0, ru=1.0)

    def test_never_negative(self):
        assert effective_cohesion(-20.0, vegetation=0.0) == 0.0

    def test_non_increasing_in_ru(self):
        values = [effective_cohesion(15.0, 0.5, 0.2, ru) for ru in np.linspace(0, 1, 11)]
        assert np.all(np.diff(values) <= 0)


class TestSlopeNormalPorePressure:
    def test_value(self):
        p = GeotechnicalParams(slope_angle=30.0, soil_depth=3.0, unit_weight=18.0)
        assert slope_normal_pore_pressure(0.5, p) == pytest.approx(0.5 * 54.0 * 0.75)


class TestParamsValidation:
    def test_valid_params(self):
        assert _example_params().validate() == []

    def test_slope_steeper_than_friction(self):
        issues = _example_params(slope_angle=40.0).validate()
        assert any("friction angle" in i for i in issues)

    def test_clamped(self):
        p = _example_params(slope_angle=120.0, friction_angle=-5.0, cohesion=-1.0).clamped()
        assert p.slope_angle == 90.0
        assert p.friction_angle == 0.0
        assert p.cohesion == 0.0
