"""Tests for infiltration, evapotranspiration and pore pressure."""

import numpy as np
import pytest

from pylandslide.hydrology import (
    WATER_UNIT_WEIGHT,
    HydrologicalState,
    Hyetograph,
    InfiltrationParams,
    apply_evapotranspiration,
    compute_evapotranspiration,
    infiltration_capacity,
    pore_pressure,
    update_infiltration,
)


def _rain(**changes):
    """50 mm/hr on 3 m of bare soil with K = 5 µm/s (18 mm/hr)."""
    base = dict(
        rainfall_intensity=50.0,
        hydraulic_conductivity=5.0,
        vegetation=0.0,
        soil_depth=3.0,
        porosity=0.35,
        unit_weight=18.0,
    )
    base.update(changes)
    return InfiltrationParams(**base)


class TestPorePressure:
    def test_values(self):
        pw, ru = pore_pressure(1.0, 3.0, 18.0)
        assert pw == pytest.approx(WATER_UNIT_WEIGHT)
        assert ru == pytest.approx(9.81 / 54.0)

    def test_zero_soil_depth(self):
        _, ru = pore_pressure(3.0, 0.0)
        assert ru == 0.0

    def test_ru_clamped(self):
        _, ru = pore_pressure(10.0, 1.0, 5.0)
        assert ru == 1.0


class TestHydrologicalState:
    def test_initial_from_moisture(self):
        s = HydrologicalState.initial(0.5, 3.0, 18.0)
        assert s.saturation_depth == pytest.approx(1.5)
        assert s.pore_pressure == pytest.approx(9.81 * 1.5)
        assert s.infiltration_rate == 0.0

    def test_initial_moisture_clamped(self):
        assert HydrologicalState.initial(2.0, 3.0).saturation_depth == 3.0
        assert HydrologicalState.initial(-1.0, 3.0).saturation_depth == 0.0

    def test_non_finite_inputs_sanitized(self):
        s = HydrologicalState.initial(float("nan"), 3.0)
        assert s.saturation_depth == 0.0
        s = HydrologicalState.from_depth(float("nan"), 3.0, infiltration_rate=float("nan"))
        assert s.saturation_depth == 0.0
        assert s.infiltration_rate == 0.0
        s = HydrologicalState.from_depth(float("inf"), 3.0)
        assert s.saturation_depth == 3.0
        assert s.pore_pressure_ratio == pytest.approx(9.81 * 3.0 / 54.0)
        s = HydrologicalState.from_depth(1.0, float("nan"))
        assert s.saturation_depth == 0.0
        assert s.saturation_ratio(float("nan")) == 0.0

    def test_saturation_ratio(self):
        s = HydrologicalState.from_depth(0.75, 3.0)
        assert s.saturation_ratio(3.0) == pytest.approx(0.25)
        assert s.saturation_ratio(0.0) == 0.0


class TestInfiltration:
    def test_capacity_limited(self):
        s = update_infiltration(HydrologicalState(), _rain(), dt=3600.0)
        assert s.infiltration_rate == pytest.approx(18.0)
        assert s.saturation_depth == pytest.approx(0.018 / 0.35)

    def test_rain_limited(self):
        s = update_infiltration(HydrologicalState(), _rain(rainfall_intensity=10.0), dt=60.0)
        assert s.infiltration_rate == pytest.approx(10.0)

    def test_vegetation_interception_and_roots(self):
        s = update_infiltration(HydrologicalState(), _rain(vegetation=1.0), dt=1.0)
        # rain 50 * 0.7 = 35, capacity 18 * 1.5 = 27
        assert s.infiltration_rate == pytest.approx(27.0)

    def test_capacity_drops_with_saturation(self):
        dry = infiltration_capacity(5.0, 1.0, 0.0)
        wet = infiltration_capacity(5.0, 1.0, 1.0)
        assert dry == pytest.approx(27.0)
        assert wet == pytest.approx(18.0)

    def test_pore_pressure_derived(self):
        s = update_infiltration(HydrologicalState(), _rain(), dt=36000.0)
        assert s.pore_pressure == pytest.approx(9.81 * s.saturation_depth)
        assert s.pore_pressure_ratio == pytest.approx(s.pore_pressure / 54.0)

    def test_saturation_capped_at_soil_depth(self):
        s = update_infiltration(HydrologicalState(), _rain(), dt=1e9)
        assert s.saturation_depth == 3.0
        assert s.pore_pressure_ratio <= 1.0

    def test_zero_porosity(self):
        s = update_infiltration(HydrologicalState(), _rain(porosity=0.0), dt=3600.0)
        assert s.saturation_depth == 0.0
        assert np.isfinite(s.pore_pressure)

    def test_zero_soil_depth(self):
        s = update_infiltration(HydrologicalState(), _rain(soil_depth=0.0), dt=3600.0)
        assert s.saturation_depth == 0.0
        assert s.pore_pressure_ratio == 0.0

    @pytest.mark.parametrize("dt", [float("nan"), float("inf"), -10.0])
    def test_non_finite_dt_adds_nothing(self, dt):
        start = HydrologicalState.initial(0.5, 3.0)
        s = update_infiltration(start, _rain(vegetation=0.5), dt=dt)
        assert s.saturation_depth == pytest.approx(1.5)
        assert np.isfinite(s.pore_pressure)
        assert np.isfinite(s.pore_pressure_ratio)

    def test_conductivity_factor(self):
        s = update_infiltration(
            HydrologicalState(), _rain(rainfall_intensity=1e6), dt=1.0,
            conductivity_factor=3600.0,
        )
        assert s.infiltration_rate == pytest.approx(5.0 * 3600.0)

    def test_invariants_hold_over_random_ticks(self):
        rng = np.random.default_rng(0)
        state = HydrologicalState()
        for _ in range(500):
            params = _rain(
                rainfall_intensity=rng.uniform(0, 200),
                hydraulic_conductivity=rng.uniform(0, 50),
                vegetation=rng.uniform(-0.5, 1.5),
            )
            state = update_infiltration(state, params, dt=rng.uniform(0, 5000))
            state = apply_evapotranspiration(
                state, rng.uniform(0, 1), 3.0, dt=rng.uniform(0, 5000),
                potential_et=rng.uniform(0, 500),
            )
            assert 0.0 <= state.saturation_depth <= 3.0
            assert 0.0 <= state.pore_pressure_ratio <= 1.0
            assert state.infiltration_rate >= 0.0


class TestEvapotranspiration:
    def test_no_vegetation(self):
        assert compute_evapotranspiration(0.0, 0.5, 5.0) == 0.0

    def test_dry_soil(self):
        assert compute_evapotranspiration(0.8, 0.0, 5.0) == 0.0

    def test_negative_saturation_guard(self):
        assert compute_evapotranspiration(0.8, -0.2, 5.0) == 0.0

    def test_full_cover_saturated(self):
        rate = compute_evapotranspiration(1.0, 1.0, 5.0)
        assert rate == pytest.approx(5.0 / 1000.0 / 86400.0)

    def test_square_root_scaling(self):
        rate = compute_evapotranspiration(0.5, 0.25, 4.0)
        assert rate == pytest.approx(1.0 / 8.64e7)

    def test_dries_soil(self):
        s = HydrologicalState.from_depth(1.5, 3.0)
        dried = apply_evapotranspiration(s, 0.8, 3.0, dt=86400.0)
        assert dried.saturation_depth < s.saturation_depth
        assert dried.pore_pressure < s.pore_pressure

    def test_no_vegetation_no_drying(self):
        s = HydrologicalState.from_depth(1.5, 3.0)
        assert apply_evapotranspiration(s, 0.0, 3.0, dt=86400.0) == s

    @pytest.mark.parametrize("dt", [float("nan"), float("inf")])
    def test_non_finite_dt_removes_nothing(self, dt):
        s = HydrologicalState.from_depth(1.5, 3.0)
        assert apply_evapotranspiration(s, 0.8, 3.0, dt=dt) == s

    def test_never_below_zero(self):
        s = HydrologicalState.from_depth(0.01, 3.0)
        dried = apply_evapotranspiration(s, 1.0, 3.0, dt=1e9, potential_et=1000.0)
        assert dried.saturation_depth == 0.0


class TestHyetograph:
    def test_interpolation(self):
        h = Hyetograph([0, 600, 1800], [0.0, 60.0, 0.0])
        assert h(300) == pytest.approx(30.0)
        assert h(600) == pytest.approx(60.0)
        assert h(5000) == 0.0

    def test_negative_intensity_clipped(self):
        h = Hyetograph([0, 10], [-5.0, -5.0])
        assert h(5) == 0.0

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError):
            Hyetograph([0, 1, 2], [1.0, 2.0])

    def test_decreasing_times(self):
        with pytest.raises(ValueError):
            Hyetograph([0, 10, 5], [1.0, 2.0, 3.0])

    def test_duration(self):
        assert Hyetograph([100, 400], [1.0, 1.0]).duration == 300.0
