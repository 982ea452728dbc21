"""Tests for the seal heat transfer module."""

import math

import pytest

from dgs_thermal.core.heat_transfer import (
    DEFAULT_INPUTS,
    InvalidInputError,
    SealInputs,
    SealResults,
    angular_velocity,
    axial_reynolds,
    compute,
    input_field_names,
    result_field_names,
    rotating_ring_htc,
    rotating_ring_nusselt,
    rotational_reynolds,
    static_ring_htc,
    static_ring_nusselt,
)


class TestCorrelations:
    """Test the individual correlation functions."""

    def test_angular_velocity(self):
        assert angular_velocity(60.0) == pytest.approx(2.0 * math.pi)

    def test_rotational_reynolds(self):
        # rho·omega·d·dh / (2·mu) with round numbers
        assert rotational_reynolds(1.0, 100.0, 0.1, 0.01, 1e-5) == pytest.approx(5000.0)

    def test_axial_reynolds(self):
        assert axial_reynolds(1.0, 10.0, 1e-5, 1e-5) == pytest.approx(20.0)

    def test_static_nusselt_zero_reynolds(self):
        assert static_ring_nusselt(0.0, 0.71, 2.0) == 0.0

    def test_static_htc_uses_twice_gap(self):
        assert static_ring_htc(1.0, 0.02, 1e-5) == pytest.approx(1000.0)

    def test_rotating_nusselt_cube_root(self):
        # (0.5·Re_rot² + Re_ax²)·Pr = 1000 → Nu_r = 0.135·10
        Nu = rotating_ring_nusselt(math.sqrt(2000.0), 0.0, 1.0)
        assert Nu == pytest.approx(1.35)

    def test_rotating_htc(self):
        assert rotating_ring_htc(2.0, 0.03, 1e-3) == pytest.approx(60.0)


class TestReferenceCase:
    """Golden values for the air reference case."""

    def test_golden_values(self):
        r = compute(DEFAULT_INPUTS)
        assert r.Re_rot == pytest.approx(54.7500625782724, rel=1e-9)
        assert r.Re_ax == pytest.approx(3.38397790055249, rel=1e-9)
        assert r.Nu_s == pytest.approx(0.10636608773753, rel=1e-9)
        assert r.H_s == pytest.approx(276.551828117577, rel=1e-9)
        assert r.Nu_r == pytest.approx(1.38176701943754, rel=1e-9)
        assert r.H_r == pytest.approx(3592.59425053762, rel=1e-9)

    def test_all_outputs_positive_and_finite(self):
        r = compute(DEFAULT_INPUTS)
        for name in result_field_names():
            value = getattr(r, name)
            assert math.isfinite(value)
            assert value > 0

    def test_deterministic(self):
        assert compute(DEFAULT_INPUTS) == compute(DEFAULT_INPUTS)

    def test_results_are_immutable(self):
        r = compute(DEFAULT_INPUTS)
        with pytest.raises(AttributeError):
            r.H_s = 0.0


class TestPhysicalBehaviour:
    """Monotonicity, scaling and boundary behaviour."""

    def test_speed_increases_rotational_reynolds(self):
        speeds = [0.0, 1000.0, 5000.0, 10300.0, 20000.0]
        re = [compute(DEFAULT_INPUTS.replace(n_rpm=n)).Re_rot for n in speeds]
        assert all(b > a for a, b in zip(re, re[1:]))

    def test_axial_velocity_increases_axial_reynolds(self):
        velocities = [0.0, 1.0, 5.0, 20.0]
        re = [compute(DEFAULT_INPUTS.replace(u_axial=u)).Re_ax for u in velocities]
        assert all(b > a for a, b in zip(re, re[1:]))

    def test_zero_speed(self):
        r = compute(DEFAULT_INPUTS.replace(n_rpm=0.0))
        assert r.Re_rot == 0.0
        assert r.Nu_r == pytest.approx(0.27145940749985, rel=1e-9)
        assert r.H_r == pytest.approx(705.79445949961, rel=1e-9)

    def test_zero_axial_velocity(self):
        r = compute(DEFAULT_INPUTS.replace(u_axial=0.0))
        assert r.Re_ax == 0.0
        assert r.Nu_s == 0.0
        assert r.H_s == 0.0
        assert r.H_r > 0

    def test_both_zero(self):
        r = compute(DEFAULT_INPUTS.replace(n_rpm=0.0, u_axial=0.0))
        assert r == SealResults(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def test_doubling_b_doubles_static_ring(self):
        r1 = compute(DEFAULT_INPUTS)
        r2 = compute(DEFAULT_INPUTS.replace(B=2.0 * DEFAULT_INPUTS.B))
        assert r2.Nu_s == pytest.approx(2.0 * r1.Nu_s, rel=1e-12)
        assert r2.H_s == pytest.approx(2.0 * r1.H_s, rel=1e-12)
        assert r2.H_r == r1.H_r

    def test_finite_over_wide_range(self):
        for n in (0.0, 1.0, 1e5):
            for u in (0.0, 0.1, 100.0):
                for gap in (1e-7, 5e-6, 1e-3):
                    r = compute(DEFAULT_INPUTS.replace(n_rpm=n, u_axial=u, delta_gap=gap))
                    assert all(math.isfinite(getattr(r, k)) for k in result_field_names())


class TestInputValidation:
    """Domain violations raise InvalidInputError before any arithmetic."""

    @pytest.mark.parametrize("value", [0.0, -1.81e-5])
    def test_non_positive_viscosity(self, value):
        with pytest.raises(InvalidInputError) as exc:
            compute(DEFAULT_INPUTS.replace(mu=value))
        assert exc.value.field == "mu"
        assert exc.value.value == value

    def test_zero_gap(self):
        with pytest.raises(InvalidInputError) as exc:
            compute(DEFAULT_INPUTS.replace(delta_gap=0.0))
        assert exc.value.field == "delta_gap"

    @pytest.mark.parametrize(
        "field", ["d_outer", "rho", "lambda_gas", "Pr", "d_hyd", "B"]
    )
    def test_other_positive_fields(self, field):
        with pytest.raises(InvalidInputError) as exc:
            compute(DEFAULT_INPUTS.replace(**{field: 0.0}))
        assert exc.value.field == field

    @pytest.mark.parametrize("field", ["n_rpm", "u_axial"])
    def test_negative_speeds(self, field):
        with pytest.raises(InvalidInputError) as exc:
            compute(DEFAULT_INPUTS.replace(**{field: -1.0}))
        assert exc.value.field == field

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite(self, value):
        with pytest.raises(InvalidInputError):
            compute(DEFAULT_INPUTS.replace(rho=value))

    @pytest.mark.parametrize("field,value", [("rho", 1e200), ("mu", 1e-300)])
    def test_overflowing_outputs(self, field, value):
        with pytest.raises(InvalidInputError) as exc:
            compute(DEFAULT_INPUTS.replace(**{field: value}))
        assert exc.value.field == field
        assert "not finite" in str(exc.value)

    def test_large_but_representable(self):
        r = compute(DEFAULT_INPUTS.replace(rho=1e100))
        assert all(math.isfinite(getattr(r, k)) for k in result_field_names())

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            compute(DEFAULT_INPUTS.replace(d_hyd=-1.0))


class TestSealInputs:
    def test_replace_returns_new_instance(self):
        changed = DEFAULT_INPUTS.replace(n_rpm=5000.0)
        assert changed.n_rpm == 5000.0
        assert DEFAULT_INPUTS.n_rpm == 10300.0

    def test_replace_unknown_field(self):
        with pytest.raises(InvalidInputError):
            DEFAULT_INPUTS.replace(omega=1.0)

    def test_from_dict_fills_defaults(self):
        inputs = SealInputs.from_dict({"rho": 10.0})
        assert inputs.rho == 10.0
        assert inputs.mu == DEFAULT_INPUTS.mu

    def test_dict_round_trip(self):
        assert SealInputs(**DEFAULT_INPUTS.to_dict()) == DEFAULT_INPUTS

    def test_field_order(self):
        assert input_field_names()[0] == "d_outer"
        assert input_field_names()[-1] == "B"
        assert result_field_names() == ("Re_rot", "Re_ax", "Nu_s", "H_s", "Nu_r", "H_r")
