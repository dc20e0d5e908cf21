"""
Test Suite: Airfoil
===================
Lift/drag approximations, airfoil shapes and streamline deflection.
"""
import math
import random

import numpy as np
import pytest

from flightphysics.model.airfoil import (
    AirfoilModel,
    AirfoilOptions,
    drag_coefficient,
    is_stalled,
    lift_coefficient,
    lift_curve,
    lift_to_drag,
    shape_points,
    streamline_deflection,
)

EPS = 1e-9


class TestLiftCoefficient:

    def test_cambered_at_zero_angle(self):
        assert lift_coefficient(0.0, "cambered") == pytest.approx(0.2)

    def test_symmetric_at_zero_angle(self):
        assert lift_coefficient(0.0, "symmetric") == pytest.approx(0.0)

    def test_linear_range(self):
        assert lift_coefficient(10.0, "cambered") == pytest.approx(1.2)
        assert lift_coefficient(-5.0, "symmetric") == pytest.approx(-0.5)

    @pytest.mark.parametrize("airfoil_type", ["cambered", "symmetric", "flat"])
    def test_plateau_constants(self, airfoil_type):
        assert lift_coefficient(-10.0 - EPS, airfoil_type) == -0.5
        assert lift_coefficient(-45.0, airfoil_type) == -0.5
        assert lift_coefficient(20.0 + EPS, airfoil_type) == 0.5
        assert lift_coefficient(60.0, airfoil_type) == 0.5

    @pytest.mark.parametrize("airfoil_type", ["cambered", "symmetric"])
    def test_continuous_at_stall(self, airfoil_type):
        below = lift_coefficient(15.0, airfoil_type)
        above = lift_coefficient(15.0 + 1e-6, airfoil_type)
        assert above == pytest.approx(below, abs=1e-5)

    def test_post_stall_drop(self):
        peak = lift_coefficient(15.0, "cambered")
        assert lift_coefficient(20.0, "cambered") == pytest.approx(peak - 0.8)

    def test_lift_curve_samples(self):
        alphas, cls = lift_curve("symmetric", -15.0, 25.0, 81)
        assert alphas[0] == -15.0 and alphas[-1] == 25.0
        assert len(cls) == 81
        assert cls[np.argmin(np.abs(alphas - 5.0))] == pytest.approx(0.5)


class TestDragCoefficient:

    def test_induced_drag(self):
        cl = 0.7
        assert drag_coefficient(5.0) == pytest.approx(0.02 + cl ** 2 / (math.pi * 6))

    def test_stall_penalty(self):
        cl = lift_coefficient(16.0)
        assert drag_coefficient(16.0) == pytest.approx(0.02 + cl ** 2 / (math.pi * 6) + 0.3)

    def test_lift_to_drag_is_finite(self):
        for alpha in np.linspace(-30, 40, 71):
            assert math.isfinite(lift_to_drag(float(alpha), "symmetric"))

    def test_stall_flag(self):
        assert is_stalled(15.5)
        assert is_stalled(-16)
        assert not is_stalled(15.0)


class TestShape:

    def test_sample_count_and_chord(self):
        x, upper, lower = shape_points("cambered")
        assert len(x) == len(upper) == len(lower) == 51
        assert x[0] == pytest.approx(-100.0)
        assert x[-1] == pytest.approx(100.0)

    def test_symmetric_is_mirrored(self):
        _, upper, lower = shape_points("symmetric")
        np.testing.assert_allclose(upper, -lower)

    def test_flat_bottom(self):
        _, _, lower = shape_points("flat")
        np.testing.assert_allclose(lower, 2.0)

    def test_unknown_type_collapses(self):
        _, upper, lower = shape_points("biconvex")
        assert not upper.any() and not lower.any()


class TestStreamlines:

    def test_outside_influence_is_zero(self):
        assert streamline_deflection(0.0, 150.0, 5.0) == 0.0
        assert streamline_deflection(200.0, 10.0, 5.0) == 0.0

    def test_sign_follows_offset(self):
        assert streamline_deflection(0.0, 20.0, 0.0) > 0
        assert streamline_deflection(0.0, -20.0, 0.0) < 0
        assert streamline_deflection(0.0, 0.0, 0.0) < 0

    def test_positive_angle_asymmetry(self):
        above = streamline_deflection(0.0, -20.0, 10.0)
        below = streamline_deflection(0.0, 20.0, 10.0)
        assert abs(above) / abs(below) == pytest.approx(1.3 / 0.8)

    def test_model_streamlines(self):
        model = AirfoilModel(800, 450, AirfoilOptions(), rng=random.Random(1))
        assert len(model.streamlines) == 8
        assert [s.y for s in model.streamlines] == pytest.approx([50 * i for i in range(1, 9)])
        assert all(0 <= s.offset < 100 for s in model.streamlines)
        xs, ys = model.streamline_path(model.streamlines[0])
        assert len(xs) == len(ys) == 400


class TestModel:

    def test_defaults(self):
        model = AirfoilModel(800, 450)
        assert model.angle_of_attack == 5.0
        assert model.airfoil_type == "cambered"
        assert model.lift_coefficient == pytest.approx(0.7)
        assert not model.is_stalled

    def test_unknown_type_is_accepted(self):
        model = AirfoilModel(800, 450)
        model.set_airfoil_type("delta")
        assert model.lift_coefficient == pytest.approx(0.5)
        _, upper, _ = model.shape_points()
        assert not upper.any()
