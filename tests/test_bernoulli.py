"""
Test Suite: Bernoulli Flow
==========================
Venturi tube geometry, continuity, pressure along the duct and particle motion.
"""
import random

import numpy as np
import pytest

from flightphysics.model.bernoulli import (
    AIR_DENSITY,
    ATMOSPHERIC_PRESSURE,
    BernoulliModel,
    DuctGeometry,
    dynamic_pressure,
)

WIDTH, HEIGHT = 800.0, 400.0


@pytest.fixture
def model():
    return BernoulliModel(WIDTH, HEIGHT, base_velocity=50.0, particle_count=150, rng=random.Random(7))


class TestDuctGeometry:
    """Normalized envelope of the tube"""

    def test_entrance_and_exit_are_full_tube(self):
        geometry = DuctGeometry()
        assert geometry.envelope(0.0) == pytest.approx((0.3, 0.7))
        assert geometry.envelope(1.0) == pytest.approx((0.3, 0.7))

    def test_throat_is_constant(self):
        geometry = DuctGeometry()
        for u in (0.35, 0.5, 0.65):
            assert geometry.envelope(u) == pytest.approx((0.4, 0.6))

    def test_contraction_ratio(self):
        assert DuctGeometry().contraction_ratio == pytest.approx(2.0)

    def test_profile_matches_pointwise_envelope(self):
        geometry = DuctGeometry()
        u = np.linspace(0.0, 1.0, 41)
        top, bottom = geometry.envelope_profile(u)
        expected = np.array([geometry.envelope(float(x)) for x in u])
        np.testing.assert_allclose(top, expected[:, 0])
        np.testing.assert_allclose(bottom, expected[:, 1])

    def test_invalid_throat_rejected(self):
        with pytest.raises(ValueError):
            DuctGeometry(throat_top=0.6, throat_bottom=0.4)

    @pytest.mark.parametrize("throat", [(0.3, 0.7), (0.2, 0.8)])
    def test_throat_must_contract(self, throat):
        """A throat as wide as the tube would leave the pressure bars without a scale."""
        with pytest.raises(ValueError):
            DuctGeometry(throat_top=throat[0], throat_bottom=throat[1])


class TestContinuity:
    """A1·v1 = A2·v2 with the channel height as area"""

    @pytest.mark.parametrize("velocity", [5.0, 50.0, 100.0])
    def test_height_times_speed_is_constant(self, model, velocity):
        model.set_velocity(velocity)
        expected = model.entrance_height * velocity
        for x in np.linspace(0.0, WIDTH, 33):
            assert model.height_at(x) * model.velocity_at(x) == pytest.approx(expected)

    def test_throat_speed_doubles(self, model):
        assert model.velocity_at(WIDTH * 0.5) == pytest.approx(100.0)


class TestPressure:
    """Static pressure from Bernoulli's equation"""

    @pytest.mark.parametrize("velocity", [1.0, 20.0, 50.0, 100.0])
    def test_throat_lower_than_entrance(self, model, velocity):
        model.set_velocity(velocity)
        assert model.pressure_at(WIDTH * 0.5) < model.pressure_at(WIDTH * 0.15)

    @pytest.mark.parametrize("velocity", [1.0, 20.0, 50.0, 100.0])
    def test_entrance_equals_exit(self, model, velocity):
        model.set_velocity(velocity)
        assert model.pressure_at(WIDTH * 0.15) == pytest.approx(model.pressure_at(WIDTH * 0.85))

    def test_total_pressure_is_conserved(self, model):
        throat = WIDTH * 0.5
        reference = model.pressure_at(throat) + 0.5 * AIR_DENSITY * model.velocity_at(throat) ** 2
        for x in np.linspace(0.0, WIDTH, 25):
            assert model.total_pressure_at(x) == pytest.approx(reference)

    def test_scenario_at_50_meters_per_second(self, model):
        entrance = model.total_pressure_at(0.0)
        assert entrance == pytest.approx(ATMOSPHERIC_PRESSURE + 0.5 * 1.225 * 50.0 ** 2)
        assert model.pressure_at(0.0) == pytest.approx(ATMOSPHERIC_PRESSURE)
        assert model.pressure_at(WIDTH * 0.5) < model.pressure_at(0.0)

    def test_profile_agrees_with_point_queries(self, model):
        u, velocity, pressure = model.profile(11)
        for ui, vi, pi in zip(u, velocity, pressure):
            assert vi == pytest.approx(model.velocity_at(ui * WIDTH))
            assert pi == pytest.approx(model.pressure_at(ui * WIDTH))

    def test_sample(self, model):
        sample = model.sample(WIDTH * 0.5)
        assert sample.height == pytest.approx(HEIGHT * 0.2)
        assert sample.velocity == pytest.approx(100.0)
        assert sample.pressure == pytest.approx(model.pressure_at(WIDTH * 0.5))

    def test_dynamic_pressure(self):
        assert dynamic_pressure(10.0) == pytest.approx(61.25)


class TestPressureBars:
    """Indicators at entrance, throat and exit"""

    def test_labels_and_positions(self, model):
        bars = model.pressure_bars()
        assert [b.label for b in bars] == ["Entrance", "Throat", "Exit"]
        assert [b.x for b in bars] == pytest.approx([WIDTH * 0.15, WIDTH * 0.5, WIDTH * 0.85])

    def test_entrance_bar_is_full(self, model):
        entrance, throat, exit_ = model.pressure_bars()
        assert entrance.fraction == pytest.approx(1.0)
        assert entrance.level == "NORMAL"
        assert exit_.fraction == pytest.approx(1.0)
        assert throat.fraction < 1.0

    def test_throat_is_low_at_reference_speed(self, model):
        model.set_velocity(100.0)
        throat = model.pressure_bars()[1]
        assert throat.fraction < 0.4
        assert throat.level == "LOW"

    def test_fractions_stay_in_range(self, model):
        for velocity in (0.0, 30.0, 100.0, 250.0):
            model.set_velocity(velocity)
            for bar in model.pressure_bars():
                assert 0.0 <= bar.fraction <= 1.0

    def test_velocity_arrows_scale_with_speed_ratio(self, model):
        arrows = model.velocity_arrows()
        assert arrows[1][1] == pytest.approx(80.0)
        assert arrows[1][2] == pytest.approx(100.0)


class TestParticles:
    """Particle advection and wrap-around"""

    def test_fixed_count(self, model):
        assert len(model.particles) == 150
        for _ in range(200):
            model.update(0.016)
        assert len(model.particles) == 150

    def test_particles_stay_inside_channel(self, model):
        for _ in range(100):
            model.update(0.016)
        for particle in model.particles:
            top, bottom = model.envelope_at(particle.x)
            assert top <= particle.y <= bottom
            assert 0.0 <= particle.x <= WIDTH
            assert 0.5 <= particle.opacity < 1.0

    def test_wrap_to_entrance(self, model):
        particle = model.particles[0]
        particle.x = WIDTH - 0.1
        model.update(0.1)
        assert particle.x == 0.0

    def test_zero_velocity_still_moves(self, model):
        model.set_velocity(0.0)
        x0 = [p.x for p in model.particles]
        model.update(0.016)
        assert any(p.x != x for p, x in zip(model.particles, x0))

    def test_clear(self, model):
        model.clear()
        assert model.particles == []
