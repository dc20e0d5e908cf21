"""
Test Suite: Flight Phases
=========================
Phase targets, auto-play sequencing and the pose smoothing.
"""
import pytest

from flightphysics.model.phases import (
    FORCE_BALANCE,
    PHASES,
    FlightPhasesModel,
    PhasesOptions,
    phase_target,
)

WIDTH, HEIGHT = 800.0, 500.0
DT = 0.016


@pytest.fixture
def model():
    return FlightPhasesModel(WIDTH, HEIGHT)


def run(model, seconds, dt=0.125):
    for _ in range(round(seconds / dt)):
        model.update(dt)


class TestTargets:

    def test_cruise_target(self):
        assert phase_target("cruise", WIDTH, HEIGHT) == (400.0, 150.0, 0.0, 80.0)

    def test_ground_phases(self):
        ground = HEIGHT - 80
        assert phase_target("takeoff", WIDTH, HEIGHT).y == ground - 20
        assert phase_target("landing", WIDTH, HEIGHT).y == ground - 20

    def test_unknown_phase(self):
        with pytest.raises(ValueError):
            phase_target("taxi", WIDTH, HEIGHT)


class TestStateMachine:

    def test_initial_state(self, model):
        assert model.phase == "cruise"
        assert model.phase_index == 2
        assert (model.pose.x, model.pose.y) == (400.0, 150.0)
        assert not model.auto_play

    def test_set_phase_resets_progress(self, model):
        model.toggle_auto_play()
        run(model, 1.0)
        model.set_phase("descent")
        assert model.phase_index == PHASES.index("descent")
        assert model.elapsed == 0.0
        assert model.progress == 0.0

    def test_set_unknown_phase(self, model):
        with pytest.raises(ValueError):
            model.set_phase("hover")
        assert model.phase == "cruise"

    def test_toggle_returns_flag(self, model):
        assert model.toggle_auto_play() is True
        assert model.toggle_auto_play() is False

    def test_cyclic_order(self, model):
        """Auto-play from cruise: landing after 4 intervals, takeoff after 5"""
        model.toggle_auto_play()
        seen = [model.phase]
        for _ in range(5):
            run(model, 3.0)
            seen.append(model.phase)
        assert seen == ["takeoff", "climb", "cruise", "descent", "landing", "takeoff"]

    def test_no_advance_without_auto_play(self, model):
        run(model, 10.0)
        assert model.phase == "cruise"
        assert model.elapsed == 0.0

    def test_progress(self, model):
        model.toggle_auto_play()
        run(model, 1.5)
        assert model.progress == pytest.approx(0.5, abs=0.02)

    def test_custom_duration(self):
        model = FlightPhasesModel(WIDTH, HEIGHT, PhasesOptions(initial_phase="climb", phase_duration=1.0))
        model.toggle_auto_play()  # restarts at takeoff
        run(model, 1.0)
        assert model.phase == "climb"


class TestPose:

    def test_pose_eases_toward_target(self, model):
        model.set_phase("descent")
        x0 = model.pose.x
        model.update(DT)
        assert model.pose.x == pytest.approx(x0 + (520.0 - x0) * 0.05)
        for _ in range(500):
            model.update(DT)
        assert model.pose.rotation == pytest.approx(5.0)
        assert model.pose.speed == pytest.approx(65.0)

    def test_altitude(self, model):
        ground = model.ground_level
        assert model.altitude == round((1 - 150.0 / ground) * 10000)
        model.pose.y = ground + 10
        assert model.altitude == 0

    def test_runway(self, model):
        assert not model.shows_runway
        model.set_phase("landing")
        assert model.shows_runway
        assert model.runway == (50.0, WIDTH - 50.0)

    def test_force_balance(self, model):
        assert model.force_balance.status == "Level Flight (Balanced)"
        model.set_phase("takeoff")
        assert model.force_balance == FORCE_BALANCE["takeoff"]
        assert model.force_balance.thrust > model.force_balance.drag

    @pytest.mark.parametrize("phase", PHASES)
    def test_every_phase_has_force_balance(self, model, phase):
        model.set_phase(phase)
        assert model.force_balance is FORCE_BALANCE[phase]
