"""
Test Suite: Visualizations & Widgets
====================================
Lifecycle of the visualizations on real (offscreen) canvases, painting smoke
tests and the main window wiring.
"""
import pytest

from flightphysics.app.registry import create_visualization, list_keys
from flightphysics.app.ticker import Ticker
from flightphysics.view.canvas import Canvas
from flightphysics.view.visualizations.airfoil import AirfoilVisualization
from flightphysics.view.visualizations.controls import ControlsVisualization
from flightphysics.view.visualizations.forces import ForcesVisualization
from flightphysics.view.visualizations.phases import FlightPhasesVisualization


@pytest.fixture
def ticker(clock):
    return Ticker(clock)


@pytest.fixture
def canvas(qapp):
    widget = Canvas("test-canvas")
    widget.resize(800, 500)
    yield widget
    widget.deleteLater()


class TestLifecycle:

    def test_inert_without_canvas(self, ticker):
        visualization = ForcesVisualization(None, ticker)
        assert visualization.is_inert
        visualization.start()
        visualization.set_forces(80, 20, 50, 50)
        visualization.reset()
        visualization.draw()
        visualization.destroy()
        assert not visualization.is_running
        assert len(ticker) == 0

    def test_start_stop_idempotent(self, canvas, ticker):
        visualization = ForcesVisualization(canvas, ticker)
        visualization.start()
        visualization.start()
        assert len(ticker) == 1
        visualization.stop()
        visualization.stop()
        assert len(ticker) == 0
        assert not visualization.is_running

    def test_destroy(self, canvas, ticker):
        visualization = ForcesVisualization(canvas, ticker)
        visualization.start()
        visualization.destroy()
        visualization.destroy()
        assert visualization.is_inert
        assert len(ticker) == 0
        assert canvas.visualization is None
        visualization.start()
        assert len(ticker) == 0

    def test_update_runs_before_draw(self, canvas, ticker, clock):
        visualization = ForcesVisualization(canvas, ticker)
        calls = []
        visualization.update = lambda dt: calls.append(("update", dt))
        visualization.draw = lambda: calls.append(("draw",))
        visualization.start()
        clock.advance(0.016)
        ticker.tick()
        assert calls == [("update", pytest.approx(0.016)), ("draw",)]

    def test_frames_advance_model(self, canvas, ticker, clock):
        visualization = ForcesVisualization(canvas, ticker)
        visualization.set_forces(90, 10, 50, 50)
        visualization.start()
        y0 = visualization.model.body.y
        for _ in range(10):
            clock.advance(0.016)
            ticker.tick()
        assert visualization.model.body.y < y0

    def test_controls_never_animates(self, canvas, ticker):
        visualization = ControlsVisualization(canvas, ticker)
        visualization.start()
        assert not visualization.is_running
        assert len(ticker) == 0
        visualization.set_controls(10, 0, 0)
        assert visualization.model.roll == pytest.approx(-8.0)

    def test_resize_forwards_to_model(self, canvas, ticker):
        visualization = ForcesVisualization(canvas, ticker)
        visualization.resize(1000, 600)
        assert visualization.model.width == 1000
        visualization.resize(0, 600)
        assert visualization.model.width == 1000


class TestPhasesVisualization:

    def test_toggle_starts_loop(self, canvas, ticker):
        visualization = FlightPhasesVisualization(canvas, ticker)
        assert visualization.current_phase == "cruise"
        assert visualization.toggle_auto_play() is True
        assert visualization.is_running
        assert visualization.current_phase == "takeoff"

    def test_stop_keeps_auto_play(self, canvas, ticker):
        visualization = FlightPhasesVisualization(canvas, ticker)
        visualization.toggle_auto_play()
        visualization.stop()
        assert visualization.auto_play
        assert not visualization.is_running

    def test_unknown_phase_raises(self, canvas, ticker):
        visualization = FlightPhasesVisualization(canvas, ticker)
        with pytest.raises(ValueError):
            visualization.set_phase("hover")


class TestPainting:

    @pytest.mark.parametrize("key", sorted(list_keys()))
    def test_grab_renders(self, canvas, ticker, clock, key):
        visualization = create_visualization(key, canvas, ticker)
        visualization.start()
        for _ in range(5):
            clock.advance(0.016)
            ticker.tick()
        image = canvas.grab().toImage()
        assert not image.isNull()
        assert image.width() == canvas.width()
        visualization.destroy()

    def test_stalled_airfoil_renders(self, canvas, ticker):
        visualization = AirfoilVisualization(canvas, ticker)
        visualization.set_angle_of_attack(22)
        visualization.set_airfoil_type("unknown")
        assert not canvas.grab().isNull()
        visualization.destroy()

    def test_empty_canvas_renders(self, canvas):
        assert not canvas.grab().isNull()


class TestMainWindow:

    def test_builds_every_section(self, qapp, ticker):
        from flightphysics.app.context import AppContext
        from flightphysics.view.main_window import MainWindow

        context = AppContext(ticker=ticker)
        window = MainWindow(context)
        window.show()
        assert window.tabs.count() == 6
        assert set(context.visualizations) == set(window.canvases)
        assert all(panel.isEnabled() for panel in window.panels)

        window.tabs.setCurrentIndex(2)
        assert window.current_key() == "forces-canvas"
        assert window.canvas_stack.currentIndex() == 2

        window.close()
        assert context.visualizations == {}

    def test_panel_drives_visualization(self, qapp, ticker):
        from flightphysics.app.context import AppContext
        from flightphysics.view.main_window import MainWindow

        context = AppContext(ticker=ticker)
        window = MainWindow(context)
        window.show()
        controls = next(p for p in window.panels if p.KEY == "controls-canvas")
        controls.sliders["aileron"].setValue(10)
        assert context.get("controls-canvas").model.roll == pytest.approx(-8.0)
        controls.button_reset.click()
        assert context.get("controls-canvas").model.aileron == 0.0
        window.close()


class TestIdleRepaint:
    """Setters repaint synchronously while idle and leave painting to the frame loop while running."""

    @staticmethod
    def count_renders(visualization):
        renders = []
        visualization.render = lambda painter, width, height: renders.append((width, height))
        return renders

    def test_bernoulli_velocity(self, canvas, ticker):
        from flightphysics.view.visualizations.bernoulli import BernoulliVisualization

        canvas.show()
        visualization = BernoulliVisualization(canvas, ticker)
        renders = self.count_renders(visualization)

        visualization.set_velocity(80)
        assert len(renders) == 1

        visualization.start()
        visualization.set_velocity(20)
        assert len(renders) == 1
        assert visualization.model.base_velocity == 20.0
        visualization.destroy()

    def test_airfoil_angle(self, canvas, ticker):
        canvas.show()
        visualization = AirfoilVisualization(canvas, ticker)
        renders = self.count_renders(visualization)

        visualization.set_angle_of_attack(10)
        visualization.set_airfoil_type("symmetric")
        assert len(renders) == 2

        visualization.start()
        visualization.set_angle_of_attack(12)
        assert len(renders) == 2
        visualization.destroy()


class TestPhasesPanel:

    @pytest.fixture
    def panel(self, canvas, ticker):
        from flightphysics.view.panels.phases import PhasesPanel

        visualization = FlightPhasesVisualization(canvas, ticker)
        panel = PhasesPanel()
        panel.bind(visualization)
        yield panel
        visualization.destroy()
        panel.deleteLater()

    @staticmethod
    def run_frames(ticker, clock, seconds, dt=0.125):
        for _ in range(round(seconds / dt)):
            clock.advance(dt)
            ticker.tick()

    def test_play_starts_label_timer(self, panel):
        panel.button_play.click()
        assert panel.visualization.is_running
        assert panel.button_play.isChecked()
        assert panel._label_timer.isActive()
        assert panel._label_timer.interval() == 100
        assert "Takeoff" in panel.label_phase.text()

    def test_label_follows_auto_play(self, panel, ticker, clock):
        panel.button_play.click()
        self.run_frames(ticker, clock, 3.125)
        assert panel.visualization.current_phase == "climb"
        assert "Takeoff" in panel.label_phase.text()

        panel._label_timer.timeout.emit()
        assert "Climb" in panel.label_phase.text()

    def test_pause_then_play_resumes(self, panel, ticker, clock):
        panel.button_play.click()
        self.run_frames(ticker, clock, 3.125)

        panel.button_pause.click()
        assert not panel.visualization.is_running
        assert panel.visualization.auto_play
        assert not panel._label_timer.isActive()
        assert not panel.button_play.isChecked()

        panel.button_play.click()
        assert panel.visualization.is_running
        assert panel.visualization.auto_play
        assert panel.visualization.current_phase == "climb"
        assert panel._label_timer.isActive()

    def test_play_twice_stops_auto_play(self, panel):
        panel.button_play.click()
        panel.button_play.click()
        assert not panel.visualization.auto_play
        assert not panel._label_timer.isActive()
