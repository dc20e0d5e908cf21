"""
Configuration & Defaults
========================
Central place for the application identity and the tunable constants of the GUI.

Why is this file needed?
------------------------
1. Abstraction: It keeps magic numbers (frame interval, slider ranges, start-up
   values) out of the widgets.
2. Consistency: The panels and the visualizations read their start-up values from
   the same options objects, so a slider never disagrees with its drawing.

Exports:
    FRAME_INTERVAL_MS (int): Period of the animation ticker.
    DEFAULT_OPTIONS (dict): Start-up options keyed by canvas identifier.
    SLIDER_RANGES (dict): (minimum, maximum) of every panel slider.
"""
from flightphysics.model.airfoil import AirfoilOptions
from flightphysics.model.bernoulli import BernoulliOptions
from flightphysics.model.controls import ControlsOptions
from flightphysics.model.forces import ForcesOptions
from flightphysics.model.intro import IntroOptions
from flightphysics.model.phases import PhasesOptions

# Application identity (QSettings location, window title)
ORG_ID = "flightphysics"
APP_ID = "flight-physics-explorer"
ORG_DOMAIN = "flightphysics.local"
VISIBLE_APP_NAME = "Flight Physics Explorer"

# Animation
FRAME_INTERVAL_MS = 16  # ~60 Hz
PHASE_LABEL_INTERVAL_MS = 100

# Canvases
CANVAS_MIN_WIDTH = 640
CANVAS_MIN_HEIGHT = 400
WINDOW_SIZE = (1280, 760)
PANEL_WIDTH = 320

DEFAULT_OPTIONS = {
    "intro-canvas": IntroOptions(),
    "bernoulli-canvas": BernoulliOptions(),
    "forces-canvas": ForcesOptions(),
    "airfoil-canvas": AirfoilOptions(),
    "controls-canvas": ControlsOptions(),
    "phases-canvas": PhasesOptions(),
}

# Visualizations that animate from the moment they are created
AUTOSTART = ("intro-canvas", "bernoulli-canvas", "forces-canvas", "airfoil-canvas", "phases-canvas")

SLIDER_RANGES = {
    "airspeed": (0, 100),
    "force": (0, 100),
    "angle_of_attack": (-15, 25),
    "aileron": (-20, 20),
    "elevator": (-20, 20),
    "rudder": (-20, 20),
}

# Settings keys
SETTINGS_LAST_SECTION = "ui/last_section"
