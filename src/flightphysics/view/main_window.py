"""
Main Window
===========
Tab bar of sections on top, below it a splitter with the section's control
panel on the left and its drawing canvas on the right.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QSettings, Qt, QT_TRANSLATE_NOOP, QCoreApplication
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QSplitter, QStackedWidget, QTabBar, QVBoxLayout, QWidget

from flightphysics.app.context import AppContext
from flightphysics.config import PANEL_WIDTH, SETTINGS_LAST_SECTION, VISIBLE_APP_NAME, WINDOW_SIZE
from flightphysics.view.canvas import Canvas
from flightphysics.view.panels.airfoil import AirfoilPanel
from flightphysics.view.panels.base import BasePanel
from flightphysics.view.panels.bernoulli import BernoulliPanel
from flightphysics.view.panels.controls import ControlsPanel
from flightphysics.view.panels.forces import ForcesPanel
from flightphysics.view.panels.intro import IntroPanel
from flightphysics.view.panels.phases import PhasesPanel

logger = logging.getLogger(__name__)

# Section order (stable). Display text is translated when the tabs are built.
SECTION_PANELS: list[type[BasePanel]] = [
    IntroPanel, BernoulliPanel, ForcesPanel, AirfoilPanel, ControlsPanel, PhasesPanel,
]

SECTION_LABELS = {
    "intro-canvas": QT_TRANSLATE_NOOP("Sections", "Introduction"),
    "bernoulli-canvas": QT_TRANSLATE_NOOP("Sections", "Bernoulli"),
    "forces-canvas": QT_TRANSLATE_NOOP("Sections", "Four Forces"),
    "airfoil-canvas": QT_TRANSLATE_NOOP("Sections", "Airfoil"),
    "controls-canvas": QT_TRANSLATE_NOOP("Sections", "Control Surfaces"),
    "phases-canvas": QT_TRANSLATE_NOOP("Sections", "Flight Phases"),
}


class MainWindow(QMainWindow):
    def __init__(self, context: Optional[AppContext] = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        self.context = context if context is not None else AppContext()

        # ---- Central: TabBar on top + splitter below ----
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        self.tabs = QTabBar(central)
        self.tabs.setExpanding(True)
        self.tabs.setMovable(False)
        self.tabs.setTabsClosable(False)
        self.tabs.setDrawBase(True)
        self.tabs.setShape(QTabBar.Shape.RoundedNorth)
        self.tabs.setStyleSheet("QTabBar::tab { height: 35px; min-width: 100px; }")
        v.addWidget(self.tabs, 0)

        split = QSplitter(Qt.Orientation.Horizontal, central)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        self.panel_stack = QStackedWidget(split)
        self.panel_stack.setMinimumWidth(PANEL_WIDTH)
        self.canvas_stack = QStackedWidget(split)
        split.addWidget(self.panel_stack)
        split.addWidget(self.canvas_stack)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)

        self.setCentralWidget(central)

        self.panels: list[BasePanel] = []
        self.canvases: dict[str, Canvas] = {}
        for panel_cls in SECTION_PANELS:
            panel = panel_cls(parent=self.panel_stack)
            canvas = Canvas(panel.KEY, parent=self.canvas_stack)
            self.panel_stack.addWidget(panel)
            self.canvas_stack.addWidget(canvas)
            self.panels.append(panel)
            self.canvases[panel.KEY] = canvas
            self.tabs.addTab(QCoreApplication.translate("Sections", SECTION_LABELS[panel.KEY]))

        # ---- Visualizations ----
        self.context.bootstrap(self.canvases)
        for panel in self.panels:
            self.context.connect_panel(panel)

        self.tabs.currentChanged.connect(self._on_tab_changed)
        last = QSettings().value(SETTINGS_LAST_SECTION, 0, type=int)
        self.tabs.setCurrentIndex(last if 0 <= last < len(self.panels) else 0)
        self._on_tab_changed(self.tabs.currentIndex())

    def current_key(self) -> str:
        return self.panels[self.tabs.currentIndex()].KEY

    def _on_tab_changed(self, idx: int) -> None:
        self.panel_stack.setCurrentIndex(idx)
        self.canvas_stack.setCurrentIndex(idx)
        logger.debug(f"Section changed to '{self.current_key()}'")

    def closeEvent(self, event: QCloseEvent) -> None:
        QSettings().setValue(SETTINGS_LAST_SECTION, self.tabs.currentIndex())
        self.context.shutdown()
        super().closeEvent(event)
