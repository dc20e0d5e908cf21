"""
Flight Phases Panel
===================
Phase selector buttons, auto-play controls and the current phase readout.

While auto-play runs the readout is refreshed from the visualization on a
short timer, since the phase advances on its own.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QTimer, Slot
from PySide6.QtWidgets import QButtonGroup, QGridLayout, QGroupBox, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from flightphysics.config import DEFAULT_OPTIONS, PHASE_LABEL_INTERVAL_MS
from flightphysics.model.phases import PHASES
from flightphysics.view.panels.base import BasePanel

logger = logging.getLogger(__name__)

PLAY_TEXT = "Play Animation"
STOP_TEXT = "Stop Auto-Play"


class PhasesPanel(BasePanel):
    KEY = "phases-canvas"

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        options = DEFAULT_OPTIONS[self.KEY]

        root = QVBoxLayout(self)

        group = QGroupBox(self.tr("Phase"), self)
        grid = QGridLayout(group)
        self.phase_buttons = QButtonGroup(self)
        self.phase_buttons.setExclusive(True)
        for i, phase in enumerate(PHASES):
            button = QPushButton(self.tr(phase.capitalize()), group)
            button.setCheckable(True)
            button.setProperty("phase", phase)
            self.phase_buttons.addButton(button, i)
            grid.addWidget(button, i // 2, i % 2)
        root.addWidget(group)

        row = QHBoxLayout()
        self.button_play = QPushButton(self.tr(PLAY_TEXT), self)
        self.button_play.setCheckable(True)
        self.button_pause = QPushButton(self.tr("Pause"), self)
        row.addWidget(self.button_play)
        row.addWidget(self.button_pause)
        root.addLayout(row)

        self.label_phase = QLabel("", self)
        root.addWidget(self.label_phase)
        root.addStretch()

        self._label_timer = QTimer(self)
        self._label_timer.setInterval(PHASE_LABEL_INTERVAL_MS)
        self._label_timer.timeout.connect(self._refresh_phase)

        self.phase_buttons.idClicked.connect(self._on_phase_clicked)
        self.button_play.clicked.connect(self._on_play)
        self.button_pause.clicked.connect(self._on_pause)

        self._show_phase(options.initial_phase)

    def on_bound(self) -> None:
        self._show_phase(self.visualization.current_phase)

    def _show_phase(self, phase: str) -> None:
        self.label_phase.setText(self.tr("Current phase: {phase}").format(phase=phase.capitalize()))
        button = self.phase_buttons.button(PHASES.index(phase)) if phase in PHASES else None
        if button is not None and not button.isChecked():
            button.setChecked(True)

    def _set_playing(self, playing: bool) -> None:
        self.button_play.setChecked(playing)
        self.button_play.setText(self.tr(STOP_TEXT if playing else PLAY_TEXT))
        if playing:
            self._label_timer.start()
        else:
            self._label_timer.stop()

    @Slot(int)
    def _on_phase_clicked(self, index: int) -> None:
        if self.visualization is None:
            return
        phase = PHASES[index]
        self.visualization.set_phase(phase)
        self._show_phase(phase)

    @Slot()
    def _on_play(self) -> None:
        if self.visualization is None:
            return
        if self.visualization.auto_play and not self.visualization.is_running:
            # resume after a pause, auto-play was never switched off
            self.visualization.start()
            playing = True
        else:
            playing = self.visualization.toggle_auto_play()
        self._set_playing(playing)
        self._refresh_phase()

    @Slot()
    def _on_pause(self) -> None:
        if self.visualization is None:
            return
        self.visualization.stop()
        self._set_playing(False)
        logger.info("Flight phase animation paused")

    @Slot()
    def _refresh_phase(self) -> None:
        if self.visualization is not None and self.visualization.auto_play:
            self._show_phase(self.visualization.current_phase)
