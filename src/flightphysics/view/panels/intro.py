from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from flightphysics.view.panels.base import BasePanel

INTRO_TEXT = """
<h3>How does an airplane fly?</h3>
<p>Four forces act on every airplane in flight:</p>
<ul>
<li><b style="color:#4CAF50">Lift</b> pushes it up, created by the wings.</li>
<li><b style="color:#F44336">Weight</b> pulls it down toward the ground.</li>
<li><b style="color:#2196F3">Thrust</b> moves it forward, produced by the engines.</li>
<li><b style="color:#FF9800">Drag</b> resists the motion through the air.</li>
</ul>
<p>Use the tabs above to explore where these forces come from
and how a pilot controls them.</p>
"""


class IntroPanel(BasePanel):
    KEY = "intro-canvas"

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        root = QVBoxLayout(self)
        text = QLabel(INTRO_TEXT, self)
        text.setWordWrap(True)
        root.addWidget(text)

        self.button_replay = QPushButton(self.tr("Replay Takeoff"), self)
        self.button_replay.clicked.connect(self._on_replay)
        root.addWidget(self.button_replay)
        root.addStretch()

    @Slot()
    def _on_replay(self) -> None:
        if self.visualization is None:
            return
        self.visualization.stop()
        self.visualization.start()
