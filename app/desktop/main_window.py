"""
Neuronal Migration - Main Window

PySide6 main window with the migration canvas, control button and timeline.
"""

from PySide6 import QtWidgets, QtCore

from core.config import DEFAULT_CONFIG
from core.controller import MigrationController
from core.timing import MonotonicClock
from vis.painter import qcolor
from .canvas import MigrationCanvas
from .qt_timing import QtScheduler
from .widgets import ControlButton, HeaderWidget, TimelinePlot


class MainWindow(QtWidgets.QMainWindow):
    """
    Main application window for the neuronal migration view.

    Owns the MigrationController; the canvas, button and timeline observe it.
    A clock and scheduler may be injected (tests pass a VirtualClock for both).
    """

    def __init__(self, clock=None, scheduler=None, config=DEFAULT_CONFIG):
        super().__init__()
        self.setWindowTitle("Neuronal Migration")
        self.resize(520, 900)

        self.config = config
        self.clock = clock if clock is not None else MonotonicClock()
        self.scheduler = scheduler if scheduler is not None else QtScheduler(self)
        self.controller = MigrationController(self.scheduler, config)
        self.run_started_at = None

        # Build UI
        self._setup_ui()

        # Connect signals
        self._connect_signals()

    def _setup_ui(self):
        """Create the UI layout."""
        pad = int(self.config.layout.padding)

        self.scroll = QtWidgets.QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.setCentralWidget(self.scroll)

        self.central_widget = QtWidgets.QWidget()
        background = qcolor(self.config.colors.background).name()
        self.central_widget.setStyleSheet(f"background-color: {background};")
        self.scroll.setWidget(self.central_widget)

        self.main_layout = QtWidgets.QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(0, pad, 0, pad)
        self.main_layout.setSpacing(20)

        self.header = HeaderWidget(self.config)

        self.canvas = MigrationCanvas(self.controller.migrating, self.clock, self.config)

        # Control button (with side padding)
        self.button = ControlButton(self.controller)
        button_row = QtWidgets.QHBoxLayout()
        button_row.setContentsMargins(pad, 0, pad, 0)
        button_row.addWidget(self.button)

        self.timeline = TimelinePlot(self.config)

        self.main_layout.addWidget(self.header)
        self.main_layout.addWidget(self.canvas)
        self.main_layout.addLayout(button_row)
        self.main_layout.addWidget(self.timeline)
        self.main_layout.addStretch(1)

    def _connect_signals(self):
        """Connect controller state and canvas frames to the timeline."""
        self.controller.migrating.subscribe(self._on_migrating_changed)
        self.canvas.frame_advanced.connect(self._on_frame)

    def _on_migrating_changed(self, migrating):
        if migrating:
            self.run_started_at = self.clock.now()
            self.timeline.set_playhead(0.0)
        else:
            self.run_started_at = None
            self.timeline.set_playhead(None)

    def _on_frame(self, now):
        if self.run_started_at is not None:
            self.timeline.set_playhead(now - self.run_started_at)

    def keyPressEvent(self, event):
        """Handle keyboard shortcuts."""
        key = event.key()

        if key in (QtCore.Qt.Key_Space, QtCore.Qt.Key_Return, QtCore.Qt.Key_Enter):
            self.controller.activate()

        elif key == QtCore.Qt.Key_R:
            self.controller.reset()

        elif key in (QtCore.Qt.Key_Escape, QtCore.Qt.Key_Q):
            self.close()

        else:
            super().keyPressEvent(event)

    def closeEvent(self, event):
        self.canvas.shutdown()
        super().closeEvent(event)
