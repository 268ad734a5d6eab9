from PySide6 import QtWidgets
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure

from core.config import DEFAULT_CONFIG
from core.neurons import sample_timeline
from vis.painter import qcolor


class HeaderWidget(QtWidgets.QWidget):
    """
    Title and short description above the canvas.
    """

    def __init__(self, config=DEFAULT_CONFIG, parent=None):
        super().__init__(parent)
        text = config.text
        pad = int(config.layout.padding)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(pad, 0, pad, 0)
        layout.setSpacing(8)

        self.lbl_title = QtWidgets.QLabel(text.title)
        font = self.lbl_title.font()
        font.setPointSize(22)
        font.setBold(True)
        self.lbl_title.setFont(font)
        self.lbl_title.setAccessibleName(text.title)

        self.lbl_description = QtWidgets.QLabel(text.description)
        self.lbl_description.setWordWrap(True)
        self.lbl_description.setStyleSheet("color: gray;")
        self.lbl_description.setAccessibleName(text.description_accessible)

        layout.addWidget(self.lbl_title)
        layout.addWidget(self.lbl_description)


class ControlButton(QtWidgets.QPushButton):
    """
    Single Start / Migrating... / Repeat button.

    Appearance is fully derived from the controller's button_state(); clicks
    go through controller.activate().
    """

    ICONS = {
        "play": QtWidgets.QStyle.StandardPixmap.SP_MediaPlay,
        "busy": QtWidgets.QStyle.StandardPixmap.SP_MediaSeekForward,
        "repeat": QtWidgets.QStyle.StandardPixmap.SP_BrowserReload,
    }

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.setMinimumHeight(44)
        self.setSizePolicy(QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Fixed)
        self.clicked.connect(self.controller.activate)

        controller.migrating.subscribe(lambda _: self.refresh())
        controller.completed.subscribe(lambda _: self.refresh())
        self.refresh()

    def refresh(self):
        state = self.controller.button_state()
        self.setText(state.title)
        self.setIcon(self.style().standardIcon(self.ICONS[state.icon]))
        self.setEnabled(state.enabled)
        self.setAccessibleName(state.title)
        background = qcolor(state.color).name()
        self.setStyleSheet(
            f"QPushButton {{ background-color: {background}; color: white; "
            f"font-weight: bold; border-radius: 12px; padding: 8px; }}"
        )


class TimelinePlot(QtWidgets.QGroupBox):
    """
    Progress curves of every animated value over one run, with a playhead.
    """

    def __init__(self, config=DEFAULT_CONFIG, parent=None):
        super().__init__("Progress Timeline", parent)
        self.config = config
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self.figure = Figure(figsize=(5, 2.2), dpi=100)
        self.ax = self.figure.add_subplot(111)
        self._plot_curves()

        self.canvas = FigureCanvasQTAgg(self.figure)
        self.canvas.setMinimumHeight(180)
        layout.addWidget(self.canvas)

    def _plot_curves(self):
        colors = self.config.colors
        line_colors = [colors.radial_neuron, colors.multipolar_neuron, colors.multipolar_neuron]
        styles = ["-", "-", "--"]

        times, curves = sample_timeline(self.config)
        for (label, values), rgba, style in zip(curves.items(), line_colors, styles):
            r, g, b, _ = rgba
            self.ax.plot(times, values, style, label=label, color=(r / 255, g / 255, b / 255))

        self.ax.axvline(
            self.config.animation.multipolar_phase_duration, color="gray", linewidth=0.5, alpha=0.5
        )
        self.playhead = self.ax.axvline(0.0, color="black", linewidth=1)
        self.playhead.set_visible(False)

        self.ax.set_xlim(0.0, self.config.animation.duration)
        self.ax.set_ylim(-0.05, 1.05)
        self.ax.set_xlabel("Time (s)")
        self.ax.set_ylabel("Progress")
        self.ax.legend(loc="lower right", fontsize="small")
        self.ax.grid(True)
        self.figure.tight_layout()

    def set_playhead(self, elapsed):
        """Show the playhead at `elapsed` seconds into the run, or hide it with None."""
        if elapsed is None:
            self.playhead.set_visible(False)
        else:
            t = min(max(elapsed, 0.0), self.config.animation.duration)
            self.playhead.set_xdata([t, t])
            self.playhead.set_visible(True)
        self.canvas.draw_idle()
