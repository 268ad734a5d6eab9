"""
Migration canvas widget.

Hosts the three neuron animators and repaints them from a frame timer while
any of them is moving.
"""
import traceback

from PySide6 import QtCore, QtWidgets
from PySide6.QtCore import QRectF
from PySide6.QtGui import QPainter

from core.config import DEFAULT_CONFIG
from core.neurons import MultipolarNeuron, RadialNeuron, TangentialNeuron
from vis.painter import MigrationPainter, qcolor


class MigrationCanvas(QtWidgets.QWidget):
    """
    Draws the zones and the three migrating neurons.

    The canvas never changes the migration trigger; it only reads it through
    the animators it creates.
    """

    # Emitted on every animation frame with the current clock time
    frame_advanced = QtCore.Signal(float)

    def __init__(self, trigger, clock, config=DEFAULT_CONFIG, parent=None):
        super().__init__(parent)
        self.config = config
        self.clock = clock
        self.painter = MigrationPainter(config)
        self.neurons = [
            RadialNeuron(trigger, clock, config),
            TangentialNeuron(trigger, clock, config),
            MultipolarNeuron(trigger, clock, config),
        ]
        # Subscribed after the animators so they have updated before we repaint
        self._unsubscribe = trigger.subscribe(self._on_trigger)

        self.setMinimumHeight(int(config.layout.canvas_height))
        self.setSizePolicy(QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Fixed)
        self.setAccessibleName(config.text.canvas_accessible)
        # The canvas is a single accessible element; zones are listed in its description
        self.setAccessibleDescription("; ".join(f"Zone: {title}" for title in config.text.zones))

        # Animation timer
        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(config.animation.frame_interval_ms)
        self.timer.timeout.connect(self._game_loop)

    @property
    def multipolar(self):
        return self.neurons[2]

    def sizeHint(self):
        return QtCore.QSize(480, int(self.config.layout.canvas_height))

    def is_animating(self, now=None):
        now = self.clock.now() if now is None else now
        return any(n.is_animating(now) for n in self.neurons)

    def _on_trigger(self, migrating):
        if migrating and not self.timer.isActive():
            self.timer.start()
        self.update()

    def _game_loop(self):
        """Animation loop called by timer."""
        now = self.clock.now()
        self.frame_advanced.emit(now)
        self.update()
        if not self.is_animating(now):
            self.timer.stop()

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), qcolor(self.config.colors.background))
            self.painter.paint(painter, QRectF(self.rect()), self.neurons, self.clock.now())
        except Exception as e:
            print(f"Render error: {e}")
            traceback.print_exc()
        finally:
            painter.end()

    def shutdown(self):
        """Stop the frame loop and detach from the trigger."""
        self.timer.stop()
        self._unsubscribe()
        for neuron in self.neurons:
            neuron.close()
