"""
QTimer-backed scheduler for the desktop app.
"""
from PySide6 import QtCore


class QtTimerHandle:
    """Wraps a single-shot QTimer so it can be cancelled like a core TimerHandle."""

    def __init__(self, timer, callback):
        self._timer = timer
        self._callback = callback
        self.done = False
        timer.timeout.connect(self._fire)

    def _fire(self):
        if self.done:
            return
        self.done = True
        self._timer.deleteLater()
        self._callback()

    def cancel(self):
        if self.done:
            return
        self.done = True
        self._timer.stop()
        self._timer.deleteLater()


class QtScheduler:
    """Runs callbacks on the Qt event loop after a delay in seconds."""

    def __init__(self, parent=None):
        self.parent = parent

    def call_later(self, delay, callback):
        timer = QtCore.QTimer(self.parent)
        timer.setSingleShot(True)
        timer.setTimerType(QtCore.Qt.PreciseTimer)
        handle = QtTimerHandle(timer, callback)
        timer.start(int(round(delay * 1000)))
        return handle
