"""
Smoke tests for the PySide6 desktop shell.

Runs headless on the offscreen Qt platform and drives time with a
VirtualClock, so no real timers need to fire.
"""

import os
import unittest
from unittest import mock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6 import QtCore, QtGui, QtWidgets  # noqa: E402
from PySide6.QtTest import QTest  # noqa: E402

from app.desktop.main_window import MainWindow  # noqa: E402
from app.desktop.qt_timing import QtScheduler  # noqa: E402
from core.config import DEFAULT_CONFIG  # noqa: E402
from core.neurons import MultipolarPhase  # noqa: E402
from core.timing import VirtualClock  # noqa: E402
from vis.painter import MigrationPainter, polyline, qcolor  # noqa: E402


def get_app():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


class TestMainWindow(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = get_app()

    def setUp(self):
        self.clock = VirtualClock()
        self.window = MainWindow(clock=self.clock, scheduler=self.clock)

    def tearDown(self):
        self.window.close()
        self.window.deleteLater()

    def test_initial_button(self):
        self.assertEqual(self.window.button.text(), "Start Migration")
        self.assertTrue(self.window.button.isEnabled())

    def test_click_runs_migration(self):
        self.window.button.click()
        self.assertEqual(self.window.button.text(), "Migrating...")
        self.assertFalse(self.window.button.isEnabled())
        self.assertTrue(self.window.canvas.timer.isActive())
        self.assertTrue(self.window.timeline.playhead.get_visible())

        self.clock.advance(3.0)
        self.assertEqual(self.window.button.text(), "Repeat Migration")
        self.assertTrue(self.window.button.isEnabled())
        self.assertFalse(self.window.timeline.playhead.get_visible())

        self.window.button.click()
        self.assertEqual(self.window.button.text(), "Start Migration")

    def test_frame_loop_stops_when_idle(self):
        self.window.button.click()
        self.clock.advance(1.0)
        self.window.canvas._game_loop()
        self.assertTrue(self.window.canvas.timer.isActive())
        self.assertAlmostEqual(self.window.timeline.playhead.get_xdata()[0], 1.0)

        self.clock.advance(2.0)
        self.window.canvas._game_loop()
        self.assertFalse(self.window.canvas.timer.isActive())

    def test_keyboard_shortcuts(self):
        self._press(QtCore.Qt.Key_Space)
        self.assertTrue(self.window.controller.state.is_migrating)
        self.clock.advance(0.75)
        self.assertEqual(self.window.canvas.multipolar.state(), MultipolarPhase.WOBBLING)

        self._press(QtCore.Qt.Key_R)
        self.assertFalse(self.window.controller.state.is_migrating)
        self.assertEqual(self.window.canvas.multipolar.phases(), (0.0, 0.0))

    def _press(self, key):
        event = QtGui.QKeyEvent(QtCore.QEvent.KeyPress, key, QtCore.Qt.NoModifier)
        self.window.keyPressEvent(event)

    def test_canvas_renders(self):
        self.window.resize(480, 900)
        self.window.button.click()
        self.clock.advance(1.0)
        pixmap = self.window.canvas.grab()
        self.assertFalse(pixmap.isNull())

    def test_accessibility_labels(self):
        self.assertEqual(self.window.canvas.accessibleName(), DEFAULT_CONFIG.text.canvas_accessible)
        self.assertEqual(self.window.button.accessibleName(), "Start Migration")
        description = self.window.canvas.accessibleDescription()
        for title in DEFAULT_CONFIG.text.zones:
            self.assertIn(f"Zone: {title}", description)

        header = self.window.header
        self.assertEqual(header.lbl_title.accessibleName(), DEFAULT_CONFIG.text.title)
        self.assertEqual(header.lbl_title.accessibleDescription(), "")
        self.assertEqual(
            header.lbl_description.accessibleName(), DEFAULT_CONFIG.text.description_accessible
        )

    def test_paint_error_keeps_frame_loop_running(self):
        self.window.button.click()
        self.clock.advance(0.5)
        with mock.patch.object(
            self.window.canvas.painter, "paint", side_effect=RuntimeError("broken frame")
        ) as paint, mock.patch("traceback.print_exc"):
            pixmap = self.window.canvas.grab()
        self.assertTrue(paint.called)
        self.assertFalse(pixmap.isNull())
        self.assertTrue(self.window.canvas.timer.isActive())

        # Later frames still render normally
        self.window.canvas._game_loop()
        self.assertTrue(self.window.canvas.timer.isActive())


class TestPainter(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = get_app()

    def test_qcolor_scales_alpha(self):
        color = qcolor((255, 59, 48, 1.0), opacity=0.3)
        self.assertEqual((color.red(), color.green(), color.blue()), (255, 59, 48))
        self.assertAlmostEqual(color.alphaF(), 0.3, places=2)

    def test_polyline_offsets_points(self):
        path = polyline([(0.0, 0.0), (10.0, 5.0)], offset_x=100.0)
        self.assertEqual(path.elementCount(), 2)
        self.assertAlmostEqual(path.elementAt(1).x, 110.0)
        self.assertAlmostEqual(path.elementAt(1).y, 5.0)

    def test_zone_bands_are_filled(self):
        image = QtGui.QImage(300, 450, QtGui.QImage.Format_ARGB32)
        image.fill(QtGui.QColor("white"))
        painter = QtGui.QPainter(image)
        MigrationPainter().draw_zones(painter, QtCore.QRectF(0, 0, 300, 450))
        painter.end()
        # Corner pixels of the top and bottom bands pick up different tints
        self.assertNotEqual(image.pixel(2, 2), image.pixel(2, 447))


class TestQtScheduler(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = get_app()

    def test_callback_fires_on_event_loop(self):
        fired = []
        handle = QtScheduler().call_later(0.01, lambda: fired.append(True))
        QTest.qWait(200)
        self.assertEqual(fired, [True])
        self.assertTrue(handle.done)

    def test_cancel_prevents_callback(self):
        fired = []
        handle = QtScheduler().call_later(0.01, lambda: fired.append(True))
        handle.cancel()
        handle.cancel()
        QTest.qWait(100)
        self.assertEqual(fired, [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
