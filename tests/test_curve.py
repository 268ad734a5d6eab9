"""
Tests for the damped wobble curve used by the multipolar neuron.
"""

import unittest
import numpy as np

from core.curve import sample_wobble_path, wobble_point, wobble_x


class TestWobbleCurve(unittest.TestCase):
    """Endpoints, bounds and shape of the wobble curve."""

    def setUp(self):
        self.start_x = 80.0
        self.start_y = 410.0
        self.end_y = 270.0
        self.magnitude = 40.0

    def test_starts_at_start_point(self):
        x, y = wobble_point(0.0, self.start_x, self.start_y, self.end_y, self.magnitude)
        self.assertAlmostEqual(x, self.start_x)
        self.assertAlmostEqual(y, self.start_y)

    def test_ends_directly_above_start(self):
        """At p=1 the (1 - p) factor removes all horizontal deviation."""
        x, y = wobble_point(1.0, self.start_x, self.start_y, self.end_y, self.magnitude)
        self.assertAlmostEqual(x, self.start_x)
        self.assertAlmostEqual(y, self.end_y)

    def test_deviation_is_bounded_by_magnitude(self):
        progress = np.linspace(0.0, 1.0, 10001)
        deviation = np.abs(wobble_x(progress, self.start_x, self.magnitude) - self.start_x)
        self.assertTrue(np.all(deviation <= self.magnitude + 1e-9))

    def test_amplitude_decays(self):
        """Peak deviation in the second cycle is smaller than in the first."""
        progress = np.linspace(0.0, 1.0, 4001)
        deviation = np.abs(wobble_x(progress, 0.0, 1.0))
        first_half = deviation[progress < 0.5].max()
        second_half = deviation[progress >= 0.5].max()
        self.assertLess(second_half, first_half)

    def test_two_full_cycles(self):
        """sin(4*pi*p) crosses zero at every quarter of the progress range."""
        for p in (0.25, 0.5, 0.75):
            self.assertAlmostEqual(float(wobble_x(p, 10.0, 5.0)), 10.0, places=9)
        # First lobe swings right, second lobe swings left
        self.assertGreater(float(wobble_x(0.125, 0.0, 1.0)), 0.0)
        self.assertLess(float(wobble_x(0.375, 0.0, 1.0)), 0.0)

    def test_y_is_linear_in_progress(self):
        _, y = wobble_point(0.25, self.start_x, self.start_y, self.end_y, self.magnitude)
        self.assertAlmostEqual(y, self.start_y + (self.end_y - self.start_y) * 0.25)

    def test_zero_magnitude_is_straight_line(self):
        progress = np.linspace(0.0, 1.0, 50)
        self.assertTrue(np.allclose(wobble_x(progress, 3.0, 0.0), 3.0))


class TestSampleWobblePath(unittest.TestCase):
    """Tests for the static preview path sampler."""

    def test_default_sampling_has_101_points(self):
        path = sample_wobble_path(50.0, 400.0, 270.0, 25.0)
        self.assertEqual(path.shape, (101, 2))

    def test_path_endpoints(self):
        path = sample_wobble_path(50.0, 400.0, 270.0, 25.0, segments=100)
        self.assertTrue(np.allclose(path[0], [50.0, 400.0]))
        self.assertTrue(np.allclose(path[-1], [50.0, 270.0]))

    def test_path_matches_point_function(self):
        path = sample_wobble_path(50.0, 400.0, 270.0, 25.0, segments=20)
        x, y = wobble_point(7 / 20, 50.0, 400.0, 270.0, 25.0)
        self.assertAlmostEqual(path[7, 0], x)
        self.assertAlmostEqual(path[7, 1], y)

    def test_y_monotonic_towards_end(self):
        path = sample_wobble_path(0.0, 400.0, 270.0, 25.0)
        self.assertTrue(np.all(np.diff(path[:, 1]) < 0))


if __name__ == "__main__":
    unittest.main(verbosity=2)
