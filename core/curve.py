"""
Damped sine "wobble" used by the multipolar neuron.

The horizontal offset oscillates two full cycles over progress [0, 1] while
its amplitude decays linearly to zero, so the curve always ends directly
above its start point.
"""
import numpy as np


def wobble_x(progress, start_x, magnitude):
    """
    Horizontal position on the wobble curve.

    Works on scalars and numpy arrays alike.
    """
    return start_x + np.sin(progress * np.pi * 4) * magnitude * (1 - progress)


def wobble_point(progress, start_x, start_y, end_y, magnitude):
    """Return (x, y) on the wobble curve; y is a straight lerp from start_y to end_y."""
    x = wobble_x(progress, start_x, magnitude)
    y = start_y + (end_y - start_y) * progress
    return float(x), float(y)


def sample_wobble_path(start_x, start_y, end_y, magnitude, segments=100):
    """
    Sample the wobble curve for drawing a static preview path.

    Returns an array of shape (segments + 1, 2). Row 0 is the start point,
    followed by one point per segment at progress i / segments.
    """
    progress = np.arange(segments + 1, dtype=np.float64) / segments
    xs = wobble_x(progress, start_x, magnitude)
    ys = start_y + (end_y - start_y) * progress
    return np.column_stack([xs, ys])
