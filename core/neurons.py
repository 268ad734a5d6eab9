"""
Neuron animators for the three migration modes.

Each animator observes the shared migration trigger and owns its own progress
state. Positions are expressed in the coordinates of the animator's column of
the canvas: (0, 0) is the top-left corner and y grows downwards.
"""
import enum

import numpy as np

from .animation import Tween, ease_in_out
from .config import DEFAULT_CONFIG
from .curve import sample_wobble_path, wobble_x


class NeuronAnimator:
    """
    Base class: subscribes to the trigger and tracks a clock.

    Subclasses implement _start(now), _snap(), position() and guide_paths().
    """
    label = ""
    color_name = ""
    guide_style = "faint"  # "dashed" for a glia fiber

    def __init__(self, trigger, clock, config=DEFAULT_CONFIG):
        self.trigger = trigger
        self.clock = clock
        self.config = config
        self._unsubscribe = trigger.subscribe(self._on_trigger)
        if trigger.value:
            self._start(clock.now())

    def _on_trigger(self, migrating):
        if migrating:
            self._start(self.clock.now())
        else:
            self._snap()

    def close(self):
        """Stop observing the trigger."""
        self._unsubscribe()

    @property
    def color(self):
        return getattr(self.config.colors, self.color_name)

    def tweens(self):
        return []

    def is_animating(self, now=None):
        now = self.clock.now() if now is None else now
        return any(t.is_running(now) for t in self.tweens())


class EndpointNeuron(NeuronAnimator):
    """A neuron that interpolates between two fixed endpoints."""

    def __init__(self, trigger, clock, config=DEFAULT_CONFIG):
        self._tween = None
        super().__init__(trigger, clock, config)

    def _start(self, now):
        self._tween = Tween(now, self.config.animation.duration, easing=ease_in_out)

    def _snap(self):
        self._tween = None

    def tweens(self):
        return [self._tween] if self._tween else []

    def progress(self, now=None):
        if self._tween is None:
            return 0.0
        now = self.clock.now() if now is None else now
        return self._tween.value(now)

    def endpoints(self, width, height):
        raise NotImplementedError

    def position(self, width, height, now=None):
        (x0, y0), (x1, y1) = self.endpoints(width, height)
        p = self.progress(now)
        return x0 + (x1 - x0) * p, y0 + (y1 - y0) * p

    def guide_paths(self, width, height):
        return []


class RadialNeuron(EndpointNeuron):
    """Climbs a radial glia fiber from the ventricular zone to the cortical plate."""
    label = "1"
    color_name = "radial_neuron"
    guide_style = "dashed"

    def endpoints(self, width, height):
        n = self.config.layout.neuron_size
        return (width / 2, height - n), (width / 2, n)

    def guide_paths(self, width, height):
        start, end = self.endpoints(width, height)
        return [np.array([start, end], dtype=np.float64)]


class TangentialNeuron(EndpointNeuron):
    """Moves parallel to the cortical surface (typically an interneuron)."""
    label = "2"
    color_name = "tangential_neuron"

    def endpoints(self, width, height):
        n = self.config.layout.neuron_size
        return (n, height / 2), (width - n, height / 2)


class MultipolarPhase(enum.Enum):
    IDLE = "idle"
    WOBBLING = "wobbling"
    CLIMBING = "climbing"


class MultipolarNeuron(NeuronAnimator):
    """
    Two-phase migration: a damped lateral wobble, then a straight radial climb.

    Both tweens are created from the same timestamp when the trigger turns on;
    the climb carries a delay equal to the wobble duration unless
    `climb_delay` says otherwise. Turning the trigger
    off snaps both phases back to 0.

    The climb offset is added on top of the wobble-derived y position rather
    than blended with it, so the two phases compose additively.
    """
    label = "3"
    color_name = "multipolar_neuron"

    def __init__(self, trigger, clock, config=DEFAULT_CONFIG, climb_delay=None):
        self._wobble = None
        self._climb = None
        # Defaults to the wobble duration so the climb follows the wobble
        if climb_delay is None:
            climb_delay = config.animation.multipolar_phase_duration
        if climb_delay < 0:
            raise ValueError(f"climb_delay must be non-negative, got {climb_delay}")
        self.climb_delay = climb_delay
        super().__init__(trigger, clock, config)

    def _start(self, now):
        anim = self.config.animation
        self._wobble = Tween(now, anim.multipolar_phase_duration)
        self._climb = Tween(now, anim.climb_duration, delay=self.climb_delay)

    def _snap(self):
        self._wobble = None
        self._climb = None

    def tweens(self):
        return [t for t in (self._wobble, self._climb) if t is not None]

    def phases(self, now=None):
        """Return (wobble_phase, climb_phase), each in [0, 1]."""
        if self._wobble is None:
            return 0.0, 0.0
        now = self.clock.now() if now is None else now
        return self._wobble.value(now), self._climb.value(now)

    def state(self, now=None):
        if self._wobble is None:
            return MultipolarPhase.IDLE
        now = self.clock.now() if now is None else now
        if now < self._climb.begin:
            return MultipolarPhase.WOBBLING
        return MultipolarPhase.CLIMBING

    def anchors(self, width, height):
        """Key y-levels and wave geometry for a column of the given size."""
        n = self.config.layout.neuron_size
        return {
            "mid_x": width / 2,
            "start_y": height - n * 2,
            "wobble_end_y": height * 0.6,
            "final_y": n,
            "magnitude": width / 4,
        }

    def position(self, width, height, now=None):
        a = self.anchors(width, height)
        wobble, climb = self.phases(now)
        x = float(wobble_x(wobble, a["mid_x"], a["magnitude"]))
        y = a["start_y"] + (a["wobble_end_y"] - a["start_y"]) * wobble
        # Climb offset stacks on the wobble position
        y += (a["final_y"] - a["wobble_end_y"]) * climb
        return x, y

    def guide_paths(self, width, height):
        a = self.anchors(width, height)
        wobble_path = sample_wobble_path(
            a["mid_x"], a["start_y"], a["wobble_end_y"], a["magnitude"],
            segments=self.config.animation.path_segments,
        )
        climb_path = np.array(
            [(a["mid_x"], a["wobble_end_y"]), (a["mid_x"], a["final_y"])], dtype=np.float64
        )
        return [wobble_path, climb_path]


def sample_timeline(config=DEFAULT_CONFIG, samples=200):
    """
    Progress of every animated value over one full run, starting at t=0.

    Returns (times, curves) where curves maps a legend label to an array of
    progress values aligned with times.
    """
    anim = config.animation
    times = np.linspace(0.0, anim.duration, samples)
    endpoint = Tween(0.0, anim.duration)
    wobble = Tween(0.0, anim.multipolar_phase_duration)
    climb = Tween(0.0, anim.climb_duration, delay=anim.multipolar_phase_duration)
    curves = {
        "Radial / Tangential": np.array([endpoint.value(t) for t in times]),
        "Multipolar wobble": np.array([wobble.value(t) for t in times]),
        "Multipolar climb": np.array([climb.value(t) for t in times]),
    }
    return times, curves
