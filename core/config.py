"""
Styling, layout and timing constants for the migration view.

Kept free of any UI backend so the core models can be tested headless.
Colors are RGBA tuples (0-255 channels, alpha as 0.0-1.0).
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Colors:
    background: tuple = (242, 242, 247, 1.0)
    text: tuple = (0, 0, 0, 1.0)

    # Zone colors
    cortical_plate: tuple = (0, 122, 255, 0.2)
    intermediate_zone: tuple = (52, 199, 89, 0.2)
    ventricular_zone: tuple = (175, 82, 222, 0.2)

    # Neuron colors
    radial_neuron: tuple = (0, 122, 255, 1.0)
    tangential_neuron: tuple = (255, 149, 0, 1.0)
    multipolar_neuron: tuple = (255, 59, 48, 1.0)

    # Path colors
    radial_glia: tuple = (142, 142, 147, 0.7)

    # Control button colors
    start_button: tuple = (0, 122, 255, 1.0)
    busy_button: tuple = (142, 142, 147, 1.0)
    repeat_button: tuple = (52, 199, 89, 1.0)


@dataclass(frozen=True)
class Layout:
    zone_height: float = 150
    neuron_size: float = 20
    padding: float = 16

    @property
    def canvas_height(self):
        return self.zone_height * 3


@dataclass(frozen=True)
class Animation:
    duration: float = 3.0
    multipolar_phase_duration: float = 1.5
    frame_interval_ms: int = 16  # ~60 FPS
    path_segments: int = 100

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if self.multipolar_phase_duration <= 0:
            raise ValueError(
                f"multipolar_phase_duration must be positive, got {self.multipolar_phase_duration}"
            )
        if self.multipolar_phase_duration >= self.duration:
            raise ValueError(
                "multipolar_phase_duration must be shorter than duration to leave time for the climb"
            )
        if self.path_segments < 1:
            raise ValueError("path_segments must be at least 1")

    @property
    def climb_duration(self):
        """Time left for the radial climb once the wobble has finished."""
        return self.duration - self.multipolar_phase_duration


@dataclass(frozen=True)
class Text:
    title: str = "The Journey of a Neuron \U0001F9E0"
    description: str = (
        "Neurons born deep in the brain must travel to their final destination "
        "in the cortex. This view demonstrates the three primary modes of this "
        "incredible journey."
    )
    description_accessible: str = "Description of the neuronal migration visualization."
    canvas_accessible: str = (
        "An animated visualization of three neurons migrating across brain zones."
    )

    # Top to bottom
    zones: tuple = (
        "Cortical Plate (Destination)",
        "Intermediate Zone",
        "Ventricular Zone (Origin)",
    )
    captions: tuple = ("1. Radial", "2. Tangential", "3. Multipolar")

    start: str = "Start Migration"
    migrating: str = "Migrating..."
    repeat: str = "Repeat Migration"


@dataclass(frozen=True)
class MigrationConfig:
    """All constants of the view, grouped the same way the widgets consume them."""
    colors: Colors = field(default_factory=Colors)
    layout: Layout = field(default_factory=Layout)
    animation: Animation = field(default_factory=Animation)
    text: Text = field(default_factory=Text)

    def zone_colors(self):
        c = self.colors
        return (c.cortical_plate, c.intermediate_zone, c.ventricular_zone)


DEFAULT_CONFIG = MigrationConfig()
