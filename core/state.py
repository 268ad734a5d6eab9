from dataclasses import dataclass


@dataclass(frozen=True)
class MigrationState:
    """
    Snapshot of the migration flags.
    Independent of UI or Rendering backend.
    """
    is_migrating: bool = False
    completed: bool = False


@dataclass(frozen=True)
class ButtonState:
    """What the single control button should currently show and do."""
    title: str
    icon: str  # "play", "busy" or "repeat"
    color: tuple
    enabled: bool
    action: str  # "start" or "reset"
