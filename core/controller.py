"""
Migration controller: owns the migration flags and the completion timer.
"""
from .config import DEFAULT_CONFIG
from .observable import Observable
from .state import ButtonState, MigrationState


class MigrationController:
    """
    Start/reset logic shared by every neuron animator.

    `migrating` is the trigger the animators subscribe to. `completed` turns
    on when a run finishes and drives the repeat button.

    Args:
        scheduler: Object with call_later(delay, callback) returning a handle
            with cancel().
        config: MigrationConfig with the animation duration and button styling.
    """

    def __init__(self, scheduler, config=DEFAULT_CONFIG):
        self.scheduler = scheduler
        self.config = config
        self.migrating = Observable(False)
        self.completed = Observable(False)
        self._run = 0
        self._pending = None

    @property
    def state(self):
        return MigrationState(self.migrating.value, self.completed.value)

    def start(self):
        """Start a run unless one is already in progress."""
        if self.migrating.value:
            return
        self._run += 1
        run = self._run
        self.completed.set(False)
        self.migrating.set(True)
        self._pending = self.scheduler.call_later(
            self.config.animation.duration, lambda: self._complete(run)
        )
        print("Migration started.")

    def reset(self):
        """Clear completion and re-assert the idle trigger to every animator."""
        self._run += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self.completed.set(False)
        self.migrating.set(False, force=True)
        print("Migration reset.")

    def _complete(self, run):
        # Ignore callbacks from a run that was reset or superseded
        if run != self._run or not self.migrating.value:
            return
        self._pending = None
        self.migrating.set(False)
        self.completed.set(True)
        print("Migration completed.")

    def button_state(self):
        text = self.config.text
        colors = self.config.colors
        if self.completed.value:
            return ButtonState(text.repeat, "repeat", colors.repeat_button, True, "reset")
        if self.migrating.value:
            return ButtonState(text.migrating, "busy", colors.busy_button, False, "start")
        return ButtonState(text.start, "play", colors.start_button, True, "start")

    def activate(self):
        """Run the action the control button currently offers, if enabled."""
        button = self.button_state()
        if not button.enabled:
            return
        if button.action == "reset":
            self.reset()
        else:
            self.start()
