class Observable:
    """
    A published value with subscriber callbacks.

    Subscribers are called with the new value. Setting an equal value is
    silent unless force=True, which re-asserts the value to every subscriber.
    """

    def __init__(self, value):
        self._value = value
        self._subscribers = []

    @property
    def value(self):
        return self._value

    def subscribe(self, callback):
        """Register a callback; returns a function that removes it again."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set(self, value, force=False):
        if value == self._value and not force:
            return
        self._value = value
        # Copy so a subscriber may unsubscribe while being notified
        for callback in list(self._subscribers):
            callback(value)

    def __bool__(self):
        return bool(self._value)
