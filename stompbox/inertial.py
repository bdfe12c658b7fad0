"""A value that moves toward its target by a bounded step per update."""


class Inertial:
    """Slews toward a target by at most ``max_delta_per_update`` per update."""

    def __init__(self, x: float, max_delta_per_update: float) -> None:
        self._current = x
        self._target = x
        self.max_delta_per_update = max_delta_per_update

    @classmethod
    def starting_at(cls, current: float, target: float, max_delta_per_update: float) -> "Inertial":
        """Create one that starts at ``current`` already heading for ``target``."""
        inertial = cls(current, max_delta_per_update)
        inertial._target = target
        return inertial

    @property
    def value(self) -> float:
        """The current value."""
        return self._current

    def set(self, x: float) -> None:
        """Set a new target."""
        self._target = x

    def update(self) -> None:
        """Move one step toward the target."""
        if self._target > self._current:
            self._current += min(self._target - self._current, self.max_delta_per_update)
        else:
            self._current -= min(self._current - self._target, self.max_delta_per_update)