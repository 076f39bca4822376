import time
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Coalesces a fast-changing input into a settled value.

    Driven by polling: ``push`` re-arms the window, ``poll`` promotes the
    pending value once ``delay`` has elapsed with no further push.
    """

    def __init__(self, initial: T, delay: float = 0.5, clock: Callable[[], float] = time.monotonic) -> None:
        self.delay = delay
        self.clock = clock
        self.value: T = initial
        self._pending: Optional[T] = None
        self._has_pending = False
        self._deadline = 0.0

    @property
    def pending(self) -> bool:
        return self._has_pending

    def push(self, value: T) -> None:
        self._pending = value
        self._has_pending = True
        self._deadline = self.clock() + self.delay

    def poll(self) -> bool:
        """Return True when the settled value changed on this call."""
        if not self._has_pending or self.clock() < self._deadline:
            return False
        value = self._pending
        self._pending = None
        self._has_pending = False
        if value == self.value:
            return False
        self.value = value  # type: ignore[assignment]
        return True

    def flush(self) -> bool:
        if not self._has_pending:
            return False
        self._deadline = self.clock()
        return self.poll()

    def cancel(self) -> None:
        self._pending = None
        self._has_pending = False

    def reset(self, value: T) -> None:
        self.cancel()
        self.value = value


__all__ = ["Debouncer"]
