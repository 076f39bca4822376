import time
from dataclasses import dataclass
from typing import Callable, Optional

KIND_SUCCESS = "success"
KIND_ERROR = "error"
KIND_INFO = "info"

NOTIFY_TTL_SECONDS = 3.0


@dataclass(frozen=True)
class Notification:
    message: str
    kind: str
    expires_at: float


class NotificationCenter:
    """Holds at most one outcome message; a new one replaces the old."""

    def __init__(self, ttl: float = NOTIFY_TTL_SECONDS, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self.clock = clock
        self._current: Optional[Notification] = None

    def show(self, message: str, kind: str = KIND_INFO) -> Notification:
        note = Notification(message=message, kind=kind, expires_at=self.clock() + self.ttl)
        self._current = note
        return note

    def current(self) -> Optional[Notification]:
        note = self._current
        if note is not None and self.clock() >= note.expires_at:
            self._current = None
            return None
        return note

    def dismiss(self) -> None:
        self._current = None


__all__ = [
    "Notification",
    "NotificationCenter",
    "KIND_SUCCESS",
    "KIND_ERROR",
    "KIND_INFO",
    "NOTIFY_TTL_SECONDS",
]
