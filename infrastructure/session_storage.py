"""Expiring key/value slots persisted between runs (the client's cookie jar).

Each entry is stored with an absolute ``expires_at`` epoch; expired entries
read as absent and are dropped on the next write.
"""

import time
from pathlib import Path
from threading import Lock
from typing import Any, Callable, Dict, Optional

import yaml


class FileSessionStorage:
    def __init__(self, path: Path, clock: Callable[[], float] = time.time) -> None:
        self.path = Path(path)
        self.clock = clock
        self._lock = Lock()

    def _read(self) -> Dict[str, Dict[str, Any]]:
        if not self.path.exists():
            return {}
        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except (yaml.YAMLError, OSError, UnicodeDecodeError):
            return {}
        if not isinstance(raw, dict):
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, dict)}

    def _write(self, data: Dict[str, Dict[str, Any]]) -> None:
        if not data:
            self.path.unlink(missing_ok=True)
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
        try:
            self.path.chmod(0o600)
        except OSError:
            pass

    def _alive(self, data: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
        now = self.clock()
        alive = {}
        for key, entry in data.items():
            try:
                expires_at = float(entry.get("expires_at", 0))
            except (TypeError, ValueError):
                continue
            if expires_at > now:
                alive[key] = entry
        return alive

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._alive(self._read()).get(key)
        if not entry:
            return None
        value = entry.get("value")
        return None if value is None else str(value)

    def set(self, key: str, value: str, ttl_seconds: float) -> None:
        with self._lock:
            data = self._alive(self._read())
            data[key] = {"value": value, "expires_at": self.clock() + float(ttl_seconds)}
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key not in data:
                return
            data.pop(key, None)
            self._write(self._alive(data))


class MemorySessionStorage:
    """Non-persistent variant for one-off runs and tests."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self.clock = clock
        self._data: Dict[str, Dict[str, Any]] = {}

    def get(self, key: str) -> Optional[str]:
        entry = self._data.get(key)
        if not entry or entry["expires_at"] <= self.clock():
            return None
        return entry["value"]

    def set(self, key: str, value: str, ttl_seconds: float) -> None:
        self._data[key] = {"value": value, "expires_at": self.clock() + float(ttl_seconds)}

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


__all__ = ["FileSessionStorage", "MemorySessionStorage"]
