from typing import Any, Dict, Optional, Protocol, Tuple

from core import Task, TaskPage, User


class KeyValueStorage(Protocol):
    """Expiring key/value slots that survive restarts."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str, ttl_seconds: float) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class AuthGateway(Protocol):
    def login(self, email: str, password: str) -> Tuple[str, User]:
        ...

    def register(self, name: str, email: str, password: str) -> Tuple[str, User]:
        ...


class TaskGateway(Protocol):
    def list_tasks(self, page: int, page_size: int, search: str = "") -> TaskPage:
        ...

    def create_task(self, title: str, description: Optional[str] = None) -> Task:
        ...

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> Task:
        ...

    def delete_task(self, task_id: str) -> None:
        ...
