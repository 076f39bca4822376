from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


@dataclass
class Task:
    id: str
    title: str
    description: str = ""
    completed: bool = False
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        if not isinstance(data, Mapping):
            raise ValueError(f"task payload is not an object: {data!r}")
        task_id = data.get("_id", data.get("id"))
        if task_id is None:
            raise ValueError("task payload without id")
        return cls(
            id=str(task_id),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            completed=bool(data.get("completed", False)),
            created_at=str(data.get("createdAt") or data.get("created_at") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class TaskPage:
    tasks: Tuple[Task, ...] = field(default_factory=tuple)
    total_pages: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TaskPage":
        raw_tasks = data.get("tasks") or []
        if not isinstance(raw_tasks, (list, tuple)):
            raise ValueError("tasks must be a list")
        try:
            total = int(data.get("totalPages") or 0)
        except (TypeError, ValueError):
            total = 0
        return cls(tasks=tuple(Task.from_dict(item) for item in raw_tasks), total_pages=max(0, total))

    @property
    def is_empty(self) -> bool:
        return not self.tasks


@dataclass(frozen=True)
class QueryKey:
    page: int
    search: str


def make_query_key(page: int, debounced_search: Optional[str]) -> QueryKey:
    """Cache key for the task list view: depends only on page and settled search text."""
    return QueryKey(page=max(1, int(page)), search=debounced_search or "")
