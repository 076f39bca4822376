from typing import Any, Dict, Optional
from urllib.parse import quote

from core import GatewayError, Task, TaskPage

from .http_client import ApiHttpClient


class TasksClient:
    """Stateless mapping of task operations onto the REST endpoints."""

    def __init__(self, http: ApiHttpClient) -> None:
        self.http = http

    def list_tasks(self, page: int, page_size: int, search: str = "") -> TaskPage:
        params: Dict[str, Any] = {"page": page, "limit": page_size}
        if search:
            params["search"] = search
        body = self.http.request("get", "/tasks", params=params)
        if not isinstance(body, dict):
            raise GatewayError("Task list response is not an object")
        try:
            return TaskPage.from_dict(body)
        except ValueError as exc:
            raise GatewayError(str(exc)) from exc

    def create_task(self, title: str, description: Optional[str] = None) -> Task:
        payload: Dict[str, Any] = {"title": title}
        if description:
            payload["description"] = description
        return _task(self.http.request("post", "/tasks", payload))

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> Task:
        return _task(self.http.request("patch", f"/tasks/{quote(str(task_id), safe='')}", dict(fields)))

    def delete_task(self, task_id: str) -> None:
        self.http.request("delete", f"/tasks/{quote(str(task_id), safe='')}")


def _task(body: Any) -> Task:
    if not isinstance(body, dict):
        raise GatewayError("Task response is not an object")
    try:
        return Task.from_dict(body)
    except ValueError as exc:
        raise GatewayError(str(exc)) from exc
