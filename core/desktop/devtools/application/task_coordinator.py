"""Task list query/mutation coordinator.

Owns the dashboard's view parameters (page, search text), derives the cache
key from them, serves or fetches task pages, and runs create/update/delete
with cache invalidation and a single outcome notification.
"""

import logging
import time
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Callable, Dict, Optional, Tuple

from application.ports import TaskGateway
from core import GatewayError, QueryKey, SessionEvent, Task, TaskPage, make_query_key, validate_task_form
from core.desktop.devtools.application.debounce import Debouncer
from core.desktop.devtools.application.notifications import (
    KIND_ERROR,
    KIND_SUCCESS,
    NOTIFY_TTL_SECONDS,
    Notification,
    NotificationCenter,
)
from core.desktop.devtools.application.query_cache import DEFAULT_STALE_AFTER, QueryCache
from core.desktop.devtools.application.session_store import NAV_DASHBOARD, SessionStore

logger = logging.getLogger("taskdash.tasks")

STATUS_IDLE = "idle"
STATUS_LOADING = "loading"
STATUS_READY = "ready"
STATUS_ERROR = "error"
STATUS_UNAUTHENTICATED = "unauthenticated"

DEFAULT_PAGE_SIZE = 10
SEARCH_DEBOUNCE_SECONDS = 0.5

_DEFAULT_TEXTS = {
    "NOTIFY_CREATE_OK": "Task created successfully!",
    "NOTIFY_CREATE_FAIL": "Failed to create task",
    "NOTIFY_UPDATE_OK": "Task updated successfully!",
    "NOTIFY_UPDATE_FAIL": "Failed to update task",
    "NOTIFY_DELETE_OK": "Task deleted successfully!",
    "NOTIFY_DELETE_FAIL": "Failed to delete task",
    "PAGE_LABEL": "Page {page} of {total}",
}


def _default_translate(key: str, **kwargs: Any) -> str:
    return _DEFAULT_TEXTS.get(key, key).format(**kwargs)


@dataclass
class TaskForm:
    title: str = ""
    description: str = ""
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def title_length(self) -> int:
        return len(self.title)

    @property
    def description_length(self) -> int:
        return len(self.description)

    def values(self) -> Dict[str, Optional[str]]:
        return {"title": self.title, "description": self.description or None}

    def reset(self) -> None:
        self.title = ""
        self.description = ""
        self.errors = {}


@dataclass(frozen=True)
class QueryState:
    status: str
    key: QueryKey
    page: Optional[TaskPage] = None
    error: str = ""

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return self.page.tasks if self.page else ()


class TaskCoordinator:
    def __init__(
        self,
        gateway: TaskGateway,
        session: SessionStore,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
        stale_after: float = DEFAULT_STALE_AFTER,
        read_retries: int = 1,
        notify_ttl: float = NOTIFY_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        translate: Optional[Callable[..., str]] = None,
        refetch_after_mutation: bool = True,
    ) -> None:
        self.gateway = gateway
        self.session = session
        self.page_size = page_size
        self.read_retries = max(0, read_retries)
        self.refetch_after_mutation = refetch_after_mutation
        self._t = translate or _default_translate
        self.cache = QueryCache(stale_after=stale_after, clock=clock)
        self.search = Debouncer("", delay=debounce_seconds, clock=clock)
        self.notifications = NotificationCenter(ttl=notify_ttl, clock=clock)
        self.form = TaskForm()
        self.page = 1
        self.search_input = ""
        self.total_pages = 0
        self._generation = 0
        self._lock = RLock()
        self._state = QueryState(STATUS_IDLE, self.query_key())
        self._unsubscribe = session.subscribe(self._on_session_event)

    # ---- view parameters -------------------------------------------------

    def query_key(self) -> QueryKey:
        with self._lock:
            return make_query_key(self.page, self.search.value)

    @property
    def state(self) -> QueryState:
        with self._lock:
            return self._state

    def set_search(self, text: str) -> None:
        """Record a keystroke; page drops to 1 now, the fetch waits for the debounce."""
        with self._lock:
            self.search_input = text
            self.page = 1
            self.search.push(text)

    def poll(self) -> bool:
        """Settle the debounce; True when the current key still needs a load."""
        with self._lock:
            self.search.poll()
            if self.search.pending:
                return False
            if self._state.status == STATUS_UNAUTHENTICATED:
                return False
            return self._state.status == STATUS_IDLE or self._state.key != self.query_key()

    @property
    def has_previous(self) -> bool:
        with self._lock:
            return self.page > 1

    @property
    def has_next(self) -> bool:
        with self._lock:
            return self.page < self.total_pages

    def previous_page(self) -> bool:
        with self._lock:
            if self.page <= 1:
                return False
            self.page -= 1
            return True

    def next_page(self) -> bool:
        with self._lock:
            if self.page >= self.total_pages:
                return False
            self.page += 1
            return True

    def go_to_page(self, page: int) -> bool:
        with self._lock:
            target = min(max(1, int(page)), max(1, self.total_pages))
            if target == self.page:
                return False
            self.page = target
            return True

    def page_label(self) -> str:
        with self._lock:
            return self._t("PAGE_LABEL", page=self.page, total=self.total_pages)

    # ---- queries ---------------------------------------------------------

    def load(self, force: bool = False) -> QueryState:
        if not self.session.is_authenticated:
            with self._lock:
                self._state = QueryState(STATUS_UNAUTHENTICATED, self.query_key())
            self.session.require_login()
            return self.state
        with self._lock:
            key = self.query_key()
            if not force:
                cached = self.cache.get_fresh(key)
                if cached is not None:
                    self._activate(key, cached)
                    return self._state
            self._generation += 1
            generation = self._generation
            self._state = QueryState(STATUS_LOADING, key, self.cache.peek(key))

        page: Optional[TaskPage] = None
        last_error: Optional[GatewayError] = None
        for attempt in range(1 + self.read_retries):
            try:
                page = self.gateway.list_tasks(key.page, self.page_size, key.search)
                break
            except GatewayError as exc:
                last_error = exc
                logger.warning("list_tasks %s attempt %s failed: %s", key, attempt + 1, exc)

        with self._lock:
            if page is not None:
                self.cache.store(key, page)
                if key == self.query_key():
                    self._activate(key, page)
                else:
                    logger.debug("late page for superseded key %s", key)
            elif generation == self._generation and key == self.query_key():
                self._state = QueryState(STATUS_ERROR, key, None, str(last_error or "request failed"))
            return self._state

    def retry(self) -> QueryState:
        return self.load(force=True)

    def _activate(self, key: QueryKey, page: TaskPage) -> None:
        self.total_pages = page.total_pages
        self._state = QueryState(STATUS_READY, key, page)

    # ---- mutations -------------------------------------------------------

    def edit_form(self, title: Optional[str] = None, description: Optional[str] = None) -> None:
        """Mirror the form inputs; counters read from here."""
        with self._lock:
            if title is not None:
                self.form.title = title
            if description is not None:
                self.form.description = description

    def submit_create(self, title: Optional[str] = None, description: Optional[str] = None) -> bool:
        with self._lock:
            self.edit_form(title, description)
            values = self.form.values()
            errors = validate_task_form(values)
            self.form.errors = errors
        if errors:
            return False
        try:
            self.gateway.create_task(values["title"] or "", values["description"])
        except GatewayError as exc:
            self._mutation_failed("create", exc)
            return False
        with self._lock:
            self.form.reset()
        self._mutation_succeeded("create")
        return True

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> bool:
        try:
            self.gateway.update_task(task_id, fields)
        except GatewayError as exc:
            self._mutation_failed("update", exc)
            return False
        self._mutation_succeeded("update")
        return True

    def toggle_completed(self, task: Task) -> bool:
        return self.update_task(task.id, {"completed": not task.completed})

    def delete_task(self, task_id: str) -> bool:
        try:
            self.gateway.delete_task(task_id)
        except GatewayError as exc:
            self._mutation_failed("delete", exc)
            return False
        self._mutation_succeeded("delete")
        return True

    def _mutation_succeeded(self, action: str) -> None:
        self.cache.invalidate_all()
        self.notifications.show(self._t(f"NOTIFY_{action.upper()}_OK"), KIND_SUCCESS)
        if self.refetch_after_mutation and self.session.is_authenticated:
            self.load()

    def _mutation_failed(self, action: str, exc: GatewayError) -> None:
        logger.warning("%s failed: %s", action, exc)
        self.notifications.show(self._t(f"NOTIFY_{action.upper()}_FAIL"), KIND_ERROR)

    # ---- notifications / session ----------------------------------------

    @property
    def notification(self) -> Optional[Notification]:
        return self.notifications.current()

    def dismiss_notification(self) -> None:
        self.notifications.dismiss()

    def _on_session_event(self, event: SessionEvent) -> None:
        with self._lock:
            self.cache.clear()
            self.page = 1
            self.search_input = ""
            self.search.reset("")
            self.total_pages = 0
            self.form.reset()
            self._generation += 1
            status = STATUS_IDLE if event.navigate_to == NAV_DASHBOARD else STATUS_UNAUTHENTICATED
            self._state = QueryState(status, self.query_key())

    def close(self) -> None:
        self._unsubscribe()


__all__ = [
    "TaskCoordinator",
    "TaskForm",
    "QueryState",
    "STATUS_IDLE",
    "STATUS_LOADING",
    "STATUS_READY",
    "STATUS_ERROR",
    "STATUS_UNAUTHENTICATED",
    "DEFAULT_PAGE_SIZE",
    "SEARCH_DEBOUNCE_SECONDS",
]
