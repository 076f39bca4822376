"""Wiring of storage, API clients, session store and coordinator."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests

from config import get_api_url, get_data_dir, get_page_size
from core.desktop.devtools.application.session_store import SessionStore
from core.desktop.devtools.application.task_coordinator import TaskCoordinator
from core.desktop.devtools.interface.i18n import translate
from infrastructure.remote_api import ApiHttpClient, AuthClient, TasksClient
from infrastructure.session_storage import FileSessionStorage

SESSION_FILE = "session.yaml"


@dataclass
class AppServices:
    session: SessionStore
    tasks: TasksClient
    coordinator: TaskCoordinator
    http: ApiHttpClient

    def close(self) -> None:
        self.coordinator.close()
        self.http.session.close()


def build_services(
    api_url: Optional[str] = None,
    *,
    data_dir: Optional[Path] = None,
    http_session: Optional[requests.Session] = None,
    refetch_after_mutation: bool = True,
) -> AppServices:
    storage = FileSessionStorage(Path(data_dir or get_data_dir()) / SESSION_FILE)
    http = ApiHttpClient(api_url or get_api_url(), http_session, token_provider=lambda: None)
    session = SessionStore(storage, AuthClient(http))
    http.token_provider = session.token
    session.bootstrap()
    tasks = TasksClient(http)
    coordinator = TaskCoordinator(
        tasks,
        session,
        page_size=get_page_size(),
        translate=translate,
        refetch_after_mutation=refetch_after_mutation,
    )
    return AppServices(session=session, tasks=tasks, coordinator=coordinator, http=http)


__all__ = ["AppServices", "build_services", "SESSION_FILE"]
