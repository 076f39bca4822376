from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from config import get_api_url, get_page_size, set_api_url, set_page_size, set_user_lang
from core import AuthError, Task, validate_task_fields
from core.desktop.devtools.application.task_coordinator import STATUS_ERROR, STATUS_READY, STATUS_UNAUTHENTICATED
from core.desktop.devtools.interface.cli_io import structured_error, structured_response, validation_error
from core.desktop.devtools.interface.services import AppServices


ServicesFactory = Callable[[], AppServices]
Translate = Callable[..., str]
PasswordReader = Callable[[str], str]


@dataclass
class CliDeps:
    services_factory: ServicesFactory
    translate: Translate
    read_password: PasswordReader


def _task_dict(task: Task) -> Dict[str, Any]:
    return task.to_dict()


def _password(args, deps: CliDeps) -> str:
    value = getattr(args, "password", None)
    if value:
        return value
    return deps.read_password(f"{deps.translate('FIELD_PASSWORD')}: ")


def _require_session(command: str, services: AppServices, deps: CliDeps) -> Optional[int]:
    if services.session.require_login():
        return None
    return structured_error(command, deps.translate("AUTH_REQUIRED"))


def cmd_login(args, deps: CliDeps) -> int:
    services = deps.services_factory()
    password = _password(args, deps)
    try:
        user = services.session.login(args.email, password)
    except AuthError as exc:
        return structured_error("login", deps.translate("AUTH_FAILED"), payload={"reason": str(exc.__cause__ or exc)})
    return structured_response("login", message=deps.translate("LOGIN_OK", email=user.email), payload={"user": user.to_dict()})


def cmd_register(args, deps: CliDeps) -> int:
    services = deps.services_factory()
    password = _password(args, deps)
    try:
        user = services.session.register(args.name, args.email, password)
    except AuthError as exc:
        return structured_error("register", deps.translate("AUTH_FAILED"), payload={"reason": str(exc.__cause__ or exc)})
    return structured_response("register", message=deps.translate("REGISTER_OK", email=user.email), payload={"user": user.to_dict()})


def cmd_logout(args, deps: CliDeps) -> int:
    services = deps.services_factory()
    services.session.logout()
    return structured_response("logout", message=deps.translate("NOTIFY_LOGGED_OUT"))


def cmd_whoami(args, deps: CliDeps) -> int:
    services = deps.services_factory()
    denied = _require_session("whoami", services, deps)
    if denied is not None:
        return denied
    user = services.session.user
    return structured_response("whoami", payload={"user": user.to_dict() if user else None, "api_url": get_api_url()})


def cmd_list(args, deps: CliDeps) -> int:
    services = deps.services_factory()
    denied = _require_session("list", services, deps)
    if denied is not None:
        return denied
    coordinator = services.coordinator
    search = getattr(args, "search", None) or ""
    if search:
        coordinator.set_search(search)
        coordinator.search.flush()
    coordinator.page = max(1, int(getattr(args, "page", 1) or 1))
    state = coordinator.load()
    if state.status == STATUS_READY and coordinator.go_to_page(coordinator.page):
        # requested page is past the last one
        state = coordinator.load()
    if state.status == STATUS_UNAUTHENTICATED:
        return structured_error("list", deps.translate("AUTH_REQUIRED"))
    if state.status == STATUS_ERROR:
        return structured_error("list", state.error or deps.translate("ERROR_FALLBACK"))
    payload = {
        "page": state.key.page,
        "total_pages": coordinator.total_pages,
        "search": state.key.search,
        "label": coordinator.page_label(),
        "has_previous": coordinator.has_previous,
        "has_next": coordinator.has_next,
        "tasks": [_task_dict(t) for t in state.tasks],
    }
    message = "" if state.tasks else deps.translate("EMPTY_TITLE")
    return structured_response("list", message=message, payload=payload)


def _mutation_response(command: str, ok: bool, services: AppServices) -> int:
    note = services.coordinator.notification
    message = note.message if note else ""
    if ok:
        return structured_response(command, message=message)
    return structured_error(command, message)


def cmd_create(args, deps: CliDeps) -> int:
    services = deps.services_factory()
    denied = _require_session("create", services, deps)
    if denied is not None:
        return denied
    coordinator = services.coordinator
    ok = coordinator.submit_create(args.title, getattr(args, "description", None) or "")
    if not ok and coordinator.form.errors:
        return validation_error("create", coordinator.form.errors)
    return _mutation_response("create", ok, services)


def cmd_done(args, deps: CliDeps) -> int:
    services = deps.services_factory()
    denied = _require_session("done", services, deps)
    if denied is not None:
        return denied
    ok = services.coordinator.update_task(args.task_id, {"completed": not getattr(args, "undo", False)})
    return _mutation_response("done", ok, services)


def cmd_update(args, deps: CliDeps) -> int:
    services = deps.services_factory()
    denied = _require_session("update", services, deps)
    if denied is not None:
        return denied
    fields: Dict[str, Any] = {}
    if getattr(args, "title", None) is not None:
        fields["title"] = args.title
    if getattr(args, "description", None) is not None:
        fields["description"] = args.description
    if getattr(args, "completed", None) is not None:
        fields["completed"] = args.completed == "yes"
    if not fields:
        return structured_error("update", "nothing to update")
    errors = validate_task_fields(fields)
    if errors:
        return validation_error("update", errors)
    ok = services.coordinator.update_task(args.task_id, fields)
    return _mutation_response("update", ok, services)


def cmd_delete(args, deps: CliDeps) -> int:
    services = deps.services_factory()
    denied = _require_session("delete", services, deps)
    if denied is not None:
        return denied
    ok = services.coordinator.delete_task(args.task_id)
    return _mutation_response("delete", ok, services)


def cmd_config(args, deps: CliDeps) -> int:
    changed = False
    if getattr(args, "api_url", None) is not None:
        set_api_url(args.api_url)
        changed = True
    if getattr(args, "page_size", None) is not None:
        set_page_size(args.page_size)
        changed = True
    if getattr(args, "lang", None) is not None:
        set_user_lang(args.lang)
        changed = True
    payload = {"api_url": get_api_url(), "page_size": get_page_size()}
    return structured_response("config", message=deps.translate("CONFIG_SAVED") if changed else "", payload=payload)


__all__ = [
    "CliDeps",
    "cmd_login",
    "cmd_register",
    "cmd_logout",
    "cmd_whoami",
    "cmd_list",
    "cmd_create",
    "cmd_done",
    "cmd_update",
    "cmd_delete",
    "cmd_config",
]
