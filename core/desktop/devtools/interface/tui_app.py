#!/usr/bin/env python3
"""TUI application - DashboardTUI class and cmd_tui command."""

import logging
import os
import time
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Callable, List, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition, has_focus
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.bindings.focus import focus_next, focus_previous
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.containers import DynamicContainer, WindowAlign
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.widgets import TextArea

from core import AuthError, DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, SessionEvent, Task
from core.desktop.devtools.application.session_store import NAV_DASHBOARD
from core.desktop.devtools.application.task_coordinator import (
    STATUS_ERROR,
    STATUS_IDLE,
    STATUS_LOADING,
)
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.services import AppServices
from core.desktop.devtools.interface.tui_footer import build_footer_text
from core.desktop.devtools.interface.tui_render import (
    render_counter,
    render_error_panel,
    render_form_errors,
    render_loading,
    render_pager,
    render_task_list,
)
from core.desktop.devtools.interface.tui_status import build_notification_text, build_status_text
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("taskdash.tui")

SCREEN_LOGIN = "login"
SCREEN_REGISTER = "register"
SCREEN_DASHBOARD = "dashboard"

LABEL_WIDTH = 14
COUNTER_WIDTH = 9


class DashboardTUI:
    SPINNER_FRAMES: List[str] = ["⣿", "⡇", "⡏", "⡗", "⡟", "⡧", "⡯", "⡷", "⡿", "⢇", "⢏", "⢗", "⢟", "⢧", "⢯", "⢷", "⢿"]

    def __init__(self, services: AppServices, theme: str = DEFAULT_THEME):
        self.services = services
        self.session = services.session
        self.coordinator = services.coordinator
        # One worker: coordinator calls never overlap, the UI thread stays free.
        self.executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="taskdash-io")
        self.screen = SCREEN_DASHBOARD if self.session.is_authenticated else SCREEN_LOGIN
        self.auth_error = ""
        self.selected_index = 0
        self._inflight = 0
        self._inflight_lock = Lock()
        self._load_queued = False
        self._clear_form = False
        self._clear_dashboard = False
        self._clear_password = False
        self._focus_dirty = True
        self._syncing_fields = False
        self._unsubscribe = self.session.subscribe(self._on_session_event)

        self._build_widgets()
        self.style = build_style(theme)
        self.app = Application(
            layout=Layout(DynamicContainer(self._resolve_root), focused_element=self._default_focus()),
            key_bindings=self._build_key_bindings(),
            style=self.style,
            full_screen=True,
            mouse_support=True,
            refresh_interval=0.1,
            before_render=self._before_render,
        )
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TASKDASH_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    def _t(self, key: str, **kwargs) -> str:
        return translate(key, **kwargs)

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    # ---- widgets / layout -----------------------------------------------

    def _label(self, key: str) -> Window:
        return Window(FormattedTextControl(lambda: [("class:text.dim", f" {self._t(key)}:")]), width=LABEL_WIDTH)

    def _build_widgets(self) -> None:
        self.name_field = TextArea(multiline=False, style="class:field", accept_handler=self._accept_and_advance)
        self.email_field = TextArea(multiline=False, style="class:field", accept_handler=self._accept_and_advance)
        self.password_field = TextArea(
            multiline=False, password=True, style="class:field", accept_handler=self._accept_auth
        )
        self.search_field = TextArea(multiline=False, style="class:field", accept_handler=self._accept_search)
        self.search_field.buffer.on_text_changed += self._on_search_changed
        self.title_field = TextArea(multiline=False, style="class:field", accept_handler=self._accept_create)
        self.title_field.buffer.on_text_changed += self._on_form_changed
        self.description_field = TextArea(multiline=True, style="class:field", height=Dimension(min=2, max=4))
        self.description_field.buffer.on_text_changed += self._on_form_changed

        self.list_control = FormattedTextControl(self._task_list_text, focusable=True, show_cursor=False)
        self.list_window = Window(self.list_control, wrap_lines=False)
        self.loading_window = Window(FormattedTextControl(self._loading_text), height=2)
        self.error_window = Window(FormattedTextControl(self._error_text, focusable=True), height=4)

        border = lambda: Window(height=1, char="─", style="class:border")  # noqa: E731
        status_bar = lambda: Window(FormattedTextControl(self.get_status_text), height=1)  # noqa: E731
        footer = lambda: Window(FormattedTextControl(lambda: build_footer_text(self)), height=1)  # noqa: E731

        def header(key: str) -> Window:
            return Window(FormattedTextControl(lambda: [("class:header", f" {self._t(key)}")]), height=1)

        self.login_container = HSplit(
            [
                status_bar(),
                border(),
                header("LOGIN_HEADER"),
                VSplit([self._label("FIELD_EMAIL"), self.email_field]),
                VSplit([self._label("FIELD_PASSWORD"), self.password_field]),
                Window(),
                footer(),
            ]
        )
        self.register_container = HSplit(
            [
                status_bar(),
                border(),
                header("REGISTER_HEADER"),
                VSplit([self._label("FIELD_NAME"), self.name_field]),
                VSplit([self._label("FIELD_EMAIL"), self.email_field]),
                VSplit([self._label("FIELD_PASSWORD"), self.password_field]),
                Window(),
                footer(),
            ]
        )
        self.dashboard_container = HSplit(
            [
                status_bar(),
                border(),
                VSplit([self._label("SEARCH_LABEL"), self.search_field]),
                border(),
                header("FORM_HEADER"),
                VSplit(
                    [
                        self._label("FORM_TITLE"),
                        self.title_field,
                        Window(
                            FormattedTextControl(
                                lambda: render_counter(self.coordinator.form.title_length, TITLE_MAX_LENGTH)
                            ),
                            width=COUNTER_WIDTH,
                            align=WindowAlign.RIGHT,
                        ),
                    ]
                ),
                VSplit(
                    [
                        self._label("FORM_DESCRIPTION"),
                        self.description_field,
                        Window(
                            FormattedTextControl(
                                lambda: render_counter(self.coordinator.form.description_length, DESCRIPTION_MAX_LENGTH)
                            ),
                            width=COUNTER_WIDTH,
                            align=WindowAlign.RIGHT,
                        ),
                    ]
                ),
                Window(FormattedTextControl(lambda: render_form_errors(self.coordinator.form.errors)), height=1),
                border(),
                header("LIST_HEADER"),
                DynamicContainer(self._resolve_body),
                Window(FormattedTextControl(self._pager_text), height=1),
                Window(FormattedTextControl(self._notification_text), height=1),
                footer(),
            ]
        )

    def _resolve_root(self):
        if self.screen == SCREEN_DASHBOARD:
            return self.dashboard_container
        if self.screen == SCREEN_REGISTER:
            return self.register_container
        return self.login_container

    def _resolve_body(self):
        state = self.coordinator.state
        if state.status == STATUS_ERROR:
            return self.error_window
        if state.status in (STATUS_IDLE, STATUS_LOADING) and state.page is None:
            return self.loading_window
        return self.list_window

    def _default_focus(self):
        if self.screen == SCREEN_DASHBOARD:
            return self.search_field
        if self.screen == SCREEN_REGISTER:
            return self.name_field
        return self.email_field

    # ---- text providers -------------------------------------------------

    def get_status_text(self) -> FormattedText:
        return build_status_text(self)

    def _spinner_frame(self) -> str:
        if self._inflight <= 0:
            return ""
        idx = int(time.time() * 10) % len(self.SPINNER_FRAMES)
        return self.SPINNER_FRAMES[idx]

    def _visible_tasks(self) -> List[Task]:
        return list(self.coordinator.state.tasks)

    def _task_list_text(self) -> FormattedText:
        tasks = self._visible_tasks()
        self._clamp_selection(len(tasks))
        focused = self.app.layout.has_focus(self.list_window) if hasattr(self, "app") else False
        return render_task_list(tasks, self.selected_index, self.get_terminal_width(), self._t, focused=focused)

    def _loading_text(self) -> FormattedText:
        return render_loading(self._t, self._spinner_frame())

    def _error_text(self) -> FormattedText:
        return render_error_panel(self.coordinator.state.error, self._t, on_retry=self.retry)

    def _pager_text(self) -> FormattedText:
        return render_pager(
            self.coordinator.page_label(),
            self.coordinator.has_previous,
            self.coordinator.has_next,
            self._t,
            on_previous=self.previous_page,
            on_next=self.next_page,
        )

    def _notification_text(self) -> FormattedText:
        return build_notification_text(self.coordinator.notification, on_dismiss=self.coordinator.dismiss_notification)

    # ---- background work -------------------------------------------------

    def _submit(self, job: Callable[[], None]) -> Future:
        with self._inflight_lock:
            self._inflight += 1
        future = self.executor.submit(job)
        future.add_done_callback(self._job_done)
        return future

    def _job_done(self, future: Future) -> None:
        with self._inflight_lock:
            self._inflight -= 1
        if not future.cancelled():
            exc = future.exception()
            if exc is not None:
                logger.error("background job failed", exc_info=exc)
        self.app.invalidate()

    def _queue_load(self, force: bool = False) -> None:
        if self._load_queued and not force:
            return
        self._load_queued = True

        def job() -> None:
            try:
                self.coordinator.load(force=force)
            finally:
                self._load_queued = False

        self._submit(job)

    def _before_render(self, _app) -> None:
        self._apply_pending_field_updates()
        if self._focus_dirty or not self._focus_visible():
            self._focus_dirty = False
            self.app.layout.focus(self._default_focus())
        if self.screen == SCREEN_DASHBOARD and self.coordinator.poll():
            self._queue_load()

    def _focus_visible(self) -> bool:
        current = self.app.layout.current_window
        return any(window is current for window in self.app.layout.find_all_windows())

    def _apply_pending_field_updates(self) -> None:
        self._syncing_fields = True
        try:
            if self._clear_form:
                self._clear_form = False
                self.title_field.text = ""
                self.description_field.text = ""
            if self._clear_dashboard:
                self._clear_dashboard = False
                self.search_field.text = ""
                self.title_field.text = ""
                self.description_field.text = ""
            if self._clear_password:
                self._clear_password = False
                self.password_field.text = ""
        finally:
            self._syncing_fields = False

    # ---- intents ---------------------------------------------------------

    def _on_search_changed(self, _buffer) -> None:
        if self._syncing_fields:
            return
        self.coordinator.set_search(self.search_field.text)

    def _on_form_changed(self, _buffer) -> None:
        if self._syncing_fields:
            return
        self.coordinator.edit_form(self.title_field.text, self.description_field.text)

    def _accept_and_advance(self, _buffer) -> bool:
        self.app.layout.focus_next()
        return True

    def _accept_search(self, _buffer) -> bool:
        self.coordinator.search.flush()
        return True

    def _accept_auth(self, _buffer) -> bool:
        self.submit_auth()
        return True

    def _accept_create(self, _buffer) -> bool:
        self.submit_create()
        return True

    def submit_auth(self) -> None:
        email = self.email_field.text.strip()
        password = self.password_field.text
        name = self.name_field.text.strip()
        register = self.screen == SCREEN_REGISTER
        self.auth_error = ""

        def job() -> None:
            try:
                if register:
                    self.session.register(name, email, password)
                else:
                    self.session.login(email, password)
            except AuthError:
                self.auth_error = self._t("AUTH_FAILED")

        self._submit(job)

    def submit_create(self) -> None:
        title = self.title_field.text
        description = self.description_field.text

        def job() -> None:
            if self.coordinator.submit_create(title, description):
                self._clear_form = True

        self._submit(job)

    def _selected_task(self) -> Optional[Task]:
        tasks = self._visible_tasks()
        if not tasks:
            return None
        self._clamp_selection(len(tasks))
        return tasks[self.selected_index]

    def _clamp_selection(self, count: int) -> None:
        self.selected_index = min(max(0, self.selected_index), max(0, count - 1))

    def move_selection(self, delta: int) -> None:
        self.selected_index += delta
        self._clamp_selection(len(self._visible_tasks()))

    def toggle_selected(self) -> None:
        task = self._selected_task()
        if task is not None:
            self._submit(lambda: self.coordinator.toggle_completed(task))

    def delete_selected(self) -> None:
        task = self._selected_task()
        if task is not None:
            self._submit(lambda: self.coordinator.delete_task(task.id))

    def previous_page(self) -> None:
        if self.coordinator.previous_page():
            self.selected_index = 0
            self.app.invalidate()

    def next_page(self) -> None:
        if self.coordinator.next_page():
            self.selected_index = 0
            self.app.invalidate()

    def retry(self) -> None:
        self._queue_load(force=True)

    def logout(self) -> None:
        self.session.logout()

    def switch_auth_screen(self) -> None:
        self.screen = SCREEN_REGISTER if self.screen == SCREEN_LOGIN else SCREEN_LOGIN
        self.auth_error = ""
        self._focus_dirty = True

    def _on_session_event(self, event: SessionEvent) -> None:
        self.selected_index = 0
        if event.navigate_to == NAV_DASHBOARD:
            self.screen = SCREEN_DASHBOARD
            self._clear_password = True
        else:
            self.screen = SCREEN_LOGIN
            self._clear_dashboard = True
        self._focus_dirty = True
        if hasattr(self, "app"):
            self.app.invalidate()

    # ---- key bindings ----------------------------------------------------

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        on_dashboard = Condition(lambda: self.screen == SCREEN_DASHBOARD)
        on_auth = ~on_dashboard
        list_focused = on_dashboard & has_focus(self.list_window)
        error_visible = on_dashboard & Condition(lambda: self.coordinator.state.status == STATUS_ERROR)

        @kb.add("c-q")
        @kb.add("c-c")
        def _(event):
            event.app.exit()

        kb.add("tab")(focus_next)
        kb.add("s-tab")(focus_previous)

        @kb.add("f2", filter=on_auth)
        def _(event):
            self.switch_auth_screen()

        @kb.add("c-s", filter=on_dashboard)
        def _(event):
            """Ctrl+S - submit the create form from any field."""
            self.submit_create()

        @kb.add("up", filter=list_focused)
        @kb.add("k", filter=list_focused)
        def _(event):
            self.move_selection(-1)

        @kb.add("down", filter=list_focused)
        @kb.add("j", filter=list_focused)
        def _(event):
            self.move_selection(1)

        @kb.add("enter", filter=list_focused)
        @kb.add("space", filter=list_focused)
        def _(event):
            self.toggle_selected()

        @kb.add("x", filter=list_focused)
        @kb.add("delete", filter=list_focused)
        def _(event):
            self.delete_selected()

        @kb.add("[", filter=list_focused)
        @kb.add("pageup", filter=on_dashboard)
        def _(event):
            self.previous_page()

        @kb.add("]", filter=list_focused)
        @kb.add("pagedown", filter=on_dashboard)
        def _(event):
            self.next_page()

        @kb.add("f5", filter=on_dashboard)
        @kb.add("enter", filter=error_visible & has_focus(self.error_window))
        def _(event):
            self.retry()

        @kb.add("c-l", filter=on_dashboard)
        def _(event):
            self.logout()

        @kb.add("escape", filter=on_dashboard)
        def _(event):
            self.coordinator.dismiss_notification()

        return kb

    def run(self) -> None:
        try:
            self.app.run()
        finally:
            self._unsubscribe()
            self.executor.shutdown(wait=False, cancel_futures=True)


def cmd_tui(args, services: AppServices) -> int:
    tui = DashboardTUI(services, theme=getattr(args, "theme", DEFAULT_THEME))
    tui.run()
    return 0


__all__ = ["DashboardTUI", "cmd_tui", "SCREEN_LOGIN", "SCREEN_REGISTER", "SCREEN_DASHBOARD"]
