"""Rendering helpers for the dashboard TUI to keep the app class slim."""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.mouse_events import MouseButton, MouseEventType

from core import Task
from core.desktop.devtools.interface.tui_display import pad_display

Translate = Callable[..., str]


def click_handler(action: Callable[[], None]):
    def handler(event):
        if event.event_type == MouseEventType.MOUSE_UP and event.button == MouseButton.LEFT:
            action()
            return None
        return NotImplemented

    return handler


def render_counter(length: int, limit: int) -> FormattedText:
    style = "class:field.error" if length > limit else "class:text.dim"
    return FormattedText([(style, f"{length}/{limit}")])


def render_form_errors(errors: Dict[str, str]) -> FormattedText:
    parts: List[Tuple[str, str]] = []
    for field in ("title", "description"):
        message = errors.get(field)
        if message:
            if parts:
                parts.append(("class:text.dim", " · "))
            parts.append(("class:field.error", f"⚠ {message}"))
    return FormattedText(parts)


def render_empty_state(t: Translate) -> FormattedText:
    return FormattedText(
        [
            ("class:header", f"  {t('EMPTY_TITLE')}\n"),
            ("class:text.dim", f"  {t('EMPTY_HINT')}\n"),
        ]
    )


def render_loading(t: Translate, spinner: str = "") -> FormattedText:
    prefix = f"{spinner} " if spinner else ""
    return FormattedText([("class:text.dim", f"  {prefix}{t('LOADING')}\n")])


def render_error_panel(message: str, t: Translate, on_retry: Optional[Callable[[], None]] = None) -> FormattedText:
    parts: List[tuple] = [
        ("class:icon.fail", f"  ✗ {t('ERROR_TITLE')}\n"),
        ("class:text.dim", f"  {message or t('ERROR_FALLBACK')}\n\n"),
    ]
    retry = f"  [ {t('BTN_RETRY')} (F5) ]"
    if on_retry is not None:
        parts.append(("class:button", retry, click_handler(on_retry)))
    else:
        parts.append(("class:button", retry))
    return FormattedText(parts)


def render_task_list(
    tasks: Sequence[Task],
    selected: int,
    width: int,
    t: Translate,
    focused: bool = True,
) -> FormattedText:
    """One row per task; title and description share the available width."""
    if not tasks:
        return render_empty_state(t)
    inner = max(20, width - 6)
    title_w = max(10, inner * 2 // 5)
    desc_w = max(0, inner - title_w - 1)
    parts: List[Tuple[str, str]] = []
    for idx, task in enumerate(tasks):
        is_selected = focused and idx == selected
        mark_style = "class:icon.check" if task.completed else "class:text.dim"
        title_style = "class:task.done" if task.completed else "class:text"
        pointer = "▸" if is_selected else " "
        row_prefix = "class:selected " if is_selected else ""
        parts.append((row_prefix + "class:header", f" {pointer} "))
        parts.append((row_prefix + mark_style, "✓ " if task.completed else "○ "))
        parts.append((row_prefix + title_style, pad_display(task.title, title_w)))
        parts.append((row_prefix + "class:text.dim", " " + pad_display(task.description, desc_w)))
        parts.append(("", "\n"))
    return FormattedText(parts)


def render_pager(
    label: str,
    has_previous: bool,
    has_next: bool,
    t: Translate,
    on_previous: Optional[Callable[[], None]] = None,
    on_next: Optional[Callable[[], None]] = None,
) -> FormattedText:
    def button(text: str, enabled: bool, action: Optional[Callable[[], None]]):
        style = "class:button" if enabled else "class:button.disabled"
        if enabled and action is not None:
            return (style, f"[ {text} ]", click_handler(action))
        return (style, f"[ {text} ]")

    return FormattedText(
        [
            button(t("BTN_PREVIOUS"), has_previous, on_previous),
            ("class:text.dim", "   "),
            ("class:text", label),
            ("class:text.dim", "   "),
            button(t("BTN_NEXT"), has_next, on_next),
        ]
    )


__all__ = [
    "click_handler",
    "render_counter",
    "render_form_errors",
    "render_empty_state",
    "render_loading",
    "render_error_panel",
    "render_task_list",
    "render_pager",
]
