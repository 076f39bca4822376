"""Status bar and notification line builders for DashboardTUI."""

from typing import List, Optional

from prompt_toolkit.formatted_text import FormattedText

from core.desktop.devtools.application.notifications import Notification
from core.desktop.devtools.interface.tui_render import click_handler


def build_status_text(tui) -> FormattedText:
    parts: List[tuple] = [("class:header", f" {tui._t('APP_TITLE')} ")]
    user = tui.session.user
    if user is not None:
        parts.extend(
            [
                ("class:text.dim", "| "),
                ("class:text", tui._t("WELCOME", name=user.name or user.email)),
            ]
        )
    query = (getattr(tui.coordinator, "search_input", "") or "").strip()
    if query:
        preview = (query[:24] + "…") if len(query) > 25 else query
        parts.extend(
            [
                ("class:text.dim", " | "),
                ("class:icon.warn", "⌕ "),
                ("class:header", preview),
            ]
        )
    spinner_frame = tui._spinner_frame()
    if spinner_frame:
        parts.extend([("class:text.dim", " | "), ("class:header", spinner_frame)])
    if user is not None:
        parts.extend(
            [
                ("class:text.dim", " | "),
                ("class:button", f"[ {tui._t('BTN_LOGOUT')} ]", click_handler(tui.logout)),
            ]
        )
    return FormattedText(parts)


def build_notification_text(note: Optional[Notification], on_dismiss=None) -> FormattedText:
    if note is None:
        return FormattedText([])
    style = f"class:notify.{note.kind}"
    parts: List[tuple] = [(style, f" {note.message} ")]
    if on_dismiss is not None:
        parts.append((style, " × ", click_handler(on_dismiss)))
    else:
        parts.append((style, " × "))
    return FormattedText(parts)


__all__ = ["build_status_text", "build_notification_text"]
