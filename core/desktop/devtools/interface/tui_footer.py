"""Footer renderer for DashboardTUI."""

from prompt_toolkit.formatted_text import FormattedText


def build_footer_text(tui) -> FormattedText:
    key = "HINT_DASHBOARD" if tui.screen == "dashboard" else "HINT_AUTH"
    parts = [("class:border", "╰─ "), ("class:text.dim", tui._t(key))]
    auth_error = getattr(tui, "auth_error", "")
    if tui.screen != "dashboard" and auth_error:
        parts.extend([("class:border", " · "), ("class:field.error", auth_error)])
    return FormattedText(parts)
