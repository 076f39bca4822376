"""Unicode-aware width helpers for TUI rows (wide/narrow characters)."""

from wcwidth import wcwidth


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w is None:
            w = 0
        width += max(0, w)
    return width


def trim_display(text: str, width: int) -> str:
    """Trim text so visible width doesn't exceed width."""
    acc = []
    used = 0
    for ch in text:
        w = wcwidth(ch) or 0
        if w < 0:
            w = 0
        if used + w > width:
            break
        acc.append(ch)
        used += w
    return "".join(acc)


def ellipsize(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    return trim_display(text, width - 1) + "…"


def pad_display(text: str, width: int) -> str:
    """Ellipsize and pad with spaces to exact visible width."""
    trimmed = ellipsize(text, width)
    used = display_width(trimmed)
    if used < width:
        trimmed += " " * (width - used)
    return trimmed


__all__ = ["display_width", "trim_display", "ellipsize", "pad_display"]
