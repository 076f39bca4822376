#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "field": "bg:#2a2d31 #d7dfe6",
        "field.error": "#ff5156",
        "icon.check": "#9ad974 bold",
        "icon.warn": "#f9ac60 bold",
        "icon.fail": "#ff5156 bold",
        "task.done": "#7a7f85 strike",
        "button": "#d7dfe6 bold",
        "button.disabled": "#6d717a",
        "notify.success": "bg:#2f5d2a #ffffff bold",
        "notify.error": "bg:#7a2226 #ffffff bold",
        "notify.info": "bg:#24476b #ffffff bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "selected": "bg:#3d4047 #e8eaec bold",
        "field": "bg:#30333a #e8eaec",
        "field.error": "#ff6b6b",
        "icon.check": "#b8f171 bold",
        "icon.warn": "#f9ac60 bold",
        "icon.fail": "#ff5156 bold",
        "task.done": "#8a9097 strike",
        "button": "#e8eaec bold",
        "button.disabled": "#6f757d",
        "notify.success": "bg:#3c7a34 #ffffff bold",
        "notify.error": "bg:#9a2a30 #ffffff bold",
        "notify.info": "bg:#2d5a88 #ffffff bold",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    return Style.from_dict(get_theme_palette(theme))
