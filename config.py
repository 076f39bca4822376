from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any

DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_PAGE_SIZE = 10

USER_CONFIG_PATH = Path(os.environ.get("TASKDASH_CONFIG", Path.home() / ".taskdash_config.yaml"))


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        return yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (yaml.YAMLError, OSError, UnicodeDecodeError):
        return {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def get_data_dir() -> Path:
    """Session file and logs live here."""
    raw = os.getenv("TASKDASH_HOME")
    if raw and raw.strip():
        return Path(raw).expanduser()
    return Path.home() / ".taskdash"


def get_api_url() -> str:
    env_url = (os.getenv("TASKDASH_API_URL") or "").strip()
    if env_url:
        return env_url.rstrip("/")
    value = str(_load_config().get("api_url") or "").strip()
    return (value or DEFAULT_API_URL).rstrip("/")


def set_api_url(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["api_url"] = value
    else:
        data.pop("api_url", None)
    _save_config(data)


def get_page_size() -> int:
    raw = _load_config().get("page_size")
    try:
        size = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_PAGE_SIZE
    return size if size > 0 else DEFAULT_PAGE_SIZE


def set_page_size(value: int) -> None:
    data = _load_config()
    if value and int(value) > 0:
        data["page_size"] = int(value)
    else:
        data.pop("page_size", None)
    _save_config(data)


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def set_user_lang(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["lang"] = value
    else:
        data.pop("lang", None)
    _save_config(data)
